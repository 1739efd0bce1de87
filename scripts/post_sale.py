#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from typing import Any

import httpx
from httpx import ConnectError


def build_payload(args: argparse.Namespace) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "service_id": args.service,
        "payment_method": args.payment,
        "wax_add_on": args.wax,
    }
    if args.size:
        payload["car_size"] = args.size
    if args.staff:
        payload["staff_id"] = args.staff
    return payload


def main() -> None:
    parser = argparse.ArgumentParser(description="Quote or record a sale against a running API")
    parser.add_argument("--base-url", default="http://127.0.0.1:8001/api/v1")
    parser.add_argument("--tenant", default="local_tenant")
    parser.add_argument("--service", default="full-wash")
    parser.add_argument("--size", default="medium")
    parser.add_argument("--payment", default="cash", choices=["coupon", "cash", "machine", "not-paid"])
    parser.add_argument("--wax", action="store_true")
    parser.add_argument("--staff", default="", help="Staff id; omit to only fetch a quote")
    args = parser.parse_args()

    payload = build_payload(args)
    url = f"{args.base_url}/sales" if args.staff else f"{args.base_url}/sales/quote"
    headers = {"X-Tenant-Id": args.tenant}

    try:
        resp = httpx.post(url, json=payload, headers=headers, timeout=10.0)
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn app.main:app --reload --port 8001")
        return

    print(resp.status_code)
    if resp.text:
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
