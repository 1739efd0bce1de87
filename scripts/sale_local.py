#!/usr/bin/env python3
"""
Interactive local sale harness (no HTTP).

Usage:
  python3 scripts/sale_local.py [tenant_id]

What it does:
- Loads the tenant catalog through the same wiring the API uses
- Drives a SaleForm with commands and prints the live price / commission after each change
- Records the sale through RecordSaleUseCase on /save
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from app.application.exceptions import NoStaffError, NotFoundError, SaleValidationError  # noqa: E402
from app.application.use_cases.pricing import payment_options, size_options  # noqa: E402
from app.application.use_cases.sale_form import SaleForm  # noqa: E402
from app.application.use_cases.staff import StaffUseCase  # noqa: E402
from app.domain.entities.sale import PriceQuote  # noqa: E402
from app.wiring.dependencies import (  # noqa: E402
    get_catalog_admin_use_case,
    get_record_sale_use_case,
    get_record_store,
    get_service_catalog,
)


def _print_header(tenant_id: str) -> None:
    print("\nLocal Sale Harness")
    print("-" * 60)
    print(f"tenant_id: {tenant_id}")
    print("Commands: service <id>, size <key>, pay <method>, wax on|off, staff <id>")
    print("          /services, /staff, /save, /reset, /quit, /help")
    print("-" * 60)


def _print_quote(quote: PriceQuote | None) -> None:
    if quote is None:
        print("  price: -  commission: -")
    else:
        print(f"  price: {quote.amount:.2f}  commission: {quote.commission:.2f}")


def _print_options(form: SaleForm) -> None:
    service = form.catalog.get(form.request.service_id or "")
    if service is None:
        return
    sizes = size_options(service)
    if sizes:
        print(f"  sizes: {', '.join(sizes)}")
    methods = payment_options(service, form.request.car_size)
    print(f"  payment: {', '.join(m.value for m in methods)}")


def main() -> None:
    tenant_id = sys.argv[1] if len(sys.argv) > 1 else "local_tenant"
    store = get_record_store()
    catalog = get_service_catalog(store)
    services = get_catalog_admin_use_case(catalog).list_services(tenant_id, seed_if_empty=True)
    record_sale = get_record_sale_use_case(store, catalog)
    staff = StaffUseCase(store)

    form = SaleForm(services)
    form.subscribe(_print_quote)
    _print_header(tenant_id)

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue

        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_header(tenant_id)
            continue
        if cmd == "/services":
            for service in services:
                print(f"  {service.id}: {service.name}")
            continue
        if cmd == "/staff":
            for member in staff.list_staff(tenant_id):
                print(f"  {member.id}: {member.name}")
            continue
        if cmd == "/reset":
            form.reset()
            continue
        if cmd == "/save":
            try:
                sale = record_sale.execute(tenant_id, form.request, form.staff_id)
            except SaleValidationError as e:
                print(f"Missing: {', '.join(e.fields)}")
                continue
            except (NoStaffError, NotFoundError) as e:
                print(f"ERROR: {e}")
                continue
            print(f"Saved sale {sale.id}: {sale.service} {sale.amount:.2f} / {sale.commission:.2f}")
            form.reset()
            continue

        try:
            if cmd == "service":
                form.update(service_id=arg or None)
                _print_options(form)
            elif cmd == "size":
                form.update(car_size=arg or None)
                _print_options(form)
            elif cmd == "pay":
                form.update(payment_method=arg or None)
            elif cmd == "wax":
                form.update(wax_add_on=arg.lower() in ("on", "yes", "1"))
            elif cmd == "staff":
                form.update(staff_id=arg or None)
            else:
                print("Unknown command, try /help")
                continue
        except ValueError as e:
            print(f"ERROR: {e}")
            continue

        if form.errors():
            print(f"  still needed: {', '.join(form.errors())}")


if __name__ == "__main__":
    main()
