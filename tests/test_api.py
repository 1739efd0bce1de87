"""
HTTP-level tests running the FastAPI app against an in-memory store.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.store.memory_store import MemoryRecordStore
from app.main import app
from app.wiring.dependencies import get_record_store

HEADERS = {"X-Tenant-Id": "tenant-a"}


@pytest.fixture
def store():
    store = MemoryRecordStore()
    app.dependency_overrides[get_record_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_tenant_header_is_required(client):
    assert client.get("/api/v1/services").status_code == 401


def test_services_are_seeded_on_first_listing(client, store):
    res = client.get("/api/v1/services", headers=HEADERS)
    assert res.status_code == 200
    ids = [s["id"] for s in res.json()]
    assert ids[0] == "full-wash"
    assert "wax-add-on" in ids
    assert store.list("tenant-b", "services") == []


def test_service_options(client):
    client.post("/api/v1/services/seed", headers=HEADERS)

    res = client.get("/api/v1/services/full-wash/options", params={"car_size": "big"}, headers=HEADERS)
    body = res.json()
    assert [s["key"] for s in body["sizes"]][:3] == ["small", "medium", "large"]
    assert body["sizes"][4]["label"] == "Long Gmc"
    assert "coupon" not in body["payment_methods"]
    assert body["wax_add_on"] is True
    assert body["wax_add_on_price"] == 5

    res = client.get("/api/v1/services/interior-only/options", headers=HEADERS)
    assert res.json()["sizes"] == []
    assert res.json()["wax_add_on"] is False

    assert client.get("/api/v1/services/ceramic/options", headers=HEADERS).status_code == 404


def test_quote_is_formatted_with_preferences(client):
    client.post("/api/v1/services/seed", headers=HEADERS)
    client.put("/api/v1/settings/preferences", json={"currency_symbol": "USD"}, headers=HEADERS)

    res = client.post(
        "/api/v1/sales/quote",
        json={"service_id": "full-wash", "car_size": "medium", "payment_method": "cash", "wax_add_on": True},
        headers=HEADERS,
    )
    body = res.json()
    assert body["complete"] is True
    assert body["amount"] == 30
    assert body["commission"] == 12
    assert body["display_amount"] == "30.00 USD"

    res = client.post("/api/v1/sales/quote", json={"service_id": "full-wash"}, headers=HEADERS)
    assert res.json()["complete"] is False


def test_record_sale_flow(client):
    client.post("/api/v1/services/seed", headers=HEADERS)

    res = client.post("/api/v1/sales", json={"service_id": "water-only", "payment_method": "cash"}, headers=HEADERS)
    assert res.status_code == 409

    staff = client.post("/api/v1/staff", json={"name": "Omar"}, headers=HEADERS).json()

    res = client.post("/api/v1/sales", json={"service_id": "full-wash"}, headers=HEADERS)
    assert res.status_code == 422
    assert res.json()["detail"]["fields"] == ["car_size", "staff_id", "payment_method"]

    res = client.post(
        "/api/v1/sales",
        json={"service_id": "full-wash", "car_size": "small", "payment_method": "coupon", "staff_id": staff["id"]},
        headers=HEADERS,
    )
    assert res.status_code == 201
    sale = res.json()
    assert sale["amount"] == 0
    assert sale["commission"] == 4
    assert sale["has_coupon"] is True
    assert sale["staff_name"] == "Omar"

    listed = client.get("/api/v1/sales", headers=HEADERS).json()
    assert [s["id"] for s in listed] == [sale["id"]]


def test_price_edit_changes_next_quote(client):
    client.post("/api/v1/services/seed", headers=HEADERS)
    res = client.patch("/api/v1/services/water-only/prices/default", json={"price": 12}, headers=HEADERS)
    assert res.status_code == 200
    assert res.json()["prices"]["default"]["price"] == 12

    quote = client.post(
        "/api/v1/sales/quote", json={"service_id": "water-only", "payment_method": "machine"}, headers=HEADERS
    ).json()
    assert quote["amount"] == 12

    bad = client.patch("/api/v1/services/water-only/prices/default", json={"price": -1}, headers=HEADERS)
    assert bad.status_code == 422
    missing = client.patch("/api/v1/services/water-only/prices/large", json={"price": 1}, headers=HEADERS)
    assert missing.status_code == 404


def test_order_status_conflict(client):
    order = client.post("/api/v1/orders", json={"supplier": "Chemical Guys", "total": 80}, headers=HEADERS).json()
    assert order["status"] == "Pending"

    res = client.post(f"/api/v1/orders/{order['id']}/status", json={"status": "Received"}, headers=HEADERS)
    assert res.status_code == 409

    res = client.post(f"/api/v1/orders/{order['id']}/status", json={"status": "Shipped"}, headers=HEADERS)
    assert res.json()["status"] == "Shipped"


def test_inventory_status_filter(client):
    client.post("/api/v1/inventory", json={"name": "Soap", "quantity": 3, "purchase_price": 2}, headers=HEADERS)
    client.post("/api/v1/inventory", json={"name": "Towels", "quantity": 40}, headers=HEADERS)

    low = client.get("/api/v1/inventory", params={"status": "low-stock"}, headers=HEADERS).json()
    assert [i["name"] for i in low] == ["Soap"]
    assert low[0]["value"] == 6


def test_reports(client):
    assert client.get("/api/v1/reports/unknown", headers=HEADERS).status_code == 404
    res = client.get(
        "/api/v1/reports/profit-loss",
        params={"start": "2024-02-01T00:00:00Z", "end": "2024-01-01T00:00:00Z"},
        headers=HEADERS,
    )
    assert res.status_code == 400

    res = client.get("/api/v1/reports/profit-loss", headers=HEADERS)
    assert res.json()["summary"]["net_profit"] == 0

    dashboard = client.get("/api/v1/reports/dashboard", headers=HEADERS).json()
    assert dashboard["sales_count"] == 0


def test_preferences_and_clear_data(client, store):
    assert client.get("/api/v1/settings/preferences", headers=HEADERS).json() == {
        "currency_symbol": "SAR",
        "theme": "light",
    }
    assert client.put("/api/v1/settings/preferences", json={"theme": "blue"}, headers=HEADERS).status_code == 400

    client.post("/api/v1/staff", json={"name": "Omar"}, headers=HEADERS)
    client.put("/api/v1/settings/preferences", json={"theme": "dark"}, headers=HEADERS)

    res = client.delete("/api/v1/settings/data", headers=HEADERS)
    assert res.json()["deleted"]["staff"] == 1
    assert store.list("tenant-a", "staff") == []
    assert client.get("/api/v1/settings/preferences", headers=HEADERS).json()["theme"] == "dark"


def test_order_dates_are_validated(client):
    res = client.post(
        "/api/v1/orders", json={"supplier": "A", "total": 10, "date": "2024-05-01T09:00:00+03:00"}, headers=HEADERS
    )
    assert res.status_code == 201
    assert res.json()["date"] == "2024-05-01T06:00:00.000Z"

    res = client.post("/api/v1/orders", json={"supplier": "B", "total": 10, "date": "not a date"}, headers=HEADERS)
    assert res.status_code == 422


def test_coupon_tier_can_be_cleared(client):
    client.post("/api/v1/services/seed", headers=HEADERS)
    res = client.patch("/api/v1/services/full-wash/prices/small", json={"clear_coupon": True}, headers=HEADERS)
    assert res.status_code == 200
    assert res.json()["prices"]["small"]["coupon_commission"] is None

    options = client.get("/api/v1/services/full-wash/options", params={"car_size": "small"}, headers=HEADERS).json()
    assert "coupon" not in options["payment_methods"]
