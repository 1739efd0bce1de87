"""
Tests for catalog loading, validation and administrative edits.
"""

from __future__ import annotations

import pytest

from app.application.exceptions import CatalogValidationError, NotFoundError
from app.application.use_cases.catalog_admin import CatalogAdminUseCase
from app.application.use_cases.pricing import coupon_available
from app.infrastructure.catalog.service_catalog_data import DEFAULT_SERVICES
from app.infrastructure.catalog.service_catalog_store import (
    ServiceCatalogStore,
    legacy_wax_eligible,
    service_from_document,
    service_to_document,
)
from app.infrastructure.store.memory_store import MemoryRecordStore
from app.wiring.dependencies import default_services

TENANT = "tenant-a"


def build_admin() -> tuple[CatalogAdminUseCase, ServiceCatalogStore, MemoryRecordStore]:
    store = MemoryRecordStore()
    catalog = ServiceCatalogStore(store)
    return CatalogAdminUseCase(catalog, list(default_services())), catalog, store


def test_seed_writes_only_missing_services():
    admin, catalog, store = build_admin()
    store.set(TENANT, "services", "water-only", {"id": "water-only", **DEFAULT_SERVICES["water-only"], "name": "Rinse"})

    seeded = admin.seed_defaults(TENANT)

    assert "water-only" not in seeded
    assert len(seeded) == len(DEFAULT_SERVICES) - 1
    assert catalog.get_service(TENANT, "water-only").name == "Rinse"
    assert admin.seed_defaults(TENANT) == []


def test_list_is_ordered_and_seeds_when_requested():
    admin, _, _ = build_admin()
    assert admin.list_services(TENANT) == []
    services = admin.list_services(TENANT, seed_if_empty=True)
    assert services[0].id == "full-wash"
    assert services[-1].id == "wax-add-on"


def test_document_round_trip_keeps_coupon_tier():
    service = service_from_document({"id": "full-wash", **DEFAULT_SERVICES["full-wash"]})
    assert service.needs_size is True
    assert service.prices["medium"].coupon_commission == 5
    assert service.prices["big"].coupon_commission is None
    assert "couponCommission" not in service_to_document(service)["prices"]["big"]


def test_invalid_documents_are_skipped_on_load():
    store = MemoryRecordStore()
    store.set(TENANT, "services", "broken", {"name": "Broken", "prices": {"default": {"price": "ten", "commission": 1}}})
    store.set(TENANT, "services", "negative", {"name": "Negative", "prices": {"default": {"price": -1, "commission": 1}}})
    store.set(TENANT, "services", "ok", {"name": "Ok", "waxEligible": False, "prices": {"default": {"price": 1, "commission": 1}}})
    catalog = ServiceCatalogStore(store)

    assert [s.id for s in catalog.list_services(TENANT)] == ["ok"]
    assert catalog.get_service(TENANT, "broken") is None


def test_validation_errors():
    with pytest.raises(CatalogValidationError):
        service_from_document({"id": "x", "name": "X", "prices": {}})
    with pytest.raises(CatalogValidationError):
        service_from_document({"id": "x", "name": "", "prices": {"default": {"price": 1, "commission": 1}}})
    with pytest.raises(CatalogValidationError):
        service_from_document({"id": "x", "name": "X", "needsSize": "yes", "prices": {"default": {"price": 1, "commission": 1}}})


def test_missing_wax_flag_uses_legacy_rule():
    doc = {"name": "Engine", "prices": {"default": {"price": 1, "commission": 1}}}
    assert service_from_document({"id": "engine-wash-only", **doc}).wax_eligible is True
    assert service_from_document({"id": "outside-only", **doc}).wax_eligible is False
    assert legacy_wax_eligible("wax-add-on") is False


def test_default_seed_matches_legacy_rule():
    """Explicit flags in the default catalog reproduce the original eligibility."""
    for service_id, doc in DEFAULT_SERVICES.items():
        assert doc["waxEligible"] == legacy_wax_eligible(service_id), service_id


def test_null_price_entry_is_kept_as_gap():
    service = service_from_document(
        {"id": "x", "name": "X", "needsSize": True, "prices": {"small": None, "large": {"price": 3, "commission": 1}}}
    )
    assert service.prices["small"] is None
    assert service.entry_for("small") is None


def test_update_price_entry_merges_fields():
    admin, catalog, _ = build_admin()
    admin.seed_defaults(TENANT)

    admin.update_price_entry(TENANT, "full-wash", "medium", price=27)
    entry = catalog.get_service(TENANT, "full-wash").prices["medium"]
    assert entry.price == 27
    assert entry.commission == 10
    assert entry.coupon_commission == 5


def test_update_price_entry_errors():
    admin, _, _ = build_admin()
    admin.seed_defaults(TENANT)
    with pytest.raises(NotFoundError):
        admin.update_price_entry(TENANT, "ceramic", "default", price=1)
    with pytest.raises(NotFoundError):
        admin.update_price_entry(TENANT, "water-only", "large", price=1)
    with pytest.raises(CatalogValidationError):
        admin.update_price_entry(TENANT, "water-only", "default", commission=-2)


def test_flag_toggles_persist():
    admin, catalog, _ = build_admin()
    admin.seed_defaults(TENANT)
    admin.set_has_coupon(TENANT, "outside-only", True)
    admin.set_wax_eligible(TENANT, "outside-only", True)
    service = catalog.get_service(TENANT, "outside-only")
    assert service.has_coupon is True
    assert service.wax_eligible is True


def test_validation_error_names_the_offending_field():
    with pytest.raises(CatalogValidationError) as exc:
        service_from_document({"id": "x", "name": "X", "prices": {"default": {"price": -3, "commission": 1}}})
    assert "prices.default.price" in str(exc.value)

    with pytest.raises(CatalogValidationError):
        service_from_document(
            {"id": "x", "name": "X", "prices": {"default": {"price": 3, "commission": 1, "couponCommission": -1}}}
        )
    with pytest.raises(CatalogValidationError):
        service_from_document({"id": "x", "name": "X", "prices": {"default": "3"}})


def test_unknown_document_keys_are_ignored():
    service = service_from_document(
        {"id": "x", "name": " X ", "updatedBy": "admin", "prices": {"default": {"price": 3, "commission": 1}}}
    )
    assert service.name == "X"
    assert service.prices["default"].price == 3.0


def test_clear_coupon_removes_the_tier():
    admin, catalog, _ = build_admin()
    admin.seed_defaults(TENANT)

    admin.update_price_entry(TENANT, "full-wash", "medium", clear_coupon=True)
    service = catalog.get_service(TENANT, "full-wash")
    assert service.prices["medium"].coupon_commission is None
    assert service.prices["medium"].price == 25
    assert coupon_available(service, "medium") is False
    assert coupon_available(service, "small") is True

    with pytest.raises(CatalogValidationError):
        admin.update_price_entry(TENANT, "full-wash", "small", coupon_commission=3, clear_coupon=True)
