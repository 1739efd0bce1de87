from __future__ import annotations

from typing import Any

# Default catalog written into a tenant's `services` collection on first use.
# Shapes match the stored documents (camelCase keys).
DEFAULT_SERVICES: dict[str, dict[str, Any]] = {
    "full-wash": {
        "name": "Full Wash",
        "needsSize": True,
        "hasCoupon": True,
        "waxEligible": True,
        "order": 1,
        "prices": {
            "small": {"price": 20, "commission": 8, "couponCommission": 4},
            "medium": {"price": 25, "commission": 10, "couponCommission": 5},
            "large": {"price": 30, "commission": 12, "couponCommission": 6},
            "big": {"price": 35, "commission": 14},
            "long-gmc": {"price": 40, "commission": 16},
            "microbus": {"price": 45, "commission": 18},
            "long-coaster": {"price": 50, "commission": 20},
        },
    },
    "outside-only": {
        "name": "Outside Only",
        "needsSize": True,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 2,
        "prices": {
            "small": {"price": 15, "commission": 6},
            "medium": {"price": 20, "commission": 8},
            "large": {"price": 25, "commission": 10},
            "big": {"price": 30, "commission": 12},
            "long-gmc": {"price": 35, "commission": 14},
            "microbus": {"price": 40, "commission": 16},
            "long-coaster": {"price": 45, "commission": 18},
        },
    },
    "interior-only": {
        "name": "Interior Only",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 3,
        "prices": {"default": {"price": 15, "commission": 7}},
    },
    "water-only": {
        "name": "Water Only",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 4,
        "prices": {"default": {"price": 10, "commission": 4}},
    },
    "engine-wash-only": {
        "name": "Engine Wash Only",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": True,
        "order": 5,
        "prices": {"default": {"price": 25, "commission": 10}},
    },
    "mirrors-only": {
        "name": "Mirrors Only",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 6,
        "prices": {"default": {"price": 5, "commission": 2}},
    },
    "carpets-covering": {
        "name": "Carpets Covering",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 7,
        "prices": {"default": {"price": 5, "commission": 2}},
    },
    "carpet-cleaning": {
        "name": "Carpet Cleaning",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 8,
        "prices": {"default": {"price": 20, "commission": 8}},
    },
    "air-conditioner-wash": {
        "name": "Air Conditioner Wash",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": True,
        "order": 9,
        "prices": {"default": {"price": 30, "commission": 12}},
    },
    "wax-add-on": {
        "name": "Wax Add-on",
        "needsSize": False,
        "hasCoupon": False,
        "waxEligible": False,
        "order": 10,
        "prices": {"default": {"price": 5, "commission": 2}},
    },
}
