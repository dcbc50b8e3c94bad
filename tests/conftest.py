"""Shared fixtures: a small store with two locations and a fixed clock."""

from datetime import datetime, timezone

import pytest

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def products() -> list[dict]:
    return [
        {"id": "p1", "name": "Trail Shoe", "sku": "TS-001", "category": "Footwear", "price": 80.0, "status": "active"},
        {"id": "p2", "name": "Rain Jacket", "sku": "RJ-002", "category": "Outerwear", "price": 120.0, "status": "active"},
        {"id": "p3", "name": "Wool Sock", "sku": "WS-003", "category": None, "price": 5.5, "status": "active"},
        {"id": "p4", "name": "Old Cap", "sku": "OC-004", "category": "Accessories", "price": 10.0, "status": "discontinued"},
    ]


@pytest.fixture
def locations() -> list[dict]:
    return [
        {"id": "l1", "name": "Main Warehouse", "type": "warehouse"},
        {"id": "l2", "name": "Downtown Store", "type": "store"},
    ]


@pytest.fixture
def inventory() -> list[dict]:
    return [
        {"productId": "p1", "locationId": "l1", "quantity": 10, "reorderPoint": 5},
        {"productId": "p2", "locationId": "l1", "quantity": 3, "reorderPoint": 5},
        {"productId": "p3", "locationId": "l2", "quantity": 0, "reorderPoint": 5},
        {"productId": "p1", "locationId": "l2", "quantity": 2, "reorderPoint": 2},
    ]


@pytest.fixture
def sales() -> list[dict]:
    return [
        {"productId": "p1", "locationId": "l1", "quantity": 1, "unitPrice": 80.0, "totalAmount": 80.0, "saleDate": "2025-06-14T09:00:00Z"},
        {"productId": "p2", "locationId": "l2", "quantity": 2, "unitPrice": 120.0, "totalAmount": 240.0, "saleDate": "2025-06-14T15:30:00Z"},
        {"productId": "p3", "locationId": "l2", "quantity": 4, "unitPrice": 5.5, "totalAmount": 22.0, "saleDate": "2025-06-15T08:00:00Z"},
        {"productId": "p1", "locationId": "l2", "quantity": 1, "unitPrice": 80.0, "totalAmount": 80.0, "saleDate": "2025-06-10T10:00:00Z"},
        # outside a 30-day window
        {"productId": "p2", "locationId": "l1", "quantity": 1, "unitPrice": 120.0, "totalAmount": 120.0, "saleDate": "2025-04-01T10:00:00Z"},
    ]


def sale(product_id: str, location_id: str, amount: float, when: str, quantity: int = 1) -> dict:
    return {
        "product_id": product_id,
        "location_id": location_id,
        "quantity": quantity,
        "unit_price": amount / quantity,
        "total_amount": amount,
        "sale_date": when,
    }
