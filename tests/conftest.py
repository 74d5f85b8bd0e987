"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest

from retailops.domain.product import Product


@pytest.fixture
def product_rows() -> list[dict[str, Any]]:
    """Product rows as they arrive from the catalog table."""
    return [
        {"id": "1", "name": "Strawberry Kiwi", "category": "fruities", "price": 12.5},
        {"id": "2", "name": "Strawberry Banana", "category": "fruities", "price": 12.5},
        {"id": "3", "name": "Kiwi Mango", "category": "gourmands", "price": 14.0},
        {"id": "4", "name": "Blue Razz", "category": "fruities", "price": 11.0},
        {"id": "5", "name": "Vanilla Custard", "category": "gourmands", "price": 14.0},
        {"id": "6", "name": "Pod Kit Pro", "category": "devices", "price": 39.9},
    ]


@pytest.fixture
def product_models(product_rows: list[dict[str, Any]]) -> list[Product]:
    """Same catalog as validated Product models."""
    return [Product(**row) for row in product_rows]
