"""Shared fixtures for voice search tests."""

import pytest


@pytest.fixture
def sample_products():
    """WooCommerce-shaped products; numeric fields arrive as strings like the real API."""
    return [
        {
            "id": 101,
            "name": "سيروم فيتامين سي",
            "description": "Brightening serum for oily skin",
            "price": "12.50",
            "average_rating": "4.50",
            "total_sales": 30,
            "tags": [{"name": "brightening"}],
        },
        {
            "id": 102,
            "name": "سيروم النياسيناميد",
            "description": "Niacinamide serum for acne",
            "price": "30",
            "average_rating": "4.00",
            "total_sales": 120,
            "tags": [{"name": "acne"}],
        },
        {
            "id": 103,
            "name": "غسول لطيف",
            "description": "Gentle cleanser for dry skin",
            "price": "8",
            "average_rating": "3.80",
            "total_sales": 5,
            "tags": [],
        },
    ]
