"""Shared fixtures: fake food DB clients and sample records."""

from typing import List, Optional
import pytest

from food_label.services.food_db import ProductRecord
from food_label.services.verification import VerificationService


class FakeFoodDBClient:
    """Stands in for FoodDBClient; returns a canned record."""
    
    def __init__(self, record: Optional[ProductRecord] = None, error: Optional[Exception] = None):
        self.record = record
        self.error = error
        self.queries: List[str] = []
        self.is_configured = True
    
    def find_product(self, product_name: str) -> Optional[ProductRecord]:
        self.queries.append(product_name)
        if self.error is not None:
            raise self.error
        return self.record


def make_record(
    raw_ingredients: Optional[str] = "밀가루, 설탕, 소금",
    product_name: Optional[str] = "테스트과자",
    manufacturer: Optional[str] = "테스트식품",
    report_number: Optional[str] = "20230001234",
) -> ProductRecord:
    """Helper to create a ProductRecord for testing."""
    return ProductRecord(
        product_name=product_name,
        manufacturer_name=manufacturer,
        report_number=report_number,
        raw_ingredient_text=raw_ingredients,
    )


@pytest.fixture
def fake_client():
    """Client that finds the default test product."""
    return FakeFoodDBClient(record=make_record())


@pytest.fixture
def service(fake_client):
    """Verification service backed by the fake client."""
    return VerificationService(client=fake_client)
