# tests/test_models.py
import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from inventory_api.database import SAMPLE_PRODUCTS
from inventory_api.models import Category, Product, ProductListResponse


def test_product_json_round_trip_keeps_fractional_price():
    p = Product(id=3, name="Wireless Mouse", price=Decimal("25.99"), stock=75, category=Category(id=1, name="Electronics"))
    again = Product.model_validate_json(p.model_dump_json())
    assert again == p
    assert again.price == Decimal("25.99")
    assert again.category.name == "Electronics"


def test_price_is_a_json_number():
    body = json.loads(SAMPLE_PRODUCTS[0].model_dump_json())
    assert body == {
        "id": 1,
        "name": "Laptop",
        "price": 1200.5,
        "stock": 25,
        "category": {"id": 1, "name": "Electronics"},
    }


def test_field_names_match_ignoring_case():
    env = ProductListResponse.model_validate({
        "Success": True,
        "MESSAGE": "ok",
        "Data": [{"Id": 7, "NAME": "Desk", "Price": 10, "stock": 2, "Category": {"ID": 2, "Name": "Furniture"}}],
        "timeStamp": "2024-05-01T12:00:00Z",
    })
    assert env.success is True
    assert env.message == "ok"
    assert env.data[0].name == "Desk"
    assert env.data[0].category.id == 2
    assert env.timestamp.year == 2024


def test_envelope_defaults_when_fields_missing():
    env = ProductListResponse.model_validate({})
    assert env.success is False
    assert env.message == ""
    assert env.data is None
    assert env.timestamp.tzinfo is not None


def test_products_are_immutable():
    with pytest.raises(ValidationError):
        SAMPLE_PRODUCTS[0].stock = 0


@pytest.mark.parametrize("field,value", [("price", Decimal("-1")), ("stock", -1), ("name", "")])
def test_product_rejects_invalid_values(field, value):
    data = {"id": 1, "name": "Lamp", "price": Decimal("1.00"), "stock": 1, "category": {"id": 1, "name": "Home"}}
    data[field] = value
    with pytest.raises(ValidationError):
        Product(**data)


def test_price_at_digit_limit_round_trips_exactly():
    p = Product(id=5, name="Server Rack", price=Decimal("9999999999999.99"), stock=1, category=Category(id=1, name="Electronics"))
    again = Product.model_validate_json(p.model_dump_json())
    assert again == p
    assert again.price == Decimal("9999999999999.99")


@pytest.mark.parametrize("price", [Decimal("1234567890123.4567"), Decimal("0.12345678901234567891"), Decimal("19.999")])
def test_price_beyond_float_precision_is_rejected(price):
    with pytest.raises(ValidationError):
        Product(id=5, name="Lamp", price=price, stock=1, category=Category(id=1, name="Home"))
