from decimal import Decimal
from typing import Tuple

from .models import Category, Product

# Fixed in-memory catalog. Built once at import and never mutated.

ELECTRONICS = Category(id=1, name="Electronics")
FURNITURE = Category(id=2, name="Furniture")

SAMPLE_PRODUCTS: Tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=Decimal("1200.50"), stock=25, category=ELECTRONICS),
    Product(id=2, name="Headphones", price=Decimal("50.00"), stock=100, category=ELECTRONICS),
    Product(id=3, name="Wireless Mouse", price=Decimal("25.99"), stock=75, category=ELECTRONICS),
    Product(id=4, name="Office Chair", price=Decimal("199.99"), stock=15, category=FURNITURE),
)
