import abc
import asyncio
import logging
from typing import Iterable, Sequence, Tuple

from .database import SAMPLE_PRODUCTS
from .models import Product

logger = logging.getLogger(__name__)


class CatalogUnavailableError(Exception):
    """The backing store for the catalog cannot be reached."""


class ProductRepository(abc.ABC):
    """Read-only source of product records."""

    @abc.abstractmethod
    async def list_all(self) -> Sequence[Product]:
        ...


class InMemoryProductRepository(ProductRepository):
    def __init__(self, products: Iterable[Product] = SAMPLE_PRODUCTS, latency: float = 0.01):
        self._products: Tuple[Product, ...] = tuple(products)
        self._latency = latency

    async def list_all(self) -> Sequence[Product]:
        # stand-in for a database round trip
        if self._latency:
            await asyncio.sleep(self._latency)
        return tuple(self._products)


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def get_products(self) -> Sequence[Product]:
        products = await self.repository.list_all()
        logger.debug("loaded %d products from %s", len(products), type(self.repository).__name__)
        return products
