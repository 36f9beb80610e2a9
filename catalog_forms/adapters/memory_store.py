"""
In-memory product store.

Implements ProductStorePort for local development and tests. Mirrors
the remote API's observable behavior: duplicate ids are rejected on
create, unknown ids are rejected on get/update.

Key behaviors:
- Stores normalized copies (ISO date strings)
- Optional artificial latency to exercise async paths
- Counts calls per operation for assertions
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from collections.abc import Iterable

from catalog_forms.domain.entities import Product

logger = logging.getLogger(__name__)


class ProductStoreError(Exception):
    """Record store failure. `str(error)` is the user-facing message."""


class InMemoryProductStore:
    """Dict-backed ProductStorePort."""

    def __init__(
        self,
        products: Iterable[Product] = (),
        *,
        latency_s: float = 0.0,
    ) -> None:
        self._products: dict[str, Product] = {}
        self.latency_s = latency_s
        self.calls: Counter[str] = Counter()
        for product in products:
            self._products[product.id] = Product(**product.payload())

    async def _round_trip(self, operation: str) -> None:
        self.calls[operation] += 1
        if self.latency_s:
            await asyncio.sleep(self.latency_s)

    async def get_by_id(self, product_id: str) -> Product:
        await self._round_trip("get_by_id")
        product = self._products.get(product_id)
        if product is None:
            raise ProductStoreError("Producto no encontrado.")
        return product

    async def verify_id(self, product_id: str) -> bool:
        await self._round_trip("verify_id")
        return product_id in self._products

    async def create(self, product: Product) -> Product:
        await self._round_trip("create")
        if product.id in self._products:
            raise ProductStoreError("Ya existe un producto con este ID.")
        stored = Product(**product.payload())
        self._products[stored.id] = stored
        logger.info("Created product %s", stored.id)
        return stored

    async def update(self, product_id: str, product: Product) -> Product:
        await self._round_trip("update")
        if product_id not in self._products:
            raise ProductStoreError("Producto no encontrado.")
        stored = Product(**{**product.payload(), "id": product_id})
        self._products[product_id] = stored
        logger.info("Updated product %s", product_id)
        return stored

    def list_all(self) -> list[Product]:
        return list(self._products.values())
