"""Shared fakes and builders for the test suite."""

import asyncio
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from catalog_forms.adapters.memory_store import ProductStoreError
from catalog_forms.domain.entities import Product

PROJECT_ROOT = Path(__file__).parent.parent


def make_product(**overrides: object) -> Product:
    data: dict[str, object] = {
        "id": "test-123",
        "name": "Tarjeta Crédito",
        "description": "Tarjeta de consumo bajo la modalidad de crédito",
        "logo": "https://example.com/logo.png",
        "date_release": "2025-01-15",
        "date_revision": "2026-01-15",
    }
    data.update(overrides)
    return Product(**data)  # type: ignore[arg-type]


VALID_INPUT = {
    "id": "abc-1",
    "name": "Producto Uno",
    "description": "Descripción del producto uno",
    "logo": "https://example.com/logo.png",
    "date_release": "2030-06-20",
}


class FakeProductStore:
    """
    Scriptable ProductStorePort for tests.

    - `existing_ids` drive verify_id
    - `*_error` make the matching call raise
    - `save_gate` holds create/update until set
    - `verify_delays` delay verify_id per id (seconds)
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self.products: dict[str, Product] = {p.id: p for p in products}
        self.existing_ids: set[str] = set(self.products)
        self.calls: Counter[str] = Counter()
        self.created: list[Product] = []
        self.updated: list[tuple[str, Product]] = []

        self.get_error: Exception | None = None
        self.save_error: Exception | None = None
        self.verify_error: Exception | None = None
        self.save_gate: asyncio.Event | None = None
        self.verify_delays: dict[str, float] = {}

    async def get_by_id(self, product_id: str) -> Product:
        self.calls["get_by_id"] += 1
        await asyncio.sleep(0)
        if self.get_error is not None:
            raise self.get_error
        if product_id not in self.products:
            raise ProductStoreError("Producto no encontrado.")
        return self.products[product_id]

    async def verify_id(self, product_id: str) -> bool:
        self.calls["verify_id"] += 1
        await asyncio.sleep(self.verify_delays.get(product_id, 0))
        if self.verify_error is not None:
            raise self.verify_error
        return product_id in self.existing_ids

    async def _save(self) -> None:
        if self.save_gate is not None:
            await self.save_gate.wait()
        else:
            await asyncio.sleep(0)
        if self.save_error is not None:
            raise self.save_error

    async def create(self, product: Product) -> Product:
        self.calls["create"] += 1
        await self._save()
        self.created.append(product)
        return product

    async def update(self, product_id: str, product: Product) -> Product:
        self.calls["update"] += 1
        await self._save()
        self.updated.append((product_id, product))
        return product

