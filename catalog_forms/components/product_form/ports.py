"""
Product form port definitions.

The form consumes these collaborators; it never constructs them.
"""

from __future__ import annotations

from typing import Protocol

from catalog_forms.domain.entities import Product
from catalog_forms.ports.clock import ClockPort


class ProductStorePort(Protocol):
    """Remote record store. Failures are raised as exceptions."""

    async def get_by_id(self, product_id: str) -> Product:
        """Fetch a product by id."""
        ...

    async def verify_id(self, product_id: str) -> bool:
        """Return True if a product with this id already exists."""
        ...

    async def create(self, product: Product) -> Product:
        """Create a new product."""
        ...

    async def update(self, product_id: str, product: Product) -> Product:
        """Replace an existing product."""
        ...


class SelectedProductPort(Protocol):
    """The product the user last navigated to, if any."""

    def get(self) -> Product | None:
        ...

    def set(self, product: Product | None) -> None:
        ...

    def clear(self) -> None:
        ...


class NavigatorPort(Protocol):
    """Fire-and-forget route changes."""

    def go_to(self, route: str) -> None:
        ...


__all__ = ["ClockPort", "NavigatorPort", "ProductStorePort", "SelectedProductPort"]
