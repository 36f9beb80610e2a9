from __future__ import annotations

from catalog_forms.domain.entities import Product


class SelectedProductStore:
    """
    Holds the product the user last navigated to.

    Written by whatever navigates to the edit form, read once by the
    form at initialization and cleared when the form is destroyed.
    """

    def __init__(self) -> None:
        self._selected: Product | None = None

    def get(self) -> Product | None:
        return self._selected

    def set(self, product: Product | None) -> None:
        self._selected = product

    def clear(self) -> None:
        self._selected = None
