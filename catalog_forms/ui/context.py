from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from catalog_forms.adapters.clock import SystemClock
from catalog_forms.adapters.memory_store import InMemoryProductStore
from catalog_forms.adapters.selection import SelectedProductStore
from catalog_forms.components.product_form import ClockPort, ProductStorePort, SelectedProductPort
from catalog_forms.domain.entities import Product
from catalog_forms.rules.models import FormRules


@dataclass
class ServiceContext:
    store: ProductStorePort
    selection: SelectedProductPort
    rules: FormRules
    clock: ClockPort

    @classmethod
    def create(cls, rules: FormRules, products: Iterable[Product] = ()) -> ServiceContext:
        # Local in-memory record store; a remote client implements the same port
        store = InMemoryProductStore(products)
        return cls(
            store=store,
            selection=SelectedProductStore(),
            rules=rules,
            clock=SystemClock(),
        )
