"""
Lifecycle controller - mode resolution, edit-mode loading and wiring.

Key behaviors:
- An external id selects EDIT mode: the id control is frozen, no
  uniqueness check is attached, and the product is loaded
- No external id selects CREATE mode with the uniqueness check attached
- Loading consults the selected-product cache before the record store;
  a cache hit populates the form without awaiting
- A failed fetch returns a message at once and leaves the form after a
  grace delay; exactly one fetch is made
- The derived date calculator runs in both modes
"""

from __future__ import annotations

import asyncio
import logging

from catalog_forms.core.calendar import format_date_for_input
from catalog_forms.core.cancellation import CancellationScope
from catalog_forms.core.forms import FormGroup
from catalog_forms.domain.entities import Product
from catalog_forms.rules.models import FormRules

from ._derived import DerivedFieldCalculator
from ._uniqueness import attach_uniqueness_validator
from .models import MSG_LOAD_FAILED, Mode
from .ports import NavigatorPort, ProductStorePort, SelectedProductPort

logger = logging.getLogger(__name__)


class LifecycleController:
    """Prepares a product form for create or edit."""

    def __init__(
        self,
        form: FormGroup,
        *,
        store: ProductStorePort,
        selection: SelectedProductPort,
        navigator: NavigatorPort,
        scope: CancellationScope,
        rules: FormRules,
    ) -> None:
        self.form = form
        self.store = store
        self.selection = selection
        self.navigator = navigator
        self.scope = scope
        self.rules = rules

        self.mode: Mode | None = None
        self.current_id: str | None = None

    def initialize(self, external_id: str | None) -> Mode:
        """Resolve the mode and wire mode-dependent behavior."""
        if external_id:
            self.mode = Mode.EDIT
            self.current_id = external_id
            self.form["id"].freeze()
        else:
            self.mode = Mode.CREATE
            attach_uniqueness_validator(
                self.form["id"],
                self.store,
                self.scope,
                timeout_s=self.rules.timing.id_check_timeout_ms / 1000,
            )

        DerivedFieldCalculator(self.form, self.scope).start()

        logger.info("Product form initialized in %s mode (id=%s)", self.mode.value, external_id)
        return self.mode

    async def load_for_edit(self) -> str:
        """
        Populate the form with the product being edited.

        Returns:
            "" on success, otherwise the load error message.
        """
        if self.current_id is None:
            return ""

        selected = self.selection.get()
        if selected is not None:
            self.populate(selected)
            return ""

        try:
            product = await self.store.get_by_id(self.current_id)
        except Exception as e:
            if self.scope.completed:
                return ""
            logger.warning("Failed to load product %s: %s", self.current_id, e)
            self._schedule_redirect()
            return MSG_LOAD_FAILED

        if self.scope.completed:
            return ""

        self.populate(product)
        return ""

    def populate(self, product: Product) -> None:
        self.form.patch_value(
            {
                "id": product.id,
                "name": product.name,
                "description": product.description,
                "logo": product.logo,
                "date_release": format_date_for_input(product.date_release),
                "date_revision": format_date_for_input(product.date_revision),
            }
        )
        self.form["id"].freeze()

    def _schedule_redirect(self) -> None:
        delay_s = self.rules.timing.load_error_redirect_ms / 1000
        route = self.rules.routes.listing

        loop = asyncio.get_running_loop()
        handle = loop.call_later(delay_s, self._redirect, route)
        self.scope.add(handle.cancel)

    def _redirect(self, route: str) -> None:
        if self.scope.completed:
            return
        logger.info("Leaving product form after load error -> %s", route)
        self.navigator.go_to(route)
