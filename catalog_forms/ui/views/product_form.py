from __future__ import annotations

import logging
from typing import Any

import flet as ft

from catalog_forms.adapters.navigation import PageNavigator
from catalog_forms.components.product_form import Mode, create_product_form
from catalog_forms.ui.context import ServiceContext

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "id": "ID",
    "name": "Nombre",
    "description": "Descripción",
    "logo": "Logo",
    "date_release": "Fecha Liberación",
    "date_revision": "Fecha Revisión",
}


class ProductFormView(ft.Column):  # type: ignore
    def __init__(
        self,
        page: ft.Page,
        ctx: ServiceContext,
        product_id: str | None = None,
        navigator: Any = None,
    ) -> None:
        super().__init__()
        self.host_page = page
        self.ctx = ctx
        self.product_id = product_id

        self.product_form = create_product_form(
            store=ctx.store,
            selection=ctx.selection,
            navigator=navigator or PageNavigator(page),
            rules=ctx.rules,
            clock=ctx.clock,
        )

        self.fields: dict[str, ft.TextField] = {}
        for name, label in FIELD_LABELS.items():
            self.fields[name] = ft.TextField(
                label=label,
                width=400,
                data=name,
                hint_text="YYYY-MM-DD" if name.startswith("date_") else None,
                on_change=self.field_change,
                on_blur=self.field_blur,
            )
        self.fields["date_revision"].read_only = True

        self.error_text = ft.Text(color="red", visible=False)
        self.submit_button = ft.FilledButton("Enviar", on_click=self.submit_click)

        self.controls = [
            ft.Text("Formulario de Registro", style="headlineMedium"),
            *self.fields.values(),
            self.error_text,
            ft.Row(
                [
                    ft.OutlinedButton("Reiniciar", on_click=self.reset_click),
                    ft.TextButton("Cancelar", on_click=self.cancel_click),
                    self.submit_button,
                ]
            ),
        ]

    # --- Lifecycle ---

    def did_mount(self) -> None:
        self.host_page.run_task(self.initialize)

    def will_unmount(self) -> None:
        self.product_form.destroy()

    async def initialize(self) -> None:
        mode = await self.product_form.initialize(self.product_id)
        logger.debug("Product form view mounted in %s mode", mode.value)
        self.refresh()

    # --- Rendering ---

    def sync_from_form(self) -> None:
        """Copy form state into the widgets."""
        form = self.product_form
        for name, field in self.fields.items():
            control = form.form[name]
            field.value = control.value or ""
            field.disabled = name == "id" and form.mode == Mode.EDIT
            field.error_text = form.get_error_message(name) if form.has_error(name) else None

        self.error_text.value = form.error_message
        self.error_text.visible = bool(form.error_message)
        self.submit_button.disabled = form.is_submitting

    def refresh(self) -> None:
        if self.product_form.scope.completed:
            return
        self.sync_from_form()
        self.update()

    # --- Events ---

    async def field_change(self, e: ft.ControlEvent) -> None:
        control = self.product_form.form[e.control.data]
        control.user_input(e.control.value)
        self.refresh()

        if control.pending:
            await control.settle()
            self.refresh()

    async def field_blur(self, e: ft.ControlEvent) -> None:
        self.product_form.form[e.control.data].mark_as_touched()
        self.refresh()

    async def submit_click(self, e: ft.ControlEvent) -> None:
        pending = self.product_form.submit()
        self.submit_button.disabled = True
        self.update()
        await pending
        self.refresh()

    async def reset_click(self, e: ft.ControlEvent) -> None:
        await self.product_form.reset()
        self.refresh()

    def cancel_click(self, e: ft.ControlEvent) -> None:
        self.product_form.cancel()
