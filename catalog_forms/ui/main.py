import logging
import os
import re
from pathlib import Path

import flet as ft

from catalog_forms.rules.loader import load_rules
from catalog_forms.rules.models import FormRules
from catalog_forms.ui.context import ServiceContext
from catalog_forms.ui.views.product_form import ProductFormView

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

RULES_PATH = os.environ.get("CATALOG_FORMS_RULES_PATH", "rules.yaml")


def read_rules(path: Path) -> FormRules:
    if not path.exists():
        logger.warning("Rules file %s not found, using defaults", path)
        return FormRules()
    rules = load_rules(path)
    logger.info("Rules loaded from %s", path)
    return rules


async def main(page: ft.Page) -> None:
    page.title = "Productos"

    ctx = ServiceContext.create(read_rules(Path(RULES_PATH)))
    listing = ctx.rules.routes.listing
    edit_route = re.compile(rf"^{re.escape(listing)}/(?P<product_id>[^/]+)/edit$")

    def listing_view() -> ft.View:
        return ft.View(
            listing,
            [
                ft.Text("Productos", style="headlineMedium"),
                ft.FilledButton("Agregar", on_click=lambda _: page.go(f"{listing}/new")),
            ],
        )

    def route_change(e: ft.RouteChangeEvent) -> None:
        route = page.route
        page.views.clear()

        if route == f"{listing}/new":
            page.views.append(ft.View(route, [ProductFormView(page, ctx)]))
        elif match := edit_route.match(route):
            product_id = match.group("product_id")
            page.views.append(ft.View(route, [ProductFormView(page, ctx, product_id)]))
        else:
            page.views.append(listing_view())

        page.update()

    page.on_route_change = route_change
    page.go(page.route if page.route not in ("", "/") else listing)


if __name__ == "__main__":
    ft.app(target=main)
