from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class PageNavigator:
    """NavigatorPort backed by a flet page's router."""

    def __init__(self, page: Any) -> None:
        self.page = page

    def go_to(self, route: str) -> None:
        logger.info("Navigating to %s", route)
        self.page.go(route)


class RecordingNavigator:
    """NavigatorPort that only records routes. Used headless and in tests."""

    def __init__(self) -> None:
        self.routes: list[str] = []

    def go_to(self, route: str) -> None:
        self.routes.append(route)
