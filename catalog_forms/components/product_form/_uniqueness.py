"""
Async uniqueness validator for the product identifier.

Attached only in create mode. Every value change that passes the sync
validators issues one `verify_id` round trip.

Key behaviors:
- Existing id -> `{"idExists": True}`; unknown id -> valid
- Store errors and timeouts resolve to valid (logged), never hang
- Stale responses are discarded by the control's check sequence
- Checks are cancelled when the cancellation scope completes
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from catalog_forms.core.cancellation import CancellationScope
from catalog_forms.core.forms import AsyncValidator, FormControl, ValidationErrors
from catalog_forms.core.validators import ID_EXISTS

from .ports import ProductStorePort

logger = logging.getLogger(__name__)


def product_id_validator(store: ProductStorePort, *, timeout_s: float) -> AsyncValidator:
    """Build an async validator that rejects ids already in the store."""

    async def validate(value: Any) -> ValidationErrors | None:
        try:
            exists = await asyncio.wait_for(store.verify_id(value), timeout=timeout_s)
        except TimeoutError:
            logger.warning("Id check for %r timed out after %.1fs", value, timeout_s)
            return None
        except Exception as e:
            logger.warning("Id check for %r failed: %s", value, e)
            return None

        if exists:
            return {ID_EXISTS: True}
        return None

    return validate


def attach_uniqueness_validator(
    control: FormControl,
    store: ProductStorePort,
    scope: CancellationScope,
    *,
    timeout_s: float,
) -> None:
    control.set_async_validator(product_id_validator(store, timeout_s=timeout_s), scope=scope)
    scope.add(lambda: control.set_async_validator(None))
    control.update_validity()
