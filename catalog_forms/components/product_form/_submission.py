"""
Submission state machine - single-flight create/update of the product.

States: IDLE -> SUBMITTING -> SUCCESS | FAILED.

Key behaviors:
- submit() while SUBMITTING (or after SUCCESS) is a no-op returning None
- An invalid form fails locally, marks every control touched and makes
  no store call
- The payload is built from raw values, frozen controls included
- Exactly one of create/update is called per attempt; no retry
- Store failures become Failure results; success navigates to the listing
- Outcomes arriving after teardown produce no effects
"""

from __future__ import annotations

import logging

from catalog_forms.core.cancellation import CancellationScope
from catalog_forms.core.forms import FormGroup
from catalog_forms.domain.entities import Product
from catalog_forms.rules.models import FormRules

from .models import (
    MSG_FORM_INVALID,
    MSG_SAVE_FAILED,
    Failure,
    Mode,
    SubmissionResult,
    SubmitState,
    Success,
)
from .ports import NavigatorPort, ProductStorePort

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ("id", "name", "description", "logo", "date_release", "date_revision")


def build_payload(form: FormGroup) -> Product:
    """Serialize the raw form values into a Product."""
    raw = form.raw_value()
    return Product(**{name: raw.get(name) or "" for name in PRODUCT_FIELDS})


def error_message(error: Exception, default: str = MSG_SAVE_FAILED) -> str:
    """The error's own message when it carries one, else `default`."""
    return str(error) or default


class SubmissionStateMachine:
    """Drives one form instance's submissions."""

    def __init__(
        self,
        form: FormGroup,
        *,
        store: ProductStorePort,
        navigator: NavigatorPort,
        scope: CancellationScope,
        rules: FormRules,
    ) -> None:
        self.form = form
        self.store = store
        self.navigator = navigator
        self.scope = scope
        self.rules = rules
        self.state = SubmitState.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.state == SubmitState.SUBMITTING

    def can_submit(self) -> bool:
        return self.state in (SubmitState.IDLE, SubmitState.FAILED)

    async def submit(self, mode: Mode, current_id: str | None = None) -> SubmissionResult | None:
        """
        Validate, serialize and send the form.

        Args:
            mode: CREATE calls `create`, EDIT calls `update`.
            current_id: Id of the product being edited.

        Returns:
            The attempt's result, or None when the call was a no-op.
        """
        if not self.can_submit() or self.scope.completed:
            logger.debug("Ignoring submit in state %s", self.state.value)
            return None

        self.state = SubmitState.SUBMITTING

        await self.form.settle()
        if self.scope.completed:
            return None

        if not self.form.valid:
            self.form.mark_all_as_touched()
            self.state = SubmitState.FAILED
            return Failure(MSG_FORM_INVALID)

        product = build_payload(self.form)

        try:
            if mode == Mode.EDIT and current_id:
                await self.store.update(current_id, product)
            else:
                await self.store.create(product)
        except Exception as e:
            if self.scope.completed:
                return None
            logger.warning("Saving product %s failed: %s", product.id, e)
            self.state = SubmitState.FAILED
            return Failure(error_message(e))

        if self.scope.completed:
            return None

        self.state = SubmitState.SUCCESS
        logger.info("Product %s saved (%s)", product.id, mode.value)
        self.navigator.go_to(self.rules.routes.listing)
        return Success()
