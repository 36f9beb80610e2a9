"""
Product form component - create/edit form lifecycle.

Owns the form state, the cancellation scope, the lifecycle controller
and the submission state machine for one mounted form, and exposes the
user-facing surface: initialize, submit, reset, cancel and destroy.

Invariants:
- date_revision is always date_release + 1 year (roll-forward)
- The id is checked for uniqueness only in create mode
- The id is frozen in edit mode but still submitted
- At most one submission is in flight per form
- Nothing produces effects after destroy()
- One error message slot; replaced per attempt, cleared on reset
"""

from __future__ import annotations

import logging

from catalog_forms.core import messages
from catalog_forms.core.cancellation import CancellationScope
from catalog_forms.core.forms import FormControl, FormGroup, Validator
from catalog_forms.core.validators import (
    iso_date,
    max_length,
    min_date_today,
    min_length,
    pattern,
    required,
)
from catalog_forms.rules.models import DateFieldRules, FieldRules, FormRules

from ._lifecycle import LifecycleController
from ._submission import SubmissionStateMachine
from .models import MSG_SAVE_FAILED, Mode, SubmissionResult
from .ports import ClockPort, NavigatorPort, ProductStorePort, SelectedProductPort

logger = logging.getLogger(__name__)


# --- Form construction ---


def _text_validators(field_rules: FieldRules) -> list[Validator]:
    validators: list[Validator] = []
    if field_rules.required:
        validators.append(required())
    if field_rules.min_length is not None:
        validators.append(min_length(field_rules.min_length))
    if field_rules.max_length is not None:
        validators.append(max_length(field_rules.max_length))
    if field_rules.pattern is not None:
        validators.append(pattern(field_rules.pattern))
    return validators


def _date_validators(field_rules: DateFieldRules, clock: ClockPort | None) -> list[Validator]:
    validators: list[Validator] = []
    if field_rules.required:
        validators.append(required())
    validators.append(iso_date())
    if field_rules.min_today:
        if clock is None:
            raise ValueError("min_today date rule needs a clock")
        validators.append(min_date_today(clock))
    return validators


def build_product_form_group(rules: FormRules, clock: ClockPort | None = None) -> FormGroup:
    """Create the six product controls with their sync validators."""
    fields = rules.fields
    return FormGroup(
        [
            FormControl("id", validators=_text_validators(fields.id)),
            FormControl("name", validators=_text_validators(fields.name)),
            FormControl("description", validators=_text_validators(fields.description)),
            FormControl("logo", validators=_text_validators(fields.logo)),
            FormControl("date_release", validators=_date_validators(fields.date_release, clock)),
            # Always derived from date_release
            FormControl("date_revision", editable=False),
        ]
    )


# --- Component ---


class ProductForm:
    """One mounted product form."""

    def __init__(
        self,
        *,
        store: ProductStorePort,
        selection: SelectedProductPort,
        navigator: NavigatorPort,
        rules: FormRules | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        self.rules = rules or FormRules()
        self.selection = selection
        self.navigator = navigator

        self.form = build_product_form_group(self.rules, clock)
        self.scope = CancellationScope("product-form")
        self.lifecycle = LifecycleController(
            self.form,
            store=store,
            selection=selection,
            navigator=navigator,
            scope=self.scope,
            rules=self.rules,
        )
        self.submission = SubmissionStateMachine(
            self.form,
            store=store,
            navigator=navigator,
            scope=self.scope,
            rules=self.rules,
        )
        self.error_message = ""

    # --- State ---

    @property
    def mode(self) -> Mode | None:
        return self.lifecycle.mode

    @property
    def is_edit_mode(self) -> bool:
        return self.lifecycle.mode == Mode.EDIT

    @property
    def current_id(self) -> str | None:
        return self.lifecycle.current_id

    @property
    def is_submitting(self) -> bool:
        return self.submission.is_submitting

    # --- Actions ---

    async def initialize(self, external_id: str | None = None) -> Mode:
        mode = self.lifecycle.initialize(external_id)
        if mode == Mode.EDIT:
            await self._load()
        return mode

    async def submit(self) -> SubmissionResult | None:
        if not self.submission.can_submit():
            return None

        self.error_message = ""
        result = await self.submission.submit(self.lifecycle.mode or Mode.CREATE, self.current_id)
        if result is not None and not result.success:
            self.error_message = result.error or MSG_SAVE_FAILED
        return result

    async def reset(self) -> None:
        self.error_message = ""
        if self.is_edit_mode and self.current_id:
            await self._load()
        else:
            self.form.reset()

    def cancel(self) -> None:
        self.navigator.go_to(self.rules.routes.listing)

    def destroy(self) -> None:
        if self.scope.completed:
            return
        self.scope.complete()
        self.selection.clear()
        logger.info("Product form destroyed")

    async def _load(self) -> None:
        message = await self.lifecycle.load_for_edit()
        if message:
            self.error_message = message

    # --- Field errors ---

    def get_error_message(self, field_name: str) -> str:
        return messages.get_error_message(self.form, field_name)

    def has_error(self, field_name: str, kind: str | None = None) -> bool:
        return messages.has_error(self.form, field_name, kind)


def create_product_form(
    *,
    store: ProductStorePort,
    selection: SelectedProductPort,
    navigator: NavigatorPort,
    rules: FormRules | None = None,
    clock: ClockPort | None = None,
) -> ProductForm:
    """Factory mirroring the other components' `create_*` helpers."""
    return ProductForm(
        store=store,
        selection=selection,
        navigator=navigator,
        rules=rules,
        clock=clock,
    )
