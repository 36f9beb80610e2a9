"""
Form state - controls, groups and change notification.

A `FormControl` mirrors one product field: its value, structured
errors, touched/dirty flags and an optional async validator. A
`FormGroup` aggregates controls and serializes them.

Key behaviors:
- Change listeners fire synchronously, in subscription order,
  after validity has been recomputed
- Programmatic writes never mark a control dirty; `user_input` does
- `editable` and `in_payload` are separate: a frozen control is not
  editable and skips validation, but is still serialized by `raw_value`
- Async validation runs only when the sync validators pass; each check
  carries a sequence number and only the latest one may set errors
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from catalog_forms.core.cancellation import CancellationScope

logger = logging.getLogger(__name__)

ValidationErrors = dict[str, Any]
Validator = Callable[[Any], ValidationErrors | None]
AsyncValidator = Callable[[Any], Awaitable[ValidationErrors | None]]
Listener = Callable[[Any], None]


class ControlStatus(str, Enum):
    VALID = "VALID"
    INVALID = "INVALID"
    PENDING = "PENDING"
    DISABLED = "DISABLED"


class Subscription:
    """Handle returned by `FormControl.subscribe`."""

    def __init__(self, listeners: list[Listener], listener: Listener) -> None:
        self._listeners = listeners
        self._listener = listener
        self.closed = False

    def unsubscribe(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)


class FormControl:
    """A single form field."""

    def __init__(
        self,
        name: str,
        value: Any = "",
        validators: Iterable[Validator] = (),
        *,
        editable: bool = True,
        in_payload: bool = True,
    ) -> None:
        self.name = name
        self.value = value
        self.errors: ValidationErrors | None = None
        self.touched = False
        self.dirty = False
        self.editable = editable
        self.in_payload = in_payload

        self._validators: list[Validator] = list(validators)
        self._listeners: list[Listener] = []

        self._async_validator: AsyncValidator | None = None
        self._async_scope: CancellationScope | None = None
        self._check_seq = 0
        self._check_task: asyncio.Task[None] | None = None

        self.update_validity()

    # --- Status ---

    @property
    def pending(self) -> bool:
        return self._check_task is not None and not self._check_task.done()

    @property
    def status(self) -> ControlStatus:
        if not self.editable:
            return ControlStatus.DISABLED
        if self.errors:
            return ControlStatus.INVALID
        if self.pending:
            return ControlStatus.PENDING
        return ControlStatus.VALID

    @property
    def valid(self) -> bool:
        return self.status == ControlStatus.VALID

    @property
    def invalid(self) -> bool:
        return self.status == ControlStatus.INVALID

    @property
    def has_async_validator(self) -> bool:
        return self._async_validator is not None

    def has_error(self, kind: str) -> bool:
        return self.errors is not None and kind in self.errors

    # --- Change notification ---

    def subscribe(self, listener: Listener) -> Subscription:
        """Register a listener for value changes."""
        self._listeners.append(listener)
        return Subscription(self._listeners, listener)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self.value)

    # --- Writes ---

    def set_value(self, value: Any, *, emit_event: bool = True) -> None:
        """Programmatic write. Does not mark the control dirty."""
        self.value = value
        self.update_validity()
        if emit_event:
            self._emit()

    def user_input(self, value: Any) -> None:
        """Write coming from the user; marks the control dirty."""
        if not self.editable:
            logger.debug("Ignoring input on frozen control %s", self.name)
            return
        self.dirty = True
        self.set_value(value)

    def mark_as_touched(self) -> None:
        self.touched = True

    def reset(self, value: Any = "") -> None:
        self.touched = False
        self.dirty = False
        self.set_value(value)

    def freeze(self) -> None:
        """Make the control read-only while keeping it in the payload."""
        self.editable = False
        self.update_validity()

    # --- Validation ---

    def set_async_validator(
        self,
        validator: AsyncValidator | None,
        *,
        scope: CancellationScope | None = None,
    ) -> None:
        self._async_validator = validator
        self._async_scope = scope

    def update_validity(self) -> None:
        """Recompute errors and start an async check when applicable."""
        self._cancel_check()

        if not self.editable:
            self.errors = None
            return

        errors: ValidationErrors = {}
        for validator in self._validators:
            result = validator(self.value)
            if result:
                errors.update(result)
        self.errors = errors or None

        if self.errors is None:
            self._start_check()

    def _cancel_check(self) -> None:
        if self._check_task is not None and not self._check_task.done():
            self._check_task.cancel()

    def _start_check(self) -> None:
        validator = self._async_validator
        if validator is None:
            return
        if self._async_scope is not None and self._async_scope.completed:
            return

        self._check_seq += 1
        loop = asyncio.get_running_loop()
        self._check_task = loop.create_task(
            self._run_check(validator, self._check_seq, self.value)
        )
        if self._async_scope is not None:
            self._async_scope.track(self._check_task)

    async def _run_check(self, validator: AsyncValidator, seq: int, value: Any) -> None:
        errors = await validator(value)

        if seq != self._check_seq:
            logger.debug("Discarding stale check #%d on %s", seq, self.name)
            return
        if self._async_scope is not None and self._async_scope.completed:
            return

        self.errors = errors or None

    async def settle(self) -> None:
        """Wait until no async check is in flight."""
        while self._check_task is not None and not self._check_task.done():
            await asyncio.wait({self._check_task})


class FormGroup:
    """A named collection of controls."""

    def __init__(self, controls: Iterable[FormControl]) -> None:
        self._controls: dict[str, FormControl] = {c.name: c for c in controls}

    @property
    def controls(self) -> Mapping[str, FormControl]:
        return self._controls

    def get(self, name: str) -> FormControl | None:
        return self._controls.get(name)

    def __getitem__(self, name: str) -> FormControl:
        return self._controls[name]

    # --- Aggregate status ---

    @property
    def status(self) -> ControlStatus:
        statuses = {c.status for c in self._controls.values()}
        if ControlStatus.INVALID in statuses:
            return ControlStatus.INVALID
        if ControlStatus.PENDING in statuses:
            return ControlStatus.PENDING
        if statuses == {ControlStatus.DISABLED}:
            return ControlStatus.DISABLED
        return ControlStatus.VALID

    @property
    def valid(self) -> bool:
        return self.status == ControlStatus.VALID

    @property
    def invalid(self) -> bool:
        return self.status == ControlStatus.INVALID

    @property
    def pending(self) -> bool:
        return self.status == ControlStatus.PENDING

    async def settle(self) -> None:
        for control in self._controls.values():
            await control.settle()

    # --- Values ---

    def patch_value(self, values: Mapping[str, Any], *, emit_event: bool = True) -> None:
        """Set the controls named in `values`; unknown names are ignored."""
        for name, value in values.items():
            control = self._controls.get(name)
            if control is not None:
                control.set_value(value, emit_event=emit_event)

    def raw_value(self) -> dict[str, Any]:
        """All payload values, including frozen controls."""
        return {name: c.value for name, c in self._controls.items() if c.in_payload}

    def value(self) -> dict[str, Any]:
        """Values of editable controls only."""
        return {name: c.value for name, c in self._controls.items() if c.editable}

    def mark_all_as_touched(self) -> None:
        for control in self._controls.values():
            control.mark_as_touched()

    def reset(self) -> None:
        for control in self._controls.values():
            control.reset()
