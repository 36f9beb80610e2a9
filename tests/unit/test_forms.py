"""
Form state tests: controls, groups, change notification and async checks.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from catalog_forms.core.cancellation import CancellationScope
from catalog_forms.core.forms import ControlStatus, FormControl, FormGroup
from catalog_forms.core.validators import min_length, required


class TestFormControl:
    """Single control behavior."""

    def test_initial_validation(self) -> None:
        control = FormControl("name", "", [required()])
        assert control.errors == {"required": True}
        assert control.invalid

    def test_listeners_fire_in_order_after_validation(self) -> None:
        control = FormControl("name", "", [required()])
        seen: list[tuple[str, Any, bool]] = []
        control.subscribe(lambda v: seen.append(("first", v, control.valid)))
        control.subscribe(lambda v: seen.append(("second", v, control.valid)))

        control.set_value("hola")

        assert seen == [("first", "hola", True), ("second", "hola", True)]

    def test_set_value_without_event(self) -> None:
        control = FormControl("name")
        seen: list[Any] = []
        control.subscribe(seen.append)

        control.set_value("x", emit_event=False)

        assert control.value == "x"
        assert seen == []

    def test_unsubscribe(self) -> None:
        control = FormControl("name")
        seen: list[Any] = []
        subscription = control.subscribe(seen.append)
        subscription.unsubscribe()
        subscription.unsubscribe()

        control.set_value("x")

        assert seen == []
        assert subscription.closed

    def test_programmatic_write_is_not_dirty(self) -> None:
        control = FormControl("name")
        control.set_value("x")
        assert control.dirty is False

        control.user_input("y")
        assert control.dirty is True

    def test_frozen_control_skips_validation_and_input(self) -> None:
        control = FormControl("id", "ab", [min_length(3)])
        assert control.invalid

        control.freeze()

        assert control.status == ControlStatus.DISABLED
        assert control.errors is None
        control.user_input("changed")
        assert control.value == "ab"

    def test_reset_clears_flags(self) -> None:
        control = FormControl("name", "", [required()])
        control.user_input("x")
        control.mark_as_touched()

        control.reset()

        assert control.value == ""
        assert not control.touched
        assert not control.dirty


class TestAsyncValidation:
    """Async checks: pending state, sequencing and cancellation."""

    @pytest.mark.asyncio
    async def test_pending_then_resolved(self) -> None:
        release = asyncio.Event()

        async def check(value: Any) -> dict[str, Any] | None:
            await release.wait()
            return {"idExists": True}

        control = FormControl("id", "", [required()])
        control.set_async_validator(check)
        control.set_value("abc")

        assert control.pending
        assert control.status == ControlStatus.PENDING

        release.set()
        await control.settle()

        assert control.errors == {"idExists": True}
        assert not control.pending

    @pytest.mark.asyncio
    async def test_async_check_skipped_when_sync_invalid(self) -> None:
        calls: list[Any] = []

        async def check(value: Any) -> dict[str, Any] | None:
            calls.append(value)
            return None

        control = FormControl("id", "", [min_length(3)])
        control.set_async_validator(check)
        control.set_value("ab")
        await control.settle()

        assert calls == []

    @pytest.mark.asyncio
    async def test_superseded_check_never_applies(self) -> None:
        gates = {"old": asyncio.Event(), "new": asyncio.Event()}

        async def check(value: Any) -> dict[str, Any] | None:
            await gates[value].wait()
            return {"idExists": True} if value == "old" else None

        scope = CancellationScope()
        control = FormControl("id")
        control.set_async_validator(check, scope=scope)

        control.set_value("old")
        first = control._check_task
        control.set_value("new")
        gates["new"].set()
        gates["old"].set()
        await control.settle()
        assert first is not None
        await asyncio.wait({first})

        assert first.cancelled()
        assert control.errors is None

    @pytest.mark.asyncio
    async def test_scope_completion_cancels_check(self) -> None:
        release = asyncio.Event()
        evaluated: list[Any] = []

        async def check(value: Any) -> dict[str, Any] | None:
            await release.wait()
            evaluated.append(value)
            return {"idExists": True}

        scope = CancellationScope()
        control = FormControl("id")
        control.set_async_validator(check, scope=scope)
        control.set_value("abc")

        scope.complete()
        release.set()
        await control.settle()

        assert evaluated == []
        assert control.errors is None


class TestFormGroup:
    def _group(self) -> FormGroup:
        return FormGroup(
            [
                FormControl("id", "abc", [required()]),
                FormControl("name", "", [required()]),
                FormControl("date_revision", "2025-01-01", editable=False),
            ]
        )

    def test_invalid_when_any_editable_control_invalid(self) -> None:
        group = self._group()
        assert group.invalid

        group["name"].set_value("x")
        assert group.valid

    def test_frozen_controls_do_not_affect_validity(self) -> None:
        group = self._group()
        group["name"].set_value("x")
        group["id"].set_value("")
        group["id"].freeze()

        assert group.valid

    def test_raw_value_includes_frozen_controls(self) -> None:
        group = self._group()
        group["id"].freeze()

        assert group.raw_value() == {"id": "abc", "name": "", "date_revision": "2025-01-01"}
        assert group.value() == {"name": ""}

    def test_patch_value_ignores_unknown_names(self) -> None:
        group = self._group()
        group.patch_value({"name": "nuevo", "extra": 1})
        assert group["name"].value == "nuevo"

    def test_mark_all_as_touched(self) -> None:
        group = self._group()
        group.mark_all_as_touched()
        assert all(c.touched for c in group.controls.values())

    def test_get_unknown(self) -> None:
        assert self._group().get("missing") is None
