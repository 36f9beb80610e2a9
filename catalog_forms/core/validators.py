"""
Synchronous field validators.

Each factory returns a callable taking the control value and returning
a structured error dict (`{kind: details}`) or None. Length and pattern
checks skip empty values; `required` reports those.
"""

from __future__ import annotations

import re
from datetime import MAXYEAR
from typing import Any

from catalog_forms.core.calendar import parse_date
from catalog_forms.core.forms import ValidationErrors, Validator
from catalog_forms.ports.clock import ClockPort

# Error kinds, in the order messages are prioritised
REQUIRED = "required"
MIN_LENGTH = "minlength"
MAX_LENGTH = "maxlength"
PATTERN = "pattern"
MIN_DATE = "minDate"
ID_EXISTS = "idExists"
# Reported through the generic message
DATE = "date"


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def required() -> Validator:
    def validate(value: Any) -> ValidationErrors | None:
        if _is_empty(value):
            return {REQUIRED: True}
        return None

    return validate


def min_length(length: int) -> Validator:
    def validate(value: Any) -> ValidationErrors | None:
        if _is_empty(value) or len(value) >= length:
            return None
        return {MIN_LENGTH: {"required_length": length, "actual_length": len(value)}}

    return validate


def max_length(length: int) -> Validator:
    def validate(value: Any) -> ValidationErrors | None:
        if _is_empty(value) or len(value) <= length:
            return None
        return {MAX_LENGTH: {"required_length": length, "actual_length": len(value)}}

    return validate


def pattern(regex: str) -> Validator:
    compiled = re.compile(regex)

    def validate(value: Any) -> ValidationErrors | None:
        if _is_empty(value) or compiled.match(str(value)):
            return None
        return {PATTERN: {"required_pattern": regex, "actual_value": value}}

    return validate


def iso_date(max_year: int = MAXYEAR - 1) -> Validator:
    """
    Value must be a `YYYY-MM-DD` date no later than `max_year`.

    The default keeps room for the one-year revision date.
    """

    def validate(value: Any) -> ValidationErrors | None:
        if _is_empty(value):
            return None
        parsed = parse_date(value)
        if parsed is None or parsed.year > max_year:
            return {DATE: {"actual": value}}
        return None

    return validate


def min_date_today(clock: ClockPort) -> Validator:
    """Date must be today or later."""

    def validate(value: Any) -> ValidationErrors | None:
        parsed = parse_date(value)
        if parsed is None:
            return None
        today = clock.today()
        if parsed < today:
            return {MIN_DATE: {"min": today.isoformat(), "actual": parsed.isoformat()}}
        return None

    return validate
