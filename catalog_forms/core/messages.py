"""
Error message mapper - structured field errors to user-facing text.

Exactly one message is produced per field, chosen by a fixed priority:
required > minlength > maxlength > pattern > minDate > idExists > fallback.
"""

from __future__ import annotations

from catalog_forms.core.forms import FormGroup, ValidationErrors
from catalog_forms.core.validators import (
    ID_EXISTS,
    MAX_LENGTH,
    MIN_DATE,
    MIN_LENGTH,
    PATTERN,
    REQUIRED,
)

MSG_REQUIRED = "Este campo es obligatorio"
MSG_MIN_LENGTH = "La longitud mínima es {required_length}"
MSG_MAX_LENGTH = "La longitud máxima es {required_length}"
MSG_PATTERN = "Por favor ingrese una URL válida (http:// o https://)"
MSG_MIN_DATE = "La fecha debe ser hoy o posterior"
MSG_ID_EXISTS = "Este ID ya existe"
MSG_FALLBACK = "Valor inválido"


def message_for_errors(errors: ValidationErrors | None) -> str:
    """Map one field's error dict to a single message ("" when empty)."""
    if not errors:
        return ""

    if REQUIRED in errors:
        return MSG_REQUIRED
    if MIN_LENGTH in errors:
        return MSG_MIN_LENGTH.format(required_length=errors[MIN_LENGTH]["required_length"])
    if MAX_LENGTH in errors:
        return MSG_MAX_LENGTH.format(required_length=errors[MAX_LENGTH]["required_length"])
    if PATTERN in errors:
        return MSG_PATTERN
    if MIN_DATE in errors:
        return MSG_MIN_DATE
    if ID_EXISTS in errors:
        return MSG_ID_EXISTS

    return MSG_FALLBACK


def get_error_message(form: FormGroup, field_name: str) -> str:
    """Message for `field_name`, or "" if the field is unknown or valid."""
    control = form.get(field_name)
    if control is None:
        return ""
    return message_for_errors(control.errors)


def has_error(form: FormGroup, field_name: str, kind: str | None = None) -> bool:
    """
    Whether an error should be shown for `field_name`.

    Errors are only visible once the user has interacted with the field
    (dirty) or a submit attempt has marked it touched.
    """
    control = form.get(field_name)
    if control is None:
        return False

    interacted = control.dirty or control.touched
    if kind is not None:
        return control.has_error(kind) and interacted
    return control.invalid and interacted
