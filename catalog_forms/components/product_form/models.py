"""
Product form models - modes, submission states and results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# --- Fixed messages ---

MSG_FORM_INVALID = "Formulario inválido"
MSG_SAVE_FAILED = "Error al guardar producto"
MSG_LOAD_FAILED = "Error al cargar producto"


# --- Mode ---


class Mode(str, Enum):
    """Whether the form creates a new product or edits an existing one."""

    CREATE = "create"
    EDIT = "edit"


# --- Submission State ---


class SubmitState(str, Enum):
    """
    Submission lifecycle.

    IDLE -> SUBMITTING -> SUCCESS | FAILED. FAILED accepts a new submit;
    SUCCESS is terminal for the form instance.
    """

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


# --- Submission Result ---


@dataclass(frozen=True)
class Success:
    """Submit completed; carries no payload."""

    @property
    def success(self) -> bool:
        return True

    @property
    def error(self) -> str | None:
        return None


@dataclass(frozen=True)
class Failure:
    """Submit rejected locally or by the record store."""

    message: str

    @property
    def success(self) -> bool:
        return False

    @property
    def error(self) -> str:
        return self.message


SubmissionResult = Success | Failure
