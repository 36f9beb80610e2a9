"""
Product form component - create/edit lifecycle for a single product.
"""

from ._derived import DerivedFieldCalculator
from ._lifecycle import LifecycleController
from ._submission import SubmissionStateMachine, build_payload, error_message
from ._uniqueness import attach_uniqueness_validator, product_id_validator
from .component import ProductForm, build_product_form_group, create_product_form
from .models import (
    MSG_FORM_INVALID,
    MSG_LOAD_FAILED,
    MSG_SAVE_FAILED,
    Failure,
    Mode,
    SubmissionResult,
    SubmitState,
    Success,
)
from .ports import ClockPort, NavigatorPort, ProductStorePort, SelectedProductPort

__all__ = [
    # Entry points
    "ProductForm",
    "build_product_form_group",
    "create_product_form",
    # Parts
    "DerivedFieldCalculator",
    "LifecycleController",
    "SubmissionStateMachine",
    "attach_uniqueness_validator",
    "build_payload",
    "error_message",
    "product_id_validator",
    # Models
    "Failure",
    "Mode",
    "SubmissionResult",
    "SubmitState",
    "Success",
    "MSG_FORM_INVALID",
    "MSG_LOAD_FAILED",
    "MSG_SAVE_FAILED",
    # Ports
    "ClockPort",
    "NavigatorPort",
    "ProductStorePort",
    "SelectedProductPort",
]
