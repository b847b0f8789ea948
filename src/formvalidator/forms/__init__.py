"""Form attachment and the adapter boundary."""

from formvalidator.forms.adapter import (
    CHANGE,
    KEYUP,
    SUBMIT,
    ControlFormAdapter,
    FormAdapter,
    FormControl,
)
from formvalidator.forms.attachment import FormConfig, FormValidator

__all__ = [
    "CHANGE",
    "KEYUP",
    "SUBMIT",
    "ControlFormAdapter",
    "FormAdapter",
    "FormConfig",
    "FormControl",
    "FormValidator",
]
