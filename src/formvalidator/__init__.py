"""formvalidator — declarative validation for interactive forms.

Usage:
    from formvalidator import ControlFormAdapter, FieldSpecification, FormConfig, FormValidator

    config = FormConfig(
        fields=lambda v: {
            "email": FieldSpecification("Email", [v.required(), v.email()]),
        },
    )
    validator = FormValidator.init(adapter, config)
"""

from formvalidator.forms import (
    ControlFormAdapter,
    FormAdapter,
    FormConfig,
    FormControl,
    FormValidator,
)
from formvalidator.validation import (
    FieldSpecification,
    FormValidatorError,
    Locale,
    MissingTemplateError,
    RuleValidator,
    UnknownValidatorError,
    UnsupportedInputKindError,
    ValidationEngine,
    ValidationResult,
    ValidatorRegistry,
    ValidatorSettings,
    default_registry,
    evaluate,
    get_locale,
    register_validator,
    set_locale,
)

__all__ = [
    "ControlFormAdapter",
    "FieldSpecification",
    "FormAdapter",
    "FormConfig",
    "FormControl",
    "FormValidator",
    "FormValidatorError",
    "Locale",
    "MissingTemplateError",
    "RuleValidator",
    "UnknownValidatorError",
    "UnsupportedInputKindError",
    "ValidationEngine",
    "ValidationResult",
    "ValidatorRegistry",
    "ValidatorSettings",
    "default_registry",
    "evaluate",
    "get_locale",
    "register_validator",
    "set_locale",
]
