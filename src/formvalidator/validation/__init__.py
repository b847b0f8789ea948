"""formvalidator validation core.

Usage:
    from formvalidator.validation import FieldSpecification, ValidationEngine, default_registry

    v = default_registry().snapshot()
    config = {
        "name": FieldSpecification("Name", [v.required(), v.minLength(2)]),
        "email": FieldSpecification("Email", [v.required(), v.email()]),
    }
    result = ValidationEngine().evaluate(config, {"name": "A", "email": ""})
    result.errors  # {"name": "Name must be at least 2 characters long", ...}
"""

from formvalidator.validation.engine import ValidationEngine, evaluate
from formvalidator.validation.messages import DEFAULT_LOCALE, MessageFormatter
from formvalidator.validation.registry import (
    RegistrySnapshot,
    ValidatorRegistry,
    default_registry,
    register_validator,
    reset_default_registry,
)
from formvalidator.validation.settings import (
    ValidatorSettings,
    get_default_settings,
    get_locale,
    reset_default_settings,
    set_default_settings,
    set_locale,
)
from formvalidator.validation.types import (
    FieldSpecification,
    FormDefinitionError,
    FormEvent,
    FormValidatorError,
    FormValues,
    Locale,
    MissingTemplateError,
    RuleValidator,
    UnknownValidatorError,
    UnsupportedInputKindError,
    ValidationConfig,
    ValidationResult,
    Validator,
    ValidatorFactory,
    VisibilityState,
)
from formvalidator.validation.visibility import VisibilityController

__all__ = [
    # Types
    "FieldSpecification",
    "FormEvent",
    "FormValues",
    "Locale",
    "RuleValidator",
    "ValidationConfig",
    "ValidationResult",
    "Validator",
    "ValidatorFactory",
    "VisibilityState",
    # Errors
    "FormDefinitionError",
    "FormValidatorError",
    "MissingTemplateError",
    "UnknownValidatorError",
    "UnsupportedInputKindError",
    # Registry
    "RegistrySnapshot",
    "ValidatorRegistry",
    "default_registry",
    "register_validator",
    "reset_default_registry",
    # Settings
    "ValidatorSettings",
    "get_default_settings",
    "get_locale",
    "reset_default_settings",
    "set_default_settings",
    "set_locale",
    # Engine
    "DEFAULT_LOCALE",
    "MessageFormatter",
    "ValidationEngine",
    "VisibilityController",
    "evaluate",
]
