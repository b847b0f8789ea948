"""Built-in validators for formvalidator.

This module provides the validator factories every registry starts with.
"""

from formvalidator.validation.validators.builtins import (
    BUILTIN_VALIDATORS,
    EMAIL_PATTERN,
    email,
    matches_field,
    max_length,
    min_length,
    min_selections,
    pattern,
    register_builtin_validators,
    required,
)

__all__ = [
    "BUILTIN_VALIDATORS",
    "EMAIL_PATTERN",
    "email",
    "matches_field",
    "max_length",
    "min_length",
    "min_selections",
    "pattern",
    "register_builtin_validators",
    "required",
]
