"""Built-in validators for formvalidator.

These are ready-to-use validator factories registered on every new
process-wide registry.

Available validators:
- required: Value must be non-empty
- email: Value must be an email address (browser `type=email` grammar)
- minLength / maxLength: String length bounds
- minSelections: Minimum number of selected items in a group
- pattern: Value must fully match a regex
- matchesField: Value must equal another field's value
"""

import re
from typing import Any

from formvalidator.validation.registry import ValidatorRegistry
from formvalidator.validation.types import FieldValue, FormValues, RuleValidator


# =============================================================================
# Patterns
# =============================================================================

# Same grammar browsers use for <input type="email">
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


def _length(value: Any) -> int:
    """Length of a value, counting a missing value as empty."""
    if value is None:
        return 0
    return len(value)


def _selection_count(value: FieldValue) -> int:
    """Number of selected items; a lone checked box reads as a scalar."""
    if value is None:
        return 0
    if isinstance(value, str):
        return 1
    return len(value)


# =============================================================================
# Factories
# =============================================================================


def required() -> RuleValidator:
    """Fails on None, "" and empty selections."""
    return RuleValidator(
        predicate=lambda value, values: bool(value),
        messages={
            "en": "{label} is required",
            "fr": "{label} est obligatoire",
            "de": "{label} ist erforderlich",
        },
    )


def email() -> RuleValidator:
    return RuleValidator(
        predicate=lambda value, values: (
            isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None
        ),
        messages={
            "en": "{label} must be a valid email",
            "fr": "{label} doit être une adresse e-mail valide",
            "de": "{label} muss eine gültige E-Mail-Adresse sein",
        },
    )


def min_length(min: int) -> RuleValidator:
    return RuleValidator(
        predicate=lambda value, values: _length(value) >= min,
        messages={
            "en": "{label} must be at least {min} characters long",
            "fr": "{label} doit contenir au moins {min} caractères",
            "de": "{label} muss mindestens {min} Zeichen lang sein",
        },
        data={"min": min},
    )


def max_length(max: int) -> RuleValidator:
    return RuleValidator(
        predicate=lambda value, values: _length(value) <= max,
        messages={
            "en": "{label} must be at most {max} characters long",
            "fr": "{label} doit contenir au plus {max} caractères",
            "de": "{label} darf höchstens {max} Zeichen lang sein",
        },
        data={"max": max},
    )


def min_selections(min: int) -> RuleValidator:
    return RuleValidator(
        predicate=lambda value, values: _selection_count(value) >= min,
        messages={
            "en": "You must choose at least {min} items",
            "fr": "Vous devez choisir au moins {min} éléments",
            "de": "Sie müssen mindestens {min} Elemente auswählen",
        },
        data={"min": min},
    )


def pattern(regex: str) -> RuleValidator:
    """Value must fully match `regex`. Empty values pass; pair with required()."""
    compiled = re.compile(regex)

    def predicate(value: FieldValue, values: FormValues) -> bool:
        if not value:
            return True
        return isinstance(value, str) and compiled.fullmatch(value) is not None

    return RuleValidator(
        predicate=predicate,
        messages={
            "en": "{label} is not in the expected format",
            "fr": "{label} n'est pas au format attendu",
            "de": "{label} hat nicht das erwartete Format",
        },
    )


def matches_field(other: str, other_label: str | None = None) -> RuleValidator:
    """Value must equal the value of field `other` (e.g. password confirmation)."""
    return RuleValidator(
        predicate=lambda value, values: value == values.get(other),
        messages={
            "en": "{label} must match {other}",
            "fr": "{label} doit correspondre à {other}",
            "de": "{label} muss mit {other} übereinstimmen",
        },
        data={"other": other_label or other},
    )


BUILTIN_VALIDATORS = {
    "required": required,
    "email": email,
    "minLength": min_length,
    "maxLength": max_length,
    "minSelections": min_selections,
    "pattern": pattern,
    "matchesField": matches_field,
}


def register_builtin_validators(registry: ValidatorRegistry) -> None:
    """Register all built-in validators with a registry."""
    for name, factory in BUILTIN_VALIDATORS.items():
        registry.register(name, factory)
