"""Core types for the formvalidator validation system.

This module defines the foundational types shared by the engine, the
registry and the form attachment:
- Validator: a single rule (predicate + message templates)
- FieldSpecification: label plus an ordered validator chain
- ValidationResult: the outcome of evaluating a whole form
- The error taxonomy raised for configuration defects
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Protocol, Sequence, Union


class Locale(Enum):
    """Locales with built-in message templates."""

    EN = "en"
    FR = "fr"
    DE = "de"


# A locale may be given as the enum or as its plain code ("en")
LocaleLike = Union[Locale, str]

# One field's value as read from the form controls
FieldValue = Union[str, list[str], None]
FormValues = Mapping[str, FieldValue]


def locale_code(locale: LocaleLike) -> str:
    """Normalize a locale to its string code."""
    if isinstance(locale, Locale):
        return locale.value
    return str(locale)


class FormEvent(Enum):
    """Events routed from the form adapter into the attachment."""

    EDIT = "edit"
    SUBMIT = "submit"


class VisibilityState(Enum):
    """Whether computed errors are surfaced to the user.

    PRISTINE: No submission attempted yet; errors are computed but hidden
    SUBMIT_ATTEMPTED: Terminal; every evaluation is rendered
    """

    PRISTINE = "pristine"
    SUBMIT_ATTEMPTED = "submit_attempted"


# =============================================================================
# Errors
# =============================================================================


class FormValidatorError(Exception):
    """Base class for all formvalidator errors."""


class MissingTemplateError(FormValidatorError):
    """A validator has no message template for the active locale."""

    def __init__(self, locale: LocaleLike, available: Sequence[str] = ()):
        self.locale = locale_code(locale)
        self.available = list(available)
        super().__init__(
            f"No message template for locale '{self.locale}'. "
            "Available locales: " + (", ".join(self.available) or "none")
        )


class UnsupportedInputKindError(FormValidatorError):
    """The form adapter cannot read a value from this kind of control."""

    def __init__(self, name: str, kind: str):
        self.name = name
        self.kind = kind
        super().__init__(f"Reading '{kind}' controls is not supported (field '{name}')")


class UnknownValidatorError(FormValidatorError, ValueError):
    """A validator name was looked up that is not registered."""

    def __init__(self, name: str, available: Sequence[str] = ()):
        self.name = name
        super().__init__(
            f"Validator '{name}' is not registered. "
            "Available validators: " + ", ".join(available)
        )


class FormDefinitionError(FormValidatorError):
    """A YAML form definition could not be loaded."""

    def __init__(self, message: str, issues: Sequence[Any] = ()):
        self.issues = list(issues)
        details = "".join(f"\n  {issue}" for issue in self.issues)
        super().__init__(message + details)


# =============================================================================
# Validators
# =============================================================================


class Validator(Protocol):
    """Protocol that all validators must implement.

    Validators are immutable. They receive the field's own value and the
    full values mapping so cross-field rules can read other fields.
    `message_data` is optional; the engine treats its absence as `{}`.
    """

    messages: Mapping[str, str]

    def validate(self, value: FieldValue, values: FormValues) -> bool:
        """Return True when the value passes this rule."""
        ...


# Factory signature: (*args) -> Validator
ValidatorFactory = Callable[..., Validator]


@dataclass(frozen=True)
class RuleValidator:
    """Validator built from a predicate function and message templates.

    Attributes:
        predicate: Called with (value, values); truthy means valid
        messages: Locale code -> message template
        data: Parameters substituted into the template (e.g. {"min": 2})
    """

    predicate: Callable[[FieldValue, FormValues], Any]
    messages: Mapping[str, str]
    data: Mapping[str, Any] = field(default_factory=dict)

    def validate(self, value: FieldValue, values: FormValues) -> bool:
        return bool(self.predicate(value, values))

    def message_data(self) -> dict[str, Any]:
        return dict(self.data)


@dataclass(frozen=True)
class FieldSpecification:
    """Declarative description of one form field.

    Attributes:
        label: Human-readable name substituted as {label}
        validators: Evaluated in order; the first failure wins
    """

    label: str
    validators: tuple[Validator, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the chain can't change
        object.__setattr__(self, "validators", tuple(self.validators))


ValidationConfig = Mapping[str, FieldSpecification]


@dataclass(frozen=True)
class ValidationResult:
    """Result of evaluating a form.

    Attributes:
        errors: Field name -> rendered message, only for failing fields
    """

    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        """True iff no field produced an error."""
        return not self.errors

    def error_for(self, name: str) -> str | None:
        """Message for a field, or None when the field is valid."""
        return self.errors.get(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": dict(self.errors),
        }
