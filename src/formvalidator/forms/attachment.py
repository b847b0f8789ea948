"""Live binding between a validation config and a form.

A FormValidator builds its field specifications once, from a snapshot of
the validator registry, and then reacts to the adapter's events:

- change / keyup: evaluate; render only after a submit was attempted
- submit: mark submit attempted, evaluate, render, and submit natively
  when the form is valid

Usage:
    config = FormConfig(
        fields=lambda v: {
            "name": FieldSpecification("Name", [v.required(), v.minLength(2)]),
        },
        field_error=lambda control, message: ...,
    )
    validator = FormValidator.init(adapter, config)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from formvalidator.forms.adapter import EDIT_EVENTS, SUBMIT, FormAdapter
from formvalidator.validation.engine import ValidationEngine
from formvalidator.validation.registry import (
    RegistrySnapshot,
    ValidatorRegistry,
    default_registry,
)
from formvalidator.validation.settings import ValidatorSettings
from formvalidator.validation.types import (
    FieldSpecification,
    FormEvent,
    FormValidatorError,
    ValidationResult,
    VisibilityState,
)
from formvalidator.validation.visibility import VisibilityController

logger = logging.getLogger(__name__)

FieldsBuilder = Callable[[RegistrySnapshot], Mapping[str, FieldSpecification]]
FieldErrorCallback = Callable[[Any, str | None], None]
FormErrorCallback = Callable[[Any, bool], None]


@dataclass(frozen=True)
class FormConfig:
    """Public configuration for a form.

    Attributes:
        fields: Builder receiving the registry snapshot and returning
            field name -> FieldSpecification
        field_error: Called with (control, message or None) per field
        form_error: Called with (form, invalid) after the fields
        settings: Locale policy for this form; None follows the process defaults
    """

    fields: FieldsBuilder
    field_error: FieldErrorCallback | None = None
    form_error: FormErrorCallback | None = None
    settings: ValidatorSettings | None = None


class FormValidator:
    """Validates a form and displays error messages."""

    def __init__(
        self,
        config: FormConfig,
        settings: ValidatorSettings | None = None,
        registry: ValidatorRegistry | None = None,
    ):
        self.config = config
        registry = registry or default_registry()
        self.validations: dict[str, FieldSpecification] = dict(
            config.fields(registry.snapshot())
        )
        self.engine = ValidationEngine(settings or config.settings)
        self.visibility = VisibilityController()
        self.adapter: FormAdapter | None = None
        self.last_result = ValidationResult()

    @classmethod
    def init(
        cls,
        adapter: FormAdapter,
        config: FormConfig,
        settings: ValidatorSettings | None = None,
        registry: ValidatorRegistry | None = None,
    ) -> "FormValidator":
        """Create a validator and attach it to a form in one step."""
        validator = cls(config, settings=settings, registry=registry)
        validator.attach(adapter)
        return validator

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> VisibilityState:
        return self.visibility.state

    @property
    def valid(self) -> bool:
        return self.last_result.valid

    @property
    def errors(self) -> Mapping[str, str]:
        return self.last_result.errors

    # -------------------------------------------------------------------------
    # Attachment
    # -------------------------------------------------------------------------

    def attach(self, adapter: FormAdapter) -> None:
        if self.adapter is not None:
            raise FormValidatorError("FormValidator is already attached to a form")
        self.adapter = adapter
        adapter.on(SUBMIT, self.handle_submit)
        for event in EDIT_EVENTS:
            adapter.on(event, self.handle_edit)

    def detach(self) -> None:
        """Release the adapter's event subscriptions."""
        if self.adapter is None:
            return
        self.adapter.off(SUBMIT, self.handle_submit)
        for event in EDIT_EVENTS:
            self.adapter.off(event, self.handle_edit)
        self.adapter = None

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def handle_submit(self) -> None:
        self.visibility.transition(FormEvent.SUBMIT)
        self.validate()

        if self.valid:
            self._require_adapter().submit()
        else:
            logger.debug("Submission blocked: %d invalid field(s)", len(self.errors))

    def handle_edit(self) -> None:
        self.visibility.transition(FormEvent.EDIT)
        self.validate()

    def validate(self) -> ValidationResult:
        """Evaluate current values; render only once a submit was attempted."""
        adapter = self._require_adapter()
        values = adapter.read_values(self.validations.keys())
        self.last_result = self.engine.evaluate(self.validations, values)

        # While the user is still filling out the form, don't show anything
        if self.visibility.should_render():
            self.show_errors()
        return self.last_result

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def show_errors(self) -> None:
        for name in self.validations:
            self.field_error(name, self.last_result.error_for(name))

        if self.config.form_error:
            self.config.form_error(self._require_adapter().form, not self.valid)

    def field_error(self, name: str, error: str | None) -> None:
        adapter = self._require_adapter()
        control = adapter.find_control(name)
        if control is None:
            logger.debug("No control for field '%s'; skipping error display", name)
            return
        adapter.set_invalid(control, error is not None)
        if self.config.field_error:
            self.config.field_error(control, error)

    def _require_adapter(self) -> FormAdapter:
        if self.adapter is None:
            raise FormValidatorError("FormValidator is not attached to a form")
        return self.adapter
