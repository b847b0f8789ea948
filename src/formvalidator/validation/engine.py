"""Validation engine for formvalidator.

Turns a ValidationConfig and a snapshot of form values into a
ValidationResult. Evaluation is synchronous and side-effect free: the
same inputs always produce an equal result, and nothing about the
attachment (such as whether a submit was attempted) is read or changed.
"""

import logging
from typing import Any

from formvalidator.validation.messages import MessageFormatter
from formvalidator.validation.settings import ValidatorSettings, get_default_settings
from formvalidator.validation.types import (
    FieldSpecification,
    FormValues,
    LocaleLike,
    ValidationConfig,
    ValidationResult,
    Validator,
)

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Evaluates validator chains field by field.

    Each field's validators run in declared order and stop at the first
    failure, so a field reports at most one message.

    Args:
        settings: Locale policy; None follows the process-wide defaults
            at each evaluation
        formatter: Message formatter (mainly for tests)
    """

    def __init__(
        self,
        settings: ValidatorSettings | None = None,
        formatter: MessageFormatter | None = None,
    ):
        self._settings = settings
        self.formatter = formatter or MessageFormatter()

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings or get_default_settings()

    def evaluate(
        self,
        config: ValidationConfig,
        values: FormValues,
        locale: LocaleLike | None = None,
    ) -> ValidationResult:
        """Validate all fields.

        Args:
            config: Field name -> FieldSpecification
            values: Field name -> current value (the full mapping is passed
                to every validator)
            locale: Overrides the settings' locale for this call

        Returns:
            ValidationResult holding only the failing fields

        Raises:
            MissingTemplateError: A failing validator has no template for
                the locale (and no fallback applies)
        """
        settings = self.settings
        active_locale = locale if locale is not None else settings.locale

        errors: dict[str, str] = {}
        for name, spec in config.items():
            message = self._evaluate_field(
                spec, values.get(name), values, active_locale, settings.fallback_locale
            )
            if message is not None:
                errors[name] = message

        logger.debug(
            "Evaluated %d field(s): %d error(s)", len(config), len(errors)
        )
        return ValidationResult(errors=errors)

    def _evaluate_field(
        self,
        spec: FieldSpecification,
        value: Any,
        values: FormValues,
        locale: LocaleLike,
        fallback: LocaleLike | None,
    ) -> str | None:
        """Run one chain; return the first failure's message or None."""
        for validator in spec.validators:
            if validator.validate(value, values):
                continue
            return self._format_error(validator, spec.label, locale, fallback)
        return None

    def _format_error(
        self,
        validator: Validator,
        label: str,
        locale: LocaleLike,
        fallback: LocaleLike | None,
    ) -> str:
        message_data = getattr(validator, "message_data", None)
        substitutions: dict[str, Any] = dict(message_data()) if message_data else {}
        substitutions["label"] = label

        template = self.formatter.template_for(validator.messages, locale, fallback)
        return self.formatter.render(template, substitutions)


def evaluate(
    config: ValidationConfig,
    values: FormValues,
    locale: LocaleLike | None = None,
) -> ValidationResult:
    """Evaluate with the process-wide settings."""
    return ValidationEngine().evaluate(config, values, locale)
