"""Load form definitions from YAML files.

Example file:

    form: signup
    locale: en
    fields:
      name:
        label: Name
        validators:
          - required
          - {type: minLength, args: [2]}
      email:
        label: Email
        validators: [required, email]
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from formvalidator.config.schema import validate_form_data
from formvalidator.forms.attachment import (
    FieldErrorCallback,
    FieldsBuilder,
    FormConfig,
    FormErrorCallback,
)
from formvalidator.validation.registry import RegistrySnapshot
from formvalidator.validation.settings import ValidatorSettings
from formvalidator.validation.types import FieldSpecification, FormDefinitionError, Validator

logger = logging.getLogger(__name__)


@dataclass
class ValidatorConfig:
    """Validator reference from YAML: a registered name plus its arguments."""

    type: str
    args: list[Any] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, data: str | Mapping[str, Any]) -> "ValidatorConfig":
        if isinstance(data, str):
            return cls(type=data)
        return cls(
            type=data["type"],
            args=list(data.get("args", [])),
            params=dict(data.get("params", {})),
        )


@dataclass
class FieldConfig:
    name: str
    label: str
    validators: list[ValidatorConfig] = field(default_factory=list)


@dataclass
class FormDefinition:
    """A form as declared in YAML."""

    name: str
    fields: list[FieldConfig]
    locale: str | None = None
    fallback_locale: str | None = None

    def build_fields(self, v: RegistrySnapshot) -> dict[str, FieldSpecification]:
        """Resolve validator names against a registry snapshot.

        Raises:
            UnknownValidatorError: A validator name is not registered
            FormDefinitionError: A factory rejected its arguments
        """
        specs: dict[str, FieldSpecification] = {}
        for field_config in self.fields:
            validators = [
                self._create_validator(v, field_config, vc) for vc in field_config.validators
            ]
            specs[field_config.name] = FieldSpecification(field_config.label, validators)
        return specs

    def _create_validator(
        self, v: RegistrySnapshot, field_config: FieldConfig, vc: ValidatorConfig
    ) -> Validator:
        factory = v[vc.type]
        try:
            return factory(*vc.args, **vc.params)
        except (TypeError, re.error) as e:
            raise FormDefinitionError(
                f"Invalid arguments for validator '{vc.type}' on field '{field_config.name}': {e}"
            ) from e

    def fields_builder(self) -> FieldsBuilder:
        return self.build_fields

    def settings(self) -> ValidatorSettings | None:
        """Settings pinned by the file, or None to follow the process defaults."""
        if self.locale is None:
            return None
        return ValidatorSettings(locale=self.locale, fallback_locale=self.fallback_locale)

    def form_config(
        self,
        field_error: FieldErrorCallback | None = None,
        form_error: FormErrorCallback | None = None,
    ) -> FormConfig:
        return FormConfig(
            fields=self.fields_builder(),
            field_error=field_error,
            form_error=form_error,
            settings=self.settings(),
        )


def parse_form_definition(data: Any, source: Path | None = None) -> FormDefinition:
    """Build a FormDefinition from parsed YAML.

    Raises:
        FormDefinitionError: The data does not match the form schema
    """
    issues = validate_form_data(data, source)
    if issues:
        raise FormDefinitionError(
            f"Invalid form definition{f' in {source}' if source else ''}", issues
        )

    fields = [
        FieldConfig(
            name=name,
            label=field_data["label"],
            validators=[
                ValidatorConfig.from_yaml(v) for v in field_data.get("validators", [])
            ],
        )
        for name, field_data in data["fields"].items()
    ]
    return FormDefinition(
        name=data["form"],
        fields=fields,
        locale=data.get("locale"),
        fallback_locale=data.get("fallbackLocale"),
    )


def load_form_definition(path: Path) -> FormDefinition:
    """Load and validate a form definition YAML file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FormDefinitionError(f"Could not parse {path}: {e}") from e

    definition = parse_form_definition(data, path)
    logger.debug("Loaded form '%s' with %d field(s)", definition.name, len(definition.fields))
    return definition


def load_values(path: Path) -> dict[str, Any]:
    """Load a field name -> value mapping from a YAML (or JSON) file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FormDefinitionError(f"Could not parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FormDefinitionError(f"{path} must contain a mapping of field values")
    return {str(name): _as_form_value(value) for name, value in data.items()}


def _as_form_value(value: Any) -> Any:
    # Form controls only ever hold strings
    if value is None:
        return None
    if isinstance(value, list):
        return [str(v) for v in value if v is not None]
    return str(value)
