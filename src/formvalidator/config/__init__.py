"""YAML form definitions."""

from formvalidator.config.loader import (
    FieldConfig,
    FormDefinition,
    ValidatorConfig,
    load_form_definition,
    load_values,
    parse_form_definition,
)
from formvalidator.config.schema import SchemaIssue, validate_form_data, validate_form_file

__all__ = [
    "FieldConfig",
    "FormDefinition",
    "SchemaIssue",
    "ValidatorConfig",
    "load_form_definition",
    "load_values",
    "parse_form_definition",
    "validate_form_data",
    "validate_form_file",
]
