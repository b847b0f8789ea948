"""
config/schema.py — JSON Schema validation for form definition YAML files.

Usage:
    from formvalidator.config.schema import validate_form_file

    issues = validate_form_file(Path("forms/signup.yaml"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

logger = logging.getLogger(__name__)

_SCHEMAS_DIR = Path(__file__).parent / "schemas"
FORM_SCHEMA = "form.schema.json"


@dataclass
class SchemaIssue:
    """A single schema finding for a form definition."""

    file: Path | None
    message: str
    path: str = ""  # e.g. "fields/email/validators[1]"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        where = self.file if self.file is not None else "<form definition>"
        return f"{where}{loc}: {self.message}"


def load_schema(name: str = FORM_SCHEMA) -> dict[str, Any]:
    with (_SCHEMAS_DIR / name).open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def validate_form_data(data: Any, file: Path | None = None) -> list[SchemaIssue]:
    """Validate an already-parsed form definition.

    Returns:
        A list of SchemaIssue objects (empty on success).
    """
    if data is None:
        return [SchemaIssue(file=file, message="File is empty or contains only whitespace")]

    validator = Draft202012Validator(load_schema())
    return [
        SchemaIssue(file=file, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    ]


def validate_form_file(yaml_path: Path) -> list[SchemaIssue]:
    """Parse and validate a form definition YAML file."""
    try:
        with yaml_path.open() as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [SchemaIssue(file=yaml_path, message=f"YAML parse error: {exc}")]

    issues = validate_form_data(raw, yaml_path)
    if issues:
        logger.debug("%s: %d schema issue(s)", yaml_path, len(issues))
    return issues
