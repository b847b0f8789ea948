"""Tests for YAML form definitions."""

from pathlib import Path

import pytest
import yaml

from formvalidator.config.loader import (
    ValidatorConfig,
    load_form_definition,
    load_values,
    parse_form_definition,
)
from formvalidator.config.schema import validate_form_data, validate_form_file
from formvalidator.forms.adapter import SUBMIT, ControlFormAdapter, FormControl
from formvalidator.forms.attachment import FormValidator
from formvalidator.validation.engine import ValidationEngine
from formvalidator.validation.registry import default_registry
from formvalidator.validation.settings import ValidatorSettings
from formvalidator.validation.types import FormDefinitionError, Locale, UnknownValidatorError


SIGNUP = {
    "form": "signup",
    "fields": {
        "name": {
            "label": "Name",
            "validators": ["required", {"type": "minLength", "args": [2]}],
        },
        "email": {"label": "Email", "validators": ["required", "email"]},
        "interests": {
            "label": "Interests",
            "validators": [{"type": "minSelections", "params": {"min": 2}}],
        },
    },
}


def _write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data, sort_keys=False))
    return path


class TestValidatorConfig:
    def test_from_name(self):
        assert ValidatorConfig.from_yaml("email") == ValidatorConfig(type="email")

    def test_from_mapping(self):
        config = ValidatorConfig.from_yaml({"type": "minLength", "args": [3]})
        assert config.type == "minLength"
        assert config.args == [3]
        assert config.params == {}


class TestSchema:
    def test_valid_definition(self):
        assert validate_form_data(SIGNUP) == []

    def test_missing_label(self):
        data = {"form": "f", "fields": {"name": {"validators": ["required"]}}}
        issues = validate_form_data(data)
        assert len(issues) == 1
        assert "label" in issues[0].message
        assert issues[0].path == "fields/name"

    def test_empty_document(self):
        issues = validate_form_data(None)
        assert "empty" in issues[0].message

    def test_bad_validator_entry(self):
        data = {"form": "f", "fields": {"name": {"label": "Name", "validators": [42]}}}
        issues = validate_form_data(data)
        assert issues
        assert issues[0].path == "fields/name/validators[0]"

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("form: [unclosed")
        issues = validate_form_file(path)
        assert "YAML parse error" in issues[0].message


class TestLoadFormDefinition:
    def test_load(self, tmp_path):
        definition = load_form_definition(_write_yaml(tmp_path / "signup.yaml", SIGNUP))
        assert definition.name == "signup"
        assert [f.name for f in definition.fields] == ["name", "email", "interests"]
        assert definition.settings() is None

    def test_invalid_raises_with_issues(self, tmp_path):
        path = _write_yaml(tmp_path / "bad.yaml", {"fields": {}})
        with pytest.raises(FormDefinitionError) as exc_info:
            load_form_definition(path)
        assert exc_info.value.issues

    def test_locale_pins_settings(self):
        definition = parse_form_definition({**SIGNUP, "locale": "fr", "fallbackLocale": "en"})
        settings = definition.settings()
        assert settings.locale == "fr"
        assert settings.fallback_locale == "en"

    def test_build_fields_evaluates(self):
        definition = parse_form_definition(SIGNUP)
        config = definition.build_fields(default_registry().snapshot())
        result = ValidationEngine().evaluate(
            config, {"name": "A", "email": "a@example.com", "interests": ["x"]}
        )
        assert result.errors == {
            "name": "Name must be at least 2 characters long",
            "interests": "You must choose at least 2 items",
        }

    def test_unknown_validator(self):
        data = {"form": "f", "fields": {"name": {"label": "Name", "validators": ["nope"]}}}
        definition = parse_form_definition(data)
        with pytest.raises(UnknownValidatorError):
            definition.build_fields(default_registry().snapshot())

    def test_form_config_attaches(self):
        definition = parse_form_definition(SIGNUP)
        adapter = ControlFormAdapter(
            [
                FormControl("name", value="Ada"),
                FormControl("email", value="ada@example.com"),
                FormControl("interests", type="checkbox", value="a", checked=True),
                FormControl("interests", type="checkbox", value="b", checked=True),
            ]
        )
        FormValidator.init(adapter, definition.form_config())
        adapter.emit(SUBMIT)
        assert adapter.submit_count == 1


class TestLoadValues:
    def test_scalars_become_strings(self, tmp_path):
        path = _write_yaml(tmp_path / "values.yaml", {"zip": 12345, "tags": [1, None, "b"], "x": None})
        assert load_values(path) == {"zip": "12345", "tags": ["1", "b"], "x": None}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("")
        assert load_values(path) == {}

    def test_non_mapping(self, tmp_path):
        path = _write_yaml(tmp_path / "values.yaml", ["a", "b"])
        with pytest.raises(FormDefinitionError):
            load_values(path)


class TestFormConfigSettings:
    FRENCH = {
        "form": "f",
        "locale": "fr",
        "fields": {"name": {"label": "Nom", "validators": ["required"]}},
    }

    def test_file_locale_reaches_attachment(self):
        definition = parse_form_definition(self.FRENCH)
        adapter = ControlFormAdapter([FormControl("name", value="")])
        validator = FormValidator.init(adapter, definition.form_config())
        adapter.emit(SUBMIT)
        assert validator.errors == {"name": "Nom est obligatoire"}

    def test_explicit_settings_win_over_file(self):
        definition = parse_form_definition(self.FRENCH)
        adapter = ControlFormAdapter([FormControl("name", value="")])
        validator = FormValidator.init(
            adapter, definition.form_config(), settings=ValidatorSettings(locale=Locale.EN)
        )
        adapter.emit(SUBMIT)
        assert validator.errors == {"name": "Nom is required"}

    def test_no_file_locale_follows_process_locale(self):
        definition = parse_form_definition(SIGNUP)
        assert definition.form_config().settings is None


class TestFactoryArguments:
    def test_missing_argument(self):
        data = {"form": "f", "fields": {"name": {"label": "Name", "validators": ["minLength"]}}}
        definition = parse_form_definition(data)
        with pytest.raises(FormDefinitionError) as exc_info:
            definition.build_fields(default_registry().snapshot())
        assert "'minLength' on field 'name'" in str(exc_info.value)

    def test_bad_pattern(self):
        data = {
            "form": "f",
            "fields": {"zip": {"label": "Zip", "validators": [{"type": "pattern", "args": ["[0-9"]}]}},
        }
        definition = parse_form_definition(data)
        with pytest.raises(FormDefinitionError) as exc_info:
            definition.build_fields(default_registry().snapshot())
        assert "'pattern' on field 'zip'" in str(exc_info.value)

    def test_unparseable_values_file(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("name: [unclosed")
        with pytest.raises(FormDefinitionError):
            load_values(path)
