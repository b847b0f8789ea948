"""Tests for the in-memory form adapter."""

import pytest

from formvalidator.forms.adapter import CHANGE, ControlFormAdapter, FormControl
from formvalidator.validation.types import UnsupportedInputKindError


def make_adapter() -> ControlFormAdapter:
    return ControlFormAdapter(
        [
            FormControl("name", value="Ada"),
            FormControl("bio", tag="textarea", value="ignored"),
            FormControl("country", tag="select", value="fr"),
            FormControl("agree", type="checkbox", value="yes"),
            FormControl("interests", type="checkbox", value="music", checked=True),
            FormControl("interests", type="checkbox", value="sport"),
            FormControl("interests", type="checkbox", value="books", checked=True),
        ]
    )


class TestReadValues:
    def test_text_input(self):
        assert make_adapter().read_values(["name"]) == {"name": "Ada"}

    def test_select(self):
        assert make_adapter().read_values(["country"]) == {"country": "fr"}

    def test_unchecked_single_checkbox(self):
        assert make_adapter().read_values(["agree"]) == {"agree": None}

    def test_checked_single_checkbox(self):
        adapter = make_adapter()
        adapter.find_control("agree").checked = True
        assert adapter.read_values(["agree"]) == {"agree": "yes"}

    def test_checkbox_group_drops_unchecked(self):
        assert make_adapter().read_values(["interests"]) == {"interests": ["music", "books"]}

    def test_unknown_element_reads_none(self):
        assert make_adapter().read_values(["bio"]) == {"bio": None}

    def test_missing_field_reads_none(self):
        assert make_adapter().read_values(["nope"]) == {"nope": None}

    def test_input_type_case_insensitive(self):
        adapter = ControlFormAdapter([FormControl("agree", tag="INPUT", type="CheckBox", value="y")])
        assert adapter.read_values(["agree"]) == {"agree": None}

    def test_radio_is_unsupported(self):
        adapter = ControlFormAdapter(
            [
                FormControl("size", type="radio", value="s"),
                FormControl("size", type="radio", value="m", checked=True),
            ]
        )
        with pytest.raises(UnsupportedInputKindError) as exc_info:
            adapter.read_values(["size"])
        assert exc_info.value.kind == "radio"


class TestEvents:
    def test_on_emit_off(self):
        adapter = make_adapter()
        calls = []

        def handler():
            calls.append("change")

        adapter.on(CHANGE, handler)
        adapter.emit(CHANGE)
        adapter.off(CHANGE, handler)
        adapter.emit(CHANGE)
        assert calls == ["change"]

    def test_set_value_fires_edit(self):
        adapter = make_adapter()
        calls = []
        adapter.on("keyup", lambda: calls.append(adapter.read_values(["name"])["name"]))
        adapter.set_value("name", "Grace")
        assert calls == ["Grace"]

    def test_set_checked(self):
        adapter = make_adapter()
        adapter.set_checked("interests", "sport")
        assert adapter.read_values(["interests"]) == {"interests": ["music", "sport", "books"]}

    def test_set_value_unknown_field(self):
        with pytest.raises(KeyError):
            make_adapter().set_value("nope", "x")

    def test_submit_counts(self):
        adapter = make_adapter()
        adapter.submit()
        assert adapter.submit_count == 1
