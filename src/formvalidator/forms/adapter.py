"""Form adapter boundary.

The attachment never touches form controls directly. It goes through a
FormAdapter, which reads current values, marks controls invalid, performs
the native submission and delivers submit/change/keyup events.

ControlFormAdapter is an in-memory implementation over FormControl
records. It reads values the way browsers expose them: checked
checkboxes contribute their value, selects their selected value, and
several controls sharing a name produce a list.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol

from formvalidator.validation.types import FieldValue, UnsupportedInputKindError

logger = logging.getLogger(__name__)

# Event names delivered by adapters
SUBMIT = "submit"
CHANGE = "change"
KEYUP = "keyup"
EDIT_EVENTS = (CHANGE, KEYUP)

EventHandler = Callable[[], None]


class FormAdapter(Protocol):
    """Protocol that form adapters must implement."""

    form: Any

    def read_values(self, names: Iterable[str]) -> dict[str, FieldValue]:
        """Read the current value of each named field.

        Raises:
            UnsupportedInputKindError: A control's value can't be read
        """
        ...

    def find_control(self, name: str) -> Any | None:
        """The first control for a field, or None if there is none."""
        ...

    def set_invalid(self, control: Any, invalid: bool) -> None:
        """Set or clear the control's invalid flag (aria-invalid)."""
        ...

    def submit(self) -> None:
        """Perform the form's native submission."""
        ...

    def on(self, event: str, handler: EventHandler) -> None:
        ...

    def off(self, event: str, handler: EventHandler) -> None:
        ...


@dataclass
class FormControl:
    """One control in a form.

    Attributes:
        name: Field name the control belongs to
        tag: Element kind ("input", "select", "textarea", ...)
        type: Input type for tag "input" ("text", "checkbox", "radio", ...)
        value: Current value (for checkboxes, the value submitted when checked)
        checked: Checkbox/radio state
        invalid: Rendered invalid flag
    """

    name: str
    tag: str = "input"
    type: str = "text"
    value: str = ""
    checked: bool = False
    invalid: bool = False


class ControlFormAdapter:
    """FormAdapter over a list of FormControl records."""

    def __init__(self, controls: Iterable[FormControl] = (), form: Any = None):
        self.controls = list(controls)
        self.form = form if form is not None else self
        self.submit_count = 0
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def controls_named(self, name: str) -> list[FormControl]:
        return [c for c in self.controls if c.name == name]

    def read_values(self, names: Iterable[str]) -> dict[str, FieldValue]:
        values: dict[str, FieldValue] = {}
        for name in names:
            read = [self._read_control(c) for c in self.controls_named(name)]
            if len(read) > 1:
                # Several controls: unchecked boxes drop out of the list
                values[name] = [v for v in read if v is not None]
            else:
                values[name] = read[0] if read else None
        return values

    def _read_control(self, control: FormControl) -> str | None:
        tag = control.tag.lower()
        if tag == "input":
            input_type = control.type.lower()
            if input_type == "checkbox":
                return control.value if control.checked else None
            if input_type == "radio":
                raise UnsupportedInputKindError(control.name, "radio")
            return control.value
        if tag == "select":
            return control.value
        # Unknown element; it has no readable value
        return None

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def find_control(self, name: str) -> FormControl | None:
        matches = self.controls_named(name)
        return matches[0] if matches else None

    def set_invalid(self, control: FormControl, invalid: bool) -> None:
        control.invalid = invalid

    def submit(self) -> None:
        logger.debug("Submitting form")
        self.submit_count += 1

    # -------------------------------------------------------------------------
    # Editing and events
    # -------------------------------------------------------------------------

    def on(self, event: str, handler: EventHandler) -> None:
        self._handlers[event].append(handler)

    def off(self, event: str, handler: EventHandler) -> None:
        if handler in self._handlers[event]:
            self._handlers[event].remove(handler)

    def emit(self, event: str) -> None:
        """Deliver an event to its subscribers."""
        for handler in list(self._handlers[event]):
            handler()

    def set_value(self, name: str, value: str, event: str = KEYUP) -> None:
        """Set a text-like control's value and fire an edit event."""
        control = self.find_control(name)
        if control is None:
            raise KeyError(name)
        control.value = value
        self.emit(event)

    def set_checked(self, name: str, value: str, checked: bool = True) -> None:
        """Check or uncheck the control with this name and value, firing change."""
        for control in self.controls_named(name):
            if control.value == value:
                control.checked = checked
                self.emit(CHANGE)
                return
        raise KeyError(f"{name}={value}")
