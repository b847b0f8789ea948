"""Visibility state machine for computed errors.

    PRISTINE --SUBMIT--> SUBMIT_ATTEMPTED
    PRISTINE --EDIT---> PRISTINE
    SUBMIT_ATTEMPTED --*--> SUBMIT_ATTEMPTED

Evaluation runs on every event; this controller only decides whether its
result is handed to the rendering boundary.
"""

import logging

from formvalidator.validation.types import FormEvent, VisibilityState

logger = logging.getLogger(__name__)


class VisibilityController:
    """Tracks whether a submission has been attempted."""

    def __init__(self) -> None:
        self.state = VisibilityState.PRISTINE

    @property
    def submit_attempted(self) -> bool:
        return self.state is VisibilityState.SUBMIT_ATTEMPTED

    def transition(self, event: FormEvent) -> VisibilityState:
        """Apply an event; must be called before the event's evaluation."""
        if event is FormEvent.SUBMIT and self.state is VisibilityState.PRISTINE:
            logger.debug("First submit attempt; errors are now visible")
            self.state = VisibilityState.SUBMIT_ATTEMPTED
        return self.state

    def should_render(self) -> bool:
        """True when evaluation results should reach the form adapter."""
        return self.submit_attempted
