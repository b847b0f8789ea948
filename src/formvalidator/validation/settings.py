"""Settings consulted by the validation engine.

ValidatorSettings is immutable. Attachments either hold their own
settings or follow the process-wide defaults, which `set_locale` swaps
out for every such attachment at once.
"""

from dataclasses import dataclass, replace

from formvalidator.validation.messages import DEFAULT_LOCALE
from formvalidator.validation.types import LocaleLike


@dataclass(frozen=True)
class ValidatorSettings:
    """Locale policy for rendering messages.

    Attributes:
        locale: Locale whose templates are rendered
        fallback_locale: Used when a validator lacks the active locale;
            None keeps missing templates fatal
    """

    locale: LocaleLike = DEFAULT_LOCALE
    fallback_locale: LocaleLike | None = None

    def with_locale(self, locale: LocaleLike) -> "ValidatorSettings":
        return replace(self, locale=locale)


_default_settings = ValidatorSettings()


def get_default_settings() -> ValidatorSettings:
    return _default_settings


def set_default_settings(settings: ValidatorSettings) -> None:
    global _default_settings
    _default_settings = settings


def get_locale() -> LocaleLike:
    """The process-wide locale."""
    return _default_settings.locale


def set_locale(locale: LocaleLike) -> None:
    """Change the locale for all subsequent evaluations using default settings."""
    set_default_settings(_default_settings.with_locale(locale))


def reset_default_settings() -> None:
    """Restore the default locale policy. Primarily for testing."""
    set_default_settings(ValidatorSettings())
