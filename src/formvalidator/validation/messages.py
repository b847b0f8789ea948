"""Message formatting for validation errors.

Templates use `{key}` placeholders, e.g. "{label} must be at least {min}
characters long". Only the first occurrence of each placeholder is
replaced; a template repeating `{min}` keeps the second one verbatim.
"""

from typing import Any, Mapping

from formvalidator.validation.types import (
    Locale,
    LocaleLike,
    MissingTemplateError,
    locale_code,
)


class MessageFormatter:
    """Renders message templates and picks the template for a locale."""

    def render(self, template: str, substitutions: Mapping[str, Any]) -> str:
        """Substitute values into a template.

        Args:
            template: Message template with {key} placeholders
            substitutions: Key -> value; values are passed through str()

        Returns:
            Message with the first occurrence of each known placeholder replaced
        """
        message = template
        for key, value in substitutions.items():
            message = message.replace("{" + key + "}", str(value), 1)
        return message

    def template_for(
        self,
        messages: Mapping[Any, str],
        locale: LocaleLike,
        fallback: LocaleLike | None = None,
    ) -> str:
        """Look up the template for a locale.

        Keys in `messages` may be Locale members or plain codes.

        Args:
            messages: The validator's templates
            locale: Active locale
            fallback: Locale to use when the active one has no template;
                None means a missing template is an error

        Raises:
            MissingTemplateError: No template for the locale (or fallback)
        """
        by_code = {locale_code(k): v for k, v in messages.items()}

        template = by_code.get(locale_code(locale))
        if template is None and fallback is not None:
            template = by_code.get(locale_code(fallback))
        if template is None:
            raise MissingTemplateError(locale, sorted(by_code))
        return template


DEFAULT_LOCALE = Locale.EN
