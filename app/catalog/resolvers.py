"""Locale resolution for incoming requests.

Maps the X-Language request header onto one of the supported locales.
"""

from typing import Optional, Sequence

from core.logging import get_module_logger
from catalog.errors import InvalidLocaleError
from catalog.models import parse_locale_tag

logger = get_module_logger()


class LocaleResolver:
    """Resolves a request locale against the supported locales.

    A header that is empty, malformed, lists more than one language, or
    names an unsupported language resolves to the default locale.
    """

    def __init__(self, supported_locales: Sequence[str], default_locale: str):
        """Initialize locale resolver.

        Args:
            supported_locales: Locale tags the application serves.
            default_locale: Locale used when the header gives no usable one.

        Raises:
            ValueError: If default_locale is not one of supported_locales.
        """
        if default_locale not in supported_locales:
            raise ValueError(
                f"Default locale {default_locale} is not supported: "
                f"{list(supported_locales)}"
            )
        self.supported_locales = list(supported_locales)
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def match(self, locale_str: str) -> Optional[str]:
        """Return the supported locale equal to locale_str, ignoring case."""
        wanted = locale_str.replace("_", "-").lower()
        for locale in self.supported_locales:
            if locale.lower() == wanted:
                return locale
        return None

    def resolve_from_header(self, x_language: Optional[str]) -> str:
        """Resolve locale from the X-Language header value.

        Args:
            x_language: Header value, e.g. "en-US".

        Returns:
            The matching supported locale, or the default locale.
        """
        if not x_language or not x_language.strip():
            return self.default_locale

        ranges = [part for part in x_language.split(",") if part.strip()]
        if len(ranges) != 1:
            self.log.warning("invalid_lang", lang=x_language)
            return self.default_locale

        tag = ranges[0].split(";")[0].strip()
        try:
            parse_locale_tag(tag)
        except InvalidLocaleError:
            self.log.warning("invalid_lang", lang=x_language)
            return self.default_locale

        return self.match(tag) or self.default_locale

    def resolve_from_string(self, locale_str: str) -> str:
        """Parse and validate a locale string.

        Args:
            locale_str: Locale string (e.g. "en-US").

        Returns:
            The matching supported locale.

        Raises:
            ValueError: If locale_str is not a supported locale.
        """
        locale = self.match(locale_str)
        if locale is None:
            self.log.warning("unsupported_locale_string", locale_str=locale_str)
            raise ValueError(f"Unsupported locale: {locale_str}")
        return locale
