"""Translation service for dependency injection.

Provides a class-based interface to the message catalog for easier DI
and testing.
"""

from typing import Any, List, Mapping, Optional

from catalog.factory import register_catalog
from catalog.translator import Translator


class TranslationService:
    """Class-based translation service.

    A thin facade over a Translator created by register_catalog().

    Usage:
        from api.dependencies import TranslationServiceDep

        @router.get("/message")
        def get_message(translation: TranslationServiceDep):
            return {"message": translation.translate("en-US", "Greeting")}
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                If not provided, registers the default catalog.
        """
        self._translator = translator or register_catalog()

    def translate(
        self,
        locale: str,
        message_id: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Return the text of a message, rendered with data if templated."""
        return self._translator.translate(locale, message_id, data)

    def has_message(self, locale: str, message_id: str) -> bool:
        return self._translator.has_message(locale, message_id)

    def get_available_locales(self) -> List[str]:
        return self._translator.available_locales()

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
