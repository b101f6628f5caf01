"""Localized error-code registry.

Error codes are resolved through the message catalog by convention:
<ErrorCode>.Description, <ErrorCode>.Solution and <ErrorCode>.ErrorLink.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel

from core.logging import get_module_logger
from catalog.translator import Translator

logger = get_module_logger()

INTERNAL_ERROR = "InternalError"
TOO_MANY_REQUESTS = "TooManyRequests"
MESSAGE_NOT_FOUND = "MessageNotFound"

COMMON_ERRORS = (INTERNAL_ERROR, TOO_MANY_REQUESTS, MESSAGE_NOT_FOUND)


class ErrorBody(BaseModel):
    """JSON body of an error response."""

    error_code: str
    description: str
    solution: str
    error_link: str
    error_details: Any = ""


class HTTPError(Exception):
    """Error carrying an HTTP status code and a localized error body.

    Attributes:
        http_code: HTTP status code of the response.
        language: Locale the body is rendered in.
        body: Localized error body.
    """

    def __init__(
        self,
        http_code: int,
        language: str,
        body: ErrorBody,
        translator: Translator,
    ):
        super().__init__(body.error_code)
        self.http_code = http_code
        self.language = language
        self.body = body
        self.description_data: Dict[str, Any] = {}
        self.solution_data: Dict[str, Any] = {}
        self._translator = translator

    def __str__(self) -> str:
        return self.body.model_dump_json()

    def _translate(self, field: str, data: Optional[Mapping[str, Any]]) -> str:
        return self._translator.translate(
            self.language, f"{self.body.error_code}.{field}", data
        )

    def with_description(self, data: Mapping[str, Any]) -> "HTTPError":
        """Re-render the description with template data."""
        self.description_data = dict(data)
        self.body.description = self._translate("Description", data)
        return self

    def with_solution(self, data: Mapping[str, Any]) -> "HTTPError":
        """Re-render the solution with template data."""
        self.solution_data = dict(data)
        self.body.solution = self._translate("Solution", data)
        return self

    def with_error_details(self, details: Any) -> "HTTPError":
        """Attach free-form error details to the body."""
        self.body.error_details = details
        return self


class ErrorRegistry:
    """Registry of error codes pre-translated in every supported language.

    Attributes:
        languages: Supported locale tags.
        default_language: Locale used for unsupported languages.
    """

    def __init__(
        self,
        translator: Translator,
        languages: Sequence[str],
        default_language: str,
    ):
        if default_language not in languages:
            raise ValueError(f"invalid lang: {default_language}")
        self._translator = translator
        self.languages = list(languages)
        self.default_language = default_language
        self._errors: Dict[str, Dict[str, ErrorBody]] = {}
        self.register(COMMON_ERRORS)

    def __contains__(self, error_code: object) -> bool:
        return error_code in self._errors

    def register(self, error_codes: Iterable[str]) -> None:
        """Pre-translate error codes in every supported language.

        Args:
            error_codes: Error codes to add.

        Raises:
            ValueError: If an error code is already registered.
        """
        for error_code in error_codes:
            if error_code in self._errors:
                raise ValueError(f"duplicate errorCode: {error_code}")
            self._errors[error_code] = {
                lang: ErrorBody(
                    error_code=error_code,
                    description=self._translator.translate(
                        lang, f"{error_code}.Description"
                    ),
                    solution=self._translator.translate(
                        lang, f"{error_code}.Solution"
                    ),
                    error_link=self._translator.translate(
                        lang, f"{error_code}.ErrorLink"
                    ),
                )
                for lang in self.languages
            }
            logger.debug("error_code_registered", error_code=error_code)

    def new_http_error(
        self, http_code: int, error_code: str, language: Optional[str] = None
    ) -> HTTPError:
        """Create an HTTPError for a registered error code.

        Args:
            http_code: HTTP status code.
            error_code: Registered error code.
            language: Requested locale; unsupported or missing values use
                the default language.

        Raises:
            KeyError: If error_code is not registered.
        """
        if language not in self.languages:
            language = self.default_language

        errors = self._errors.get(error_code)
        if errors is None:
            raise KeyError(f"missing errorCode: {error_code}")

        return HTTPError(
            http_code=http_code,
            language=language,
            body=errors[language].model_copy(),
            translator=self._translator,
        )
