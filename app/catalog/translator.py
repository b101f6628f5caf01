"""Translation service for looking up and rendering catalog messages.

Messages without the template marker are returned as-is. Messages with
it are compiled once with Jinja2 on first use and the compiled template
is reused for every later render.
"""

import re
from typing import Any, List, Mapping, Optional

from jinja2 import ChainableUndefined, Environment, Template
from jinja2.ext import Extension

from core.logging import get_module_logger
from catalog.errors import (
    TemplateRenderError,
    TranslationError,
    UnknownLocaleError,
    UnknownMessageError,
)
from catalog.models import Catalog, Message
from catalog.policy import ErrorPolicy, report

logger = get_module_logger()


class LeadingDotExtension(Extension):
    """Accept ``{{.Name}}`` as a spelling of ``{{ Name }}``.

    Only a dot that directly opens a variable expression is dropped.
    Attribute access such as ``{{ user.name }}`` is untouched.
    """

    _leading_dot = re.compile(r"(\{\{-?\s*)\.(?=[A-Za-z_])")

    def preprocess(
        self, source: str, name: Optional[str], filename: Optional[str] = None
    ) -> str:
        return self._leading_dot.sub(r"\1", source)


def _finalize(value: Any) -> Any:
    return "" if value is None else value


def create_environment() -> Environment:
    """Create the Jinja2 environment used to compile messages.

    Undefined variables, attributes of them and ``None`` values render as
    empty text.
    """
    return Environment(
        undefined=ChainableUndefined,
        autoescape=False,
        keep_trailing_newline=True,
        finalize=_finalize,
        extensions=[LeadingDotExtension],
    )


class Translator:
    """Service resolving (locale, message id) pairs to rendered text.

    The catalog must be fully loaded and validated before the translator
    serves its first call. translate() is safe to call from any number
    of threads.

    Attributes:
        environment: Jinja2 environment compiling message templates.
        policy: How lookup and render failures are reported.
    """

    def __init__(
        self,
        catalog: Catalog,
        environment: Optional[Environment] = None,
        policy: ErrorPolicy = ErrorPolicy.RAISE,
    ):
        self._catalog = catalog
        self.environment = environment or create_environment()
        self.policy = policy

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def translate(
        self,
        locale: str,
        message_id: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Return the text of a message, rendered with data if templated.

        Args:
            locale: Locale tag (e.g. "en-US").
            message_id: Dot-separated message id.
            data: Values for the template's variables. Missing variables
                render as empty text.

        Returns:
            The message text.

        Raises:
            UnknownLocaleError: If no messages exist for locale.
            UnknownMessageError: If message_id is not defined for locale.
            TemplateCompileError: If the message is not a valid template.
            TemplateRenderError: If rendering the template fails.
        """
        try:
            message = self._lookup(locale, message_id)
            if not message.is_template:
                return message.source
            return self._render(message, data)
        except TranslationError as e:
            report(e, self.policy)

    def has_message(self, locale: str, message_id: str) -> bool:
        """Check if message_id is defined for locale."""
        return self._catalog.get(locale, message_id) is not None

    def available_locales(self) -> List[str]:
        """Return the loaded locale tags."""
        return self._catalog.locales()

    def _lookup(self, locale: str, message_id: str) -> Message:
        if locale not in self._catalog:
            raise UnknownLocaleError(
                f"the localizer of {locale} is not exist", locale=locale
            )
        message = self._catalog.get(locale, message_id)
        if message is None:
            raise UnknownMessageError(
                f"the messageId {message_id} in localizer {locale} is not exist",
                locale=locale,
                message_id=message_id,
            )
        return message

    def _compile(self, message: Message) -> Template:
        def compile_fn(source: str) -> Template:
            template = self.environment.from_string(source)
            logger.debug(
                "template_compiled",
                locale=message.locale,
                message_id=message.message_id,
            )
            return template

        return message.compiled(compile_fn)

    def _render(self, message: Message, data: Optional[Mapping[str, Any]]) -> str:
        template = self._compile(message)
        try:
            return template.render(dict(data or {}))
        except Exception as e:  # pylint: disable=broad-except
            raise TemplateRenderError(
                f"messageId {message.message_id} in localizer {message.locale} "
                f"is incorrect, failed to execute the message: {e}",
                locale=message.locale,
                message_id=message.message_id,
                source=message.source,
                data=dict(data or {}),
            ) from e
