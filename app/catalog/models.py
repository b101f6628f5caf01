"""Catalog models for the message catalog.

Defines the per-locale message table and the message objects whose
compiled templates are filled in lazily and at most once.
"""

import threading
from types import MappingProxyType
from enum import Enum
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError as BabelUnknownLocaleError
from jinja2 import Template

from catalog.errors import (
    CatalogFrozenError,
    DuplicateMessageError,
    EmptyMessageError,
    InvalidLocaleError,
    TemplateCompileError,
)

TEMPLATE_MARKER = "{{"


class CompileState(str, Enum):
    """Lifecycle of a message's compiled template slot."""

    UNCOMPILED = "uncompiled"
    COMPILING = "compiling"
    COMPILED = "compiled"
    FAILED = "failed"


class Message:
    """A single localized message owned by one (locale, message id) pair.

    The raw source never changes. The compiled template slot moves from
    UNCOMPILED to either COMPILED or FAILED exactly once, under the
    message's own lock.

    Attributes:
        locale: Locale tag the message belongs to.
        message_id: Dot-separated message identifier.
        source: Raw template source.
    """

    __slots__ = (
        "locale",
        "message_id",
        "source",
        "_lock",
        "_state",
        "_template",
        "_compile_error",
    )

    def __init__(self, locale: str, message_id: str, source: str):
        self.locale = locale
        self.message_id = message_id
        self.source = source
        self._lock = threading.Lock()
        self._state = CompileState.UNCOMPILED
        self._template: Optional[Template] = None
        self._compile_error: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"Message(locale={self.locale!r}, message_id={self.message_id!r}, "
            f"state={self._state.value})"
        )

    @property
    def is_template(self) -> bool:
        """Whether the source contains the template marker."""
        return TEMPLATE_MARKER in self.source

    @property
    def state(self) -> CompileState:
        return self._state

    def compiled(self, compile_fn: Callable[[str], Template]) -> Template:
        """Return the compiled template, compiling it on first use.

        Concurrent first callers block on the message lock while one of
        them compiles. A failed compile is never retried: every caller
        gets a TemplateCompileError with the same message.

        Args:
            compile_fn: Turns the raw source into a template.

        Returns:
            The compiled template.

        Raises:
            TemplateCompileError: If the source could not be compiled.
        """
        # The template is published before the state flips to COMPILED.
        if self._state is CompileState.COMPILED:
            return self._template  # type: ignore[return-value]

        with self._lock:
            if self._state is CompileState.UNCOMPILED:
                self._state = CompileState.COMPILING
                try:
                    self._template = compile_fn(self.source)
                except BaseException as e:  # pylint: disable=broad-except
                    self._compile_error = str(e) or type(e).__name__
                    self._state = CompileState.FAILED
                    if not isinstance(e, Exception):
                        raise
                else:
                    self._state = CompileState.COMPILED

        if self._state is CompileState.FAILED:
            raise TemplateCompileError(
                f"messageId {self.message_id} in locale {self.locale} is "
                f"incorrect, failed to parse the message: {self._compile_error}",
                locale=self.locale,
                message_id=self.message_id,
                source=self.source,
                reason=self._compile_error,
            )
        return self._template  # type: ignore[return-value]


class Catalog:
    """Locale tag -> message id -> Message store.

    Built by the loader, checked by the validator, then frozen. Once
    frozen no message ids are added; only the compiled template slots of
    individual messages change.
    """

    def __init__(self):
        self._locales: Dict[str, Dict[str, Message]] = {}
        self._frozen = False

    def __contains__(self, locale: object) -> bool:
        return locale in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting new messages."""
        self._frozen = True

    def add(self, locale: str, message_id: str, source: str) -> Message:
        """Add a message to a locale.

        Args:
            locale: Locale tag.
            message_id: Dot-separated message identifier.
            source: Raw template source.

        Returns:
            The new Message.

        Raises:
            CatalogFrozenError: If the catalog has been frozen.
            EmptyMessageError: If source is the empty string.
            DuplicateMessageError: If message_id already exists for locale.
        """
        if self._frozen:
            raise CatalogFrozenError(
                f"catalog is frozen, cannot add messageId {message_id}",
                locale=locale,
                message_id=message_id,
            )
        if source == "":
            raise EmptyMessageError(
                f"messageId {message_id} is empty string",
                locale=locale,
                message_id=message_id,
            )

        messages = self._locales.setdefault(locale, {})
        existing = messages.get(message_id)
        if existing is not None:
            raise DuplicateMessageError(
                f"messageId {message_id} already exist, old data: "
                f"{existing.source}, new data: {source}",
                locale=locale,
                message_id=message_id,
                old_data=existing.source,
                new_data=source,
            )

        message = Message(locale, message_id, source)
        messages[message_id] = message
        return message

    def ensure_locale(self, locale: str) -> None:
        """Register a locale even if it ends up with no messages."""
        if locale not in self._locales:
            if self._frozen:
                raise CatalogFrozenError(
                    f"catalog is frozen, cannot add locale {locale}",
                    locale=locale,
                )
            self._locales[locale] = {}

    def get(self, locale: str, message_id: str) -> Optional[Message]:
        """Return the message for locale and id, or None if absent."""
        return self._locales.get(locale, {}).get(message_id)

    def locales(self) -> List[str]:
        """Return locale tags in load order."""
        return list(self._locales)

    def message_ids(self, locale: str) -> List[str]:
        """Return message ids of a locale in load order."""
        return list(self._locales.get(locale, {}))

    def messages(self, locale: str) -> Mapping[str, Message]:
        """Return a read-only view of the message table of a locale."""
        return MappingProxyType(self._locales.get(locale, {}))


def parse_locale_tag(tag: str) -> str:
    """Validate a language tag such as "en-US" or "zh-CN".

    Args:
        tag: Hyphen-separated language tag.

    Returns:
        The tag, unchanged.

    Raises:
        InvalidLocaleError: If Babel cannot parse the tag.
    """
    try:
        BabelLocale.parse(tag, sep="-")
    except (ValueError, TypeError, BabelUnknownLocaleError) as e:
        raise InvalidLocaleError(
            f"invalid locale tag {tag!r}: {e}", locale=tag
        ) from e
    return tag
