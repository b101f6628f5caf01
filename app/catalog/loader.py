"""Locale file loading for the message catalog.

Reads a directory of <module>.<locale>.yml files, flattens each nested
document into dot-separated message ids and fills a Catalog.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

import yaml

from core.logging import get_module_logger
from catalog.errors import (
    CatalogParseError,
    CatalogReadError,
    LocaleFileNameError,
    UnsupportedFormatError,
)
from catalog.models import Catalog, parse_locale_tag

logger = get_module_logger()


class _Pairs(list):
    """Mapping entries in document order, repeated keys included."""


class _PairsLoader(yaml.SafeLoader):
    """SafeLoader that builds mappings as _Pairs instead of dicts."""


def _construct_pairs(loader: _PairsLoader, node: yaml.MappingNode) -> _Pairs:
    loader.flatten_mapping(node)
    return _Pairs(loader.construct_pairs(node, deep=True))


_PairsLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_pairs
)


def _entries(value: Any) -> Optional[Iterable[Tuple[Any, Any]]]:
    if isinstance(value, _Pairs):
        return value
    if isinstance(value, Mapping):
        return value.items()
    return None


def flatten_document(document: Any, prefix: str = "") -> Iterator[Tuple[str, str]]:
    """Flatten a nested document into (message id, source) pairs.

    String leaves become messages, nested mappings extend the dot-joined
    path. Pairs are yielded in document order.

    Args:
        document: Parsed mapping, either a dict or loader pairs.
        prefix: Path of the enclosing mapping.

    Yields:
        (message_id, source) tuples.

    Raises:
        UnsupportedFormatError: If a key is not a string or a leaf is
            neither a string nor a mapping.
    """
    entries = _entries(document)
    if entries is None:
        raise UnsupportedFormatError(
            f"unsupported data format {type(document).__name__}: {document!r}",
            message_id=prefix,
            value_type=type(document).__name__,
        )

    for key, value in entries:
        if not isinstance(key, str):
            raise UnsupportedFormatError(
                f"unsupported key format {type(key).__name__}: {key!r}",
                message_id=prefix,
                value_type=type(key).__name__,
            )
        path = f"{prefix}.{key}" if prefix else key

        if isinstance(value, str):
            yield path, value
        elif _entries(value) is not None:
            yield from flatten_document(value, path)
        else:
            raise UnsupportedFormatError(
                f"unsupported data format {type(value).__name__}: {value!r}",
                message_id=path,
                value_type=type(value).__name__,
            )


class CatalogLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load(self, catalog: Optional[Catalog] = None) -> Catalog:
        """Load every locale file into a catalog.

        Args:
            catalog: Catalog to fill. A new one is created when omitted.

        Returns:
            The filled catalog.

        Raises:
            CatalogLoadError: On any structural problem in the files.
        """


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML locale files named <module>.<locale>.yml.

    Several modules may contribute to the same locale. Two-segment files
    with a source extension (e.g. __init__.py) are skipped.

    Attributes:
        locales_dir: Directory holding the locale files.
    """

    extension = "yml"
    source_extensions = ("py",)

    def __init__(self, locales_dir: Path):
        self.locales_dir = Path(locales_dir)

    def parse_filename(self, filename: str) -> Optional[str]:
        """Extract the locale tag from a locale filename.

        Args:
            filename: Base name of the file.

        Returns:
            The locale tag, or None if the file should be skipped.

        Raises:
            LocaleFileNameError: If the name is not <module>.<locale>.yml.
            InvalidLocaleError: If the locale segment is not a language tag.
        """
        parts = filename.split(".")
        if len(parts) == 2 and parts[1] in self.source_extensions:
            return None
        if len(parts) != 3 or parts[2] != self.extension:
            raise LocaleFileNameError(
                f"locale file {filename} filename format error, correct "
                f"format is <module>.<language>.{self.extension}",
                filename=filename,
            )
        return parse_locale_tag(parts[1])

    def load(self, catalog: Optional[Catalog] = None) -> Catalog:
        catalog = catalog if catalog is not None else Catalog()

        try:
            paths = sorted(self.locales_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise CatalogReadError(
                f"load locale dir {self.locales_dir} failed: {e}",
                locales_dir=str(self.locales_dir),
            ) from e

        for path in paths:
            if not path.is_file():
                logger.debug("locale_entry_skipped", path=str(path))
                continue

            locale = self.parse_filename(path.name)
            if locale is None:
                logger.debug("locale_file_skipped", path=str(path))
                continue

            self.load_file(catalog, path, locale)

        logger.info(
            "catalog_loaded",
            locales_dir=str(self.locales_dir),
            locales=catalog.locales(),
        )
        return catalog

    def load_file(self, catalog: Catalog, path: Path, locale: str) -> int:
        """Load one locale file into the catalog.

        Args:
            catalog: Catalog to fill.
            path: Locale file path.
            locale: Locale tag taken from the filename.

        Returns:
            Number of messages added.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogReadError(
                f"load locale file {path} failed: {e}", path=str(path)
            ) from e

        try:
            document = yaml.load(text, Loader=_PairsLoader)
        except yaml.YAMLError as e:
            raise CatalogParseError(
                f"unmarshal locale file {path} failed: {e}", path=str(path)
            ) from e

        catalog.ensure_locale(locale)
        if document is None:
            logger.warning("locale_file_empty", path=str(path), locale=locale)
            return 0

        count = 0
        for message_id, source in flatten_document(document):
            catalog.add(locale, message_id, source)
            count += 1

        logger.info(
            "locale_file_loaded",
            path=str(path),
            locale=locale,
            message_count=count,
        )
        return count


def load_catalog(locales_dir: Path, catalog: Optional[Catalog] = None) -> Catalog:
    """Load a locale directory into a catalog.

    Args:
        locales_dir: Directory holding <module>.<locale>.yml files.
        catalog: Catalog to fill. A new one is created when omitted.

    Returns:
        The filled catalog.
    """
    return YAMLCatalogLoader(locales_dir).load(catalog)
