"""Feature-level fixtures for message catalog tests.

Provides locale directories and translators for loading, validation and
rendering scenarios.
"""

import pytest

from catalog import Translator, load_catalog
from tests.factories.catalog import write_locale_file


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample locale files.

    Returns a directory structure like:
    - common.en-US.yml
    - common.zh-CN.yml
    - order.en-US.yml
    - order.zh-CN.yml
    """
    write_locale_file(
        tmp_path,
        "common",
        "en-US",
        {
            "Greeting": "Hello, {{ Name }}",
            "Farewell": "Goodbye",
        },
    )
    write_locale_file(
        tmp_path,
        "common",
        "zh-CN",
        {
            "Greeting": "你好, {{ Name }}",
            "Farewell": "再见",
        },
    )
    write_locale_file(
        tmp_path,
        "order",
        "en-US",
        {
            "Order": {
                "NotFound": {
                    "Description": "Order not found",
                    "Solution": "Check order {{ order_id }}",
                },
            },
        },
    )
    write_locale_file(
        tmp_path,
        "order",
        "zh-CN",
        {
            "Order": {
                "NotFound": {
                    "Description": "订单不存在",
                    "Solution": "请检查订单 {{ order_id }}",
                },
            },
        },
    )
    return tmp_path


@pytest.fixture
def loaded_catalog(temp_locales_dir):
    """Catalog loaded from temp_locales_dir and frozen."""
    catalog = load_catalog(temp_locales_dir)
    catalog.freeze()
    return catalog


@pytest.fixture
def translator(loaded_catalog):
    """Translator over loaded_catalog raising typed errors."""
    return Translator(loaded_catalog)
