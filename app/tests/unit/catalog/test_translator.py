"""Tests for catalog.translator module."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from jinja2 import ChainableUndefined, Environment

from catalog import (
    CompileState,
    ErrorPolicy,
    TemplateCompileError,
    TemplateRenderError,
    Translator,
    UnknownLocaleError,
    UnknownMessageError,
)
from tests.factories.catalog import make_catalog, make_translator


class CountingEnvironment(Environment):
    """Environment recording how many templates it compiles."""

    def __init__(self, delay: float = 0.0):
        super().__init__(undefined=ChainableUndefined, keep_trailing_newline=True)
        self.compile_count = 0
        self.delay = delay
        self._count_lock = threading.Lock()

    def from_string(self, source, *args, **kwargs):
        with self._count_lock:
            self.compile_count += 1
        time.sleep(self.delay)
        return super().from_string(source, *args, **kwargs)


@pytest.mark.unit
class TestTranslator:
    """Tests for Translator service."""

    def test_translate_renders_template(self, translator):
        """translate() substitutes template variables."""
        assert translator.translate("en-US", "Greeting", {"Name": "Ana"}) == "Hello, Ana"

    def test_translate_other_locale(self, translator):
        """translate() serves every loaded locale."""
        assert translator.translate("zh-CN", "Greeting", {"Name": "Ana"}) == "你好, Ana"

    def test_translate_nested_id(self, translator):
        """Nested ids are addressed by their dot path."""
        assert (
            translator.translate("en-US", "Order.NotFound.Solution", {"order_id": 7})
            == "Check order 7"
        )

    def test_plain_message_returned_verbatim(self):
        """Messages without the marker are returned byte-for-byte."""
        source = "Price: {amount} {% raw %} 100% done }}"
        translator = make_translator({"en-US": {"Plain": source}})

        assert translator.translate("en-US", "Plain") == source
        assert translator.translate("en-US", "Plain", {"amount": 3}) == source

    def test_plain_message_never_compiled(self):
        """The fast path creates no template state."""
        environment = CountingEnvironment()
        catalog = make_catalog({"en-US": {"Plain": "Order not found"}})
        translator = Translator(catalog, environment=environment)

        translator.translate("en-US", "Plain")

        assert environment.compile_count == 0
        assert catalog.get("en-US", "Plain").state is CompileState.UNCOMPILED

    def test_missing_variable_renders_empty(self):
        """Variables absent from the data render as empty text."""
        translator = make_translator({"en-US": {"Hi": "Hi {{ Missing }}"}})

        assert translator.translate("en-US", "Hi", {}) == "Hi "
        assert translator.translate("en-US", "Hi") == "Hi "

    def test_missing_nested_attribute_renders_empty(self):
        """Attributes of missing variables also render as empty text."""
        translator = make_translator({"en-US": {"Hi": "Hi {{ user.name }}!"}})

        assert translator.translate("en-US", "Hi", {}) == "Hi !"

    def test_none_value_renders_empty(self):
        """A None value renders like a missing one."""
        translator = make_translator({"en-US": {"Hi": "Hello, {{ Name }}"}})

        assert translator.translate("en-US", "Hi", {"Name": None}) == "Hello, "

    def test_leading_dot_placeholder(self):
        """The {{.Name}} spelling resolves the same variable as {{ Name }}."""
        translator = make_translator(
            {"en-US": {"Hi": "Hello, {{.Name}}", "Trim": "[{{- .Name -}}]"}}
        )

        assert translator.translate("en-US", "Hi", {"Name": "Ana"}) == "Hello, Ana"
        assert translator.translate("en-US", "Trim", {"Name": "Ana"}) == "[Ana]"
        assert translator.translate("en-US", "Hi", {}) == "Hello, "

    def test_leading_dot_keeps_attribute_access(self):
        """Dots inside an expression are still attribute lookups."""
        translator = make_translator(
            {"en-US": {"Hi": "{{ .user.name }}/{{ user.name }}"}}
        )

        data = {"user": {"name": "Bo"}}
        assert translator.translate("en-US", "Hi", data) == "Bo/Bo"

    def test_trailing_newline_preserved(self):
        """Rendered text is returned without trailing transformation."""
        translator = make_translator({"en-US": {"Line": "Hello {{ name }}\n"}})

        assert translator.translate("en-US", "Line", {"name": "Bo"}) == "Hello Bo\n"

    def test_no_html_escaping(self):
        """Values are substituted as-is."""
        translator = make_translator({"en-US": {"Tag": "{{ value }}"}})

        assert translator.translate("en-US", "Tag", {"value": "<b>&</b>"}) == "<b>&</b>"

    def test_render_is_idempotent(self, translator):
        """Rendering the same message and data twice gives the same text."""
        first = translator.translate("en-US", "Greeting", {"Name": "Ana"})
        second = translator.translate("en-US", "Greeting", {"Name": "Ana"})

        assert first == second

    def test_template_compiled_once(self):
        """Later renders reuse the compiled template."""
        environment = CountingEnvironment()
        translator = Translator(
            make_catalog({"en-US": {"Hi": "Hi {{ name }}"}}), environment=environment
        )

        for name in ("a", "b", "c"):
            assert translator.translate("en-US", "Hi", {"name": name}) == f"Hi {name}"

        assert environment.compile_count == 1

    def test_unknown_locale(self, translator):
        """translate() raises UnknownLocaleError for unloaded locales."""
        with pytest.raises(UnknownLocaleError) as exc_info:
            translator.translate("fr-FR", "Greeting")

        assert isinstance(exc_info.value, KeyError)
        assert "fr-FR" in str(exc_info.value)

    def test_unknown_message(self, translator):
        """translate() raises UnknownMessageError for undefined ids."""
        with pytest.raises(UnknownMessageError) as exc_info:
            translator.translate("en-US", "Nope")

        assert exc_info.value.context == {"locale": "en-US", "message_id": "Nope"}

    def test_compile_failure_not_retried(self):
        """A broken template fails the same way on every call."""
        environment = CountingEnvironment()
        catalog = make_catalog({"en-US": {"Broken": "Hello {{ name"}})
        translator = Translator(catalog, environment=environment)

        with pytest.raises(TemplateCompileError) as first:
            translator.translate("en-US", "Broken", {"name": "x"})
        with pytest.raises(TemplateCompileError) as second:
            translator.translate("en-US", "Broken", {"name": "x"})

        assert environment.compile_count == 1
        assert str(first.value) == str(second.value)
        assert catalog.get("en-US", "Broken").state is CompileState.FAILED

    def test_render_failure(self):
        """Runtime errors while rendering raise TemplateRenderError."""
        translator = make_translator({"en-US": {"Div": "{{ a // b }}"}})

        with pytest.raises(TemplateRenderError) as exc_info:
            translator.translate("en-US", "Div", {"a": 1, "b": 0})

        assert exc_info.value.context["data"] == {"a": 1, "b": 0}

    def test_exit_policy_terminates(self):
        """Under ErrorPolicy.EXIT lookup failures exit the process."""
        translator = make_translator(policy=ErrorPolicy.EXIT)

        with pytest.raises(SystemExit) as exc_info:
            translator.translate("en-US", "Nope")

        assert exc_info.value.code == 1
        assert isinstance(exc_info.value.__cause__, UnknownMessageError)

    def test_has_message(self, translator):
        """has_message() reports whether an id exists for a locale."""
        assert translator.has_message("en-US", "Greeting") is True
        assert translator.has_message("en-US", "Missing") is False
        assert translator.has_message("fr-FR", "Greeting") is False

    def test_available_locales(self, translator):
        """available_locales() lists the loaded locales."""
        assert translator.available_locales() == ["en-US", "zh-CN"]


@pytest.mark.unit
class TestTranslatorConcurrency:
    """Tests for compile-once behaviour under concurrent first use."""

    WORKERS = 16

    def _run_concurrently(self, func):
        barrier = threading.Barrier(self.WORKERS)

        def task(index):
            barrier.wait()
            return func(index)

        with ThreadPoolExecutor(max_workers=self.WORKERS) as executor:
            return list(executor.map(task, range(self.WORKERS)))

    def test_concurrent_first_use_compiles_once(self):
        """N concurrent first callers trigger exactly one compile."""
        environment = CountingEnvironment(delay=0.05)
        translator = Translator(
            make_catalog({"en-US": {"Greeting": "Hello, {{ Name }}"}}),
            environment=environment,
        )

        results = self._run_concurrently(
            lambda _: translator.translate("en-US", "Greeting", {"Name": "Ana"})
        )

        assert environment.compile_count == 1
        assert results == ["Hello, Ana"] * self.WORKERS

    def test_concurrent_first_use_with_different_data(self):
        """Concurrent callers each get their own data rendered."""
        environment = CountingEnvironment(delay=0.05)
        translator = Translator(
            make_catalog({"en-US": {"Item": "Item {{ n }}"}}),
            environment=environment,
        )

        results = self._run_concurrently(
            lambda i: translator.translate("en-US", "Item", {"n": i})
        )

        assert environment.compile_count == 1
        assert results == [f"Item {i}" for i in range(self.WORKERS)]

    def test_concurrent_compile_failure_seen_by_all(self):
        """All concurrent first callers observe the same compile failure."""
        environment = CountingEnvironment(delay=0.05)
        translator = Translator(
            make_catalog({"en-US": {"Broken": "{{ oops"}}), environment=environment
        )

        def call(_):
            try:
                translator.translate("en-US", "Broken")
            except TemplateCompileError as e:
                return str(e)
            return None

        results = self._run_concurrently(call)

        assert environment.compile_count == 1
        assert None not in results
        assert len(set(results)) == 1
