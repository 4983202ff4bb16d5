from __future__ import annotations

import pytest

from utilkit import (
    byte_length,
    camel_case,
    capitalize,
    escape_html,
    kebab_case,
    pad,
    pascal_case,
    random_string,
    snake_case,
    template,
    trim,
    truncate,
    unescape_html,
)
from utilkit.core.types import PadSide


class TestCaseConversion:
    """命名风格转换"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hello-world", "helloWorld"),
            ("hello_world", "helloWorld"),
            ("Hello World", "helloWorld"),
            ("hello", "hello"),
        ],
    )
    def test_camel_case(self, text, expected):
        assert camel_case(text) == expected

    def test_pascal_case(self):
        assert pascal_case("hello-world") == "HelloWorld"
        assert pascal_case("user_name_id") == "UserNameId"

    def test_kebab_case(self):
        assert kebab_case("helloWorld") == "hello-world"
        assert kebab_case("Hello World") == "hello-world"
        assert kebab_case("hello_world") == "hello-world"

    def test_snake_case(self):
        assert snake_case("helloWorld") == "hello_world"
        assert snake_case("hello-world") == "hello_world"
        assert snake_case("Hello World") == "hello_world"

    def test_capitalize(self):
        assert capitalize("hELLO") == "Hello"
        assert capitalize("") == ""


def test_truncate():
    assert truncate("hello world", 5) == "hello..."
    assert truncate("hello", 5) == "hello"
    assert truncate("hello world", 5, "~") == "hello~"


def test_trim():
    assert trim("  hi \n") == "hi"
    assert trim("--hi--", "-") == "hi"


class TestPad:
    def test_pad_start_by_default(self):
        assert pad("5", 3, "0") == "005"

    def test_pad_end(self):
        assert pad("ab", 5, "*", PadSide.END) == "ab***"

    def test_pad_both_puts_extra_on_right(self):
        assert pad("ab", 6, "*", "both") == "**ab**"
        assert pad("ab", 5, "*", "both") == "*ab**"

    def test_multi_char_fill_is_cut(self):
        assert pad("x", 6, "ab") == "ababax"

    def test_long_text_unchanged(self):
        assert pad("hello", 3) == "hello"


def test_random_string():
    value = random_string(16)
    assert len(value) == 16
    assert value.isalnum()

    assert set(random_string(50, "ab")) <= {"a", "b"}
    assert random_string(0) == ""


def test_template_keeps_missing_placeholders():
    assert template("Hello {{name}}, age {{age}}", {"name": "Tom", "age": 3}) == "Hello Tom, age 3"
    assert template("Hi {{who}}", {}) == "Hi {{who}}"


def test_escape_html():
    raw = "<a href=\"x\">Tom's & Jerry</a>"
    escaped = escape_html(raw)

    assert escaped == "&lt;a href=&quot;x&quot;&gt;Tom&#39;s &amp; Jerry&lt;/a&gt;"
    assert unescape_html(escaped) == raw


def test_unescape_is_single_pass():
    assert unescape_html("&amp;lt;") == "&lt;"


def test_byte_length_counts_utf8():
    assert byte_length("abc") == 3
    assert byte_length("中a") == 4
    assert byte_length("") == 0
