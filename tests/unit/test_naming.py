"""Unit tests for identifier validation and sanitization."""

from __future__ import annotations

import logging

import pytest

from script_builder.core.naming import (
    CSHARP_KEYWORDS,
    IdentifierSanitizer,
    get_default_sanitizer,
    is_valid_identifier,
    is_valid_type_name,
    replace_illegal_chars,
    sanitize_identifier,
)


@pytest.mark.parametrize("name", ["count", "_count", "Count2", "@class", "a_b_c", "X"])
def test_valid_identifiers_are_unchanged(name: str) -> None:
    assert is_valid_identifier(name)
    assert sanitize_identifier(name) == name


def test_sanitize_blank_returns_none() -> None:
    assert sanitize_identifier(None) is None
    assert sanitize_identifier("") is None
    assert sanitize_identifier("   ") is None


def test_sanitize_trims() -> None:
    assert sanitize_identifier("  count ") == "count"


def test_sanitize_replaces_illegal_characters() -> None:
    assert sanitize_identifier("my-field name") == "my_field_name"
    assert sanitize_identifier("value!") == "value"


def test_sanitize_strips_replacement_at_both_ends() -> None:
    assert sanitize_identifier("-hp-") == "hp"
    assert sanitize_identifier("9lives") == "lives"


def test_sanitize_escapes_keywords() -> None:
    assert sanitize_identifier("class") == "@class"
    assert sanitize_identifier("namespace") == "@namespace"
    assert sanitize_identifier("-int-") == "@int"


def test_sanitized_result_is_legal() -> None:
    for raw in ["a b", "x.y", "hello world!", "ünïcode", "a<b>", "(value)", "123", "1 2", "4-x"]:
        result = sanitize_identifier(raw)
        assert is_valid_identifier(result), raw


def test_sanitize_logs_warning_when_changed(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="script_builder"):
        sanitize_identifier("bad name")
    assert any("bad_name" in r.getMessage() for r in caplog.records)


def test_sanitize_does_not_warn_for_valid(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="script_builder"):
        sanitize_identifier("goodName")
    assert not caplog.records


@pytest.mark.parametrize("name", ["", "1abc", "a-b", "a b", "class", "int", "a.b", "List<int>"])
def test_invalid_identifiers(name: str) -> None:
    assert not is_valid_identifier(name)


def test_digit_allowed_after_first_char() -> None:
    assert is_valid_identifier("a1")
    assert not is_valid_identifier("1a")


def test_namespace_mode_allows_dots() -> None:
    assert is_valid_identifier("Game.Core", allow_namespaces=True)
    assert not is_valid_identifier("Game.Core")


def test_generic_mode_allows_angle_brackets() -> None:
    assert is_valid_identifier("List<T>", allow_generics=True)
    assert not is_valid_identifier("List<T>", allow_namespaces=True)


def test_type_name_allows_qualified_generics() -> None:
    assert is_valid_type_name("System.Collections.Generic.List<T>")
    assert not is_valid_type_name("Dictionary<K, V>")


def test_keywords_are_rejected_in_every_mode() -> None:
    for keyword in ["class", "void", "string"]:
        assert keyword in CSHARP_KEYWORDS
        assert not is_valid_type_name(keyword)


def test_replace_illegal_chars_keeps_legal_text() -> None:
    assert replace_illegal_chars("abc_1") == "abc_1"


def test_custom_sanitizer_replacement_and_keywords() -> None:
    sanitizer = IdentifierSanitizer(reserved_words={"foo"}, replacement="x")
    assert sanitizer.replace_illegal_chars("a-b") == "axb"
    assert sanitizer.sanitize("foo") == "@foo"
    assert sanitizer.sanitize("class") == "class"


def test_custom_sanitizer_rejects_long_replacement() -> None:
    with pytest.raises(ValueError):
        IdentifierSanitizer(replacement="__")


def test_default_sanitizer_is_shared() -> None:
    sanitizer = get_default_sanitizer()
    assert sanitizer is get_default_sanitizer()
    assert sanitizer.reserved_words == CSHARP_KEYWORDS


def test_sanitize_never_starts_with_digit() -> None:
    assert sanitize_identifier("123") == "_23"
    assert sanitize_identifier("1 2") == "_2"
    assert sanitize_identifier("4-x") == "x"
