"""Tests for umlgen.codegen.core.naming."""

from __future__ import annotations

import pytest

from umlgen.codegen.core.config import EmitterConfig, InvalidConfigurationError
from umlgen.codegen.core.naming import NameFormatter, format_type_name, indent_unit


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("count", "Count"),
        ("userName", "UserName"),
        ("Order", "Order"),
        ("x", "X"),
        ("_private", "_private"),
        ("éclair", "Éclair"),
        ("snake_case_name", "Snake_case_name"),
    ],
)
def test_format_type_name_uppercases_first_character_only(raw: str, expected: str) -> None:
    assert format_type_name(raw) == expected


def test_format_type_name_is_idempotent() -> None:
    once = format_type_name("invoiceLine")
    assert format_type_name(once) == once


def test_format_type_name_empty_string() -> None:
    assert format_type_name("") == ""


def test_indent_unit_uses_tab_when_requested() -> None:
    assert indent_unit(EmitterConfig(use_tabs=True, indent_spaces=2)) == "\t"


@pytest.mark.parametrize("spaces", [0, 2, 4, 8])
def test_indent_unit_uses_configured_spaces(spaces: int) -> None:
    assert indent_unit(EmitterConfig(indent_spaces=spaces)) == " " * spaces


def test_indent_unit_rejects_negative_width() -> None:
    config = EmitterConfig()
    config.indent_spaces = -1

    with pytest.raises(InvalidConfigurationError):
        indent_unit(config)


def test_name_formatter_applies_prefix_to_type_names_only() -> None:
    names = NameFormatter("LC")

    assert names.type_name("order") == "LCOrder"
    assert names.accessor_fragment("count") == "Count"


def test_name_formatter_without_prefix() -> None:
    assert NameFormatter().type_name("order") == "Order"
