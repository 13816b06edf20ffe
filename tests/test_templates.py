"""Tests for umlgen.codegen.core.templates."""

from __future__ import annotations

from pathlib import Path

import pytest

from umlgen.codegen.core.templates import TemplateError, create_template_engine
from umlgen.codegen.languages.dart import generator as dart_generator

BUILTIN_DIR = Path(dart_generator.__file__).parent / "templates"


def test_builtin_templates_are_listed() -> None:
    engine = create_template_engine(BUILTIN_DIR)

    names = engine.list_templates()

    assert "class_declaration.dart.j2" in names
    assert "enum_declaration.dart.j2" in names


def test_type_name_filter() -> None:
    engine = create_template_engine()
    engine.add_template("line.j2", "{{ name | type_name }}")

    assert engine.render_template("line.j2", {"name": "order"}) == "Order"


def test_memory_template_shadows_files(tmp_path: Path) -> None:
    (tmp_path / "greet.j2").write_text("from file", encoding="utf-8")
    engine = create_template_engine(tmp_path)
    assert engine.render_template("greet.j2", {}) == "from file"

    engine.add_template("greet.j2", "from memory")

    assert engine.render_template("greet.j2", {}) == "from memory"


def test_first_directory_wins(tmp_path: Path) -> None:
    first, second = tmp_path / "first", tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "t.j2").write_text("first", encoding="utf-8")
    (second / "t.j2").write_text("second", encoding="utf-8")
    (second / "only.j2").write_text("only", encoding="utf-8")

    engine = create_template_engine(None, first, second)

    assert engine.render_template("t.j2", {}) == "first"
    assert engine.render_template("only.j2", {}) == "only"


def test_missing_template() -> None:
    engine = create_template_engine()

    assert not engine.template_exists("absent.j2")
    with pytest.raises(TemplateError, match="not found"):
        engine.render_template("absent.j2", {})


def test_undefined_variable_is_an_error() -> None:
    engine = create_template_engine()
    engine.add_template("t.j2", "{{ missing }}")

    with pytest.raises(TemplateError, match="Failed to render"):
        engine.render_template("t.j2", {})
