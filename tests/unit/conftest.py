"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from script_builder import (
    Access,
    BuilderConfig,
    ClassKind,
    FieldDefinition,
    MethodDefinition,
    MethodKind,
    ScriptBuilder,
    TypeDefinition,
)


@pytest.fixture
def spaces() -> BuilderConfig:
    """Four-space indentation."""
    return BuilderConfig(use_tabs=False)


@pytest.fixture
def bar_type() -> TypeDefinition:
    """public class Bar with a private field and a Reset method."""
    bar = TypeDefinition(Access.PUBLIC, ClassKind.CLASS, "Bar")
    bar.add_field(FieldDefinition(Access.PRIVATE, "int", "count"))
    bar.add_method(
        MethodDefinition(Access.PUBLIC, MethodKind.NONE, "void", "Reset", body_lines=["count = 0;"])
    )
    return bar


@pytest.fixture
def foo_script(bar_type: TypeDefinition) -> ScriptBuilder:
    """namespace Foo containing Bar."""
    script = ScriptBuilder("Foo")
    script.add_type(bar_type)
    return script
