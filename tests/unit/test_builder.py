"""Unit tests for ScriptBuilder: full file rendering, caching and validation."""

from __future__ import annotations

import pytest

from script_builder import (
    Access,
    BuilderConfig,
    ClassKind,
    DefinitionError,
    FieldDefinition,
    IndentationDepthError,
    RenderError,
    ScriptBuilder,
    TemplateError,
    TypeDefinition,
)
from script_builder.core.keywords import KEYWORD_TEXT
from script_builder.core.templates import AUTO_GENERATED

FOO_BAR = (
    "namespace Foo\n"
    "{\n"
    "\tpublic class Bar\n"
    "\t{\n"
    "\t\tprivate int count;\n"
    "\n"
    "\t\tpublic void Reset()\n"
    "\t\t{\n"
    "\t\t\tcount = 0;\n"
    "\t\t}\n"
    "\t}\n"
    "}\n"
)


def test_renders_complete_file(foo_script: ScriptBuilder) -> None:
    assert foo_script.build() == FOO_BAR


def test_renders_with_spaces(foo_script: ScriptBuilder, spaces: BuilderConfig) -> None:
    assert foo_script.build(spaces) == FOO_BAR.replace("\t", "    ")


def test_two_space_indentation(foo_script: ScriptBuilder) -> None:
    config = BuilderConfig(use_tabs=False, indent_size=2)
    assert foo_script.build(config) == FOO_BAR.replace("\t", "  ")


def test_empty_namespace_block() -> None:
    assert ScriptBuilder("Game.Core").build() == "namespace Game.Core\n{\n}\n"


def test_usings_are_sorted_and_trimmed(bar_type: TypeDefinition) -> None:
    script = ScriptBuilder("Foo", ["UnityEngine", " System.Collections ", "", None, "System"])
    script.add_type(bar_type)
    assert script.usings == ["UnityEngine", "System.Collections", "System"]
    assert script.build() == (
        "using System;\n"
        "using System.Collections;\n"
        "using UnityEngine;\n"
        "\n" + FOO_BAR
    )


def test_types_are_separated_by_one_blank_line() -> None:
    script = ScriptBuilder("Foo")
    script.add_types(
        [
            TypeDefinition(Access.PUBLIC, ClassKind.CLASS, "A"),
            TypeDefinition(Access.INTERNAL, ClassKind.STRUCT, "B"),
            TypeDefinition(Access.PUBLIC, ClassKind.INTERFACE, "IC"),
        ]
    )
    assert script.build() == (
        "namespace Foo\n"
        "{\n"
        "\tpublic class A\n"
        "\t{\n"
        "\t}\n"
        "\n"
        "\tinternal struct B\n"
        "\t{\n"
        "\t}\n"
        "\n"
        "\tpublic interface IC\n"
        "\t{\n"
        "\t}\n"
        "}\n"
    )


@pytest.mark.parametrize("namespace", [None, "", "   "])
def test_missing_namespace(namespace) -> None:
    with pytest.raises(RenderError, match="cannot be empty"):
        ScriptBuilder(namespace).build()


@pytest.mark.parametrize("namespace", ["My Game", "Game-Core", "1Game", "namespace"])
def test_invalid_namespace(namespace: str) -> None:
    script = ScriptBuilder(namespace)
    with pytest.raises(RenderError, match="not a valid C# identifier"):
        script.build()
    assert not script.is_rendered


def test_str_caches_first_render(foo_script: ScriptBuilder) -> None:
    assert not foo_script.is_rendered
    first = str(foo_script)
    assert foo_script.is_rendered
    assert foo_script.to_string() is first


def test_build_without_config_returns_cache(foo_script: ScriptBuilder) -> None:
    first = foo_script.build()
    assert foo_script.build() is first


def test_build_rerenders_and_updates_cache(foo_script: ScriptBuilder, spaces: BuilderConfig) -> None:
    foo_script.build()
    spaced = foo_script.build(spaces)
    assert str(foo_script) == spaced
    assert "\t" not in str(foo_script)


def test_render_seals_script_and_types(foo_script: ScriptBuilder, bar_type: TypeDefinition) -> None:
    foo_script.build()
    assert bar_type.sealed
    with pytest.raises(DefinitionError):
        foo_script.add_type(TypeDefinition(Access.PUBLIC, ClassKind.CLASS, "Late"))
    with pytest.raises(DefinitionError):
        bar_type.add_field(FieldDefinition(Access.PRIVATE, "int", "late"))


def test_add_type_rejects_other_objects() -> None:
    with pytest.raises(DefinitionError, match="TypeDefinition"):
        ScriptBuilder("Foo").add_type("public class Bar {}")


def test_types_property_is_a_copy(foo_script: ScriptBuilder) -> None:
    foo_script.types.clear()
    assert len(foo_script.types) == 1


def test_keyword_table_can_be_replaced(bar_type: TypeDefinition) -> None:
    keywords = dict(KEYWORD_TEXT)
    keywords[Access.PUBLIC] = "internal "
    script = ScriptBuilder("Foo", keywords=keywords).add_type(bar_type)
    assert "\tinternal class Bar\n" in script.build()


def test_auto_generated_header(foo_script: ScriptBuilder) -> None:
    config = BuilderConfig(header_template=AUTO_GENERATED, header_context={"source": "foo.json"})
    assert foo_script.build(config) == (
        "// <auto-generated>\n"
        "//     This code was generated by script-builder.\n"
        "//     Source: foo.json\n"
        "//     Changes to this file may be lost when the code is regenerated.\n"
        "// </auto-generated>\n"
        "\n" + FOO_BAR
    )


def test_custom_header_template_sees_namespace() -> None:
    config = BuilderConfig(header_template="Types of {{ namespace }}")
    assert ScriptBuilder("Foo", config=config).build().startswith("// Types of Foo\n\nnamespace Foo\n")


def test_header_with_undefined_variable_fails() -> None:
    config = BuilderConfig(header_template="{{ author }}")
    with pytest.raises(TemplateError):
        ScriptBuilder("Foo", config=config).build()


def test_nesting_beyond_depth_table_fails() -> None:
    bar = TypeDefinition(Access.PUBLIC, ClassKind.CLASS, "Bar")
    bar.add_field(FieldDefinition(Access.PRIVATE, "int", "x"))
    with pytest.raises(IndentationDepthError):
        bar.build(indentation=7)


def test_non_string_namespace() -> None:
    with pytest.raises(RenderError, match="must be a string"):
        ScriptBuilder(42).build()


def test_non_string_using_is_rejected() -> None:
    with pytest.raises(DefinitionError, match="using"):
        ScriptBuilder("Foo", ["System", 5])
