"""
C# keyword enums and their source text.

Every enum member maps to the literal text emitted in front of a
declaration, including the trailing space. The tables below are the only
place that knows keyword spelling.
"""

from enum import Enum
from typing import Dict, List, Mapping, Optional

from .errors import ScriptBuilderError


class KeywordError(ScriptBuilderError):
    """Exception raised when a keyword has no text in the lookup table."""

    pass


class Access(Enum):
    """Access modifiers."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PROTECTED_INTERNAL = "protected_internal"
    PRIVATE_PROTECTED = "private_protected"


class ClassKind(Enum):
    """Keywords in front of a type's name."""

    NONE = "none"  # rejected when a type is constructed

    INTERFACE = "interface"
    STRUCT = "struct"
    CLASS = "class"
    ABSTRACT_CLASS = "abstract_class"
    SEALED_CLASS = "sealed_class"
    STATIC_CLASS = "static_class"

    PARTIAL_INTERFACE = "partial_interface"
    PARTIAL_STRUCT = "partial_struct"
    PARTIAL_CLASS = "partial_class"
    ABSTRACT_PARTIAL_CLASS = "abstract_partial_class"
    SEALED_PARTIAL_CLASS = "sealed_partial_class"
    STATIC_PARTIAL_CLASS = "static_partial_class"


class MethodKind(Enum):
    """Keywords in front of a method's return type."""

    NONE = "none"
    STATIC = "static"
    ABSTRACT = "abstract"
    VIRTUAL = "virtual"
    OVERRIDE = "override"


KEYWORD_TEXT: Dict[Enum, str] = {
    Access.PUBLIC: "public ",
    Access.PRIVATE: "private ",
    Access.PROTECTED: "protected ",
    Access.INTERNAL: "internal ",
    Access.PROTECTED_INTERNAL: "protected internal ",
    Access.PRIVATE_PROTECTED: "private protected ",
    ClassKind.NONE: "",
    ClassKind.INTERFACE: "interface ",
    ClassKind.STRUCT: "struct ",
    ClassKind.CLASS: "class ",
    ClassKind.ABSTRACT_CLASS: "abstract class ",
    ClassKind.SEALED_CLASS: "sealed class ",
    ClassKind.STATIC_CLASS: "static class ",
    ClassKind.PARTIAL_INTERFACE: "partial interface ",
    ClassKind.PARTIAL_STRUCT: "partial struct ",
    ClassKind.PARTIAL_CLASS: "partial class ",
    ClassKind.ABSTRACT_PARTIAL_CLASS: "abstract partial class ",
    ClassKind.SEALED_PARTIAL_CLASS: "sealed partial class ",
    ClassKind.STATIC_PARTIAL_CLASS: "static partial class ",
    MethodKind.NONE: "",
    MethodKind.STATIC: "static ",
    MethodKind.ABSTRACT: "abstract ",
    MethodKind.VIRTUAL: "virtual ",
    MethodKind.OVERRIDE: "override ",
}

KEYWORD_ENUMS = (Access, ClassKind, MethodKind)


def keyword_text(value: Enum, table: Optional[Mapping[Enum, str]] = None) -> str:
    """
    Look up the source text for a keyword.

    Args:
        value: Enum member to resolve
        table: Lookup table to use instead of KEYWORD_TEXT

    Returns:
        Keyword text, including its trailing space (empty for NONE)

    Raises:
        KeywordError: If the table has no entry for value
    """
    lookup = KEYWORD_TEXT if table is None else table
    try:
        return lookup[value]
    except KeyError:
        raise KeywordError(f"No keyword text for {value!r}") from None


def missing_keywords(table: Mapping[Enum, str]) -> List[Enum]:
    """Return the keyword enum members a lookup table has no entry for."""
    return [member for enum in KEYWORD_ENUMS for member in enum if member not in table]


def parse_keyword(enum_type, name: str) -> Enum:
    """
    Resolve a keyword enum member from a loose name.

    Accepts member names and values in any case, with or without
    underscores or spaces ("AbstractClass", "abstract_class",
    "abstract class").

    Raises:
        KeywordError: If no member matches
    """
    if isinstance(name, enum_type):
        return name

    wanted = str(name).replace("_", "").replace(" ", "").lower()
    for member in enum_type:
        if member.name.replace("_", "").lower() == wanted:
            return member

    choices = ", ".join(m.value for m in enum_type)
    raise KeywordError(f"Unknown {enum_type.__name__} '{name}'. Expected one of: {choices}")
