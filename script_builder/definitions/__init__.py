"""
Definitions of C# declarations.

Each definition validates its input on construction and renders itself
through an IndentStringBuilder.
"""

from .base import Definition, write_attributes
from .parameter import ParameterDefinition
from .field import FieldDefinition
from .property import PropertyDefinition
from .constructor import ConstructorDefinition
from .method import MethodDefinition, VOID
from .indexer import IndexerDefinition
from .type_definition import MemberCategory, TypeDefinition

__all__ = [
    "Definition",
    "write_attributes",
    "ParameterDefinition",
    "FieldDefinition",
    "PropertyDefinition",
    "ConstructorDefinition",
    "MethodDefinition",
    "VOID",
    "IndexerDefinition",
    "MemberCategory",
    "TypeDefinition",
]
