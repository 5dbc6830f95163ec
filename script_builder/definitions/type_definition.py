"""
Type declarations and their member collections.

A TypeDefinition owns its members and writes them in a fixed category
order: fields, properties, constructors, methods, indexers. Each non-empty
category after the first one that produced output is preceded by a single
blank line.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder
from ..core.keywords import Access, ClassKind
from ..core.naming import is_valid_type_name
from ..logging_config import get_logger
from .base import Definition, optional_text, require_text, trimmed_tuple, write_attributes
from .constructor import ConstructorDefinition
from .field import FieldDefinition
from .indexer import IndexerDefinition
from .method import MethodDefinition
from .property import PropertyDefinition

logger = get_logger(__name__)


class MemberCategory(Enum):
    """Member kinds in the order they are rendered."""

    FIELDS = "fields"
    PROPERTIES = "properties"
    CONSTRUCTORS = "constructors"
    METHODS = "methods"
    INDEXERS = "indexers"

    @property
    def definition_class(self) -> type:
        return _CATEGORY_CLASSES[self]


_CATEGORY_CLASSES = {
    MemberCategory.FIELDS: FieldDefinition,
    MemberCategory.PROPERTIES: PropertyDefinition,
    MemberCategory.CONSTRUCTORS: ConstructorDefinition,
    MemberCategory.METHODS: MethodDefinition,
    MemberCategory.INDEXERS: IndexerDefinition,
}


class TypeDefinition(Definition):
    """A class, struct or interface declaration with its members."""

    default_indentation = 1

    def __init__(
        self,
        access: Access,
        kind: ClassKind,
        identifier: str,
        base_type: Optional[str] = None,
        interfaces: Optional[Iterable[str]] = None,
        attributes: Optional[Iterable[str]] = None,
    ):
        """
        Initialize a type definition.

        Args:
            access: Access modifier of the type
            kind: Type keyword (class, struct, partial class, ...)
            identifier: Type name; may be qualified or generic
            base_type: Optional base class, rendered before the interfaces
            interfaces: Optional implemented interface names
            attributes: Optional attributes, each rendered on its own line

        Raises:
            DefinitionError: If a name is blank or not a valid type name
        """
        identifier = require_text(identifier, "identifier")
        if not is_valid_type_name(identifier):
            raise DefinitionError(f"identifier '{identifier}' is not a valid C# identifier")

        if kind is None or kind == ClassKind.NONE:
            raise DefinitionError(f"type '{identifier}' needs a class kind")

        base_type = optional_text(base_type, "base_type")
        if base_type is not None and not is_valid_type_name(base_type):
            raise DefinitionError(f"base type '{base_type}' is not a valid C# type name")

        interfaces = trimmed_tuple(interfaces, "interfaces")
        for interface in interfaces or ():
            if not is_valid_type_name(interface):
                raise DefinitionError(
                    f"'{interface}' is not a valid C# class or interface name"
                )

        self._access = access
        self._kind = kind
        self._identifier = identifier
        self._base_type = base_type
        self._interfaces: Optional[Tuple[str, ...]] = interfaces
        self._attributes: Optional[Tuple[str, ...]] = trimmed_tuple(attributes, "attributes")
        self._members: Dict[MemberCategory, List[Definition]] = {
            category: [] for category in MemberCategory
        }
        self._sealed = False

    def __repr__(self) -> str:
        return (
            f"TypeDefinition({self._access.name}, {self._kind.name}, "
            f"{self._identifier!r}, members={self.member_count})"
        )

    @property
    def access(self) -> Access:
        return self._access

    @property
    def kind(self) -> ClassKind:
        return self._kind

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def base_type(self) -> Optional[str]:
        return self._base_type

    @property
    def interfaces(self) -> Optional[Tuple[str, ...]]:
        return self._interfaces

    @property
    def attributes(self) -> Optional[Tuple[str, ...]]:
        return self._attributes

    @property
    def fields(self) -> Tuple[FieldDefinition, ...]:
        return tuple(self._members[MemberCategory.FIELDS])

    @property
    def properties(self) -> Tuple[PropertyDefinition, ...]:
        return tuple(self._members[MemberCategory.PROPERTIES])

    @property
    def constructors(self) -> Tuple[ConstructorDefinition, ...]:
        return tuple(self._members[MemberCategory.CONSTRUCTORS])

    @property
    def methods(self) -> Tuple[MethodDefinition, ...]:
        return tuple(self._members[MemberCategory.METHODS])

    @property
    def indexers(self) -> Tuple[IndexerDefinition, ...]:
        return tuple(self._members[MemberCategory.INDEXERS])

    @property
    def member_count(self) -> int:
        return sum(len(members) for members in self._members.values())

    @property
    def sealed(self) -> bool:
        """True once the type has been handed to a rendered script."""
        return self._sealed

    def seal(self) -> None:
        """Stop accepting new members."""
        self._sealed = True

    # Aggregation

    def _add(self, category: MemberCategory, members: Iterable[Definition]) -> "TypeDefinition":
        if self._sealed:
            raise DefinitionError(
                f"Type '{self._identifier}' is sealed, members can no longer be added"
            )

        members = list(members)
        for member in members:
            if not isinstance(member, category.definition_class):
                raise DefinitionError(
                    f"Expected {category.definition_class.__name__}, got {type(member).__name__}"
                )

        if category == MemberCategory.CONSTRUCTORS:
            for member in members:
                member.check_attachable(self)
            for member in members:
                member.attach(self)

        self._members[category].extend(members)
        return self

    def add_field(self, field: FieldDefinition) -> "TypeDefinition":
        return self._add(MemberCategory.FIELDS, [field])

    def add_fields(self, fields: Iterable[FieldDefinition]) -> "TypeDefinition":
        return self._add(MemberCategory.FIELDS, fields)

    def add_property(self, prop: PropertyDefinition) -> "TypeDefinition":
        return self._add(MemberCategory.PROPERTIES, [prop])

    def add_properties(self, props: Iterable[PropertyDefinition]) -> "TypeDefinition":
        return self._add(MemberCategory.PROPERTIES, props)

    def add_constructor(self, ctor: ConstructorDefinition) -> "TypeDefinition":
        return self._add(MemberCategory.CONSTRUCTORS, [ctor])

    def add_constructors(self, ctors: Iterable[ConstructorDefinition]) -> "TypeDefinition":
        return self._add(MemberCategory.CONSTRUCTORS, ctors)

    def add_method(self, method: MethodDefinition) -> "TypeDefinition":
        return self._add(MemberCategory.METHODS, [method])

    def add_methods(self, methods: Iterable[MethodDefinition]) -> "TypeDefinition":
        return self._add(MemberCategory.METHODS, methods)

    def add_indexer(self, indexer: IndexerDefinition) -> "TypeDefinition":
        return self._add(MemberCategory.INDEXERS, [indexer])

    def add_indexers(self, indexers: Iterable[IndexerDefinition]) -> "TypeDefinition":
        return self._add(MemberCategory.INDEXERS, indexers)

    # Rendering

    def write_to(self, builder: IndentStringBuilder) -> None:
        write_attributes(builder, self._attributes)
        builder.append_indented(
            [builder.keyword(self._access), builder.keyword(self._kind), self._identifier]
        )

        supertypes = [self._base_type] if self._base_type else []
        supertypes.extend(self._interfaces or ())
        if supertypes:
            builder.append([" : ", ", ".join(supertypes)])
        builder.append_line()

        builder.open_block()
        self._write_members(builder)
        builder.close_block()

    def _write_members(self, builder: IndentStringBuilder) -> None:
        has_output = False
        for category in MemberCategory:
            members = self._members[category]
            if not members:
                continue

            if has_output:
                builder.append_line()
            for member in members:
                member.write_to(builder)
            has_output = True

        logger.debug("Rendered type %s with %d members", self._identifier, self.member_count)
