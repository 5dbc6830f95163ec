"""Property declarations."""

from dataclasses import dataclass
from typing import Optional

from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder
from ..core.keywords import Access
from ..core.naming import sanitize_identifier
from .base import Definition, optional_text, require_text


@dataclass(frozen=True)
class PropertyDefinition(Definition):
    """
    A property, rendered in one of three shapes.

    - read-only with a backing field: ``int Count => _count;``
    - writable with a backing field: explicit get/set reading and writing it
    - without a backing field: an auto-property, ``{ get; private set; }``
      when read-only
    """

    access: Access
    type: str
    identifier: str
    backing_field: Optional[str] = None
    read_only: bool = False

    def __post_init__(self):
        object.__setattr__(self, "type", require_text(self.type, "type"))
        identifier = sanitize_identifier(require_text(self.identifier, "identifier"))
        if not identifier:
            raise DefinitionError(f"identifier '{self.identifier}' has no legal characters")
        object.__setattr__(self, "identifier", identifier)
        backing_field = optional_text(self.backing_field, "backing_field")
        if backing_field is not None:
            backing_field = sanitize_identifier(backing_field)
            if not backing_field:
                raise DefinitionError(
                    f"backing field '{self.backing_field}' has no legal characters"
                )
        object.__setattr__(self, "backing_field", backing_field)
        object.__setattr__(self, "read_only", bool(self.read_only))

    @property
    def has_backing_field(self) -> bool:
        return self.backing_field is not None

    def write_to(self, builder: IndentStringBuilder) -> None:
        builder.append_indented(
            [builder.keyword(self.access), self.type, " ", self.identifier]
        )

        if self.read_only and self.has_backing_field:
            builder.append([" => ", self.backing_field, ";"])
        elif self.has_backing_field:
            builder.append(
                [
                    " { get { return ",
                    self.backing_field,
                    "; } set { ",
                    self.backing_field,
                    " = value; } }",
                ]
            )
        else:
            builder.append(" { get; ")
            if self.read_only:
                builder.append("private ")
            builder.append("set; }")

        builder.append_line()
