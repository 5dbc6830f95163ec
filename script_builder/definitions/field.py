"""Field declarations."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder
from ..core.keywords import Access
from ..core.naming import sanitize_identifier
from .base import Definition, require_text, trimmed_tuple, write_attributes


@dataclass(frozen=True)
class FieldDefinition(Definition):
    """
    A field such as ``[SerializeField] private int count;``.

    Attributes are written compactly on the same line as the declaration.
    """

    access: Access
    type: str
    identifier: str
    attributes: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "type", require_text(self.type, "type"))
        identifier = sanitize_identifier(require_text(self.identifier, "identifier"))
        if not identifier:
            raise DefinitionError(f"identifier '{self.identifier}' has no legal characters")
        object.__setattr__(self, "identifier", identifier)
        object.__setattr__(self, "attributes", trimmed_tuple(self.attributes, "attributes"))

    def write_to(self, builder: IndentStringBuilder) -> None:
        builder.append_indentation()
        write_attributes(builder, self.attributes, compact=True)
        builder.append_line(
            [builder.keyword(self.access), self.type, " ", self.identifier, ";"]
        )
