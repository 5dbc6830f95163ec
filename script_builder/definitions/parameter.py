"""Method, constructor and indexer parameters."""

from dataclasses import dataclass

from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder
from ..core.naming import sanitize_identifier
from .base import Definition, require_text


@dataclass(frozen=True)
class ParameterDefinition(Definition):
    """A single ``type identifier`` parameter, always rendered inline."""

    type: str
    identifier: str

    def __post_init__(self):
        object.__setattr__(self, "type", require_text(self.type, "type"))
        identifier = sanitize_identifier(require_text(self.identifier, "identifier"))
        if not identifier:
            raise DefinitionError(f"identifier '{self.identifier}' has no legal characters")
        object.__setattr__(self, "identifier", identifier)

    def write_to(self, builder: IndentStringBuilder) -> None:
        builder.append([self.type, " ", self.identifier])
