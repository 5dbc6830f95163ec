"""Indexer declarations."""

from dataclasses import dataclass
from typing import Optional

from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder
from ..core.keywords import Access
from .base import Definition, optional_text, require_text
from .parameter import ParameterDefinition


def _statement(expression: str) -> str:
    return expression if expression.endswith(";") else f"{expression};"


@dataclass(frozen=True)
class IndexerDefinition(Definition):
    """An indexer, ``T this[IndexType index]``, with expression-bodied accessors."""

    access: Access
    return_type: str
    index: ParameterDefinition
    getter: str
    setter: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "return_type", require_text(self.return_type, "return_type"))
        if not isinstance(self.index, ParameterDefinition):
            raise DefinitionError("index must be a ParameterDefinition")
        object.__setattr__(self, "getter", require_text(self.getter, "getter"))
        object.__setattr__(self, "setter", optional_text(self.setter, "setter"))

    def write_to(self, builder: IndentStringBuilder) -> None:
        builder.append_indented([builder.keyword(self.access), self.return_type, " this["])
        self.index.write_to(builder)
        builder.append_line("]")

        builder.open_block()
        builder.append_indented_line(["get => ", _statement(self.getter)])
        if self.setter is not None:
            builder.append_indented_line(["set => ", _statement(self.setter)])
        builder.close_block()
