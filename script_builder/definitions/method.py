"""Method declarations."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder
from ..core.keywords import Access, MethodKind
from ..core.naming import is_valid_identifier
from .base import (
    Definition,
    lines_tuple,
    optional_text,
    require_text,
    write_body,
    write_parameters,
)
from .parameter import ParameterDefinition

VOID = "void"


@dataclass(frozen=True)
class MethodDefinition(Definition):
    """
    A method with a body block.

    Unlike other identifiers, the method name is not repaired: an invalid
    name is rejected.
    """

    access: Access
    kind: MethodKind
    return_type: Optional[str]
    name: str
    parameters: Optional[Tuple[ParameterDefinition, ...]] = None
    body_lines: Tuple[str, ...] = ()

    def __post_init__(self):
        name = require_text(self.name, "name")
        if not is_valid_identifier(name):
            raise DefinitionError(f"'{name}' is not a valid C# identifier")
        object.__setattr__(self, "name", name)

        if self.kind is None:
            object.__setattr__(self, "kind", MethodKind.NONE)

        return_type = optional_text(self.return_type, "return_type") or VOID
        object.__setattr__(self, "return_type", return_type)

        if self.parameters is not None:
            parameters = tuple(self.parameters)
            for parameter in parameters:
                if not isinstance(parameter, ParameterDefinition):
                    raise DefinitionError(
                        f"method parameters must be ParameterDefinition, got {parameter!r}"
                    )
            object.__setattr__(self, "parameters", parameters)
        object.__setattr__(self, "body_lines", lines_tuple(self.body_lines))

    def write_to(self, builder: IndentStringBuilder) -> None:
        builder.append_indented(
            [
                builder.keyword(self.access),
                builder.keyword(self.kind),
                self.return_type,
                " ",
                self.name,
            ]
        )
        write_parameters(builder, self.parameters)
        builder.append_line()
        write_body(builder, self.body_lines)
