"""Constructor declarations."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from ..core.errors import DefinitionError, RenderError
from ..core.indent import IndentStringBuilder
from ..core.keywords import Access
from .base import Definition, lines_tuple, trimmed_tuple, write_body, write_parameters
from .parameter import ParameterDefinition

if TYPE_CHECKING:
    from .type_definition import TypeDefinition


@dataclass(frozen=True)
class ConstructorDefinition(Definition):
    """
    A constructor of the type it is added to.

    The constructor renders its owning type's name, so it must be added to a
    TypeDefinition before it can be rendered. The name is looked up from the
    owner on every render.
    """

    access: Access
    parameters: Optional[Tuple[ParameterDefinition, ...]] = None
    base_arguments: Optional[Tuple[str, ...]] = None
    body_lines: Tuple[str, ...] = ()
    _owner: Optional["TypeDefinition"] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if self.parameters is not None:
            parameters = tuple(self.parameters)
            for parameter in parameters:
                if not isinstance(parameter, ParameterDefinition):
                    raise DefinitionError(
                        f"constructor parameters must be ParameterDefinition, got {parameter!r}"
                    )
            object.__setattr__(self, "parameters", parameters)
        object.__setattr__(
            self, "base_arguments", trimmed_tuple(self.base_arguments, "base_arguments")
        )
        object.__setattr__(self, "body_lines", lines_tuple(self.body_lines))

    @property
    def owner(self) -> Optional["TypeDefinition"]:
        """The type this constructor belongs to, if it has been added to one."""
        return self._owner

    @property
    def type_name(self) -> str:
        """Name of the owning type."""
        if self._owner is None:
            raise RenderError("Constructor has not been added to a type")
        return self._owner.identifier

    def check_attachable(self, owner: "TypeDefinition") -> None:
        """Raise DefinitionError if this constructor belongs to another type."""
        if self._owner is not None and self._owner is not owner:
            raise DefinitionError(
                f"Constructor already belongs to type '{self._owner.identifier}'"
            )

    def attach(self, owner: "TypeDefinition") -> None:
        """
        Bind this constructor to its owning type.

        Raises:
            DefinitionError: If it already belongs to a different type
        """
        self.check_attachable(owner)
        object.__setattr__(self, "_owner", owner)

    def write_to(self, builder: IndentStringBuilder) -> None:
        builder.append_indented([builder.keyword(self.access), self.type_name])
        write_parameters(builder, self.parameters)

        if self.base_arguments is not None:
            builder.append([" : base(", ", ".join(self.base_arguments), ")"])

        builder.append_line()
        write_body(builder, self.body_lines)
