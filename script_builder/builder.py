"""
Top-level script assembly.

ScriptBuilder renders a complete C# source file: an optional header
banner, sorted using directives, the namespace block and the types it
contains.
"""

from enum import Enum
from typing import Iterable, List, Mapping, Optional

from .core.config import BuilderConfig
from .core.errors import DefinitionError, RenderError
from .core.indent import IndentStringBuilder
from .core.naming import is_valid_identifier
from .core.templates import render_header
from .definitions.type_definition import TypeDefinition
from .logging_config import get_logger

logger = get_logger(__name__)


def _using_names(usings: Optional[Iterable[str]]) -> List[str]:
    """Trim using names, dropping blank entries."""
    names = []
    for using in usings or ():
        if using is None:
            continue
        if not isinstance(using, str):
            raise DefinitionError(f"using must be a string, got {type(using).__name__}")
        if using.strip():
            names.append(using.strip())
    return names


class ScriptBuilder:
    """
    Create C# scripts from type definitions.

    Callers describe namespace, usings and types; only method and
    constructor bodies are supplied as raw lines. The rendered text is
    cached after the first render. Types are sealed when the script is
    rendered, and no more types can be added afterwards.
    """

    def __init__(
        self,
        namespace: str,
        usings: Optional[Iterable[str]] = None,
        config: Optional[BuilderConfig] = None,
        keywords: Optional[Mapping[Enum, str]] = None,
    ):
        """
        Initialize script builder.

        Args:
            namespace: Namespace of the file; validated when rendering
            usings: Namespaces imported with using directives
            config: Default rendering configuration
            keywords: Keyword text table replacing the built-in one
        """
        self.namespace = namespace
        self.usings: List[str] = _using_names(usings)
        self.config = config or BuilderConfig()
        self.keywords = keywords
        self._types: List[TypeDefinition] = []
        self._text: Optional[str] = None

    @property
    def types(self) -> List[TypeDefinition]:
        return list(self._types)

    @property
    def is_rendered(self) -> bool:
        return self._text is not None

    def add_type(self, type_def: TypeDefinition) -> "ScriptBuilder":
        """Add a type; types render in insertion order."""
        return self.add_types([type_def])

    def add_types(self, type_defs: Iterable[TypeDefinition]) -> "ScriptBuilder":
        """Add several types."""
        if self._text is not None:
            raise DefinitionError("Script has already been rendered, types can no longer be added")

        type_defs = list(type_defs)
        for type_def in type_defs:
            if not isinstance(type_def, TypeDefinition):
                raise DefinitionError(f"Expected TypeDefinition, got {type(type_def).__name__}")

        self._types.extend(type_defs)
        return self

    def build(self, config: Optional[BuilderConfig] = None) -> str:
        """
        Render the script.

        Without a config the cached text is returned once the script has
        been rendered. Passing a config always re-renders and replaces the
        cache.

        Args:
            config: Rendering configuration, defaults to the builder's own

        Returns:
            Complete source file text

        Raises:
            RenderError: If the namespace is missing or invalid, or the
                nesting is too deep for the indentation table
        """
        if config is None:
            if self._text is not None:
                return self._text
            config = self.config
        builder = config.create_builder(0, self.keywords)

        self._validate_namespace()
        for type_def in self._types:
            type_def.seal()

        self._build_header(builder, config)
        self._build_usings(builder)
        self._build_namespace(builder)
        self._build_types(builder)
        builder.close_block()

        self._text = builder.to_string()
        logger.debug(
            "Rendered namespace %s with %d types (%d chars)",
            self.namespace,
            len(self._types),
            len(self._text),
        )
        return self._text

    def to_string(self) -> str:
        """Return the cached text, rendering with the default config once."""
        return self.build()

    def __str__(self) -> str:
        return self.to_string()

    def _validate_namespace(self) -> None:
        if self.namespace is not None and not isinstance(self.namespace, str):
            raise RenderError(
                f"Namespace must be a string, got {type(self.namespace).__name__}"
            )
        if not self.namespace or not self.namespace.strip():
            raise RenderError("Namespace cannot be empty")
        if not is_valid_identifier(self.namespace, allow_namespaces=True):
            raise RenderError(f"Namespace '{self.namespace}' is not a valid C# identifier")

    def _build_header(self, builder: IndentStringBuilder, config: BuilderConfig) -> None:
        if not config.header_template:
            return

        context = {"namespace": self.namespace, **config.header_context}
        header = render_header(config.header_template, context)
        for line in header.split("\n"):
            builder.append_indented_line(line)
        builder.append_lines()

    def _build_usings(self, builder: IndentStringBuilder) -> None:
        if not self.usings:
            return

        for using in sorted(self.usings):
            builder.append_indented_line(["using ", using, ";"])
        builder.append_lines()

    def _build_namespace(self, builder: IndentStringBuilder) -> None:
        builder.append_indented_line(["namespace ", self.namespace])
        builder.open_block()

    def _build_types(self, builder: IndentStringBuilder) -> None:
        for i, type_def in enumerate(self._types):
            if i > 0:
                builder.append_lines()
            type_def.write_to(builder)
