"""
Script Builder

Create C# source files reliably from a descriptive object model. Only the
bodies of methods and constructors are supplied as raw lines; declarations,
ordering, indentation and identifier rules are handled by the builder.
"""

from .core import (
    Access,
    BuilderConfig,
    ClassKind,
    ConfigError,
    DefinitionError,
    IndentStringBuilder,
    IndentationDepthError,
    KeywordError,
    MethodKind,
    RenderError,
    ScriptBuilderError,
    TemplateError,
    load_config,
    sanitize_identifier,
)
from .definitions import (
    ConstructorDefinition,
    FieldDefinition,
    IndexerDefinition,
    MethodDefinition,
    ParameterDefinition,
    PropertyDefinition,
    TypeDefinition,
)
from .builder import ScriptBuilder
from .loader import DocumentError, load_document, load_document_file

# Version info
__version__ = "0.1.0"


__all__ = [
    # Keywords
    "Access",
    "ClassKind",
    "MethodKind",
    # Definitions
    "ParameterDefinition",
    "FieldDefinition",
    "PropertyDefinition",
    "ConstructorDefinition",
    "MethodDefinition",
    "IndexerDefinition",
    "TypeDefinition",
    "ScriptBuilder",
    # Rendering
    "IndentStringBuilder",
    "BuilderConfig",
    "load_config",
    "sanitize_identifier",
    # Documents
    "load_document",
    "load_document_file",
    # Errors
    "ScriptBuilderError",
    "DefinitionError",
    "RenderError",
    "IndentationDepthError",
    "KeywordError",
    "ConfigError",
    "TemplateError",
    "DocumentError",
]
