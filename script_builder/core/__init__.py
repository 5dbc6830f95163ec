"""
Core script building components.

Provides the identifier rules, keyword tables, text accumulator and
configuration used by all definitions.
"""

from .errors import ScriptBuilderError, DefinitionError, RenderError
from .naming import (
    CSHARP_KEYWORDS,
    IdentifierSanitizer,
    is_valid_identifier,
    is_valid_type_name,
    replace_illegal_chars,
    sanitize_identifier,
)
from .keywords import (
    Access,
    ClassKind,
    MethodKind,
    KEYWORD_TEXT,
    KeywordError,
    keyword_text,
    parse_keyword,
)
from .indent import IndentStringBuilder, IndentationDepthError, MAX_INDENTATION_LEVELS
from .config import BuilderConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, render_header

__all__ = [
    # Errors
    "ScriptBuilderError",
    "DefinitionError",
    "RenderError",
    # Identifier rules
    "CSHARP_KEYWORDS",
    "IdentifierSanitizer",
    "is_valid_identifier",
    "is_valid_type_name",
    "replace_illegal_chars",
    "sanitize_identifier",
    # Keywords
    "Access",
    "ClassKind",
    "MethodKind",
    "KEYWORD_TEXT",
    "KeywordError",
    "keyword_text",
    "parse_keyword",
    # Text accumulator
    "IndentStringBuilder",
    "IndentationDepthError",
    "MAX_INDENTATION_LEVELS",
    # Configuration system
    "BuilderConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Header templates
    "TemplateEngine",
    "TemplateError",
    "render_header",
]
