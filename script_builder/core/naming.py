"""
Identifier validation and sanitization for generated C# code.

Checks are plain character scans (no regular expressions) so they stay
linear in the length of the input.
"""

from typing import FrozenSet, Iterable, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)


CSHARP_KEYWORDS = frozenset(
    {
        # builtin types
        "var",
        "bool",
        "byte",
        "sbyte",
        "short",
        "ushort",
        "int",
        "uint",
        "long",
        "ulong",
        "double",
        "float",
        "decimal",
        "string",
        "char",
        "void",
        "object",
        # operators and literals
        "typeof",
        "sizeof",
        "null",
        "true",
        "false",
        # statements
        "if",
        "else",
        "while",
        "for",
        "foreach",
        "do",
        "switch",
        "case",
        "default",
        "lock",
        "try",
        "throw",
        "catch",
        "finally",
        "goto",
        "break",
        "continue",
        "return",
        # modifiers
        "public",
        "private",
        "internal",
        "protected",
        "static",
        "readonly",
        "sealed",
        "const",
        "fixed",
        "stackalloc",
        "volatile",
        "new",
        "override",
        "abstract",
        "virtual",
        "event",
        "extern",
        "ref",
        "out",
        "in",
        "is",
        "as",
        "params",
        "__arglist",
        "__makeref",
        "__reftype",
        "__refvalue",
        "this",
        "base",
        "namespace",
        "using",
        "class",
        "struct",
        "interface",
        "enum",
        "delegate",
        "checked",
        "unchecked",
        "unsafe",
        "operator",
        "implicit",
        "explicit",
    }
)

ESCAPE_PREFIX = "@"


def _is_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class IdentifierSanitizer:
    """Validates identifiers and repairs the ones that are not legal."""

    def __init__(
        self, reserved_words: Optional[Iterable[str]] = None, replacement: str = "_"
    ):
        """
        Initialize identifier sanitizer.

        Args:
            reserved_words: Keywords that cannot be used as bare identifiers
            replacement: Character substituted for illegal characters
        """
        if len(replacement) != 1:
            raise ValueError("replacement must be a single character")

        self.reserved_words: FrozenSet[str] = (
            frozenset(reserved_words) if reserved_words is not None else CSHARP_KEYWORDS
        )
        self.replacement = replacement

    def is_valid(
        self, text: str, allow_namespaces: bool = False, allow_generics: bool = False
    ) -> bool:
        """
        Check whether text is a legal identifier.

        Args:
            text: Candidate identifier
            allow_namespaces: Accept '.' for qualified names
            allow_generics: Accept '<' and '>' for generic type names

        Returns:
            True if the identifier can be emitted as-is
        """
        if not text:
            return False

        for i, c in enumerate(text):
            if c == "_" or _is_letter(c):
                continue
            if i != 0 and _is_digit(c):
                continue
            if i == 0 and c == ESCAPE_PREFIX:
                continue
            if allow_namespaces and c == ".":
                continue
            if allow_generics and c in "<>":
                continue
            return False

        return text not in self.reserved_words

    def replace_illegal_chars(self, text: str) -> str:
        """
        Replace every illegal character and escape keyword collisions.

        Args:
            text: Raw identifier

        Returns:
            Identifier containing only letters, digits and underscores,
            prefixed with '@' if it collides with a keyword
        """
        chars = []
        for i, c in enumerate(text):
            if c == "_" or _is_letter(c) or (i != 0 and _is_digit(c)):
                chars.append(c)
            else:
                chars.append(self.replacement)

        result = "".join(chars).strip(self.replacement)
        if result and _is_digit(result[0]):
            result = f"_{result}"
        if result in self.reserved_words:
            result = f"{ESCAPE_PREFIX}{result}"

        return result

    def sanitize(self, identifier: Optional[str]) -> Optional[str]:
        """
        Trim and repair an identifier.

        Args:
            identifier: Raw identifier, may be None

        Returns:
            None for blank input, otherwise a legal identifier
        """
        if identifier is None or not identifier.strip():
            return None

        identifier = identifier.strip()
        if self.is_valid(identifier):
            return identifier

        sanitized = self.replace_illegal_chars(identifier)
        if sanitized != identifier:
            logger.warning(
                "Identifier '%s' is not a valid C# identifier, using '%s'",
                identifier,
                sanitized,
            )
        return sanitized


_default_sanitizer = IdentifierSanitizer()


def get_default_sanitizer() -> IdentifierSanitizer:
    """Get the sanitizer configured with the C# keyword set."""
    return _default_sanitizer


def is_valid_identifier(
    text: str, allow_namespaces: bool = False, allow_generics: bool = False
) -> bool:
    """Check a C# identifier with the default sanitizer."""
    return _default_sanitizer.is_valid(text, allow_namespaces, allow_generics)


def is_valid_type_name(text: str) -> bool:
    """Check a possibly qualified, possibly generic C# type name."""
    return _default_sanitizer.is_valid(text, allow_namespaces=True, allow_generics=True)


def replace_illegal_chars(text: str) -> str:
    """Repair an identifier with the default sanitizer."""
    return _default_sanitizer.replace_illegal_chars(text)


def sanitize_identifier(identifier: Optional[str]) -> Optional[str]:
    """Sanitize an identifier with the default sanitizer."""
    return _default_sanitizer.sanitize(identifier)
