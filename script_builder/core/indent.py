"""
Indentation-aware text accumulator.

IndentStringBuilder collects generated source text while tracking the
current indentation depth. ``open_block`` and ``close_block`` emit curly
braces and adjust the depth, so nested declarations can be written with
plain line appends:

    builder = IndentStringBuilder()
    builder.append_indented_line("class Foo")
    builder.open_block()
    builder.append_indented_line("int x;")
    builder.close_block()
"""

from enum import Enum
from typing import Iterable, List, Mapping, Optional, Union

from .errors import RenderError
from .keywords import keyword_text

MAX_INDENTATION_LEVELS = 8
DEFAULT_INDENT_SIZE = 4

Text = Union[None, str, Iterable[Optional[str]]]


class IndentationDepthError(RenderError):
    """Exception raised when the indentation depth is out of range."""

    pass


def _fragments(text: Text) -> List[str]:
    """Normalize a string or sequence of strings, dropping empty parts."""
    if text is None:
        return []
    if isinstance(text, str):
        return [text] if text else []
    return [part for part in text if part]


class IndentStringBuilder:
    """Append-only text buffer with a current indentation depth."""

    def __init__(
        self,
        spaces_for_tabs: bool = False,
        indentation: int = 0,
        indent_size: int = DEFAULT_INDENT_SIZE,
        keywords: Optional[Mapping[Enum, str]] = None,
    ):
        """
        Initialize the builder.

        Args:
            spaces_for_tabs: Indent with ``indent_size`` spaces per level
                instead of one tab
            indentation: Starting indentation depth
            indent_size: Number of spaces per level when spaces_for_tabs is set
            keywords: Keyword text table used by :meth:`keyword`
        """
        if indent_size < 1:
            raise ValueError(f"indent_size must be positive, got {indent_size}")

        self._parts: List[str] = []
        self.spaces_for_tabs = spaces_for_tabs
        self.indent_size = indent_size
        self.indentation = indentation
        self.keywords = keywords

        unit = " " * indent_size if spaces_for_tabs else "\t"
        self._indent_strings = [unit * level for level in range(MAX_INDENTATION_LEVELS)]

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Return the accumulated text."""
        return "".join(self._parts)

    def is_empty(self) -> bool:
        """True as long as nothing has been appended."""
        return not any(self._parts)

    def keyword(self, value: Enum) -> str:
        """Resolve keyword text through the builder's lookup table."""
        return keyword_text(value, self.keywords)

    def indent_text(self) -> str:
        """
        Get the indentation prefix for the current depth.

        Raises:
            IndentationDepthError: If depth is negative or not below
                MAX_INDENTATION_LEVELS
        """
        if self.indentation < 0:
            raise IndentationDepthError(
                f"Indentation must not be negative: {self.indentation}"
            )
        if self.indentation >= len(self._indent_strings):
            raise IndentationDepthError(
                f"Indentation level must be less than {len(self._indent_strings)}, "
                f"got {self.indentation}"
            )
        return self._indent_strings[self.indentation]

    # Plain appends

    def append(self, text: Text) -> None:
        """Append a string or each string of a sequence."""
        self._parts.extend(_fragments(text))

    def append_line(self, text: Text = None) -> None:
        """Append text (if any), then a newline."""
        self._parts.extend(_fragments(text))
        self._parts.append("\n")

    def append_lines(self, count: int = 1) -> None:
        """Append ``count`` empty lines without indentation."""
        self._parts.append("\n" * count)

    def append_whitespace(self, count: int = 1) -> None:
        """Append ``count`` spaces."""
        self._parts.append(" " * count)

    # Indented appends

    def append_indentation(self) -> None:
        """Append the indentation for the current depth."""
        self._parts.append(self.indent_text())

    def append_indented(self, text: Text) -> None:
        """Append indentation, then the text."""
        self.append_indentation()
        self._parts.extend(_fragments(text))

    def append_indented_line(self, text: Text = None) -> None:
        """
        Append indentation, the text and a newline.

        Lines without content get no indentation, only the newline.
        """
        parts = _fragments(text)
        if parts:
            self.append_indentation()
            self._parts.extend(parts)
        self._parts.append("\n")

    # Blocks

    def open_block(self) -> None:
        """Append '{' at the current depth, then increase the depth."""
        self.append_indented_line("{")
        self.indentation += 1

    def close_block(self) -> None:
        """Decrease the depth, then append '}' at the new depth."""
        self.indentation -= 1
        try:
            self.append_indented_line("}")
        except IndentationDepthError:
            self.indentation += 1
            raise
