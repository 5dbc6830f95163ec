"""
Shared behaviour of all definitions.

A definition describes one declaration and knows how to write itself into
an IndentStringBuilder at the builder's current depth.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.config import BuilderConfig
from ..core.errors import DefinitionError
from ..core.indent import IndentStringBuilder


class Definition(ABC):
    """Abstract base class for all renderable definitions."""

    # depth of a member inside "namespace { type { ... } }"
    default_indentation = 2

    @abstractmethod
    def write_to(self, builder: IndentStringBuilder) -> None:
        """
        Write this definition at the builder's current indentation.

        The builder's indentation is the same before and after the call.
        """
        pass

    def build(
        self,
        config: Optional[BuilderConfig] = None,
        indentation: Optional[int] = None,
        keywords: Optional[Mapping[Enum, str]] = None,
    ) -> str:
        """
        Render this definition on its own.

        Args:
            config: Indentation style (tabs by default)
            indentation: Base depth, defaults to the definition's usual depth
            keywords: Keyword text table replacing the built-in one

        Returns:
            Rendered source text
        """
        config = config or BuilderConfig()
        if indentation is None:
            indentation = self.default_indentation

        builder = config.create_builder(indentation, keywords)
        self.write_to(builder)
        return builder.to_string()

    def __str__(self) -> str:
        return self.build()


def require_text(value: Optional[str], name: str) -> str:
    """Return value trimmed, or raise if it is missing or blank."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise DefinitionError(f"{name} must not be empty")
    return value.strip()


def optional_text(value: Optional[str], name: str) -> Optional[str]:
    """Return value trimmed; None and blank strings become None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise DefinitionError(f"{name} must be a string, got {type(value).__name__}")
    return value.strip() or None


def _text_items(items: Iterable[Optional[str]], name: str) -> List[Optional[str]]:
    if isinstance(items, str):
        return [items]
    try:
        items = list(items)
    except TypeError:
        raise DefinitionError(f"{name} must be a list of strings") from None
    for item in items:
        if item is not None and not isinstance(item, str):
            raise DefinitionError(
                f"{name} must contain strings, got {type(item).__name__}"
            )
    return items


def trimmed_tuple(
    items: Optional[Iterable[Optional[str]]], name: str = "items"
) -> Optional[Tuple[str, ...]]:
    """Trim each entry and drop None entries; None stays None."""
    if items is None:
        return None
    return tuple(item.strip() for item in _text_items(items, name) if item is not None)


def lines_tuple(lines: Optional[Iterable[Optional[str]]], name: str = "body_lines") -> Tuple[str, ...]:
    """Freeze body lines, keeping empty lines as blank lines."""
    if lines is None:
        return ()
    return tuple(line or "" for line in _text_items(lines, name))


def write_attributes(
    builder: IndentStringBuilder, attributes: Optional[Sequence[str]], compact: bool = False
) -> None:
    """
    Write C# attributes.

    Compact style appends ``[A, B] `` in the middle of a line; otherwise each
    attribute gets its own indented ``[A]`` line.
    """
    if not attributes:
        return

    if compact:
        builder.append(["[", ", ".join(attributes), "] "])
    else:
        for attribute in attributes:
            builder.append_indented_line(["[", attribute, "]"])


def write_parameters(builder: IndentStringBuilder, parameters: Optional[Sequence]) -> None:
    """Write a parenthesized, comma separated parameter list."""
    builder.append("(")
    for i, parameter in enumerate(parameters or ()):
        if i != 0:
            builder.append(", ")
        parameter.write_to(builder)
    builder.append(")")


def write_body(builder: IndentStringBuilder, body_lines: Sequence[str]) -> None:
    """Write a braced block containing the body lines."""
    builder.open_block()
    for line in body_lines:
        builder.append_indented_line(line)
    builder.close_block()
