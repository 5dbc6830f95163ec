"""
Template engine wrapper for file header banners.

Provides a small interface over Jinja2 for rendering the comment block
written at the top of generated scripts.
"""

from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError as JinjaError

from .errors import ScriptBuilderError


class TemplateError(ScriptBuilderError):
    """Exception raised for template-related errors."""

    pass


AUTO_GENERATED = "auto-generated"

AUTO_GENERATED_HEADER = """\
<auto-generated>
    This code was generated by {{ tool | default("script-builder") }}.
{%- if source is defined and source %}
    Source: {{ source }}
{%- endif %}
    Changes to this file may be lost when the code is regenerated.
</auto-generated>"""


def comment_lines(value: str, style: str = "//") -> str:
    """Prefix each line with a comment marker unless it already has one."""
    lines = str(value).split("\n")
    return "\n".join(
        line if line.lstrip().startswith(style) else f"{style} {line}".rstrip()
        for line in lines
    )


class TemplateEngine:
    """Wrapper for Jinja2 with helpers for C# comment banners."""

    def __init__(self):
        """Initialize template engine with in-memory templates."""
        self._env = Environment(
            loader=DictLoader({}),
            autoescape=False,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._env.filters["comment"] = comment_lines

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a registered template with the given context.

        Args:
            template_name: Name of an in-memory template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template is registered."""
        return template_name in self._env.loader.mapping


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
        _default_engine.add_template(AUTO_GENERATED, AUTO_GENERATED_HEADER)

    return _default_engine


def render_header(template: str, context: Optional[Dict[str, Any]] = None) -> str:
    """
    Render a file header as a block of '//' comment lines.

    Args:
        template: Name of a registered template (e.g. "auto-generated")
            or a template string
        context: Template variables

    Returns:
        Header lines without a trailing newline
    """
    engine = get_default_template_engine()
    context = context or {}

    if engine.template_exists(template):
        text = engine.render_template(template, context)
    else:
        text = engine.render_string(template, context)

    return comment_lines(text.strip("\n"))
