"""
Exception hierarchy for script building.

Construction problems and render problems are kept apart so callers can
tell a rejected definition from a rejected render call.
"""


class ScriptBuilderError(Exception):
    """Base class for all errors raised by this package."""

    pass


class DefinitionError(ScriptBuilderError, ValueError):
    """Raised when a definition is constructed from invalid input."""

    pass


class RenderError(ScriptBuilderError):
    """Raised when rendering cannot produce valid output."""

    pass
