"""
Configuration management for script building.

Handles loading and merging configuration from JSON files,
providing defaults and validation for rendering settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import ScriptBuilderError
from .indent import DEFAULT_INDENT_SIZE, IndentStringBuilder

# spaces per indentation level accepted without a warning
MAX_INDENT_SIZE = 8


class ConfigError(ScriptBuilderError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class BuilderConfig:
    """Rendering options for scripts and definitions."""

    # Code style settings
    use_tabs: bool = True
    indent_size: int = DEFAULT_INDENT_SIZE

    # File header banner, rendered with jinja2 ("auto-generated" selects
    # the built-in template)
    header_template: Optional[str] = None
    header_context: Dict[str, Any] = field(default_factory=dict)

    def create_builder(
        self, indentation: int = 0, keywords: Optional[Mapping[Enum, str]] = None
    ) -> IndentStringBuilder:
        """Create a text builder using these settings."""
        return IndentStringBuilder(
            spaces_for_tabs=not self.use_tabs,
            indentation=indentation,
            indent_size=self.indent_size,
            keywords=keywords,
        )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(BuilderConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> BuilderConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["header_context"] = dict(base_config["header_context"])

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> BuilderConfig:
        """Convert dictionary to BuilderConfig instance."""
        known_fields = {f.name for f in fields(BuilderConfig)}
        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        indent_size = config_dict.get("indent_size", DEFAULT_INDENT_SIZE)
        if not isinstance(indent_size, int) or isinstance(indent_size, bool) or indent_size < 1:
            raise ConfigError(f"indent_size must be a positive integer: {indent_size!r}")

        return BuilderConfig(**config_dict)

    def save_config(self, config: BuilderConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: BuilderConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not isinstance(config.use_tabs, bool):
            warnings.append(f"use_tabs must be a boolean: {config.use_tabs!r}")

        if not isinstance(config.indent_size, int) or not (
            1 <= config.indent_size <= MAX_INDENT_SIZE
        ):
            warnings.append(
                f"indent_size must be between 1 and {MAX_INDENT_SIZE}: "
                f"{config.indent_size!r}"
            )

        if config.header_template is not None and not str(config.header_template).strip():
            warnings.append("header_template is blank")

        if not isinstance(config.header_context, dict):
            warnings.append("header_context must be an object")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> BuilderConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)


EXAMPLE_CONFIG = {
    "use_tabs": False,
    "indent_size": 4,
    "header_template": "auto-generated",
    "header_context": {"tool": "script-builder"},
}
