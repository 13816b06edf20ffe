"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for emitter settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields

from umlgen.logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class InvalidConfigurationError(ConfigError):
    """Raised when an option has a value the emitter cannot use."""

    pass


# Preference keys used by the modelling tool, mapped to our field names
CONFIG_ALIASES = {
    "useTab": "use_tabs",
    "use_tab": "use_tabs",
    "indentSpaces": "indent_spaces",
    "namePrefix": "name_prefix",
    "prefix": "name_prefix",
    "docString": "doc_string",
    "baseClass": "base_class",
    "fileExtension": "file_extension",
    "initFileName": "init_file_name",
    "templateDir": "template_dir",
}


@dataclass
class EmitterConfig:
    """Settings for one generation run."""

    # Code style settings
    use_tabs: bool = False
    indent_spaces: int = 4

    # Naming settings
    name_prefix: str = ""

    # Documentation
    doc_string: bool = True

    # Target runtime
    base_class: str = "AVObject"
    file_extension: str = ".dart"
    init_file_name: str = "__init__.dart"

    # Directory with templates overriding the built-in ones
    template_dir: Optional[str] = None

    # Extra keys, passed to templates untouched
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate option types."""
        for name in ("use_tabs", "doc_string"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigurationError(
                    f"{name} must be a boolean, got {getattr(self, name)!r}"
                )

        spaces = self.indent_spaces
        if isinstance(spaces, bool) or not isinstance(spaces, int) or spaces < 0:
            raise InvalidConfigurationError(
                f"indent_spaces must be a non-negative integer, got {spaces!r}"
            )

        for name in ("name_prefix", "base_class", "file_extension", "init_file_name"):
            if not isinstance(getattr(self, name), str):
                raise InvalidConfigurationError(
                    f"{name} must be a string, got {getattr(self, name)!r}"
                )

        if self.template_dir is not None and not isinstance(self.template_dir, str):
            raise InvalidConfigurationError(
                f"template_dir must be a string, got {self.template_dir!r}"
            )

        if not isinstance(self.custom, dict):
            raise InvalidConfigurationError("custom must be a JSON object")

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a flat dictionary."""
        config_dict = {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "custom"
        }
        config_dict.update(self.custom)
        return config_dict


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults = EmitterConfig().to_dict()

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EmitterConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(self._normalize_keys(file_config))

        if custom_config:
            base_config.update(self._normalize_keys(custom_config))

        return self._dict_to_config(base_config)

    def _normalize_keys(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Translate alias keys to field names."""
        return {CONFIG_ALIASES.get(key, key): value for key, value in config.items()}

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise InvalidConfigurationError(
                f"Configuration file must contain a JSON object: {path}"
            )

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EmitterConfig:
        """Convert dictionary to EmitterConfig instance."""
        known_fields = {f.name for f in fields(EmitterConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return EmitterConfig(**config_args)

    def save_config(self, config: EmitterConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}") from e

    def validate_config(self, config: EmitterConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.file_extension.startswith("."):
            warnings.append(
                f"file_extension '{config.file_extension}' does not start with a dot"
            )

        if config.use_tabs and config.indent_spaces != 4:
            warnings.append("indent_spaces is ignored when use_tabs is set")

        if config.template_dir and not Path(config.template_dir).is_dir():
            warnings.append(f"Template directory not found: {config.template_dir}")

        if config.name_prefix and not config.name_prefix.isidentifier():
            warnings.append(f"name_prefix is not a valid identifier: {config.name_prefix}")

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
) -> EmitterConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "useTab": False,
    "indentSpaces": 2,
    "namePrefix": "LC",
    "docString": True,
}
