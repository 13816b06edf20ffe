"""
Naming utilities for emitted code.

Class names, file names and accessor fragments all share one rule: the
first character is upper-cased and the rest of the identifier is kept as is.
"""

from .config import EmitterConfig, InvalidConfigurationError


def format_type_name(raw: str) -> str:
    """
    Capitalize the first character of an identifier.

    Args:
        raw: Identifier as it appears in the model

    Returns:
        Identifier with an upper-case first character, e.g. ``count`` -> ``Count``
    """
    if not raw:
        return raw
    return raw[0].upper() + raw[1:]


def indent_unit(config: EmitterConfig) -> str:
    """
    Return the string used for one level of indentation.

    Raises:
        InvalidConfigurationError: If the configured width is not a non-negative integer
    """
    if config.use_tabs:
        return "\t"

    spaces = config.indent_spaces
    if isinstance(spaces, bool) or not isinstance(spaces, int) or spaces < 0:
        raise InvalidConfigurationError(
            f"indent_spaces must be a non-negative integer, got {spaces!r}"
        )
    return " " * spaces


class NameFormatter:
    """Applies the configured name prefix on top of format_type_name."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix or ""

    def type_name(self, raw: str) -> str:
        """Name used for generated classes and their files."""
        return f"{self.prefix}{format_type_name(raw)}"

    def accessor_fragment(self, raw: str) -> str:
        """Fragment appended to ``get``/``set`` for an attribute."""
        return format_type_name(raw)
