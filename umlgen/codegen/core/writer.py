"""
Indentation-aware text buffer.

Generators write one line at a time; the writer prefixes each non-empty
line with the current indentation and leaves blank lines empty.
"""

from typing import List


class CodeWriter:
    """Accumulates lines of generated code."""

    def __init__(self, indent_string: str = "    "):
        """
        Initialize writer.

        Args:
            indent_string: Text inserted once per indentation level
        """
        self.indent_string = indent_string
        self.lines: List[str] = []
        self._indentations: List[str] = []

    @property
    def level(self) -> int:
        """Current indentation depth."""
        return len(self._indentations)

    def indent(self):
        """Increase indentation by one level."""
        self._indentations.append(self.indent_string)

    def outdent(self):
        """Decrease indentation by one level."""
        if self._indentations:
            self._indentations.pop()

    def write_line(self, line: str = ""):
        """Write a single line at the current indentation."""
        if line:
            self.lines.append("".join(self._indentations) + line)
        else:
            self.lines.append("")

    def write_lines(self, text: str):
        """Write every line of a block, each at the current indentation."""
        for line in text.splitlines():
            self.write_line(line)

    def get_data(self) -> str:
        """Return the buffer contents."""
        return "\n".join(self.lines)
