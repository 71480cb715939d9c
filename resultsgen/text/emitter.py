"""Indentation-aware writer used by every generator."""

from typing import TextIO

INDENT = "    "


class IndentedWriter:
    """Writes text to a sink at a given indent level.

    The writer knows nothing about the grammar of the emitted language; it only
    keeps nested blocks lined up. Level 0 is flush left and every level adds one
    indent unit.
    """

    def __init__(self, sink: TextIO, indent: str = INDENT):
        self.sink = sink
        self.indent = indent

    def _prefix(self, indent_level: int) -> str:
        if indent_level < 0:
            raise ValueError(f"Indent level must not be negative, got {indent_level}")
        return self.indent * indent_level

    def write(self, indent_level: int, text: str = "") -> None:
        """Write indented text without a trailing newline."""
        self.sink.write(self._prefix(indent_level))
        self.sink.write(text)

    def write_line(self, indent_level: int = 0, text: str = "") -> None:
        """Write indented text followed by a newline.

        Empty lines are written without indentation.
        """
        prefix = self._prefix(indent_level)
        if text:
            self.sink.write(prefix)
            self.sink.write(text)
        self.sink.write("\n")
