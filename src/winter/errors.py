"""Error types with formatted source context."""

from __future__ import annotations


def line_col(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a 0-based offset into source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


class LexError(Exception):
    """Raised when scanning cannot continue, with offset and source context."""

    def __init__(self, message: str, offset: int, source: str, length: int = 1) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        self.length = length
        super().__init__(self.format())

    @property
    def line(self) -> int:
        return line_col(self.source, self.offset)[0]

    @property
    def column(self) -> int:
        return line_col(self.source, self.offset)[1]

    def format(self, filename: str = "input.w") -> str:
        line, col = line_col(self.source, self.offset)
        # Split on "\n" only, matching line_col
        lines = self.source.split("\n")
        line_idx = line - 1

        # Build the source line (strip a trailing carriage return for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        # Underline the lexeme, at least 1 char, but stay within the line
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class IntegerOverflowError(LexError):
    """A digit run whose value does not fit in an unsigned 64-bit integer."""


class StalledScanError(LexError):
    """The cursor is stuck on an illegal character and can make no progress."""
