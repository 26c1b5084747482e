"""Source positions shared across layers."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    offset: int
    line: int
    column: int

    @staticmethod
    def start() -> Position:
        return Position(0, 1, 1)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class Locator:
    """Map character indices of ``text`` to :class:`Position` values.

    ``offset`` is measured in UTF-8 bytes while ``column`` counts characters.
    Lookups are expected in mostly increasing order, so the byte count is
    carried forward from the previous lookup instead of re-encoding the prefix.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")
        self._char_mark = 0
        self._byte_mark = 0

    def byte_offset(self, index: int) -> int:
        if index < self._char_mark:
            self._char_mark = 0
            self._byte_mark = 0
        chunk = self.text[self._char_mark : index]
        self._byte_mark += len(chunk.encode("utf-8", "surrogatepass"))
        self._char_mark = index
        return self._byte_mark

    def position(self, index: int) -> Position:
        line = bisect_right(self._line_starts, index)
        column = index - self._line_starts[line - 1] + 1
        return Position(self.byte_offset(index), line, column)

    def line_text(self, line: int) -> str:
        start = self._line_starts[line - 1]
        end = self.text.find("\n", start)
        return self.text[start:] if end < 0 else self.text[start:end]
