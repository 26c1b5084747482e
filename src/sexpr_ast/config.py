"""Options for parsing and printing."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 256
DEFAULT_INDENT = 2


@dataclass(frozen=True)
class ParseOptions:
    # Deepest list nesting accepted before raising NestingTooDeep.
    max_depth: int = DEFAULT_MAX_DEPTH
    # Reject tokens left over after the first top-level expression.
    require_eof: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


@dataclass(frozen=True)
class PrinterOptions:
    # Spaces per nesting level for multi-line lists.
    indent: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
