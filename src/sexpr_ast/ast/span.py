"""Node ids, spans and other per-node metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True)
class NodeId:
    value: int

    DUMMY: ClassVar[NodeId]

    @property
    def is_dummy(self) -> bool:
        return self.value == U32_MAX


NodeId.DUMMY = NodeId(U32_MAX)


@dataclass(frozen=True)
class Span:
    """Byte range ``lo..hi`` plus a hygiene context tag."""

    lo: int
    hi: int
    ctxt: int = 0

    DUMMY: ClassVar[Span]

    @property
    def is_dummy(self) -> bool:
        return self == Span.DUMMY


Span.DUMMY = Span(0, 0, 0)


@dataclass(frozen=True)
class ModSpans:
    inner_span: Span = Span.DUMMY
    inject_use_span: Span = Span.DUMMY


@dataclass(frozen=True)
class DelSpan:
    open: Span = Span.DUMMY
    close: Span = Span.DUMMY


@dataclass(frozen=True)
class TokenStream:
    # Raw source text of the tokens.
    source: str = ""


@dataclass(frozen=True)
class Attribute:
    """Attribute placeholder; no attributes are accepted yet."""
