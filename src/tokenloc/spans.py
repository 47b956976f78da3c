from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .plugin import LexerHost


@dataclass(frozen=True, slots=True)
class Position:
    """A snapshot of a lexer cursor.

    Index is 0-based, line is 1-based, column is 0-based. Values are copied
    from the host as-is.
    """

    index: int
    line: int
    column: int

    @classmethod
    def of(cls, host: LexerHost) -> Position:
        cur = host.loc
        return cls(index=cur.index, line=cur.line, column=cur.column)

    def to_dict(self) -> dict[str, int]:
        return {"index": self.index, "column": self.column, "line": self.line}


@dataclass(frozen=True, slots=True)
class Location:
    """Start and end positions of a token, plus the label of its input."""

    start: Position
    end: Position
    source: str | None = None

    @classmethod
    def build(cls, start: Position, end: Position, host: Any = None) -> Location:
        return cls(start=start, end=end, source=_source_of(host))

    @property
    def range(self) -> tuple[int, int]:
        return (self.start.index, self.end.index)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.source is not None:
            out["source"] = self.source
        out["start"] = self.start.to_dict()
        out["end"] = self.end.to_dict()
        return out

    def format(self) -> str:
        pos = f"{self.start.line}:{self.start.column}"
        if self.source is None:
            return pos
        return f"{self.source}:{pos}"


def _source_of(host: Any) -> str | None:
    if host is None:
        return None
    options = getattr(host, "options", None)
    if not isinstance(options, Mapping):
        return None
    return options.get("source")
