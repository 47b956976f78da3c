from __future__ import annotations

from dataclasses import dataclass

from .spans import Position


@dataclass(slots=True)
class InvalidHostError(TypeError):
    host_type: str

    def __str__(self) -> str:
        return f"expected a lexer instance, got {self.host_type}"


@dataclass(slots=True)
class LexError(Exception):
    position: Position
    message: str
    source: str | None = None

    def __str__(self) -> str:
        where = f"{self.position.line}:{self.position.column}"
        if self.source:
            where = f"{self.source}:{where}"
        return f"{where}: {self.message}"
