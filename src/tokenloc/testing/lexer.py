from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..errors import LexError
from ..spans import Position


@dataclass(slots=True)
class Cursor:
    index: int = 0
    line: int = 1
    column: int = 0

    def advance(self, text: str) -> None:
        for ch in text:
            self.index += 1
            if ch == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1


@dataclass(eq=False)
class Token:
    type: str
    value: str = ""

    def __repr__(self) -> str:
        loc = getattr(self, "loc", None)
        where = f", {loc.format()}" if loc is not None else ""
        return f"Token({self.type}, {self.value!r}{where})"


class Lexer:
    """Small regex lexer used to drive location plugins in tests and scripts.

    Rules are tried in registration order; each pattern is matched at the
    cursor. ``lex`` is looked up through the instance so plugins can wrap it.
    """

    is_lexer = True

    def __init__(self, input: str | dict[str, Any] = "", options: dict[str, Any] | None = None) -> None:
        if isinstance(input, dict):
            input, options = "", input
        self.input = input
        self.options: dict[str, Any] = dict(options or {})
        self.loc = Cursor()
        self.tokens: list[Token] = []
        self._rules: dict[str, re.Pattern[str]] = {}
        self._listeners: defaultdict[str, list[Callable[[Any], None]]] = defaultdict(list)

    def capture(self, type: str, pattern: str | re.Pattern[str]) -> Lexer:
        self._rules[type] = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self

    def eos(self) -> bool:
        return self.loc.index >= len(self.input)

    def lex(self, type: str) -> Token | None:
        rx = self._rules.get(type)
        if rx is None:
            raise LexError(Position.of(self), f"no rule registered for {type!r}", self.options.get("source"))
        # Match against the remaining input so "^"-anchored rules work mid-stream.
        m = rx.match(self.input[self.loc.index :])
        if m is None or not m.group(0):
            return None
        value = m.group(0)
        self.loc.advance(value)
        return Token(type, value)

    def advance(self) -> Token | None:
        if self.eos():
            return None
        for type in self._rules:
            tok = self.lex(type)
            if tok is not None:
                self.tokens.append(tok)
                return tok
        ch = self.input[self.loc.index]
        raise LexError(Position.of(self), f"unexpected character {ch!r}", self.options.get("source"))

    def tokenize(self, input: str | None = None) -> list[Token]:
        if input is not None:
            self.input = input
        while self.advance() is not None:
            pass
        return self.tokens

    def use(self, fn: Callable[[Lexer], Any]) -> Lexer:
        fn(self)
        return self

    def on(self, event: str, fn: Callable[[Any], None]) -> Lexer:
        self._listeners[event].append(fn)
        return self

    def emit(self, event: str, payload: Any) -> None:
        for fn in list(self._listeners.get(event, ())):
            fn(payload)
