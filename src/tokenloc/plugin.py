from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .capture import DEFAULT_NAME, Capture, capture
from .errors import InvalidHostError
from .spans import Position


logger = logging.getLogger(__name__)


@runtime_checkable
class CursorState(Protocol):
    index: int
    line: int
    column: int


@runtime_checkable
class LexerHost(Protocol):
    """What a lexer must expose to be located.

    ``is_lexer`` (or ``is_tokenizer``) must be ``True``. ``options`` and
    ``emit`` are read when present.
    """

    @property
    def loc(self) -> CursorState: ...


def is_lexer(obj: Any) -> bool:
    return getattr(obj, "is_lexer", False) is True or getattr(obj, "is_tokenizer", False) is True


@dataclass(frozen=True, slots=True)
class LocationPlugin:
    """Installer that adds ``position()``/``location()`` to a lexer and
    locates every token returned by its emission methods."""

    name: str = DEFAULT_NAME
    methods: tuple[str, ...] = ("lex",)
    with_range: bool = True

    def __call__(self, host: Any) -> None:
        self.install(host)

    def install(self, host: Any) -> None:
        if not is_lexer(host):
            raise InvalidHostError(host_type=type(host).__name__)

        default = self.name
        with_range = self.with_range

        def position() -> Position:
            return Position.of(host)

        def location(name: str | None = None) -> Capture:
            return capture(host, name or default, with_range=with_range)

        host.position = position
        host.location = location

        wrapped: list[str] = []
        for meth in self.methods:
            original = getattr(host, meth, None)
            if not callable(original):
                logger.debug("%s has no %r method, not wrapping", type(host).__name__, meth)
                continue
            setattr(host, meth, _located(original, location))
            wrapped.append(meth)

        logger.debug(
            "installed location plugin on %s (name=%r, wrapped=%s)",
            type(host).__name__,
            default,
            wrapped,
        )


def _located(original: Callable[..., Any], location: Callable[[], Capture]) -> Callable[..., Any]:
    @functools.wraps(original)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        fire = location()
        tok = original(*args, **kwargs)
        if tok:
            return fire(tok)
        return tok

    return wrapper


def plugin(
    name: str = DEFAULT_NAME,
    *,
    methods: tuple[str, ...] = ("lex",),
    with_range: bool = True,
) -> LocationPlugin:
    return LocationPlugin(name=name, methods=tuple(methods), with_range=with_range)
