from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any, TypeVar

from .spans import Location, Position


T = TypeVar("T")

LOCATION_EVENT = "location"
DEFAULT_NAME = "loc"

Capture = Callable[[T], T]


def capture(host: Any, name: str = DEFAULT_NAME, *, with_range: bool = True) -> Capture:
    """Mark the start position of ``host`` and return the function that closes it.

    The returned function takes a token, reads the end position at call time,
    stores a :class:`Location` on the token under ``name`` (and the index pair
    under ``range`` when ``with_range`` is set), notifies ``host.emit`` if the
    host has one, and returns the token.
    """
    start = Position.of(host)

    def fire(token: T) -> T:
        end = Position.of(host)
        loc = Location.build(start, end, host)
        _stamp(token, name, loc)
        if with_range:
            _stamp(token, "range", loc.range)
        emit = getattr(host, "emit", None)
        if callable(emit):
            emit(LOCATION_EVENT, token)
        return token

    return fire


def _stamp(token: Any, name: str, value: Any) -> None:
    if isinstance(token, MutableMapping):
        token[name] = value
    else:
        setattr(token, name, value)
