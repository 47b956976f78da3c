from __future__ import annotations

from typing import Any, overload

from .capture import DEFAULT_NAME, Capture, capture
from .errors import InvalidHostError
from .plugin import LocationPlugin, is_lexer, plugin


@overload
def location(name_or_host: str | None = None) -> LocationPlugin: ...
@overload
def location(name_or_host: str, host: Any) -> Capture: ...
@overload
def location(name_or_host: Any) -> Capture | LocationPlugin: ...


def location(name_or_host: Any = None, host: Any = None) -> Capture | LocationPlugin:
    """Arm a capture on a lexer, or build a plugin.

    - ``location(lexer)`` arms a capture stamping ``loc``.
    - ``location("name", lexer)`` arms a capture stamping ``name``.
    - ``location()`` / ``location("name")`` returns a plugin for ``lexer.use()``.

    Anything else that is not a lexer also gets a default plugin, which
    rejects non-lexers when installed.
    """
    if isinstance(name_or_host, str) or name_or_host is None:
        name = name_or_host or DEFAULT_NAME
        if host is None:
            return plugin(name)
        if not is_lexer(host):
            raise InvalidHostError(host_type=type(host).__name__)
        return capture(host, name)
    if not is_lexer(name_or_host):
        return plugin()
    return capture(name_or_host, DEFAULT_NAME)
