from __future__ import annotations

from .api import location
from .capture import LOCATION_EVENT, capture
from .errors import InvalidHostError, LexError
from .plugin import LexerHost, LocationPlugin, is_lexer, plugin
from .spans import Location, Position

__all__ = [
    "LOCATION_EVENT",
    "InvalidHostError",
    "LexError",
    "LexerHost",
    "Location",
    "LocationPlugin",
    "Position",
    "capture",
    "is_lexer",
    "location",
    "plugin",
]
