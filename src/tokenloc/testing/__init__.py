from __future__ import annotations

from .lexer import Cursor, Lexer, Token

__all__ = ["Cursor", "Lexer", "Token"]
