from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from tokenloc import location
from tokenloc.testing import Lexer


def _build_lexer(src: str, source: str) -> Lexer:
    lexer = Lexer(src, {"source": source})
    lexer.capture("newline", r"\n")
    lexer.capture("space", r"[ \t\r]+")
    lexer.capture("text", r"\w+")
    lexer.capture("punct", r"[^\w\s]")
    return lexer.use(location())


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="show_locations", description="Print tokens with their locations")
    ap.add_argument("path", nargs="?", help="Input file (default: stdin)")
    ap.add_argument("--json", action="store_true", help="Print tokens as JSON")
    args = ap.parse_args(argv)

    if args.path:
        src = Path(args.path).read_text(encoding="utf-8")
        source = args.path
    else:
        src = sys.stdin.read()
        source = "<stdin>"

    toks = _build_lexer(src, source).tokenize()
    if args.json:
        payload = [
            {"type": t.type, "value": t.value, "loc": t.loc.to_dict(), "range": list(t.loc.range)}
            for t in toks
        ]
        print(json.dumps(payload, indent=2))
    else:
        for t in toks:
            print(f"{t.loc.format()}\t{t.type}\t{src[slice(*t.loc.range)]!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
