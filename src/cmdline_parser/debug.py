"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from cmdline_parser.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable token listing to *file*."""
    count = 0
    for token in tokens:
        _dump_token(token, file)
        count += 1
    if count == 0:
        file.write("(no tokens)\n")


def _dump_token(token: Token, f: TextIO) -> None:
    f.write(f"{token.span.start}..{token.span.end} {token.value!r} raw={token.raw!r}\n")
