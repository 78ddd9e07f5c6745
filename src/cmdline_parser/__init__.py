"""Split command lines into arguments using cmd- or bash-style quoting."""

from __future__ import annotations

from cmdline_parser.parser import Parser, split, tokenize
from cmdline_parser.tokens import DEFAULT_MODE, Mode, Span, Token

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MODE",
    "Mode",
    "Parser",
    "Span",
    "Token",
    "split",
    "tokenize",
]
