"""Quoting modes, token data structures, and character classification helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum, auto


class Mode(Enum):
    """Quoting convention used when splitting a command line."""

    CMD = auto()  # Windows cmd.exe: "..." toggles, no escapes
    BASH = auto()  # POSIX sh: '...' literal, "..." and bare \ escape

    @classmethod
    def native(cls) -> Mode:
        """Return the convention of the host platform."""
        return cls.CMD if os.name == "nt" else cls.BASH

    @classmethod
    def from_name(cls, name: str) -> Mode:
        """Look up a mode by name: ``cmd``, ``bash`` or ``native`` (any case)."""
        key = name.strip().lower()
        if key == "native":
            return cls.native()
        for mode in cls:
            if mode.name.lower() == key:
                return mode
        raise ValueError(f"unknown quoting mode: {name!r} (expected cmd, bash or native)")


DEFAULT_MODE = Mode.BASH


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range, as 0-based UTF-8 byte offsets."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Token:
    """A single argument with its unescaped value and original source text."""

    span: Span
    value: str
    raw: str

    @property
    def range(self) -> range:
        return range(self.span.start, self.span.end)


# Characters that end an unquoted argument
SEPARATORS = frozenset(" \t\r\n")


def is_separator(ch: str) -> bool:
    """Return True if ch separates arguments when unquoted."""
    return ch in SEPARATORS
