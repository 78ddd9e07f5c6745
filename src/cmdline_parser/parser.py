"""Command-line tokenizer: splits one line of text into shell-style arguments."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from enum import Enum, auto

from cmdline_parser.tokens import DEFAULT_MODE, Mode, Span, Token, is_separator


class _State(Enum):
    NORMAL = auto()
    ESCAPED = auto()
    SINGLE_QUOTED = auto()
    DOUBLE_QUOTED = auto()
    DOUBLE_QUOTED_ESCAPED = auto()


class Parser:
    """Pull tokens one at a time from a single command line.

    The parser never raises on malformed input: an unterminated quote runs to
    the end of the line, and a dangling escape character is dropped.
    Token spans are reported as UTF-8 byte offsets into *source*.
    """

    def __init__(self, source: str, mode: Mode = DEFAULT_MODE) -> None:
        self._source = source
        self._offsets = _byte_offsets(source)
        self._pos = 0
        self._mode = _check_mode(mode)

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    # ------------------------------------------------------------------
    # Mode and cursor
    # ------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        self._mode = _check_mode(mode)

    def set_mode(self, mode: Mode) -> None:
        """Switch quoting mode; applies from the next token onward."""
        self.mode = mode

    @property
    def position(self) -> int:
        """Byte offset of the cursor."""
        return self._offsets[self._pos]

    def seek(self, offset: int) -> None:
        """Move the cursor to byte *offset*, which must start a character."""
        idx = bisect_left(self._offsets, offset)
        if offset < 0 or idx >= len(self._offsets) or self._offsets[idx] != offset:
            raise ValueError(f"offset {offset} is not a character boundary")
        self._pos = idx

    # ------------------------------------------------------------------
    # Token production
    # ------------------------------------------------------------------

    def next_token(self) -> Token | None:
        """Return the next argument, or None once only separators remain."""
        while self._pos < len(self._source) and is_separator(self._source[self._pos]):
            self._pos += 1

        if self._pos >= len(self._source):
            return None

        start = self._pos
        if self._mode is Mode.CMD:
            value = self._scan_cmd()
        else:
            value = self._scan_bash()

        span = Span(self._offsets[start], self._offsets[self._pos])
        return Token(span, value, self._source[start : self._pos])

    def _scan_cmd(self) -> str:
        chars: list[str] = []
        quoted = False
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch == '"':
                quoted = not quoted
            elif not quoted and is_separator(ch):
                break
            else:
                chars.append(ch)
            self._pos += 1
        return "".join(chars)

    def _scan_bash(self) -> str:
        chars: list[str] = []
        state = _State.NORMAL
        while self._pos < len(self._source):
            ch = self._source[self._pos]

            if state is _State.NORMAL:
                if is_separator(ch):
                    break
                if ch == "\\":
                    state = _State.ESCAPED
                elif ch == "'":
                    state = _State.SINGLE_QUOTED
                elif ch == '"':
                    state = _State.DOUBLE_QUOTED
                else:
                    chars.append(ch)
            elif state is _State.ESCAPED:
                chars.append(ch)
                state = _State.NORMAL
            elif state is _State.SINGLE_QUOTED:
                if ch == "'":
                    state = _State.NORMAL
                else:
                    chars.append(ch)
            elif state is _State.DOUBLE_QUOTED:
                if ch == '"':
                    state = _State.NORMAL
                elif ch == "\\":
                    state = _State.DOUBLE_QUOTED_ESCAPED
                else:
                    chars.append(ch)
            else:
                chars.append(ch)
                state = _State.DOUBLE_QUOTED

            self._pos += 1

        # A dangling backslash at end of input contributes nothing
        return "".join(chars)


def _check_mode(mode: Mode) -> Mode:
    if not isinstance(mode, Mode):
        raise TypeError(f"mode must be a Mode, got {type(mode).__name__}")
    return mode


def _byte_offsets(source: str) -> Sequence[int]:
    """Map each character index (plus the end) to its UTF-8 byte offset."""
    if source.isascii():
        return range(len(source) + 1)
    offsets = [0]
    total = 0
    for ch in source:
        total += len(ch.encode("utf-8", "surrogatepass"))
        offsets.append(total)
    return offsets


def tokenize(source: str, mode: Mode = DEFAULT_MODE) -> list[Token]:
    """Convenience function: split source and return every token."""
    return list(Parser(source, mode))


def split(source: str, mode: Mode = DEFAULT_MODE) -> list[str]:
    """Convenience function: split source and return the unescaped values."""
    return [token.value for token in Parser(source, mode)]
