"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from cmdline_parser.parser import tokenize
from cmdline_parser.tokens import Mode


def _pairs(source: str, mode: Mode) -> list[tuple[range, str]]:
    return [(t.range, t.value) for t in tokenize(source, mode)]


@pytest.fixture
def bash():
    """Return a helper that splits source in bash mode into (range, value) pairs."""

    def _bash(source: str) -> list[tuple[range, str]]:
        return _pairs(source, Mode.BASH)

    return _bash


@pytest.fixture
def cmd():
    """Return a helper that splits source in cmd mode into (range, value) pairs."""

    def _cmd(source: str) -> list[tuple[range, str]]:
        return _pairs(source, Mode.CMD)

    return _cmd
