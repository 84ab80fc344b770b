"""Shared fixtures for df12_tabs tests."""

from __future__ import annotations

import pytest

FIXED_TOKEN = "fixed00"
FIXED_BASE_ID = f"TabBlock__{FIXED_TOKEN}"


class FixedTokenSource:
    """Token source returning a constant token and counting calls."""

    def __init__(self, token: str = FIXED_TOKEN) -> None:
        self.token = token
        self.calls = 0

    def generate(self, url_safe: bool = True) -> str:  # noqa: ARG002, FBT001, FBT002
        self.calls += 1
        return self.token


class SequenceTokenSource:
    """Token source yielding ``tok0000``, ``tok0001``, ... on successive calls."""

    def __init__(self) -> None:
        self.calls = 0

    def generate(self, url_safe: bool = True) -> str:  # noqa: ARG002, FBT001, FBT002
        token = f"tok{self.calls:04d}"
        self.calls += 1
        return token


@pytest.fixture
def fixed_tokens() -> FixedTokenSource:
    """Return a token source that always yields ``FIXED_TOKEN``."""
    return FixedTokenSource()


@pytest.fixture
def sequence_tokens() -> SequenceTokenSource:
    """Return a token source yielding a fresh predictable token per call."""
    return SequenceTokenSource()
