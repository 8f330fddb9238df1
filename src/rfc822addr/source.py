"""Span tracking within a single header field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A half-open range of character offsets within the field text."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"col {self.start + 1}"
