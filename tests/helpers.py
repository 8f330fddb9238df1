"""Shared test helpers for the rfc822addr test suite."""

from __future__ import annotations

from rfc822addr.address import ParseOutcome, parse_addresses
from rfc822addr.canonical import Canonicalizer, identity
from rfc822addr.grammar import Matcher
from rfc822addr.lexer import tokenize


def parse_ok(field: str, canonicalize: Canonicalizer = identity) -> ParseOutcome:
    """Parse a field, asserting it succeeds."""
    outcome = parse_addresses(field, canonicalize)
    assert outcome, [d.message for d in outcome.diagnostics]
    return outcome


def matcher(field: str, canonicalize: Canonicalizer = identity) -> Matcher:
    """Tokenize a field, asserting it lexes, and wrap it in a Matcher."""
    tokens = tokenize(field)
    assert tokens is not None, f"{field!r} did not tokenize"
    return Matcher(tokens, canonicalize)
