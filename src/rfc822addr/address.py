"""Entry point: tokenize a field, match the address list, report the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rfc822addr.canonical import Canonicalizer, identity
from rfc822addr.errors import GRAMMATICAL, AddressParseError, Diagnostic, Severity
from rfc822addr.grammar import Matcher
from rfc822addr.lexer import Lexer
from rfc822addr.tokens import TokenKind

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one address field; truthy only on success."""

    ok: bool
    display: str = ""
    canonical: str = ""
    diagnostics: tuple[Diagnostic, ...] = ()

    def __bool__(self) -> bool:
        return self.ok

    @property
    def addresses(self) -> list[str]:
        """The canonical addresses, one per mailbox, without line terminators."""
        return self.canonical.split("\n")[:-1]


def parse_addresses(field: str, canonicalize: Canonicalizer = identity) -> ParseOutcome:
    """Parse an unfolded address header value.

    On success the outcome holds the normalized display form and the
    canonical address list, one newline-terminated address per mailbox.
    On failure nothing partial is returned; ``diagnostics`` says why.
    """
    lexer = Lexer(field)
    tokens = lexer.lex()
    if tokens is None:
        log.debug("lexical error in %r: %s", field, lexer.diagnostics[0].message)
        return ParseOutcome(False, diagnostics=tuple(lexer.diagnostics))

    matcher = Matcher(tokens, canonicalize)
    result = matcher.addresses(0)
    if result is None:
        tok = tokens[matcher.stopped_at]
        if tok.kind is TokenKind.EOT:
            message = "empty address field"
        elif matcher.stopped_at == 0:
            message = "no address could be matched"
        else:
            message = "unexpected input after address list"
        log.debug("grammar error in %r: %s at %s", field, message, tok.span)
        diag = Diagnostic(
            severity=Severity.ERROR,
            code=GRAMMATICAL,
            message=message,
            span=tok.span,
        )
        return ParseOutcome(False, diagnostics=(diag,))

    return ParseOutcome(True, result.text, result.addr)


def canonical_addresses(field: str, canonicalize: Canonicalizer = identity) -> list[str]:
    """Return the canonical addresses of ``field``. Raises AddressParseError."""
    outcome = parse_addresses(field, canonicalize)
    if not outcome:
        raise AddressParseError(field, list(outcome.diagnostics))
    return outcome.addresses
