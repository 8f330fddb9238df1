"""Lexer for RFC822 address fields.

Produces the token list consumed by the grammar matcher: atoms,
quoted-strings, domain-literals, comments, the single-character
structural symbols, and a terminating EOT token. Any lexical error
aborts the whole field.
"""

from __future__ import annotations

from rfc822addr.chars import (
    LF,
    LPAREN,
    LSQUARE,
    QUOTE,
    RPAREN,
    RSQUARE,
    is_atom_char,
    is_dtext,
    is_qtext,
    is_quoted_pair,
    is_space,
)
from rfc822addr.errors import LEXICAL, Diagnostic, Severity
from rfc822addr.source import Span
from rfc822addr.tokens import STRUCTURAL, Token, TokenKind


class Lexer:
    """Tokenizes one unfolded address field."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []

    def lex(self) -> list[Token] | None:
        """Tokenize the whole field; return None on the first lexical error."""
        while True:
            self._skip_spaces()
            if self.pos >= len(self.source):
                self._emit(TokenKind.EOT, self.pos)
                return self.tokens
            ch = self.source[self.pos]
            if ch in STRUCTURAL:
                self.pos += 1
                self._emit(STRUCTURAL[ch], self.pos - 1, with_text=False)
                ok = True
            elif ch == LPAREN:
                ok = self._lex_comment()
            elif ch == LSQUARE:
                ok = self._lex_domain_literal()
            elif ch == QUOTE:
                ok = self._lex_quoted_string()
            else:
                ok = self._lex_atom()
            if not ok:
                self.tokens = []
                return None

    # ── Helpers ───────────────────────────────────────────────────

    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx < len(self.source):
            return self.source[idx]
        return ""

    def _emit(self, kind: TokenKind, start: int, *, with_text: bool = True) -> Token:
        value = self.source[start:self.pos] if with_text else ""
        tok = Token(kind, value, Span(start, self.pos))
        self.tokens.append(tok)
        return tok

    def _error(self, message: str, start: int) -> bool:
        end = max(self.pos, start + 1)
        self.diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                code=LEXICAL,
                message=message,
                span=Span(start, end),
            )
        )
        return False

    def _skip_spaces(self) -> None:
        while self.pos < len(self.source) and is_space(self.source[self.pos]):
            self.pos += 1

    # ── Token scanners ───────────────────────────────────────────

    def _lex_atom(self) -> bool:
        start = self.pos
        while self.pos < len(self.source) and is_atom_char(self.source[self.pos]):
            self.pos += 1
        if self.pos == start:
            return self._error(f"unexpected character {self._peek()!r}", start)
        self._emit(TokenKind.ATOM, start)
        return True

    def _lex_comment(self) -> bool:
        """Scan a possibly nested comment; quoted-pairs do not affect nesting."""
        start = self.pos
        depth = 0
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if is_quoted_pair(self.source, self.pos):
                self.pos += 1
            elif ch == LPAREN:
                depth += 1
            elif ch == RPAREN:
                depth -= 1
                if depth == 0:
                    self.pos += 1
                    self._emit(TokenKind.COMMENT, start)
                    return True
            elif ch == LF:
                return self._error("unterminated comment", start)
            self.pos += 1
        return self._error("unterminated comment", start)

    def _lex_domain_literal(self) -> bool:
        start = self.pos
        self.pos += 1  # skip [
        self._skip_spaces()
        while self.pos < len(self.source):
            if is_dtext(self.source[self.pos]):
                self.pos += 1
            elif is_quoted_pair(self.source, self.pos):
                self.pos += 2
            else:
                break
        self._skip_spaces()
        if self._peek() != RSQUARE:
            return self._error("unterminated domain-literal", start)
        self.pos += 1
        self._emit(TokenKind.DOMAIN_LITERAL, start)
        return True

    def _lex_quoted_string(self) -> bool:
        start = self.pos
        self.pos += 1  # skip opening "
        while self.pos < len(self.source):
            if is_qtext(self.source[self.pos]):
                self.pos += 1
            elif is_quoted_pair(self.source, self.pos):
                self.pos += 2
            else:
                break
        if self._peek() != QUOTE:
            return self._error("unterminated quoted-string", start)
        self.pos += 1
        self._emit(TokenKind.QUOTED_STRING, start)
        return True


def tokenize(source: str) -> list[Token] | None:
    """Tokenize ``source``; None if it contains a lexical error."""
    return Lexer(source).lex()
