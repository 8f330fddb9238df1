"""Token kinds and token representation for the address lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rfc822addr.source import Span


class TokenKind(Enum):
    # Tokens with content
    ATOM = "atom"
    QUOTED_STRING = "quoted-string"
    DOMAIN_LITERAL = "domain-literal"
    COMMENT = "comment"

    # Structural characters, no content
    LANGLE = "<"
    RANGLE = ">"
    AT = "@"
    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"
    ESCAPE = "\\"
    PERIOD = "."

    # End of text
    EOT = "$"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    span: Span


STRUCTURAL: dict[str, TokenKind] = {
    "<": TokenKind.LANGLE,
    ">": TokenKind.RANGLE,
    "@": TokenKind.AT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "\\": TokenKind.ESCAPE,
    ".": TokenKind.PERIOD,
}
