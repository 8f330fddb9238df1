"""Character classes of the RFC822 lexical grammar."""

from __future__ import annotations

LPAREN = "("
RPAREN = ")"
LSQUARE = "["
RSQUARE = "]"
QUOTE = '"'
ESCAPE = "\\"
LF = "\n"

# C-locale isspace()
_SPACE = frozenset(" \t\n\r\v\f")

_SYMBOLS = frozenset('()<>[]@,;:\\."')


def is_space(ch: str) -> bool:
    return ch in _SPACE


def is_symbol(ch: str) -> bool:
    """Structurally significant characters; never part of an atom."""
    return ch in _SYMBOLS


def is_ctl(ch: str) -> bool:
    code = ord(ch)
    return code <= 31 or code == 127


def is_atom_char(ch: str) -> bool:
    return not (is_space(ch) or is_symbol(ch) or is_ctl(ch))


def is_qtext(ch: str) -> bool:
    return ch not in (QUOTE, ESCAPE, LF)


def is_dtext(ch: str) -> bool:
    return ch not in (LSQUARE, RSQUARE, ESCAPE, LF)


def is_quoted_pair(text: str, i: int) -> bool:
    """True if an escape at ``text[i]`` is followed by another character."""
    return i + 1 < len(text) and text[i] == ESCAPE
