"""Conversion between quoted-string surface syntax and raw local-part text."""

from __future__ import annotations

from rfc822addr.chars import ESCAPE, QUOTE, is_atom_char, is_quoted_pair, is_symbol


def quote(text: str) -> str:
    """Escape symbol characters, wrapping the result in quotes when needed.

    Non-empty text made only of atom characters is already a valid atom
    and is returned unchanged. Anything else (symbols, whitespace, control
    characters, or the empty string) becomes a quoted-string.
    """
    out: list[str] = []
    quoted = not text
    for ch in text:
        if is_symbol(ch):
            out.append(ESCAPE)
            quoted = True
        elif not is_atom_char(ch):
            quoted = True
        out.append(ch)
    if not quoted:
        return text
    return QUOTE + "".join(out) + QUOTE


def unquote(text: str) -> str:
    """Strip surrounding quotes and resolve every quoted-pair.

    >>> unquote('"a\\\\"b"')
    'a"b'
    """
    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        text = text[1:-1]
    out: list[str] = []
    i = 0
    while i < len(text):
        if is_quoted_pair(text, i):
            i += 1
        out.append(text[i])
        i += 1
    return "".join(out)
