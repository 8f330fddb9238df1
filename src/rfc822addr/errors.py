"""Diagnostics for unparseable address fields, with colored rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rfc822addr.source import Span


class Severity(Enum):
    ERROR = "error"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"

# Lexical failure: unterminated construct or disallowed character.
LEXICAL = "E100"
# Grammatical failure: no production matched, or input left over.
GRAMMATICAL = "E200"


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic pointing into the field text."""

    severity: Severity
    code: str
    message: str
    span: Span


class DiagnosticRenderer:
    """Renders diagnostics against the field they were produced from."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def render(self, diag: Diagnostic, field: str) -> str:
        lines: list[str] = []
        color = _COLORS[diag.severity]

        # Header: error[E200]: message
        lines.append(
            f"{self._c(color)}{diag.severity.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )
        lines.append(f"  {self._c(_BLUE)}-->{self._c(_RESET)} {diag.span}")
        lines.append(f"  {self._c(_BLUE)}|{self._c(_RESET)} {field}")

        caret_len = max(1, diag.span.end - diag.span.start)
        padding = " " * diag.span.start
        lines.append(
            f"  {self._c(_BLUE)}|{self._c(_RESET)} "
            f"{padding}{self._c(color)}{'^' * caret_len}{self._c(_RESET)}"
        )
        return "\n".join(lines)


class AddressParseError(Exception):
    """Raised by the convenience API when a field cannot be parsed."""

    def __init__(self, field: str, diagnostics: list[Diagnostic]) -> None:
        self.field = field
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics]
        super().__init__(f"unparseable address field {field!r}: {'; '.join(messages)}")
