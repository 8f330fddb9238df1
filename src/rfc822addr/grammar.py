"""Recursive-descent matcher for the RFC822 address grammar.

Each rule takes a token index and returns either a ``Match`` describing
what it consumed or ``None``. A failed rule never moves its caller's
position, and alternatives are tried strictly in order with the first
success winning; there is no backtracking across rules.

Every match carries three strings:

* ``text``: the display form, re-serialized from the consumed tokens
* ``comment``: comments seen but deferred to the end of the construct
* ``addr``: the canonical address, comments stripped and quoting resolved
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass

from rfc822addr.canonical import Canonicalizer, identity
from rfc822addr.quoting import quote, unquote
from rfc822addr.tokens import Token, TokenKind

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    pos: int
    text: str = ""
    comment: str = ""
    addr: str = ""


Rule = Callable[["Matcher", int], "Match | None"]


def _rule(grammar: str) -> Callable[[Rule], Rule]:
    """Wrap a rule so it traces entry and outcome at DEBUG level."""

    def decorate(method: Rule) -> Rule:
        name = method.__name__

        @functools.wraps(method)
        def traced(self: Matcher, pos: int) -> Match | None:
            if not log.isEnabledFor(logging.DEBUG):
                return method(self, pos)
            indent = "  " * self._depth
            tok = self.tokens[pos]
            log.debug("%s%s: %r: %s", indent, name, tok.value or tok.kind.value, grammar)
            self._depth += 1
            try:
                result = method(self, pos)
            finally:
                self._depth -= 1
            if result is None:
                log.debug("%s%s: failed", indent, name)
            else:
                log.debug(
                    "%s%s: succeeded text=%r comment=%r addr=%r",
                    indent, name, result.text, result.comment, result.addr,
                )
            return result

        return traced

    return decorate


class Matcher:
    """Matches a token list against the address grammar."""

    def __init__(
        self,
        tokens: list[Token],
        canonicalize: Canonicalizer = identity,
    ) -> None:
        self.tokens = tokens
        self.canonicalize = canonicalize
        self.stopped_at = 0
        self._depth = 0

    # ── Token access ─────────────────────────────────────────────

    def _at(self, pos: int, kind: TokenKind) -> bool:
        return self.tokens[pos].kind is kind

    def skip_comments(self, pos: int) -> tuple[int, str]:
        """Consume consecutive comments, returning the next position and their text."""
        comment = ""
        while self.tokens[pos].kind is TokenKind.COMMENT:
            comment += " " + self.tokens[pos].value
            pos += 1
        return pos, comment

    # ── Domains ──────────────────────────────────────────────────

    @_rule("atom / domain-literal")
    def sub_domain(self, pos: int) -> Match | None:
        pos, comment = self.skip_comments(pos)
        tok = self.tokens[pos]
        if tok.kind in (TokenKind.ATOM, TokenKind.DOMAIN_LITERAL):
            return Match(pos + 1, tok.value, comment, tok.value)
        return None

    @_rule("sub-domain *(PERIOD sub-domain)")
    def domain(self, pos: int) -> Match | None:
        first = self.sub_domain(pos)
        if first is None:
            return None
        pos, text, addr = first.pos, first.text, first.addr
        comment = ""
        while True:
            pos, skipped = self.skip_comments(pos)
            comment += skipped
            if not self._at(pos, TokenKind.PERIOD):
                break
            sub = self.sub_domain(pos + 1)
            if sub is None:
                break
            pos = sub.pos
            text += "." + sub.text
            comment += sub.comment
            addr += "." + sub.addr
        return Match(pos, text, first.comment + comment, addr)

    @_rule("1#(AT domain) COLON")
    def route(self, pos: int) -> Match | None:
        text = ""
        comment = ""
        count = 0
        while self._at(pos, TokenKind.AT):
            dom = self.domain(pos + 1)
            if dom is None:
                return None
            text += "@" + dom.text
            comment += dom.comment
            count += 1
            pos = dom.pos
        if count == 0:
            return None
        pos, skipped = self.skip_comments(pos)
        comment += skipped
        if not self._at(pos, TokenKind.COLON):
            return None
        return Match(pos + 1, text, comment, "")

    # ── Local parts ──────────────────────────────────────────────

    @_rule("atom / quoted-string")
    def word(self, pos: int) -> Match | None:
        pos, comment = self.skip_comments(pos)
        tok = self.tokens[pos]
        if tok.kind is TokenKind.ATOM:
            return Match(pos + 1, tok.value, comment, tok.value)
        if tok.kind is TokenKind.QUOTED_STRING:
            raw = unquote(tok.value)
            return Match(pos + 1, quote(raw), comment, raw)
        return None

    @_rule("word *(PERIOD word)")
    def local_part(self, pos: int) -> Match | None:
        first = self.word(pos)
        if first is None:
            return None
        pos, text, comment, addr = first.pos, first.text, first.comment, first.addr
        while True:
            pos, skipped = self.skip_comments(pos)
            comment += skipped
            if not self._at(pos, TokenKind.PERIOD):
                break
            nxt = self.word(pos + 1)
            if nxt is None:
                break
            pos = nxt.pos
            text += "." + nxt.text
            comment += nxt.comment
            addr += "." + nxt.addr
        return Match(pos, text, comment, addr)

    @_rule("local-part *(AT domain)")
    def addr_spec(self, pos: int) -> Match | None:
        local = self.local_part(pos)
        if local is None:
            return None
        pos, text, comment, addr = local.pos, local.text, local.comment, local.addr
        # Every domain but the last is folded into the source route.
        domain = ""
        while True:
            pos, skipped = self.skip_comments(pos)
            comment += skipped
            if not self._at(pos, TokenKind.AT):
                break
            dom = self.domain(pos + 1)
            if dom is None:
                break
            if domain:
                text += "@" + domain
                addr += "@" + domain
            domain = dom.addr
            comment += dom.comment
            pos = dom.pos
        domain = self.canonicalize(domain)
        return Match(pos, f"{text}@{domain}", comment, f"{addr}@{domain}\n")

    @_rule("LANGLE [route] addr-spec RANGLE")
    def route_addr(self, pos: int) -> Match | None:
        pos, comment = self.skip_comments(pos)
        if not self._at(pos, TokenKind.LANGLE):
            return None
        pos, skipped = self.skip_comments(pos + 1)
        comment += skipped
        # A route is display-only and dropped from the result.
        route = self.route(pos)
        if route is not None:
            pos = route.pos
            comment += route.comment
        spec = self.addr_spec(pos)
        if spec is None:
            return None
        comment += spec.comment
        pos, skipped = self.skip_comments(spec.pos)
        comment += skipped
        if not self._at(pos, TokenKind.RANGLE):
            return None
        return Match(pos + 1, f"<{spec.text}>{comment}", "", spec.addr)

    # ── Mailboxes ────────────────────────────────────────────────

    @_rule("word *word")
    def phrase(self, pos: int) -> Match | None:
        first = self.word(pos)
        if first is None:
            return None
        pos, text, comment = first.pos, first.text, first.comment
        while True:
            nxt = self.word(pos)
            if nxt is None:
                break
            text += " " + nxt.text
            comment += nxt.comment
            pos = nxt.pos
        return Match(pos, text, comment, "")

    @_rule("[phrase] route-addr")
    def route_spec(self, pos: int) -> Match | None:
        name = self.phrase(pos)
        if name is not None:
            pos = name.pos
        target = self.route_addr(pos)
        if target is None:
            return None
        if name is None:
            return target
        return Match(
            target.pos,
            f"{name.text}{name.comment} {target.text}{target.comment}",
            "",
            target.addr,
        )

    @_rule("route-spec / addr-spec")
    def mailbox(self, pos: int) -> Match | None:
        result = self.route_spec(pos)
        if result is not None:
            return result
        return self.addr_spec(pos)

    def _skip_separators(self, pos: int) -> tuple[int, str]:
        """Skip any run of commas and comments between list members."""
        comment = ""
        while True:
            pos, skipped = self.skip_comments(pos)
            comment += skipped
            if not self._at(pos, TokenKind.COMMA):
                return pos, comment
            pos += 1

    def _list(self, pos: int, member: Rule) -> tuple[Match | None, int]:
        """Match ``member *(*(COMMA) member)``.

        Returns the match (or None if the first member failed) and the
        position after the trailing separators, where matching stopped.
        """
        first = member(self, pos)
        if first is None:
            return None, pos
        pos = first.pos
        text = first.text + first.comment
        addr = first.addr
        while True:
            scan, skipped = self._skip_separators(pos)
            text += skipped
            if self._at(scan, TokenKind.EOT):
                break
            nxt = member(self, scan)
            if nxt is None:
                break
            pos = nxt.pos
            text += ", " + nxt.text + nxt.comment
            addr += nxt.addr
        return Match(scan, text, "", addr), scan

    @_rule("mailbox *(*(COMMA) mailbox)")
    def mailboxes(self, pos: int) -> Match | None:
        result, _ = self._list(pos, Matcher.mailbox)
        return result

    @_rule("phrase COLON [#mailboxes] SEMICOLON")
    def group(self, pos: int) -> Match | None:
        name = self.phrase(pos)
        if name is None:
            return None
        pos = name.pos
        if not self._at(pos, TokenKind.COLON):
            return None
        members = self.mailboxes(pos + 1)
        if members is None:
            members = Match(pos + 1)
        pos, comment = self.skip_comments(members.pos)
        if not self._at(pos, TokenKind.SEMICOLON):
            return None
        return Match(
            pos + 1,
            f"{name.text}: {members.text}{members.comment}{comment};",
            "",
            members.addr,
        )

    @_rule("group / mailbox")
    def address(self, pos: int) -> Match | None:
        result = self.group(pos)
        if result is not None:
            return result
        return self.mailbox(pos)

    @_rule("address *(*(COMMA) address) EOT")
    def addresses(self, pos: int) -> Match | None:
        result, stopped = self._list(pos, Matcher.address)
        if result is None or not self._at(stopped, TokenKind.EOT):
            self.stopped_at = stopped
            log.debug("addresses: rule ended before end of input at token %d", stopped)
            return None
        return result
