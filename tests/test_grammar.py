"""Tests for the individual grammar rules."""

from __future__ import annotations

import logging

from rfc822addr.canonical import DefaultHost
from rfc822addr.grammar import Match
from tests.helpers import matcher


class TestDomains:
    def test_sub_domain_atom(self):
        assert matcher("example").sub_domain(0) == Match(1, "example", "", "example")

    def test_sub_domain_literal(self):
        m = matcher("[10.0.0.1]").sub_domain(0)
        assert m.text == m.addr == "[10.0.0.1]"

    def test_sub_domain_leading_comment(self):
        m = matcher("(c) host").sub_domain(0)
        assert m == Match(2, "host", " (c)", "host")

    def test_sub_domain_rejects_period(self):
        assert matcher(".").sub_domain(0) is None

    def test_domain(self):
        assert matcher("a.b.c").domain(0) == Match(5, "a.b.c", "", "a.b.c")

    def test_domain_leaves_trailing_period(self):
        m = matcher("a.b.").domain(0)
        assert m.pos == 3
        assert m.text == "a.b"

    def test_domain_collects_comments(self):
        m = matcher("a (x) . b").domain(0)
        assert m == Match(4, "a.b", " (x)", "a.b")

    def test_domain_absorbs_trailing_comment(self):
        m = matcher("a (x)").domain(0)
        assert m.pos == 2
        assert m.comment == " (x)"

    def test_route(self):
        assert matcher("@a@b.c: x").route(0) == Match(7, "@a@b.c", "", "")

    def test_route_requires_colon(self):
        assert matcher("@a x").route(0) is None

    def test_route_requires_domain(self):
        assert matcher("x:").route(0) is None
        assert matcher("@:").route(0) is None


class TestWords:
    def test_atom_word(self):
        assert matcher("john").word(0) == Match(1, "john", "", "john")

    def test_quoted_word_with_space_stays_quoted(self):
        m = matcher('"john smith"').word(0)
        assert m.text == '"john smith"'
        assert m.addr == "john smith"

    def test_quoted_word_with_symbols_stays_quoted(self):
        m = matcher('"a.b"').word(0)
        assert m.text == '"a\\.b"'
        assert m.addr == "a.b"

    def test_word_rejects_structural(self):
        assert matcher("<").word(0) is None

    def test_local_part(self):
        assert matcher("a.b.c").local_part(0) == Match(5, "a.b.c", "", "a.b.c")

    def test_local_part_stops_at_unmatched_period(self):
        assert matcher("a.@").local_part(0).pos == 1

    def test_local_part_mixed_words(self):
        m = matcher('first."x y"').local_part(0)
        assert m.text == 'first."x y"'
        assert m.addr == "first.x y"


class TestAddrSpec:
    def test_simple(self):
        assert matcher("a@b.c").addr_spec(0) == Match(5, "a@b.c", "", "a@b.c\n")

    def test_source_route_accumulation(self):
        m = matcher("a@b@c").addr_spec(0)
        assert m.text == "a@b@c"
        assert m.addr == "a@b@c\n"

    def test_only_last_domain_canonicalized(self):
        m = matcher("a@b@c", str.upper).addr_spec(0)
        assert m.text == "a@b@C"
        assert m.addr == "a@b@C\n"

    def test_canonicalizer_called_once(self):
        seen = []

        def record(domain):
            seen.append(domain)
            return domain

        matcher("a@b.x@c.y@d.z", record).addr_spec(0)
        assert seen == ["d.z"]

    def test_missing_domain_identity(self):
        m = matcher("local").addr_spec(0)
        assert m.addr == "local@\n"

    def test_missing_domain_default_host(self):
        m = matcher("local", DefaultHost("example.org")).addr_spec(0)
        assert m.text == "local@example.org"
        assert m.addr == "local@example.org\n"

    def test_dangling_at_left_unconsumed(self):
        m = matcher("a@b@").addr_spec(0)
        assert m.pos == 3
        assert m.addr == "a@b\n"

    def test_comments_deferred(self):
        m = matcher("a(x)@(y)b(z)").addr_spec(0)
        assert m.text == "a@b"
        assert m.comment == " (x) (y) (z)"


class TestRouteAddr:
    def test_route_addr(self):
        m = matcher("<a@b>").route_addr(0)
        assert m == Match(5, "<a@b>", "", "a@b\n")

    def test_route_is_dropped(self):
        m = matcher("<@r1@r2:a@b>").route_addr(0)
        assert m.text == "<a@b>"
        assert m.addr == "a@b\n"

    def test_comments_follow_bracket(self):
        m = matcher("<(x) a@b (y)>").route_addr(0)
        assert m.text == "<a@b> (x) (y)"
        assert m.addr == "a@b\n"

    def test_missing_close(self):
        assert matcher("<a@b").route_addr(0) is None

    def test_missing_addr_spec(self):
        assert matcher("<>").route_addr(0) is None


class TestMailboxes:
    def test_phrase(self):
        m = matcher("John Q Public <").phrase(0)
        assert m.pos == 3
        assert m.text == "John Q Public"
        assert m.addr == ""

    def test_route_spec_with_phrase(self):
        m = matcher("John Doe <john@example.com>").route_spec(0)
        assert m.text == "John Doe <john@example.com>"
        assert m.addr == "john@example.com\n"

    def test_route_spec_without_phrase(self):
        assert matcher("<a@b>").route_spec(0).text == "<a@b>"

    def test_mailbox_falls_back_to_addr_spec(self):
        assert matcher("a@b").mailbox(0).text == "a@b"

    def test_mailbox_restarts_from_original_position(self):
        m = matcher("John Doe <a@b").mailbox(0)
        assert m.pos == 1
        assert m.addr == "John@\n"

    def test_mailboxes(self):
        m = matcher("a@b, c@d").mailboxes(0)
        assert m.text == "a@b, c@d"
        assert m.addr == "a@b\nc@d\n"

    def test_mailboxes_stop_before_semicolon(self):
        m = matcher("a@b, c@d;").mailboxes(0)
        assert m.pos == 7

    def test_mailboxes_consume_repeated_commas(self):
        m = matcher("a@b,,, c@d").mailboxes(0)
        assert m.text == "a@b, c@d"


class TestGroups:
    def test_group(self):
        m = matcher("list: a@b.c, d@e.f;").group(0)
        assert m.text == "list: a@b.c, d@e.f;"
        assert m.addr == "a@b.c\nd@e.f\n"

    def test_empty_group(self):
        m = matcher("list:;").group(0)
        assert m.text == "list: ;"
        assert m.addr == ""

    def test_group_requires_semicolon(self):
        assert matcher("list: a@b").group(0) is None

    def test_address_prefers_group(self):
        m = matcher("team: a@b;").address(0)
        assert m.text == "team: a@b;"

    def test_address_falls_back_to_mailbox(self):
        assert matcher("a@b").address(0).text == "a@b"


class TestAddresses:
    def test_addresses(self):
        m = matcher("a@b.c, d@e.f").addresses(0)
        assert m.addr == "a@b.c\nd@e.f\n"

    def test_trailing_tokens_fail(self):
        mt = matcher("a@b >")
        assert mt.addresses(0) is None
        assert mt.stopped_at == 3

    def test_first_address_fails(self):
        mt = matcher("> a@b")
        assert mt.addresses(0) is None
        assert mt.stopped_at == 0

    def test_trailing_comments_allowed(self):
        m = matcher("a@b, (done)").addresses(0)
        assert m.text == "a@b (done)"

    def test_rules_are_traced(self, caplog):
        caplog.set_level(logging.DEBUG, logger="rfc822addr.grammar")
        matcher("a@b").addresses(0)
        messages = [r.getMessage() for r in caplog.records]
        assert any("addr_spec" in m and "succeeded" in m for m in messages)
        assert any("group: failed" in m for m in messages)
