"""Tests for the Message model."""

import dataclasses
from datetime import datetime, timezone

import pytest

from spool_tui.core import Mailbox, Message
from spool_tui.rendering import render_message


RECORD = (
    "From user@host Mon Jan 1 00:00:00 2024\n"
    "From: Alice Example <a@b.com>\n"
    "Subject: Hello\n"
    " world\n"
    "Date: Mon, 1 Jan 2024 10:30:00 +0000\n"
    "\n"
    "First line\n"
    "\n"
    "Third line\n"
    "\n"
    "\n"
)


class TestFromRecord:
    """Building a Message from a raw record."""

    def test_envelope_headers_and_body(self):
        message = Message.from_record(RECORD)

        assert message.envelope == "From user@host Mon Jan 1 00:00:00 2024"
        assert message.headers["subject"] == "Hello world"
        assert message.body == ("First line", "", "Third line")

    def test_display_fields(self):
        message = Message.from_record(RECORD)

        assert message.sender == "Alice Example <a@b.com>"
        assert message.sender_name == "Alice Example"
        assert message.subject == "Hello world"
        assert message.date == "Mon, 1 Jan 2024 10:30:00 +0000"
        assert message.date_sent == datetime(2024, 1, 1, 10, 30, tzinfo=timezone.utc)

    def test_missing_headers_give_empty_strings(self):
        message = Message.from_record("From x@y Mon Jan 1 00:00:00 2024\n\nbody only\n")

        assert message.sender == ""
        assert message.subject == ""
        assert message.date == ""
        assert message.date_sent is None
        assert message.body == ("body only",)

    def test_unparsable_date(self):
        message = Message.from_record("From x@y\nDate: sometime last week\n\n")
        assert message.date == "sometime last week"
        assert message.date_sent is None

    def test_no_header_body_separator(self):
        message = Message.from_record("From x@y\nSubject: only headers\n")
        assert message.subject == "only headers"
        assert message.body == ()

    def test_envelope_only(self):
        message = Message.from_record("From x@y Mon Jan 1 00:00:00 2024\n")
        assert message.envelope == "From x@y Mon Jan 1 00:00:00 2024"
        assert len(message.headers) == 0
        assert message.body == ()

    def test_crlf_line_endings_are_stripped(self):
        message = Message.from_record("From x@y\r\nSubject: Hi\r\n\r\nHello\r\n")
        assert message.subject == "Hi"
        assert message.body == ("Hello",)

    def test_body_is_verbatim(self):
        """Body lines keep indentation and '>From ' quoting."""
        message = Message.from_record("From x@y\n\n  indented\n>From quoted\n")
        assert message.body == ("  indented", ">From quoted")

    def test_raw_headers_kept(self):
        message = Message.from_record(RECORD)
        assert message.raw_headers.startswith("From: Alice Example <a@b.com>\nSubject: Hello\n world")


class TestDecoding:
    """RFC 2047 encoded words in display fields."""

    def test_encoded_subject(self):
        message = Message.from_record("From x@y\nSubject: =?utf-8?q?Caf=C3=A9?=\n\n")
        assert message.subject == "Café"
        # The raw header is untouched
        assert message.headers["subject"] == "=?utf-8?q?Caf=C3=A9?="

    def test_encoded_sender_name(self):
        message = Message.from_record("From x@y\nFrom: =?iso-8859-1?q?Jos=E9?= <jose@example.com>\n\n")
        assert message.sender_name == "José"

    def test_unknown_charset_falls_back(self):
        message = Message.from_record("From x@y\nSubject: =?x-unknown?q?abc?=\n\n")
        assert message.subject

    def test_damaged_base64_word_falls_back_to_raw(self):
        message = Message.from_record(
            "From x@y\nFrom: =?utf-8?b?a?= <a@b.com>\nSubject: =?utf-8?b?a?=\n\nbody\n"
        )
        assert message.subject == "=?utf-8?b?a?="
        assert message.sender == "=?utf-8?b?a?= <a@b.com>"

    def test_damaged_word_still_renders(self):
        mailbox = Mailbox.from_text("From u@h x\nSubject: =?utf-8?b?a?=\n\nbody\n")
        view = render_message(mailbox[0], 1, 1)
        assert view.subject == "=?utf-8?b?a?="
        assert view.body_lines == ("body",)


class TestMessageProperties:
    """Derived properties."""

    def test_content_type_defaults_to_text_plain(self):
        assert Message().content_type == "text/plain"
        assert not Message().is_multipart

    def test_multipart_content_type(self):
        message = Message.from_record(
            'From x@y\nContent-Type: Multipart/Alternative; boundary="b"\n\n'
        )
        assert message.content_type == "multipart/alternative"
        assert message.is_multipart

    def test_str(self):
        assert str(Message.from_record(RECORD)) == "Alice Example: Hello world"

    def test_message_is_hashable(self):
        first = Message.from_record(RECORD)
        second = Message.from_record(RECORD)
        assert hash(first) == hash(second)
        assert len({first, second, Message()}) == 2

    def test_message_is_frozen(self):
        message = Message.from_record(RECORD)
        with pytest.raises(dataclasses.FrozenInstanceError):
            message.body = ()
