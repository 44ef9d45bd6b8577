"""Tests for message rendering."""

from spool_tui.config import UIConfig
from spool_tui.core import Message
from spool_tui.rendering import TextRenderer, extract_body_text, render_message, status_line
from spool_tui.rendering.view import header_label


MULTIPART = (
    "From x@y Mon Jan 1 00:00:00 2024\n"
    "From: a@b.com\n"
    "Subject: Report\n"
    "MIME-Version: 1.0\n"
    'Content-Type: multipart/alternative; boundary="XYZ"\n'
    "\n"
    "This is a multi-part message in MIME format.\n"
    "\n"
    "--XYZ\n"
    "Content-Type: text/plain; charset=utf-8\n"
    "Content-Transfer-Encoding: quoted-printable\n"
    "\n"
    "Caf=C3=A9 is open.\n"
    "--XYZ\n"
    "Content-Type: text/html; charset=utf-8\n"
    "\n"
    "<p>Caf&eacute; is <b>open</b>.</p>\n"
    "--XYZ--\n"
)

HTML_ONLY = (
    "From x@y Mon Jan 1 00:00:00 2024\n"
    "Content-Type: text/html; charset=utf-8\n"
    "\n"
    "<html><head><style>p { color: red; }</style></head>\n"
    "<body><p>Hello <b>there</b></p></body></html>\n"
)


class TestRenderMessage:

    def test_fields(self):
        message = Message.from_record(
            "From x@y\n"
            "From: a@b.com\n"
            "Subject: Hi\n"
            "To: c@d.com\n"
            "Date: Mon, 1 Jan 2024 10:30:00 +0000\n"
            "\n"
            "Hello\n"
        )
        view = render_message(message, 1, 2)

        assert view.sender == "a@b.com"
        assert view.subject == "Hi"
        assert view.date == "Mon Jan 01 10:30:00 2024"
        assert view.extra_headers == (("To", "c@d.com"),)
        assert view.body_lines == ("Hello",)
        assert view.position == "1/2"

    def test_placeholders(self):
        view = render_message(Message.from_record("From x@y\n\n"), 1, 1)
        assert view.sender == "(unknown sender)"
        assert view.subject == "(no subject)"
        assert view.date == "(no date)"
        assert view.body_lines == ()

    def test_unparsable_date_shown_raw(self):
        view = render_message(Message.from_record("From x@y\nDate: yesterday-ish\n\n"), 1, 1)
        assert view.date == "yesterday-ish"

    def test_custom_date_format_and_headers(self):
        message = Message.from_record(
            "From x@y\nDate: Mon, 1 Jan 2024 10:30:00 +0000\nReply-To: r@s.com\n\n"
        )
        view = render_message(message, 1, 1, UIConfig(date_format="%Y-%m-%d", show_headers=["reply-to"]))
        assert view.date == "2024-01-01"
        assert view.extra_headers == (("Reply-To", "r@s.com"),)

    def test_status_line(self):
        view = render_message(Message.from_record("From x@y\nDate: Mon, 1 Jan 2024 10:30:00 +0000\n\n"), 3, 10)
        assert status_line(view) == "Reading mail 3/10    Mon Jan 01 10:30:00 2024"
        assert status_line(None) == "No messages"


class TestExtractBodyText:

    def test_plain_body_is_verbatim(self):
        message = Message.from_record("From x@y\n\n  <b>not html</b>\n=3D\n")
        assert extract_body_text(message) == ["  <b>not html</b>", "=3D"]

    def test_multipart_prefers_plain_text(self):
        assert extract_body_text(Message.from_record(MULTIPART)) == ["Café is open."]

    def test_html_only_is_converted(self):
        lines = extract_body_text(Message.from_record(HTML_ONLY))
        text = "\n".join(lines)
        assert "Hello there" in text
        assert "<p>" not in text
        assert "color: red" not in text

    def test_html_left_alone_when_disabled(self):
        lines = extract_body_text(Message.from_record(HTML_ONLY), render_html=False)
        assert "<body><p>Hello <b>there</b></p></body></html>" in lines

    def test_base64_body(self):
        message = Message.from_record(
            "From x@y\n"
            "Content-Type: text/plain; charset=utf-8\n"
            "Content-Transfer-Encoding: base64\n"
            "\n"
            "SGVsbG8gd29ybGQK\n"
        )
        assert extract_body_text(message) == ["Hello world"]

    def test_multipart_with_only_attachments_falls_back(self):
        message = Message.from_record(
            "From x@y\n"
            'Content-Type: multipart/mixed; boundary="B"\n'
            "\n"
            "--B\n"
            "Content-Type: application/pdf\n"
            'Content-Disposition: attachment; filename="a.pdf"\n'
            "\n"
            "JVBERi0=\n"
            "--B--\n"
        )
        assert extract_body_text(message) == list(message.body)

    def test_renderer_collapses_blank_lines(self):
        text = TextRenderer().render("<p>one</p><br><br><br><br><p>two</p>")
        assert "\n\n\n" not in text
        assert text.startswith("one")
        assert text.endswith("two")

    def test_renderer_empty_input(self):
        assert TextRenderer().render("   ") == ""


def test_header_label():
    assert header_label("cc") == "Cc"
    assert header_label("reply-to") == "Reply-To"
    assert header_label("x-original-to") == "X-Original-To"
