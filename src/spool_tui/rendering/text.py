# =============================================================================
# Body Text Extraction
# =============================================================================
# Turns a message body into plain lines for the terminal.
#
# Most spool mail (cron output, system notices) is plain text and is shown
# verbatim. Anything MIME-encoded gets a best-effort pass through the stdlib
# email parser:
#   - multipart: the first text/plain part, else the first text/html part
#   - base64 / quoted-printable bodies are decoded
#   - HTML is converted to text with inscriptis
#
# If any of that fails we fall back to the raw body. Attachments are never
# decoded.
# =============================================================================

import email
import email.errors
import logging
import re
from dataclasses import dataclass
from email.message import Message as EmailMessage

from inscriptis import get_text
from inscriptis.css_profiles import CSS_PROFILES
from inscriptis.model.config import ParserConfig

from spool_tui.core import Message

logger = logging.getLogger(__name__)

# Transfer encodings that need decoding before the body is readable
ENCODED_TRANSFERS = ("base64", "quoted-printable")


@dataclass
class TextRenderOptions:
    """
    Options for HTML-to-text rendering.

    Attributes:
        display_links: Show link URLs after the link text.
        display_images: Show [alt text] placeholders for images.
    """
    display_links: bool = True
    display_images: bool = True


class TextRenderer:
    """
    Renders HTML to terminal text using inscriptis.

    inscriptis handles the table layouts, lists and whitespace quirks that
    HTML email is full of.

    Usage:
        >>> renderer = TextRenderer()
        >>> text = renderer.render("<p>Hello <b>world</b></p>")
    """

    def __init__(self, options: TextRenderOptions | None = None) -> None:
        self.options = options or TextRenderOptions()

        # Configure inscriptis
        self._config = ParserConfig(
            css=CSS_PROFILES['strict'],  # Better whitespace handling
            display_links=self.options.display_links,
            display_images=self.options.display_images,
            display_anchors=False,
        )

    def render(self, html_content: str) -> str:
        """
        Convert HTML to plain text.

        Args:
            html_content: HTML content to render.

        Returns:
            Plain text with blank-line runs collapsed.
        """
        if not html_content or not html_content.strip():
            return ""

        html_content = self._preclean_html(html_content)
        text = get_text(html_content, self._config)
        return self._clean_output(text)

    def _preclean_html(self, html: str) -> str:
        """Remove content inscriptis would otherwise print as text."""
        # IE / MSO conditional comments
        html = re.sub(r'<!--\[if[^\]]*\]>.*?<!\[endif\]-->', '', html, flags=re.DOTALL | re.IGNORECASE)

        # Style and script blocks
        html = re.sub(r'<style[^>]*>.*?</style>', '', html, flags=re.DOTALL | re.IGNORECASE)
        html = re.sub(r'<script[^>]*>.*?</script>', '', html, flags=re.DOTALL | re.IGNORECASE)

        # XML declarations
        html = re.sub(r'<\?xml[^>]*\?>', '', html, flags=re.IGNORECASE)

        return html

    def _clean_output(self, text: str) -> str:
        """Clean up the rendered output."""
        # Remove zero-width characters
        text = re.sub(r'[\u200b\u200c\u200d\u2060\ufeff]+', '', text)

        # Normalize multiple blank lines to max 2
        text = re.sub(r'\n{3,}', '\n\n', text)

        # Remove trailing whitespace from lines
        lines = [line.rstrip() for line in text.split('\n')]

        return '\n'.join(lines).strip()


def needs_decoding(message: Message) -> bool:
    """Returns True if the raw body isn't directly readable text."""
    encoding = message.headers.get("content-transfer-encoding", "").strip().lower()
    return (
        message.is_multipart
        or message.content_type == "text/html"
        or encoding in ENCODED_TRANSFERS
    )


def extract_body_text(
    message: Message,
    render_html: bool = True,
    renderer: TextRenderer | None = None,
) -> list[str]:
    """
    Best-effort plain text lines for a message body.

    Args:
        message: The message to extract from.
        render_html: Convert HTML parts to text. If False, HTML is shown as
                     markup.
        renderer: HTML renderer to use. Created on demand.

    Returns:
        Body lines. Falls back to the verbatim body on any decoding problem.
    """
    if not needs_decoding(message):
        return list(message.body)

    try:
        parsed = email.message_from_string(
            message.raw_headers + "\n\n" + "\n".join(message.body)
        )
        body_text, body_html = _find_text_parts(parsed)
    except (email.errors.MessageError, LookupError, ValueError) as e:
        logger.debug(f"MIME extraction failed, showing raw body: {e}")
        return list(message.body)

    if body_text:
        text = body_text
    elif body_html and render_html:
        text = (renderer or TextRenderer()).render(body_html)
    elif body_html:
        text = body_html
    else:
        return list(message.body)

    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _find_text_parts(parsed: EmailMessage) -> tuple[str, str]:
    """Return the first text/plain and text/html bodies, skipping attachments."""
    body_text = ""
    body_html = ""

    for part in parsed.walk():
        # Skip multipart containers
        if part.is_multipart():
            continue

        if "attachment" in str(part.get("Content-Disposition", "")):
            continue

        content_type = part.get_content_type()
        if content_type == "text/plain" and not body_text:
            body_text = _decode_part(part)
        elif content_type == "text/html" and not body_html:
            body_html = _decode_part(part)

    return body_text, body_html


def _decode_part(part: EmailMessage) -> str:
    """Decode a message part to string."""
    payload = part.get_payload(decode=True)
    if isinstance(payload, bytes):
        charset = part.get_content_charset() or "utf-8"
        try:
            return payload.decode(charset, errors="replace")
        except (LookupError, UnicodeDecodeError):
            return payload.decode("utf-8", errors="replace")
    return str(payload) if payload else ""
