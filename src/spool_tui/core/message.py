# =============================================================================
# Message Model
# =============================================================================
# Represents one email message read from an mbox file:
#   - The envelope line ("From sender date") that introduced it
#   - Parsed headers (From, Subject, Date, ...)
#   - The body, verbatim, as a sequence of lines
#
# Messages are frozen. Once a mailbox is loaded nothing changes it, and the
# source file is never written back to.
# =============================================================================

import email.errors
import email.header
import email.utils
import logging
from dataclasses import dataclass, field
from datetime import datetime

from spool_tui.core.headers import Headers, parse_headers, split_header_block

logger = logging.getLogger(__name__)


def decode_header_value(value: str) -> str:
    """
    Decode RFC 2047 encoded words (=?utf-8?q?...?=) in a header value.

    Falls back to the raw value if it can't be decoded.
    """
    if not value:
        return ""
    try:
        decoded_parts = email.header.decode_header(value)
        result = ""
        for part, charset in decoded_parts:
            if isinstance(part, bytes):
                result += part.decode(charset or "utf-8", errors="replace")
            else:
                result += part
        return result
    except (LookupError, ValueError, email.errors.HeaderParseError) as e:
        logger.debug(f"Could not decode header {value!r}: {e}")
        return value


@dataclass(frozen=True)
class Message:
    """
    Represents an email message from an mbox file.

    Attributes:
        envelope: The mbox separator line, e.g.
                  "From alice@example.com Mon Jan  1 00:00:00 2024".
        headers: Parsed headers, case-insensitive.
        body: Body lines after the blank line that ends the headers, with
              line endings and trailing blank lines removed.
        raw_headers: The header block as it appeared in the file. Kept so the
                     body can be re-parsed as MIME for display.

    Example:
        >>> message = Message.from_record(
        ...     "From a@b.com Mon Jan  1 00:00:00 2024\\n"
        ...     "Subject: Hi\\n"
        ...     "\\n"
        ...     "Hello\\n"
        ... )
        >>> message.subject
        'Hi'
        >>> message.body
        ('Hello',)
    """

    envelope: str = ""
    headers: Headers = field(default_factory=Headers)
    body: tuple[str, ...] = ()
    raw_headers: str = ""

    @classmethod
    def from_record(cls, text: str) -> "Message":
        """
        Build a Message from the text of one mbox record.

        Never raises on bad content: unparsable header lines are dropped and
        a record without a header/body separator gets an empty body.
        """
        lines = [line.rstrip("\r") for line in text.split("\n")]

        envelope = ""
        if lines and lines[0].startswith("From "):
            envelope = lines.pop(0)

        header_lines, body_lines = split_header_block(lines)

        # The blank line before the next "From " belongs to the separator
        while body_lines and not body_lines[-1]:
            body_lines.pop()

        return cls(
            envelope=envelope,
            headers=parse_headers(header_lines),
            body=tuple(body_lines),
            raw_headers="\n".join(header_lines),
        )

    # -------------------------------------------------------------------------
    # Display fields
    # -------------------------------------------------------------------------

    @property
    def sender(self) -> str:
        """The From header, decoded. Empty if missing."""
        return decode_header_value(self.headers.get("from", ""))

    @property
    def subject(self) -> str:
        """The Subject header, decoded. Empty if missing."""
        return decode_header_value(self.headers.get("subject", ""))

    @property
    def date(self) -> str:
        """The raw Date header. Empty if missing."""
        return self.headers.get("date", "")

    @property
    def date_sent(self) -> datetime | None:
        """
        The Date header as a datetime, or None if it is missing or garbage.
        """
        if not self.date:
            return None
        try:
            return email.utils.parsedate_to_datetime(self.date)
        except (TypeError, ValueError, IndexError):
            return None

    @property
    def sender_name(self) -> str:
        """
        Display name part of the sender ("Alice" for "Alice <a@b.com>").
        Falls back to the address itself.
        """
        name, address = email.utils.parseaddr(self.sender)
        return name or address or self.sender

    @property
    def content_type(self) -> str:
        """Lower-cased MIME type from Content-Type, defaulting to text/plain."""
        value = self.headers.get("content-type", "")
        mime_type = value.split(";", 1)[0].strip().lower()
        return mime_type or "text/plain"

    @property
    def is_multipart(self) -> bool:
        """Returns True if the message declares a multipart Content-Type."""
        return self.content_type.startswith("multipart/")

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.sender_name}: {self.subject}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"Message(subject={self.subject!r}, from={self.sender!r}, "
            f"lines={len(self.body)})"
        )
