# =============================================================================
# Message Views
# =============================================================================
# The boundary between the core and whatever draws on the terminal.
#
# A MessageView holds everything a front end needs to paint one message:
# display strings for the header fields, body lines, and the "3/10" position.
# Front ends never look at Message objects directly.
# =============================================================================

from dataclasses import dataclass

from spool_tui.config import UIConfig
from spool_tui.core import Message
from spool_tui.rendering.text import TextRenderer, extract_body_text

# Placeholders for missing header fields
NO_SENDER = "(unknown sender)"
NO_SUBJECT = "(no subject)"
NO_DATE = "(no date)"


@dataclass(frozen=True)
class MessageView:
    """
    Render-ready data for one message.

    Attributes:
        sender: From header, or a placeholder.
        subject: Subject header, or a placeholder.
        date: Formatted date, the raw Date header if it can't be parsed, or
              a placeholder.
        extra_headers: (label, value) pairs for the configured extra headers
                       that are present.
        body_lines: Body text, one entry per line.
        index: One-based position in the mailbox.
        total: Number of messages in the mailbox.
    """
    sender: str
    subject: str
    date: str
    extra_headers: tuple[tuple[str, str], ...]
    body_lines: tuple[str, ...]
    index: int
    total: int

    @property
    def position(self) -> str:
        """Position string like "3/10"."""
        return f"{self.index}/{self.total}"


def header_label(name: str) -> str:
    """Canonical display form of a header name ("reply-to" -> "Reply-To")."""
    return "-".join(part.capitalize() for part in name.split("-"))


def format_date(message: Message, date_format: str) -> str:
    """Format the Date header, falling back to the raw value."""
    date_sent = message.date_sent
    if date_sent is not None:
        return date_sent.strftime(date_format)
    return message.date.strip() or NO_DATE


def render_message(
    message: Message,
    index: int,
    total: int,
    ui_config: UIConfig | None = None,
    renderer: TextRenderer | None = None,
) -> MessageView:
    """
    Build the view of a message.

    Args:
        message: The message to show.
        index: One-based position of the message.
        total: Number of messages in the mailbox.
        ui_config: Display preferences. Defaults apply if omitted.
        renderer: Shared HTML renderer.

    Returns:
        A MessageView. Missing fields are filled with placeholders.
    """
    ui_config = ui_config or UIConfig()

    extra_headers = tuple(
        (header_label(name), message.headers[name])
        for name in ui_config.show_headers
        if name in message.headers
    )

    return MessageView(
        sender=message.sender or NO_SENDER,
        subject=message.subject or NO_SUBJECT,
        date=format_date(message, ui_config.date_format),
        extra_headers=extra_headers,
        body_lines=tuple(extract_body_text(message, ui_config.render_html, renderer)),
        index=index,
        total=total,
    )


def status_line(view: MessageView | None) -> str:
    """The one-line status shown above a message."""
    if view is None:
        return "No messages"
    return f"Reading mail {view.position}    {view.date}"
