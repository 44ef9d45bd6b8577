# =============================================================================
# Message Preview Widget
# =============================================================================
# Displays one message: header block on top, body below.
#
# Features:
#   - Native line scrolling (arrow keys, mouse wheel)
#   - Placeholders for missing From / Subject / Date
#   - Message text shown verbatim, never interpreted as markup
# =============================================================================

from textual.containers import ScrollableContainer
from textual.widgets import Static

from spool_tui.rendering import MessageView


def escape(text: str) -> str:
    """Escape Rich markup in user content."""
    if not text:
        return ""
    return text.replace("[", "\\[").replace("]", "\\]")


class MessagePreview(ScrollableContainer):
    """
    A scrollable widget showing a rendered message.

    Usage:
        >>> preview = MessagePreview(id="message-preview")
        >>> preview.show_view(session.current_view())
    """

    DEFAULT_CSS = """
    MessagePreview {
        padding: 0 1;
    }

    MessagePreview > #view-header {
        height: auto;
        margin-bottom: 1;
    }

    MessagePreview > #view-body {
        height: auto;
    }
    """

    def compose(self):
        """Compose the widget."""
        yield Static("No messages", id="view-header")
        yield Static("", id="view-body", markup=False)

    def show_view(self, view: MessageView | None, empty_text: str = "No messages") -> None:
        """
        Display a message, or empty_text when there is none.

        Args:
            view: The rendered message.
            empty_text: Shown when view is None.
        """
        header_widget = self.query_one("#view-header", Static)
        body_widget = self.query_one("#view-body", Static)

        if view is None:
            header_widget.update(f"[dim]{escape(empty_text)}[/]")
            body_widget.update("")
            self.scroll_home(animate=False)
            return

        header_lines = [
            f"[bold]From:[/] {escape(view.sender)}",
            f"[bold]Subject:[/] {escape(view.subject)}",
            f"[bold]Date:[/] {escape(view.date)}",
        ]
        for label, value in view.extra_headers:
            header_lines.append(f"[bold]{escape(label)}:[/] {escape(value)}")
        header_lines.append("─" * 50)
        header_widget.update("\n".join(header_lines))

        body_widget.update("\n".join(view.body_lines) if view.body_lines else "(empty message)")

        # New message starts at the top
        self.scroll_home(animate=False)
