# =============================================================================
# Main Screen
# =============================================================================
# The primary view of Spool-TUI, showing:
#   - Left panel: Mailbox list (hidden when only one mailbox is open)
#   - Top line: "Reading mail 3/10" status with the message date
#   - Main panel: The current message
#
# Every key binding applies one command to the Session and repaints.
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from spool_tui.core import Command, JumpTo
from spool_tui.rendering import status_line
from spool_tui.session import Session, SessionCommand, SessionInput
from spool_tui.ui.screens.jump import JumpScreen
from spool_tui.ui.widgets.mailbox_tree import MailboxTree
from spool_tui.ui.widgets.message_preview import MessagePreview


class MainScreen(Screen):
    """
    The mail reading screen.

    Keybindings:
        - PageDown / n: Next message
        - PageUp / p: Previous message
        - Home / End: First / last message
        - g: Jump to a message number
        - Up / Down: Scroll the message
        - ] / [: Next / previous mailbox
        - Tab: Switch between mailbox list and message
    """

    # Page keys would otherwise scroll the focused message pane
    BINDINGS = [
        Binding("pagedown", "next_message", "Next", priority=True),
        Binding("pageup", "previous_message", "Prev", priority=True),
        Binding("home", "first_message", "First", show=False, priority=True),
        Binding("end", "last_message", "Last", show=False, priority=True),
        Binding("n", "next_message", "Next", show=False),
        Binding("p", "previous_message", "Previous", show=False),
        Binding("g", "jump", "Jump"),
        Binding("]", "next_mailbox", "Next Mailbox", show=False),
        Binding("[", "previous_mailbox", "Prev Mailbox", show=False),
        Binding("escape", "app.quit", "Quit", show=False),
    ]

    # CSS for this screen
    CSS = """
    #main-container {
        height: 1fr;
    }

    #sidebar {
        width: 28;
        min-width: 20;
        max-width: 40;
        background: $surface-darken-1;
        border-right: solid $primary;
    }

    #sidebar-header {
        background: $primary;
        color: $text;
        text-align: center;
        height: 3;
        padding: 1;
    }

    #mailbox-tree {
        height: 1fr;
    }

    #content {
        width: 1fr;
    }

    #status-line {
        height: 1;
        background: $surface-darken-2;
        color: $text-muted;
        padding: 0 1;
        text-style: underline;
    }

    #message-preview {
        height: 1fr;
    }
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize the main screen.

        Args:
            session: The browsing session to display.
        """
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-container"):
            with Vertical(id="sidebar"):
                yield Static("Mailboxes", id="sidebar-header")
                yield MailboxTree("Mailboxes", id="mailbox-tree")
            with Vertical(id="content"):
                yield Static("", id="status-line", markup=False)
                yield MessagePreview(id="message-preview")
        yield Footer()

    def on_mount(self) -> None:
        """Fill the sidebar and show the first message."""
        tree = self.query_one("#mailbox-tree", MailboxTree)
        tree.load_mailboxes(self.session.mailboxes)

        if len(self.session.mailboxes) <= 1:
            self.query_one("#sidebar").display = False

        self.query_one("#message-preview", MessagePreview).focus()
        self.refresh_view()

    def refresh_view(self) -> None:
        """Repaint the status line and message for the session's state."""
        mailbox = self.session.mailbox
        view = self.session.current_view()

        name = mailbox.name if mailbox else ""
        status = self.query_one("#status-line", Static)
        status.update(f"{name}    {status_line(view)}" if name else status_line(view))

        preview = self.query_one("#message-preview", MessagePreview)
        preview.show_view(view, empty_text=f"No messages in {name}" if name else "No mailboxes")

        self.app.sub_title = name

    def _apply(self, command: SessionInput) -> None:
        """Apply one command and repaint."""
        self.session.apply(command)
        self.refresh_view()

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def on_tree_node_selected(self, event: MailboxTree.NodeSelected) -> None:
        """Open the mailbox selected in the sidebar."""
        node = event.node
        if node.data and node.data.get("type") == "mailbox":
            self.session.select_mailbox(node.data["index"])
            self.refresh_view()
            self.query_one("#message-preview", MessagePreview).focus()

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_next_message(self) -> None:
        """Move to next message."""
        self._apply(Command.NEXT)

    def action_previous_message(self) -> None:
        """Move to previous message."""
        self._apply(Command.PREVIOUS)

    def action_first_message(self) -> None:
        """Move to first message."""
        self._apply(Command.FIRST)

    def action_last_message(self) -> None:
        """Move to last message."""
        self._apply(Command.LAST)

    def action_next_mailbox(self) -> None:
        """Open the next mailbox."""
        self._apply(SessionCommand.NEXT_MAILBOX)

    def action_previous_mailbox(self) -> None:
        """Open the previous mailbox."""
        self._apply(SessionCommand.PREVIOUS_MAILBOX)

    def action_jump(self) -> None:
        """Ask for a message number and jump to it."""
        mailbox = self.session.mailbox
        if mailbox is None or mailbox.is_empty:
            self.notify("No messages to jump to")
            return

        def handle_jump_result(index: int | None) -> None:
            if index is not None:
                self._apply(JumpTo(index))

        self.app.push_screen(JumpScreen(len(mailbox)), handle_jump_result)
