# =============================================================================
# Jump Screen
# =============================================================================
# Modal dialog asking for a message number to jump to.
#
# Numbers are 1-based as shown in the status line. Anything out of range is
# clamped by the navigation state, so only non-numbers are rejected here.
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static


class JumpScreen(ModalScreen[int | None]):
    """
    Modal screen for entering a message number.

    Returns the zero-based index, or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    JumpScreen {
        align: center middle;
    }

    #jump-container {
        width: 40;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #jump-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #jump-hint {
        color: $text-muted;
    }
    """

    def __init__(self, total: int) -> None:
        """
        Initialize the jump screen.

        Args:
            total: Number of messages in the open mailbox, for the hint.
        """
        super().__init__()
        self._total = total

    def compose(self) -> ComposeResult:
        with Vertical(id="jump-container"):
            yield Static("Jump to Message", id="jump-title")
            yield Input(placeholder="Message number", id="jump-input")
            yield Static(f"1 - {self._total}, Enter to jump, Esc to cancel", id="jump-hint")

    def on_mount(self) -> None:
        """Focus the input on mount."""
        self.query_one("#jump-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle enter in the input."""
        value = event.value.strip()
        try:
            number = int(value)
        except ValueError:
            self.notify("Please enter a message number", severity="warning")
            return
        self.dismiss(number - 1)

    def action_cancel(self) -> None:
        """Cancel and return None."""
        self.dismiss(None)
