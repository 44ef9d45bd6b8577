# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for Spool-TUI.
#
# Structure:
#   - screens/: Full-screen views (main, jump prompt)
#   - widgets/: Reusable UI components (mailbox tree, message preview)
#
# The UI holds no mail state of its own. It renders the Session it is given
# and turns key presses into Session commands.
# =============================================================================

# Screen exports
from spool_tui.ui.screens.main import MainScreen
from spool_tui.ui.screens.jump import JumpScreen

# Widget exports
from spool_tui.ui.widgets.mailbox_tree import MailboxTree
from spool_tui.ui.widgets.message_preview import MessagePreview

__all__ = [
    "MainScreen",
    "JumpScreen",
    "MailboxTree",
    "MessagePreview",
]
