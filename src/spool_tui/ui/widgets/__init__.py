# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for Spool-TUI:
#   - MailboxTree: One node per loaded mailbox
#   - MessagePreview: Scrollable display of the current message
# =============================================================================

from spool_tui.ui.widgets.mailbox_tree import MailboxTree
from spool_tui.ui.widgets.message_preview import MessagePreview

__all__ = ["MailboxTree", "MessagePreview"]
