# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - MainScreen: Mailbox list, status line and the current message
#   - JumpScreen: Modal prompt for a message number
# =============================================================================

from spool_tui.ui.screens.jump import JumpScreen
from spool_tui.ui.screens.main import MainScreen

__all__ = ["MainScreen", "JumpScreen"]
