# =============================================================================
# Spool-TUI: A Terminal Reader for Local Unix Mailboxes
# =============================================================================
#
# Spool-TUI opens the mbox files a Unix system keeps for local mail
# (usually /var/mail/<user>) and lets you page through them from the
# terminal. Cron output, bounce notices and system reports finally get
# a proper reader.
#
# Features:
#   - Reads every mailbox in the spool, or just one user's
#   - Header unfolding and RFC 2047 decoding
#   - Best-effort text extraction from MIME and HTML mail
#   - Full-screen Textual UI, or a plain line pager for dumb terminals
#   - Strictly read-only: mailbox files are never written to
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spool-tui"

# Main entry point - this is what gets called by the 'spool-tui' command
from spool_tui.app import main

__all__ = ["main", "__version__", "__app_name__"]
