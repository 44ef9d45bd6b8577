# =============================================================================
# Spool-TUI Core Module
# =============================================================================
# The mailbox parsing and navigation core. Nothing in here touches the
# terminal, so it can be imported and tested on its own.
#
#   - splitter: Cuts raw mbox text into one record per message
#   - headers: Parses a header block into a case-insensitive mapping
#   - Message: One parsed email
#   - Mailbox: All messages from one mbox file
#   - NavigationState: Which message is currently shown
# =============================================================================

from spool_tui.core.headers import Headers, parse_headers, split_header_block
from spool_tui.core.mailbox import (
    Mailbox,
    MailboxError,
    MailboxNotFoundError,
    MailboxReadError,
)
from spool_tui.core.message import Message
from spool_tui.core.navigation import Command, JumpTo, NavigationCommand, NavigationState
from spool_tui.core.splitter import MessageSplitter, RawRecord, split_messages

__all__ = [
    "Command",
    "Headers",
    "JumpTo",
    "Mailbox",
    "MailboxError",
    "MailboxNotFoundError",
    "MailboxReadError",
    "Message",
    "MessageSplitter",
    "NavigationCommand",
    "NavigationState",
    "RawRecord",
    "parse_headers",
    "split_header_block",
    "split_messages",
]
