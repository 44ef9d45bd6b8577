# =============================================================================
# Mailbox Tree Widget
# =============================================================================
# Sidebar listing the loaded mailboxes, one per spool user, with message
# counts. Selecting a node switches the session to that mailbox.
# =============================================================================

from typing import TYPE_CHECKING

from textual.widgets import Tree

from spool_tui.ui.widgets.message_preview import escape

if TYPE_CHECKING:
    from spool_tui.core import Mailbox


class MailboxTree(Tree):
    """
    A tree widget listing mailboxes.

    Node data is {"type": "mailbox", "index": <position in the session>}.

    Usage:
        >>> tree = MailboxTree("Mailboxes")
        >>> tree.load_mailboxes(session.mailboxes)
    """

    # Note: Avoid emojis with variation selectors (️) as they cause terminal width issues
    MAILBOX_ICON = "📥"
    EMPTY_ICON = "📭"

    def __init__(self, label: str = "Mailboxes", **kwargs) -> None:
        """
        Initialize the mailbox tree.

        Args:
            label: Root node label.
            **kwargs: Additional arguments passed to Tree.
        """
        super().__init__(label, **kwargs)
        self.show_root = False

    def load_mailboxes(self, mailboxes: list["Mailbox"]) -> None:
        """
        Replace the tree contents with the given mailboxes.
        """
        self.clear()

        for index, mailbox in enumerate(mailboxes):
            self.root.add_leaf(
                self._mailbox_label(mailbox),
                data={"type": "mailbox", "index": index},
            )

        self.root.expand()

    def _mailbox_label(self, mailbox: "Mailbox") -> str:
        """Icon, user name and message count."""
        icon = self.EMPTY_ICON if mailbox.is_empty else self.MAILBOX_ICON
        return f"{icon} {escape(mailbox.name)} ({len(mailbox)})"
