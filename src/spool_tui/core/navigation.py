# =============================================================================
# Navigation State
# =============================================================================
# Tracks which message of a mailbox is on screen.
#
# Movement never wraps around and never fails: stepping past either end, or
# jumping to a number outside the mailbox, just stops at the nearest message.
# An empty mailbox has no current message at all.
# =============================================================================

from dataclasses import dataclass
from enum import Enum, auto

from spool_tui.core.mailbox import Mailbox
from spool_tui.core.message import Message


class Command(Enum):
    """Navigation commands that don't take an argument."""
    NEXT = auto()
    PREVIOUS = auto()
    FIRST = auto()
    LAST = auto()


@dataclass(frozen=True)
class JumpTo:
    """Jump to the message at a zero-based index (clamped)."""
    index: int


NavigationCommand = Command | JumpTo


class NavigationState:
    """
    The current position within a Mailbox.

    Attributes:
        mailbox: The mailbox being browsed.
        current_index: Index of the current message, or None when the
                       mailbox is empty.

    Usage:
        >>> nav = NavigationState(mailbox)
        >>> nav.next()
        >>> nav.current().subject
        'Second message'
        >>> nav.apply(JumpTo(1000))   # clamped to the last message
        True
    """

    def __init__(self, mailbox: Mailbox) -> None:
        self.mailbox = mailbox
        self.current_index: int | None = None if mailbox.is_empty else 0

    def current(self) -> Message | None:
        """
        The message to display, or None if the mailbox has no messages.
        """
        if self.current_index is None:
            return None
        return self.mailbox[self.current_index]

    @property
    def position(self) -> tuple[int, int]:
        """One-based (position, total) for status display; (0, 0) if empty."""
        if self.current_index is None:
            return 0, 0
        return self.current_index + 1, len(self.mailbox)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def apply(self, command: NavigationCommand) -> bool:
        """
        Apply a navigation command.

        Returns:
            True if the current message changed.
        """
        before = self.current_index
        if isinstance(command, JumpTo):
            self.jump_to(command.index)
        elif command is Command.NEXT:
            self.next()
        elif command is Command.PREVIOUS:
            self.previous()
        elif command is Command.FIRST:
            self.first()
        elif command is Command.LAST:
            self.last()
        else:
            raise ValueError(f"Unknown navigation command: {command!r}")
        return self.current_index != before

    def next(self) -> None:
        """Move to the next message, staying put on the last one."""
        if self.current_index is not None:
            self.current_index = min(self.current_index + 1, len(self.mailbox) - 1)

    def previous(self) -> None:
        """Move to the previous message, staying put on the first one."""
        if self.current_index is not None:
            self.current_index = max(self.current_index - 1, 0)

    def first(self) -> None:
        """Move to the first (oldest) message."""
        if self.current_index is not None:
            self.current_index = 0

    def last(self) -> None:
        """Move to the last (newest) message."""
        if self.current_index is not None:
            self.current_index = len(self.mailbox) - 1

    def jump_to(self, index: int) -> None:
        """Move to a zero-based index, clamped into the mailbox."""
        if self.current_index is not None:
            self.current_index = max(0, min(index, len(self.mailbox) - 1))
