# =============================================================================
# Browsing Session
# =============================================================================
# Owns everything that changes while the user reads mail: which mailbox is
# open and, per mailbox, which message is shown.
#
# The interaction model is a plain synchronous loop:
#
#   render -> read one command -> apply it -> render -> ...
#
# Session.run() is that loop for line-oriented front ends. The Textual app
# drives the same Session one key binding at a time.
# =============================================================================

import logging
from collections.abc import Callable, Sequence
from enum import Enum, auto

from spool_tui.config import UIConfig
from spool_tui.core import Mailbox, NavigationCommand, NavigationState
from spool_tui.rendering import MessageView, TextRenderer, render_message

logger = logging.getLogger(__name__)


class SessionCommand(Enum):
    """Commands handled by the session rather than the navigation state."""
    QUIT = auto()
    NEXT_MAILBOX = auto()
    PREVIOUS_MAILBOX = auto()


SessionInput = NavigationCommand | SessionCommand


class Session:
    """
    A set of loaded mailboxes and the reader's position in each.

    Attributes:
        mailboxes: Loaded mailboxes, in display order.
        ui_config: Display preferences passed to the renderer.

    Usage:
        >>> session = Session([mailbox])
        >>> session.apply(Command.NEXT)
        >>> session.current_view().subject
        'Second message'
    """

    def __init__(self, mailboxes: Sequence[Mailbox], ui_config: UIConfig | None = None) -> None:
        self.mailboxes = list(mailboxes)
        self.ui_config = ui_config or UIConfig()
        self._states = [NavigationState(mailbox) for mailbox in self.mailboxes]
        self._active = 0
        self._renderer = TextRenderer()

    # -------------------------------------------------------------------------
    # Mailbox selection
    # -------------------------------------------------------------------------

    @property
    def active_index(self) -> int:
        """Index of the open mailbox."""
        return self._active

    @property
    def mailbox(self) -> Mailbox | None:
        """The open mailbox, or None if nothing was loaded."""
        if not self.mailboxes:
            return None
        return self.mailboxes[self._active]

    @property
    def navigation(self) -> NavigationState | None:
        """Navigation state of the open mailbox."""
        if not self._states:
            return None
        return self._states[self._active]

    def select_mailbox(self, index: int) -> None:
        """Open the mailbox at index (clamped). Each keeps its own position."""
        if self.mailboxes:
            self._active = max(0, min(index, len(self.mailboxes) - 1))
            logger.debug(f"Switched to mailbox {self.mailboxes[self._active].name}")

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def apply(self, command: SessionInput) -> bool:
        """
        Apply one command.

        Returns:
            False if the command was QUIT, True otherwise.
        """
        if command is SessionCommand.QUIT:
            return False
        if command is SessionCommand.NEXT_MAILBOX:
            self.select_mailbox(self._active + 1)
        elif command is SessionCommand.PREVIOUS_MAILBOX:
            self.select_mailbox(self._active - 1)
        elif self.navigation is not None:
            self.navigation.apply(command)
        return True

    def current_view(self) -> MessageView | None:
        """
        Render the current message, or None if there is nothing to show.
        """
        navigation = self.navigation
        if navigation is None:
            return None
        message = navigation.current()
        if message is None:
            return None
        index, total = navigation.position
        return render_message(message, index, total, self.ui_config, self._renderer)

    def run(
        self,
        read_command: Callable[[], SessionInput | None],
        render: Callable[["Session"], None],
    ) -> None:
        """
        Run the read/apply/render loop until QUIT or end of input.

        Args:
            read_command: Blocks until the next command; None means the
                          input is exhausted.
            render: Paints the session state.
        """
        render(self)
        while True:
            command = read_command()
            if command is None or not self.apply(command):
                break
            render(self)
