# =============================================================================
# Plain Pager
# =============================================================================
# A line-oriented front end for dumb terminals, pipes and scripts.
#
# Reads one command per line from stdin and prints the current message after
# each one:
#
#   n / p        next / previous message
#   f / l        first / last message
#   g N, or N    jump to message N (1-based)
#   ] / [        next / previous mailbox
#   q            quit
# =============================================================================

import re
import sys
from typing import TextIO

from spool_tui.core import Command, JumpTo
from spool_tui.rendering import MessageView, status_line
from spool_tui.session import Session, SessionCommand, SessionInput

KEYS: dict[str, SessionInput] = {
    "n": Command.NEXT,
    "p": Command.PREVIOUS,
    "f": Command.FIRST,
    "l": Command.LAST,
    "]": SessionCommand.NEXT_MAILBOX,
    "[": SessionCommand.PREVIOUS_MAILBOX,
    "q": SessionCommand.QUIT,
}

# ASCII digits only; str.isdigit() also accepts superscripts that int() rejects
NUMBER = re.compile(r"-?[0-9]+")

HELP = "n/p=next/prev  f/l=first/last  g N=jump  ]/[=mailbox  q=quit"


def parse_command(line: str) -> SessionInput | None:
    """
    Parse one line of pager input.

    Returns:
        The command, or None if the line isn't one.
    """
    words = line.split()
    if not words:
        return None

    if words[0] == "g" and len(words) == 2:
        words = words[1:]
    if len(words) == 1 and NUMBER.fullmatch(words[0]):
        # Users count from 1
        return JumpTo(int(words[0]) - 1)

    return KEYS.get(words[0].lower()) if len(words) == 1 else None


def format_view(view: MessageView | None, mailbox_name: str = "") -> str:
    """Format a message view as plain text."""
    title = f"[{mailbox_name}] " if mailbox_name else ""
    lines = [title + status_line(view)]

    if view is not None:
        lines.append(f"From:    {view.sender}")
        lines.append(f"Subject: {view.subject}")
        for label, value in view.extra_headers:
            lines.append(f"{label + ':':<8} {value}")
        lines.append("-" * 50)
        lines.extend(view.body_lines)

    return "\n".join(lines)


class Pager:
    """
    Drives a Session from a text stream.

    Usage:
        >>> Pager(session).run()
    """

    def __init__(
        self,
        session: Session,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.session = session
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_command(self) -> SessionInput | None:
        """Read lines until one parses; None at end of input."""
        while True:
            self.stdout.write("> ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                return None
            command = parse_command(line)
            if command is not None:
                return command
            if line.strip():
                print(HELP, file=self.stdout)

    def render(self, session: Session) -> None:
        """Print the current message."""
        name = session.mailbox.name if session.mailbox else ""
        print(format_view(session.current_view(), name), file=self.stdout)

    def run(self) -> None:
        """Run until 'q' or end of input."""
        print(HELP, file=self.stdout)
        self.session.run(self.read_command, self.render)
