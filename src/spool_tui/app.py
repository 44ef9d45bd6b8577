# =============================================================================
# Spool-TUI Main Application
# =============================================================================
# The Textual application class and the command-line entry point.
#
# Start-up is strictly sequential:
#   1. Parse arguments and load configuration
#   2. Work out which mailbox files to open (one user, or the whole spool)
#   3. Load each mailbox fully into memory
#   4. Hand the resulting Session to a front end: the Textual UI, the plain
#      line pager (--plain), or a one-shot listing (--list)
#
# A mailbox that can't be read is reported and skipped when browsing the
# whole spool, but is fatal when it was asked for by name.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from spool_tui import __version__, __app_name__
from spool_tui.config import Config, ConfigError, UIConfig, configure_logging, print_paths
from spool_tui.core import Mailbox, MailboxError
from spool_tui.pager import Pager
from spool_tui.rendering.view import NO_SENDER, NO_SUBJECT, format_date
from spool_tui.session import Session
from spool_tui.spool import discover_mailboxes
from spool_tui.ui.screens.main import MainScreen

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_MAILBOX_ERROR = 1      # Requested mailbox missing/unreadable, or none loaded
EXIT_CONFIG_ERROR = 2


class SpoolApp(App):
    """
    The Spool-TUI application.

    Attributes:
        session: The mailboxes being browsed.
        config: The loaded application configuration.
    """

    # Application metadata
    TITLE = "Spool-TUI"
    SUB_TITLE = "Local Mail"

    # Global keybindings. Not priority, so q stays typeable in the jump prompt
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "show_help", "Help"),
    ]

    def __init__(self, session: Session, config: Config | None = None) -> None:
        """
        Initialize the application.

        Args:
            session: Session holding the loaded mailboxes.
            config: Configuration. Defaults are used if not provided.
        """
        super().__init__()
        self.session = session
        self.config = config or Config()

    def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        self.theme = "textual-light" if self.config.ui.theme == "light" else "textual-dark"
        self.push_screen(MainScreen(self.session))

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

    def action_show_help(self) -> None:
        """Show the keybindings."""
        self.notify(
            "PgUp/PgDn=prev/next mail  Home/End=first/last  g=jump  "
            "↑/↓=scroll  [/]=mailbox  q/Esc=quit",
            timeout=10,
        )


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Spool-TUI: browse local Unix mailboxes in the terminal",
    )

    parser.add_argument(
        "user",
        nargs="?",
        help="Only open this user's mailbox (default: every mailbox in the spool)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--root",
        type=Path,
        help="Mail spool directory (default: from config, else /var/mail)",
    )

    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="USER",
        help="Skip this user's mailbox (repeatable)",
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Use the line-oriented pager instead of the full-screen UI",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="Print a summary of every message and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Write the current configuration to the config file and exit",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def load_mailboxes(paths: list[Path], encoding: str, strict: bool) -> list[Mailbox]:
    """
    Load each mailbox, reporting failures on stderr.

    Args:
        paths: Mailbox files to load.
        encoding: Text encoding of the files.
        strict: Re-raise the first failure instead of skipping it.

    Returns:
        The mailboxes that loaded.

    Raises:
        MailboxError: On the first failure, if strict.
    """
    mailboxes = []
    for path in paths:
        try:
            mailboxes.append(Mailbox.load(path, encoding=encoding))
        except MailboxError as e:
            if strict:
                raise
            logger.warning(f"Skipping mailbox: {e}")
            print(f"{__app_name__}: skipping: {e}", file=sys.stderr)
    return mailboxes


def print_listing(mailboxes: list[Mailbox], ui_config: UIConfig) -> None:
    """Print one summary line per message, grouped by mailbox."""
    for mailbox in mailboxes:
        print(f"{mailbox.name} ({len(mailbox)} messages)")
        for number, message in enumerate(mailbox, start=1):
            date = format_date(message, ui_config.date_format)
            sender = message.sender or NO_SENDER
            subject = message.subject or NO_SUBJECT
            print(f"{number:>5}  {date:<24.24}  {sender:<30.30}  {subject}")


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Spool-TUI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return EXIT_OK

    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.write_config:
        path = config.save(args.config)
        print(f"Wrote {path}")
        return EXIT_OK

    configure_logging(debug=args.debug)

    root = args.root or Path(config.spool.root)
    exclude = [*config.spool.exclude, *args.exclude]

    try:
        paths = discover_mailboxes(root, user=args.user, exclude=exclude)
        mailboxes = load_mailboxes(paths, config.spool.encoding, strict=bool(args.user))
    except MailboxError as e:
        logger.error(str(e))
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return EXIT_MAILBOX_ERROR

    if not mailboxes:
        print(f"{__app_name__}: no readable mailboxes in {root}", file=sys.stderr)
        return EXIT_MAILBOX_ERROR

    if args.list:
        print_listing(mailboxes, config.ui)
        return EXIT_OK

    session = Session(mailboxes, config.ui)

    if args.plain:
        Pager(session).run()
        return EXIT_OK

    # Create and run the application
    app = SpoolApp(session, config)
    app.run()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
