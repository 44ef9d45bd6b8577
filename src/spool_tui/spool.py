# =============================================================================
# Mail Spool Discovery
# =============================================================================
# Finds the mailbox files to open under the mail spool directory.
#
# On most Unix systems local mail lands in /var/mail/<user> (or
# /var/spool/mail/<user>), one mbox file per user. Delivery agents also drop
# lock files like "alice.lock" next to them while writing, which we skip.
# =============================================================================

import logging
from collections.abc import Iterable
from pathlib import Path

from spool_tui.core.mailbox import MailboxNotFoundError, MailboxReadError

logger = logging.getLogger(__name__)

DEFAULT_MAIL_ROOT = Path("/var/mail")


def discover_mailboxes(
    root: Path | str = DEFAULT_MAIL_ROOT,
    user: str | None = None,
    exclude: Iterable[str] = (),
) -> list[Path]:
    """
    List the mailbox files to browse.

    Args:
        root: The mail spool directory.
        user: If given, only this user's mailbox is returned. Whether it
              exists is left to Mailbox.load.
        exclude: User names to leave out when listing the whole spool.

    Returns:
        Mailbox paths sorted by user name.

    Raises:
        MailboxNotFoundError: If the spool directory doesn't exist.
        MailboxReadError: If the spool directory can't be listed.
    """
    root = Path(root)

    if user:
        return [root / user]

    excluded = set(exclude)
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise MailboxNotFoundError(f"No mail spool at {root}") from e
    except OSError as e:
        raise MailboxReadError(f"Cannot list mail spool {root}: {e.strerror or e}") from e

    paths = []
    for entry in entries:
        name = entry.name
        if name.startswith(".") or name.endswith(".lock") or name in excluded:
            continue
        if not entry.is_file():
            continue
        paths.append(entry)

    logger.debug(f"Found {len(paths)} mailboxes in {root}")
    return paths
