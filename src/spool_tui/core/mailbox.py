# =============================================================================
# Mailbox Model
# =============================================================================
# A Mailbox is the parsed contents of one mbox file: every message, in file
# order (oldest first, since mbox files are appended to).
#
# Loading is all-or-nothing. The file is read in one go, split into records
# and parsed. If the file can't be read we raise; if a message inside it is
# malformed we keep it anyway with whatever fields could be recovered.
# =============================================================================

import logging
from dataclasses import dataclass
from pathlib import Path

from spool_tui.core.message import Message
from spool_tui.core.splitter import MessageSplitter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mailbox:
    """
    An ordered, read-only collection of messages from one mbox file.

    Attributes:
        path: The file the messages were read from.
        messages: Messages in file order.

    Usage:
        >>> mailbox = Mailbox.load(Path("/var/mail/alice"))
        >>> len(mailbox)
        42
        >>> mailbox[0].subject
        'Welcome'
    """

    path: Path
    messages: tuple[Message, ...] = ()

    @classmethod
    def load(cls, path: Path | str, encoding: str = "utf-8") -> "Mailbox":
        """
        Read and parse an mbox file.

        Args:
            path: Location of the mbox file.
            encoding: Text encoding. Undecodable bytes are replaced rather
                      than failing the load.

        Returns:
            A fully populated Mailbox.

        Raises:
            MailboxNotFoundError: If the path doesn't exist or isn't a file.
            MailboxReadError: If the file exists but can't be read.
        """
        path = Path(path)
        logger.debug(f"Reading mailbox {path}")

        try:
            data = path.read_bytes()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as e:
            raise MailboxNotFoundError(f"No mailbox at {path}") from e
        except OSError as e:
            raise MailboxReadError(f"Cannot read mailbox {path}: {e.strerror or e}") from e

        try:
            text = data.decode(encoding, errors="replace")
        except LookupError as e:
            raise MailboxReadError(f"Unknown encoding {encoding!r} for {path}") from e

        mailbox = cls.from_text(text, path)
        logger.info(f"Loaded {len(mailbox)} messages from {path}")
        return mailbox

    @classmethod
    def from_text(cls, text: str, path: Path | str = "") -> "Mailbox":
        """Build a Mailbox from mbox text that is already in memory."""
        splitter = MessageSplitter(text)
        if splitter.preamble.strip():
            logger.debug(f"Discarding {len(splitter.preamble)} chars of preamble in {path}")
        messages = tuple(Message.from_record(record.text) for record in splitter)
        return cls(path=Path(path), messages=messages)

    @property
    def name(self) -> str:
        """The mailbox file name. For spool files this is the user name."""
        return self.path.name

    @property
    def is_empty(self) -> bool:
        """Returns True if the mailbox holds no messages."""
        return not self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __getitem__(self, index: int) -> Message:
        return self.messages[index]

    def __iter__(self):
        return iter(self.messages)


# =============================================================================
# Exceptions
# =============================================================================

class MailboxError(Exception):
    """Base exception for mailbox loading."""
    pass


class MailboxNotFoundError(MailboxError):
    """Raised when a mailbox file (or the spool directory) doesn't exist."""
    pass


class MailboxReadError(MailboxError):
    """Raised when a mailbox exists but can't be read."""
    pass
