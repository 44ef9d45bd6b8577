# =============================================================================
# Message Splitter
# =============================================================================
# Splits the raw text of an mbox file into one record per message.
#
# mbox is the simplest mailbox format there is: messages are concatenated in
# a single file, and each one starts with an envelope line like
#
#   From alice@example.com Mon Jan  1 00:00:00 2024
#
# Every line that starts with "From " is treated as a separator. Writers are
# supposed to quote body lines as ">From ", but not all of them do, and
# undoing that quoting is not attempted here.
# =============================================================================

import re
from dataclasses import dataclass
from typing import Iterator

# "From " at the very start of the text or right after a newline
DELIMITER = re.compile(r"^From ", re.MULTILINE)


@dataclass(frozen=True)
class RawRecord:
    """
    A span of mailbox text holding exactly one message.

    Attributes:
        start: Offset of the envelope line in the mailbox text.
        end: Offset one past the last character of the record.
        text: The record itself, envelope line included.
    """
    start: int
    end: int
    text: str


class MessageSplitter:
    """
    Restartable iterator over the messages of an mbox file.

    Each call to iter() rescans the text, so the same splitter can be walked
    any number of times. Text before the first envelope line is preamble and
    is not yielded.

    Usage:
        >>> splitter = MessageSplitter(text)
        >>> for record in splitter:
        ...     print(record.start, record.end)
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[RawRecord]:
        starts = [match.start() for match in DELIMITER.finditer(self.text)]
        ends = starts[1:] + [len(self.text)]
        for start, end in zip(starts, ends):
            yield RawRecord(start=start, end=end, text=self.text[start:end])

    @property
    def preamble(self) -> str:
        """Text before the first envelope line (usually empty)."""
        match = DELIMITER.search(self.text)
        if match is None:
            return self.text
        return self.text[:match.start()]


def split_messages(text: str) -> list[RawRecord]:
    """Split mailbox text into a list of records."""
    return list(MessageSplitter(text))
