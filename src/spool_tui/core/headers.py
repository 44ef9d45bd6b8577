# =============================================================================
# Header Parsing
# =============================================================================
# Parses the header block of a single message into a case-insensitive map.
#
# RFC 2822 headers look like:
#
#   Subject: A rather long subject line that
#    continues on the next line
#
# Lines that start with whitespace are "folded" continuations of the field
# above them. We unfold them by joining with a single space.
#
# Mail spools are full of oddities (broken MTAs, truncated writes), so a line
# we can't make sense of is skipped rather than failing the whole message.
# =============================================================================

import logging
import re
from collections.abc import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)

# Field names are printable ASCII without spaces or colons (RFC 2822 "ftext")
FIELD_LINE = re.compile(r"^([!-9;-~]+):(.*)$")


class Headers(Mapping[str, str]):
    """
    Read-only, case-insensitive mapping of header names to values.

    Keys are stored lower-cased. Any lookup lower-cases the requested name
    first, so headers["Subject"] and headers["subject"] are the same.

    Usage:
        >>> headers = Headers([("Subject", "Hi"), ("FROM", "a@b.com")])
        >>> headers["subject"]
        'Hi'
        >>> headers.get("From")
        'a@b.com'
    """

    def __init__(self, fields: Iterable[tuple[str, str]] = ()) -> None:
        # Later fields overwrite earlier ones with the same name
        self._fields: dict[str, str] = {}
        for name, value in fields:
            self._fields[name.lower()] = value

    def __getitem__(self, name: str) -> str:
        return self._fields[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __hash__(self) -> int:
        return hash(frozenset(self._fields.items()))

    def __repr__(self) -> str:
        return f"Headers({self._fields!r})"


def parse_headers(lines: Iterable[str]) -> Headers:
    """
    Parse header lines into a Headers mapping.

    Args:
        lines: Header lines without line endings, up to (not including) the
               blank line that ends the header block.

    Returns:
        Headers with names lower-cased, folding removed and the last
        occurrence of a repeated field kept.
    """
    fields: list[list[str]] = []
    # False once a line has been skipped, so its continuations go with it
    attached = False

    for line in lines:
        if line[:1] in (" ", "\t"):
            if attached:
                continuation = line.strip()
                if continuation:
                    field = fields[-1]
                    field[1] = f"{field[1]} {continuation}" if field[1] else continuation
            else:
                logger.debug(f"Skipping orphan continuation line: {line!r}")
            continue

        match = FIELD_LINE.match(line)
        if match is None:
            logger.debug(f"Skipping malformed header line: {line!r}")
            attached = False
            continue

        fields.append([match.group(1), match.group(2).strip()])
        attached = True

    return Headers((name, value) for name, value in fields)


def split_header_block(lines: list[str]) -> tuple[list[str], list[str]]:
    """
    Split message lines at the first blank line.

    The blank line itself belongs to neither part. A message with no blank
    line is all headers.

    Returns:
        Tuple of (header_lines, body_lines).
    """
    for i, line in enumerate(lines):
        if not line.strip():
            return lines[:i], lines[i + 1:]
    return lines, []
