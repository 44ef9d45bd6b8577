# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Spool-TUI test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from spool_tui.core import Mailbox


TWO_MESSAGES = (
    "From user@host Mon Jan 1 00:00:00 2024\n"
    "From: a@b.com\n"
    "Subject: Hi\n"
    "Date: Mon, 1 Jan 2024 00:00:00 +0000\n"
    "\n"
    "Hello\n"
    "\n"
    "From user@host Mon Jan 1 00:00:00 2024\n"
    "From: c@d.com\n"
    "Subject: Second\n"
    "\n"
    "Line one\n"
    "Line two\n"
)


@pytest.fixture(autouse=True)
def xdg_dirs(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mbox_text():
    """Two well-formed messages."""
    return TWO_MESSAGES


@pytest.fixture
def mbox_file(temp_dir, mbox_text):
    """An mbox file holding two messages."""
    path = temp_dir / "alice"
    path.write_text(mbox_text)
    return path


@pytest.fixture
def spool_dir(temp_dir, mbox_text):
    """
    A mail spool with three users:
        - alice: two messages
        - bob: one message
        - carol: empty mailbox
    plus a lock file and a hidden file that must be ignored.
    """
    spool = temp_dir / "spool"
    spool.mkdir()
    (spool / "alice").write_text(mbox_text)
    (spool / "bob").write_text(
        "From root@host Tue Jan 2 00:00:00 2024\n"
        "From: root@host\n"
        "Subject: Cron <bob@host> backup\n"
        "\n"
        "backup ok\n"
    )
    (spool / "carol").write_text("")
    (spool / "alice.lock").write_text("")
    (spool / ".hidden").write_text("")
    return spool


@pytest.fixture
def make_mailbox():
    """Factory for in-memory mailboxes holding numbered messages."""
    def make(count: int, name: str = "test") -> Mailbox:
        text = "".join(
            f"From user@host Mon Jan 1 00:00:00 2024\n"
            f"Subject: Message {i}\n"
            f"\n"
            f"Body {i}\n"
            f"\n"
            for i in range(count)
        )
        return Mailbox.from_text(text, name)
    return make


@pytest.fixture
def three_messages(make_mailbox):
    """A mailbox with three messages."""
    return make_mailbox(3)


@pytest.fixture
def empty_mailbox(make_mailbox):
    """A mailbox with no messages."""
    return make_mailbox(0)
