"""Tests for mail spool discovery."""

from pathlib import Path

import pytest

from spool_tui.core import MailboxNotFoundError, MailboxReadError
from spool_tui.spool import discover_mailboxes


class TestDiscoverMailboxes:

    def test_lists_users_sorted(self, spool_dir):
        paths = discover_mailboxes(spool_dir)
        assert [p.name for p in paths] == ["alice", "bob", "carol"]

    def test_skips_lock_and_hidden_files(self, spool_dir):
        names = {p.name for p in discover_mailboxes(spool_dir)}
        assert "alice.lock" not in names
        assert ".hidden" not in names

    def test_skips_directories(self, spool_dir):
        (spool_dir / "subdir").mkdir()
        names = {p.name for p in discover_mailboxes(spool_dir)}
        assert "subdir" not in names

    def test_exclude(self, spool_dir):
        paths = discover_mailboxes(spool_dir, exclude=["bob", "nobody"])
        assert [p.name for p in paths] == ["alice", "carol"]

    def test_single_user(self, spool_dir):
        assert discover_mailboxes(spool_dir, user="bob") == [spool_dir / "bob"]

    def test_single_user_is_not_checked(self, spool_dir):
        """Existence is left to Mailbox.load."""
        assert discover_mailboxes(spool_dir, user="ghost") == [spool_dir / "ghost"]

    def test_missing_root(self, temp_dir):
        with pytest.raises(MailboxNotFoundError):
            discover_mailboxes(temp_dir / "no-spool")

    def test_root_is_a_file(self, mbox_file):
        with pytest.raises(MailboxNotFoundError):
            discover_mailboxes(mbox_file)

    def test_unlistable_root(self, spool_dir, monkeypatch):
        def deny(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "iterdir", deny)

        with pytest.raises(MailboxReadError, match="Permission denied"):
            discover_mailboxes(spool_dir)
