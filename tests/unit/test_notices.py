"""Tests for NoticeBoard."""

from linkding_sync.notices import NoticeBoard


class TestNoticeBoard:
    def test_notices_are_kept_in_order(self):
        """recent() returns notices oldest first."""
        board = NoticeBoard()
        board.notify("one")
        board.notify("two")
        assert [n.message for n in board.recent()] == ["one", "two"]

    def test_history_is_bounded(self):
        """Only the most recent notices are kept."""
        board = NoticeBoard(history=2)
        for message in ("one", "two", "three"):
            board.notify(message)
        assert [n.message for n in board.recent()] == ["two", "three"]
