"""
Tests for ConversationLog.
"""

import pytest

from agent_shell.conversation import NO_HISTORY_MESSAGE, ConversationLog, Turn, TurnRole
from llm_providers import MessageRole


class TestConversationLog:
    """Tests for appending, clearing and converting turns."""

    def test_append_preserves_order(self):
        """Turns are kept in append order."""
        log = ConversationLog()
        log.append(TurnRole.USER, "hi")
        log.append(TurnRole.AGENT, "hello")

        assert log.turns == (Turn(TurnRole.USER, "hi"), Turn(TurnRole.AGENT, "hello"))
        assert len(log) == 2

    def test_append_accepts_role_values(self):
        """Plain role strings are normalized to TurnRole."""
        log = ConversationLog()
        turn = log.append("assistant", "hello")
        assert turn.role is TurnRole.AGENT

    def test_turns_is_read_only_snapshot(self):
        """The turns view is a tuple, detached from later appends."""
        log = ConversationLog()
        log.append(TurnRole.USER, "one")
        snapshot = log.turns
        log.append(TurnRole.USER, "two")

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_clear(self):
        """clear empties the log and summarize returns the sentinel."""
        log = ConversationLog()
        log.append(TurnRole.USER, "hi")
        log.clear()

        assert len(log) == 0
        assert log.summarize() == NO_HISTORY_MESSAGE

    def test_to_chat_messages(self):
        """Turns map onto user and assistant provider messages."""
        log = ConversationLog()
        log.append(TurnRole.USER, "hi")
        log.append(TurnRole.AGENT, "hello")

        messages = log.to_chat_messages()

        assert [m.role for m in messages] == [MessageRole.USER, MessageRole.ASSISTANT]
        assert [m.content for m in messages] == ["hi", "hello"]


class TestSummarize:
    """Tests for the bounded-window summary."""

    def test_empty_log_returns_sentinel(self):
        """An empty log summarizes to the sentinel."""
        assert ConversationLog().summarize() == NO_HISTORY_MESSAGE

    def test_role_labels(self):
        """Users render as User and agent turns as AI."""
        log = ConversationLog()
        log.append(TurnRole.USER, "hi")
        log.append(TurnRole.AGENT, "hello")

        assert log.summarize() == "User: hi\nAI: hello"

    def test_window_keeps_latest_turns_oldest_first(self):
        """Only the last window_size turns are shown, oldest to newest."""
        log = ConversationLog()
        for i in range(8):
            log.append(TurnRole.USER, f"message {i}")

        lines = log.summarize().splitlines()

        assert len(lines) == 5
        assert lines[0] == "User: message 3"
        assert lines[-1] == "User: message 7"

    @pytest.mark.parametrize("window_size", [1, 2, 3, 10])
    def test_never_more_lines_than_window(self, window_size):
        """The summary has at most window_size lines."""
        log = ConversationLog()
        for i in range(4):
            log.append(TurnRole.AGENT, f"reply {i}")

        lines = log.summarize(window_size).splitlines()
        assert len(lines) == min(window_size, 4)

    def test_long_text_is_truncated(self):
        """Text over 100 characters is cut to 97 plus an ellipsis."""
        log = ConversationLog()
        log.append(TurnRole.USER, "x" * 150)

        line = log.summarize()
        content = line[len("User: "):]

        assert len(content) == 100
        assert content.endswith("...")
        assert content[:97] == "x" * 97

    def test_exactly_100_characters_is_not_truncated(self):
        """Text of exactly 100 characters is shown unchanged."""
        log = ConversationLog()
        log.append(TurnRole.USER, "y" * 100)

        assert log.summarize() == "User: " + "y" * 100

    def test_multiline_turn_renders_on_one_line(self):
        """Line breaks inside a turn do not add summary lines."""
        log = ConversationLog()
        log.append(TurnRole.USER, "hi")
        log.append(TurnRole.AGENT, "Sure:\n1. one\n2. two")

        lines = log.summarize(2).splitlines()

        assert lines == ["User: hi", "AI: Sure: 1. one 2. two"]

    def test_multiline_long_turn_is_flattened_then_truncated(self):
        """Flattening happens before the 100 character cut."""
        log = ConversationLog()
        log.append(TurnRole.AGENT, "line\n" * 40)

        (line,) = log.summarize(1).splitlines()
        content = line[len("AI: "):]

        assert len(content) == 100
        assert content.endswith("...")
        assert "\n" not in content

    def test_summarize_does_not_mutate(self):
        """Truncation is display-only and summarize is idempotent."""
        log = ConversationLog()
        long_text = "z" * 150
        log.append(TurnRole.USER, long_text)

        first = log.summarize()
        second = log.summarize()

        assert first == second
        assert log.turns[0].text == long_text

    def test_invalid_window(self):
        """A non-positive window is rejected."""
        with pytest.raises(ValueError):
            ConversationLog().summarize(0)
