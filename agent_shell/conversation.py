"""
Conversation log for the agent shell.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from llm_providers import ChatMessage, MessageRole

NO_HISTORY_MESSAGE = "No conversation history."

MAX_SUMMARY_CHARS = 100
TRUNCATION_MARKER = "..."


class TurnRole(str, Enum):
    """Who produced a turn."""

    USER = "user"
    AGENT = "assistant"

    @property
    def label(self) -> str:
        return "User" if self is TurnRole.USER else "AI"


@dataclass(frozen=True)
class Turn:
    """One recorded message in the conversation."""

    role: TurnRole
    text: str


def _summary_text(text: str) -> str:
    # One line per turn: line breaks and runs of whitespace become single spaces.
    text = " ".join(text.split())
    if len(text) <= MAX_SUMMARY_CHARS:
        return text
    return text[: MAX_SUMMARY_CHARS - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER


class ConversationLog:
    """
    Append-only, in-memory sequence of turns.

    Turns are only removed by ``clear``. Summaries are display-only and
    never change the stored text.
    """

    def __init__(self):
        self._turns: list[Turn] = []

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def append(self, role: TurnRole, text: str) -> Turn:
        turn = Turn(role=TurnRole(role), text=text)
        self._turns.append(turn)
        return turn

    def clear(self) -> None:
        self._turns.clear()

    def summarize(self, window_size: int = 5) -> str:
        """
        Render the last ``window_size`` turns, oldest first.

        Each line is ``User: <text>`` or ``AI: <text>``, with text longer than
        100 characters cut to 97 characters plus ``...``.

        Raises:
            ValueError: If window_size is not positive.
        """
        if window_size < 1:
            raise ValueError(f"window_size must be positive, got {window_size}")
        if not self._turns:
            return NO_HISTORY_MESSAGE
        return "\n".join(
            f"{turn.role.label}: {_summary_text(turn.text)}" for turn in self._turns[-window_size:]
        )

    def to_chat_messages(self) -> list[ChatMessage]:
        """Convert the turns into provider messages, oldest first."""
        return [
            ChatMessage(
                role=MessageRole.USER if turn.role is TurnRole.USER else MessageRole.ASSISTANT,
                content=turn.text,
            )
            for turn in self._turns
        ]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.turns)
