"""Session state shared across screens."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

# Screen visits kept in `session_history`
HISTORY_LIMIT = 50


@dataclass
class UIState:
    """What happened during one interactive session.

    Lives only as long as the session; nothing here is written to the board
    file.
    """

    # Texts spoken so far, oldest first
    spoken: list[str] = field(default_factory=list)

    # Most recent screen visits, oldest first
    session_history: deque[str] = field(default_factory=lambda: deque(maxlen=HISTORY_LIMIT))

    # Board changed since the last save
    dirty: bool = False

    def speak(self, text: str) -> None:
        self.spoken.append(text)

    def add_to_history(self, screen: str) -> None:
        self.session_history.append(screen)

    def mark_dirty(self) -> None:
        self.dirty = True

    def mark_saved(self) -> None:
        self.dirty = False

    def sentence(self) -> str:
        """Everything spoken this session, joined as one line."""
        return " ".join(self.spoken)
