"""
Renderers consume read-only snapshots after every tick or status change.
"""

import sys
from typing import Optional, TextIO

from ..domain.enums import GameStatus
from ..domain.game_state import GameSnapshot


class Renderer:
    def render(self, snapshot: GameSnapshot) -> None:
        raise NotImplementedError


class NullRenderer(Renderer):
    def render(self, snapshot: GameSnapshot) -> None:
        return None


class ConsoleRenderer(Renderer):
    """
    Prints the board with a one-line status header.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def header(self, snapshot: GameSnapshot) -> str:
        parts = [
            f"[{snapshot.status.value.upper()}]",
            f"Score: {snapshot.score}",
            f"High: {snapshot.high_score}",
            f"Length: {len(snapshot.snake)}",
        ]
        if snapshot.active_effect is not None:
            parts.append(
                f"Active: {snapshot.active_effect.label} ({snapshot.effect_progress:.0f}%)"
            )
        return "  ".join(parts)

    def render(self, snapshot: GameSnapshot) -> None:
        self.stream.write("\n" + self.header(snapshot) + "\n")
        self.stream.write(snapshot.print_board() + "\n")
        if snapshot.status is GameStatus.PAUSED:
            self.stream.write("PAUSED - resume to continue\n")
        self.stream.flush()
