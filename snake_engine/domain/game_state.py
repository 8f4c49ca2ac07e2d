"""
GameState entity (the mutable session model) and GameSnapshot, a read-only
view of it handed to renderers and players.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .constants import INITIAL_DIRECTION, INITIAL_SNAKE
from .effects import ActiveEffect, FlashState
from .enums import Direction, GameStatus
from .food import Food
from .grid import Grid, Position
from .snake import Snake


class GameState:
    """
    Everything a single session owns.

    Attributes:
        grid: board bounds
        snake: the snake, mutated only by the tick engine
        foods: at most MAX_FOODS items, none sharing a cell with each other or the snake
        score: current score, reset on restart
        active_effect: the running power-up, if any
        flash: flash warning window
        status: lifecycle status
        tick_count: ticks advanced since the last reset
    """

    def __init__(self, grid: Optional[Grid] = None):
        self.grid = grid or Grid()
        self.reset()

    def reset(self) -> None:
        self.snake = Snake(INITIAL_SNAKE, Direction(INITIAL_DIRECTION))
        self.foods: List[Food] = []
        self.score = 0
        self.active_effect: Optional[ActiveEffect] = None
        self.flash = FlashState()
        self.status = GameStatus.IDLE
        self.tick_count = 0

    def food_index_at(self, position) -> Optional[int]:
        for index, food in enumerate(self.foods):
            if food.position == tuple(position):
                return index
        return None

    def snapshot(self, now: float = 0, high_score: int = 0) -> "GameSnapshot":
        effect = self.active_effect
        return GameSnapshot(
            snake=tuple(self.snake.positions),
            direction=self.snake.direction,
            foods=tuple(self.foods),
            active_effect=effect,
            effect_remaining=effect.remaining(now) if effect else 0.0,
            effect_progress=effect.progress(now) if effect else 0.0,
            flash=FlashState(self.flash.active, self.flash.ends_at),
            flash_visible=self.flash.is_visible(now),
            status=self.status,
            score=self.score,
            high_score=high_score,
            grid_count=self.grid.count,
            tick_count=self.tick_count,
        )

    def __repr__(self):
        return (
            f"<GameState status={self.status.value}, score={self.score}, "
            f"length={len(self.snake)}, foods={len(self.foods)}>"
        )


@dataclass(frozen=True)
class GameSnapshot:
    """A snapshot of the game at a specific point in time."""

    snake: Tuple[Position, ...]
    direction: Direction
    foods: Tuple[Food, ...]
    active_effect: Optional[ActiveEffect]
    effect_remaining: float
    effect_progress: float
    flash: FlashState
    flash_visible: bool
    status: GameStatus
    score: int
    high_score: int
    grid_count: int
    tick_count: int

    @property
    def head(self) -> Position:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        @ = snake head
        o = snake body (hidden on the off phase of a flash)
        1,2,3 = score food of that value
        >,~,+ = speed, slow and invincible power-ups
        Rows are printed top to bottom with y-axis labels on the left.
        """
        board = [['.' for _ in range(self.grid_count)] for _ in range(self.grid_count)]

        for food in self.foods:
            x, y = food.position
            board[y][x] = food.symbol

        for index, (x, y) in enumerate(self.snake):
            if not (0 <= x < self.grid_count and 0 <= y < self.grid_count):
                continue
            if index == 0:
                board[y][x] = '@'
            elif self.flash_visible:
                board[y][x] = 'o'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.grid_count)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        effect = None
        if self.active_effect is not None:
            effect = {
                "kind": self.active_effect.kind.value,
                "label": self.active_effect.label,
                "remaining_ms": self.effect_remaining,
                "progress": round(self.effect_progress, 1),
            }
        return {
            "status": self.status.value,
            "score": self.score,
            "high_score": self.high_score,
            "tick_count": self.tick_count,
            "snake": [list(p) for p in self.snake],
            "direction": self.direction.name,
            "foods": [
                {
                    "position": list(food.position),
                    "points": food.points,
                    "power_up": food.kind.value if food.is_power_up else None,
                }
                for food in self.foods
            ],
            "active_effect": effect,
            "flashing": self.flash.active,
        }
