"""Game state: moving the player, collecting coins and the idle animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from solong.mapfile import COIN, EXIT, FLOOR, FOES, PLAYER, WALL, GameMap

TILE_SIZE = 42

ARROW_UP = 65362
ARROW_DOWN = 65364
ARROW_LEFT = 65361
ARROW_RIGHT = 65363

KEY_W = 119
KEY_S = 115
KEY_A = 97
KEY_D = 100
ESC = 65307

# Number of loop ticks between two frames of the idle animation.
IDLE_PERIOD = 5000

_STEPS = frozenset({(1, 0), (-1, 0), (0, 1), (0, -1)})


class Outcome(Enum):
    """Where the game stands after an action."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class Facing(Enum):
    """The direction the player sprite faces."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Game:
    """A game in progress on a checked map."""

    map: GameMap
    player: tuple[int, int] = field(init=False)
    coins_total: int = field(init=False)
    coins_taken: int = field(default=0, init=False)
    moves: int = field(default=0, init=False)
    counter: int = field(default=0, init=False)
    timer: int = field(default=0, init=False)
    facing: Facing = field(default=Facing.RIGHT, init=False)
    frame: int = field(default=0, init=False)
    foe_frame: int = field(default=0, init=False)
    outcome: Outcome = field(default=Outcome.PLAYING, init=False)

    def __post_init__(self) -> None:
        self.player = self.map.player
        self.coins_total = self.map.coins

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    @property
    def player_sprite(self) -> str:
        """Texture name of the player in its current facing and frame."""
        return f"play_{self.facing.value}_{self.frame + 1}"

    @property
    def foe_sprite(self) -> str:
        """Texture name of the foes in their current frame."""
        return f"foes_{self.foe_frame + 1}"

    def _leave_tile(self) -> None:
        if self.map[self.player] != EXIT:
            self.map[self.player] = FLOOR

    def move(self, dy: int, dx: int) -> Outcome:
        """Try to move the player one tile; walls block the move.

        Stepping on a coin collects it, on the exit with every coin wins and
        on a foe loses. Each move that is not blocked and does not end the
        game counts as one.
        """
        if (dy, dx) not in _STEPS:
            raise ValueError(f"invalid step ({dy}, {dx})")
        if self.finished:
            return self.outcome
        self._leave_tile()
        y, x = self.player
        target = (y + dy, x + dx)
        tile = self.map[target]
        if tile == WALL:
            return self.outcome
        if tile == COIN:
            self.coins_taken += 1
            self.map[target] = FLOOR
        elif tile == EXIT and self.coins_taken == self.coins_total:
            self.outcome = Outcome.WON
            return self.outcome
        elif tile == FOES:
            self.outcome = Outcome.LOST
            return self.outcome
        self.player = target
        self.counter = self.moves
        self.moves += 1
        return self.outcome

    def handle_key(self, keycode: int) -> Outcome:
        """React to a key press: arrows or WASD move, Escape quits."""
        if self.finished:
            return self.outcome
        if keycode == ESC:
            self.outcome = Outcome.QUIT
            return self.outcome
        self._leave_tile()
        if keycode in (ARROW_DOWN, KEY_S):
            return self.move(1, 0)
        if keycode in (ARROW_UP, KEY_W):
            return self.move(-1, 0)
        if keycode in (ARROW_LEFT, KEY_A):
            self.facing, self.frame = Facing.LEFT, 1
            return self.move(0, -1)
        if keycode in (ARROW_RIGHT, KEY_D):
            self.facing, self.frame = Facing.RIGHT, 1
            return self.move(0, 1)
        return self.outcome

    def tick(self) -> bool:
        """Advance the idle timer; return True when a new frame is due."""
        self.timer += 1
        if self.timer < IDLE_PERIOD:
            return False
        self.timer = 0
        self.foe_frame ^= 1
        self.frame ^= 1
        self.counter = self.moves
        return True

    def sprite_at(self, x: int, y: int) -> str | None:
        """Return the texture name to draw at column x, row y."""
        tile = self.map[y, x]
        sprite = None
        if tile in (FLOOR, PLAYER):
            sprite = "floor"
        elif tile == WALL:
            sprite = "wall"
        elif tile == COIN:
            sprite = "coin"
        if (y, x) == self.player:
            sprite = self.player_sprite
        elif tile == EXIT:
            sprite = "exit"
        elif tile == FOES:
            sprite = self.foe_sprite
        return sprite