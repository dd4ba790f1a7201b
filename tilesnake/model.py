"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling,
zero timing: the controller calls advance() once per tick.

Classes:
    Cell            — what a grid cell holds (empty / food / snake)
    Direction       — immutable (dx, dy) value object plus a NONE sentinel
    DirectionQueue  — pending direction inputs, collapsed on duplicates
    Snake           — body from head to tail
    Grid            — bounds + food; snake occupancy is read from the Snake
    GameSnapshot    — immutable read model for renderers
    GameModel       — top-level model; owns grid, snake, queue and counters
"""

import logging
import random
from collections import deque
from enum import Enum
from typing import Iterator, NamedTuple, Optional

from .config import (
    GRID_W, GRID_H, MAX_SCORE, GROWTH_RATE,
    MSG_WELCOME, MSG_SCORE, MSG_WON, MSG_CRASHED, MSG_RESTART,
)

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


class BoardFullError(RuntimeError):
    """Raised when food has to be placed but no empty cell is left."""


# ──────────────────────────── Enums ──────────────────────────────
class Cell(Enum):
    EMPTY = 0
    FOOD  = 1
    SNAKE = 2


class GameStatus(Enum):
    IDLE     = "idle"
    PLAYING  = "playing"
    WON      = "won"
    COLLIDED = "collided"


class Collision(Enum):
    WALL = "wall"
    SELF = "self"


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction. NONE means no heading chosen yet."""
    NONE  = None  # filled below after class definition
    UP    = None
    DOWN  = None
    LEFT  = None
    RIGHT = None

    def __init__(self, name: str, x: int, y: int):
        self.name = name
        self.x = x
        self.y = y

    def opposite(self) -> "Direction":
        if self == Direction.NONE:
            return self
        for d in ALL_DIRS:
            if d.x == -self.x and d.y == -self.y:
                return d
        raise ValueError(f"no opposite for {self!r}")

    def is_opposite(self, other: "Direction") -> bool:
        if self == Direction.NONE or other == Direction.NONE:
            return False
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}"


Direction.NONE  = Direction("NONE",   0,  0)
Direction.UP    = Direction("UP",     0, -1)
Direction.DOWN  = Direction("DOWN",   0,  1)
Direction.LEFT  = Direction("LEFT",  -1,  0)
Direction.RIGHT = Direction("RIGHT",  1,  0)
ALL_DIRS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


# ─────────────────────── Direction queue ─────────────────────────
class DirectionQueue:
    """
    FIFO of pending inputs, consumed one per tick.
    A direction equal to the current last entry is dropped, so holding a key
    does not flood the queue, but the same direction may come back later.
    """

    def __init__(self):
        self._items: deque[Direction] = deque()

    def enqueue(self, direction: Direction) -> bool:
        """Append unless it repeats the last entry. Returns True if appended."""
        if self._items and self._items[-1] == direction:
            return False
        self._items.append(direction)
        return True

    def pop(self) -> Optional[Direction]:
        return self._items.popleft() if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Direction]:
        return iter(list(self._items))


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """Body segments, head first. Keeps a set alongside for O(1) lookups."""

    def __init__(self, positions: list[Coord]):
        self.body: deque[Coord] = deque(positions)
        self._cells: set[Coord] = set(positions)

    @property
    def head(self) -> Coord:
        return self.body[0]

    def push_head(self, pos: Coord) -> None:
        self.body.appendleft(pos)
        self._cells.add(pos)

    def drop_tail(self) -> Coord:
        pos = self.body.pop()
        self._cells.discard(pos)
        return pos

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self._cells

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.body)


# ───────────────────────────── Grid ──────────────────────────────
class Grid:
    """
    width x height playfield. Only the food position is stored here;
    SNAKE cells are answered from the Snake so the two can never disagree.
    """

    def __init__(self, width: int, height: int, snake: Snake):
        self.width = width
        self.height = height
        self.snake = snake
        self.food: Optional[Coord] = None

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        if self.snake.occupies(x, y):
            return Cell.SNAKE
        if self.food == (x, y):
            return Cell.FOOD
        return Cell.EMPTY

    def empty_cells(self) -> Iterator[Coord]:
        """Lazily yield every EMPTY coordinate, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                if (x, y) != self.food and not self.snake.occupies(x, y):
                    yield (x, y)


# ─────────────────────────── Snapshot ────────────────────────────
class GameSnapshot(NamedTuple):
    """Everything a renderer needs, frozen at one instant."""
    width: int
    height: int
    snake: tuple[Coord, ...]
    food: Optional[Coord]
    score: int
    max_score: int
    status: GameStatus
    direction: Direction
    last_collision: Optional[Collision]

    @property
    def head(self) -> Coord:
        return self.snake[0]

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    def cell(self, x: int, y: int) -> Cell:
        if (x, y) in self.snake:
            return Cell.SNAKE
        if self.food == (x, y):
            return Cell.FOOD
        return Cell.EMPTY

    def status_text(self) -> str:
        if self.won:
            return MSG_WON
        if self.status is GameStatus.COLLIDED:
            return f"{MSG_CRASHED[self.last_collision.value]}, {MSG_RESTART}"
        if self.status is GameStatus.IDLE:
            if self.last_collision is not None:
                return MSG_CRASHED[self.last_collision.value]
            if self.score == 0:
                return MSG_WELCOME
        return MSG_SCORE.format(score=self.score, max_score=self.max_score)


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls advance() once per game tick and reads snapshot()
    to draw. enqueue() and reset() may be called at any time between ticks.

    With auto_reset=True a wall or self collision restarts the game straight
    away; otherwise the model parks in COLLIDED until reset() is called.
    Either way last_collision records what happened.
    """

    def __init__(
        self,
        width: int = GRID_W,
        height: int = GRID_H,
        max_score: int = MAX_SCORE,
        growth_rate: int = GROWTH_RATE,
        auto_reset: bool = True,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        if width * height < 2:
            raise ValueError("grid needs room for the snake and one food")
        if max_score < 1:
            raise ValueError(f"max_score must be >= 1, got {max_score}")
        if growth_rate < 1:
            raise ValueError(f"growth_rate must be >= 1, got {growth_rate}")

        self.width = width
        self.height = height
        self.max_score = max_score
        self.growth_rate = growth_rate
        self.auto_reset = auto_reset
        self._rng = rng if rng is not None else random.Random(seed)

        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def head(self) -> Coord:
        return self.snake.head

    @property
    def food(self) -> Optional[Coord]:
        return self._grid.food

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake.body),
            food=self._grid.food,
            score=self.score,
            max_score=self.max_score,
            status=self.status,
            direction=self.direction,
            last_collision=self.last_collision,
        )

    def status_text(self) -> str:
        return self.snapshot().status_text()

    # ── Commands ─────────────────────────────────────────────────
    def enqueue(self, direction: Direction) -> None:
        """
        Queue a direction for a later tick. Never touches the board.
        Dropped once the game is won or crashed, since nothing consumes it
        until reset().
        """
        if direction == Direction.NONE:
            logger.debug("Ignoring NONE direction input")
            return
        if self.won or self.status is GameStatus.COLLIDED:
            return
        self.queue.enqueue(direction)

    def reset(self) -> None:
        """Start over: one segment in the centre, one food, counters zeroed."""
        snake = Snake([(self.width // 2, self.height // 2)])
        grid = Grid(self.width, self.height, snake)
        self._place_food(grid)
        self._install(snake, grid)
        logger.debug("Game reset, snake at %s, food at %s", snake.head, grid.food)

    def load_state(
        self,
        body: list[Coord],
        food: Optional[Coord] = None,
        direction: Direction = Direction.NONE,
        score: int = 0,
        grow_counter: int = 0,
    ) -> None:
        """
        Replace the whole state with a given layout, e.g. to start a level or
        replay a position. Food is placed at random when omitted, unless the
        score already equals max_score.
        """
        body = [tuple(pos) for pos in body]
        if not body:
            raise ValueError("snake needs at least one segment")
        if len(set(body)) != len(body):
            raise ValueError("snake segments must be distinct")
        for x, y in body:
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"snake segment ({x}, {y}) is off the grid")
        if not 0 <= score <= self.max_score:
            raise ValueError(f"score must be within 0..{self.max_score}, got {score}")
        if grow_counter < 0:
            raise ValueError(f"grow_counter must be >= 0, got {grow_counter}")

        snake = Snake(body)
        grid = Grid(self.width, self.height, snake)
        if score == self.max_score:
            if food is not None:
                raise ValueError("a won game has no food on the board")
        elif food is None:
            self._place_food(grid)
        else:
            food = tuple(food)
            if not grid.in_bounds(*food):
                raise ValueError(f"food {food} is off the grid")
            if snake.occupies(*food):
                raise ValueError(f"food {food} is under the snake")
            grid.food = food

        self._install(snake, grid)
        self.direction = direction
        self.score = score
        self.grow_counter = grow_counter
        if score == self.max_score:
            self.status = GameStatus.WON
        elif direction != Direction.NONE:
            self.status = GameStatus.PLAYING

    def add_food(self) -> Coord:
        """
        Put food on a uniformly random EMPTY cell and return it.
        Raises BoardFullError when there is none.
        """
        return self._place_food(self._grid)

    def advance(self) -> GameStatus:
        """Run one tick. Returns the status after the tick."""
        if self.won or self.status is GameStatus.COLLIDED:
            return self.status

        queued = self.queue.pop()
        if queued is not None:
            # a lone head may turn around, a body may not
            if len(self.snake) == 1 or not queued.is_opposite(self.direction):
                self.direction = queued

        if self.direction == Direction.NONE:
            return self.status

        self.status = GameStatus.PLAYING
        hx, hy = self.snake.head
        x, y = hx + self.direction.x, hy + self.direction.y

        if not self._grid.in_bounds(x, y):
            return self._collide(Collision.WALL)

        # classified before the head moves or the tail retracts
        target = self._grid.cell(x, y)
        if target is Cell.SNAKE:
            return self._collide(Collision.SELF)

        self.ticks += 1
        if target is Cell.FOOD:
            self._grid.food = None
            self.snake.push_head((x, y))
            self._eat()
        elif self.grow_counter > 0:
            self.grow_counter -= 1
            self.snake.push_head((x, y))
        else:
            self.snake.push_head((x, y))
            self.snake.drop_tail()
        return self.status

    # ── Private helpers ──────────────────────────────────────────
    def _install(self, snake: Snake, grid: Grid) -> None:
        # every field is assigned here, after the new board is complete
        self.snake = snake
        self._grid = grid
        self.queue = DirectionQueue()
        self.direction = Direction.NONE
        self.grow_counter = 0
        self.score = 0
        self.ticks = 0
        self.status = GameStatus.IDLE
        self.last_collision: Optional[Collision] = None

    def _place_food(self, grid: Grid) -> Coord:
        # reservoir sampling: uniform over empty cells, one pass, always ends
        choice = None
        for seen, pos in enumerate(grid.empty_cells(), start=1):
            if self._rng.randrange(seen) == 0:
                choice = pos
        if choice is None:
            raise BoardFullError(
                f"no empty cell left on the {grid.width}x{grid.height} grid"
            )
        grid.food = choice
        return choice

    def _eat(self) -> None:
        self.grow_counter += self.growth_rate - 1
        self.score += 1
        logger.debug("Food eaten at %s, score %d/%d", self.snake.head, self.score, self.max_score)

        if self.score == self.max_score:
            self.status = GameStatus.WON
            logger.info("Game won with %d food eaten", self.score)
            return
        try:
            self._place_food(self._grid)
        except BoardFullError:
            logger.warning("Board is full at score %d, ending the game as won", self.score)
            self.status = GameStatus.WON

    def _collide(self, kind: Collision) -> GameStatus:
        logger.info("Snake hit %s at %s with score %d", kind.value, self.snake.head, self.score)
        if self.auto_reset:
            self.reset()
        else:
            self.status = GameStatus.COLLIDED
        self.last_collision = kind
        return self.status
