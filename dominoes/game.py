"""Domino rules, the bot's strategy and the state of one game."""

from __future__ import annotations

import enum
import random
from collections import Counter
from dataclasses import dataclass
from dataclasses import field as dc_field
from typing import Iterable, Iterator, Optional

HIGHEST_PIP = 6
HAND_SIZE = 7


class MoveError(ValueError):
    """Raised for a move the rules do not allow."""


class Side(enum.Enum):
    """An end of the line of tiles on the field."""

    LEFT = "left"
    RIGHT = "right"


class GameResult(enum.Enum):
    """Outcome of a game from the human player's point of view."""

    WIN = "win"
    LOSE = "lose"
    INTERMEDIATE = "intermediate"


@dataclass(frozen=True)
class Tile:
    """A domino tile with two halves."""

    left: int
    right: int

    def swapped(self) -> Tile:
        """Return the tile turned end for end."""
        return Tile(self.right, self.left)

    def matches(self, value: int) -> bool:
        """Tell whether either half shows ``value``."""
        return value in (self.left, self.right)

    def is_double(self) -> bool:
        return self.left == self.right

    def pips(self) -> int:
        """Total number of pips on the tile."""
        return self.left + self.right


@dataclass
class Field:
    """The line of tiles laid out on the table, read from left to right."""

    tiles: list[Tile]

    def __post_init__(self) -> None:
        if not self.tiles:
            raise ValueError("the field needs at least one tile")

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def left_end(self) -> int:
        return self.tiles[0].left

    def right_end(self) -> int:
        return self.tiles[-1].right

    def _end(self, side: Side) -> int:
        return self.left_end() if side is Side.LEFT else self.right_end()

    def fits(self, tile: Tile, side: Side) -> bool:
        """Tell whether ``tile`` can be laid at ``side``."""
        return tile.matches(self._end(side))

    def place(self, tile: Tile, side: Side) -> Tile:
        """Lay ``tile`` at ``side``, turned to join the line; return it as laid."""
        if not self.fits(tile, side):
            raise MoveError(f"{tile} does not fit the {side.value} end")
        if side is Side.LEFT:
            if self.left_end() != tile.right:
                tile = tile.swapped()
            self.tiles.insert(0, tile)
        else:
            if self.right_end() != tile.left:
                tile = tile.swapped()
            self.tiles.append(tile)
        return tile


@dataclass
class Hand:
    """The tiles held by one player; new tiles go to the front."""

    tiles: list[Tile] = dc_field(default_factory=list)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def add(self, tile: Tile) -> None:
        self.tiles.insert(0, tile)

    def remove(self, index: int) -> Tile:
        return self.tiles.pop(index)

    def points(self) -> int:
        """Sum of the pips on all tiles in the hand."""
        return sum(tile.pips() for tile in self.tiles)

    def has_move(self, field: Field) -> bool:
        """Tell whether any tile fits either end of ``field``."""
        return any(
            field.fits(tile, Side.LEFT) or field.fits(tile, Side.RIGHT)
            for tile in self.tiles
        )


def full_set() -> list[Tile]:
    """Return the 28 tiles of a double-six set in order."""
    return [
        Tile(low, high)
        for low in range(HIGHEST_PIP + 1)
        for high in range(low, HIGHEST_PIP + 1)
    ]


def shuffled_set(rng: Optional[random.Random] = None) -> list[Tile]:
    """Return a full set in random order."""
    tiles = full_set()
    (rng or random.Random()).shuffle(tiles)
    return tiles


def deal(hand: Hand, stock: list[Tile], count: int) -> list[Tile]:
    """Move up to ``count`` tiles from the end of ``stock`` into ``hand``."""
    dealt = []
    for _ in range(count):
        if not stock:
            break
        tile = stock.pop()
        hand.add(tile)
        dealt.append(tile)
    return dealt


def _pip_counts(tiles: Iterable[Tile]) -> Counter:
    counts: Counter = Counter()
    for tile in tiles:
        counts[tile.left] += 1
        counts[tile.right] += 1
    return counts


def _play(hand: Hand, field: Field, tile: Tile) -> None:
    hand.remove(hand.tiles.index(tile))
    side = Side.LEFT if field.fits(tile, Side.LEFT) else Side.RIGHT
    field.place(tile, side)


def choose_move(bot: Hand, field: Field, stock: list[Tile], drawn: bool = False) -> bool:
    """Let the bot lay one tile; return whether it moved.

    With no fitting tile the bot draws once from the stock and tries again.
    It prefers the highest double, then a tile that closes a number already
    shown six times on the field, then the tile whose numbers are most
    common in its hand (heavier tiles first on a tie).
    """
    ends = (field.left_end(), field.right_end())
    moves = [tile for tile in bot if tile.matches(ends[0]) or tile.matches(ends[1])]

    if not moves:
        if stock and not drawn:
            deal(bot, stock, 1)
            return choose_move(bot, field, stock, True)
        return False

    doubles = [tile for tile in moves if tile.is_double()]
    if doubles:
        _play(bot, field, max(doubles, key=lambda tile: tile.left))
        return True

    in_moves = _pip_counts(moves)
    on_field = _pip_counts(field)
    best: Optional[Tile] = None
    best_value = -1
    for tile in moves:
        for value in (tile.left, tile.right):
            if in_moves[value] == 1 and on_field[value] == 6 and value > best_value:
                best, best_value = tile, value
    if best is not None:
        _play(bot, field, best)
        return True

    in_hand = _pip_counts(bot)
    best = max(
        moves,
        key=lambda tile: (in_hand[tile.left] + in_hand[tile.right], tile.pips()),
    )
    _play(bot, field, best)
    return True


@dataclass
class Game:
    """One game between the human player and the bot."""

    player: Hand
    bot: Hand
    field: Field
    stock: list[Tile] = dc_field(default_factory=list)
    result: GameResult = GameResult.INTERMEDIATE
    score: int = 0
    _player_placed: bool = dc_field(default=False, init=False, repr=False)

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> Game:
        """Shuffle a set and deal seven tiles each plus one to the field."""
        stock = shuffled_set(rng)
        player = Hand()
        bot = Hand()
        deal(player, stock, HAND_SIZE)
        deal(bot, stock, HAND_SIZE)
        field = Field([stock.pop()])
        return cls(player=player, bot=bot, field=field, stock=stock)

    @property
    def over(self) -> bool:
        return self.result is not GameResult.INTERMEDIATE

    def _check_running(self) -> None:
        if self.over:
            raise MoveError("the game is over")

    def _finish(self, result: GameResult, score: int) -> GameResult:
        self.result = result
        self.score = score
        return result

    def player_stuck(self) -> bool:
        """Tell whether the player has no tile that fits."""
        return not self.player.has_move(self.field)

    def compare_points(self) -> int:
        """Player's pips minus the bot's pips."""
        return self.player.points() - self.bot.points()

    def player_draw(self) -> Optional[Tile]:
        """Draw one tile for a stuck player; return it, or None if the stock is empty."""
        self._check_running()
        if not self.player_stuck():
            raise MoveError("the player still has a move")
        self._player_placed = False
        drawn = deal(self.player, self.stock, 1)
        return drawn[0] if drawn else None

    def player_place(self, index: int, side: Side) -> GameResult:
        """Lay the player's tile at ``index`` on ``side`` of the field."""
        self._check_running()
        tile = self.player.tiles[index]
        self.field.place(tile, side)
        self.player.remove(index)
        self._player_placed = True
        if not self.player.tiles:
            return self._finish(GameResult.WIN, self.bot.points())
        return self.result

    def bot_turn(self) -> GameResult:
        """Let the bot move and settle the game if it has ended."""
        self._check_running()
        moved = choose_move(self.bot, self.field, self.stock)
        if not self.bot.tiles:
            return self._finish(GameResult.LOSE, self.player.points())
        if not moved and self.player_stuck() and not self.stock:
            difference = self.compare_points()
            if difference > 0 or (difference == 0 and self._player_placed):
                return self._finish(GameResult.LOSE, self.player.points())
            return self._finish(GameResult.WIN, self.bot.points())
        return self.result