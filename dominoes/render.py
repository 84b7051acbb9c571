"""Drawing of the menu, help, game and records screens with pygame.

All positions are given with the origin at the bottom left of the window
and ``y`` growing upwards; they are flipped when drawn on the surface.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from dominoes.font import Dot, text_glyphs
from dominoes.game import Game, GameResult, Tile
from dominoes.records import Records

WINDOW_WIDTH = 1900
WINDOW_HEIGHT = 1100
BUTTON_WIDTH = 200
BUTTON_HEIGHT = 200
BUTTON_X = WINDOW_WIDTH - 50 - BUTTON_WIDTH
BUTTON_Y = 50
FIELD_LOW = 300
FIELD_UP = WINDOW_HEIGHT - 300
EXIT_SIZE = 50

TILE_WIDTH = 75.0
TILE_HEIGHT = 150.0
HAND_X = 50.0
HAND_Y = 50.0
HAND_GAP = 10.0
BOT_HAND_X = 300.0
MISS_LEFT = BUTTON_X - 70
MISS_RIGHT = BUTTON_X - 20


def _rgb(red: float, green: float, blue: float) -> tuple[int, int, int]:
    return (round(red * 255), round(green * 255), round(blue * 255))


BACKGROUND = _rgb(0.6078, 0.6588, 0.6706)
DARK = _rgb(0.1451, 0.2157, 0.2706)
BUTTON = _rgb(0.2902, 0.3608, 0.4157)
PANEL = _rgb(0.449, 0.5098, 0.5432)
IVORY = _rgb(0.8196, 0.7804, 0.7412)
TILE_BACK = _rgb(0.7196, 0.6804, 0.6412)
TITLE = _rgb(0.0667, 0.1294, 0.1765)

HELP_LINES: tuple[tuple[str, float], ...] = (
    ("the playing field is highlighted.to insert a domino into the right or left", WINDOW_HEIGHT - 110),
    ("edge,click on the corresponding part of the field.", WINDOW_HEIGHT - 180),
    ("if you have no possible moves,click on the bazaar button.if the domino", WINDOW_HEIGHT - 300),
    ("does not fit in this case,you skip a move.if there are no dominoes left", WINDOW_HEIGHT - 370),
    ("in the bazaar,you can skip a move by clicking on the miss button.the game", WINDOW_HEIGHT - 440),
    ("ends when one of the players has laid out all the dominoes.he is the", WINDOW_HEIGHT - 510),
    ("winner.", WINDOW_HEIGHT - 580),
    ("when both players cannot make a move and there are no dominoes in the", 400),
    ("bazaar,the player with the lowest sum of values on the remaining dominoes", 330),
    ("wins.if the sums are equal,the player who made the last move first wins.", 260),
    ("the winner is awarded points based on the sum of the values of the", 140),
    ("remaining dominoes of opponent.these points are subtracted from the loser.", 70),
)


def pip_positions(value: int, x: float, y: float, width: float, height: float) -> list[tuple[float, float]]:
    """Return the centres of the pips for ``value`` in one half of a tile."""
    left, centre_x, right = x + width / 4, x + width / 2, x + width * 3 / 4
    low, middle, high = y + height / 4, y + height / 2, y + height * 3 / 4
    corners = [(left, low), (right, low), (left, high), (right, high)]
    layouts = {
        1: [(centre_x, middle)],
        2: [(left, middle), (right, middle)],
        3: [(left, low), (centre_x, middle), (right, high)],
        4: corners,
        5: corners + [(centre_x, middle)],
        6: [(left, low), (right, low), (left, middle), (right, middle), (left, high), (right, high)],
    }
    return layouts.get(value, [])


@dataclass(frozen=True)
class TilePlacement:
    """Where a tile of the field is drawn; horizontal tiles show left on the left."""

    tile: Tile
    x: float
    y: float
    width: float
    height: float
    horizontal: bool


def field_layout(tiles: Iterable[Tile]) -> list[TilePlacement]:
    """Lay the field out centred in the window, shrunk if it would not fit."""
    tiles = list(tiles)
    if not tiles:
        return []
    count = len(tiles)
    height, width = TILE_HEIGHT, TILE_WIDTH
    if height * count + 100 > WINDOW_WIDTH:
        height = (WINDOW_WIDTH - 100) / count
        width = height / 2
    x = WINDOW_WIDTH / 2 - count * height / 2
    y = WINDOW_HEIGHT / 2 - height / 2
    placements = []
    for tile in tiles:
        if tile.is_double():
            placements.append(TilePlacement(tile, x, y, width, height, False))
            x += width
        else:
            placements.append(TilePlacement(tile, x, y + height / 4, height, width, True))
            x += height
    return placements


class Renderer:
    """Draws the game screens on a pygame surface of the window's size."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    # -- primitives -----------------------------------------------------

    @staticmethod
    def _point(x: float, y: float) -> tuple[float, float]:
        return (x, WINDOW_HEIGHT - y)

    def _rect(self, x: float, y: float, width: float, height: float, color, border: int = 0) -> None:
        rect = pygame.Rect(round(x), round(WINDOW_HEIGHT - (y + height)), round(width), round(height))
        pygame.draw.rect(self.surface, color, rect, border)

    def _box(self, x: float, y: float, width: float, height: float, fill) -> None:
        self._rect(x, y, width, height, fill)
        self._rect(x, y, width, height, DARK, 3)

    def _line(self, start, end, color, width: int) -> None:
        pygame.draw.line(self.surface, color, self._point(*start), self._point(*end), width)

    def _dot(self, x: float, y: float, radius: float, color) -> None:
        pygame.draw.circle(self.surface, color, self._point(x, y), max(radius, 1.0))

    def _text(self, text: str, x: float, y: float, size: float, color) -> None:
        for shape in text_glyphs(text, x, y, size):
            if isinstance(shape, Dot):
                self._dot(shape.x, shape.y, shape.radius, PANEL if shape.knockout else color)
            else:
                points = [self._point(px, py) for px, py in shape.points]
                pygame.draw.lines(self.surface, color, shape.closed, points, max(1, round(shape.width)))

    def _clear(self) -> None:
        self.surface.fill(BACKGROUND)

    def _exit_button(self) -> None:
        left, bottom = WINDOW_WIDTH - EXIT_SIZE, WINDOW_HEIGHT - EXIT_SIZE
        self._box(left, bottom, EXIT_SIZE, EXIT_SIZE, IVORY)
        self._line((WINDOW_WIDTH - 40, WINDOW_HEIGHT - 40), (WINDOW_WIDTH - 10, WINDOW_HEIGHT - 10), DARK, 5)
        self._line((WINDOW_WIDTH - 40, WINDOW_HEIGHT - 10), (WINDOW_WIDTH - 10, WINDOW_HEIGHT - 40), DARK, 5)

    # -- tiles ----------------------------------------------------------

    def _tile(self, x: float, y: float, width: float, height: float, tile: Tile, horizontal: bool = False) -> None:
        self._box(x, y, width, height, IVORY)
        if not horizontal:
            self._line((x, y + height / 2), (x + width, y + height / 2), DARK, 1)
            radius = width / 16
            halves = ((tile.left, y), (tile.right, y + height / 2))
            for value, bottom in halves:
                for px, py in pip_positions(value, x, bottom, width, height / 2):
                    self._dot(px, py, radius, DARK)
            return
        self._line((x + width / 2, y), (x + width / 2, y + height), DARK, 1)
        short, long = height, width
        radius = short / 16
        halves = ((tile.left, 0.0), (tile.right, long / 2))
        for value, start in halves:
            for u, v in pip_positions(value, 0.0, start, short, long / 2):
                self._dot(x + v, y + short - u, radius, DARK)

    def _player_hand(self, game: Game) -> None:
        for index, tile in enumerate(game.player):
            self._tile(HAND_X + index * (TILE_WIDTH + HAND_GAP), HAND_Y, TILE_WIDTH, TILE_HEIGHT, tile)

    def _bot_hand(self, game: Game) -> None:
        y = WINDOW_HEIGHT - TILE_HEIGHT - 50
        for index in range(len(game.bot)):
            self._box(BOT_HAND_X + index * (TILE_WIDTH + HAND_GAP), y, TILE_WIDTH, TILE_HEIGHT, TILE_BACK)

    def _field(self, game: Game) -> None:
        for place in field_layout(game.field):
            self._tile(place.x, place.y, place.width, place.height, place.tile, place.horizontal)

    def _bazaar_button(self, stock_count: int) -> None:
        self._box(BUTTON_X, BUTTON_Y, BUTTON_WIDTH, BUTTON_HEIGHT, BUTTON)
        self._text("bazaar", BUTTON_X + 10, BUTTON_Y + 110, 50.0, DARK)
        offset = 12.5 if stock_count < 10 else 37.5
        self._text(str(stock_count), BUTTON_X + BUTTON_WIDTH / 2 - offset, BUTTON_Y + 30, 50.0, DARK)

    def _miss_button(self) -> None:
        self._box(MISS_LEFT, BUTTON_Y, MISS_RIGHT - MISS_LEFT, BUTTON_HEIGHT, BUTTON)
        for letter, rise in zip("miss", (152, 104, 56, 8)):
            self._text(letter, BUTTON_X - 55, BUTTON_Y + rise, 40.0, DARK)

    # -- screens --------------------------------------------------------

    def draw_menu(self, records: Records) -> None:
        """Draw the main menu with the player's balance."""
        self._clear()
        self._box(WINDOW_WIDTH / 2 - BUTTON_WIDTH, WINDOW_HEIGHT / 2 - BUTTON_HEIGHT / 2,
                  2 * BUTTON_WIDTH, BUTTON_HEIGHT, BUTTON)
        self._text("play", WINDOW_WIDTH / 2 - BUTTON_WIDTH * 3 / 5,
                   WINDOW_HEIGHT / 2 - BUTTON_HEIGHT / 4, 100.0, TITLE)
        self._box(50, BUTTON_Y, BUTTON_WIDTH, BUTTON_HEIGHT / 2, PANEL)
        self._text("help", 90, BUTTON_Y + 25, 50.0, DARK)
        self._box(BUTTON_WIDTH + 80, BUTTON_Y, BUTTON_WIDTH * 3 / 2, BUTTON_HEIGHT / 2, PANEL)
        self._text("records", BUTTON_WIDTH + 125, BUTTON_Y + 25, 50.0, DARK)
        self._text("domino", 50, WINDOW_HEIGHT - 150, 100.0, DARK)
        self._text("main menu", 50, WINDOW_HEIGHT - 250, 50.0, IVORY)
        self._text(str(records.balance), WINDOW_WIDTH - 300, BUTTON_Y, 100.0, IVORY)

    def draw_help(self) -> None:
        """Draw the rules screen."""
        self._clear()
        self._rect(0, 220, WINDOW_WIDTH, 260, PANEL)
        self._rect(0, 880, WINDOW_WIDTH, WINDOW_HEIGHT - 880, PANEL)
        self._exit_button()
        for line, y in HELP_LINES:
            self._text(line, 30, y, 40.0, DARK)

    def draw_game(self, game: Game, selected: Optional[int] = None) -> None:
        """Draw the table; ``selected`` is the index of a tile in the player's hand."""
        self._clear()
        self._rect(0, 0, WINDOW_WIDTH, FIELD_LOW, PANEL)
        self._rect(0, FIELD_UP, WINDOW_WIDTH, WINDOW_HEIGHT - FIELD_UP, PANEL)
        self._miss_button()
        self._bazaar_button(len(game.stock))
        self._exit_button()
        self._text("bot", 50, WINDOW_HEIGHT - 150, 100.0, DARK)
        self._player_hand(game)
        self._bot_hand(game)
        self._field(game)
        if selected is not None:
            x = HAND_X + selected * (TILE_WIDTH + HAND_GAP)
            self._rect(x, HAND_Y, TILE_WIDTH, TILE_HEIGHT, DARK, 5)

    def draw_records(self, records: Records, result: GameResult) -> None:
        """Draw the records, headed by the outcome of the last game if any."""
        self._clear()
        self._rect(500, 300, 900, 440, PANEL)
        self._exit_button()
        if result is GameResult.WIN:
            self._text("congratulations", WINDOW_WIDTH / 2 - 180, WINDOW_HEIGHT - 330, 40.0, IVORY)
            self._text("you won", WINDOW_WIDTH / 2 - 210, WINDOW_HEIGHT - 250, 100.0, DARK)
        elif result is GameResult.LOSE:
            self._text("you lost", WINDOW_WIDTH / 2 - 230, WINDOW_HEIGHT - 300, 100.0, DARK)
        else:
            self._text("results of previous games", 150, WINDOW_HEIGHT - 280, 100.0, DARK)
        lines = (
            f"balance  {records.balance}",
            f"count of victories  {records.victories}",
            f"count of games  {records.games}",
            f"percent of victories  {records.percent()}%",
            f"record  {records.record}",
        )
        for line, y in zip(lines, (650, 570, 490, 410, 330)):
            self._text(line, 580, y, 50.0, DARK)