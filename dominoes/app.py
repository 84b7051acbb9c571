"""The game window: screens, mouse handling and the main loop."""

from __future__ import annotations

import argparse
import enum
import random
from pathlib import Path
from typing import Callable, Optional, Union

from dominoes.game import Game, GameResult, Side
from dominoes.records import RECORDS_FILE, Records
from dominoes.render import (
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    BUTTON_X,
    BUTTON_Y,
    EXIT_SIZE,
    FIELD_LOW,
    FIELD_UP,
    HAND_GAP,
    HAND_X,
    HAND_Y,
    MISS_LEFT,
    MISS_RIGHT,
    TILE_HEIGHT,
    TILE_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

PAUSE_MS = 1000


class Screen(enum.Enum):
    """The screen currently shown."""

    MENU = "menu"
    HELP = "help"
    RECORDS = "records"
    GAME = "game"


def _inside(x: float, y: float, left: float, bottom: float, right: float, top: float) -> bool:
    return left <= x <= right and bottom <= y <= top


def _on_exit_button(x: float, y: float) -> bool:
    return _inside(x, y, WINDOW_WIDTH - EXIT_SIZE, WINDOW_HEIGHT - EXIT_SIZE, WINDOW_WIDTH, WINDOW_HEIGHT)


def hand_tile_at(count: int, x: float, y: float) -> Optional[int]:
    """Return the index of the player's tile under ``(x, y)``, or None."""
    for index in range(count):
        left = HAND_X + index * (TILE_WIDTH + HAND_GAP)
        if _inside(x, y, left, HAND_Y, left + TILE_WIDTH, HAND_Y + TILE_HEIGHT):
            return index
    return None


class App:
    """State of the whole program, driven by clicks in window coordinates.

    Coordinates have their origin at the bottom left of the window.  The
    ``pause`` callback runs whenever the game should be shown to the player
    before the bot moves or a game ends.
    """

    def __init__(
        self,
        records: Optional[Records] = None,
        records_path: Union[str, Path] = RECORDS_FILE,
        rng: Optional[random.Random] = None,
        pause: Optional[Callable[[], None]] = None,
    ) -> None:
        self.records = records if records is not None else Records()
        self.records_path = records_path
        self.rng = rng
        self.pause: Callable[[], None] = pause or (lambda: None)
        self.screen = Screen.MENU
        self.result = GameResult.INTERMEDIATE
        self.game: Optional[Game] = None
        self.selected: Optional[int] = None

    def click(self, x: float, y: float) -> None:
        """Handle a left click at ``(x, y)``."""
        if self.screen is Screen.MENU:
            self._menu_click(x, y)
        elif self.screen is Screen.GAME:
            self._game_click(x, y)
        elif _on_exit_button(x, y):
            self.screen = Screen.MENU

    def _menu_click(self, x: float, y: float) -> None:
        if _inside(
            x, y,
            WINDOW_WIDTH / 2 - BUTTON_WIDTH, WINDOW_HEIGHT / 2 - BUTTON_HEIGHT / 2,
            WINDOW_WIDTH / 2 + BUTTON_WIDTH, WINDOW_HEIGHT / 2 + BUTTON_HEIGHT / 2,
        ):
            self._start_game()
        elif _inside(
            x, y,
            BUTTON_WIDTH + 80, BUTTON_Y,
            BUTTON_WIDTH + 80 + BUTTON_WIDTH * 3 / 2, BUTTON_Y + BUTTON_HEIGHT / 2,
        ):
            self.result = GameResult.INTERMEDIATE
            self.screen = Screen.RECORDS
        elif _inside(x, y, 50, BUTTON_Y, 50 + BUTTON_WIDTH, BUTTON_Y + BUTTON_HEIGHT / 2):
            self.screen = Screen.HELP

    def _start_game(self) -> None:
        self.game = Game.new(self.rng)
        self.selected = None
        self.screen = Screen.GAME
        if self.records.games % 2:
            self.pause()
            self._bot_turn()

    def _game_click(self, x: float, y: float) -> None:
        game = self.game
        if game is None:
            self.screen = Screen.MENU
            return
        if _inside(x, y, BUTTON_X, BUTTON_Y, BUTTON_X + BUTTON_WIDTH, BUTTON_Y + BUTTON_HEIGHT):
            if game.player_stuck():
                self._draw_from_stock()
        elif _inside(x, y, MISS_LEFT, BUTTON_Y, MISS_RIGHT, BUTTON_Y + BUTTON_HEIGHT):
            if not game.stock and game.player_stuck():
                self.pause()
                self._bot_turn()
        elif _on_exit_button(x, y):
            self.screen = Screen.MENU
            self.game = None
            self.selected = None
        else:
            index = hand_tile_at(len(game.player), x, y)
            if index is not None:
                self.selected = index
            if self.selected is not None and FIELD_LOW <= y <= FIELD_UP:
                if x < WINDOW_WIDTH / 2:
                    self._place(Side.LEFT)
                elif x > WINDOW_WIDTH / 2:
                    self._place(Side.RIGHT)

    def _draw_from_stock(self) -> None:
        game = self.game
        self.selected = None
        drawn = game.player_draw()
        if drawn is None or not (game.field.fits(drawn, Side.LEFT) or game.field.fits(drawn, Side.RIGHT)):
            self.pause()
            self._bot_turn()

    def _place(self, side: Side) -> None:
        game = self.game
        tile = game.player.tiles[self.selected]
        if not game.field.fits(tile, side):
            return
        result = game.player_place(self.selected, side)
        self.selected = None
        self.pause()
        if result is not GameResult.INTERMEDIATE:
            self._finish()
            return
        self._bot_turn()

    def _bot_turn(self) -> None:
        if self.game.bot_turn() is not GameResult.INTERMEDIATE:
            self.pause()
            self._finish()

    def _finish(self) -> None:
        game = self.game
        self.result = game.result
        self.records.register(game.result, game.score)
        self.records.save(self.records_path)
        self.game = None
        self.selected = None
        self.screen = Screen.RECORDS

    def _draw(self, renderer) -> None:
        if self.screen is Screen.MENU:
            renderer.draw_menu(self.records)
        elif self.screen is Screen.GAME and self.game is not None:
            renderer.draw_game(self.game, self.selected)
        elif self.screen is Screen.HELP:
            renderer.draw_help()
        else:
            renderer.draw_records(self.records, self.result)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        import pygame

        from dominoes.render import Renderer

        pygame.init()
        try:
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption("Domino")
            renderer = Renderer(surface)

            def show_and_wait() -> None:
                self._draw(renderer)
                pygame.display.flip()
                pygame.time.wait(PAUSE_MS)

            self.pause = show_and_wait
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        mouse_x, mouse_y = event.pos
                        self.click(mouse_x, WINDOW_HEIGHT - mouse_y)
                self._draw(renderer)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="dominoes", description="Play dominoes against a bot.")
    parser.add_argument("--records", default=RECORDS_FILE, help="file that keeps the results")
    args = parser.parse_args(argv)
    records = Records.load(args.records)
    App(records=records, records_path=args.records).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())