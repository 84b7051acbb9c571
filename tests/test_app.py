import random

import pytest

from dominoes.app import App, Screen, hand_tile_at
from dominoes.game import Field, Game, GameResult, Hand, Tile
from dominoes.records import Records

PLAY = (950, 550)
RECORDS_BUTTON = (400, 100)
HELP_BUTTON = (100, 100)
EXIT = (1880, 1080)
BAZAAR = (1750, 150)
MISS = (1600, 150)
FIELD_LEFT = (700, 550)
FIELD_RIGHT = (1200, 550)
FIRST_HAND_TILE = (60, 100)


@pytest.fixture
def pauses():
    return []


@pytest.fixture
def app(tmp_path, pauses):
    return App(
        records_path=tmp_path / "records.txt",
        rng=random.Random(3),
        pause=lambda: pauses.append(1),
    )


def start(app, game):
    app.game = game
    app.screen = Screen.GAME
    return app


def total_tiles(game):
    return len(game.player) + len(game.bot) + len(game.field) + len(game.stock)


@pytest.mark.parametrize(
    "count, x, y, expected",
    [
        (7, 50, 50, 0),
        (7, 135, 100, 1),
        (7, 130, 100, None),
        (2, 220, 100, None),
        (7, 60, 250, None),
    ],
)
def test_hand_tile_at(count, x, y, expected):
    assert hand_tile_at(count, x, y) == expected


def test_play_starts_game_without_bot_move(app, pauses):
    app.click(*PLAY)
    assert app.screen is Screen.GAME
    assert len(app.game.player) == 7
    assert len(app.game.bot) == 7
    assert len(app.game.field) == 1
    assert pauses == []


def test_play_after_odd_games_lets_bot_start(tmp_path, pauses):
    app = App(
        records=Records(games=1),
        records_path=tmp_path / "r.txt",
        rng=random.Random(5),
        pause=lambda: pauses.append(1),
    )
    app.click(*PLAY)
    assert len(pauses) >= 1
    assert total_tiles(app.game) == 28
    assert len(app.game.field) == 2 or len(app.game.bot) == 8


def test_help_and_back(app):
    app.click(*HELP_BUTTON)
    assert app.screen is Screen.HELP
    app.click(*EXIT)
    assert app.screen is Screen.MENU


def test_records_screen_resets_result(app):
    app.result = GameResult.WIN
    app.click(*RECORDS_BUTTON)
    assert app.screen is Screen.RECORDS
    assert app.result is GameResult.INTERMEDIATE
    app.click(*EXIT)
    assert app.screen is Screen.MENU


def test_menu_click_elsewhere_does_nothing(app):
    app.click(1000, 1000)
    assert app.screen is Screen.MENU
    assert app.game is None


def test_exit_from_game_drops_it(app):
    app.click(*PLAY)
    app.click(*EXIT)
    assert app.screen is Screen.MENU
    assert app.game is None


def test_player_wins_by_laying_last_tile(app, tmp_path):
    game = Game(
        player=Hand([Tile(1, 2)]),
        bot=Hand([Tile(5, 5), Tile(6, 6)]),
        field=Field([Tile(2, 3)]),
        stock=[],
    )
    start(app, game)
    app.click(*FIRST_HAND_TILE)
    assert app.selected == 0
    app.click(*FIELD_LEFT)
    assert app.screen is Screen.RECORDS
    assert app.result is GameResult.WIN
    assert app.records.victories == 1
    assert app.records.balance == Tile(5, 5).pips() + Tile(6, 6).pips()
    assert Records.load(tmp_path / "records.txt") == app.records


def test_bot_wins_after_player_move(app):
    game = Game(
        player=Hand([Tile(1, 2), Tile(0, 5)]),
        bot=Hand([Tile(3, 4)]),
        field=Field([Tile(2, 3)]),
        stock=[],
    )
    start(app, game)
    app.click(*FIRST_HAND_TILE)
    app.click(*FIELD_LEFT)
    assert app.result is GameResult.LOSE
    assert app.records.games == 1
    assert app.records.victories == 0
    assert app.records.balance == -Tile(0, 5).pips()
    assert game.field.tiles[0] == Tile(1, 2)


def test_tile_that_does_not_fit_stays_in_hand(app):
    game = Game(
        player=Hand([Tile(5, 6), Tile(1, 1)]),
        bot=Hand([Tile(4, 4)]),
        field=Field([Tile(2, 3)]),
        stock=[Tile(0, 0)],
    )
    start(app, game)
    app.click(*FIRST_HAND_TILE)
    app.click(*FIELD_RIGHT)
    assert len(game.field) == 1
    assert len(game.player) == 2
    assert app.screen is Screen.GAME


def test_bazaar_ignored_while_player_can_move(app):
    game = Game(
        player=Hand([Tile(2, 6)]),
        bot=Hand([Tile(4, 4)]),
        field=Field([Tile(2, 3)]),
        stock=[Tile(0, 0)],
    )
    start(app, game)
    app.click(*BAZAAR)
    assert game.stock == [Tile(0, 0)]
    assert len(game.player) == 1


def test_bazaar_draw_that_misses_ends_blocked_game(app, pauses):
    game = Game(
        player=Hand([Tile(5, 6)]),
        bot=Hand([Tile(4, 4), Tile(0, 0)]),
        field=Field([Tile(2, 3)]),
        stock=[Tile(0, 1)],
    )
    start(app, game)
    app.click(*BAZAAR)
    assert pauses
    assert app.result is GameResult.LOSE
    assert app.records.balance == -(Tile(5, 6).pips() + Tile(0, 1).pips())


def test_miss_needs_empty_stock(app):
    game = Game(
        player=Hand([Tile(5, 6)]),
        bot=Hand([Tile(3, 4)]),
        field=Field([Tile(2, 3)]),
        stock=[Tile(0, 1)],
    )
    start(app, game)
    app.click(*MISS)
    assert len(game.field) == 1
    assert len(game.bot) == 1


def test_miss_with_equal_points_is_a_win(app):
    game = Game(
        player=Hand([Tile(5, 5)]),
        bot=Hand([Tile(4, 6)]),
        field=Field([Tile(2, 3)]),
        stock=[],
    )
    start(app, game)
    app.click(*MISS)
    assert app.result is GameResult.WIN
    assert app.records.balance == Tile(4, 6).pips()
    assert app.records.record == Tile(4, 6).pips()
    assert app.screen is Screen.RECORDS