import pytest

from dominoes.game import GameResult
from dominoes.records import Records


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "records.txt"
    original = Records(balance=-4, victories=3, games=8, record=21)
    original.save(path)
    assert Records.load(path) == original


def test_file_format(tmp_path):
    path = tmp_path / "records.txt"
    Records(balance=10, victories=1, games=2, record=9).save(path)
    assert path.read_text() == "10\n1\n2\n9"


def test_missing_file_gives_empty_records(tmp_path):
    assert Records.load(tmp_path / "absent.txt") == Records()


def test_short_file_rejected(tmp_path):
    path = tmp_path / "records.txt"
    path.write_text("1\n2\n")
    with pytest.raises(ValueError):
        Records.load(path)


def test_percent():
    assert Records(victories=1, games=2).percent() == 50
    assert Records().percent() == 0


def test_register_win_updates_totals():
    records = Records(balance=10, victories=1, games=2, record=9)
    records.register(GameResult.WIN, 4)
    assert records.games == 3
    assert records.victories == 2
    assert records.balance == 14
    assert records.record == 9
    records.register(GameResult.WIN, 12)
    assert records.record == 12


def test_register_loss_subtracts():
    records = Records(balance=3, victories=1, games=1, record=3)
    records.register(GameResult.LOSE, 5)
    assert records.balance == -2
    assert records.victories == 1
    assert records.games == 2


def test_register_unfinished_game_rejected():
    records = Records()
    with pytest.raises(ValueError):
        records.register(GameResult.INTERMEDIATE, 3)
    assert records.games == 0