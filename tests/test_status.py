import pytest

from tenpin.scoring import bowling
from tenpin.services.status import rating_for, status_message


@pytest.mark.parametrize(
    "total, rating",
    [
        (300, "PERFECT GAME!"),
        (245, "Excellent bowling!"),
        (200, "Excellent bowling!"),
        (150, "Great job!"),
        (120, "Good game!"),
        (99, None),
        (0, None),
    ],
)
def test_rating_for(total, rating):
    assert rating_for(total) == rating


def test_status_for_new_game(game):
    assert status_message(game) == "Frame 1, Roll 1. 10 pins standing."


def test_status_calls_out_strike(game):
    outcome = bowling.record_roll(game, 10)
    assert status_message(game, outcome).startswith("STRIKE!")


def test_status_calls_out_spare(game):
    bowling.record_roll(game, 4)
    outcome = bowling.record_roll(game, 6)
    assert status_message(game, outcome).startswith("SPARE!")


def test_status_calls_out_gutter_ball(game):
    outcome = bowling.record_roll(game, 0)
    assert status_message(game, outcome) == "Gutter ball! Frame 1, Roll 2. 10 pins standing."


def test_status_mid_frame(game):
    outcome = bowling.record_roll(game, 3)
    assert status_message(game, outcome) == "Frame 1, Roll 2. 7 pins standing."


def test_status_for_finished_games(game):
    for _ in range(12):
        bowling.record_roll(game, 10)
    assert status_message(game) == "Game Complete! Final Score: 300 PERFECT GAME!"

    low = bowling.new_game()
    for _ in range(20):
        bowling.record_roll(low, 2)
    assert status_message(low) == "Game Complete! Final Score: 40"
