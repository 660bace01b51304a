from concurrent.futures import ThreadPoolExecutor

from tenpin import GameSession
from tenpin.scoring import bowling


def test_session_records_and_scores():
    session = GameSession({"rollPolicy": "reject"})
    session.record_roll(7)
    session.record_roll(3)
    session.record_roll(5)
    scores = session.scores()
    assert scores.per_frame_score[:2] == [15, 20]
    assert scores.total == 20
    assert session.summary()["currentRoll"] == 2


def test_snapshot_is_detached():
    session = GameSession()
    session.record_roll(4)
    snap = session.snapshot()
    snap["frames"][0]["rolls"].append(99)
    assert session.snapshot()["frames"][0]["rolls"] == [4]


def test_concurrent_rolls_are_serialised():
    session = GameSession()
    with ThreadPoolExecutor(max_workers=4) as pool:
        outcomes = list(pool.map(lambda _: session.record_roll(10), range(20)))
    assert sum(o.accepted for o in outcomes) == 12
    assert session.game_complete is True
    assert session.scores().total == 300
    state = session.snapshot()
    assert sum(len(f["rolls"]) for f in state["frames"]) == 12


def test_reset_replaces_state():
    session = GameSession({"rollPolicy": "clamp"})
    for _ in range(12):
        session.record_roll(10)
    session.reset()
    assert session.game_complete is False
    state = session.snapshot()
    assert state == bowling.new_game({"rollPolicy": "clamp"})
