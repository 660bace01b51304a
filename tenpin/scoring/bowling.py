"""Ten-pin bowling game state and scoring engine.

The game is a plain ``dict`` created by :func:`init_state` and advanced one
roll at a time by :func:`record_roll` (or :func:`apply` for stored events).
Scores are derived from the frames by :func:`compute_scores`, which can be
called at any point; frames still waiting on bonus rolls score provisionally.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .. import config as settings
from ..exceptions import InvalidRollValue
from ..schemas import FrameOut, RollEvent, RollFlags, RollOutcome, ScoreSummary
from ..services.validation import clamp_roll, validate_roll

logger = logging.getLogger(__name__)

FRAMES = 10
PINS = 10


def _empty_frame() -> Dict:
    return {
        "rolls": [],
        "score": 0,
        "isStrike": False,
        "isSpare": False,
        "isComplete": False,
    }


def init_state(config: Dict) -> Dict:
    policy = config.get("rollPolicy") or settings.ROLL_POLICY
    if not isinstance(policy, str) or policy.lower() not in settings.ROLL_POLICIES:
        raise ValueError("rollPolicy must be 'reject' or 'clamp'")
    policy = policy.lower()
    return {
        "config": {"rollPolicy": policy},
        "frames": [_empty_frame() for _ in range(FRAMES)],
        "currentFrame": 1,
        "currentRoll": 1,
        "pinsStanding": PINS,
        "gameComplete": False,
        "totalScore": 0,
        "rollCount": 0,
    }


def new_game(config: Optional[Dict] = None) -> Dict:
    return init_state(config or {})


def reset_game(state: Optional[Dict] = None) -> Dict:
    """Return a brand new game, carrying over the old game's config.

    The previous state is left untouched so holders can swap it out in a
    single assignment.
    """
    return init_state(dict(state["config"]) if state else {})


# Status accessors -----------------------------------------------------------

def current_frame(state: Dict) -> int:
    return min(state["currentFrame"], FRAMES)


def current_roll(state: Dict) -> int:
    return state["currentRoll"]


def pins_standing(state: Dict) -> int:
    return state["pinsStanding"]


def is_complete(state: Dict) -> bool:
    return state["gameComplete"]


# Roll recording -------------------------------------------------------------

def _outcome(
    state: Dict,
    pins: int,
    frame: int,
    flags: Optional[RollFlags] = None,
    accepted: bool = True,
) -> RollOutcome:
    return RollOutcome(
        pins=pins,
        frame=frame,
        accepted=accepted,
        current_frame=current_frame(state),
        current_roll=state["currentRoll"],
        pins_standing=state["pinsStanding"],
        game_complete=state["gameComplete"],
        flags=flags or RollFlags(),
    )


def _next_frame(state: Dict) -> None:
    state["currentFrame"] += 1
    state["currentRoll"] = 1
    state["pinsStanding"] = PINS
    if state["currentFrame"] > FRAMES:
        state["gameComplete"] = True


def _regular_frame(state: Dict, frame: Dict, pins: int) -> None:
    if state["currentRoll"] == 1:
        if pins == PINS:
            frame["isStrike"] = True
            frame["isComplete"] = True
            _next_frame(state)
        else:
            state["currentRoll"] = 2
        return

    if frame["rolls"][0] + pins == PINS:
        frame["isSpare"] = True
    frame["isComplete"] = True
    _next_frame(state)


def _tenth_frame(state: Dict, frame: Dict, pins: int) -> None:
    roll = state["currentRoll"]
    if roll == 1:
        if pins == PINS:
            frame["isStrike"] = True
            state["pinsStanding"] = PINS
        state["currentRoll"] = 2
    elif roll == 2:
        if frame["isStrike"] or frame["rolls"][0] + pins == PINS:
            # A bonus roll is owed on a fresh rack.
            if not frame["isStrike"]:
                frame["isSpare"] = True
            state["pinsStanding"] = PINS
            state["currentRoll"] = 3
        else:
            frame["isComplete"] = True
            state["gameComplete"] = True
    else:
        frame["isComplete"] = True
        state["gameComplete"] = True


def record_roll(state: Dict, pins: Any) -> RollOutcome:
    """Record one roll and advance the frame/roll cursor.

    Rolls recorded after the game is complete are ignored: nothing is
    mutated and the outcome comes back with ``accepted=False``. Invalid pin
    counts raise :class:`InvalidRollValue` before anything is mutated, unless
    the game was created with ``rollPolicy="clamp"``.
    """
    if state["gameComplete"]:
        logger.info("Game already complete; ignoring roll of %r", pins)
        return _outcome(state, 0, current_frame(state), accepted=False)

    standing = state["pinsStanding"]
    if state["config"]["rollPolicy"] == "clamp":
        pins = clamp_roll(pins, standing)
    else:
        try:
            pins = validate_roll(pins, standing)
        except InvalidRollValue as exc:
            logger.warning(
                "Rejected roll in frame %d, roll %d: %s",
                state["currentFrame"],
                state["currentRoll"],
                exc.detail,
            )
            raise

    frame_no = state["currentFrame"]
    roll_no = state["currentRoll"]
    frame = state["frames"][frame_no - 1]
    frame["rolls"].append(pins)
    state["pinsStanding"] -= pins
    state["rollCount"] += 1

    flags = RollFlags(
        strike=roll_no == 1 and pins == PINS,
        spare=roll_no == 2 and frame["rolls"][0] + pins == PINS,
        miss=roll_no == 1 and pins == 0,
    )
    logger.debug(
        "Frame %d roll %d: %d pins (%d standing)",
        frame_no,
        roll_no,
        pins,
        state["pinsStanding"],
    )

    if frame_no == FRAMES:
        _tenth_frame(state, frame, pins)
    else:
        _regular_frame(state, frame, pins)

    compute_scores(state)
    if state["gameComplete"]:
        logger.info("Game complete; final score %d", state["totalScore"])
    return _outcome(state, pins, frame_no, flags)


def apply(event: Any, state: Dict) -> Dict:
    if not isinstance(event, RollEvent):
        try:
            event = RollEvent.model_validate(event)
        except ValidationError as exc:
            raise InvalidRollValue(
                f"invalid bowling event: {exc.errors()[0]['msg']}",
                code="invalid_event",
            ) from exc
    record_roll(state, event.pins)
    return state


def replay(events: Iterable[Any], config: Optional[Dict] = None) -> Dict:
    """Rebuild a game from a stored sequence of roll events."""
    state = new_game(config)
    for event in events:
        state = apply(event, state)
    return state


# Scoring --------------------------------------------------------------------

def _roll(frame: Dict, n: int) -> int:
    rolls = frame["rolls"]
    return rolls[n] if len(rolls) > n else 0


def _frame_score(frames: List[Dict], i: int) -> int:
    f = frames[i]
    if i == FRAMES - 1:
        return sum(f["rolls"])
    if f["isStrike"]:
        nxt = frames[i + 1]
        bonus = _roll(nxt, 0)
        if nxt["isStrike"] and i + 2 < FRAMES:
            bonus += _roll(frames[i + 2], 0)
        else:
            bonus += _roll(nxt, 1)
        return PINS + bonus
    if f["isSpare"]:
        return PINS + _roll(frames[i + 1], 0)
    return sum(f["rolls"])


def compute_scores(state: Dict) -> ScoreSummary:
    """Cumulative score through each frame plus the running total.

    Safe to call repeatedly; every call recomputes from the recorded rolls
    and writes the same values back into ``frame["score"]``.
    """
    frames = state["frames"]
    scores = []
    total = 0
    for i in range(FRAMES):
        total += _frame_score(frames, i)
        frames[i]["score"] = total
        scores.append(total)
    state["totalScore"] = total
    return ScoreSummary(per_frame_score=scores, total=total)


# Scoreboard -----------------------------------------------------------------

def _digit(pins: int) -> str:
    return str(pins) if pins else "-"


def frame_marks(frame: Dict, index: int) -> List[str]:
    """Scoreboard symbols for one frame: ``X``, ``/``, ``-`` or a digit."""
    rolls = frame["rolls"]
    if index < FRAMES - 1:
        if not rolls:
            return []
        if frame["isStrike"]:
            return ["X", ""]
        marks = [_digit(rolls[0])]
        if len(rolls) > 1:
            marks.append("/" if frame["isSpare"] else _digit(rolls[1]))
        return marks

    marks = []
    for n, pins in enumerate(rolls):
        if n == 1 and rolls[0] != PINS and rolls[0] + pins == PINS:
            marks.append("/")
        elif pins == PINS:
            marks.append("X")
        else:
            marks.append(_digit(pins))
    return marks


def summary(state: Dict) -> Dict:
    scores = compute_scores(state)
    frames = [
        FrameOut(
            number=i + 1,
            rolls=list(f["rolls"]),
            is_strike=f["isStrike"],
            is_spare=f["isSpare"],
            is_complete=f["isComplete"],
            score=f["score"],
            marks=frame_marks(f, i),
        ).model_dump(by_alias=True)
        for i, f in enumerate(state["frames"])
    ]
    return {
        "frames": frames,
        "scores": scores.per_frame_score,
        "total": scores.total,
        "currentFrame": current_frame(state),
        "currentRoll": state["currentRoll"],
        "pinsStanding": state["pinsStanding"],
        "gameComplete": state["gameComplete"],
    }
