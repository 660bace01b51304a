from typing import Dict, Optional

from ..schemas import RollOutcome

# Minimum final score for each rating, best first.
RATINGS = (
    (300, "PERFECT GAME!"),
    (200, "Excellent bowling!"),
    (150, "Great job!"),
    (100, "Good game!"),
)


def rating_for(total: int) -> Optional[str]:
    for threshold, label in RATINGS:
        if total >= threshold:
            return label
    return None


def status_message(state: Dict, outcome: Optional[RollOutcome] = None) -> str:
    """One line describing where the game stands.

    ``outcome`` is the result of the most recent roll; when given, a strike,
    spare or gutter ball on that roll is called out.
    """

    if state["gameComplete"]:
        total = state["totalScore"]
        message = f"Game Complete! Final Score: {total}"
        rating = rating_for(total)
        return f"{message} {rating}" if rating else message

    frame = min(state["currentFrame"], 10)
    roll = state["currentRoll"]
    standing = state["pinsStanding"]
    if outcome is not None and outcome.accepted:
        if outcome.flags.strike:
            return f"STRIKE! Frame {frame}, Roll {roll} up next."
        if outcome.flags.spare:
            return f"SPARE! Nice recovery. Frame {frame}, Roll {roll} up next."
        if outcome.flags.miss:
            return f"Gutter ball! Frame {frame}, Roll {roll}. {standing} pins standing."
    return f"Frame {frame}, Roll {roll}. {standing} pins standing."
