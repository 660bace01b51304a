from typing import Any

from ..exceptions import InvalidRollValue


def _require_int(pins: Any) -> int:
    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidRollValue(f"pins must be an integer (got {pins!r}).")
    return pins


def validate_roll(pins: Any, pins_standing: int) -> int:
    """Validate a pin count against the rack.

    Rules:
    - ``pins`` must be an ``int`` (booleans and numeric strings are rejected)
    - ``pins`` must be >= 0
    - ``pins`` must be <= ``pins_standing``
    """

    value = _require_int(pins)
    if value < 0:
        raise InvalidRollValue(f"pins must be >= 0 (got {value}).")
    if value > pins_standing:
        raise InvalidRollValue(
            f"pins must be <= {pins_standing} pins standing (got {value})."
        )
    return value


def clamp_roll(pins: Any, pins_standing: int) -> int:
    """Force an integer pin count into ``0..pins_standing``."""
    value = _require_int(pins)
    return max(0, min(pins_standing, value))
