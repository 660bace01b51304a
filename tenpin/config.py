import logging
import os

logger = logging.getLogger(__name__)

ROLL_POLICIES = ("reject", "clamp")


def _canon_policy(val):
    """
    Normalize the roll policy to one of ``ROLL_POLICIES``:
      - defaults to 'reject' when unset/empty
      - case and surrounding whitespace are ignored
      - unknown values fall back to 'reject' with a warning
    """
    val = (val or "reject").strip().lower()
    if val not in ROLL_POLICIES:
        logger.warning(
            "TENPIN_ROLL_POLICY must be one of %s (got %r); defaulting to 'reject'",
            ", ".join(ROLL_POLICIES),
            val,
        )
        return "reject"
    return val


def _canon_level(val):
    val = (val or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(val), int):
        logger.warning("TENPIN_LOG_LEVEL is not a valid level (got %r); defaulting to WARNING", val)
        return "WARNING"
    return val


ROLL_POLICY = _canon_policy(os.getenv("TENPIN_ROLL_POLICY"))
LOG_LEVEL = _canon_level(os.getenv("TENPIN_LOG_LEVEL"))


def configure_logging(level=None) -> None:
    """Install a basic handler for hosts that do not configure logging."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
