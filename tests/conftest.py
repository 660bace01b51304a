import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tenpin.scoring import bowling  # noqa: E402


@pytest.fixture
def game():
    """A fresh game that rejects invalid pin counts."""
    return bowling.new_game({"rollPolicy": "reject"})
