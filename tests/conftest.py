import os
import sys

import pytest

# Ensure the repository root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tiny_towns.core.engine.board import Board, empty_board  # noqa: E402


@pytest.fixture
def board() -> Board:
    return empty_board()
