import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from lanescore.schemas import FRAMES_PER_GAME  # noqa: E402


@pytest.fixture
def sheet():
    """Build a ten-frame sheet from the frames given, padding with empty ones."""

    def _sheet(*frames):
        return [list(f) for f in frames] + [[] for _ in range(FRAMES_PER_GAME - len(frames))]

    return _sheet
