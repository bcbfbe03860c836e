import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from notefall.config import GameSettings
from notefall.playfield import Playfield


class FakeSound:
    """Records notes instead of playing them."""

    def __init__(self, ready=True):
        self.ready = ready
        self.notes = []

    def play_note(self, frequency, duration, volume):
        self.notes.append((frequency, duration, volume))


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def settings():
    return GameSettings(width=800, height=600)


@pytest.fixture
def playfield(settings, sound):
    return Playfield(settings, sound, rng=random.Random(1234))
