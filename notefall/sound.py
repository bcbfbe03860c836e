"""Synthesised note playback through pygame.mixer."""
from __future__ import annotations

import logging

import numpy as np
import pygame

from .config import SAMPLE_RATE

logger = logging.getLogger(__name__)


def synthesize_tone(frequency, duration, volume, sample_rate=SAMPLE_RATE):
    """Stereo int16 sine wave whose gain ramps linearly from ``volume`` to silence."""
    n_samples = max(1, int(sample_rate * duration))
    t = np.arange(n_samples, dtype=np.float32) / sample_rate
    waveform = np.sin(2 * np.pi * frequency * t)
    envelope = np.linspace(volume, 0.0, n_samples, dtype=np.float32)
    audio = (waveform * envelope * 32767).astype(np.int16)
    return np.column_stack((audio, audio))


class SoundManager:
    """Plays short notes once the mixer has been started.

    The mixer is started lazily by :meth:`initialize`, normally on the first
    pointer press. Until then :meth:`play_note` does nothing.
    """

    def __init__(self):
        self.sounds = {}
        self.enabled = False
        self._attempted = False

    @property
    def ready(self) -> bool:
        return self.enabled

    def initialize(self) -> bool:
        if self._attempted:
            return self.enabled
        self._attempted = True
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            return False
        self.enabled = True
        logger.info("Audio initialized.")
        return True

    def _make_sound(self, frequency, duration, volume):
        key = (round(frequency, 2), round(duration, 3), round(volume, 2))
        sound = self.sounds.get(key)
        if sound is None:
            samples = synthesize_tone(frequency, duration, volume)
            sound = pygame.sndarray.make_sound(samples)
            self.sounds[key] = sound
        return sound

    def play_note(self, frequency=440.0, duration=0.1, volume=0.5):
        if not self.enabled:
            return
        volume = max(0.05, min(1.0, volume))
        try:
            self._make_sound(frequency, duration, volume).play()
        except pygame.error as exc:
            logger.debug("Could not play %.2f Hz: %s", frequency, exc)
