"""
Mouth chomp animation.
NO UI DEPENDENCIES.

Purely cosmetic: it owns one oscillating value and never reads or
writes simulation state.
"""
import math

from .constants import MOUTH_PHASE_STEP, MOUTH_MAX_ANGLE


class MouthAnimation:
    """Opening angle of the player's mouth, in degrees."""

    def __init__(self, phase_step: float = MOUTH_PHASE_STEP, max_angle: float = MOUTH_MAX_ANGLE):
        self.phase_step = phase_step
        self.max_angle = max_angle
        self.phase = 0.0

    @property
    def angle(self) -> float:
        return abs(math.sin(self.phase)) * self.max_angle

    def step(self, count: int = 1) -> float:
        """Advance by `count` animation steps and return the new angle."""
        self.phase += self.phase_step * count
        return self.angle
