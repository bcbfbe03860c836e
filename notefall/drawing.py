"""Turns pointer drags into platform placement requests."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import MIN_PLATFORM_LENGTH

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class PlacementRequest:
    center: Point
    length: float
    angle: float
    type_key: str


class DragGesture:
    """State of the line the player is currently drawing."""

    def __init__(self, min_length: float = MIN_PLATFORM_LENGTH):
        self.min_length = min_length
        self.active = False
        self.start: Point = (0.0, 0.0)
        self.current: Point = (0.0, 0.0)

    def begin(self, point: Point):
        self.active = True
        self.start = (float(point[0]), float(point[1]))
        self.current = self.start

    def update(self, point: Point):
        if not self.active:
            return
        self.current = (float(point[0]), float(point[1]))

    def end(self, point: Point, type_key: str) -> Optional[PlacementRequest]:
        """Finish the drag at ``point``.

        Returns ``None`` when no drag was in progress or the line is shorter
        than ``min_length``. The gesture is reset either way.
        """
        if not self.active:
            return None
        self.update(point)
        (sx, sy), (ex, ey) = self.start, self.current
        self._reset()

        dx = ex - sx
        dy = ey - sy
        length = math.hypot(dx, dy)
        if length < self.min_length:
            logger.info("Platform too short (%.1f), not created.", length)
            return None

        return PlacementRequest(
            center=(sx + dx / 2, sy + dy / 2),
            length=length,
            angle=math.atan2(dy, dx),
            type_key=type_key,
        )

    def _reset(self):
        self.active = False
        self.start = (0.0, 0.0)
        self.current = (0.0, 0.0)
