"""Catalog of platform variants the player can draw."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PlatformTypeDef:
    """Gameplay parameters of one platform variant.

    A definition is plain unless it sets exactly one of ``is_accelerator``
    or ``is_temporary``.
    """

    key: str
    name: str
    color: Color
    note_frequency: float
    restitution: float
    is_accelerator: bool = False
    boost_factor: float = 0.0
    is_temporary: bool = False
    max_hits: int = 0

    def __post_init__(self):
        if self.note_frequency <= 0:
            raise ValueError(f"note_frequency must be positive, got {self.note_frequency}")
        if not 0.0 <= self.restitution <= 1.0:
            raise ValueError(f"restitution must be within [0, 1], got {self.restitution}")
        if self.is_accelerator and self.is_temporary:
            raise ValueError(f"platform type {self.key!r} cannot be both accelerator and temporary")
        if self.is_accelerator and self.boost_factor <= 0:
            raise ValueError(f"accelerator {self.key!r} needs a positive boost_factor")
        if self.is_temporary and (not isinstance(self.max_hits, int) or self.max_hits < 1):
            raise ValueError(f"temporary {self.key!r} needs a positive integer max_hits")

    @property
    def is_plain(self) -> bool:
        return not (self.is_accelerator or self.is_temporary)


DEFAULT_PLATFORM_TYPES = (
    PlatformTypeDef('1', 'low', (173, 216, 230), 523.25, 0.5),     # C5
    PlatformTypeDef('2', 'mid', (144, 238, 144), 659.25, 0.7),     # E5
    PlatformTypeDef('3', 'high', (240, 128, 128), 783.99, 0.9),    # G5
    PlatformTypeDef('4', 'booster', (255, 165, 0), 587.33, 0.6,    # D5
                    is_accelerator=True, boost_factor=2.0),
    PlatformTypeDef('5', 'fragile', (221, 160, 221), 440.00, 0.8,  # A4
                    is_temporary=True, max_hits=3),
)


class PlatformTypeRegistry:
    def __init__(self, types=DEFAULT_PLATFORM_TYPES):
        self._types: Dict[str, PlatformTypeDef] = {}
        for type_def in types:
            self.register(type_def)

    def register(self, type_def: PlatformTypeDef):
        self._types[type_def.key] = type_def

    def lookup(self, key: str) -> Optional[PlatformTypeDef]:
        type_def = self._types.get(key)
        if type_def is None:
            logger.debug("No platform type registered for key %r", key)
        return type_def

    def keys(self):
        return list(self._types)

    def __contains__(self, key) -> bool:
        return key in self._types

    def __iter__(self) -> Iterator[PlatformTypeDef]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)
