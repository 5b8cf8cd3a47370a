"""Typed models for pixels, rotation, and transport selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Sequence, Union

from .errors import InvalidRotation


@dataclass(frozen=True)
class Pixel:
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be an int in 0..255 (got {value!r})")

    @classmethod
    def coerce(cls, value: PixelLike) -> Pixel:
        if isinstance(value, Pixel):
            return value
        if len(value) != 3:
            raise ValueError(f"Expected an (r, g, b) triple, got {len(value)} values")
        r, g, b = value
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


PixelLike = Union[Pixel, Sequence[int]]

BLACK = Pixel(0, 0, 0)


class Rotation(IntEnum):
    DEG_0 = 0
    DEG_90 = 90
    DEG_180 = 180
    DEG_270 = 270

    @classmethod
    def parse(cls, angle: object) -> Rotation:
        if isinstance(angle, bool):
            raise InvalidRotation(angle)
        try:
            return cls(angle)
        except ValueError:
            raise InvalidRotation(angle) from None


class TransportMode(str, Enum):
    REAL = "real"
    EMULATED = "emulated"

    @classmethod
    def parse(cls, value: str | TransportMode) -> TransportMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown transport mode: {value!r}") from None


@dataclass(frozen=True)
class TransportConfig:
    mode: TransportMode = TransportMode.REAL
    bus: int = 0
    device: int = 0
    speed_hz: int = 9_000_000

    @classmethod
    def emulated(cls) -> TransportConfig:
        return cls(mode=TransportMode.EMULATED)


@dataclass
class FrameStats:
    bytes_sent: int = 0
    frames_sent: int = 0
    duration_s: float = 0.0
