"""Exception types raised by the Unicorn HAT HD driver."""

from __future__ import annotations


class UnicornHatHdError(Exception):
    """Base class for all driver errors."""


class IndexOutOfBounds(UnicornHatHdError, IndexError):
    def __init__(self, x: int, y: int, width: int = 16, height: int = 16) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside the {width}x{height} matrix")
        self.x = x
        self.y = y


class InvalidRotation(UnicornHatHdError, ValueError):
    def __init__(self, angle: object) -> None:
        super().__init__(f"Rotation must be one of 0, 90, 180, 270 (got {angle!r})")
        self.angle = angle


class TransportError(UnicornHatHdError, RuntimeError):
    """A frame could not be written to the transport sink.

    ``reason`` is the transport's own message; the original exception, when
    there is one, is available as ``__cause__``.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
