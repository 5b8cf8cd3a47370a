"""16x16 RGB pixel buffer with rotation-aware serialization.

Coordinates are logical: ``(0, 0)`` is the top-left of the panel as the
caller sees it, ``x`` grows to the right and ``y`` grows downwards. Cells are
stored by logical coordinate. Rotation is only applied when the buffer is
serialized: for every physical position on the wire the inverse transform
picks the logical cell to emit, so changing rotation redraws correctly on the
next frame without touching stored pixels.

The panel expects pixels in row-major order starting at the physical top-left
(``offset = y * 16 + x``). Getting this wrong mirrors or transposes the image
instead of failing, so ``scan_order`` is the single place that defines it.
"""

from __future__ import annotations

from typing import Iterator

from .errors import IndexOutOfBounds
from .models import BLACK, Pixel, PixelLike, Rotation

WIDTH = 16
HEIGHT = 16
PIXEL_COUNT = WIDTH * HEIGHT
BYTES_PER_PIXEL = 3
BUFFER_SIZE = PIXEL_COUNT * BYTES_PER_PIXEL

_MAX = WIDTH - 1


def transform(x: int, y: int, rotation: Rotation) -> tuple[int, int]:
    """Map a logical coordinate to the physical coordinate it lands on."""
    if rotation == Rotation.DEG_90:
        return _MAX - y, x
    if rotation == Rotation.DEG_180:
        return _MAX - x, _MAX - y
    if rotation == Rotation.DEG_270:
        return y, _MAX - x
    return x, y


def inverse_transform(x: int, y: int, rotation: Rotation) -> tuple[int, int]:
    """Map a physical coordinate back to the logical coordinate drawn there."""
    return transform(x, y, Rotation((360 - int(rotation)) % 360))


def scan_order(x: int, y: int) -> int:
    return y * WIDTH + x


def _check_bounds(x: int, y: int) -> None:
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise TypeError(f"Pixel coordinates must be ints (got {x!r}, {y!r})")
    if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
        raise IndexOutOfBounds(x, y, WIDTH, HEIGHT)


class FrameBuffer:
    """Fixed-size pixel grid for the Unicorn HAT HD."""

    width = WIDTH
    height = HEIGHT

    def __init__(self) -> None:
        self._cells: list[Pixel] = [BLACK] * PIXEL_COUNT
        self._rotation = Rotation.DEG_0

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    def set_rotation(self, angle: int) -> None:
        self._rotation = Rotation.parse(angle)

    def set_pixel(self, x: int, y: int, pixel: PixelLike) -> None:
        _check_bounds(x, y)
        self._cells[scan_order(x, y)] = Pixel.coerce(pixel)

    def get_pixel(self, x: int, y: int) -> Pixel:
        _check_bounds(x, y)
        return self._cells[scan_order(x, y)]

    def fill(self, pixel: PixelLike) -> None:
        self._cells = [Pixel.coerce(pixel)] * PIXEL_COUNT

    def clear(self) -> None:
        """Reset every cell to black. The panel keeps its image until the next display."""
        self.fill(BLACK)

    def copy(self) -> FrameBuffer:
        other = FrameBuffer()
        other._cells = list(self._cells)
        other._rotation = self._rotation
        return other

    def physical_pixels(self) -> Iterator[Pixel]:
        """Yield the 256 pixels in wire order under the current rotation."""
        rotation = self._rotation
        for py in range(HEIGHT):
            for px in range(WIDTH):
                lx, ly = inverse_transform(px, py, rotation)
                yield self._cells[scan_order(lx, ly)]

    def serialize(self) -> Iterator[int]:
        """Yield the 768 RGB bytes of one frame. Each call starts a fresh pass."""
        for pixel in self.physical_pixels():
            yield pixel.r
            yield pixel.g
            yield pixel.b

    def to_bytes(self) -> bytes:
        return bytes(self.serialize())
