"""High-level access to a Unicorn HAT HD, real or emulated."""

from __future__ import annotations

from .channel import DeviceChannel
from .framebuffer import FrameBuffer
from .models import Pixel, PixelLike, Rotation, TransportConfig
from .transport import ByteSink, open_sink


class UnicornHatHd:
    """Owns one frame buffer and one device channel.

    The transport is chosen once, from ``config`` or an explicit ``sink``, and
    never changes afterwards. With no arguments the driver talks to
    ``/dev/spidev0.0``.
    """

    def __init__(self, config: TransportConfig | None = None, *, sink: ByteSink | None = None) -> None:
        self.config = config or TransportConfig()
        self.buffer = FrameBuffer()
        self.channel = DeviceChannel(sink if sink is not None else open_sink(self.config))

    @classmethod
    def emulated(cls) -> UnicornHatHd:
        return cls(TransportConfig.emulated())

    @property
    def shape(self) -> tuple[int, int]:
        return self.buffer.shape

    @property
    def rotation(self) -> Rotation:
        return self.buffer.rotation

    def set_rotation(self, angle: int) -> None:
        self.buffer.set_rotation(angle)

    def set_pixel(self, x: int, y: int, pixel: PixelLike) -> None:
        """Set one pixel. ``(0, 0)`` is top-left; x grows right, y grows down."""
        self.buffer.set_pixel(x, y, pixel)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the buffered value, not what the panel currently shows."""
        return self.buffer.get_pixel(x, y)

    def fill(self, pixel: PixelLike) -> None:
        self.buffer.fill(pixel)

    def clear(self) -> None:
        self.buffer.clear()

    def display(self) -> None:
        self.channel.display(self.buffer)

    def close(self) -> None:
        self.channel.close()

    def __enter__(self) -> UnicornHatHd:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
