"""Driver package for the 16x16 Unicorn HAT HD RGB matrix."""

from .channel import FRAME_SIZE, START_OF_FRAME, DeviceChannel, build_frame
from .driver import UnicornHatHd
from .errors import IndexOutOfBounds, InvalidRotation, TransportError, UnicornHatHdError
from .framebuffer import BUFFER_SIZE, HEIGHT, WIDTH, FrameBuffer, inverse_transform, scan_order, transform
from .models import BLACK, FrameStats, Pixel, Rotation, TransportConfig, TransportMode
from .transport import ByteSink, EmulatedSink, SpiSink, open_sink

__all__ = [
    "BLACK",
    "BUFFER_SIZE",
    "ByteSink",
    "DeviceChannel",
    "EmulatedSink",
    "FRAME_SIZE",
    "FrameBuffer",
    "FrameStats",
    "HEIGHT",
    "IndexOutOfBounds",
    "InvalidRotation",
    "Pixel",
    "Rotation",
    "START_OF_FRAME",
    "SpiSink",
    "TransportConfig",
    "TransportError",
    "TransportMode",
    "UnicornHatHd",
    "UnicornHatHdError",
    "WIDTH",
    "build_frame",
    "inverse_transform",
    "open_sink",
    "scan_order",
    "transform",
]
