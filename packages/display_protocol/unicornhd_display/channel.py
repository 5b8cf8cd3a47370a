"""Frame building and single-write transmission to a byte sink.

One frame on the wire is the start-of-frame marker followed by 256 RGB
triples in physical scan order, 769 bytes sent in a single write. A
``DeviceChannel`` is not thread-safe; callers that display from several
threads must serialize calls themselves.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from .errors import TransportError
from .framebuffer import BUFFER_SIZE
from .models import FrameStats
from .transport import ByteSink

if TYPE_CHECKING:
    from .framebuffer import FrameBuffer

START_OF_FRAME = 0x72
FRAME_SIZE = BUFFER_SIZE + 1


def build_frame(payload: bytes) -> bytes:
    if len(payload) != BUFFER_SIZE:
        raise ValueError(f"Pixel payload must be {BUFFER_SIZE} bytes (got {len(payload)})")
    return bytes([START_OF_FRAME]) + bytes(payload)


class DeviceChannel:
    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self.stats = FrameStats()

    @property
    def sink(self) -> ByteSink:
        return self._sink

    def transmit(self, frame: bytes) -> None:
        start = time.perf_counter()
        try:
            written = self._sink.write(frame)
        except OSError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        if written != len(frame):
            raise TransportError(f"Short write: {written} of {len(frame)} bytes")

        self.stats.bytes_sent += written
        self.stats.frames_sent += 1
        self.stats.duration_s += time.perf_counter() - start

    def display(self, buffer: FrameBuffer) -> None:
        self.transmit(build_frame(buffer.to_bytes()))

    def close(self) -> None:
        self._sink.close()

    def __enter__(self) -> DeviceChannel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
