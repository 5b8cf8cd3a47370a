"""Byte sinks that carry framed pixel data to the panel."""

from __future__ import annotations

from typing import Any, Protocol, Union

from .errors import TransportError
from .models import TransportConfig, TransportMode


class ByteSink(Protocol):
    def write(self, data: bytes) -> int: ...

    def close(self) -> None: ...


class SpiSink:
    """Thin wrapper over spidev with the settings the Unicorn HAT HD expects."""

    def __init__(self, bus: int = 0, device: int = 0, speed_hz: int = 9_000_000) -> None:
        self.bus = bus
        self.device = device
        self.speed_hz = speed_hz
        self._spi: Any | None = None

    @property
    def node(self) -> str:
        return f"/dev/spidev{self.bus}.{self.device}"

    @property
    def is_open(self) -> bool:
        return self._spi is not None

    def open(self) -> None:
        if self.is_open:
            return
        # Imported here so emulated mode works on hosts without spidev.
        try:
            import spidev  # type: ignore
        except ImportError as exc:
            raise TransportError(f"spidev is not available for {self.node}: {exc}") from exc

        spi = spidev.SpiDev()
        try:
            spi.open(self.bus, self.device)
            spi.max_speed_hz = self.speed_hz
            spi.mode = 0
        except OSError as exc:
            spi.close()
            raise TransportError(f"Cannot open {self.node}: {exc}") from exc
        self._spi = spi

    def close(self) -> None:
        if self._spi is not None:
            self._spi.close()
            self._spi = None

    def write(self, data: bytes) -> int:
        if self._spi is None:
            raise TransportError("SPI device is not open")
        try:
            self._spi.writebytes2(data)
        except OSError as exc:
            raise TransportError(f"Write to {self.node} failed: {exc}") from exc
        return len(data)


class EmulatedSink:
    """No-op sink for machines without the panel; keeps the last frame for previews."""

    def __init__(self) -> None:
        self.last_frame: bytes | None = None
        self.frames_written = 0

    @property
    def is_open(self) -> bool:
        return True

    def open(self) -> None:
        return None

    def close(self) -> None:
        return None

    def write(self, data: bytes) -> int:
        self.last_frame = bytes(data)
        self.frames_written += 1
        return len(data)


Sink = Union[SpiSink, EmulatedSink]


def open_sink(config: TransportConfig) -> Sink:
    mode = TransportMode.parse(config.mode)
    sink: Sink
    if mode == TransportMode.EMULATED:
        sink = EmulatedSink()
    else:
        sink = SpiSink(bus=config.bus, device=config.device, speed_hz=config.speed_hz)
    sink.open()
    return sink
