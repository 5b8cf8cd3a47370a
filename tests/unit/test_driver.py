import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "display_protocol"))

from unicornhd_display import (
    EmulatedSink,
    IndexOutOfBounds,
    Pixel,
    Rotation,
    SpiSink,
    TransportConfig,
    TransportError,
    TransportMode,
    UnicornHatHd,
    open_sink,
)


class RecordingSink:
    def __init__(self):
        self.writes = []
        self.closed = False

    def write(self, data):
        self.writes.append(bytes(data))
        return len(data)

    def close(self):
        self.closed = True


class UnicornHatHdTests(unittest.TestCase):
    def test_emulated_driver_round_trip(self):
        with UnicornHatHd.emulated() as hat:
            self.assertIsInstance(hat.channel.sink, EmulatedSink)
            self.assertEqual(hat.shape, (16, 16))
            hat.set_pixel(15, 15, (0, 255, 0))
            self.assertEqual(hat.get_pixel(15, 15), Pixel(0, 255, 0))
            hat.display()
            self.assertEqual(hat.channel.sink.last_frame[-3:], bytes([0, 255, 0]))

    def test_injected_sink_takes_precedence(self):
        sink = RecordingSink()
        hat = UnicornHatHd(TransportConfig(mode=TransportMode.REAL), sink=sink)
        hat.set_rotation(90)
        hat.set_pixel(0, 0, (255, 0, 0))
        hat.display()
        hat.close()

        self.assertEqual(hat.rotation, Rotation.DEG_90)
        frame = sink.writes[0]
        self.assertEqual(frame[0], 0x72)
        self.assertEqual(frame[1 + 15 * 3 : 1 + 16 * 3], bytes([255, 0, 0]))
        self.assertTrue(sink.closed)

    def test_errors_propagate(self):
        hat = UnicornHatHd.emulated()
        with self.assertRaises(IndexOutOfBounds):
            hat.set_pixel(0, 16, (1, 1, 1))
        hat.fill((3, 3, 3))
        hat.clear()
        self.assertEqual(hat.get_pixel(8, 8), Pixel(0, 0, 0))

    def test_default_config_is_real_spi0(self):
        cfg = TransportConfig()
        self.assertEqual(cfg.mode, TransportMode.REAL)
        self.assertEqual((cfg.bus, cfg.device, cfg.speed_hz), (0, 0, 9_000_000))


class SpiSinkTests(unittest.TestCase):
    def test_open_configures_device(self):
        fake_module = MagicMock()
        spi = fake_module.SpiDev.return_value
        with patch.dict(sys.modules, {"spidev": fake_module}):
            sink = open_sink(TransportConfig(bus=0, device=1))

        self.assertIsInstance(sink, SpiSink)
        spi.open.assert_called_once_with(0, 1)
        self.assertEqual(spi.max_speed_hz, 9_000_000)
        self.assertEqual(spi.mode, 0)
        self.assertEqual(sink.write(b"\x72abc"), 4)
        spi.writebytes2.assert_called_once_with(b"\x72abc")
        sink.close()
        spi.close.assert_called_once()
        self.assertFalse(sink.is_open)

    def test_open_failure_is_transport_error(self):
        fake_module = MagicMock()
        fake_module.SpiDev.return_value.open.side_effect = FileNotFoundError(2, "No such file or directory")
        with patch.dict(sys.modules, {"spidev": fake_module}):
            with self.assertRaises(TransportError) as ctx:
                UnicornHatHd(TransportConfig())
        self.assertIn("/dev/spidev0.0", ctx.exception.reason)

    def test_write_failure_is_transport_error(self):
        fake_module = MagicMock()
        fake_module.SpiDev.return_value.writebytes2.side_effect = OSError(121, "Remote I/O error")
        with patch.dict(sys.modules, {"spidev": fake_module}):
            hat = UnicornHatHd(TransportConfig())
        before = hat.buffer.to_bytes()
        with self.assertRaises(TransportError):
            hat.display()
        self.assertEqual(hat.buffer.to_bytes(), before)

    def test_missing_spidev_is_transport_error(self):
        with patch.dict(sys.modules, {"spidev": None}):
            with self.assertRaises(TransportError) as ctx:
                UnicornHatHd(TransportConfig())
        self.assertIn("spidev is not available", ctx.exception.reason)
        self.assertIsInstance(ctx.exception.__cause__, ImportError)

    def test_write_before_open(self):
        with self.assertRaises(TransportError):
            SpiSink().write(b"\x00")


if __name__ == "__main__":
    unittest.main()
