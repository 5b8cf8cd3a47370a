"""Persistent driver settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from unicornhd_display.models import Rotation, TransportConfig, TransportMode


CONFIG_VERSION = 1
ENV_TRANSPORT = "UNICORNHD_TRANSPORT"

MIN_SPEED_HZ = 125_000
MAX_SPEED_HZ = 32_000_000


@dataclass
class TransportSettings:
    mode: str = TransportMode.REAL.value
    bus: int = 0
    device: int = 0
    speed_hz: int = 9_000_000


@dataclass
class DisplaySettings:
    rotation: int = 0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    transport: TransportSettings = field(default_factory=TransportSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "UnicornHD" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "UnicornHD" / "config.json"
    return Path.home() / ".config" / "unicornhd" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _normalize_transport(cfg: AppConfig) -> None:
    defaults = TransportSettings()
    try:
        cfg.transport.mode = TransportMode.parse(cfg.transport.mode).value
    except ValueError:
        cfg.transport.mode = TransportMode.EMULATED.value
    cfg.transport.bus = max(0, _as_int(cfg.transport.bus, defaults.bus))
    cfg.transport.device = max(0, _as_int(cfg.transport.device, defaults.device))
    cfg.transport.speed_hz = max(MIN_SPEED_HZ, min(MAX_SPEED_HZ, _as_int(cfg.transport.speed_hz, defaults.speed_hz)))


def _normalize_display(cfg: AppConfig) -> None:
    if cfg.display.rotation not in tuple(int(r) for r in Rotation):
        cfg.display.rotation = 0


def _apply_env(cfg: AppConfig) -> None:
    override = os.environ.get(ENV_TRANSPORT, "").strip()
    if override:
        cfg.transport.mode = override


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    cfg = AppConfig()

    if path.exists():
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            raw = {}
        if isinstance(raw, dict):
            cfg = AppConfig(
                config_version=_as_int(raw.get("config_version"), CONFIG_VERSION),
                transport=_merge(TransportSettings, raw.get("transport", {})),
                display=_merge(DisplaySettings, raw.get("display", {})),
            )

    _apply_env(cfg)
    _normalize_transport(cfg)
    _normalize_display(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def to_transport_config(cfg: AppConfig) -> TransportConfig:
    return TransportConfig(
        mode=TransportMode.parse(cfg.transport.mode),
        bus=cfg.transport.bus,
        device=cfg.transport.device,
        speed_hz=cfg.transport.speed_hz,
    )
