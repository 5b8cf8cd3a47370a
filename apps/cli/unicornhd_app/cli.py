"""CLI entrypoints for driving and previewing a Unicorn HAT HD."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from unicornhd_core import configure_logging, get_logger, load_config, to_transport_config
from unicornhd_core.logging_setup import log_transport_error
from unicornhd_display import TransportConfig, TransportError, UnicornHatHd
from unicornhd_display.preview import PATTERNS, build_test_pattern, load_image, render_ansi, to_image


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _transport_config(args: argparse.Namespace) -> TransportConfig:
    cfg = load_config(Path(args.config) if args.config else None)
    transport = to_transport_config(cfg)
    if getattr(args, "emulated", False):
        transport = TransportConfig.emulated()
    return transport


def _rotation(args: argparse.Namespace) -> int:
    if args.rotation is not None:
        return args.rotation
    return load_config(Path(args.config) if args.config else None).display.rotation


def cmd_send_test_pattern(args: argparse.Namespace) -> int:
    logger = get_logger()
    transport = _transport_config(args)

    try:
        hat = UnicornHatHd(transport)
    except TransportError as exc:
        log_transport_error(logger, "transport_open", exc, mode=transport.mode.value)
        _print_json({"success": False, "error": exc.reason})
        return 2

    with hat:
        hat.set_rotation(_rotation(args))
        load_image(hat.buffer, build_test_pattern(args.pattern))
        try:
            hat.display()
        except TransportError as exc:
            log_transport_error(logger, "display", exc, mode=transport.mode.value, pattern=args.pattern)
            _print_json({"success": False, "error": exc.reason})
            return 2
        stats = hat.channel.stats

    logger.info(
        f"pattern {args.pattern} sent",
        extra={
            "event": "pattern_sent",
            "mode": transport.mode.value,
            "pattern": args.pattern,
            "rotation": int(hat.rotation),
            "frames_sent": stats.frames_sent,
            "bytes_sent": stats.bytes_sent,
        },
    )
    _print_json(
        {
            "success": True,
            "pattern": args.pattern,
            "mode": transport.mode.value,
            "rotation": int(hat.rotation),
            "stats": asdict(stats),
        }
    )
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    with UnicornHatHd.emulated() as hat:
        hat.set_rotation(_rotation(args))
        load_image(hat.buffer, build_test_pattern(args.pattern))
        hat.display()

        if args.out:
            out = Path(args.out).expanduser()
            to_image(hat.buffer, scale=args.scale).save(out)
            _print_json({"success": True, "pattern": args.pattern, "image": str(out)})
        else:
            print(render_ansi(hat.buffer))
    return 0


def cmd_show_config(args: argparse.Namespace) -> int:
    cfg = load_config(Path(args.config) if args.config else None)
    payload = asdict(cfg)
    payload["transport_config"] = asdict(to_transport_config(cfg))
    _print_json(payload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unicornhd", description="Unicorn HAT HD driver tools")
    parser.add_argument("--config", default=None, help="Optional path to a config.json")
    sub = parser.add_subparsers(dest="command", required=True)

    pat_cmd = sub.add_parser("send-test-pattern", help="Send a deterministic pattern to the panel")
    pat_cmd.add_argument("--pattern", default="quadrants", choices=PATTERNS)
    pat_cmd.add_argument("--rotation", type=int, choices=[0, 90, 180, 270], default=None)
    pat_cmd.add_argument("--emulated", action="store_true", help="Use the no-op sink instead of SPI")
    pat_cmd.set_defaults(func=cmd_send_test_pattern)

    preview_cmd = sub.add_parser("preview", help="Render a pattern without hardware")
    preview_cmd.add_argument("--pattern", default="quadrants", choices=PATTERNS)
    preview_cmd.add_argument("--rotation", type=int, choices=[0, 90, 180, 270], default=None)
    preview_cmd.add_argument("--out", default=None, help="Write a PNG instead of printing to the terminal")
    preview_cmd.add_argument("--scale", type=int, default=16)
    preview_cmd.set_defaults(func=cmd_preview)

    config_cmd = sub.add_parser("show-config", help="Print the effective configuration")
    config_cmd.set_defaults(func=cmd_show_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
