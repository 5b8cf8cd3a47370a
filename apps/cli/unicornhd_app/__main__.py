"""``python -m unicornhd_app``: prints the effective configuration when called bare."""

from __future__ import annotations

import sys

try:
    from .cli import main as _cli_main
except ImportError:
    # Run as a plain script, outside the package.
    from unicornhd_app.cli import main as _cli_main

DEFAULT_ARGS = ("show-config",)


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv) or list(DEFAULT_ARGS)
    return int(_cli_main(args))


if __name__ == "__main__":
    raise SystemExit(main())
