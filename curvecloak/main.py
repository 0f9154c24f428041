"""Command line interface: ``curvecloak <command> ...``."""

import argparse
import json
import os

from . import api_media
from .curve import gilbert2d
from .version import __version__

PLAIN_STYLES = {"plain", "boring", "0", "false", "off"}


def _cli_plain_mode() -> bool:
    """Plain output when NO_COLOR, CURVECLOAK_CLI_PLAIN or a plain CURVECLOAK_CLI_STYLE is set."""
    if os.getenv("NO_COLOR") or os.getenv("CURVECLOAK_CLI_PLAIN"):
        return True
    style = (os.getenv("CURVECLOAK_CLI_STYLE") or "").strip().lower()
    return style in PLAIN_STYLES


class _CliTheme:
    """Result lines for the CLI: bold colour plus emoji, or the bare text."""

    def __init__(self, plain: bool):
        self.plain = plain

    def _wrap(self, msg: str, code: str, emoji: str) -> str:
        if self.plain:
            return msg
        return f"\033[1m\033[{code}m{emoji} {msg}\033[0m"

    def ok(self, msg: str) -> str:
        return self._wrap(msg, "32", "✅")

    def err(self, msg: str) -> str:
        return self._wrap(msg, "31", "❌")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curvecloak",
        description="Reversible pixel scrambling along a gilbert space-filling curve"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encrypt", help="Scramble an image along the gilbert curve")
    enc.add_argument("input", help="Input image path")
    enc.add_argument("-o", "--output", default=None, help="Output image path (default: <stem>.enc.png)")
    enc.add_argument("-s", "--strength", type=float, default=1.0, help="Offset strength in [0, 1]")
    enc.add_argument(
        "-b", "--block-size",
        type=int,
        default=1,
        help="Block sizes at or above the threshold (8) switch to lossy block smoothing"
    )

    dec = subparsers.add_parser("decrypt", help="Restore an image scrambled with 'encrypt'")
    dec.add_argument("input", help="Scrambled image path")
    dec.add_argument("-o", "--output", default=None, help="Output image path (default: <stem>.dec.png)")
    dec.add_argument("-s", "--strength", type=float, default=1.0, help="Strength used when encrypting")

    smo = subparsers.add_parser("smooth", help="Apply the one-way block smoothing transform")
    smo.add_argument("input", help="Input image path")
    smo.add_argument("-o", "--output", default=None, help="Output image path (default: <stem>.smooth.png)")
    smo.add_argument("-s", "--strength", type=float, default=0.5, help="Blend strength in [0, 1]")
    smo.add_argument("-b", "--block-size", type=int, default=16, help="Tile edge length in pixels")

    crv = subparsers.add_parser("curve", help="Print the traversal order of a WIDTH x HEIGHT grid")
    crv.add_argument("width", type=int)
    crv.add_argument("height", type=int)
    crv.add_argument("--json", action="store_true", help="Emit a JSON array of [x, y] pairs")
    return parser


def cli(argv=None) -> int:
    theme = _CliTheme(_cli_plain_mode())
    args = _build_parser().parse_args(argv)

    if args.command == "curve":
        cells = gilbert2d(args.width, args.height)
        if args.json:
            print(json.dumps([list(cell) for cell in cells]))
        else:
            for x, y in cells:
                print(f"{x},{y}")
        return 0

    try:
        if args.command == "encrypt":
            api_media.encrypt_image(
                args.input,
                args.output,
                strength=args.strength,
                block_size=args.block_size
            )
        elif args.command == "decrypt":
            api_media.decrypt_image(args.input, args.output, strength=args.strength)
        else:
            api_media.smooth_image(
                args.input,
                args.output,
                block_size=args.block_size,
                strength=args.strength
            )
    except Exception as exc:
        print(theme.err(f"{args.command} failed: {exc}"))
        return 1
    print(theme.ok("SUCCESS!"))
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
