"""Terminal output helpers shared by the engine and the CLI."""

import os
import sys

from . import config


def color_enabled(stream=None) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    stream = stream if stream is not None else getattr(sys, "stderr", None)
    return bool(stream and hasattr(stream, "isatty") and stream.isatty())


def paint(text: str, code: str, stream=None) -> str:
    if not color_enabled(stream):
        return text
    return f"\033[{code}m{text}\033[0m"


def log_plan(op_name: str, plan: dict) -> None:
    """Print a one-line execution plan on stderr when CURVECLOAK_VERBOSE is on."""
    if not config.verbose_enabled():
        return
    fields = " ".join(f"{key}={value}" for key, value in plan.items())
    header = f"🎛️ {paint('[curvecloak]', '36;1')} op={paint(op_name, '1')} {fields}"
    try:
        print(header, file=sys.stderr)
    except (OSError, ValueError):
        pass
