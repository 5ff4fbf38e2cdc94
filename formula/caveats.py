# formula/caveats.py
"""Post-install welcome message."""
from __future__ import annotations

import sys
from typing import TextIO

from formula.constants import HOMEPAGE

OHAI = "==> "


def post_install_message() -> list[str]:
    """Return the welcome text, one entry per line."""
    return [
        "Claude-Notify installed successfully!",
        "",
        "Quick start:",
        "  claude-notify setup    # Run initial setup",
        "  cn on                  # Enable notifications",
        "",
        "Available commands:",
        "  claude-notify (full commands)",
        "  cn (global shortcuts)",
        "  cnp (project shortcuts)",
        "",
        f"For more info: {HOMEPAGE}",
    ]


def post_install(stream: TextIO | None = None) -> None:
    """Print the welcome message with Homebrew's ohai marker."""
    out = stream or sys.stdout
    for line in post_install_message():
        print(f"{OHAI}{line}", file=out)
