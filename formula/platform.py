# formula/platform.py
from __future__ import annotations

import getpass
import os
import platform as _platform
import shutil
from dataclasses import dataclass

LINUXBREW_PREFIX = "/home/linuxbrew/.linuxbrew"


@dataclass
class PlatformInfo:
    """Detected platform information."""
    os: str              # "macos" or "linux"
    arch: str            # "arm64", "x86_64", ...
    package_manager: str | None  # "brew" when Homebrew is on PATH
    homebrew_prefix: str
    user: str
    home: str


def _default_homebrew_prefix(os_name: str, arch: str) -> str:
    """Return Homebrew's default prefix for an OS/architecture pair."""
    if os_name == "macos":
        return "/opt/homebrew" if arch == "arm64" else "/usr/local"
    return LINUXBREW_PREFIX


def detect_platform() -> PlatformInfo:
    """Detect the current OS, architecture and Homebrew prefix.

    HOMEBREW_PREFIX from the environment wins over the platform default.
    """
    os_name = "macos" if _platform.system() == "Darwin" else "linux"
    arch = _platform.machine()
    prefix = os.environ.get("HOMEBREW_PREFIX") or _default_homebrew_prefix(os_name, arch)
    return PlatformInfo(
        os=os_name,
        arch=arch,
        package_manager="brew" if shutil.which("brew") else None,
        homebrew_prefix=prefix,
        user=getpass.getuser(),
        home=os.path.expanduser("~"),
    )
