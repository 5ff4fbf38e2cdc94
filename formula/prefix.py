# formula/prefix.py
"""Package-manager directory layout under an install prefix."""
from __future__ import annotations

import os
from dataclasses import dataclass

from formula.constants import APP_NAME, VERSION
from formula.platform import PlatformInfo


@dataclass(frozen=True)
class Prefix:
    """Directories a recipe installs into, rooted at one keg."""
    root: str

    @property
    def bin(self) -> str:
        return os.path.join(self.root, "bin")

    @property
    def lib(self) -> str:
        return os.path.join(self.root, "lib")

    @property
    def share(self) -> str:
        return os.path.join(self.root, "share")

    @property
    def bash_completion(self) -> str:
        return os.path.join(self.root, "etc", "bash_completion.d")

    @property
    def zsh_completion(self) -> str:
        return os.path.join(self.share, "zsh", "site-functions")

    @property
    def fish_completion(self) -> str:
        return os.path.join(self.share, "fish", "vendor_completions.d")


def default_prefix(plat: PlatformInfo) -> str:
    """Return the Cellar keg path for this version of the package."""
    return os.path.join(plat.homebrew_prefix, "Cellar", APP_NAME, VERSION)
