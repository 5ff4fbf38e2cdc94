# formula/prerequisites.py
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass

from formula.metadata import Dependency
from formula.platform import PlatformInfo

logger = logging.getLogger(__name__)


@dataclass
class PrereqResult:
    """Result of a single dependency check."""
    name: str
    found: bool
    path: str | None
    required: bool
    install_cmd: str | None = None


def _install_cmd_for(dep: Dependency, plat: PlatformInfo) -> str | None:
    """Suggest an install command for a missing dependency."""
    if plat.package_manager == "brew" or plat.os == "macos":
        return dep.install_hint
    return None


def check_dependencies(
    dependencies: tuple[Dependency, ...] | list[Dependency],
    plat: PlatformInfo,
) -> list[PrereqResult]:
    """Look up every declared dependency on PATH."""
    results: list[PrereqResult] = []
    for dep in dependencies:
        path = shutil.which(dep.name)
        logger.debug("Dependency %s -> %s", dep.name, path or "missing")
        results.append(PrereqResult(
            name=dep.name,
            found=path is not None,
            path=path,
            required=not dep.recommended,
            install_cmd=_install_cmd_for(dep, plat),
        ))
    return results
