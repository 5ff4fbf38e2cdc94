# formula/verify.py
"""Post-install smoke tests: every entry point must exit zero."""
from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass

from formula.constants import APP_NAME
from formula.prefix import Prefix

logger = logging.getLogger(__name__)

SMOKE_COMMANDS: tuple[tuple[str, str], ...] = (
    (APP_NAME, "version"),
    ("cn", "version"),
    ("cnp", "status"),
)


@dataclass
class CheckResult:
    """Result of a single smoke test."""
    name: str
    passed: bool
    detail: str
    suggestion: str = ""


def _run_command(bin_dir: str, command: str, arg: str, timeout: float) -> CheckResult:
    """Run one installed command and judge it by exit status alone."""
    name = f"{command} {arg}"
    path = os.path.join(bin_dir, command)
    if not os.path.exists(path):
        return CheckResult(name, False, "not found",
                           f"Reinstall: claude-notify-formula install --prefix {os.path.dirname(bin_dir)}")
    try:
        result = subprocess.run(
            [path, arg], capture_output=True, text=True, timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return CheckResult(name, False, f"timed out after {timeout}s")
    except OSError as e:
        return CheckResult(name, False, str(e))
    logger.debug("%s exited %d", name, result.returncode)
    if result.returncode == 0:
        return CheckResult(name, True, "exit 0")
    return CheckResult(name, False, f"exit {result.returncode}")


def run_smoke_tests(prefix: str, timeout: float = 10) -> list[CheckResult]:
    """Run every smoke command from prefix/bin and return results."""
    bin_dir = Prefix(os.path.abspath(prefix)).bin
    return [_run_command(bin_dir, cmd, arg, timeout) for cmd, arg in SMOKE_COMMANDS]


def print_report(results: list[CheckResult]) -> bool:
    """Print smoke test results. Returns True if all passed."""
    all_passed = True
    for r in results:
        icon = "\u2713" if r.passed else "\u2717"
        print(f"  {icon} {r.name:24s} {r.detail}")
        if not r.passed:
            all_passed = False
            if r.suggestion:
                print(f"    -> {r.suggestion}")
    return all_passed
