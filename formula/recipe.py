# formula/recipe.py
"""The claude-notify install recipe and the runner that executes it."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from formula.constants import (
    ALIASES,
    APP_NAME,
    BASH_COMPLETION,
    FISH_COMPLETION,
    LIB_DIR,
    LIB_PATH_EXPRESSION,
    MAIN_BINARY,
    SHARE_DIR,
    VERSION,
    ZSH_COMPLETION,
)
from formula.prefix import Prefix
from formula.receipt import InstallReceipt, save_receipt
from formula.steps import (
    INSTALLED,
    SKIPPED,
    Alias,
    OptionalCopy,
    RequiredCopy,
    Step,
    StepResult,
    Substitution,
)

logger = logging.getLogger(__name__)


def build_recipe() -> list[Step]:
    """Return the ordered install steps for claude-notify."""
    steps: list[Step] = [RequiredCopy(MAIN_BINARY, "bin")]
    steps += [Alias(name, APP_NAME) for name in ALIASES]
    steps += [
        RequiredCopy(LIB_DIR, "lib"),
        OptionalCopy(SHARE_DIR, "share"),
        OptionalCopy(BASH_COMPLETION, "bash_completion"),
        OptionalCopy(ZSH_COMPLETION, "zsh_completion"),
        OptionalCopy(FISH_COMPLETION, "fish_completion"),
        # The relocated script can no longer find lib/ next to its checkout
        Substitution(
            path=lambda p: os.path.join(p.bin, APP_NAME),
            before=LIB_PATH_EXPRESSION,
            after=lambda p: os.path.join(p.lib, APP_NAME),
        ),
    ]
    return steps


@dataclass
class InstallReport:
    """Results of a completed install, in execution order."""
    prefix: str
    results: list[StepResult] = field(default_factory=list)
    receipt_path: str = ""

    @property
    def installed(self) -> list[StepResult]:
        return [r for r in self.results if r.status == INSTALLED]

    @property
    def skipped(self) -> list[StepResult]:
        return [r for r in self.results if r.status == SKIPPED]


class Installer:
    """Runs recipe steps in order against one source tree and prefix.

    The first InstallError stops the run and propagates. Nothing already
    installed is rolled back; the receipt is only written on success.
    """

    def __init__(self, source_root: str, prefix: str, steps: list[Step] | None = None):
        self.source_root = os.path.abspath(source_root)
        self.prefix = Prefix(os.path.abspath(prefix))
        self.steps = steps if steps is not None else build_recipe()

    def run(self) -> InstallReport:
        """Execute every step and write the install receipt."""
        logger.info("Installing %s %s into %s", APP_NAME, VERSION, self.prefix.root)
        report = InstallReport(prefix=self.prefix.root)
        for step in self.steps:
            logger.debug("Step: %s", step.describe())
            result = step.apply(self.source_root, self.prefix)
            if result.status == SKIPPED:
                logger.info("  skipped %s", result.detail)
            else:
                for path in result.paths:
                    logger.info("  %s", path)
            report.results.append(result)
        report.receipt_path = self._save_receipt(report)
        return report

    def _save_receipt(self, report: InstallReport) -> str:
        files: list[str] = []
        links: list[str] = []
        for step, result in zip(self.steps, report.results):
            if isinstance(step, Alias):
                links.extend(result.paths)
            else:
                files.extend(result.paths)
        receipt = InstallReceipt(
            name=APP_NAME,
            version=VERSION,
            prefix=self.prefix.root,
            source=self.source_root,
            files=files,
            links=links,
        )
        os.makedirs(self.prefix.root, exist_ok=True)
        path = save_receipt(receipt, self.prefix.root)
        logger.debug("Receipt saved to %s", path)
        return path
