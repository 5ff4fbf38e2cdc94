# formula/uninstall.py
"""Uninstaller: reads the install receipt and reverses the install."""
from __future__ import annotations

import logging
import os
import shutil

from formula.constants import RECEIPT_FILENAME
from formula.receipt import InstallReceipt, load_receipt
from formula.steps import InstallError

logger = logging.getLogger(__name__)


class ReceiptNotFoundError(InstallError):
    """No install receipt exists under the prefix."""

    def __init__(self, prefix: str):
        super().__init__(f"No install receipt found in {prefix}")
        self.prefix = prefix


class Uninstaller:
    """Removes everything a receipt records, aliases first."""

    def __init__(self, prefix: str):
        self.prefix = os.path.abspath(prefix)
        self.receipt: InstallReceipt | None = load_receipt(self.prefix)

    def run(self) -> list[str]:
        """Remove installed files. Returns the removed paths."""
        if self.receipt is None:
            raise ReceiptNotFoundError(self.prefix)

        logger.info("Uninstalling %s %s from %s",
                    self.receipt.name, self.receipt.version, self.prefix)
        removed = self._remove_links()
        removed += self._remove_files()
        self._remove_receipt()
        self._prune_empty_dirs()
        return removed

    def _remove_links(self) -> list[str]:
        """Delete alias symlinks."""
        removed = []
        for link in self.receipt.links:
            if os.path.islink(link):
                os.remove(link)
                removed.append(link)
                logger.info("  Removed link: %s", link)
        return removed

    def _remove_files(self) -> list[str]:
        """Delete installed files and directory trees."""
        removed = []
        for path in self.receipt.files:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)
            else:
                logger.debug("  Already gone: %s", path)
                continue
            removed.append(path)
            logger.info("  Removed: %s", path)
        return removed

    def _remove_receipt(self):
        """Delete the install receipt."""
        path = os.path.join(self.prefix, RECEIPT_FILENAME)
        if os.path.isfile(path):
            os.remove(path)

    def _prune_empty_dirs(self):
        """Remove directories left empty under the prefix, the prefix included."""
        if not os.path.isdir(self.prefix):
            return
        for dirpath, _dirnames, _filenames in os.walk(self.prefix, topdown=False):
            try:
                if not os.listdir(dirpath):
                    os.rmdir(dirpath)
                    logger.debug("  Removed empty directory: %s", dirpath)
            except OSError as e:
                logger.debug("  Could not prune %s: %s", dirpath, e)
