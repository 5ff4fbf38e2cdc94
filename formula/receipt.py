# formula/receipt.py
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from getpass import getuser

from formula.constants import RECEIPT_FILENAME


@dataclass
class InstallReceipt:
    """Tracks what was installed and where, for uninstall."""
    name: str
    version: str
    prefix: str
    source: str
    files: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    installed_at: str = ""
    installed_by: str = ""

    def __post_init__(self):
        if not self.installed_at:
            self.installed_at = datetime.now(timezone.utc).isoformat()
        if not self.installed_by:
            self.installed_by = getuser()


def save_receipt(receipt: InstallReceipt, prefix: str) -> str:
    """Write the receipt to prefix/INSTALL_RECEIPT.json. Returns path."""
    path = os.path.join(prefix, RECEIPT_FILENAME)
    with open(path, "w") as f:
        json.dump(asdict(receipt), f, indent=2)
    return path


def load_receipt(prefix: str) -> InstallReceipt | None:
    """Load the receipt from prefix. Returns None if not found."""
    path = os.path.join(prefix, RECEIPT_FILENAME)
    if not os.path.isfile(path):
        return None
    with open(path) as f:
        data = json.load(f)
    # Receipts from newer versions may carry keys this one does not know
    known = {fld.name for fld in fields(InstallReceipt)}
    return InstallReceipt(**{k: v for k, v in data.items() if k in known})
