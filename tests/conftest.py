import logging
import os
import stat

import pytest

MAIN_SCRIPT = """#!/bin/sh
SCRIPT_DIR="$(cd "$(dirname "$0")" && pwd)"
LIB_DIR="$(dirname "$SCRIPT_DIR")/lib/claude-notify"
case "$1" in
  version) echo "claude-notify 1.0.0" ;;
  status) echo "notifications: on" ;;
  *) echo "unknown command: $1" >&2; exit 1 ;;
esac
"""


def make_source_tree(root, *, binary=True, lib=True, share=False, completions=()):
    """Lay out a claude-notify build tree under root."""
    root.mkdir(parents=True, exist_ok=True)
    if binary:
        (root / "bin").mkdir()
        script = root / "bin" / "claude-notify"
        script.write_text(MAIN_SCRIPT)
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    if lib:
        lib_dir = root / "lib" / "claude-notify"
        lib_dir.mkdir(parents=True)
        (lib_dir / "common.sh").write_text("notify() { :; }\n")
        (lib_dir / "platforms").mkdir()
        (lib_dir / "platforms" / "macos.sh").write_text("# macos\n")
    if share:
        share_dir = root / "share" / "claude-notify"
        share_dir.mkdir(parents=True)
        (share_dir / "icon.png").write_bytes(b"\x89PNG")
    paths = {
        "bash": os.path.join("completions", "bash", "claude-notify"),
        "zsh": os.path.join("completions", "zsh", "_claude-notify"),
        "fish": os.path.join("completions", "fish", "claude-notify.fish"),
    }
    for shell in completions:
        path = root / paths[shell]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {shell} completion for claude-notify\n")
    return root


@pytest.fixture
def source_tree(tmp_path):
    """A complete source tree with shared resources and all completions."""
    return make_source_tree(
        tmp_path / "src", share=True, completions=("bash", "zsh", "fish"),
    )


@pytest.fixture
def minimal_source_tree(tmp_path):
    """Only the required binary and library directory."""
    return make_source_tree(tmp_path / "src")


@pytest.fixture
def keg(tmp_path):
    return tmp_path / "Cellar" / "claude-notify" / "1.0.0"


@pytest.fixture(autouse=True)
def reset_formula_logger():
    """Drop handlers setup_logging attached so they don't outlive a test's capture."""
    yield
    logger = logging.getLogger("formula")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
