# formula/steps.py
"""Install step descriptors executed by the recipe runner.

Each step resolves its source against the unpacked source tree and its
destination against a Prefix, then either installs something or reports
that it skipped. Required steps raise on a missing source; optional steps
never do.
"""
from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Callable, Union

from formula.prefix import Prefix

logger = logging.getLogger(__name__)

INSTALLED = "installed"
SKIPPED = "skipped"

PrefixPath = Union[str, Callable[[Prefix], str]]


class InstallError(Exception):
    """Raised when an install step cannot complete."""

    pass


class MissingRequiredFileError(InstallError):
    """A file or directory the recipe depends on is absent."""

    def __init__(self, path: str):
        super().__init__(f"No such file or directory: {path}")
        self.path = path


class SubstitutionError(InstallError):
    """An in-place text replacement matched nothing."""

    def __init__(self, path: str, pattern: str):
        super().__init__(f"inreplace failed: {path}: expected replacement of {pattern!r}")
        self.path = path
        self.pattern = pattern


@dataclass
class StepResult:
    """Outcome of a single step."""
    step: str
    status: str          # INSTALLED or SKIPPED
    paths: list[str] = field(default_factory=list)
    detail: str = ""


def _remove(path: str) -> None:
    """Delete a file, symlink or directory tree."""
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def _install_path(src: str, dest_dir: str) -> str:
    """Copy src into dest_dir keeping its base name. Returns the new path."""
    os.makedirs(dest_dir, exist_ok=True)
    dst = os.path.join(dest_dir, os.path.basename(src.rstrip(os.sep)))
    if os.path.lexists(dst):
        _remove(dst)
    if os.path.isdir(src):
        shutil.copytree(src, dst, symlinks=True)
    else:
        shutil.copy2(src, dst)
    return dst


def _resolve(value: PrefixPath, prefix: Prefix) -> str:
    return value(prefix) if callable(value) else value


@dataclass
class RequiredCopy:
    """Copy a file or directory that must exist in the source tree."""
    source: str
    destination: str     # Prefix attribute: "bin", "lib", ...

    def describe(self) -> str:
        return f"install {self.source} -> {self.destination}"

    def apply(self, source_root: str, prefix: Prefix) -> StepResult:
        src = os.path.join(source_root, self.source)
        if not os.path.exists(src):
            raise MissingRequiredFileError(src)
        dst = _install_path(src, getattr(prefix, self.destination))
        return StepResult(self.describe(), INSTALLED, [dst])


@dataclass
class OptionalCopy:
    """Copy a file or directory only when the source tree provides it."""
    source: str
    destination: str

    def describe(self) -> str:
        return f"install {self.source} -> {self.destination} (if present)"

    def apply(self, source_root: str, prefix: Prefix) -> StepResult:
        src = os.path.join(source_root, self.source)
        if not os.path.exists(src):
            return StepResult(self.describe(), SKIPPED, detail=f"{self.source} not found")
        dst = _install_path(src, getattr(prefix, self.destination))
        return StepResult(self.describe(), INSTALLED, [dst])


@dataclass
class Alias:
    """Symlink an extra command name to an installed file in the same directory."""
    name: str
    target: str
    directory: str = "bin"

    def describe(self) -> str:
        return f"link {self.name} -> {self.target}"

    def apply(self, source_root: str, prefix: Prefix) -> StepResult:
        directory = getattr(prefix, self.directory)
        target = os.path.join(directory, self.target)
        if not os.path.exists(target):
            raise MissingRequiredFileError(target)
        link = os.path.join(directory, self.name)
        if os.path.lexists(link):
            _remove(link)
        # Relative target, resolved inside the same directory
        os.symlink(self.target, link)
        return StepResult(self.describe(), INSTALLED, [link])


@dataclass
class Substitution:
    """Literal in-place replacement inside an installed text file."""
    path: PrefixPath
    before: str
    after: PrefixPath

    def describe(self) -> str:
        return f"inreplace {self.before!r}"

    def apply(self, source_root: str, prefix: Prefix) -> StepResult:
        path = _resolve(self.path, prefix)
        if not os.path.isfile(path):
            raise MissingRequiredFileError(path)
        # Bytes, so encodings and line endings pass through untouched
        with open(path, "rb") as f:
            content = f.read()
        before = self.before.encode()
        if before not in content:
            raise SubstitutionError(path, self.before)
        after = _resolve(self.after, prefix).encode()
        count = content.count(before)
        # In-place write; mode bits stay as copied
        with open(path, "wb") as f:
            f.write(content.replace(before, after))
        logger.debug("Replaced %d occurrence(s) in %s", count, path)
        return StepResult(self.describe(), INSTALLED, detail=f"{count} replaced in {path}")


Step = Union[RequiredCopy, OptionalCopy, Alias, Substitution]
