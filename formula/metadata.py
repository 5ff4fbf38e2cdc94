# formula/metadata.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field

from formula.constants import (
    APP_NAME,
    DESCRIPTION,
    HOMEPAGE,
    LICENSE,
    SHA256,
    SOURCE_URL,
    VERSION,
)


@dataclass(frozen=True)
class Dependency:
    """An external tool the package works with."""
    name: str
    recommended: bool = False
    install_hint: str | None = None


@dataclass(frozen=True)
class FormulaMetadata:
    """Static description of the package, fixed at authoring time."""
    name: str
    version: str
    description: str
    homepage: str
    url: str
    sha256: str
    license: str
    dependencies: tuple[Dependency, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return asdict(self)


FORMULA = FormulaMetadata(
    name=APP_NAME,
    version=VERSION,
    description=DESCRIPTION,
    homepage=HOMEPAGE,
    url=SOURCE_URL,
    sha256=SHA256,
    license=LICENSE,
    dependencies=(
        Dependency(
            name="terminal-notifier",
            recommended=True,
            install_hint="brew install terminal-notifier",
        ),
    ),
)
