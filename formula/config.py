# formula/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


@dataclass
class InstallConfig:
    """Where to install from and to."""

    prefix: str | None = None
    source: str = "."


@dataclass
class DependenciesConfig:
    """Recommended-dependency checking."""

    check: bool = True


@dataclass
class VerifyConfig:
    """Smoke test settings."""

    timeout: float = 10


@dataclass
class DebugConfig:
    """Debug mode settings."""

    enabled: bool = False
    trace: bool = False
    verbose: bool = False


@dataclass
class FormulaConfig:
    """Top-level configuration aggregating all subsections."""

    install: InstallConfig = field(default_factory=InstallConfig)
    dependencies: DependenciesConfig = field(default_factory=DependenciesConfig)
    verify: VerifyConfig = field(default_factory=VerifyConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


def _section(raw: dict, name: str) -> dict:
    # `or {}` fallback handles YAML null values for optional sections
    value = raw.get(name, {}) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a mapping")
    return value


def _flag(section: dict, section_name: str, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"{section_name}.{key} must be true or false")
    return value


def load_config(path: str | None) -> FormulaConfig:
    """Load configuration from a YAML file, applying defaults.

    Every section is optional. Passing None skips the file entirely and
    returns the defaults.

    Args:
        path: Filesystem path to the YAML configuration file, or None.

    Returns:
        A fully populated FormulaConfig instance.

    Raises:
        ConfigError: If the file does not exist, is not valid YAML, is not
            a mapping, holds a value of the wrong type, or verify.timeout
            is not a positive number.
    """
    if path is None:
        return FormulaConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    install_raw = _section(raw, "install")
    deps_raw = _section(raw, "dependencies")
    verify_raw = _section(raw, "verify")
    debug_raw = _section(raw, "debug")

    prefix = install_raw.get("prefix")
    if prefix is not None and not isinstance(prefix, str):
        raise ConfigError("install.prefix must be a string")
    # Null falls back to the default like a missing key
    source = install_raw.get("source") or "."
    if not isinstance(source, str):
        raise ConfigError("install.source must be a string")

    timeout = verify_raw.get("timeout", 10)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("verify.timeout must be a positive number")

    logger.debug("Loaded config from %s", path)

    return FormulaConfig(
        install=InstallConfig(
            prefix=prefix or None,
            source=source,
        ),
        dependencies=DependenciesConfig(
            check=_flag(deps_raw, "dependencies", "check", True),
        ),
        verify=VerifyConfig(timeout=timeout),
        debug=DebugConfig(
            enabled=_flag(debug_raw, "debug", "enabled", False),
            trace=_flag(debug_raw, "debug", "trace", False),
            verbose=_flag(debug_raw, "debug", "verbose", False),
        ),
    )
