# formula/main.py
"""Command-line entry point for the claude-notify formula."""
from __future__ import annotations

import argparse
import json
import logging
import sys

from formula.caveats import post_install
from formula.config import ConfigError, FormulaConfig, load_config
from formula.constants import APP_NAME, VERSION
from formula.log_setup import setup_logging
from formula.metadata import FORMULA
from formula.platform import detect_platform
from formula.prefix import default_prefix
from formula.prerequisites import check_dependencies
from formula.recipe import Installer
from formula.steps import InstallError
from formula.uninstall import Uninstaller
from formula.verify import print_report, run_smoke_tests

logger = logging.getLogger(__name__)


def _resolve_prefix(args: argparse.Namespace, config: FormulaConfig) -> str:
    """Command line beats config file beats the platform default."""
    if getattr(args, "prefix", None):
        return args.prefix
    if config.install.prefix:
        return config.install.prefix
    return default_prefix(detect_platform())


def _check_dependencies() -> None:
    """Report declared dependencies. Missing recommended ones only warn."""
    plat = detect_platform()
    for r in check_dependencies(FORMULA.dependencies, plat):
        if r.found:
            logger.info("\u2713 %s (%s)", r.name, r.path)
            continue
        if r.required:
            raise InstallError(f"{r.name} is required but was not found on PATH")
        hint = f" Install later with: {r.install_cmd}" if r.install_cmd else ""
        logger.warning("\u2717 %s not found (recommended).%s", r.name, hint)


def _cmd_install(args: argparse.Namespace, config: FormulaConfig) -> int:
    prefix = _resolve_prefix(args, config)
    source = args.source or config.install.source
    if config.dependencies.check:
        _check_dependencies()
    report = Installer(source, prefix).run()
    logger.info("%d step(s) installed, %d skipped",
                len(report.installed), len(report.skipped))
    post_install()
    return 0


def _cmd_test(args: argparse.Namespace, config: FormulaConfig) -> int:
    prefix = _resolve_prefix(args, config)
    print(f"\n=== {APP_NAME} smoke tests ===\n")
    ok = print_report(run_smoke_tests(prefix, timeout=config.verify.timeout))
    return 0 if ok else 1


def _cmd_uninstall(args: argparse.Namespace, config: FormulaConfig) -> int:
    prefix = _resolve_prefix(args, config)
    removed = Uninstaller(prefix).run()
    logger.info("%s uninstalled (%d path(s) removed).", APP_NAME, len(removed))
    return 0


def _cmd_caveats(args: argparse.Namespace, config: FormulaConfig) -> int:
    post_install()
    return 0


def _cmd_info(args: argparse.Namespace, config: FormulaConfig) -> int:
    if args.json:
        print(json.dumps(FORMULA.as_dict(), indent=2))
        return 0
    print(f"{FORMULA.name}: stable {FORMULA.version}")
    print(FORMULA.description)
    print(FORMULA.homepage)
    print(f"From: {FORMULA.url}")
    print(f"SHA256: {FORMULA.sha256}")
    print(f"License: {FORMULA.license}")
    for dep in FORMULA.dependencies:
        kind = "Recommended" if dep.recommended else "Required"
        print(f"{kind}: {dep.name}")
    return 0


COMMANDS = {
    "install": _cmd_install,
    "test": _cmd_test,
    "uninstall": _cmd_uninstall,
    "caveats": _cmd_caveats,
    "info": _cmd_info,
}


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=None,
                        help="Path to YAML config file")
    common.add_argument("--debug", action="store_true",
                        help="Enable debug mode (verbose logging)")
    common.add_argument("--trace", action="store_true",
                        help="Enable trace mode (writes trace file to debug/)")
    common.add_argument("--verbose", action="store_true",
                        help="With --trace, also send trace output to terminal")

    parser = argparse.ArgumentParser(
        prog="claude-notify-formula",
        description=f"Install recipe for {APP_NAME} {VERSION}",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    install = sub.add_parser("install", parents=[common],
                             help="Install from an unpacked source tree")
    install.add_argument("source", nargs="?", default=None,
                         help="Source tree (default: install.source or .)")
    install.add_argument("--prefix", help="Install prefix (keg directory)")

    test = sub.add_parser("test", parents=[common],
                          help="Run post-install smoke tests")
    test.add_argument("--prefix", help="Install prefix (keg directory)")

    uninstall = sub.add_parser("uninstall", parents=[common],
                               help="Remove an installed prefix")
    uninstall.add_argument("--prefix", help="Install prefix (keg directory)")

    sub.add_parser("caveats", parents=[common],
                   help="Print the post-install message")

    info = sub.add_parser("info", parents=[common],
                          help="Print package metadata")
    info.add_argument("--json", action="store_true", help="Print as JSON")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the claude-notify-formula console script."""
    args = _parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        debug=args.debug or config.debug.enabled,
        trace=args.trace or config.debug.trace,
        verbose=args.verbose or config.debug.verbose,
    )

    try:
        return COMMANDS[args.command](args, config)
    except InstallError as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
