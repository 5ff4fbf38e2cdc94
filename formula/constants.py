# formula/constants.py
APP_NAME = "claude-notify"
VERSION = "1.0.0"
DESCRIPTION = "Native OS notifications for Claude Code"
HOMEPAGE = "https://github.com/mylee04/claude-notify"
SOURCE_URL = f"{HOMEPAGE}/archive/v{VERSION}.tar.gz"
SHA256 = "PLACEHOLDER_SHA256"  # updated when a release is cut
LICENSE = "MIT"

ALIASES = ("cn", "cnp")

# Source tree layout produced by the claude-notify build
MAIN_BINARY = f"bin/{APP_NAME}"
LIB_DIR = f"lib/{APP_NAME}"
SHARE_DIR = f"share/{APP_NAME}"
BASH_COMPLETION = f"completions/bash/{APP_NAME}"
ZSH_COMPLETION = f"completions/zsh/_{APP_NAME}"
FISH_COMPLETION = f"completions/fish/{APP_NAME}.fish"

# How the uninstalled script locates its library, relative to the checkout
LIB_PATH_EXPRESSION = f'$(dirname "$SCRIPT_DIR")/lib/{APP_NAME}'

RECEIPT_FILENAME = "INSTALL_RECEIPT.json"
CONFIG_FILENAME = "config.yaml"
TRACE_DIR = "debug"
