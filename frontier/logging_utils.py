"""Logging utilities for frontier searches and drivers.

Provides color-coded console output so wave traces stand apart from results and errors.
"""

from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for message types
    BLUE = "\033[94m"      # Search progress (waves, relaxations)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colors_enabled() -> bool:
    return not Config.NO_COLOR


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text, or plain text when Config.NO_COLOR is set
    """
    if not colors_enabled():
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_search(message: str) -> None:
    """Log search progress (blue)."""
    print(colored(f"{MARK_SEARCH} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{MARK_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{MARK_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{MARK_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
MARK_SEARCH = "[•]"
MARK_ERROR = "[!]"
MARK_SUCCESS = "[✓]"
MARK_INFO = "[i]"
