"""Terminal output helpers for basehat."""

from typing import Callable, Dict, List, Tuple, Union

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"

MASK_VISIBLE_CHARS = 4


def print_banner() -> None:
    """Print the basehat banner."""
    banner = r""" _                     _           _
| |__   __ _ ___  ___| |__   __ _| |_
| '_ \ / _` / __|/ _ \ '_ \ / _` | __|
| |_) | (_| \__ \  __/ | | | (_| | |_
|_.__/ \__,_|___/\___|_| |_|\__,_|\__|
"""
    print(banner)
    print("Deployment configuration for Base.")


def section_header(title: str) -> None:
    """Print a section header."""
    print()
    print(f"--- {title} ---")


def section_footer(message: str) -> None:
    """Print a section footer."""
    print()
    print(message)


def error(message: str) -> None:
    """Print an error message in red."""
    print(f"{RED}[error]{RESET} {message}")


def warn(message: str) -> None:
    """Print a warning message in yellow."""
    print(f"{YELLOW}[warn]{RESET} {message}")


def info(message: str) -> None:
    """Print an info message in blue."""
    print(f"{BLUE}[info]{RESET} {message}")


def success(message: str) -> None:
    """Print a success message in green."""
    print(f"{GREEN}[success]{RESET} {message}")


def result(message: str) -> None:
    """Print a result message in cyan."""
    print(f"{CYAN}[result]{RESET} {message}")


def bold(message: str) -> str:
    return f"{BOLD}{message}{RESET}"


def bold_cyan(message: str) -> str:
    return f"{BOLD}{CYAN}{message}{RESET}"


def mask_secret(secret: str) -> str:
    """
    Hide all but the last few characters of a secret.

    Secrets too short to keep a visible tail are masked entirely.
    """
    if len(secret) <= MASK_VISIBLE_CHARS * 2:
        return "*" * len(secret)
    return "*" * (len(secret) - MASK_VISIBLE_CHARS) + secret[-MASK_VISIBLE_CHARS:]


def print_fields(fields: List[Tuple[str, str]]) -> None:
    """Print label/value pairs with the values aligned."""
    if not fields:
        return
    width = max(len(label) for label, _ in fields) + 1
    for label, value in fields:
        print(f"{(label + ':').ljust(width)} {value}")


def print_menu(
    title: str,
    items: Union[Dict[str, str], List[Tuple[str, str]]],
    item_formatter: Callable[[str], str] | None = None,
) -> None:
    """Print a formatted menu.

    Args:
        title: Menu title
        items: Dictionary mapping keys to labels, or list of (key, label) tuples
        item_formatter: Optional function to format menu items (default: bold)
    """
    print()
    print(f"=== {title} ===")

    if item_formatter is None:
        item_formatter = bold

    if isinstance(items, dict):
        items_list = items.items()
    else:
        items_list = items

    for key, label in items_list:
        print(f"{key}. {item_formatter(label)}")

    print()
