"""Coloured console helpers for user-facing messages."""

import sys


# ANSI color codes for console output
class Colors:
    HEADER = "\033[95m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


def print_header(text):
    """Print header text centered between two separator lines.

    Args:
        text: The header text, centered within an 80-character width.
    """
    print(f"\n{Colors.HEADER}{Colors.BOLD}{'=' * 80}{Colors.RESET}")
    print(f"{Colors.HEADER}{Colors.BOLD}{text.center(80)}{Colors.RESET}")
    print(f"{Colors.HEADER}{Colors.BOLD}{'=' * 80}{Colors.RESET}\n")


def print_success(text):
    print(f"{Colors.GREEN}✓ {text}{Colors.RESET}")


def print_info(text):
    print(f"{Colors.CYAN}ℹ {text}{Colors.RESET}")


def print_warning(text):
    print(f"{Colors.YELLOW}⚠ {text}{Colors.RESET}")


def print_error(text):
    """Print an error diagnostic in red on stderr.

    Args:
        text: The message, shown with the ``[-]`` marker.
    """
    print(f"{Colors.RED}[-] {text}{Colors.RESET}", file=sys.stderr)
