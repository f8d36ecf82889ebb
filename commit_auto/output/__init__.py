"""Terminal Output Formatting Package"""

import re
import sys
import os


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error('Error: ' + message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    prefix = warning('⚠') if UNICODE_ENABLED else '[!]'
    print(f"{prefix} {warning('Warning: ' + message)}", file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'FEAT': Colors.GREEN,
    'FIX': Colors.RED,
    'REFACTOR': Colors.YELLOW,
    'DOCS': Colors.CYAN,
    'TEST': Colors.MAGENTA,
    'CHORE': Colors.DIM,
    'STYLE': Colors.DIM,
}


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix of a commit message."""
    if not COLORS_ENABLED:
        return message
    match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', message)
    if match:
        color = COMMIT_TYPE_COLORS.get(match.group(1).upper())
        if color:
            prefix = match.group(0)
            return _colorize(prefix, Colors.BOLD, color) + message[len(prefix):]
    return message


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning",
    "colorize_commit_type", "COMMIT_TYPE_COLORS",
]
