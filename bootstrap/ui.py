"""
Provides centralized console objects for consistent UI output.

Status lines go to standard output, errors and warnings to standard error.
"""

from rich.console import Console
from rich.text import Text

from bootstrap.theme import Theme

_console: Console | None = None
_error_console: Console | None = None
_theme = Theme()


def get_console() -> Console:
    """Gets a singleton Console instance for standard output."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def get_error_console() -> Console:
    """Gets a singleton Console instance for standard error."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, highlight=False)
    return _error_console


def _print(console: Console, message: str, style: str) -> None:
    console.print(Text(message, style=style), soft_wrap=True)


def header(title: str) -> None:
    """Display the banner."""
    typography = _theme.typography
    _print(get_console(), title, typography.header_style)
    _print(get_console(), typography.header_underline * len(title), typography.muted_style)


def info(message: str) -> None:
    _print(get_console(), message, _theme.typography.info_style)


def success(message: str) -> None:
    _print(get_console(), message, _theme.typography.success_style)


def progress(percent: int) -> None:
    """Display one coarse progress step."""
    indent = " " * _theme.progress_indent
    _print(get_console(), f"{indent}Progress: {percent}%", _theme.typography.muted_style)


def blank() -> None:
    get_console().print()


def warning(message: str) -> None:
    _print(get_error_console(), message, _theme.typography.warning_style)


def error(message: str) -> None:
    _print(get_error_console(), message, _theme.typography.error_style)
