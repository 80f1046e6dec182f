"""Console theme for the bootstrap output."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Typography:
    """Typography styles for different text elements."""

    header_style: str = "bold"
    header_underline: str = "="

    info_style: str = "default"
    success_style: str = "bold green"
    warning_style: str = "yellow"
    error_style: str = "bold red"
    muted_style: str = "dim"


@dataclass
class Theme:
    """Visual configuration shared by the console helpers."""

    typography: Typography = field(default_factory=Typography)
    progress_indent: int = 2
