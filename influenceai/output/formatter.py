"""
Output formatting for InfluenceAI.

Handles ASCII tables, colors, and CLI rendering of a lookup result.
"""

import os
import re
import sys
from typing import List, Optional, Any

from influenceai.models.entities import Celebrity

# Enable ANSI colors on Windows
if sys.platform == 'win32':
    os.system('')  # Triggers VT100 emulation

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    # Foreground colors
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GRAY = '\033[90m'


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Apply color if enabled."""
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def bold(text: str, enabled: bool = True) -> str:
    """Make text bold."""
    if not enabled:
        return text
    return f"{Colors.BOLD}{text}{Colors.RESET}"


def dim(text: str, enabled: bool = True) -> str:
    """Make text dim/gray."""
    if not enabled:
        return text
    return f"{Colors.DIM}{text}{Colors.RESET}"


def score_color(value: int) -> str:
    """Pick a color for a 0-100 score."""
    if value >= 70:
        return Colors.GREEN
    if value >= 40:
        return Colors.YELLOW
    return Colors.RED


def create_bar(value: float, max_value: float, width: int = 20) -> str:
    """Create ASCII progress bar."""
    if max_value == 0:
        return ' ' * width

    ratio = max(0.0, min(1.0, value / max_value))
    filled = int(ratio * width)

    return '█' * filled + '░' * (width - filled)


def format_table(
    headers: List[str],
    rows: List[List[Any]],
    alignments: Optional[List[str]] = None,
    color_enabled: bool = True
) -> str:
    """
    Format data as an ASCII table.

    Args:
        headers: Column headers
        rows: List of row tuples/lists
        alignments: List of 'l' or 'r' for each column
        color_enabled: Whether to apply colors to headers
    """
    if not rows:
        return "No data to display."

    str_rows = [[str(cell) for cell in row] for row in rows]

    # Column widths ignore ANSI codes
    col_widths = [len(h) for h in headers]
    for row in str_rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(strip_ansi(cell)))

    if alignments is None:
        alignments = ['l'] * len(headers)

    def align_cell(text: str, width: int, align: str) -> str:
        padding_needed = width - len(strip_ansi(text))
        if align == 'r':
            return ' ' * padding_needed + text
        return text + ' ' * padding_needed

    lines = []

    header_line = ' │ '.join(
        align_cell(h, col_widths[i], alignments[i]) for i, h in enumerate(headers)
    )
    if color_enabled:
        header_line = bold(header_line)
    lines.append(header_line)

    lines.append('─┼─'.join('─' * w for w in col_widths))

    for row in str_rows:
        lines.append(' │ '.join(
            align_cell(cell, col_widths[i], alignments[i]) for i, cell in enumerate(row)
        ))

    return '\n'.join(lines)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE.sub('', text)


def print_header(text: str, char: str = '=', color_enabled: bool = True) -> str:
    """Create a header line."""
    line = char * 60
    return f"{line}\n  {bold(text, color_enabled)}\n{line}"


def print_section(title: str, color_enabled: bool = True) -> str:
    """Create a section header."""
    return f"\n{bold(title, color_enabled)}\n{'-' * len(title)}"


def format_celebrity(
    celebrity: Celebrity,
    color_enabled: bool = True,
    bar_width: int = 20,
) -> str:
    """Render a lookup result as a terminal report."""
    lines = [print_header(celebrity.name, color_enabled=color_enabled)]

    if celebrity.description:
        lines.append(celebrity.description)
    if celebrity.image:
        lines.append(dim(celebrity.image, color_enabled))

    score = celebrity.score
    rows = []
    for label, value in (
        ('Familiarity', score.familiarity),
        ('Popularity', score.popularity),
        ('Q-Score', score.q_score),
    ):
        bar = colorize(create_bar(value, 100, bar_width), score_color(value), color_enabled)
        rows.append([label, value, bar])

    lines.append(print_section('INFLUENCE SCORE', color_enabled))
    lines.append(format_table(['Metric', 'Score', ''], rows, ['l', 'r', 'l'], color_enabled))

    lines.append(print_section('KEY FACTS', color_enabled))
    if celebrity.facts:
        lines.extend(f"  • {fact}" for fact in celebrity.facts)
    else:
        lines.append(dim("  No facts available.", color_enabled))

    if celebrity.social_profiles:
        lines.append(print_section('SOCIAL PROFILES', color_enabled))
        lines.extend(
            f"  {profile.name:<12} {colorize(profile.link, Colors.CYAN, color_enabled)}"
            for profile in celebrity.social_profiles
        )

    return '\n'.join(lines)
