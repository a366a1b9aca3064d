"""Shared utility functions for create-roleauth-core.

Provides the child-process runner used for installs, duration formatting
and the Rich console helpers every scaffolding step reports through.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Child processes
# ---------------------------------------------------------------------------


async def run_command(cmd: Sequence[str], cwd: str | Path) -> int:
    """Run *cmd* in *cwd* and wait for it to exit.

    The child inherits this process's standard streams, so its output goes
    straight to the terminal. There is no timeout.

    Returns:
        The child's exit status.

    Raises:
        FileNotFoundError: If the executable or *cwd* does not exist.
    """
    process = await asyncio.create_subprocess_exec(*cmd, cwd=str(cwd))
    return await process.wait()


def format_command(cmd: Sequence[str]) -> str:
    """Return an argument list as a single printable string."""
    return " ".join(cmd)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STEP_NAMES: dict[int, str] = {
    1: "COPY TEMPLATE",
    2: "CONFIGURE",
    3: "WRITE ENV FILES",
    4: "INSTALL DEPENDENCIES",
}

STEP_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
    4: "bright_magenta",
}


def print_step_header(step: int, name: str) -> None:
    """Print a prominent step header using Rich.

    Renders a full-width rule with the step number and name, coloured
    according to the step.
    """
    color = STEP_COLORS.get(step, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Step {step}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
