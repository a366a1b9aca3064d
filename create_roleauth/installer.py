"""Dependency installation for the generated sub-projects.

Runs the package manager's install command in each sub-project directory,
one after the other, with the child's output going straight to the terminal.
The first failure stops the run; later directories are not attempted.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from .errors import InstallFailure
from .utils import console, format_command, run_command


class DependencyInstaller:
    """Runs ``<package manager> install`` in sub-project directories.

    Attributes:
        command: Argument list to execute, e.g. ``["npm", "install"]``.
    """

    def __init__(self, command: Sequence[str] = ("npm", "install")) -> None:
        self.command = list(command)

    def resolve_command(self, directory: Path) -> list[str]:
        """Return the command with its executable resolved on ``PATH``.

        Wrappers such as ``npm.cmd`` on Windows are only found this way.

        Raises:
            InstallFailure: If the executable cannot be found.
        """
        executable = shutil.which(self.command[0])
        if executable is None:
            raise InstallFailure(
                f"Could not run '{format_command(self.command)}' in {directory}: "
                f"'{self.command[0]}' was not found on PATH",
                directory=directory,
                command=format_command(self.command),
            )
        return [executable, *self.command[1:]]

    async def install(self, directory: Path, label: str = "") -> None:
        """Install dependencies in *directory* and wait for the process to exit.

        Raises:
            InstallFailure: If the command cannot be started or exits non-zero.
        """
        directory = Path(directory)
        command_str = format_command(self.command)
        console.print(
            f"\n[bold]Installing {escape(label or directory.name)} dependencies...[/bold]"
        )

        argv = self.resolve_command(directory)
        try:
            returncode = await run_command(argv, cwd=directory)
        except (FileNotFoundError, NotADirectoryError, PermissionError) as exc:
            raise InstallFailure(
                f"Could not run '{command_str}' in {directory}: {exc}",
                directory=directory,
                command=command_str,
            ) from exc

        if returncode != 0:
            raise InstallFailure(
                f"'{command_str}' exited with status {returncode} in {directory}",
                directory=directory,
                command=command_str,
                returncode=returncode,
            )

    async def install_all(self, directories: Sequence[tuple[str, Path]]) -> list[Path]:
        """Install each ``(label, directory)`` pair in order.

        Returns:
            The directories that were installed successfully.
        """
        installed: list[Path] = []
        for label, directory in directories:
            await self.install(directory, label=label)
            installed.append(Path(directory))
        return installed
