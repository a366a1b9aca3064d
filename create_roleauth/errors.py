"""Exceptions raised by the scaffolding steps.

Every failure is a ``ScaffoldError`` subclass so the pipeline can catch them
in one place, report them, and stop.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails irrecoverably."""

    step_name: str = "scaffold"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingArgument(ScaffoldError):
    """No project name was given on the command line."""

    step_name = "arguments"


class TemplateCopyFailure(ScaffoldError):
    """The template tree could not be copied into the new project."""

    step_name = "copy template"

    def __init__(self, message: str, source: Path | None = None, destination: Path | None = None) -> None:
        self.source = source
        self.destination = destination
        super().__init__(message)


class UserAborted(ScaffoldError):
    """The interactive session ended before every prompt was answered."""

    step_name = "configure"


class EnvWriteFailure(ScaffoldError):
    """An environment file could not be written."""

    step_name = "write env files"

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class InstallFailure(ScaffoldError):
    """A dependency installation process failed or could not be started."""

    step_name = "install dependencies"

    def __init__(
        self,
        message: str,
        directory: Path | None = None,
        command: str = "",
        returncode: int | None = None,
    ) -> None:
        self.directory = directory
        self.command = command
        self.returncode = returncode
        super().__init__(message)
