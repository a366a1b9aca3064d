"""Copy the bundled template tree into a new project directory."""

from __future__ import annotations

import shutil
from pathlib import Path

from ..errors import TemplateCopyFailure


def copy_template(source: Path, destination: Path, *, overwrite: bool = False) -> list[Path]:
    """Recursively copy *source* to *destination*, preserving structure.

    An existing *destination* is an error unless *overwrite* is set, in which
    case the template is merged into it and files with the same relative path
    are replaced.

    Returns:
        The copied files, relative to *destination*, in sorted order.

    Raises:
        TemplateCopyFailure: If the source is missing, the destination already
            exists (without *overwrite*), or any I/O error occurs.
    """
    source = Path(source)
    destination = Path(destination)

    if not source.is_dir():
        raise TemplateCopyFailure(
            f"Template directory not found: {source}",
            source=source,
            destination=destination,
        )
    if destination.exists() and not overwrite:
        raise TemplateCopyFailure(
            f"Destination already exists: {destination} (use --force to merge into it)",
            source=source,
            destination=destination,
        )

    try:
        shutil.copytree(source, destination, dirs_exist_ok=overwrite)
    except OSError as exc:
        raise TemplateCopyFailure(
            f"Could not copy template to {destination}: {exc}",
            source=source,
            destination=destination,
        ) from exc

    return sorted(
        path.relative_to(destination)
        for path in destination.rglob("*")
        if path.is_file() and (source / path.relative_to(destination)).is_file()
    )

