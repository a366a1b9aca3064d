"""Write the backend and webclient ``.env`` files of a new project.

Answers are split by key name: keys starting with :data:`FRONTEND_PREFIX`
belong to the React client and never reach the backend file.  The webclient
file holds a single line, the API base URL under its own key.

Values are written as-is (``KEY=VALUE``, no quoting), lines joined by ``\\n``
without a trailing newline.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ..config import BACKEND_DIR, WEBCLIENT_DIR
from ..errors import EnvWriteFailure

FRONTEND_PREFIX = "REACT_APP"
FRONTEND_KEY = "REACT_APP_API_BASE_URL"

ENV_FILENAME = ".env"


def is_frontend_key(key: str) -> bool:
    """Return ``True`` if *key* belongs in the webclient environment file."""
    return key.startswith(FRONTEND_PREFIX)


def render_backend_env(answers: Mapping[str, str]) -> str:
    """Render every non-frontend answer as ``KEY=VALUE`` lines, in answer order."""
    return "\n".join(
        f"{key}={value}" for key, value in answers.items() if not is_frontend_key(key)
    )


def render_frontend_env(answers: Mapping[str, str]) -> str:
    """Render the single ``REACT_APP_API_BASE_URL`` line for the webclient."""
    if FRONTEND_KEY not in answers:
        raise EnvWriteFailure(f"No value collected for {FRONTEND_KEY}")
    return f"{FRONTEND_KEY}={answers[FRONTEND_KEY]}"


def _write_env(path: Path, content: str) -> Path:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise EnvWriteFailure(f"Could not write {path}: {exc}", path=path) from exc
    return path


def write_env_files(answers: Mapping[str, str], project_root: Path) -> dict[str, Path]:
    """Write ``backend/.env`` and ``webclient/.env`` under *project_root*.

    Existing files are overwritten.  The sub-project directories are expected
    to exist already (they come from the template tree).

    Returns:
        Mapping of sub-project name to the file written for it.

    Raises:
        EnvWriteFailure: If either file cannot be written.
    """
    project_root = Path(project_root)
    backend_text = render_backend_env(answers)
    frontend_text = render_frontend_env(answers)

    return {
        BACKEND_DIR: _write_env(project_root / BACKEND_DIR / ENV_FILENAME, backend_text),
        WEBCLIENT_DIR: _write_env(project_root / WEBCLIENT_DIR / ENV_FILENAME, frontend_text),
    }

