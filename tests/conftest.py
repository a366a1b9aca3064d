"""Shared pytest fixtures for the create-roleauth-core test suite.

Provides reusable fixtures for:
- A small on-disk template tree
- Config objects pointing at temporary directories
- Scripted stand-ins for Rich's ``Prompt.ask``
- Fake installers that record instead of running a package manager
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from create_roleauth.config import Config, ProjectRequest
from create_roleauth.configurator import ENV_FIELDS


# ---------------------------------------------------------------------------
# Scripted prompt
# ---------------------------------------------------------------------------


class ScriptedAsk:
    """Replays canned answers with the calling convention of ``Prompt.ask``.

    An empty response returns the ``default`` keyword when one was passed,
    exactly like Rich does.  A response that is an exception instance is
    raised instead of answered.
    """

    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def __call__(self, prompt: str, **kwargs: Any) -> str:
        self.calls.append({"prompt": prompt, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        if response == "" and "default" in kwargs:
            return kwargs["default"]
        return response


@pytest.fixture
def scripted_ask():
    """Factory fixture: ``scripted_ask([...])`` -> ``ScriptedAsk``."""
    return ScriptedAsk


@pytest.fixture
def accept_defaults() -> ScriptedAsk:
    """A prompt that presses Enter on every question."""
    return ScriptedAsk([""] * len(ENV_FIELDS))


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Small template tree with both sub-projects and a nested file."""
    root = tmp_path / "template"
    (root / "backend" / "routes").mkdir(parents=True)
    (root / "webclient" / "src").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "app"}\n', encoding="utf-8")
    (root / "backend" / "package.json").write_text('{"name": "backend"}\n', encoding="utf-8")
    (root / "backend" / "routes" / "auth.js").write_text("module.exports = {};\n", encoding="utf-8")
    (root / "webclient" / "package.json").write_text('{"name": "webclient"}\n', encoding="utf-8")
    (root / "webclient" / "src" / "App.js").write_text("export default null;\n", encoding="utf-8")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Directory the project gets created in (stands in for the cwd)."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def config(workdir: Path, template_dir: Path) -> Config:
    return Config(cwd=workdir, template_dir=template_dir)


@pytest.fixture
def request_myapp() -> ProjectRequest:
    return ProjectRequest(name="myapp")


@pytest.fixture
def default_answers() -> dict[str, str]:
    """The answers produced when every question is left at its default."""
    return {field.key: field.default or "" for field in ENV_FIELDS}


# ---------------------------------------------------------------------------
# Installer doubles
# ---------------------------------------------------------------------------


class RecordingInstaller:
    """Installer double that records directories and can fail on demand."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[str, Path]] = []

    async def install_all(self, directories):
        from create_roleauth.errors import InstallFailure

        installed = []
        for label, directory in directories:
            self.calls.append((label, Path(directory)))
            if label == self.fail_on:
                raise InstallFailure(
                    f"'npm install' exited with status 1 in {directory}",
                    directory=Path(directory),
                    command="npm install",
                    returncode=1,
                )
            installed.append(Path(directory))
        return installed


@pytest.fixture
def recording_installer():
    """Factory fixture: ``recording_installer(fail_on="backend")``."""
    return RecordingInstaller
