"""Unit tests for the error hierarchy (create_roleauth.errors)."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_roleauth.errors import (
    EnvWriteFailure,
    InstallFailure,
    MissingArgument,
    ScaffoldError,
    TemplateCopyFailure,
    UserAborted,
)


class TestScaffoldError:
    @pytest.mark.unit
    def test_message_only_constructor(self):
        exc = ScaffoldError("went wrong")
        assert exc.message == "went wrong"
        assert str(exc) == "went wrong"
        assert exc.step_name == "scaffold"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "cls, step_name",
        [
            (MissingArgument, "arguments"),
            (TemplateCopyFailure, "copy template"),
            (UserAborted, "configure"),
            (EnvWriteFailure, "write env files"),
            (InstallFailure, "install dependencies"),
        ],
    )
    def test_subclasses_name_their_step(self, cls, step_name):
        exc = cls("failed")
        assert isinstance(exc, ScaffoldError)
        assert cls.step_name == step_name
        assert exc.message == "failed"

    @pytest.mark.unit
    def test_install_failure_context(self, tmp_path: Path):
        exc = InstallFailure("boom", directory=tmp_path, command="npm install", returncode=2)
        assert (exc.directory, exc.command, exc.returncode) == (tmp_path, "npm install", 2)
