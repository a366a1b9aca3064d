"""create-roleauth-core configuration.

Typed configuration for a scaffolding run. All settings use Pydantic v2
models so they are validated at construction time. The working directory is
an explicit field rather than something each step reads on its own, which
keeps every step testable against a temporary directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Sub-project directories inside every generated project.
BACKEND_DIR = "backend"
WEBCLIENT_DIR = "webclient"

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "template"

_TRUTHY = {"1", "true", "yes", "on"}


class ProjectRequest(BaseModel):
    """The project the user asked for, taken from the command line."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Name of the project directory to create")


class Config(BaseModel):
    """Settings for one scaffolding run.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`, then overridden by command-line flags) and passed to
    ``ScaffoldPipeline``.
    """

    cwd: Path = Field(default_factory=Path.cwd, description="Directory the project is created in")
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    package_manager: str = Field(default="npm", min_length=1)
    install_args: list[str] = Field(default_factory=lambda: ["install"])
    overwrite_existing: bool = Field(
        default=False,
        description="Merge the template into an existing destination instead of failing",
    )
    skip_install: bool = Field(default=False)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def install_command(self) -> list[str]:
        """Full argument list used to install a sub-project's dependencies."""
        return [self.package_manager, *self.install_args]

    def project_root(self, request: ProjectRequest) -> Path:
        """Destination directory of the new project."""
        return self.cwd / request.name

    def backend_dir(self, request: ProjectRequest) -> Path:
        return self.project_root(request) / BACKEND_DIR

    def webclient_dir(self, request: ProjectRequest) -> Path:
        return self.project_root(request) / WEBCLIENT_DIR

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CREATE_ROLEAUTH_TEMPLATE_DIR, CREATE_ROLEAUTH_PACKAGE_MANAGER,
            CREATE_ROLEAUTH_SKIP_INSTALL, CREATE_ROLEAUTH_OVERWRITE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_ROLEAUTH_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CREATE_ROLEAUTH_TEMPLATE_DIR"])
        if os.environ.get("CREATE_ROLEAUTH_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CREATE_ROLEAUTH_PACKAGE_MANAGER"]
        if os.environ.get("CREATE_ROLEAUTH_SKIP_INSTALL"):
            kwargs["skip_install"] = _is_truthy(os.environ["CREATE_ROLEAUTH_SKIP_INSTALL"])
        if os.environ.get("CREATE_ROLEAUTH_OVERWRITE"):
            kwargs["overwrite_existing"] = _is_truthy(os.environ["CREATE_ROLEAUTH_OVERWRITE"])
        return cls(**kwargs)


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in _TRUTHY
