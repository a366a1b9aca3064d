"""create-roleauth-core pipeline orchestrator.

Scaffolds a MERN role-auth project in four steps:

Step 1: COPY TEMPLATE        -- Copy the bundled template tree to ``<cwd>/<name>``.
Step 2: CONFIGURE            -- Ask for the ``.env`` values.
Step 3: WRITE ENV FILES      -- Write ``backend/.env`` and ``webclient/.env``.
Step 4: INSTALL DEPENDENCIES -- Run the package manager in both sub-projects.

Each step depends on the previous one; the first failure stops the run and
nothing is rolled back. Steps run synchronously so that Ctrl-C during the
questions raises ``KeyboardInterrupt`` in the blocking prompt; only the
install step starts an event loop.

Usage::

    create-roleauth-core my-app
    python -m create_roleauth my-app --package-manager pnpm
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
import traceback
from pathlib import Path
from typing import Any

from rich.markup import escape
from rich.panel import Panel

from .config import BACKEND_DIR, WEBCLIENT_DIR, Config, ProjectRequest
from .configurator import InteractiveConfigurator
from .errors import MissingArgument, ScaffoldError
from .installer import DependencyInstaller
from .scaffolder import copy_template, write_env_files
from .utils import (
    STEP_NAMES,
    console,
    format_command,
    format_duration,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)

PROG = "create-roleauth-core"

USAGE_LINES = (
    "Please provide a project name.",
    f"Example: {PROG} my-app",
)


# ---------------------------------------------------------------------------
# Argument resolution
# ---------------------------------------------------------------------------


def resolve_project_request(name: str | None) -> ProjectRequest:
    """Turn the positional command-line argument into a ``ProjectRequest``.

    Raises:
        MissingArgument: If no project name was given.
    """
    if not name:
        raise MissingArgument(USAGE_LINES[0])
    return ProjectRequest(name=name)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Drives the scaffolding steps for one project.

    Attributes:
        config: Settings for this run.
        request: The project being created.
        state: Accumulates per-step results, the failure (if any) and a
            top-level ``success`` flag.
        answers: Configuration values collected in step 2.
    """

    _STEP_METHODS: dict[int, str] = {
        1: "step1_copy_template",
        2: "step2_configure",
        3: "step3_write_env",
        4: "step4_install",
    }

    def __init__(
        self,
        config: Config,
        request: ProjectRequest,
        configurator: InteractiveConfigurator | None = None,
        installer: DependencyInstaller | None = None,
    ) -> None:
        self.config = config
        self.request = request
        self.configurator = configurator or InteractiveConfigurator()
        self.installer = installer or DependencyInstaller(config.install_command)
        self.answers: dict[str, str] = {}
        self.state: dict[str, Any] = {
            "project": request.name,
            "project_root": str(self.project_root),
            "steps_completed": [],
            "steps_failed": [],
            "success": False,
        }

    @property
    def project_root(self) -> Path:
        return self.config.project_root(self.request)

    # ------------------------------------------------------------------
    # Step dispatch
    # ------------------------------------------------------------------

    def run(self) -> dict[str, Any]:
        """Execute every step in order, stopping at the first failure.

        Returns:
            The final state dictionary, including a top-level ``success``
            boolean and, on failure, an ``error`` message.
        """
        console.print(
            Panel(
                f"[bold bright_cyan]Creating project at:[/bold bright_cyan] "
                f"{escape(str(self.project_root))}",
                title=f"[bold]{PROG}[/bold]",
                border_style="bright_cyan",
            )
        )

        all_success = True

        for step_num, method_name in self._STEP_METHODS.items():
            step_name = STEP_NAMES.get(step_num, "UNKNOWN")
            print_step_header(step_num, step_name)

            step_start = time.monotonic()
            try:
                result = getattr(self, method_name)()
                self.state[f"step{step_num}"] = result
                self.state["steps_completed"].append(step_num)
                print_success(
                    f"Step {step_num} ({step_name}) completed in "
                    f"{format_duration(time.monotonic() - step_start)}"
                )

            except ScaffoldError as exc:
                all_success = False
                self.state["steps_failed"].append(step_num)
                self.state["error"] = str(exc)
                print_error(f"Error: {escape(str(exc))}")
                break

            except Exception as exc:
                all_success = False
                self.state["steps_failed"].append(step_num)
                self.state["error"] = str(exc)
                print_error(f"Error: {escape(str(exc))}")
                console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
                break

        self.state["success"] = all_success
        if all_success:
            self.print_completion()
        return self.state

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def step1_copy_template(self) -> dict[str, Any]:
        """Copy the template tree into the new project directory."""
        copied = copy_template(
            self.config.template_dir,
            self.project_root,
            overwrite=self.config.overwrite_existing,
        )
        console.print(f"  [green]+[/green] Template copied ({len(copied)} files)")
        return {"files": [str(path) for path in copied]}

    def step2_configure(self) -> dict[str, Any]:
        """Ask the configuration questions."""
        console.print("Let's configure your .env files.\n")
        self.answers = self.configurator.collect()
        # Values are not kept in state: EMAIL_PASS and the secrets are sensitive.
        return {"keys": list(self.answers)}

    def step3_write_env(self) -> dict[str, Any]:
        """Write the backend and webclient environment files."""
        written = write_env_files(self.answers, self.project_root)
        print_summary_table(
            {
                name: str(path.relative_to(self.project_root))
                for name, path in written.items()
            },
            title="Environment files",
        )
        return {name: str(path) for name, path in written.items()}

    def step4_install(self) -> dict[str, Any]:
        """Install backend, then webclient, dependencies."""
        if self.config.skip_install:
            print_warning("  Skipping dependency installation (--skip-install).")
            return {"skipped": True, "installed": []}

        installed = asyncio.run(
            self.installer.install_all(
                [
                    ("backend", self.config.backend_dir(self.request)),
                    ("frontend", self.config.webclient_dir(self.request)),
                ]
            )
        )
        return {"skipped": False, "installed": [str(path) for path in installed]}

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def print_completion(self) -> None:
        """Print the next steps for the user."""
        console.print()
        print_success("All set! Start your app with:")
        console.print(f"   cd {escape(self.request.name)}")
        if self.config.skip_install:
            command = escape(format_command(self.config.install_command))
            console.print(f"   (cd {BACKEND_DIR} && {command})")
            console.print(f"   (cd {WEBCLIENT_DIR} && {command})")
        console.print("   npm run dev")
        console.print()
        print_warning("Remember to update any production credentials before going live.")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Create a MERN role-based auth project from the bundled template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} my-app\n"
            f"  {PROG} my-app --package-manager pnpm\n"
            f"  {PROG} my-app --skip-install\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the project directory to create",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Copy this template tree instead of the bundled one",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager used to install dependencies (default: npm)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        default=None,
        help="Do not install dependencies",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        default=None,
        help="Merge into an existing project directory instead of failing",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-roleauth-core``."""
    args = build_parser().parse_args(argv)

    try:
        request = resolve_project_request(args.project_name)
    except MissingArgument:
        for line in USAGE_LINES:
            console.print(line)
        sys.exit(1)

    overrides: dict[str, Any] = {}
    if args.template_dir:
        overrides["template_dir"] = Path(args.template_dir)
    if args.package_manager:
        overrides["package_manager"] = args.package_manager
    if args.skip_install is not None:
        overrides["skip_install"] = args.skip_install
    if args.force is not None:
        overrides["overwrite_existing"] = args.force

    config = Config.from_env().model_copy(update=overrides)

    pipeline = ScaffoldPipeline(config, request)
    try:
        result = pipeline.run()
    except KeyboardInterrupt:
        print_error("Error: Aborted.")
        sys.exit(1)

    if not result.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
