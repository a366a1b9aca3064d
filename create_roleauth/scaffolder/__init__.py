"""create-roleauth-core scaffolder -- materializes the project on disk.

Copies the bundled MERN role-auth template tree into the new project
directory and writes the backend and webclient environment files.

Quick usage::

    from create_roleauth.scaffolder import copy_template, write_env_files

    copied = copy_template(DEFAULT_TEMPLATE_DIR, Path("my-app"))
    write_env_files(answers, Path("my-app"))
"""

from .env_writer import (
    FRONTEND_KEY,
    FRONTEND_PREFIX,
    is_frontend_key,
    render_backend_env,
    render_frontend_env,
    write_env_files,
)
from .materializer import copy_template

__all__ = [
    # Template tree
    "copy_template",
    # Environment files
    "FRONTEND_KEY",
    "FRONTEND_PREFIX",
    "is_frontend_key",
    "render_backend_env",
    "render_frontend_env",
    "write_env_files",
]
