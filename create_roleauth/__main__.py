"""Allow ``python -m create_roleauth <project-name>``."""

from .pipeline import main

main()
