"""create-roleauth-core -- scaffold a MERN role-based auth project.

Copies the bundled template, asks for the ``.env`` values, writes
``backend/.env`` and ``webclient/.env`` and installs dependencies.
"""

__version__ = "1.0.0"
