"""create-roleauth-core configurator -- asks for the ``.env`` values.

Key classes:
    PromptField             - One question: key, message, default, display mode
    InteractiveConfigurator - Asks every question in order and returns answers
"""

from .fields import ENV_FIELDS, DisplayMode, PromptField
from .prompter import InteractiveConfigurator

__all__ = [
    "ENV_FIELDS",
    "DisplayMode",
    "InteractiveConfigurator",
    "PromptField",
]
