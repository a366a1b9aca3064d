"""Interactive collection of ``.env`` values.

Asks every :class:`PromptField` in turn through Rich's :class:`Prompt`.  An
empty answer falls back to the field's default; fields without a default
accept an empty value.  There is no validation and no branching.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from rich.console import Console
from rich.prompt import Prompt

from ..errors import UserAborted
from ..utils import console as default_console
from .fields import ENV_FIELDS, PromptField

AskFn = Callable[..., str]


class InteractiveConfigurator:
    """Asks the configuration questions and returns the answers in order.

    Args:
        fields: Questions to ask, in order.  Defaults to :data:`ENV_FIELDS`.
        console: Rich console used for the questions.
        ask: Prompt function with the signature of :meth:`Prompt.ask`.
            Replaced by a fake in tests so no terminal is needed.
    """

    def __init__(
        self,
        fields: Iterable[PromptField] = ENV_FIELDS,
        console: Console | None = None,
        ask: AskFn | None = None,
    ) -> None:
        self.fields = tuple(fields)
        self.console = console or default_console
        self.ask = ask or Prompt.ask

    def ask_field(self, field: PromptField) -> str:
        """Ask a single question and return the answer (or its default)."""
        kwargs: dict[str, Any] = {
            "console": self.console,
            "password": field.masked,
        }
        if field.default is not None:
            kwargs["default"] = field.default

        answer = self.ask(field.message, **kwargs)
        if answer is None:
            return field.default or ""
        return str(answer)

    def collect(self) -> dict[str, str]:
        """Ask every question and return ``{key: value}`` in asking order.

        Raises:
            UserAborted: If the user interrupts the session or input ends
                before every question is answered.
        """
        answers: dict[str, str] = {}
        for field in self.fields:
            try:
                answers[field.key] = self.ask_field(field)
            except (KeyboardInterrupt, EOFError) as exc:
                raise UserAborted(
                    f"Configuration aborted at {field.key} "
                    f"({len(answers)} of {len(self.fields)} answered)"
                ) from exc
        return answers
