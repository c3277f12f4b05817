"""questionary-backed prompter."""

from __future__ import annotations

from typing import Any

from kbn_plugin_generator.core.contracts.exceptions import PromptError
from kbn_plugin_generator.core.contracts.prompt import Question, QuestionKind


class QuestionaryPrompter:
    """Ask questions on the terminal with questionary.

    questionary returns ``None`` when the user interrupts a prompt (Ctrl+C);
    that surfaces as :class:`PromptError`.
    """

    def ask(self, question: Question) -> Any:
        import questionary

        try:
            if question.kind is QuestionKind.TEXT:
                prompt = questionary.text(question.message, default=str(question.default or ""))
            elif question.kind is QuestionKind.SELECT:
                prompt = questionary.select(question.message, choices=list(question.choices), default=question.default)
            else:
                prompt = questionary.confirm(question.message, default=bool(question.default))
            answer = prompt.ask()
        except KeyboardInterrupt as exc:
            raise PromptError(f"prompt interrupted: {question.message}") from exc
        if answer is None:
            raise PromptError(f"prompt interrupted: {question.message}")
        return answer
