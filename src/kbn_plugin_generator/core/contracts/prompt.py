"""Contracts for the interactive prompt collaborator."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol

from pydantic import BaseModel


class QuestionKind(str, Enum):
    TEXT = "text"
    SELECT = "select"
    CONFIRM = "confirm"


class Question(BaseModel):
    kind: QuestionKind
    name: str
    message: str
    default: Any = None
    choices: tuple[str, ...] = ()

    model_config = {"frozen": True}


class Prompter(Protocol):
    def ask(self, question: Question) -> Any: ...
