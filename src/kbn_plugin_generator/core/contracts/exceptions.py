"""Exception hierarchy for the Kibana plugin generator."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base exception for all generator errors."""


class EnvironmentCheckFailure(GeneratorError):
    """Host environment pre-flight check failed."""

    def __init__(self, message: str, *, check: str, fatal: bool = False) -> None:
        super().__init__(message)
        self.check = check
        self.fatal = fatal


class ValidationError(GeneratorError):
    """A configuration field could not be normalized."""


class PromptError(GeneratorError):
    """The prompt mechanism failed or was interrupted."""


class TemplateRenderError(GeneratorError):
    """Template rendering or the post-render fixup failed."""


class CommandError(GeneratorError):
    """External command (git, npm, bower) failure."""

    def __init__(self, message: str, *, command: tuple[str, ...], returncode: int | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
