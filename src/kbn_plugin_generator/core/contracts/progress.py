"""Build-step reporting for the plugin generator.

Progress is only reported once every prompt has been answered: the three
phases below are the non-interactive part of a run.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Protocol, runtime_checkable


class Phase(str, Enum):
    RENDER = "Render"
    GIT = "Git"
    INSTALL = "Install"


@runtime_checkable
class GenerateProgress(Protocol):
    def phase_start(self, phase: Phase, *, total: int | None = None) -> None:
        """*total* is the number of files for ``RENDER`` and ``None`` otherwise."""

    def file_written(self, path: PurePosixPath) -> None:
        """A template was rendered to *path*, relative to the plugin root."""

    def phase_done(self, phase: Phase, *, detail: str = "") -> None: ...

    def phase_error(self, phase: Phase, error: BaseException) -> None: ...


class NullGenerateProgress:
    """Used when nothing displays progress (tests, ``--verbose``, non-TTY)."""

    def phase_start(self, phase: Phase, *, total: int | None = None) -> None:
        pass

    def file_written(self, path: PurePosixPath) -> None:
        pass

    def phase_done(self, phase: Phase, *, detail: str = "") -> None:
        pass

    def phase_error(self, phase: Phase, error: BaseException) -> None:
        pass
