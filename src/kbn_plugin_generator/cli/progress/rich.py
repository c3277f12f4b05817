"""Rich display of the render, git and install phases."""

from __future__ import annotations

from pathlib import PurePosixPath
from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn

from kbn_plugin_generator.core.contracts.progress import Phase

_PHASE_STYLES = {Phase.RENDER: "cyan", Phase.GIT: "green", Phase.INSTALL: "blue"}


class RichGenerateProgress:
    """One row per phase; the Render row names the file being written.

    Open it after prompting so the live display never shares the terminal
    with questionary::

        config = generator.resolve(options)
        with RichGenerateProgress() as progress:
            result = generator.build(config, progress=progress)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TextColumn("[dim]{task.fields[detail]}"),
            console=console or Console(stderr=True),
        )
        self._tasks: dict[Phase, TaskID] = {}
        self._totals: dict[Phase, int] = {}

    def __enter__(self) -> RichGenerateProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    @property
    def rows(self) -> dict[Phase, tuple[str, float, str]]:
        """Description, completed count and detail text of each started phase."""
        by_id = {task.id: task for task in self._progress.tasks}
        return {
            phase: (by_id[task_id].description, by_id[task_id].completed, by_id[task_id].fields["detail"])
            for phase, task_id in self._tasks.items()
        }

    def phase_start(self, phase: Phase, *, total: int | None = None) -> None:
        style = _PHASE_STYLES[phase]
        self._totals[phase] = total or 1
        self._tasks[phase] = self._progress.add_task(f"[{style}]{phase.value:<7}[/]", total=total, detail="")

    def file_written(self, path: PurePosixPath) -> None:
        task_id = self._tasks.get(Phase.RENDER)
        if task_id is not None:
            self._progress.update(task_id, advance=1, detail=path.as_posix())

    def phase_done(self, phase: Phase, *, detail: str = "") -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            total = self._totals[phase]
            self._progress.update(task_id, total=total, completed=total, detail=detail)

    def phase_error(self, phase: Phase, error: BaseException) -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.update(task_id, description=f"[red]✗ {phase.value:<5}[/]", detail=str(error))
