"""SDK composition root for the Kibana plugin generator."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path, PurePosixPath
from typing import TypeVar

from kbn_plugin_generator.core import commands, preflight, render
from kbn_plugin_generator.core.contracts.config import PluginConfig
from kbn_plugin_generator.core.contracts.exceptions import EnvironmentCheckFailure
from kbn_plugin_generator.core.contracts.options import GeneratorOptions
from kbn_plugin_generator.core.contracts.progress import GenerateProgress, NullGenerateProgress, Phase
from kbn_plugin_generator.core.contracts.prompt import Prompter
from kbn_plugin_generator.core.metadata import initial_commit_message, package_version
from kbn_plugin_generator.core.resolver import default_plugin_name, resolve
from kbn_plugin_generator.core.selection import select_files

TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates" / "plugin"

_T = TypeVar("_T")


@dataclass(frozen=True)
class GenerateResult:
    config: PluginConfig
    destination: Path
    files: tuple[PurePosixPath, ...]
    written: tuple[Path, ...]
    environment_failures: tuple[EnvironmentCheckFailure, ...] = ()
    installers: tuple[str, ...] = ()


class PluginGenerator:
    """Kibana plugin generator public API."""

    def __init__(
        self,
        *,
        prompter: Prompter,
        destination: Path | None = None,
        template_root: Path = TEMPLATE_ROOT,
        progress: GenerateProgress | None = None,
        install_options: commands.InstallOptions | None = None,
        init_git: bool = True,
        install: bool = True,
    ) -> None:
        self._prompter = prompter
        self._destination = destination or Path.cwd()
        self._template_root = template_root
        self._progress: GenerateProgress = progress or NullGenerateProgress()
        self._install_options = install_options or commands.InstallOptions(npm=True, bower=False)
        self._init_git = init_git
        self._install = install

    def check_environment(self) -> list[EnvironmentCheckFailure]:
        return preflight.run_environment_checks(self._destination)

    def resolve(self, options: GeneratorOptions) -> PluginConfig:
        return resolve(options, self._prompter, default_name=default_plugin_name(self._destination))

    def select_files(self, config: PluginConfig) -> list[tuple[Path, PurePosixPath]]:
        return select_files(config, self._template_root)

    def generate(self, options: GeneratorOptions) -> GenerateResult:
        """Check the environment, prompt, then build the plugin."""
        failures = self.check_environment()
        config = self.resolve(options)
        result = self.build(config)
        return replace(result, environment_failures=tuple(failures))

    def build(self, config: PluginConfig, *, progress: GenerateProgress | None = None) -> GenerateResult:
        """Write files for a resolved *config*, init git and install dependencies."""
        progress = progress or self._progress
        selected = self.select_files(config)
        variables = config.template_variables(generatorVersion=package_version())

        def _render() -> list[Path]:
            written = render.render_files(
                selected,
                self._destination,
                variables,
                template_root=self._template_root,
                on_file=progress.file_written,
            )
            gitignore = render.apply_post_render_fixups(self._destination)
            fixup_source = self._destination / render.GITIGNORE_TEMPLATE_NAME
            return [gitignore if path == fixup_source else path for path in written]

        written = _run_phase(
            progress, Phase.RENDER, _render, total=len(selected), describe=lambda paths: f"{len(paths)} files"
        )

        if self._init_git:
            message = initial_commit_message()
            _run_phase(
                progress,
                Phase.GIT,
                lambda: commands.init_git_repo(self._destination, message),
                describe=lambda _: "initial commit",
            )

        installers: list[str] = []
        if self._install:
            installers = _run_phase(
                progress,
                Phase.INSTALL,
                lambda: commands.install_dependencies(self._destination, self._install_options),
                describe=", ".join,
            )

        return GenerateResult(
            config=config,
            destination=self._destination,
            files=tuple(output for _, output in selected),
            written=tuple(written),
            installers=tuple(installers),
        )


def _run_phase(
    progress: GenerateProgress,
    phase: Phase,
    action: Callable[[], _T],
    *,
    total: int | None = None,
    describe: Callable[[_T], str] | None = None,
) -> _T:
    progress.phase_start(phase, total=total)
    try:
        result = action()
    except Exception as exc:
        progress.phase_error(phase, exc)
        raise
    progress.phase_done(phase, detail=describe(result) if describe is not None else "")
    return result
