"""External command collaborators: git repository setup and dependency install."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from pydantic import BaseModel

from kbn_plugin_generator.core.contracts.exceptions import CommandError

_LOG = logging.getLogger(__name__)


class InstallOptions(BaseModel):
    npm: bool = True
    bower: bool = False

    model_config = {"frozen": True}


def run_command(args: list[str], *, cwd: Path) -> subprocess.CompletedProcess[str]:
    _LOG.debug("running %s in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(args, cwd=cwd, capture_output=True, text=True)
    except OSError as exc:
        raise CommandError(f"failed to run {args[0]}: {exc}", command=tuple(args)) from exc
    if result.returncode != 0:
        detail = (result.stderr or result.stdout or "").strip()
        message = f"`{' '.join(args)}` exited with status {result.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise CommandError(message, command=tuple(args), returncode=result.returncode)
    return result


def init_git_repo(destination: Path, commit_message: str) -> None:
    run_command(["git", "init"], cwd=destination)
    run_command(["git", "add", "."], cwd=destination)
    run_command(["git", "commit", "-m", commit_message], cwd=destination)


def install_dependencies(destination: Path, options: InstallOptions | None = None) -> list[str]:
    """Run the enabled package managers and return their names."""
    options = options or InstallOptions()
    ran: list[str] = []
    if options.npm:
        run_command(["npm", "install"], cwd=destination)
        ran.append("npm")
    if options.bower:
        run_command(["bower", "install"], cwd=destination)
        ran.append("bower")
    return ran
