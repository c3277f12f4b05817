"""Host environment checks run before any prompt.

Plugins are developed next to a Kibana checkout (``../kibana``) and must use
the Node.js version that checkout pins. Both checks are advisory: a failure
is reported but generation continues.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path

from kbn_plugin_generator.core.contracts.exceptions import EnvironmentCheckFailure

_LOG = logging.getLogger(__name__)

EnvironmentCheck = Callable[[Path], None]


def kibana_path(destination: Path) -> Path:
    return destination.resolve().parent / "kibana"


def check_for_kibana(destination: Path) -> None:
    path = kibana_path(destination)
    if not path.is_dir():
        raise EnvironmentCheckFailure(
            f"Kibana was not found at {path}; plugins are expected to live next to a Kibana checkout",
            check="kibana",
        )


def detect_node_version() -> str | None:
    try:
        result = subprocess.run(["node", "--version"], capture_output=True, text=True, timeout=5)
    except (OSError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip().lstrip("v") or None


def check_node_version(destination: Path, *, detect: Callable[[], str | None] = detect_node_version) -> None:
    version_file = kibana_path(destination) / ".node-version"
    if not version_file.is_file():
        return
    expected = version_file.read_text(encoding="utf-8").strip().lstrip("v")
    if not expected:
        return
    actual = detect()
    if actual is None:
        raise EnvironmentCheckFailure(
            f"Node.js was not found; Kibana requires version {expected}",
            check="node-version",
        )
    if actual != expected:
        raise EnvironmentCheckFailure(
            f"Node.js {actual} is installed but Kibana requires version {expected}",
            check="node-version",
        )


DEFAULT_CHECKS: tuple[EnvironmentCheck, ...] = (check_for_kibana, check_node_version)


def run_environment_checks(
    destination: Path, checks: Iterable[EnvironmentCheck] = DEFAULT_CHECKS
) -> list[EnvironmentCheckFailure]:
    """Run *checks*, returning advisory failures; fatal failures are raised."""
    failures: list[EnvironmentCheckFailure] = []
    for check in checks:
        try:
            check(destination)
        except EnvironmentCheckFailure as failure:
            if failure.fatal:
                raise
            _LOG.warning("%s", failure)
            failures.append(failure)
    return failures
