"""Template file selection.

The output set is the union of the always-included base group and one
optional group per enabled component flag. Groups are disjoint and
selection is order independent; results are sorted by relative path.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from kbn_plugin_generator.core.contracts.config import PluginConfig


@dataclass(frozen=True)
class FileGroup:
    """A named set of template files, by path relative to the template root.

    ``subtree`` groups include every file below a directory; ``files`` groups
    list exact paths. The base group (both empty) is every file directly in the
    root, hidden files included.
    """

    name: str
    subtree: str | None = None
    files: tuple[str, ...] = ()

    def collect(self, template_root: Path) -> set[PurePosixPath]:
        if self.subtree is not None:
            base = template_root / self.subtree
            if not base.is_dir():
                return set()
            return {_relative(path, template_root) for path in base.rglob("*") if path.is_file()}
        if self.files:
            return {PurePosixPath(rel) for rel in self.files if (template_root / rel).is_file()}
        return {_relative(path, template_root) for path in template_root.iterdir() if path.is_file()}


BASE_GROUP = FileGroup(name="base")

# Config field -> group it enables.
OPTIONAL_GROUPS: dict[str, FileGroup] = {
    "include_api": FileGroup(name="server", subtree="server"),
    "include_translations": FileGroup(name="translations", subtree="translations"),
    "include_hack_component": FileGroup(name="hack", files=("public/hack.js",)),
    "include_app": FileGroup(
        name="app",
        files=("public/app.js", "public/less/main.less", "public/templates/index.html"),
    ),
}


def enabled_groups(config: PluginConfig) -> list[FileGroup]:
    groups = [BASE_GROUP]
    groups.extend(group for field, group in OPTIONAL_GROUPS.items() if getattr(config, field))
    return groups


def collect_groups(groups: Iterable[FileGroup], template_root: Path) -> list[PurePosixPath]:
    selected: set[PurePosixPath] = set()
    for group in groups:
        selected |= group.collect(template_root)
    return sorted(selected)


def select_files(config: PluginConfig, template_root: Path) -> list[tuple[Path, PurePosixPath]]:
    """Return ``(template path, output path)`` pairs for *config*."""
    selected = collect_groups(enabled_groups(config), template_root)
    return [(template_root.joinpath(*rel.parts), rel) for rel in selected]


def _relative(path: Path, root: Path) -> PurePosixPath:
    return PurePosixPath(path.relative_to(root).as_posix())
