"""Jinja2-backed template rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path, PurePosixPath
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from kbn_plugin_generator.core.contracts.exceptions import TemplateRenderError

_LOG = logging.getLogger(__name__)

# Shipped as "..gitignore" so packaging tools do not treat it as an ignore file.
GITIGNORE_TEMPLATE_NAME = "..gitignore"
GITIGNORE_NAME = ".gitignore"


def create_environment(template_root: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_root)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def render_files(
    files: Sequence[tuple[Path, PurePosixPath]],
    destination: Path,
    variables: Mapping[str, Any],
    *,
    template_root: Path,
    on_file: Callable[[PurePosixPath], None] | None = None,
) -> list[Path]:
    """Render each template into *destination* and return the written paths.

    *on_file* receives the output path, relative to *destination*, of each
    file as soon as it is written.
    """
    env = create_environment(template_root)
    written: list[Path] = []
    for template_path, output_path in files:
        template_name = template_path.relative_to(template_root).as_posix()
        target = destination.joinpath(*output_path.parts)
        try:
            content = env.get_template(template_name).render(**variables)
        except TemplateError as exc:
            raise TemplateRenderError(f"failed rendering template {template_name}: {exc}") from exc
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise TemplateRenderError(f"failed writing {target}: {exc}") from exc
        _LOG.debug("rendered %s -> %s", template_name, target)
        written.append(target)
        if on_file is not None:
            on_file(output_path)
    return written


def apply_post_render_fixups(destination: Path) -> Path:
    """Rename the rendered ``..gitignore`` to ``.gitignore``."""
    source = destination / GITIGNORE_TEMPLATE_NAME
    target = destination / GITIGNORE_NAME
    if not source.is_file():
        raise TemplateRenderError(f"expected rendered file is missing: {source}")
    try:
        source.replace(target)
    except OSError as exc:
        raise TemplateRenderError(f"failed renaming {source} to {target}: {exc}") from exc
    return target
