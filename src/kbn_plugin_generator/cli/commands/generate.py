"""Generate command handler."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from kbn_plugin_generator.core.contracts.options import GeneratorOptions, migrate_deprecated_flags
from kbn_plugin_generator.sdk import GenerateResult


def options_from_args(args: argparse.Namespace) -> GeneratorOptions:
    return migrate_deprecated_flags(
        advanced=getattr(args, "advanced", False),
        custom=getattr(args, "custom", False),
        minimal=getattr(args, "minimal", False),
    )


def format_generate_summary(result: GenerateResult) -> str:
    config = result.config
    components = [
        label
        for label, enabled in (
            ("app", config.include_app),
            ("translations", config.include_translations),
            ("hack", config.include_hack_component),
            ("server api", config.include_api),
        )
        if enabled
    ]
    lines = [
        f"Plugin:      {config.title} ({config.name})",
        f"Kibana:      {config.target_version}",
        f"Components:  {', '.join(components) if components else 'none'}",
        f"Files:       {len(result.written)} written to {result.destination}",
    ]
    if result.installers:
        lines.append(f"Installed:   {', '.join(result.installers)}")
    if result.environment_failures:
        count = len(result.environment_failures)
        lines.append(f"Warnings:    {count} environment check{'s' if count != 1 else ''} failed")
    return "\n".join(lines)


def run_generate(args: argparse.Namespace) -> int:
    """Prompt for the plugin settings and write the plugin into the current directory."""
    import kbn_plugin_generator.cli as cli

    options = options_from_args(args)
    generator = cli.PluginGenerator(prompter=cli.QuestionaryPrompter(), destination=Path.cwd())

    failures = generator.check_environment()
    config = generator.resolve(options)

    if sys.stderr.isatty() and not getattr(args, "verbose", False):
        with cli.RichGenerateProgress() as progress:
            result = generator.build(config, progress=progress)
    else:
        result = generator.build(config)

    result = replace(result, environment_failures=tuple(failures))
    print(format_generate_summary(result))
    return 0
