"""Command-line interface for the Kibana plugin generator."""

from __future__ import annotations

import logging as logging

from kbn_plugin_generator.cli.app import main as main
from kbn_plugin_generator.cli.commands import generate as generate_command
from kbn_plugin_generator.cli.parser import build_parser as build_parser
from kbn_plugin_generator.cli.progress.rich import RichGenerateProgress as RichGenerateProgress
from kbn_plugin_generator.cli.prompts import QuestionaryPrompter as QuestionaryPrompter
from kbn_plugin_generator.sdk import PluginGenerator as PluginGenerator

_format_summary = generate_command.format_generate_summary
_run_generate = generate_command.run_generate
