"""Option resolution: turn flags and prompt answers into a ``PluginConfig``."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pydantic

from kbn_plugin_generator.core.contracts.config import (
    DEFAULT_DESCRIPTION,
    TARGET_VERSION_CHOICES,
    PluginConfig,
    resolve_target_version,
)
from kbn_plugin_generator.core.contracts.exceptions import PromptError, ValidationError
from kbn_plugin_generator.core.contracts.options import GeneratorOptions
from kbn_plugin_generator.core.contracts.prompt import Prompter, Question, QuestionKind
from kbn_plugin_generator.core.naming import snake_case

_LOG = logging.getLogger(__name__)

# Field name -> confirmation message for each optional component, in prompt order.
COMPONENT_QUESTIONS: tuple[tuple[str, str], ...] = (
    ("include_app", "Should an app component be generated?"),
    ("include_translations", "Should translation files be generated?"),
    ("include_hack_component", "Should a hack component be generated?"),
    ("include_api", "Should a server API be generated?"),
)


def default_plugin_name(destination: Path) -> str:
    """Ambient project name: ``package.json`` name if present, else the directory name."""
    package_json = destination / "package.json"
    if package_json.is_file():
        try:
            payload = json.loads(package_json.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            _LOG.debug("ignoring unreadable %s", package_json)
        else:
            name = payload.get("name") if isinstance(payload, dict) else None
            if isinstance(name, str) and name.strip():
                return name.strip()
    return destination.resolve().name


def normalize_name(value: str) -> str:
    normalized = snake_case(value)
    if not normalized:
        raise ValidationError(f"plugin name {value!r} does not contain any letters or digits")
    return normalized


def resolve_component(options: GeneratorOptions, prompter: Prompter, *, field: str, message: str) -> bool:
    if not options.custom:
        return not options.minimal
    answer = _ask(prompter, Question(kind=QuestionKind.CONFIRM, name=field, message=message, default=False))
    return bool(answer)


def resolve(options: GeneratorOptions, prompter: Prompter, *, default_name: str) -> PluginConfig:
    """Run the prompt sequence and return the completed configuration record."""
    raw_name = _ask(
        prompter,
        Question(kind=QuestionKind.TEXT, name="name", message="Your Plugin Name", default=default_name),
    )
    name = normalize_name(str(raw_name))

    description = _ask(
        prompter,
        Question(
            kind=QuestionKind.TEXT,
            name="description",
            message="Short Description",
            default=DEFAULT_DESCRIPTION,
        ),
    )

    version_choice = _ask(
        prompter,
        Question(
            kind=QuestionKind.SELECT,
            name="targetVersion",
            message="Target Kibana Version",
            default=TARGET_VERSION_CHOICES[0],
            choices=TARGET_VERSION_CHOICES,
        ),
    )
    try:
        target_version = resolve_target_version(str(version_choice))
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    components = {
        field: resolve_component(options, prompter, field=field, message=message)
        for field, message in COMPONENT_QUESTIONS
    }

    try:
        config = PluginConfig(
            name=name,
            description=str(description or ""),
            target_version=target_version,
            **components,
        )
    except pydantic.ValidationError as exc:
        raise ValidationError(f"invalid plugin configuration: {exc}") from exc

    _LOG.debug("resolved plugin configuration: %s", config.template_variables())
    return config


def _ask(prompter: Prompter, question: Question) -> object:
    answer = prompter.ask(question)
    if answer is None:
        raise PromptError(f"no answer for prompt: {question.message}")
    return answer
