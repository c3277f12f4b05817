"""Core contracts for the Kibana plugin generator."""

from kbn_plugin_generator.core.contracts.config import (
    DEFAULT_DESCRIPTION,
    LATEST_VERSION_ALIAS,
    LATEST_VERSION_TAG,
    TARGET_VERSION_CHOICES,
    PluginConfig,
    resolve_target_version,
)
from kbn_plugin_generator.core.contracts.exceptions import (
    CommandError,
    EnvironmentCheckFailure,
    GeneratorError,
    PromptError,
    TemplateRenderError,
    ValidationError,
)
from kbn_plugin_generator.core.contracts.options import GeneratorOptions, migrate_deprecated_flags
from kbn_plugin_generator.core.contracts.progress import GenerateProgress, NullGenerateProgress, Phase
from kbn_plugin_generator.core.contracts.prompt import Prompter, Question, QuestionKind

__all__ = [
    "DEFAULT_DESCRIPTION",
    "LATEST_VERSION_ALIAS",
    "LATEST_VERSION_TAG",
    "TARGET_VERSION_CHOICES",
    "CommandError",
    "EnvironmentCheckFailure",
    "GenerateProgress",
    "GeneratorError",
    "GeneratorOptions",
    "NullGenerateProgress",
    "Phase",
    "PluginConfig",
    "PromptError",
    "Prompter",
    "Question",
    "QuestionKind",
    "TemplateRenderError",
    "ValidationError",
    "migrate_deprecated_flags",
    "resolve_target_version",
]
