"""Public API surface for the Kibana plugin generator."""

from kbn_plugin_generator.core.commands import InstallOptions, init_git_repo, install_dependencies
from kbn_plugin_generator.core.contracts.config import (
    DEFAULT_DESCRIPTION,
    LATEST_VERSION_ALIAS,
    LATEST_VERSION_TAG,
    TARGET_VERSION_CHOICES,
    PluginConfig,
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
from kbn_plugin_generator.core.metadata import package_version
from kbn_plugin_generator.core.preflight import check_for_kibana, check_node_version, run_environment_checks
from kbn_plugin_generator.core.render import apply_post_render_fixups, render_files
from kbn_plugin_generator.core.resolver import resolve
from kbn_plugin_generator.core.selection import FileGroup, select_files
from kbn_plugin_generator.sdk import TEMPLATE_ROOT, GenerateResult, PluginGenerator

__version__ = package_version()

__all__ = [
    "DEFAULT_DESCRIPTION",
    "LATEST_VERSION_ALIAS",
    "LATEST_VERSION_TAG",
    "TARGET_VERSION_CHOICES",
    "TEMPLATE_ROOT",
    "CommandError",
    "EnvironmentCheckFailure",
    "FileGroup",
    "GenerateProgress",
    "GenerateResult",
    "GeneratorError",
    "GeneratorOptions",
    "InstallOptions",
    "NullGenerateProgress",
    "Phase",
    "PluginConfig",
    "PluginGenerator",
    "PromptError",
    "Prompter",
    "Question",
    "QuestionKind",
    "TemplateRenderError",
    "ValidationError",
    "__version__",
    "apply_post_render_fixups",
    "check_for_kibana",
    "check_node_version",
    "init_git_repo",
    "install_dependencies",
    "migrate_deprecated_flags",
    "render_files",
    "resolve",
    "run_environment_checks",
    "select_files",
]
