from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from pathlib import Path, PurePosixPath
from types import SimpleNamespace
from typing import Any

import pytest

from kbn_plugin_generator import (
    CommandError,
    EnvironmentCheckFailure,
    GenerateResult,
    PromptError,
    TemplateRenderError,
    ValidationError,
)
from kbn_plugin_generator.cli import _format_summary, _run_generate, build_parser, main
from kbn_plugin_generator.cli.commands.generate import options_from_args
from kbn_plugin_generator.cli.prompts import QuestionaryPrompter
from kbn_plugin_generator.core.contracts.prompt import Question, QuestionKind
from tests.fakes.config import make_config
from tests.fakes.progress import RecordingProgress


def _make_args(**overrides: Any) -> argparse.Namespace:
    values = {"advanced": False, "custom": False, "minimal": False, "verbose": False}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_build_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert (args.advanced, args.custom, args.minimal, args.verbose) == (False, False, False, False)


def test_build_parser_short_flags() -> None:
    args = build_parser().parse_args(["-c", "-m", "-v"])

    assert args.custom is True
    assert args.minimal is True
    assert args.verbose is True


def test_build_parser_accepts_hidden_advanced_flag() -> None:
    parser = build_parser()

    assert parser.parse_args(["--advanced"]).advanced is True
    assert "--advanced" not in parser.format_help()
    assert "--custom" in parser.format_help()


def test_build_parser_rejects_unknown_arguments() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["generate"])


def test_build_parser_version_prints_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("kbn-plugin-generator ")


def test_options_from_args_migrates_advanced(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    options = options_from_args(_make_args(advanced=True))

    assert options.custom is True
    assert "deprecated" in caplog.text


def test_main_returns_zero_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[argparse.Namespace] = []
    monkeypatch.setattr("kbn_plugin_generator.cli._run_generate", lambda args: seen.append(args) or 0)

    assert main(["--custom"]) == 0
    assert seen[0].custom is True


def test_main_enables_verbose_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("kbn_plugin_generator.cli._run_generate", lambda _: 0)

    captured: dict[str, object] = {}

    def _fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("kbn_plugin_generator.cli.logging.basicConfig", _fake_basic_config)

    main(["--verbose"])

    assert captured["level"] == logging.DEBUG
    assert captured["stream"] == sys.stderr


@pytest.mark.parametrize(
    ("error", "exit_code"),
    [
        (PromptError("prompt interrupted"), 2),
        (ValidationError("bad name"), 3),
        (EnvironmentCheckFailure("no kibana", check="kibana", fatal=True), 3),
        (TemplateRenderError("bad template"), 4),
        (CommandError("npm failed", command=("npm", "install"), returncode=1), 5),
        (RuntimeError("boom"), 1),
    ],
)
def test_main_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    error: Exception,
    exit_code: int,
) -> None:
    def _raise(_: object) -> int:
        raise error

    monkeypatch.setattr("kbn_plugin_generator.cli._run_generate", _raise)

    actual = main([])

    assert actual == exit_code
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert str(error) in captured.err


def test_main_prints_aborted_on_prompt_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _raise(_: object) -> int:
        raise PromptError("prompt interrupted: Your Plugin Name")

    monkeypatch.setattr("kbn_plugin_generator.cli._run_generate", _raise)

    main([])

    assert "Aborted." in capsys.readouterr().out


def test_format_summary_lists_components(tmp_path: Path) -> None:
    result = GenerateResult(
        config=make_config(name="My Plugin", app=True, api=True),
        destination=tmp_path,
        files=(),
        written=(tmp_path / "a", tmp_path / "b"),
        environment_failures=(EnvironmentCheckFailure("no kibana", check="kibana"),),
        installers=("npm",),
    )

    output = _format_summary(result)

    assert "Plugin:      My Plugin (my_plugin)" in output
    assert "Kibana:      kibana" in output
    assert "Components:  app, server api" in output
    assert f"Files:       2 written to {tmp_path}" in output
    assert "Installed:   npm" in output
    assert "Warnings:    1 environment check failed" in output


def test_format_summary_without_components(tmp_path: Path) -> None:
    result = GenerateResult(config=make_config(), destination=tmp_path, files=(), written=())

    output = _format_summary(result)

    assert "Components:  none" in output
    assert "Installed" not in output
    assert "Warnings" not in output


# ---------------------------------------------------------------------------
# Interactive generation tests (questionary mocked)
# ---------------------------------------------------------------------------


class _FakeQuestion:
    """Mimics questionary.Question; returns a canned value from .ask()."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def ask(self) -> Any:
        if isinstance(self._value, BaseException):
            raise self._value
        return self._value


def _build_fake_questionary(answers: dict[str, Any], asked: list[str] | None = None) -> SimpleNamespace:
    """Build a fake questionary module from a mapping of prompt-prefix -> answer.

    Prompts are matched case-insensitively against the keys in *answers*; a
    missing key falls back to the ``default`` keyword the prompt was built with.
    """

    def _find(prompt: str, kw: dict[str, Any]) -> Any:
        if asked is not None:
            asked.append(prompt)
        for key, value in answers.items():
            if key.lower() in prompt.lower():
                return value
        if "default" in kw:
            return kw["default"]
        raise KeyError(f"no answer configured for prompt: {prompt!r}")

    def _select(prompt: str, **kw: Any) -> _FakeQuestion:
        return _FakeQuestion(_find(prompt, kw))

    def _text(prompt: str, **kw: Any) -> _FakeQuestion:
        return _FakeQuestion(_find(prompt, kw))

    def _confirm(prompt: str, **kw: Any) -> _FakeQuestion:
        return _FakeQuestion(_find(prompt, kw))

    return SimpleNamespace(select=_select, text=_text, confirm=_confirm)


@pytest.fixture
def no_external_commands(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    calls: list[str] = []
    monkeypatch.setattr("kbn_plugin_generator.sdk.commands.init_git_repo", lambda *_: calls.append("git"))
    monkeypatch.setattr(
        "kbn_plugin_generator.sdk.commands.install_dependencies", lambda *_: calls.append("npm") or ["npm"]
    )
    return calls


def test_run_generate_default_flags(
    monkeypatch: pytest.MonkeyPatch,
    plugin_dir: Path,
    no_external_commands: list[str],
    capsys: pytest.CaptureFixture[str],
) -> None:
    asked: list[str] = []
    fake_q = _build_fake_questionary({"Plugin Name": "My Plugin", "Short Description": "Demo"}, asked)
    monkeypatch.setitem(sys.modules, "questionary", fake_q)
    monkeypatch.chdir(plugin_dir)

    exit_code = _run_generate(_make_args())

    assert exit_code == 0
    assert asked == ["Your Plugin Name", "Short Description", "Target Kibana Version"]
    assert no_external_commands == ["git", "npm"]
    package = json.loads((plugin_dir / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "my_plugin"
    assert package["description"] == "Demo"
    assert (plugin_dir / "public" / "app.js").is_file()
    assert "Components:  app, translations, hack, server api" in capsys.readouterr().out


def test_run_generate_custom_asks_for_each_component(
    monkeypatch: pytest.MonkeyPatch, plugin_dir: Path, no_external_commands: list[str]
) -> None:
    asked: list[str] = []
    answers = {
        "Target Kibana Version": "5.2.2",
        "app component": True,
        "translation files": False,
        "hack component": False,
        "server API": False,
    }
    monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary(answers, asked))
    monkeypatch.chdir(plugin_dir)

    exit_code = _run_generate(_make_args(advanced=True))

    assert exit_code == 0
    assert len(asked) == 7
    assert (plugin_dir / "public" / "app.js").is_file()
    assert not (plugin_dir / "server").exists()
    package = json.loads((plugin_dir / "package.json").read_text(encoding="utf-8"))
    assert package["kibana"]["version"] == "5.2.2"


def test_run_generate_interrupted_prompt(
    monkeypatch: pytest.MonkeyPatch, plugin_dir: Path, no_external_commands: list[str]
) -> None:
    monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary({"Plugin Name": None}))
    monkeypatch.chdir(plugin_dir)

    with pytest.raises(PromptError):
        _run_generate(_make_args())

    assert list(plugin_dir.iterdir()) == []
    assert no_external_commands == []


class TestQuestionaryPrompter:
    def test_text_question(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary({"Name": "abc"}))

        answer = QuestionaryPrompter().ask(Question(kind=QuestionKind.TEXT, name="name", message="Name", default="x"))

        assert answer == "abc"

    def test_select_uses_default_choice(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary({}))
        question = Question(
            kind=QuestionKind.SELECT, name="targetVersion", message="Version", default="b", choices=("a", "b")
        )

        assert QuestionaryPrompter().ask(question) == "b"

    def test_confirm_default_is_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary({}))
        question = Question(kind=QuestionKind.CONFIRM, name="include_app", message="App?", default=False)

        assert QuestionaryPrompter().ask(question) is False

    def test_none_answer_raises_prompt_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary({"App": None}))
        question = Question(kind=QuestionKind.CONFIRM, name="include_app", message="App?", default=False)

        with pytest.raises(PromptError, match="App"):
            QuestionaryPrompter().ask(question)

    def test_keyboard_interrupt_raises_prompt_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", _build_fake_questionary({"Name": KeyboardInterrupt()}))
        question = Question(kind=QuestionKind.TEXT, name="name", message="Name")

        with pytest.raises(PromptError):
            QuestionaryPrompter().ask(question)


class _TerminalStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_run_generate_opens_rich_display_only_after_prompting(
    monkeypatch: pytest.MonkeyPatch, plugin_dir: Path, no_external_commands: list[str]
) -> None:
    timeline: list[str] = []
    fake_q = _build_fake_questionary({"Plugin Name": "My Plugin"}, timeline)
    monkeypatch.setitem(sys.modules, "questionary", fake_q)
    monkeypatch.chdir(plugin_dir)
    monkeypatch.setattr(sys, "stderr", _TerminalStream())

    class _Display(RecordingProgress):
        def __enter__(self) -> _Display:
            timeline.append("display opened")
            return self

        def __exit__(self, *exc_info: object) -> None:
            timeline.append("display closed")

    displays: list[_Display] = []
    monkeypatch.setattr(
        "kbn_plugin_generator.cli.RichGenerateProgress", lambda: displays.append(_Display()) or displays[-1]
    )

    assert _run_generate(_make_args()) == 0

    assert timeline == [
        "Your Plugin Name",
        "Short Description",
        "Target Kibana Version",
        "display opened",
        "display closed",
    ]
    assert displays[0].events[0] == ("start", "Render")
    assert PurePosixPath("package.json") in displays[0].files
