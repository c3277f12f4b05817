"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from kbn_plugin_generator.core.contracts.exceptions import (
    CommandError,
    EnvironmentCheckFailure,
    PromptError,
    TemplateRenderError,
    ValidationError,
)


def main(argv: list[str] | None = None) -> int:
    import kbn_plugin_generator.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return cli._run_generate(args)
    except PromptError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print("Aborted.")
        return 2
    except (ValidationError, EnvironmentCheckFailure) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except TemplateRenderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except CommandError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
