"""CLI parser construction."""

from __future__ import annotations

import argparse

from kbn_plugin_generator.core.metadata import PACKAGE_NAME, package_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description="Generate a Kibana plugin in the current directory",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    parser.add_argument("--advanced", action="store_true", default=False, help=argparse.SUPPRESS)
    parser.add_argument(
        "--custom",
        "-c",
        action="store_true",
        default=False,
        help="Interactively choose which sample components should be generated",
    )
    parser.add_argument(
        "--minimal",
        "-m",
        action="store_true",
        default=False,
        help="Turn off sample code generation, only create the bare folder structure",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
