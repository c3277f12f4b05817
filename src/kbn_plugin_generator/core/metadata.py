"""Distribution metadata for the generator itself."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "kbn-plugin-generator"


def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def initial_commit_message() -> str:
    return f"Initialize Kibana Plugin ({PACKAGE_NAME} v{package_version()})"
