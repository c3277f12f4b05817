"""Allow ``python -m kbn_plugin_generator``."""

from kbn_plugin_generator.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
