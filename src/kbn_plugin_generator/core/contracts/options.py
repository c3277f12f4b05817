"""Generator option contracts (command-line flags)."""

from __future__ import annotations

import logging

from pydantic import BaseModel

_LOG = logging.getLogger(__name__)


class GeneratorOptions(BaseModel):
    """Resolved command-line flags.

    ``advanced`` is a deprecated alias of ``custom``. It is never stored; the
    :meth:`advanced` accessor reports every use and forwards to ``custom``.
    """

    custom: bool = False
    minimal: bool = False

    model_config = {"frozen": True}

    def advanced(self) -> bool:
        _LOG.error('use of deprecated option "advanced"')
        return self.custom


def migrate_deprecated_flags(*, advanced: bool = False, custom: bool = False, minimal: bool = False) -> GeneratorOptions:
    """Build options from raw flags, folding ``--advanced`` into ``--custom``."""
    if advanced:
        _LOG.warning("The --advanced flag is deprecated. Please use --custom instead")
        custom = advanced
    return GeneratorOptions(custom=custom, minimal=minimal)
