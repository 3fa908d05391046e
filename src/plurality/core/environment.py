"""
Environment configuration for plurality.

Environment variables:
    PLURALITY_RULES: Path to a TOML rules file applied to the process-wide
        default inflector when it is first created.
    LOG_LEVEL: Log level used by the command-line interface (default WARNING).

Usage:
    from plurality.core.environment import get_rules_path

    path = get_rules_path()  # Path or None
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

RULES_ENV_VAR = "PLURALITY_RULES"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"

_DEFAULT_LOG_LEVEL = "WARNING"


def get_rules_path() -> Path | None:
    """Get the rules file named by PLURALITY_RULES.

    Returns:
        Path to the rules file, or None if the variable is unset, empty, or
        names a file that does not exist (a warning is logged).
    """
    value = os.environ.get(RULES_ENV_VAR, "").strip()
    if not value:
        return None

    path = Path(value).expanduser()
    if not path.is_file():
        logger.warning("%s points to '%s', which does not exist. Ignoring it.", RULES_ENV_VAR, path)
        return None
    return path


def get_log_level() -> int:
    """Get the CLI log level from LOG_LEVEL, falling back to WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, _DEFAULT_LOG_LEVEL).upper().strip()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
