"""Startup credential loading.

The command-line argument wins; otherwise the whole token file is read.
Either way the value is trimmed, and an empty result means "no token".
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_credential(argument: str | None, token_file: Path) -> str:
    """Return the trimmed credential, or ``""`` when none was supplied.

    A missing or unreadable token file counts as empty.
    """
    if argument is not None:
        return argument.strip()
    try:
        raw = token_file.read_text(encoding="utf-8")
    except OSError:
        logger.debug("Token file %s not readable", token_file, exc_info=True)
        return ""
    return raw.strip()
