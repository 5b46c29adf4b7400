"""Central level-based logger (standard library `logging`).

Env:
- LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: WARNING)

The default stays at WARNING so store chatter does not interleave with the
interactive prompts. What shows up at each level:

- DEBUG: store open start, every atomic write (``path=``, ``entries=``)
- INFO: store created/opened with its entry count, add/update outcomes
  including update misses (``service=``)
- WARNING: the file was missing or unparseable when re-read before a write,
  a save failure surfaced by the dialog
- ERROR: add/update writes that raised PersistError

Passwords and usernames are never logged, only service names and paths.
"""

from __future__ import annotations

import logging
import os
from typing import Optional


def _level_from_env() -> int:
    raw = (os.getenv("LOG_LEVEL") or "WARNING").upper().strip()
    return getattr(logging, raw, logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger.

    This configures the root logger once (idempotent).
    """
    level = _level_from_env()
    root = logging.getLogger()
    if not getattr(root, "_credstore_configured", False):
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
        setattr(root, "_credstore_configured", True)
    root.setLevel(level)
    return logging.getLogger(name or "credstore")
