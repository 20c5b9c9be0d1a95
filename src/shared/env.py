"""Resolve Docker-style ``*_FILE`` secrets into plain environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def load_secret_file_variables() -> List[str]:
    """
    Expose the content of every ``KEY_FILE`` file as ``KEY``.

    A variable that is already set wins over its file. Unreadable files are
    logged and skipped.

    Returns:
        Names of the variables that were populated from files
    """
    resolved: List[str] = []
    for key, file_path in list(os.environ.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        resolved.append(target_key)
    return resolved


# Secrets such as AUTH_JWT_SECRET_FILE must be resolved before settings load.
load_secret_file_variables()
