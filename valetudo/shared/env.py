"""Environment utilities for resolving Docker-style secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Expose ``KEY_FILE`` secrets as ``KEY``.

    For every ``KEY_FILE`` entry whose ``KEY`` is not already set, the
    referenced file is read and its stripped contents become the value of
    ``KEY``. Unreadable files are logged and skipped, so a bad mount never
    prevents the settings from loading.
    """
    env = os.environ if environ is None else environ

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if env.get(target_key):
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


load_secret_file_variables()
