"""Write rendered templates to disk without clobbering existing output."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

FILE_MODE = 0o664


def write_file(path: Path, content: str, *, overwrite: bool = False) -> None:
    """
    Write *content* to *path*.

    Raises:
        IsADirectoryError: *path* is an existing directory, whatever *overwrite* says.
        FileExistsError: *path* is an existing file and *overwrite* is false.
        OSError: The write itself failed. Nothing is rolled back.
    """
    if path.is_dir():
        raise IsADirectoryError(f"output file is a directory: {path}")
    if path.exists() and not overwrite:
        raise FileExistsError(f"file exists (use -f to overwrite): {path}")

    path.write_text(content, encoding="utf-8")
    os.chmod(path, FILE_MODE)
    logger.debug("wrote %s (%d bytes)", path, len(content))
