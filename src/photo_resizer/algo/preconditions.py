"""Filesystem checks run before a source image is decoded."""

import os
from pathlib import Path

from ..common.errors import PreconditionError


def check_source(source_path: Path) -> None:
    if not source_path.exists():
        raise PreconditionError(
            f"The source file cannot be found! Check the file `{source_path}` "
            + "and make sure it exists."
        )
    if not source_path.is_file() or not os.access(source_path, os.R_OK):
        raise PreconditionError(
            f"The source file `{source_path}` is not readable. "
            + "Check the permissions for this file."
        )


def check_paths(source_path: Path, target_path: Path, same_file: bool) -> None:
    """Validate source/target paths, in order.

    1. source exists
    2. source is readable
    3. when source and target are the same file, it is writable

    Raises:
        PreconditionError: On the first check that fails
    """
    check_source(source_path)

    if same_file and not os.access(source_path, os.W_OK):
        raise PreconditionError(
            f"The source file and target file `{target_path}` aren't writable! "
            + "Check the permissions for this file."
        )
