"""Resolution of the proto and output directories."""

import logging
import os

from .errors import DirectoryCreationError, PathResolutionError

logger = logging.getLogger(__name__)

OUTPUT_DIR_MODE = 0o755


def resolve_path(path: str) -> str:
    """Return the absolute, normalized form of ``path``.

    Relative paths are joined with the current working directory.
    """
    try:
        return os.path.abspath(path)
    except OSError as e:
        # os.getcwd() fails when the working directory has been removed
        raise PathResolutionError(path, e) from e


def ensure_directory(path: str) -> None:
    """Create ``path`` and any missing parents. Existing directories are fine."""
    try:
        os.makedirs(path, mode=OUTPUT_DIR_MODE, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(path, e) from e


def resolve_paths(proto_dir: str, out_dir: str) -> tuple[str, str]:
    abs_proto_dir = resolve_path(proto_dir)
    abs_out_dir = resolve_path(out_dir)

    ensure_directory(abs_out_dir)
    logger.debug(f"Proto dir: {abs_proto_dir}, output dir: {abs_out_dir}")
    return abs_proto_dir, abs_out_dir
