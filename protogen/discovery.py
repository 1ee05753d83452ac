"""Recursive discovery of .proto files."""

import logging
import os
from collections.abc import Callable, Iterable, Iterator

from .errors import DiscoveryError

logger = logging.getLogger(__name__)

PROTO_SUFFIX = ".proto"

Walker = Callable[..., Iterable[tuple[str, list[str], list[str]]]]


def _raise_walk_error(error: OSError) -> None:
    raise error


def _walk(root: str, walker: Walker, is_file: Callable[[str], bool]) -> Iterator[str]:
    for dirpath, dirnames, filenames in walker(root, onerror=_raise_walk_error):
        # Lexical order per directory so repeated runs agree
        dirnames.sort()
        for name in sorted(filenames):
            if not name.endswith(PROTO_SUFFIX):
                continue
            path = os.path.join(dirpath, name)
            # Skips dangling symlinks, FIFOs and sockets
            if is_file(path):
                yield path


def find_proto_files(
    root: str,
    walker: Walker = os.walk,
    is_file: Callable[[str], bool] = os.path.isfile,
) -> list[str]:
    """Collect every regular ``*.proto`` file under ``root``.

    Directories are descended into but never returned, even when their name
    ends with ``.proto``. Symlinks to regular files are kept. The walk stops
    at the first filesystem error, including a ``root`` that does not exist.

    Args:
        root: Absolute directory to search
        walker: ``os.walk``-compatible callable accepting ``onerror``
        is_file: Predicate deciding whether a matching entry is a regular file

    Returns:
        Absolute file paths in walk order; empty if nothing matched

    Raises:
        DiscoveryError: wrapping the first OSError hit during the walk
    """
    try:
        files = list(_walk(root, walker, is_file))
    except OSError as e:
        raise DiscoveryError(root, e) from e

    logger.debug(f"Found {len(files)} proto file(s) in {root}")
    return files
