"""Error types raised by the generation pipeline.

Every stage wraps the underlying OS or subprocess error in one of these
classes so the CLI can report a single formatted message. None of them are
retried.
"""

from typing import Sequence


class ProtogenError(Exception):
    """Base class for all pipeline failures."""


class CommandError(ProtogenError):
    """An external command exited non-zero or could not be started."""

    def __init__(
        self,
        program: str,
        args: Sequence[str],
        returncode: int | None,
        reason: str | None = None,
    ) -> None:
        self.program = program
        self.args_list = list(args)
        self.returncode = returncode
        self.reason = reason
        if returncode is None:
            message = f"{program}: {reason or 'could not be started'}"
        else:
            message = f"{program}: exit status {returncode}"
        super().__init__(message)


class PathResolutionError(ProtogenError):
    """A path could not be resolved (unknown working or home directory)."""

    def __init__(self, path: str, error: BaseException) -> None:
        self.path = path
        self.error = error
        super().__init__(f"failed to resolve path {path!r}: {error}")


class DirectoryCreationError(ProtogenError):
    """The output directory could not be created."""

    def __init__(self, path: str, error: BaseException) -> None:
        self.path = path
        self.error = error
        super().__init__(f"failed to create output directory {path}: {error}")


class PluginInstallError(ProtogenError):
    """Installing a generator plugin failed."""

    def __init__(self, plugin_name: str, error: BaseException) -> None:
        self.plugin_name = plugin_name
        self.error = error
        super().__init__(f"failed to install {plugin_name}: {error}")


class DiscoveryError(ProtogenError):
    """Walking the proto directory hit a filesystem error."""

    def __init__(self, root: str, error: BaseException) -> None:
        self.root = root
        self.error = error
        super().__init__(f"failed to find proto files in {root}: {error}")


class GenerationError(ProtogenError):
    """The protoc run failed. Files it already wrote are left in place."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(f"protoc execution failed: {error}")


__all__ = [
    "CommandError",
    "DirectoryCreationError",
    "DiscoveryError",
    "GenerationError",
    "PathResolutionError",
    "PluginInstallError",
    "ProtogenError",
]
