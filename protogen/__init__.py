from .config import GenerationConfig
from .discovery import find_proto_files
from .errors import (
    CommandError,
    DirectoryCreationError,
    DiscoveryError,
    GenerationError,
    PathResolutionError,
    PluginInstallError,
    ProtogenError,
)
from .generator import generate_code
from .pipeline import run
from .plugins import install_plugins
from .runner import CommandResult, CommandRunner, SubprocessRunner


__all__ = [
    "GenerationConfig",
    "run",
    "find_proto_files",
    "generate_code",
    "install_plugins",
    # Command execution
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    # Errors
    "CommandError",
    "DirectoryCreationError",
    "DiscoveryError",
    "GenerationError",
    "PathResolutionError",
    "PluginInstallError",
    "ProtogenError",
]
