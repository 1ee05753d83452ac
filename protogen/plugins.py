"""Installation of the protoc Go generator plugins via ``go install``."""

import logging
from dataclasses import dataclass

from . import config
from .errors import CommandError, PluginInstallError
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

PROTOC_GEN_GO = "protoc-gen-go"
PROTOC_GEN_GO_GRPC = "protoc-gen-go-grpc"

PLUGIN_MODULES = {
    PROTOC_GEN_GO: "google.golang.org/protobuf/cmd/protoc-gen-go",
    PROTOC_GEN_GO_GRPC: "google.golang.org/grpc/cmd/protoc-gen-go-grpc",
}


@dataclass(frozen=True)
class Plugin:
    """A generator plugin pinned to a version selector ("latest" or a tag)."""

    name: str
    module_path: str
    version: str = config.LATEST

    @property
    def target(self) -> str:
        return f"{self.module_path}@{self.version}"


def default_plugins(go_version: str, grpc_version: str) -> list[Plugin]:
    return [
        Plugin(PROTOC_GEN_GO, PLUGIN_MODULES[PROTOC_GEN_GO], go_version),
        Plugin(PROTOC_GEN_GO_GRPC, PLUGIN_MODULES[PROTOC_GEN_GO_GRPC], grpc_version),
    ]


def install_plugin(plugin: Plugin, runner: CommandRunner) -> None:
    """Run ``go install <module>@<version>`` for a single plugin.

    Raises:
        PluginInstallError: if the installer fails for any reason
    """
    logger.debug(f"Installing {plugin.target}")
    try:
        result = runner.run(config.GO_EXECUTABLE, ["install", plugin.target])
        result.check_returncode()
    except CommandError as e:
        raise PluginInstallError(plugin.name, e) from e


def install_plugins(
    go_version: str,
    grpc_version: str,
    runner: CommandRunner | None = None,
) -> None:
    """Install both plugins in order, stopping at the first failure."""
    if runner is None:
        runner = SubprocessRunner()

    logger.info(
        f"Ensuring plugins are installed: {PROTOC_GEN_GO}@{go_version}, "
        f"{PROTOC_GEN_GO_GRPC}@{grpc_version}"
    )

    for plugin in default_plugins(go_version, grpc_version):
        install_plugin(plugin, runner)
