"""End-to-end generation run: resolve, install, discover, generate."""

import logging
import os
from collections.abc import Mapping

from .config import GenerationConfig
from .discovery import Walker, find_proto_files
from .generator import generate_code
from .paths import resolve_paths
from .plugins import install_plugins
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


def run(
    cfg: GenerationConfig,
    runner: CommandRunner | None = None,
    walker: Walker = os.walk,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Execute one generation run.

    Returns the proto files passed to protoc, or an empty list when there was
    nothing to generate. Any ProtogenError aborts the run.
    """
    if runner is None:
        runner = SubprocessRunner()

    abs_proto_dir, abs_out_dir = resolve_paths(cfg.proto_dir, cfg.out_dir)

    install_plugins(cfg.go_version, cfg.grpc_version, runner)

    proto_files = find_proto_files(abs_proto_dir, walker)
    if not proto_files:
        logger.info(f"No .proto files found in {abs_proto_dir}")
        return []

    generate_code(
        proto_files,
        abs_proto_dir,
        abs_out_dir,
        cfg.go_out,
        cfg.grpc_out,
        runner=runner,
        environ=environ,
    )

    logger.info("Generation completed successfully!")
    return proto_files
