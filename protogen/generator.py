"""Invocation of protoc with the Go and gRPC-Go generators."""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from . import config
from .errors import CommandError, GenerationError, PathResolutionError
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

SOURCE_RELATIVE = "paths=source_relative"


def plugin_bin_dir(environ: Mapping[str, str]) -> str:
    """Directory where ``go install`` places the plugin binaries.

    ``GOBIN`` wins, then ``$GOPATH/bin``, then ``~/go/bin``.
    """
    go_bin = environ.get("GOBIN", "")
    if go_bin:
        return go_bin

    go_path = environ.get("GOPATH", "")
    if not go_path:
        home = environ.get("HOME", "")
        if not home:
            try:
                home = str(Path.home())
            except (RuntimeError, KeyError) as e:
                raise PathResolutionError("~", e) from e
        go_path = os.path.join(home, "go")

    return os.path.join(go_path, "bin")


def build_environment(environ: Mapping[str, str], bin_dir: str) -> dict[str, str]:
    """Copy ``environ`` with ``bin_dir`` prepended to PATH."""
    env = dict(environ)
    current = env.get("PATH", "")
    env["PATH"] = bin_dir + os.pathsep + current if current else bin_dir
    return env


def build_protoc_args(
    files: Sequence[str],
    proto_include: str,
    out_dir: str,
    go_out: str = ".",
    grpc_out: str = ".",
) -> list[str]:
    # go_out and grpc_out are not applied: both generators write to out_dir.
    return [
        "-I",
        proto_include,
        f"--go_out={out_dir}",
        f"--go_opt={SOURCE_RELATIVE}",
        f"--go-grpc_out={out_dir}",
        f"--go-grpc_opt={SOURCE_RELATIVE}",
        *files,
    ]


def warn_ignored_outputs(go_out: str, grpc_out: str, out_dir: str) -> None:
    for flag, value in (("-go-out", go_out), ("-grpc-out", grpc_out)):
        if value not in ("", "."):
            logger.warning(
                f"{flag}={value} is ignored; generated code is written to {out_dir}"
            )


def generate_code(
    files: Sequence[str],
    proto_include: str,
    out_dir: str,
    go_out: str = ".",
    grpc_out: str = ".",
    runner: CommandRunner | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Run protoc once over all ``files``.

    Raises:
        GenerationError: if protoc fails. Partial output is not cleaned up.
    """
    if runner is None:
        runner = SubprocessRunner()
    if environ is None:
        environ = os.environ

    warn_ignored_outputs(go_out, grpc_out, out_dir)
    args = build_protoc_args(files, proto_include, out_dir, go_out, grpc_out)

    env: Mapping[str, str] | None
    try:
        env = build_environment(environ, plugin_bin_dir(environ))
    except PathResolutionError as e:
        # The plugins may already be on PATH, so carry on
        logger.warning(f"Warning: could not determine GOPATH/bin: {e.error}")
        env = dict(environ)

    logger.info("Running protoc...")
    try:
        result = runner.run(config.PROTOC_EXECUTABLE, args, env=env)
        result.check_returncode()
    except CommandError as e:
        raise GenerationError(e) from e
