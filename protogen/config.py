"""Run configuration for protogen."""

import argparse
import os
from dataclasses import dataclass

LATEST = "latest"

# External executables, overridable for non-standard installs
PROTOC_EXECUTABLE = os.getenv("PROTOGEN_PROTOC", "protoc")
GO_EXECUTABLE = os.getenv("PROTOGEN_GO", "go")


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for a single generation run.

    ``go_out`` and ``grpc_out`` are accepted for compatibility but both
    generators currently write directly under ``out_dir``.
    """

    proto_dir: str = "."
    out_dir: str = "."
    go_out: str = "."
    grpc_out: str = "."
    go_version: str = LATEST
    grpc_version: str = LATEST

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GenerationConfig":
        return cls(
            proto_dir=args.proto_dir,
            out_dir=args.out_dir,
            go_out=args.go_out,
            grpc_out=args.grpc_out,
            go_version=args.go_version,
            grpc_version=args.grpc_version,
        )
