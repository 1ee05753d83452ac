"""
protogen CLI - generate Go and gRPC-Go code from .proto files
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from . import pipeline
from .config import LATEST, GenerationConfig
from .errors import ProtogenError


def get_version() -> str:
    try:
        from importlib.metadata import version
        return version("protogen")
    except Exception:
        return "0.1.0"


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Install the protoc Go plugins and compile every .proto file in a tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate next to the sources in the current directory
  protogen

  # Separate proto and output trees
  protogen -proto-dir api/proto -out-dir internal/gen

  # Pin plugin versions
  protogen -go-version v1.34.2 -grpc-version v1.5.1
        """,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"protogen {get_version()}",
    )

    parser.add_argument(
        "-proto-dir",
        "--proto-dir",
        dest="proto_dir",
        default=".",
        help="Directory containing .proto files (default: .)",
    )

    parser.add_argument(
        "-out-dir",
        "--out-dir",
        dest="out_dir",
        default=".",
        help="Output directory for generated code (default: .)",
    )

    parser.add_argument(
        "-go-out",
        "--go-out",
        dest="go_out",
        default=".",
        help="Output directory for go_out (relative to out-dir; currently ignored)",
    )

    parser.add_argument(
        "-grpc-out",
        "--grpc-out",
        dest="grpc_out",
        default=".",
        help="Output directory for go-grpc_out (relative to out-dir; currently ignored)",
    )

    parser.add_argument(
        "-go-version",
        "--go-version",
        dest="go_version",
        default=LATEST,
        help=f"Version of protoc-gen-go to use (default: {LATEST})",
    )

    parser.add_argument(
        "-grpc-version",
        "--grpc-version",
        dest="grpc_version",
        default=LATEST,
        help=f"Version of protoc-gen-go-grpc to use (default: {LATEST})",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        pipeline.run(GenerationConfig.from_args(args))
    except ProtogenError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
