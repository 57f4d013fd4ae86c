from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from ccwebcontent.cli.commands import classify_cmd, export_cmd, inspect_cmd
from ccwebcontent.cli.context import CLIContext
from ccwebcontent.core.config import load_paths
from ccwebcontent.core.errors import CcWebContentError
from ccwebcontent.core.logging import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAME = "imsmanifest.xml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccweb",
        description="Classify and package Common Cartridge web content",
    )
    parser.add_argument(
        "--package-root",
        type=Path,
        default=Path.cwd(),
        help="Unpacked cartridge directory (default: current working directory)",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        help=f"Manifest file, XML or JSON (default: <package-root>/{DEFAULT_MANIFEST_NAME})",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        help="Directory for all_files.zip (default: $CCWEB_EXPORT_DIR or ./ccweb_export)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)
    inspect_cmd.register(subparsers)
    classify_cmd.register(subparsers)
    export_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        paths = load_paths(args.package_root, export_dir=args.export_dir)
        manifest_path = args.manifest or paths.package_root / DEFAULT_MANIFEST_NAME
        ctx = CLIContext(paths=paths, manifest_path=manifest_path, console=console)
        return handler(args, ctx)
    except CcWebContentError as exc:
        logger.error(str(exc))
        return 1

