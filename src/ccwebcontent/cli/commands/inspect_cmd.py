from __future__ import annotations

import argparse

from rich.table import Table

from ccwebcontent.cli.context import CLIContext
from ccwebcontent.infrastructure.importers.manifest_loader import load_resources
from ccwebcontent.infrastructure.importers.manifest_xml_importer import select_webcontent


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("inspect", help="List resources declared in the manifest")
    parser.add_argument("--all", action="store_true", help="Include non web-content resources")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    resources = load_resources(ctx.manifest_path)
    if not args.all:
        resources = select_webcontent(resources)

    table = Table(title=f"Resources ({len(resources)})")
    table.add_column("Identifier", overflow="fold")
    table.add_column("Type")
    table.add_column("Href", overflow="fold")
    table.add_column("Intended use")
    table.add_column("Role")
    table.add_column("Files", justify="right")
    for res in resources:
        table.add_row(
            res.identifier,
            res.resource_type,
            res.href or "-",
            res.intended_use or "-",
            res.intended_user_role or "-",
            str(len(res.files)),
        )
    ctx.console.print(table)
    return 0
