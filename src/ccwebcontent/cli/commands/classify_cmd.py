from __future__ import annotations

import argparse

from rich.panel import Panel
from rich.table import Table

from ccwebcontent.application.services.export_service import ExportService
from ccwebcontent.cli.context import CLIContext
from ccwebcontent.domain.models.file_entry import FileMap
from ccwebcontent.infrastructure.importers.manifest_loader import load_resources


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("classify", help="Classify web content without writing an archive")
    parser.add_argument(
        "--convert-html-to-pages",
        action="store_true",
        help="Turn HTML resources without an intended use into wiki pages",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    service = ExportService(ctx.paths, convert_html_to_pages=args.convert_html_to_pages)
    result = service.classify(load_resources(ctx.manifest_path))

    content = Table(title="Classified Content")
    content.add_column("Kind")
    content.add_column("Identifier", overflow="fold")
    content.add_column("Characters", justify="right")
    for assignment in result.assignments:
        content.add_row("assignment", assignment.migration_id, str(len(assignment.description)))
    for page in result.pages:
        content.add_row("page", page.migration_id, str(len(page.text)))
    if result.syllabus is not None:
        content.add_row("syllabus", "-", str(len(result.syllabus.body)))
    ctx.console.print(content)

    ctx.console.print(render_file_map(result.file_map))

    if result.skipped:
        ctx.console.print(
            Panel.fit("\n".join(result.skipped), title="Resources without files", border_style="yellow")
        )
    return 0


def render_file_map(file_map: FileMap, title: str = "File Map") -> Table:
    table = Table(title=title)
    table.add_column("Path", overflow="fold")
    table.add_column("Identifier", overflow="fold")
    table.add_column("Role")
    table.add_column("Locked")
    table.add_column("Status")
    for entry in file_map.values():
        table.add_row(
            entry.path_name,
            entry.migration_id,
            "main" if entry.primary else "aux",
            "yes" if entry.locked else "no",
            "[red]errored[/red]" if entry.errored else "ok",
        )
    return table
