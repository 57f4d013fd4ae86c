from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from ccwebcontent.application.services.export_service import ExportResult, ExportService
from ccwebcontent.cli.commands.classify_cmd import render_file_map
from ccwebcontent.cli.context import CLIContext
from ccwebcontent.core.files import ensure_directory
from ccwebcontent.core.time import now_utc_iso
from ccwebcontent.infrastructure.importers.manifest_loader import load_resources


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "export",
        help="Classify web content and package referenced files",
        description=(
            "Classify web content and package referenced files into all_files.zip. "
            "Files that cannot be found are left out of the archive and reported; "
            "the archive is still written, but the command exits with status 1 when any file is missing."
        ),
    )
    parser.add_argument(
        "--convert-html-to-pages",
        action="store_true",
        help="Turn HTML resources without an intended use into wiki pages",
    )
    parser.add_argument("--report", type=Path, help="Write a JSON summary of the export to this path")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    service = ExportService(ctx.paths, convert_html_to_pages=args.convert_html_to_pages)
    result = service.run(load_resources(ctx.manifest_path))

    ctx.console.print(render_file_map(result.course.file_map, title="Packaged Files"))
    archive_label = escape(str(result.archive_path)) if result.archive_path else "(none: no files registered)"
    ctx.console.print(
        Panel.fit(
            f"Assignments: {len(result.course.assignments)}\n"
            f"Pages: {len(result.course.wikis)}\n"
            f"Syllabus: {'yes' if result.course.syllabus_body is not None else 'no'}\n"
            f"Files written: {result.stats.written}\n"
            f"Errored: {len(result.errored)}\n"
            f"Archive: {archive_label}",
            title="Export Summary",
        )
    )

    if args.report:
        write_report(args.report, result)
        ctx.console.print(f"[green]Report written[/green] {args.report}")

    return 1 if result.errored else 0


def build_report(result: ExportResult) -> dict[str, object]:
    return {
        "exported_at": now_utc_iso(),
        "archive_path": str(result.archive_path) if result.archive_path else None,
        "assignments": [a.migration_id for a in result.course.assignments],
        "pages": [p.migration_id for p in result.course.wikis],
        "has_syllabus": result.course.syllabus_body is not None,
        "files": {
            entry.migration_id: {
                "path_name": entry.path_name,
                "file_name": entry.file_name,
                "locked": entry.locked,
                "errored": entry.errored,
            }
            for entry in result.course.file_map.values()
        },
        "errored_paths": [entry.path_name for entry in result.errored],
        "skipped_resources": list(result.classification.skipped),
    }


def write_report(path: Path, result: ExportResult) -> None:
    ensure_directory(path.parent)
    path.write_text(json.dumps(build_report(result), indent=2, ensure_ascii=True) + "\n", encoding="utf-8")
