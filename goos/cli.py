from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from rich.markup import escape
from rich.table import Table

from . import console
from .generator import GenerationReport, GeneratorConfig, SchemaGenerator
from .verify import audit_files

DEFAULT_OUTPUT_DIR = "output"
USAGE = "Usage: goos [--templates DIR] [--dry-run] [--no-verify] [inputDir] [outputDir]"

TABLE_KINDS = ("QueryVO", "VO", "Controller")


def usage() -> None:
    console.err_console.print("Param incorrect.", markup=False)
    console.err_console.print(escape(USAGE))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goos",
        description="Generate admin backend Java classes from *.querySchema.js / *.dataSchema.js files",
    )
    parser.add_argument("dirs", nargs="*", metavar="DIR", help="inputDir [outputDir] (default outputDir: output)")
    parser.add_argument("--templates", help="Directory with *.sample templates overriding the bundled ones")
    parser.add_argument("--dry-run", action="store_true", help="Render everything but do not write files")
    parser.add_argument("--no-verify", action="store_true", help="Skip the javalang syntax audit")
    return parser


def show_summary(report: GenerationReport) -> None:
    if not report.tables:
        console.warn("No schema files found.")
        return
    t = Table(title="Generated tables")
    t.add_column("#", justify="right")
    t.add_column("Table")
    for kind in TABLE_KINDS:
        t.add_column(kind, justify="center")
    for i, table in enumerate(report.tables, start=1):
        kinds = report.kinds_for(table)
        t.add_row(str(i), escape(table), *("yes" if k in kinds else "-" for k in TABLE_KINDS))
    console.console.print(t)


def run(config: GeneratorConfig) -> int:
    report = SchemaGenerator(config).run()
    show_summary(report)

    rc = 0
    if report.failures:
        console.error(f"{len(report.failures)} file(s) failed")
        rc = 1
    if report.skipped_fields:
        console.warn(f"{report.skipped_fields} field(s) skipped")

    if not config.verify:
        console.info("syntax audit skipped (--no-verify)")
        return rc

    issues = audit_files(report.files)
    if not issues:
        console.info(f"syntax audit OK ({len(report.files)} file(s))")
        return rc
    for issue in issues:
        console.error(f"syntax audit: {issue.path}: {issue.message}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not 1 <= len(args.dirs) <= 2:
        usage()
        return 2

    input_dir = Path(args.dirs[0]).expanduser()
    output_dir = Path(args.dirs[1] if len(args.dirs) == 2 else DEFAULT_OUTPUT_DIR).expanduser()

    console.info(f"input directory = {input_dir}")
    console.info(f"output directory = {output_dir}")

    if not input_dir.is_dir():
        console.error(f"{input_dir} not exist")
        return 2

    templates_dir = None
    if args.templates:
        templates_dir = Path(args.templates).expanduser()
        if not templates_dir.is_dir():
            console.error(f"template directory {templates_dir} not exist")
            return 2

    if not output_dir.exists() and not args.dry_run:
        output_dir.mkdir(parents=True)
        console.info(f"mkdir {output_dir}")

    config = GeneratorConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        templates_dir=templates_dir,
        dry_run=args.dry_run,
        verify=not args.no_verify,
    )
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
