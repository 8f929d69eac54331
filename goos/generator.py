from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Set

from . import console
from .errors import GoosError
from .fields import data_field_lines, query_field_lines
from .render import join_lines, read_template, render_template, table_params, write_text
from .schema import parse_schema_file

QUERY_SCHEMA_RE = re.compile(r"^(.*)\.querySchema\.js$")
DATA_SCHEMA_RE = re.compile(r"^(.*)\.dataSchema\.js$")

# copied verbatim into the output root, no rendering
COMMON_FILES = (
    ("LoginController.sample", "LoginController.java"),
    ("CommonResult.sample", "CommonResult.java"),
    ("UploadController.sample", "UploadController.java"),
)

FieldRule = Callable[[Mapping[str, object]], List[str]]


@dataclass
class GeneratorConfig:
    input_dir: Path
    output_dir: Path
    templates_dir: Optional[Path] = None
    dry_run: bool = False
    verify: bool = True


@dataclass
class GeneratedFile:
    path: Path
    content: str
    kind: str
    table: Optional[str] = None


@dataclass
class GenerationFailure:
    kind: str
    source: str
    message: str


@dataclass
class GenerationReport:
    tables: List[str] = field(default_factory=list)
    files: List[GeneratedFile] = field(default_factory=list)
    failures: List[GenerationFailure] = field(default_factory=list)
    skipped_fields: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures

    def kinds_for(self, table: str) -> Set[str]:
        return {f.kind for f in self.files if f.table == table}


class SchemaGenerator:
    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.report = GenerationReport()
        self._seen_tables: Set[str] = set()

    def run(self) -> GenerationReport:
        for path in sorted(self.config.input_dir.iterdir()):
            if not path.is_file():
                continue
            table: Optional[str] = None

            m = QUERY_SCHEMA_RE.match(path.name)
            if m:
                table = m.group(1)
                self.generate_query_vo(path, table)

            m = DATA_SCHEMA_RE.match(path.name)
            if m:
                table = m.group(1)
                self.generate_vo(path, table)

            if table is not None and table not in self._seen_tables:
                self._seen_tables.add(table)
                self.report.tables.append(table)
                self.generate_controller(table)

        # per-table classes are done, now the shared ones
        self.copy_common_files()
        return self.report

    def generate_query_vo(self, schema_file: Path, table: str) -> None:
        self._generate_from_schema(schema_file, table, "QueryVO", query_field_lines)

    def generate_vo(self, schema_file: Path, table: str) -> None:
        self._generate_from_schema(schema_file, table, "VO", data_field_lines)

    def generate_controller(self, table: str) -> None:
        console.info(f"generating Controller for {table}")
        try:
            self._render(table, "Controller", table_params(table))
        except (GoosError, OSError, ValueError) as exc:
            self._fail("Controller", table, exc)

    def copy_common_files(self) -> None:
        for template, name in COMMON_FILES:
            try:
                content = read_template(template, self.config.templates_dir)
                self._emit(self.config.output_dir / name, content, kind="common")
            except (GoosError, OSError) as exc:
                self._fail("common", name, exc)

    def _generate_from_schema(self, schema_file: Path, table: str, kind: str, rule: FieldRule) -> None:
        console.info(f"generating {kind} for {table}")
        try:
            schema = parse_schema_file(schema_file)
            params = table_params(table)
            params["fields"] = self._field_block(schema, rule)
            self._render(table, kind, params)
        except (GoosError, OSError, ValueError) as exc:
            self._fail(kind, str(schema_file.resolve()), exc)

    def _field_block(self, schema: List[Dict[str, object]], rule: FieldRule) -> str:
        lines: List[str] = []
        for fld in schema:
            # one bad field must not sink the whole file
            try:
                lines.extend(rule(fld))
            except (GoosError, KeyError, TypeError, ValueError) as exc:
                self.report.skipped_fields += 1
                console.error(f"parsing field {json.dumps(fld, ensure_ascii=False)}: {exc}")
        return "\n".join(lines)

    def _render(self, table: str, kind: str, params: Dict[str, str]) -> None:
        lines = render_template(f"{kind}.sample", params, self.config.templates_dir)
        target = self.config.output_dir / table / f"{params['upCamelName']}{kind}.java"
        self._emit(target, join_lines(lines), kind=kind, table=table)

    def _emit(self, target: Path, content: str, *, kind: str, table: Optional[str] = None) -> None:
        if not self.config.dry_run:
            write_text(target, content)
        self.report.files.append(GeneratedFile(path=target, content=content, kind=kind, table=table))

    def _fail(self, kind: str, source: str, exc: Exception) -> None:
        console.error(f"generating {kind} ERROR: {source}")
        console.trace()
        self.report.failures.append(GenerationFailure(kind=kind, source=source, message=str(exc)))
