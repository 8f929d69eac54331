"""Tests for the javalang syntax audit."""

from __future__ import annotations

from pathlib import Path

from goos.generator import GeneratedFile, GeneratorConfig, SchemaGenerator
from goos.verify import audit_files, check_java


def test_valid_source():
    assert check_java("public class A { private Long id; }") is None


def test_syntax_error_described():
    problem = check_java("public class A { private Long ; }")
    assert problem is not None


def test_bundled_output_is_valid_java(schema_dir, out_dir):
    report = SchemaGenerator(GeneratorConfig(input_dir=schema_dir, output_dir=out_dir, dry_run=True)).run()
    assert len(report.files) == 6
    assert audit_files(report.files) == []


def test_audit_reports_only_broken_java():
    files = [
        GeneratedFile(path=Path("ok/OkVO.java"), content="class OkVO {}", kind="VO", table="ok"),
        GeneratedFile(path=Path("bad/BadVO.java"), content="class BadVO { int }", kind="VO", table="bad"),
        GeneratedFile(path=Path("notes.txt"), content="not java {", kind="common"),
    ]
    issues = audit_files(files)
    assert [i.path for i in issues] == [Path("bad/BadVO.java")]
