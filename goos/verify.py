"""Syntax audit of generated Java sources via the javalang parser."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import javalang

from .generator import GeneratedFile


@dataclass
class AuditIssue:
    path: Path
    message: str


def check_java(source: str) -> Optional[str]:
    """Return a description of the first syntax problem, or None."""
    try:
        javalang.parse.parse(source)
    except javalang.parser.JavaSyntaxError as exc:
        msg = exc.description or "syntax error"
        at = getattr(exc, "at", None)
        pos = getattr(at, "position", None)
        if pos is not None:
            msg += f" near {at.value!r} (line {pos[0]})"
        return msg
    except javalang.tokenizer.LexerError as exc:
        return f"lexer error: {exc}"
    return None


def audit_files(files: Iterable[GeneratedFile]) -> List[AuditIssue]:
    issues: List[AuditIssue] = []
    for gf in files:
        if gf.path.suffix != ".java":
            continue
        problem = check_java(gf.content)
        if problem:
            issues.append(AuditIssue(path=gf.path, message=problem))
    return issues
