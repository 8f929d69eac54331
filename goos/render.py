from __future__ import annotations

import re
from importlib import resources
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from . import console
from .errors import TemplateNotFoundError

TOKEN_RE = re.compile(r"\{(.*?)\}")
LEADING_WS_RE = re.compile(r"^\s*")


def upper_first(s: str) -> str:
    return s[:1].upper() + s[1:] if s else s


def table_params(table: str) -> Dict[str, str]:
    """Tokens every per-table template can use."""
    return {
        "lowCamelName": table,
        "upCamelName": upper_first(table),
    }


def read_template(name: str, templates_dir: Optional[Path] = None) -> str:
    """Read a template, preferring templates_dir over the bundled copies."""
    if templates_dir is not None:
        override = Path(templates_dir) / name
        if override.is_file():
            return override.read_text(encoding="utf-8")
    bundled = resources.files("goos") / "templates" / name
    if not bundled.is_file():
        raise TemplateNotFoundError(f"template not found: {name}")
    return bundled.read_text(encoding="utf-8")


def render_line(line: str, params: Mapping[str, str]) -> str:
    out = line
    indent = LEADING_WS_RE.match(line).group(0)
    for key in TOKEN_RE.findall(line):
        if key not in params:
            continue
        value = params[key]
        if "\n" in value:
            value = value.replace("\n", "\n" + indent)
        out = out.replace("{" + key + "}", value)
    return out


def render_text(text: str, params: Mapping[str, str]) -> List[str]:
    return [render_line(line, params) for line in text.splitlines()]


def render_template(name: str, params: Mapping[str, str], templates_dir: Optional[Path] = None) -> List[str]:
    return render_text(read_template(name, templates_dir), params)


def join_lines(lines: List[str]) -> str:
    return "".join(line + "\n" for line in lines)


def write_text(target: Path, content: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists():
        console.info(f"delete exist file {target.resolve()}")
    console.info(f"writing file {target.resolve()}")
    target.write_text(content, encoding="utf-8")
