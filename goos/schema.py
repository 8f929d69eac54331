"""
Schema file reader.

Schema files are JavaScript modules exporting an array of object literals,
formatted one property per line (IDE default style):

    module.exports = [
      {
        key: 'id',
        dataType: 'int',   // inline comments are fine
        showType: 'between',
      },
    ];

This is not a JavaScript parser. Brackets outside string literals are matched
on a stack to find the top-level objects, only the properties the generator
cares about are kept (several may share a line), and the result is repaired
into JSON and handed to json.loads once.
Objects written on a single line at the top level are not recognised.
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, List, Tuple

from .errors import SchemaError

SKIP_PREFIXES = ("//", "/*", "*", "import", "module.exports")
KEPT_PROPS = {"key", "dataType", "showType", "max"}
PAIRS = {"}": "{", "]": "["}

# one `name: value` member; a value opening a nested literal ends the scan
PROP_RE = re.compile(
    r"""\s*['"]?([A-Za-z_$][\w$]*)['"]?\s*:\s*"""
    r"""('(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*"|[^,'"\[{]*?)\s*(?:,|$)"""
)
SINGLE_QUOTED_RE = re.compile(r"^'((?:[^'\\]|\\.)*)'$")
TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")


def parse_schema_file(path: Path) -> List[Dict[str, object]]:
    return parse_schema_text(Path(path).read_text(encoding="utf-8", errors="replace"))


def parse_schema_text(text: str) -> List[Dict[str, object]]:
    stack: List[str] = []
    objects: List[List[str]] = []
    props: List[str] = []

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(SKIP_PREFIXES):
            continue
        code = strip_comment(line).strip()

        # wait for the first top-level object
        if not stack:
            if code == "{":
                stack.append("{")
                props = []
            continue

        # only members of the top-level object itself are fields
        if len(stack) == 1:
            props.extend(kept_properties(code))
        match_brackets(code, stack)
        if not stack:
            objects.append(props)

    if not objects:
        raise SchemaError("no top-level schema object found")

    doc = "[" + ",".join("{" + ",".join(p) + "}" for p in objects) + "]"
    doc = strip_trailing_commas(doc)
    try:
        data = json.loads(doc)
    except ValueError as exc:
        raise SchemaError(f"schema is not convertible to JSON: {exc}") from exc
    return data


def _string_spans(line: str) -> List[Tuple[int, str]]:
    """(index, char) pairs of the line that are outside string literals."""
    out: List[Tuple[int, str]] = []
    quote = ""
    escaped = False
    for i, ch in enumerate(line):
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = ""
            continue
        if ch in "'\"`":
            quote = ch
            continue
        out.append((i, ch))
    return out


def strip_comment(line: str) -> str:
    prev = -2
    for i, ch in _string_spans(line):
        if ch == "/":
            if prev == i - 1:
                return line[:prev]
            prev = i
    return line


def match_brackets(code: str, stack: List[str]) -> None:
    """Push openers and pop closers of one line, ignoring string contents."""
    for _, ch in _string_spans(code):
        if ch in "{[":
            stack.append(ch)
        elif ch in PAIRS:
            # the top-level object is closed, the rest is the outer array
            if not stack:
                return
            if stack[-1] != PAIRS[ch]:
                raise SchemaError(f"unbalanced {ch!r} in line: {code}")
            stack.pop()


def kept_properties(code: str) -> List[str]:
    """JSON members for the wanted properties written on one line."""
    out: List[str] = []
    pos = 0
    while pos < len(code):
        m = PROP_RE.match(code, pos)
        if not m or m.end() == pos:
            break
        name, value = m.group(1), m.group(2).strip()
        if name in KEPT_PROPS:
            out.append(f'"{name}": {json_value(value)}')
        pos = m.end()
    return out


def json_value(value: str) -> str:
    m = SINGLE_QUOTED_RE.match(value)
    if m:
        return json.dumps(m.group(1).replace("\\'", "'"))
    return value


def strip_trailing_commas(doc: str) -> str:
    # {a:1, b:2,} is a valid JS object but not valid JSON
    return TRAILING_COMMA_RE.sub(r"\1", doc)
