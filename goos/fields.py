from __future__ import annotations

from typing import Dict, List, Mapping, Tuple

from . import console
from .errors import SchemaError, UnknownDataTypeError

# special key in data schemas used for custom row actions, never a column
ACTION_KEY = "singleRecordActions"

DEFAULT_DATA_TYPE = "varchar"
DEFAULT_SHOW_TYPE = "normal"

JAVA_TYPES: Dict[str, str] = {
    "int": "Long",
    "float": "Double",
    "varchar": "String",
    "datetime": "Date",
}
# only these can be queried by range
RANGE_TYPES = {"int", "float", "datetime"}

LIST_SHOW_TYPES = {"checkbox", "multiSelect", "multiselect"}
UPLOAD_SHOW_TYPES = {"file", "image"}


def java_type(data_type: str) -> str:
    try:
        return JAVA_TYPES[data_type]
    except KeyError:
        raise UnknownDataTypeError(data_type) from None


def single_field(data_type: str, key: str) -> str:
    return f"private {java_type(data_type)} {key};"


def list_field(data_type: str, key: str) -> str:
    return f"private List<{java_type(data_type)}> {key};"


def between_field(data_type: str, key: str) -> List[str]:
    """Two fields for a range query: <key>Begin and <key>End."""
    if data_type not in RANGE_TYPES:
        raise UnknownDataTypeError(data_type, "between")
    t = JAVA_TYPES[data_type]
    return [f"private {t} {key}Begin;", f"private {t} {key}End;"]


def _field_key(field: Mapping[str, object]) -> str:
    key = field.get("key")
    if not isinstance(key, str) or not key:
        raise SchemaError(f"field has no key: {dict(field)}")
    return key


def _types(field: Mapping[str, object]) -> Tuple[str, str]:
    # only a missing or null value falls back to the default
    data_type = field.get("dataType")
    show_type = field.get("showType")
    if data_type is None:
        data_type = DEFAULT_DATA_TYPE
    if show_type is None:
        show_type = DEFAULT_SHOW_TYPE
    return data_type, show_type


def query_field_lines(field: Mapping[str, object]) -> List[str]:
    key = _field_key(field)
    data_type, show_type = _types(field)

    if show_type == "between":
        return between_field(data_type, key)
    if show_type in LIST_SHOW_TYPES:
        return [list_field(data_type, key)]
    return [single_field(data_type, key)]


def data_field_lines(field: Mapping[str, object]) -> List[str]:
    key = _field_key(field)
    if key == ACTION_KEY:
        console.info(f"skip field {ACTION_KEY}")
        return []
    data_type, show_type = _types(field)

    if show_type in UPLOAD_SHOW_TYPES:
        # a single upload unless more than one is allowed
        if field.get("max") is None or int(field["max"]) == 1:
            return [single_field(data_type, key)]
        return [list_field(data_type, key)]

    if show_type in LIST_SHOW_TYPES or show_type == "imageArray":
        return [list_field(data_type, key)]
    return [single_field(data_type, key)]
