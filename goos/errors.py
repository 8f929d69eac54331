from __future__ import annotations


class GoosError(RuntimeError):
    """Base class for every failure raised by the generator."""


class SchemaError(GoosError):
    pass


class UnknownDataTypeError(SchemaError):
    def __init__(self, data_type: object, show_type: str = "") -> None:
        self.data_type = data_type
        self.show_type = show_type
        if show_type:
            msg = f"unknown dataType {data_type} for showType {show_type}"
        else:
            msg = f"unknown dataType {data_type}"
        super().__init__(msg)


class TemplateNotFoundError(GoosError):
    pass
