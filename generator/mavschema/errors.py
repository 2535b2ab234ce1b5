"""
Exceptions raised while compiling MAVLink dialects.
"""
from pathlib import Path
from typing import Union


class MavSchemaError(Exception):
    """Base class for all schema compiler errors."""


class UnknownTypeError(MavSchemaError):
    """A field names a primitive type outside the MAVLink type table."""

    def __init__(self, type_name: str):
        super().__init__(f"Unknown type {type_name}")
        self.type_name = type_name


class MissingDistinguishedEnumError(MavSchemaError):
    """No enum in the dialect resolves to MavCmd."""

    def __init__(self, enum_name: str = "MavCmd"):
        super().__init__(f"Dialect has no {enum_name} enum")
        self.enum_name = enum_name


class DialectError(MavSchemaError):
    """Processing of a single dialect file failed."""

    def __init__(self, path: Union[str, Path], cause: Exception):
        super().__init__(f"{path}: {cause}")
        self.path = str(path)
        self.cause = cause
