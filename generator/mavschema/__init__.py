"""
MAVLink dialect schema compiler.
"""
__version__ = "0.1.0"

from .commands import apply_command_field_renames, derive_commands
from .compiler import CompilationResult, compile_dialect, compile_dialects
from .crc import X25CRC, crc_extra
from .emitter import IREmitter
from .errors import (
    DialectError,
    MavSchemaError,
    MissingDistinguishedEnumError,
    UnknownTypeError,
)
from .models import (
    CommandDef,
    CommandParamDef,
    Deprecation,
    Dialect,
    EnumDef,
    EnumParamDef,
    EnumValueDef,
    FieldDef,
    MessageDef,
)
from .parser import MAVLinkParser
from .prefix import calculate_common_prefix, resolve_enum_prefix
from .reader import SchemaReader
from .wire_types import TYPE_SIZES, WireTypes, size_of

__all__ = [
    "CommandDef",
    "CommandParamDef",
    "CompilationResult",
    "Deprecation",
    "Dialect",
    "DialectError",
    "EnumDef",
    "EnumParamDef",
    "EnumValueDef",
    "FieldDef",
    "IREmitter",
    "MAVLinkParser",
    "MavSchemaError",
    "MessageDef",
    "MissingDistinguishedEnumError",
    "SchemaReader",
    "TYPE_SIZES",
    "UnknownTypeError",
    "WireTypes",
    "X25CRC",
    "apply_command_field_renames",
    "calculate_common_prefix",
    "compile_dialect",
    "compile_dialects",
    "crc_extra",
    "derive_commands",
    "resolve_enum_prefix",
    "size_of",
]
