"""
Common prefix resolution for enum values.

For the enum MAV_TEST the values MAV_TEST_FIRST and MAV_TEST_SECOND become
FIRST and SECOND.
"""
import os
import string
from typing import Iterable

from .models import EnumDef


def calculate_common_prefix(enum_name: str, value_names: Iterable[str]) -> str:
    """
    Compute the underscore-aligned prefix shared by all value names.

    Args:
        enum_name: Declared enum name (e.g., "MAV_STATE")
        value_names: Declared names of the enum's values

    Returns:
        Prefix ending with "_", never empty

    Examples:
        >>> calculate_common_prefix("MAV_STATE", ["MAV_STATE_UNINIT", "MAV_STATE_BOOT"])
        'MAV_STATE_'
        >>> calculate_common_prefix("MAV_PROTOCOL_CAPABILITY",
        ...     ["MAV_PROTOCOL_CAPABILITY_MISSION_FLOAT", "MAV_PROTOCOL_CAPABILITY_MISSION_INT"])
        'MAV_PROTOCOL_CAPABILITY_'
    """
    prefix = os.path.commonprefix(list(value_names))

    # trim back to a word boundary
    while prefix and not prefix.endswith("_"):
        prefix = prefix[:-1]

    # the enum name recurs inside the value names
    if prefix.startswith(enum_name) and len(prefix) > len(enum_name) + 1:
        prefix = enum_name + "_"

    if not prefix:
        prefix = enum_name + "_"

    return prefix


def strip_prefix(name: str, prefix: str) -> str:
    """Remove `prefix` from `name` if present; otherwise return `name` unchanged."""
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


def shorten_value_name(source_name: str, prefix: str) -> str:
    """
    Short identifier for an enum value.

    Identifiers must not begin with a digit, so such values (and values
    that would become empty) keep their full source name.

    Examples:
        >>> shorten_value_name("MAV_TEST_FIRST", "MAV_TEST_")
        'FIRST'
        >>> shorten_value_name("MAV_TEST_1_FIRST", "MAV_TEST_")
        'MAV_TEST_1_FIRST'
    """
    name = strip_prefix(source_name, prefix)
    if not name or name[0] in string.digits:
        return source_name
    return name


def resolve_enum_prefix(enum: EnumDef) -> EnumDef:
    """Return a copy of `enum` with its common prefix and short value names set."""
    prefix = calculate_common_prefix(
        enum.source_name, [value.source_name for value in enum.values]
    )
    values = [
        value.model_copy(update={"name": shorten_value_name(value.source_name, prefix)})
        for value in enum.values
    ]
    return enum.model_copy(update={"common_prefix": prefix, "values": values})
