"""
Wire type table: MAVLink primitive types and their byte widths.
"""
import re
from typing import Dict, Optional, Tuple

from .errors import UnknownTypeError

VERSION_MARKER_TYPE = "uint8_t_mavlink_version"

# MAVLink primitive type → size in bytes
TYPE_SIZES: Dict[str, int] = {
    # 1 byte
    "char": 1,
    "int8_t": 1,
    "uint8_t": 1,
    VERSION_MARKER_TYPE: 1,

    # 2 bytes
    "int16_t": 2,
    "uint16_t": 2,

    # 4 bytes
    "int32_t": 4,
    "uint32_t": 4,
    "float": 4,

    # 8 bytes
    "int64_t": 8,
    "uint64_t": 8,
    "double": 8,
}

_ARRAY_RE = re.compile(r"^(.*)\[(\d+)\]$")


class WireTypes:
    """Lookups over declared MAVLink field types (e.g. "uint8_t", "char[16]")."""

    @classmethod
    def split(cls, declared_type: str) -> Tuple[str, Optional[int]]:
        """
        Split a declared type into element type and array length.

        Examples:
            >>> WireTypes.split("float")
            ('float', None)
            >>> WireTypes.split("char[16]")
            ('char', 16)
        """
        match = _ARRAY_RE.match(declared_type.strip())
        if match is None:
            return declared_type.strip(), None
        return match.group(1), int(match.group(2))

    @classmethod
    def element_type(cls, declared_type: str) -> str:
        """Get the element type without array notation."""
        return cls.split(declared_type)[0]

    @classmethod
    def array_length(cls, declared_type: str) -> Optional[int]:
        """Extract the array length, or None for scalar types."""
        return cls.split(declared_type)[1]

    @classmethod
    def is_array(cls, declared_type: str) -> bool:
        return cls.array_length(declared_type) is not None

    @classmethod
    def is_text(cls, declared_type: str) -> bool:
        """char[N] is carried as a string value, whatever N is."""
        element, length = cls.split(declared_type)
        return element == "char" and length is not None

    @classmethod
    def size_of(cls, declared_type: str) -> int:
        """
        Size in bytes of a type, or of one element for array types.

        Args:
            declared_type: MAVLink field type (e.g., "uint16_t", "float[4]")

        Returns:
            Element size in bytes; callers multiply by the array length

        Raises:
            UnknownTypeError: the element type is not a MAVLink primitive

        Examples:
            >>> WireTypes.size_of("uint16_t")
            2
            >>> WireTypes.size_of("float[4]")
            4
        """
        element = cls.element_type(declared_type)
        try:
            return TYPE_SIZES[element]
        except KeyError:
            raise UnknownTypeError(element) from None

    @classmethod
    def crc_type_name(cls, element_type: str) -> str:
        """Type name used in the CRC_EXTRA seed string."""
        if element_type == VERSION_MARKER_TYPE:
            return "uint8_t"
        return element_type


size_of = WireTypes.size_of
