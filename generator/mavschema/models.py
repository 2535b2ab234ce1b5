"""
Intermediate representation of a compiled MAVLink dialect.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class IRModel(BaseModel):
    """
    IR nodes are frozen: attributes cannot be reassigned.

    Derive changed nodes with model_copy(); list attributes are shared with
    the copy and must not be mutated in place.
    """
    model_config = ConfigDict(frozen=True)


class Deprecation(IRModel):
    """Deprecation notice attached to an enum, enum entry or message."""
    since: Optional[str] = None
    replaced_by: Optional[str] = None
    note: str = ""


class EnumParamDef(IRModel):
    """Positional parameter metadata of an enum entry (used by MAV_CMD)."""
    index: int
    label: Optional[str] = None
    description: str = ""
    units: Optional[str] = None
    min_value: Optional[str] = None
    max_value: Optional[str] = None
    increment: Optional[str] = None
    name: Optional[str] = None


class EnumValueDef(IRModel):
    """Represents a single enum value."""
    source_name: str
    name: str
    value: Optional[int] = None  # arbitrary precision, may exceed 32 bits
    description: List[str] = Field(default_factory=list)
    params: List[EnumParamDef] = Field(default_factory=list)
    has_location: bool = False
    is_destination: bool = False
    work_in_progress: bool = False
    deprecated: Optional[Deprecation] = None


class EnumDef(IRModel):
    """Represents a MAVLink enum."""
    source_name: str
    name: str  # e.g. "MavCmd"
    description: List[str] = Field(default_factory=list)
    values: List[EnumValueDef] = Field(default_factory=list)
    is_bitmask: bool = False
    deprecated: Optional[Deprecation] = None
    common_prefix: str = ""


class FieldDef(IRModel):
    """Represents a field in a MAVLink message with its wire layout."""
    source_name: str
    name: str
    declared_type: str  # e.g. "uint8_t", "char[16]"
    type: str  # binding-level type, e.g. "string", "MavType", "float[]"
    element_type: str
    element_size: int
    array_length: Optional[int] = None
    total_size: int
    offset: int = 0
    is_extension: bool = False
    enum_name: Optional[str] = None
    units: str = ""
    description: List[str] = Field(default_factory=list)

    @property
    def is_array(self) -> bool:
        return self.array_length is not None

    @property
    def is_text(self) -> bool:
        return self.element_type == "char" and self.is_array


class MessageDef(IRModel):
    """Represents a MAVLink message."""
    id: int
    source_name: str
    name: str  # e.g. "GlobalPositionInt"
    description: List[str] = Field(default_factory=list)
    deprecated: Optional[Deprecation] = None
    fields: List[FieldDef] = Field(default_factory=list)  # declaration order

    @computed_field
    @property
    def payload_length(self) -> int:
        """Payload length with extensions (MAVLink 2 length)."""
        return sum(field.total_size for field in self.fields)

    @computed_field
    @property
    def magic(self) -> int:
        """CRC_EXTRA of the current fields."""
        from .crc import crc_extra
        return crc_extra(self.source_name, self.fields)

    @property
    def base_fields(self) -> List[FieldDef]:
        return [field for field in self.fields if not field.is_extension]

    @property
    def extension_fields(self) -> List[FieldDef]:
        return [field for field in self.fields if field.is_extension]

    @property
    def wire_fields(self) -> List[FieldDef]:
        """Fields in payload order."""
        return sorted(self.fields, key=lambda field: field.offset)

    @property
    def min_payload_length(self) -> int:
        """Payload length without extensions (MAVLink 1 length)."""
        return sum(field.total_size for field in self.base_fields)

    def get_field(self, name: str) -> Optional[FieldDef]:
        for field in self.fields:
            if field.name == name:
                return field
        return None


class CommandParamDef(IRModel):
    """A labelled MAV_CMD parameter exposed as a named accessor."""
    index: int
    name: str  # e.g. "yawAngle"
    label: str  # original label, kept for documentation
    description: str = ""
    units: Optional[str] = None
    min_value: Optional[str] = None
    max_value: Optional[str] = None
    increment: Optional[str] = None


class CommandDef(IRModel):
    """A command class synthesized from a MAV_CMD value."""
    source_name: str
    name: str
    value: Optional[int] = None
    class_name: str  # e.g. "NavWaypointCommand"
    description: List[str] = Field(default_factory=list)
    has_location: bool = False
    is_destination: bool = False
    params: List[CommandParamDef] = Field(default_factory=list)


class Dialect(IRModel):
    """A compiled MAVLink dialect (one XML file)."""
    name: str  # e.g., "minimal", "common", "ardupilotmega"
    version: Optional[int] = None
    dialect: Optional[int] = None
    includes: List[str] = Field(default_factory=list)
    enums: List[EnumDef] = Field(default_factory=list)
    messages: List[MessageDef] = Field(default_factory=list)
    commands: List[CommandDef] = Field(default_factory=list)

    @property
    def magic_numbers(self) -> Dict[int, int]:
        """Message id → CRC_EXTRA for every message of this dialect."""
        return {message.id: message.magic for message in self.messages}

    def get_message_by_name(self, name: str) -> Optional[MessageDef]:
        """Find message by class name or source name."""
        for msg in self.messages:
            if name in (msg.name, msg.source_name):
                return msg
        return None

    def get_enum_by_name(self, name: str) -> Optional[EnumDef]:
        """Find enum by class name or source name."""
        for enum in self.enums:
            if name in (enum.name, enum.source_name):
                return enum
        return None
