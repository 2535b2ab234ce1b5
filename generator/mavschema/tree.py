"""
Declaration tree: the raw shape of a MAVLink XML dialect before analysis.

Message bodies keep their children in document order as a closed set of
variants, so the reader can find the extension boundary and work-in-progress
markers by position.
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class DeprecatedNode(BaseModel):
    since: Optional[str] = None
    replaced_by: Optional[str] = None
    text: Optional[str] = None


class ParamNode(BaseModel):
    """A <param> element within an enum entry."""
    index: int
    label: Optional[str] = None
    units: Optional[str] = None
    min_value: Optional[str] = None
    max_value: Optional[str] = None
    increment: Optional[str] = None
    name: Optional[str] = None
    text: Optional[str] = None


class EntryNode(BaseModel):
    """An <entry> element within an enum."""
    name: str
    value: Optional[int] = None
    description: Optional[str] = None
    has_location: bool = False
    is_destination: bool = False
    wip: bool = False
    deprecated: Optional[DeprecatedNode] = None
    params: List[ParamNode] = Field(default_factory=list)


class EnumNode(BaseModel):
    """An <enum> element."""
    name: str
    description: Optional[str] = None
    bitmask: bool = False
    deprecated: Optional[DeprecatedNode] = None
    entries: List[EntryNode] = Field(default_factory=list)


class FieldNode(BaseModel):
    """A <field> element within a message."""
    kind: Literal["field"] = "field"
    name: str
    type: str  # e.g., "uint8_t", "float", "char[16]"
    enum: Optional[str] = None
    units: Optional[str] = None
    text: Optional[str] = None


class ExtensionsMarker(BaseModel):
    """<extensions/>: every following field is an extension field."""
    kind: Literal["extensions"] = "extensions"


class WipMarker(BaseModel):
    """<wip/>: the message is work in progress."""
    kind: Literal["wip"] = "wip"


MessageChild = Annotated[
    Union[FieldNode, ExtensionsMarker, WipMarker],
    Field(discriminator="kind"),
]


class MessageNode(BaseModel):
    """A <message> element."""
    id: int
    name: str
    description: Optional[str] = None
    deprecated: Optional[DeprecatedNode] = None
    children: List[MessageChild] = Field(default_factory=list)


class DialectNode(BaseModel):
    """Root of one dialect file."""
    name: str
    version: Optional[int] = None
    dialect: Optional[int] = None
    includes: List[str] = Field(default_factory=list)
    enums: List[EnumNode] = Field(default_factory=list)
    messages: List[MessageNode] = Field(default_factory=list)
