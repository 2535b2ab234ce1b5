"""
Schema reader: turns a dialect declaration tree into the IR.
"""
import logging
from typing import List, Optional

from .commands import apply_command_field_renames, derive_commands
from .errors import MissingDistinguishedEnumError
from .models import (
    CommandDef,
    Deprecation,
    Dialect,
    EnumDef,
    EnumParamDef,
    EnumValueDef,
    FieldDef,
    MessageDef,
)
from .naming import make_class_name, snake_to_camel, wrap_text
from .prefix import resolve_enum_prefix
from .tree import (
    DeprecatedNode,
    DialectNode,
    EntryNode,
    EnumNode,
    ExtensionsMarker,
    FieldNode,
    MessageNode,
    WipMarker,
)
from .wire_types import WireTypes

logger = logging.getLogger(__name__)


def field_type(declared_type: str, enum_name: Optional[str] = None) -> str:
    """
    Binding-level type of a field.

    Examples:
        >>> field_type("char[16]")
        'string'
        >>> field_type("uint8_t", "MavType")
        'MavType'
        >>> field_type("float[4]")
        'float[]'
    """
    element, length = WireTypes.split(declared_type)
    if enum_name:
        return f"{enum_name}[]" if length is not None else enum_name
    if element == "char" and length is not None:
        return "string"
    return f"{element}[]" if length is not None else element


def assign_offsets(fields: List[FieldDef]) -> List[FieldDef]:
    """
    Assign payload offsets, keeping the fields in declaration order.

    Base fields are laid out largest element first; extension fields follow
    in declaration order.
    """
    # Keyed by position; the same field may appear more than once.
    base = [i for i, field in enumerate(fields) if not field.is_extension]
    extensions = [i for i, field in enumerate(fields) if field.is_extension]
    order = sorted(base, key=lambda i: fields[i].element_size, reverse=True) + extensions

    offsets = [0] * len(fields)
    offset = 0
    for i in order:
        offsets[i] = offset
        offset += fields[i].total_size
    return [field.model_copy(update={"offset": offsets[i]}) for i, field in enumerate(fields)]


def with_layout(message: MessageDef, fields: List[FieldDef]) -> MessageDef:
    """Return `message` with new fields and freshly derived offsets; length and magic follow."""
    return message.model_copy(update={"fields": assign_offsets(fields)})


def is_work_in_progress(node: MessageNode) -> bool:
    return any(isinstance(child, WipMarker) for child in node.children)


class SchemaReader:
    """Builds a Dialect from a DialectNode."""

    def __init__(self, wrap_width: int = 100):
        """
        Args:
            wrap_width: Maximum length of description lines
        """
        self.wrap_width = wrap_width

    def read(self, tree: DialectNode) -> Dialect:
        enums = [resolve_enum_prefix(self._read_enum(node)) for node in tree.enums]

        messages = []
        for node in tree.messages:
            if is_work_in_progress(node):
                logger.debug("%s: skipping work-in-progress message %s", tree.name, node.name)
                continue
            messages.append(self._read_message(node))

        commands = self._read_commands(tree.name, enums)
        messages = apply_command_field_renames(messages)

        dialect = Dialect(
            name=tree.name,
            version=tree.version,
            dialect=tree.dialect,
            includes=list(tree.includes),
            enums=enums,
            messages=messages,
            commands=commands,
        )
        logger.info(
            "%s: %d enums, %d messages, %d commands",
            dialect.name, len(enums), len(messages), len(commands),
        )
        return dialect

    def _wrap(self, text: Optional[str]) -> List[str]:
        return wrap_text(text, self.wrap_width)

    def _read_deprecation(self, node: Optional[DeprecatedNode]) -> Optional[Deprecation]:
        if node is None:
            return None
        return Deprecation(
            since=node.since,
            replaced_by=node.replaced_by,
            note=" ".join((node.text or "").split()),
        )

    def _read_enum(self, node: EnumNode) -> EnumDef:
        return EnumDef(
            source_name=node.name,
            name=make_class_name(node.name),
            description=self._wrap(node.description),
            values=[self._read_enum_value(entry) for entry in node.entries],
            is_bitmask=node.bitmask,
            deprecated=self._read_deprecation(node.deprecated),
        )

    def _read_enum_value(self, node: EntryNode) -> EnumValueDef:
        # name is shortened later by resolve_enum_prefix
        return EnumValueDef(
            source_name=node.name,
            name=node.name,
            value=node.value,
            description=self._wrap(node.description),
            params=[
                EnumParamDef(
                    index=param.index,
                    label=param.label,
                    description=" ".join((param.text or "").split()),
                    units=param.units,
                    min_value=param.min_value,
                    max_value=param.max_value,
                    increment=param.increment,
                    name=param.name,
                )
                for param in node.params
            ],
            has_location=node.has_location,
            is_destination=node.is_destination,
            work_in_progress=node.wip,
            deprecated=self._read_deprecation(node.deprecated),
        )

    def _read_message(self, node: MessageNode) -> MessageDef:
        fields = []
        is_extension = False
        for child in node.children:
            if isinstance(child, ExtensionsMarker):
                is_extension = True
            elif isinstance(child, FieldNode):
                fields.append(self._read_field(child, is_extension))

        message = MessageDef(
            id=node.id,
            source_name=node.name,
            name=make_class_name(node.name),
            description=self._wrap(node.description),
            deprecated=self._read_deprecation(node.deprecated),
        )
        return with_layout(message, fields)

    def _read_field(self, node: FieldNode, is_extension: bool) -> FieldDef:
        element_type, array_length = WireTypes.split(node.type)
        element_size = WireTypes.size_of(node.type)
        enum_name = make_class_name(node.enum) if node.enum else None
        return FieldDef(
            source_name=node.name,
            name=snake_to_camel(node.name),
            declared_type=node.type,
            type=field_type(node.type, enum_name),
            element_type=element_type,
            element_size=element_size,
            array_length=array_length,
            total_size=element_size * (array_length or 1),
            is_extension=is_extension,
            enum_name=enum_name,
            units=node.units or "",
            description=self._wrap(node.text),
        )

    def _read_commands(self, dialect_name: str, enums: List[EnumDef]) -> List[CommandDef]:
        try:
            return derive_commands(enums)
        except MissingDistinguishedEnumError:
            logger.debug("%s: no MavCmd enum, no commands derived", dialect_name)
            return []
