"""
Command classes derived from the MAV_CMD enum, and the field renames that keep
COMMAND_INT / COMMAND_LONG wire fields clear of the generated param accessors.
"""
from typing import Iterable, List

from .errors import MissingDistinguishedEnumError
from .models import CommandDef, CommandParamDef, EnumDef, EnumValueDef, MessageDef
from .naming import label_to_identifier, name_to_class_name

COMMAND_ENUM = "MavCmd"

COMMAND_INT_FIELDS = {
    "param1": "_param1",
    "param2": "_param2",
    "param3": "_param3",
    "param4": "_param4",
    "x": "_param5",
    "y": "_param6",
    "z": "_param7",
}


def find_command_enum(enums: Iterable[EnumDef]) -> EnumDef:
    for enum in enums:
        if enum.name == COMMAND_ENUM:
            return enum
    raise MissingDistinguishedEnumError(COMMAND_ENUM)


def make_command(value: EnumValueDef) -> CommandDef:
    """Build the command record for one MAV_CMD value."""
    params = [
        CommandParamDef(
            index=param.index,
            name=label_to_identifier(param.label),
            label=param.label,
            description=param.description,
            units=param.units,
            min_value=param.min_value,
            max_value=param.max_value,
            increment=param.increment,
        )
        for param in value.params
        if param.label
    ]
    return CommandDef(
        source_name=value.source_name,
        name=value.name,
        value=value.value,
        class_name=name_to_class_name(value.name),
        description=value.description,
        has_location=value.has_location,
        is_destination=value.is_destination,
        params=params,
    )


def derive_commands(enums: Iterable[EnumDef]) -> List[CommandDef]:
    """
    Derive one command per MAV_CMD value that is not work in progress.

    Raises:
        MissingDistinguishedEnumError: no enum is named MavCmd
    """
    command_enum = find_command_enum(enums)
    return [
        make_command(value)
        for value in command_enum.values
        if not value.work_in_progress
    ]


def _rename_fields(message: MessageDef, renames: dict) -> MessageDef:
    fields = [
        field.model_copy(update={"name": renames[field.name]}) if field.name in renames else field
        for field in message.fields
    ]
    return message.model_copy(update={"fields": fields})


def apply_command_field_renames(messages: Iterable[MessageDef]) -> List[MessageDef]:
    """
    Rename the param-carrying fields of CommandInt and CommandLong.

    Only field names change; offsets and CRC_EXTRA are computed from source
    names and stay as they are.
    """
    result = []
    for message in messages:
        if message.name == "CommandInt":
            message = _rename_fields(message, COMMAND_INT_FIELDS)
        elif message.name == "CommandLong":
            renames = {
                field.name: "_" + field.name
                for field in message.fields
                if field.name.startswith("param")
            }
            message = _rename_fields(message, renames)
        result.append(message)
    return result
