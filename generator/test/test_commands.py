"""Tests for command derivation and the COMMAND_INT/COMMAND_LONG field renames."""
import pytest

from mavschema import (
    EnumDef,
    EnumParamDef,
    EnumValueDef,
    MissingDistinguishedEnumError,
    apply_command_field_renames,
    derive_commands,
)


def test_derived_commands(sample_dialect):
    assert [c.class_name for c in sample_dialect.commands] == [
        "NavWaypointCommand",
        "DoSomethingCoolCommand",
    ]


def test_command_params(sample_dialect):
    waypoint = sample_dialect.commands[0]

    assert waypoint.source_name == "MAV_CMD_NAV_WAYPOINT"
    assert waypoint.name == "NAV_WAYPOINT"
    assert waypoint.value == 16
    assert waypoint.has_location
    assert waypoint.is_destination
    assert [p.name for p in waypoint.params] == [
        "hold", "acceptRadius", "passRadius", "yaw", "latitude", "longitude", "altitude",
    ]
    assert waypoint.params[1].label == "Accept Radius"
    assert waypoint.params[1].units == "m"
    assert waypoint.params[1].min_value == "0"
    assert waypoint.params[1].description == "Acceptance radius."


def test_unlabelled_params_are_dropped(sample_dialect):
    cool = sample_dialect.commands[1]

    assert cool.class_name == "DoSomethingCoolCommand"
    assert [(p.index, p.name, p.label) for p in cool.params] == [(1, "coolFactor", "Cool Factor")]


def test_wip_commands_are_skipped():
    enum = EnumDef(source_name="MAV_CMD", name="MavCmd", values=[
        EnumValueDef(source_name="MAV_CMD_READY", name="READY", value=1),
        EnumValueDef(source_name="MAV_CMD_LATER", name="LATER", value=2, work_in_progress=True),
    ])
    assert [c.class_name for c in derive_commands([enum])] == ["ReadyCommand"]


def test_command_from_enum_value():
    enum = EnumDef(source_name="MAV_CMD", name="MavCmd", values=[
        EnumValueDef(
            source_name="MAV_CMD_DO_SOMETHING_COOL",
            name="DO_SOMETHING_COOL",
            params=[EnumParamDef(index=1, label="Cool Factor"), EnumParamDef(index=2, label="")],
        ),
    ])
    command, = derive_commands([enum])

    assert command.class_name == "DoSomethingCoolCommand"
    assert [p.name for p in command.params] == ["coolFactor"]


def test_missing_command_enum():
    other = EnumDef(source_name="MAV_STATE", name="MavState")
    with pytest.raises(MissingDistinguishedEnumError):
        derive_commands([other])


def test_command_int_renames(sample_dialect):
    command_int = sample_dialect.get_message_by_name("CommandInt")

    assert [f.name for f in command_int.fields] == [
        "targetSystem", "targetComponent", "frame", "command", "current", "autocontinue",
        "_param1", "_param2", "_param3", "_param4", "_param5", "_param6", "_param7",
    ]
    assert [f.source_name for f in command_int.fields][-3:] == ["x", "y", "z"]
    assert command_int.magic == 158


def test_command_long_renames(sample_dialect):
    command_long = sample_dialect.get_message_by_name("CommandLong")

    assert [f.name for f in command_long.fields] == [
        "targetSystem", "targetComponent", "command", "confirmation",
        "_param1", "_param2", "_param3", "_param4", "_param5", "_param6", "_param7",
    ]
    assert command_long.magic == 152


def test_renames_do_not_touch_other_messages(sample_dialect):
    heartbeat = sample_dialect.get_message_by_name("Heartbeat")
    assert not any(f.name.startswith("_") for f in heartbeat.fields)


def test_command_int_minimal(sample_dialect):
    command_int = sample_dialect.get_message_by_name("CommandInt")
    fields = [f for f in command_int.fields if f.source_name in ("param1", "x", "y", "z")]
    stripped = command_int.model_copy(update={
        "fields": [f.model_copy(update={"name": f.source_name}) for f in fields],
    })

    renamed, = apply_command_field_renames([stripped])
    assert [f.name for f in renamed.fields] == ["_param1", "_param5", "_param6", "_param7"]
    assert renamed.payload_length == sum(f.total_size for f in renamed.fields)
    assert renamed.payload_length < command_int.payload_length
