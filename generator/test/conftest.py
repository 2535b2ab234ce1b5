"""Shared fixtures: a small dialect built from real common.xml definitions."""
import pytest

from mavschema import MAVLinkParser, SchemaReader

SAMPLE_XML = """<?xml version="1.0"?>
<mavlink>
  <version>3</version>
  <dialect>0</dialect>
  <include>minimal.xml</include>
  <enums>
    <enum name="MAV_STATE">
      <description>System state.</description>
      <entry value="0" name="MAV_STATE_UNINIT">
        <description>Uninitialized system, state is unknown.</description>
      </entry>
      <entry value="1" name="MAV_STATE_BOOT"/>
      <entry value="2" name="MAV_STATE_CALIBRATING"/>
    </enum>
    <enum name="MAV_PROTOCOL_CAPABILITY" bitmask="true">
      <entry value="1" name="MAV_PROTOCOL_CAPABILITY_MISSION_FLOAT"/>
      <entry value="0x2" name="MAV_PROTOCOL_CAPABILITY_PARAM_FLOAT"/>
      <entry value="9223372036854775808" name="MAV_PROTOCOL_CAPABILITY_HUGE"/>
    </enum>
    <enum name="MAV_CMD">
      <description>Commands to be executed by the MAV.</description>
      <entry value="16" name="MAV_CMD_NAV_WAYPOINT" hasLocation="true" isDestination="true">
        <description>Navigate to waypoint.</description>
        <param index="1" label="Hold" units="s" minValue="0">Hold time.</param>
        <param index="2" label="Accept Radius" units="m" minValue="0">Acceptance radius.</param>
        <param index="3" label="Pass Radius" units="m">Pass radius.</param>
        <param index="4" label="Yaw" units="deg">Desired yaw angle.</param>
        <param index="5" label="Latitude">Latitude</param>
        <param index="6" label="Longitude">Longitude</param>
        <param index="7" label="Altitude" units="m">Altitude</param>
      </entry>
      <entry value="31000" name="MAV_CMD_DO_SOMETHING_COOL">
        <description>Something cool.</description>
        <param index="1" label="Cool Factor">How cool.</param>
        <param index="2">Reserved</param>
      </entry>
      <entry value="31001" name="MAV_CMD_DO_UNFINISHED">
        <wip/>
        <description>Not ready yet.</description>
      </entry>
    </enum>
  </enums>
  <messages>
    <message id="0" name="HEARTBEAT">
      <description>The heartbeat message shows that a system or component is present and responding.</description>
      <field type="uint8_t" name="type" enum="MAV_TYPE">Vehicle or component type.</field>
      <field type="uint8_t" name="autopilot" enum="MAV_AUTOPILOT">Autopilot type / class.</field>
      <field type="uint8_t" name="base_mode" enum="MAV_MODE_FLAG" display="bitmask">System mode bitmap.</field>
      <field type="uint32_t" name="custom_mode">A bitfield for use for autopilot-specific flags</field>
      <field type="uint8_t" name="system_status" enum="MAV_STATE">System status flag.</field>
      <field type="uint8_t_mavlink_version" name="mavlink_version">MAVLink version</field>
    </message>
    <message id="1" name="SYS_STATUS">
      <description>The general system state.</description>
      <field type="uint32_t" name="onboard_control_sensors_present" enum="MAV_SYS_STATUS_SENSOR" display="bitmask">Present sensors.</field>
      <field type="uint32_t" name="onboard_control_sensors_enabled" enum="MAV_SYS_STATUS_SENSOR" display="bitmask">Enabled sensors.</field>
      <field type="uint32_t" name="onboard_control_sensors_health" enum="MAV_SYS_STATUS_SENSOR" display="bitmask">Sensor health.</field>
      <field type="uint16_t" name="load" units="d%">Maximum usage.</field>
      <field type="uint16_t" name="voltage_battery" units="mV">Battery voltage.</field>
      <field type="int16_t" name="current_battery" units="cA">Battery current.</field>
      <field type="int8_t" name="battery_remaining" units="%">Battery energy remaining.</field>
      <field type="uint16_t" name="drop_rate_comm" units="c%">Communication drop rate.</field>
      <field type="uint16_t" name="errors_comm">Communication errors.</field>
      <field type="uint16_t" name="errors_count1">Autopilot-specific errors</field>
      <field type="uint16_t" name="errors_count2">Autopilot-specific errors</field>
      <field type="uint16_t" name="errors_count3">Autopilot-specific errors</field>
      <field type="uint16_t" name="errors_count4">Autopilot-specific errors</field>
      <extensions/>
      <field type="uint32_t" name="onboard_control_sensors_present_extended" enum="MAV_SYS_STATUS_SENSOR_EXTENDED" display="bitmask">Present sensors.</field>
      <field type="uint32_t" name="onboard_control_sensors_enabled_extended" enum="MAV_SYS_STATUS_SENSOR_EXTENDED" display="bitmask">Enabled sensors.</field>
      <field type="uint32_t" name="onboard_control_sensors_health_extended" enum="MAV_SYS_STATUS_SENSOR_EXTENDED" display="bitmask">Sensor health.</field>
    </message>
    <message id="19" name="PARAM_ACK_TRANSACTION">
      <description>Response from a PARAM_SET message when it is used in a transaction.</description>
      <field type="uint8_t" name="target_system">Id of system that sent PARAM_SET message.</field>
      <field type="uint8_t" name="target_component">Id of system that sent PARAM_SET message.</field>
      <field type="char[16]" name="param_id">Parameter id</field>
      <field type="float" name="param_value">Parameter value</field>
      <field type="uint8_t" name="param_type" enum="MAV_PARAM_TYPE">Parameter type.</field>
      <field type="uint8_t" name="param_result" enum="PARAM_ACK">Result code.</field>
    </message>
    <message id="75" name="COMMAND_INT">
      <description>Send a command with up to seven parameters to the MAV.</description>
      <field type="uint8_t" name="target_system">System ID</field>
      <field type="uint8_t" name="target_component">Component ID</field>
      <field type="uint8_t" name="frame" enum="MAV_FRAME">The coordinate system of the COMMAND.</field>
      <field type="uint16_t" name="command" enum="MAV_CMD">The scheduled action for the mission item.</field>
      <field type="uint8_t" name="current">Not used.</field>
      <field type="uint8_t" name="autocontinue">Not used (set 0).</field>
      <field type="float" name="param1">PARAM1, see MAV_CMD enum</field>
      <field type="float" name="param2">PARAM2, see MAV_CMD enum</field>
      <field type="float" name="param3">PARAM3, see MAV_CMD enum</field>
      <field type="float" name="param4">PARAM4, see MAV_CMD enum</field>
      <field type="int32_t" name="x">PARAM5 / local: x position in meters * 1e4</field>
      <field type="int32_t" name="y">PARAM6 / local: y position in meters * 1e4</field>
      <field type="float" name="z">PARAM7 / z position</field>
    </message>
    <message id="76" name="COMMAND_LONG">
      <description>Send a command with up to seven parameters to the MAV.</description>
      <field type="uint8_t" name="target_system">System which should execute the command</field>
      <field type="uint8_t" name="target_component">Component which should execute the command</field>
      <field type="uint16_t" name="command" enum="MAV_CMD">Command ID (of command to send).</field>
      <field type="uint8_t" name="confirmation">Confirmation counter</field>
      <field type="float" name="param1">Parameter 1 (for the specific command).</field>
      <field type="float" name="param2">Parameter 2 (for the specific command).</field>
      <field type="float" name="param3">Parameter 3 (for the specific command).</field>
      <field type="float" name="param4">Parameter 4 (for the specific command).</field>
      <field type="float" name="param5">Parameter 5 (for the specific command).</field>
      <field type="float" name="param6">Parameter 6 (for the specific command).</field>
      <field type="float" name="param7">Parameter 7 (for the specific command).</field>
    </message>
    <message id="9000" name="WIP_EXPERIMENT">
      <wip/>
      <description>Not finished.</description>
      <field type="uint8_t" name="value">Value</field>
    </message>
    <message id="9001" name="OLD_THING">
      <deprecated since="2020-01" replaced_by="NEW_THING">Use NEW_THING.</deprecated>
      <description>Old.</description>
      <field type="uint8_t" name="value">Value</field>
    </message>
  </messages>
</mavlink>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def sample_tree():
    return MAVLinkParser().parse_string(SAMPLE_XML, "sample")


@pytest.fixture
def sample_dialect(sample_tree):
    return SchemaReader().read(sample_tree)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path
