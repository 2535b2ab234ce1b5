"""
Identifier normalization for generated bindings.
"""
import re
from typing import List, Optional

ORDINALS = {
    "4th": "fourth",
    "5th": "fifth",
    "6th": "sixth",
}

_SNAKE_HUMP_RE = re.compile(r"[-_](\w)")
_SPACE_HUMP_RE = re.compile(r"\s+(\w)?", re.ASCII)
_HYPHEN_RUN_RE = re.compile(r"-\S+")
_DOT_RUN_RE = re.compile(r"\.\S+")
_WORD_RE = re.compile(r"\w\S*")


def snake_to_camel(name: str) -> str:
    """
    Examples:
        >>> snake_to_camel("base_mode")
        'baseMode'
    """
    return _SNAKE_HUMP_RE.sub(lambda m: m.group(1).upper(), name)


def snake_to_pascal(name: str) -> str:
    camel = snake_to_camel(name)
    return camel[:1].upper() + camel[1:]


def make_class_name(name: str) -> str:
    """
    Convert a MAVLink enum or message name to a class name (PascalCase).

    Examples:
        >>> make_class_name("MAV_CMD")
        'MavCmd'
        >>> make_class_name("GLOBAL_POSITION_INT")
        'GlobalPositionInt'
    """
    return snake_to_pascal(name.lower())


def _hump(match: "re.Match") -> str:
    run = match.group(0)
    return run[1:2].upper() + run[2:]


def label_to_identifier(label: str) -> str:
    """
    Convert a free-text parameter label to a camelCase identifier.

    The order matters: humps are formed before the ordinal and "command"
    substitutions are applied.

    Examples:
        >>> label_to_identifier("Cool Factor")
        'coolFactor'
        >>> label_to_identifier("Latitude/X")
        'latitude'
        >>> label_to_identifier("Target command id")
        'targetCommandId'
    """
    result = label.lower()
    result = _SPACE_HUMP_RE.sub(lambda m: (m.group(1) or "").upper(), result)
    result = result.split("/")[0]
    result = _HYPHEN_RUN_RE.sub(_hump, result)
    result = _HYPHEN_RUN_RE.sub(_hump, result)
    result = _DOT_RUN_RE.sub(_hump, result)
    for ordinal, word in ORDINALS.items():
        result = result.replace(ordinal, word)
    return result.replace("command", "cmd")


def name_to_class_name(name: str) -> str:
    """
    Convert a MAV_CMD value name to a command class name.

    Examples:
        >>> name_to_class_name("NAV_WAYPOINT")
        'NavWaypointCommand'
    """
    spaced = name.replace("_", " ")
    titled = _WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), spaced)
    return titled.replace(" ", "") + "Command"


def wrap_text(text: Optional[str], width: int = 100) -> List[str]:
    """
    Collapse whitespace and split text into lines of at most `width` chars.

    Words longer than `width` are cut and continued on the next line, with a
    trailing "-" marking the cut.

    Examples:
        >>> wrap_text("  This is\\n   a test ")
        ['This is a test']
        >>> wrap_text(None)
        []
    """
    if not text:
        return []

    words = text.split()
    lines = []
    current_line: List[str] = []
    current_length = 0

    for word in words:
        while len(word) > width:
            if current_line:
                lines.append(" ".join(current_line))
                current_line = []
                current_length = 0
            lines.append(word[:width] + "-")
            word = word[width:]

        word_length = len(word) + (1 if current_line else 0)
        if current_line and current_length + word_length > width:
            lines.append(" ".join(current_line))
            current_line = [word]
            current_length = len(word)
        elif word:
            current_line.append(word)
            current_length += word_length

    if current_line:
        lines.append(" ".join(current_line))

    return lines
