"""
MAVLink XML parser: reads a dialect file into a declaration tree.
"""
from pathlib import Path
from typing import List, Optional, Union

from lxml import etree

from .tree import (
    DeprecatedNode,
    DialectNode,
    EntryNode,
    EnumNode,
    ExtensionsMarker,
    FieldNode,
    MessageChild,
    MessageNode,
    ParamNode,
    WipMarker,
)


def parse_int(text: str) -> int:
    """
    Parse an integer literal as written in MAVLink XML.

    Examples:
        >>> parse_int("0x10")
        16
        >>> parse_int("0010")
        10
    """
    text = text.strip()
    try:
        return int(text, 0)
    except ValueError:
        return int(text, 10)


def _text(elem: Optional[etree._Element]) -> Optional[str]:
    """All text inside an element, nested markup included."""
    if elem is None:
        return None
    text = "".join(elem.itertext()).strip()
    return text or None


class MAVLinkParser:
    """Parser for MAVLink XML definition files."""

    def parse_file(self, path: Union[str, Path]) -> DialectNode:
        """
        Parse a single MAVLink XML file.

        Args:
            path: Path of the XML file (e.g., "common.xml")

        Returns:
            Declaration tree named after the file stem
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"MAVLink XML file not found: {file_path}")

        tree = etree.parse(str(file_path))
        return self._parse_root(tree.getroot(), file_path.stem)

    def parse_string(self, xml: Union[str, bytes], name: str) -> DialectNode:
        """Parse MAVLink XML held in memory."""
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        root = etree.fromstring(xml)
        return self._parse_root(root, name)

    def _parse_root(self, root: etree._Element, name: str) -> DialectNode:
        dialect = DialectNode(name=name)

        # Parse top-level attributes
        version_elem = root.find('version')
        if version_elem is not None and version_elem.text:
            dialect.version = parse_int(version_elem.text)

        dialect_elem = root.find('dialect')
        if dialect_elem is not None and dialect_elem.text:
            dialect.dialect = parse_int(dialect_elem.text)

        for include_elem in root.findall('include'):
            if include_elem.text:
                dialect.includes.append(include_elem.text.strip())

        enums_elem = root.find('enums')
        if enums_elem is not None:
            for enum_elem in enums_elem.findall('enum'):
                dialect.enums.append(self._parse_enum(enum_elem))

        messages_elem = root.find('messages')
        if messages_elem is not None:
            for message_elem in messages_elem.findall('message'):
                dialect.messages.append(self._parse_message(message_elem))

        return dialect

    def _parse_deprecated(self, elem: etree._Element) -> Optional[DeprecatedNode]:
        deprecated_elem = elem.find('deprecated')
        if deprecated_elem is None:
            return None
        return DeprecatedNode(
            since=deprecated_elem.get('since'),
            replaced_by=deprecated_elem.get('replaced_by'),
            text=_text(deprecated_elem),
        )

    def _parse_enum(self, elem: etree._Element) -> EnumNode:
        """Parse an <enum> element."""
        return EnumNode(
            name=elem.get('name', ''),
            description=_text(elem.find('description')),
            bitmask=elem.get('bitmask') == 'true',
            deprecated=self._parse_deprecated(elem),
            entries=[self._parse_enum_entry(entry) for entry in elem.findall('entry')],
        )

    def _parse_enum_entry(self, elem: etree._Element) -> EntryNode:
        """Parse an <entry> element within an enum."""
        value = elem.get('value')
        return EntryNode(
            name=elem.get('name', ''),
            value=parse_int(value) if value is not None else None,
            description=_text(elem.find('description')),
            has_location=elem.get('hasLocation') == 'true',
            is_destination=elem.get('isDestination') == 'true',
            wip=elem.find('wip') is not None,
            deprecated=self._parse_deprecated(elem),
            params=[self._parse_param(param) for param in elem.findall('param')],
        )

    def _parse_param(self, elem: etree._Element) -> ParamNode:
        """Parse a <param> element within an enum entry."""
        return ParamNode(
            index=parse_int(elem.get('index', '0')),
            label=elem.get('label'),
            units=elem.get('units'),
            min_value=elem.get('minValue'),
            max_value=elem.get('maxValue'),
            increment=elem.get('increment'),
            name=elem.get('name'),
            text=_text(elem),
        )

    def _parse_message(self, elem: etree._Element) -> MessageNode:
        """Parse a <message> element, keeping field/marker order."""
        children: List[MessageChild] = []
        for child in elem:
            if child.tag == 'field':
                children.append(FieldNode(
                    name=child.get('name', ''),
                    type=child.get('type', ''),
                    enum=child.get('enum'),
                    units=child.get('units'),
                    text=_text(child),
                ))
            elif child.tag == 'extensions':
                children.append(ExtensionsMarker())
            elif child.tag == 'wip':
                children.append(WipMarker())

        return MessageNode(
            id=parse_int(elem.get('id', '0')),
            name=elem.get('name', ''),
            description=_text(elem.find('description')),
            deprecated=self._parse_deprecated(elem),
            children=children,
        )
