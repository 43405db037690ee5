# hmmerws/models/base.py

from typing import ClassVar
import logging
import xml.etree.ElementTree as ET

from hmmerws.exceptions import FileOperationError


class XmlSerializable:
    """Interface for models that can be serialized to/from XML"""

    # Class variable defining XML element path for finding elements
    xml_element_path: ClassVar[str] = ""

    @classmethod
    def from_xml(cls, element: ET.Element) -> 'XmlSerializable':
        """Create instance from XML Element"""
        raise NotImplementedError("Subclasses must implement from_xml")

    def to_xml(self) -> ET.Element:
        """Convert to XML Element"""
        raise NotImplementedError("Subclasses must implement to_xml")

    @classmethod
    def from_xml_file(cls, file_path: str) -> 'XmlSerializable':
        """Create instance from the root element of an XML file"""
        from hmmerws.utils.xml_core import parse_xml_file

        root = parse_xml_file(file_path).getroot()
        return cls.from_xml(root)

    def to_xml_file(self, file_path: str) -> None:
        """Save to XML file"""
        from hmmerws.utils.xml_core import element_to_pretty_string

        xml_string = element_to_pretty_string(self.to_xml())
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(xml_string)
        except OSError as e:
            logging.getLogger(__name__).error(f"Error saving XML: {str(e)}")
            raise FileOperationError(f"Cannot write {file_path}: {str(e)}",
                                     {'file_path': str(file_path)}) from e
