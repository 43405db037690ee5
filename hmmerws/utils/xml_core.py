# hmmerws/utils/xml_core.py
import xml.etree.ElementTree as ET
import logging
from typing import List, Optional, TypeVar, Type, Callable

from hmmerws.exceptions import FileOperationError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def parse_xml_file(file_path: str) -> ET.ElementTree:
    """Parse XML file

    Raises:
        FileOperationError: If the file cannot be read or is not well-formed
    """
    try:
        return ET.parse(file_path)
    except ET.ParseError as e:
        logger.error(f"XML parsing error for {file_path}: {str(e)}")
        raise FileOperationError(f"Malformed XML in {file_path}: {str(e)}",
                                 {'file_path': str(file_path)}) from e
    except OSError as e:
        logger.error(f"Error reading XML file {file_path}: {str(e)}")
        raise FileOperationError(f"Cannot read {file_path}: {str(e)}",
                                 {'file_path': str(file_path)}) from e


def required_attribute(element: ET.Element, name: str) -> str:
    """Return an attribute value, raising ValidationError when absent"""
    value = element.get(name)
    if value is None:
        raise ValidationError(f"<{element.tag}> is missing required attribute '{name}'",
                              {'tag': element.tag, 'attribute': name})
    return value


def element_to_pretty_string(element: ET.Element) -> str:
    """Convert Element to pretty-formatted XML string"""
    from xml.dom import minidom
    rough_string = ET.tostring(element, 'utf-8')
    reparsed = minidom.parseString(rough_string)
    return reparsed.toprettyxml(indent="  ")


def process_xml_with_model(
    xml_path: str,
    element_path: str,
    model_class: Type[T],
    from_xml_method: Optional[Callable[[ET.Element], T]] = None
) -> List[T]:
    """
    Process XML file and convert elements to model instances

    Args:
        xml_path: Path to XML file
        element_path: XPath to elements
        model_class: Model class to instantiate
        from_xml_method: Method to convert element to model (default: model_class.from_xml)

    Returns:
        List of model instances
    """
    if from_xml_method is None:
        from_xml_method = model_class.from_xml

    root = parse_xml_file(xml_path).getroot()
    return [from_xml_method(element) for element in root.iterfind(element_path)]
