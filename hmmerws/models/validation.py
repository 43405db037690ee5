#!/usr/bin/env python3
"""
Records from the wwPDB structure validation report schema.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Dict
import xml.etree.ElementTree as ET

from hmmerws.exceptions import ValidationError
from hmmerws.models.base import XmlSerializable
from hmmerws.utils.xml_core import required_attribute


def _to_decimal(element: ET.Element, name: str) -> Decimal:
    value = required_attribute(element, name)
    try:
        return Decimal(value)
    except InvalidOperation as e:
        raise ValidationError(f"<{element.tag}> attribute '{name}' is not a number: {value!r}",
                              {'attribute': name, 'value': value}) from e


@dataclass
class Clash(XmlSerializable):
    """A steric clash involving one atom

    The two atoms of a clash share the same ``cid``.
    """
    atom: str
    cid: int
    clashmag: Decimal
    dist: Decimal

    xml_element_path: ClassVar[str] = ".//clash"

    @classmethod
    def from_xml(cls, element: ET.Element) -> 'Clash':
        """Bind a <clash> element; all four attributes are required"""
        cid = required_attribute(element, "cid")
        try:
            cid_value = int(cid)
        except ValueError as e:
            raise ValidationError(f"<clash> attribute 'cid' is not an integer: {cid!r}",
                                  {'attribute': 'cid', 'value': cid}) from e

        return cls(
            # NCName with collapsed whitespace
            atom=" ".join(required_attribute(element, "atom").split()),
            cid=cid_value,
            clashmag=_to_decimal(element, "clashmag"),
            dist=_to_decimal(element, "dist"),
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element("clash")
        element.set("atom", self.atom)
        element.set("cid", str(self.cid))
        element.set("clashmag", str(self.clashmag))
        element.set("dist", str(self.dist))
        return element

    def to_dict(self) -> Dict[str, Any]:
        return {
            "atom": self.atom,
            "cid": self.cid,
            "clashmag": float(self.clashmag),
            "dist": float(self.dist),
        }
