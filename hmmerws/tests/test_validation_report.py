#!/usr/bin/env python3
"""
Tests for the Clash record and validation report reading.
"""

from decimal import Decimal
import xml.etree.ElementTree as ET

import pytest

from hmmerws.exceptions import FileOperationError, ValidationError
from hmmerws.models.validation import Clash
from hmmerws.services.validation_report import (
    ResidueKey, clashes_by_residue, group_by_cid, read_clashes
)


class TestClash:
    """Binding of <clash> elements"""

    def test_from_xml(self):
        clash = Clash.from_xml(ET.fromstring('<clash atom="CD1" cid="3" clashmag="0.52" dist="2.88"/>'))

        assert clash.atom == "CD1"
        assert clash.cid == 3
        assert clash.clashmag == Decimal("0.52")
        assert clash.dist == Decimal("2.88")

    def test_atom_whitespace_collapsed(self):
        clash = Clash.from_xml(ET.fromstring('<clash atom="  OG1 " cid="1" clashmag="0.4" dist="2.5"/>'))

        assert clash.atom == "OG1"

    @pytest.mark.parametrize("missing", ["atom", "cid", "clashmag", "dist"])
    def test_required_attributes(self, missing):
        attrs = {"atom": "CA", "cid": "1", "clashmag": "0.4", "dist": "2.5"}
        del attrs[missing]
        element = ET.Element("clash", attrs)

        with pytest.raises(ValidationError) as excinfo:
            Clash.from_xml(element)
        assert missing in excinfo.value.message

    def test_non_numeric_values(self):
        with pytest.raises(ValidationError):
            Clash.from_xml(ET.fromstring('<clash atom="CA" cid="x" clashmag="0.4" dist="2.5"/>'))
        with pytest.raises(ValidationError):
            Clash.from_xml(ET.fromstring('<clash atom="CA" cid="1" clashmag="big" dist="2.5"/>'))

    def test_accessors_are_plain_fields(self):
        clash = Clash(atom="CA", cid=1, clashmag=Decimal("0.4"), dist=Decimal("2.5"))
        clash.dist = Decimal("2.7")

        assert clash.dist == Decimal("2.7")

    def test_to_xml(self):
        clash = Clash(atom="N", cid=7, clashmag=Decimal("0.61"), dist=Decimal("2.14"))
        element = clash.to_xml()

        assert element.tag == "clash"
        assert element.attrib == {"atom": "N", "cid": "7", "clashmag": "0.61", "dist": "2.14"}
        assert Clash.from_xml(element) == clash

    def test_to_dict(self):
        clash = Clash(atom="N", cid=7, clashmag=Decimal("0.61"), dist=Decimal("2.14"))

        assert clash.to_dict() == {"atom": "N", "cid": 7, "clashmag": 0.61, "dist": 2.14}


class TestValidationReport:
    """Reading clashes from a report file"""

    def test_read_clashes(self, validation_report_path):
        clashes = read_clashes(validation_report_path)

        assert [c.atom for c in clashes] == ["CD1", "O", "CA", "O"]

    def test_clashes_by_residue(self, validation_report_path):
        grouped = clashes_by_residue(validation_report_path)

        assert len(grouped) == 3
        keys = list(grouped)
        assert keys[0] == ResidueKey(chain="A", resname="LEU", resnum="12", icode=" ", model="1")
        assert str(keys[0]) == "1/A:LEU12"
        assert [c.atom for c in grouped[keys[0]]] == ["CD1", "O"]
        # residues without clashes are left out
        assert all(k.resname != "SER" for k in keys)

    def test_same_residue_in_different_models(self, nmr_report_path):
        grouped = clashes_by_residue(nmr_report_path)

        assert [str(k) for k in grouped] == ["1/A:LEU12", "2/A:LEU12"]
        assert [[c.atom for c in clashes] for clashes in grouped.values()] == [["CD1"], ["CD2"]]

    def test_label_without_model(self):
        assert str(ResidueKey(chain="B", resname="SER", resnum="7", icode="A")) == "B:SER7A"

    def test_group_by_cid(self, validation_report_path):
        pairs = group_by_cid(read_clashes(validation_report_path))

        assert list(pairs) == [1, 2]
        assert [c.atom for c in pairs[1]] == ["CD1", "CA"]
        assert [c.atom for c in pairs[2]] == ["O", "O"]

    def test_missing_report(self, tmp_path):
        with pytest.raises(FileOperationError):
            read_clashes(str(tmp_path / "missing.xml"))

    def test_malformed_report(self, tmp_path):
        path = tmp_path / "broken.xml"
        path.write_text("<wwPDB-validation-information><ModelledSubgroup>")

        with pytest.raises(FileOperationError):
            clashes_by_residue(str(path))
