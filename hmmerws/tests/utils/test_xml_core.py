# tests/utils/test_xml_core.py

import os
import tempfile
import unittest
import xml.etree.ElementTree as ET

from hmmerws.exceptions import FileOperationError, ValidationError
from hmmerws.models.validation import Clash
from hmmerws.utils.xml_core import (
    parse_xml_file, required_attribute, element_to_pretty_string, process_xml_with_model
)


class TestXmlCore(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.report_path = os.path.join(self.test_dir.name, "report.xml")
        with open(self.report_path, 'w') as f:
            f.write('<report><group><clash atom="CA" cid="1" clashmag="0.4" dist="2.5"/></group>'
                    '<clash atom="N" cid="1" clashmag="0.4" dist="2.5"/></report>')

    def tearDown(self):
        self.test_dir.cleanup()

    def test_parse_xml_file(self):
        tree = parse_xml_file(self.report_path)
        self.assertEqual(tree.getroot().tag, "report")

    def test_parse_missing_file(self):
        with self.assertRaises(FileOperationError):
            parse_xml_file(os.path.join(self.test_dir.name, "missing.xml"))

    def test_required_attribute(self):
        element = ET.fromstring('<clash atom="CA"/>')
        self.assertEqual(required_attribute(element, "atom"), "CA")

        with self.assertRaises(ValidationError) as ctx:
            required_attribute(element, "cid")
        self.assertEqual(ctx.exception.details, {'tag': 'clash', 'attribute': 'cid'})

    def test_element_to_pretty_string(self):
        element = ET.Element("hmmer_scan", {"query": "q"})
        ET.SubElement(element, "hmmer_result", {"acc": "PF1"})

        text = element_to_pretty_string(element)
        self.assertIn('<hmmer_scan query="q">', text)
        self.assertIn('  <hmmer_result acc="PF1"/>', text)

    def test_process_xml_with_model(self):
        clashes = process_xml_with_model(self.report_path, ".//clash", Clash)
        self.assertEqual([c.atom for c in clashes], ["CA", "N"])


if __name__ == '__main__':
    unittest.main()
