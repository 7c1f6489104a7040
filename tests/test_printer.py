import unittest

from lxml import etree

from pyaxmltree.axmlprinter import AXMLPrinter
from pyaxmltree.utils import NS_ANDROID

from axmlfactory import (
    ANDROID_URI,
    attribute,
    cdata,
    document,
    end_element,
    sample_manifest,
    start_element,
    string_pool,
)


class AXMLPrinterTest(unittest.TestCase):
    def test_xml_obj(self):
        printer = AXMLPrinter(sample_manifest())
        root = printer.get_xml_obj()

        self.assertEqual(root.tag, "manifest")
        self.assertEqual(root.nsmap, {"android": ANDROID_URI})
        self.assertEqual(root.get("package"), "com.example")
        self.assertEqual(root.get(NS_ANDROID + "versionCode"), "12")

        activity = root.findall(".//activity")[0]
        self.assertEqual(activity.get(NS_ANDROID + "name"), ".MainActivity")
        self.assertEqual(activity.get(NS_ANDROID + "exported"), "true")
        self.assertEqual(len(activity.findall("intent-filter")), 1)
        self.assertFalse(printer.is_packed())

    def test_get_xml(self):
        xml = AXMLPrinter(sample_manifest()).get_xml()

        self.assertIn(b'xmlns:android="http://schemas.android.com/apk/res/android"', xml)
        self.assertIn(b'android:label="My App"', xml)

        # the output must be well formed
        reparsed = etree.fromstring(xml)
        self.assertEqual(reparsed.findall(".//application")[0].get(NS_ANDROID + "label"), "My App")

    def test_get_buff_is_not_pretty(self):
        printer = AXMLPrinter(sample_manifest())
        self.assertNotIn(b"\n", printer.get_buff())

    def test_tree(self):
        printer = AXMLPrinter(sample_manifest())
        self.assertEqual(printer.get_tree().find("application").get("android:label"), "My App")

    def test_text(self):
        raw = document(
            string_pool(["resources", "string", "Hello"]),
            start_element(0),
            start_element(1),
            cdata(2),
            end_element(1),
            end_element(0),
        )

        root = AXMLPrinter(raw).get_xml_obj()
        self.assertEqual(root.findall(".//string")[0].text, "Hello")

    def test_invalid_names_are_fixed(self):
        raw = document(
            string_pool(["manifest", "1tag", "bad name", "value\x00hidden"]),
            start_element(1, [attribute(2, 3)]),
            end_element(1),
        )

        printer = AXMLPrinter(raw)
        child = printer.get_xml_obj()[0]

        self.assertEqual(child.tag, "_1tag")
        self.assertEqual(child.get("bad_name"), "value")
        self.assertTrue(printer.is_packed())


if __name__ == '__main__':
    unittest.main()
