import unittest

from pyaxmltree.exceptions import UnresolvedNamespaceError
from pyaxmltree.namespaces import NamespaceTable

from axmlfactory import ANDROID_URI


class NamespaceTableTest(unittest.TestCase):
    def test_flat_table_keeps_mappings(self):
        table = NamespaceTable()
        table.declare("android", ANDROID_URI)
        table.end("android", ANDROID_URI)

        self.assertEqual(table.prefix_for(ANDROID_URI), "android")
        self.assertIn(ANDROID_URI, table)

    def test_flat_table_last_declaration_wins(self):
        table = NamespaceTable()
        table.declare("a", "urn:x")
        table.declare("b", "urn:x")
        self.assertEqual(table.prefix_for("urn:x"), "b")

    def test_unresolved(self):
        table = NamespaceTable()
        with self.assertRaises(UnresolvedNamespaceError) as cm:
            table.prefix_for("urn:missing")
        self.assertEqual(cm.exception.uri, "urn:missing")
        self.assertNotIn("urn:missing", table)

    def test_scoped_table_removes_mappings(self):
        table = NamespaceTable(scoped=True)
        table.declare("android", ANDROID_URI)
        self.assertEqual(table.prefix_for(ANDROID_URI), "android")

        table.end("android", ANDROID_URI)
        with self.assertRaises(UnresolvedNamespaceError):
            table.prefix_for(ANDROID_URI)

    def test_scoped_table_shadowing(self):
        table = NamespaceTable(scoped=True)
        table.declare("outer", "urn:x")
        table.declare("inner", "urn:x")
        self.assertEqual(table.prefix_for("urn:x"), "inner")

        table.end("inner", "urn:x")
        self.assertEqual(table.prefix_for("urn:x"), "outer")

        table.end("outer", "urn:x")
        self.assertNotIn("urn:x", table)

    def test_scoped_end_without_start(self):
        table = NamespaceTable(scoped=True)
        with self.assertLogs("pyaxmltree.namespaces", level="WARNING"):
            table.end("app", "urn:app")

    def test_nsmap(self):
        table = NamespaceTable(scoped=True)
        table.declare("android", ANDROID_URI)
        table.declare("tools", "http://schemas.android.com/tools ")
        table.declare("", "urn:no-prefix")
        table.end("tools", "http://schemas.android.com/tools ")

        self.assertDictEqual(table.nsmap, {
            "android": ANDROID_URI,
            "tools": "http://schemas.android.com/tools",
        })


if __name__ == '__main__':
    unittest.main()
