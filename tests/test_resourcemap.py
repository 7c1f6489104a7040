import unittest

from pyaxmltree.bytecode import BuffHandle
from pyaxmltree.exceptions import TruncatedInputError, UnknownResourceIdError
from pyaxmltree.resourcemap import ResourceMap, resolve
from pyaxmltree.resources import public

from axmlfactory import chunk, resource_map


class ResolveTest(unittest.TestCase):
    def test_known_attributes(self):
        self.assertEqual(resolve(0x01010000), "theme")
        self.assertEqual(resolve(0x01010003), "name")
        self.assertEqual(resolve(0x01010010), "exported")
        self.assertEqual(resolve(0x0101021b), "versionCode")

    def test_placeholder_entry(self):
        self.assertEqual(public.ATTRIBUTE_NAMES[0x267], "UNKNOWN")
        self.assertEqual(resolve(0x01010267), "UNKNOWN_SYSTEM_ATTRIBUTE_01010267")

    def test_out_of_range(self):
        with self.assertRaises(UnknownResourceIdError):
            resolve(0x0100ffff)
        with self.assertRaises(UnknownResourceIdError) as cm:
            resolve(0x01010000 + len(public.ATTRIBUTE_NAMES))
        self.assertEqual(cm.exception.resource_id, 0x01010000 + len(public.ATTRIBUTE_NAMES))


class ResourceMapTest(unittest.TestCase):
    def test_ids(self):
        rm = ResourceMap(BuffHandle(resource_map([0x01010003, 0x0101021b])))

        self.assertEqual(rm.resource_ids, [0x01010003, 0x0101021b])
        self.assertEqual(len(rm), 2)
        self.assertEqual(rm.get_name(1), "versionCode")

    def test_empty(self):
        rm = ResourceMap(BuffHandle(resource_map([])))
        self.assertEqual(rm.resource_ids, [])

    def test_truncated(self):
        data = resource_map([1, 2, 3])[:-4]
        with self.assertRaises(TruncatedInputError):
            ResourceMap(BuffHandle(data))

    def test_size_not_aligned(self):
        with self.assertLogs("pyaxmltree.resourcemap", level="WARNING"):
            rm = ResourceMap(BuffHandle(chunk(0x0180, 8, body=b"\x01\x00\x00\x00\xff")))
        self.assertEqual(rm.resource_ids, [1])


if __name__ == '__main__':
    unittest.main()
