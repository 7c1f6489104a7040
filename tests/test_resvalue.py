import struct
import unittest

import pyaxmltree.constants as const
from pyaxmltree.bytecode import BuffHandle
from pyaxmltree.exceptions import TruncatedInputError, UnknownValueTypeError
from pyaxmltree.resvalue import TypedValue
from pyaxmltree.utils import format_value


class TypedValueTest(unittest.TestCase):
    def test_from_buff(self):
        buff = BuffHandle(struct.pack('<HBBL', 8, 0, const.TYPE_INT_BOOLEAN, 1))
        value = TypedValue.from_buff(buff)

        self.assertEqual(value, TypedValue(const.TYPE_INT_BOOLEAN, 1))
        self.assertEqual(value.type_name, 'int boolean')
        self.assertEqual(buff.get_idx(), 8)

    def test_unknown_value_type(self):
        buff = BuffHandle(struct.pack('<HBBL', 8, 0, 0x09, 1))
        with self.assertRaises(UnknownValueTypeError) as cm:
            TypedValue.from_buff(buff)
        self.assertEqual(cm.exception.value_type, 0x09)

    def test_truncated(self):
        with self.assertRaises(TruncatedInputError):
            TypedValue.from_buff(BuffHandle(b"\x08\x00\x00\x12"))

    def test_string_lookup(self):
        value = TypedValue(const.TYPE_STRING, 1)
        self.assertEqual(value.format(["a", "b"].__getitem__), "b")


class FormatValueTest(unittest.TestCase):
    def test_boolean(self):
        self.assertEqual(format_value(const.TYPE_INT_BOOLEAN, 0), "false")
        self.assertEqual(format_value(const.TYPE_INT_BOOLEAN, 5), "true")
        self.assertEqual(format_value(const.TYPE_INT_BOOLEAN, 0xFFFFFFFF), "true")

    def test_hex(self):
        self.assertEqual(format_value(const.TYPE_INT_HEX, 255), "0xff")
        self.assertEqual(format_value(const.TYPE_INT_HEX, 0), "0x0")

    def test_decimal(self):
        self.assertEqual(format_value(const.TYPE_INT_DEC, 12), "12")
        self.assertEqual(format_value(const.TYPE_INT_DEC, 0xFFFFFFFF), "4294967295")

    def test_reference(self):
        self.assertEqual(format_value(const.TYPE_REFERENCE, 0x7f020000), "type1/2130837504")

    def test_attribute(self):
        self.assertEqual(format_value(const.TYPE_ATTRIBUTE, 0x01010000), "?android:01010000")
        self.assertEqual(format_value(const.TYPE_DYNAMIC_ATTRIBUTE, 0x7f010002), "?7F010002")

    def test_dynamic_reference(self):
        self.assertEqual(format_value(const.TYPE_DYNAMIC_REFERENCE, 0x7f010000), "@7F010000")

    def test_null(self):
        self.assertEqual(format_value(const.TYPE_NULL, 0), "")

    def test_float(self):
        data, = struct.unpack('<L', struct.pack('<f', 1.5))
        self.assertEqual(format_value(const.TYPE_FLOAT, data), "1.500000")

    def test_dimension(self):
        # mantissa 16, radix 23p0, unit dp
        self.assertEqual(format_value(const.TYPE_DIMENSION, (16 << 8) | 0x01), "16.000000dp")
        self.assertEqual(format_value(const.TYPE_DIMENSION, (3 << 8) | 0x00), "3.000000px")

    def test_fraction(self):
        self.assertEqual(format_value(const.TYPE_FRACTION, 1 << 8), "100.000000%")
        self.assertEqual(format_value(const.TYPE_FRACTION, (1 << 8) | 0x01), "100.000000%p")

    def test_reserved_units(self):
        # units 8..15 are not assigned and render without a suffix
        self.assertEqual(format_value(const.TYPE_DIMENSION, (1 << 8) | 0x08), "1.000000")
        self.assertEqual(format_value(const.TYPE_DIMENSION, (2 << 8) | 0x0F), "2.000000")
        self.assertEqual(format_value(const.TYPE_FRACTION, (1 << 8) | 0x09), "100.000000")

    def test_colors(self):
        self.assertEqual(format_value(const.TYPE_INT_COLOR_ARGB8, 0xFF112233), "#FF112233")
        self.assertEqual(format_value(const.TYPE_INT_COLOR_ARGB4, 0xFF112233), "#FF112233")
        self.assertEqual(format_value(const.TYPE_INT_COLOR_RGB8, 0xFF112233), "#112233")
        self.assertEqual(format_value(const.TYPE_INT_COLOR_RGB4, 0xFFAABBCC), "#AABBCC")


if __name__ == '__main__':
    unittest.main()
