import struct
import unittest

from pyaxmltree.bytecode import BuffHandle
from pyaxmltree.exceptions import (
    InvalidTextEncodingError,
    TruncatedInputError,
    UnexpectedChunkTypeError,
    UnsupportedStringLengthError,
)
from pyaxmltree.stringblock import StringBlock

from axmlfactory import string_pool


def pool_header(string_count, flags, strings_start, chunk_size=128):
    return struct.pack('<HHL', 0x0001, 8, chunk_size) + \
        struct.pack('<5L', string_count, 0, flags, strings_start, 20)


def utf16_hello_world():
    buff = pool_header(2, 1, 36)
    buff += struct.pack('<2L', 0, 14)
    for word in ("Hello", "World"):
        buff += struct.pack('<H', 5) + word.encode('utf-16-le') + b"\x00\x00"
    return buff


class StringBlockTest(unittest.TestCase):
    def test_utf16(self):
        sb = StringBlock(BuffHandle(utf16_hello_world()))

        self.assertEqual(sb.strings, ["Hello", "World"])
        self.assertEqual(len(sb), 2)
        self.assertEqual(sb[1], "World")

    def test_flags(self):
        sb = StringBlock(BuffHandle(utf16_hello_world()))

        self.assertTrue(sb.is_sorted)
        self.assertFalse(sb.is_utf8)

    def test_empty_pool(self):
        sb = StringBlock(BuffHandle(pool_header(0, 0, 32)))
        self.assertEqual(sb.strings, [])

    def test_utf8(self):
        buff = pool_header(1, 0x100, 32)
        buff += struct.pack('<L', 0)
        buff += b"\x05\x05Hello\x00"

        sb = StringBlock(BuffHandle(buff))
        self.assertTrue(sb.is_utf8)
        self.assertFalse(sb.is_sorted)
        self.assertEqual(sb.strings, ["Hello"])

    def test_utf8_multibyte(self):
        sb = StringBlock(BuffHandle(string_pool(["café", "日本"], utf8=True)))
        self.assertEqual(sb.strings, ["café", "日本"])

    def test_utf8_two_byte_length(self):
        text = "a" * 200
        buff = pool_header(1, 0x100, 32)
        buff += struct.pack('<L', 0)
        buff += b"\x80\xc8\x80\xc8" + text.encode('utf-8') + b"\x00"

        sb = StringBlock(BuffHandle(buff))
        self.assertEqual(sb.strings, [text])

    def test_appends_to_strings(self):
        strings = ["existing"]
        StringBlock(BuffHandle(string_pool(["one", "two"])), strings)
        StringBlock(BuffHandle(string_pool(["three"], utf8=True)), strings)

        self.assertEqual(strings, ["existing", "one", "two", "three"])

    def test_empty_strings_are_dropped(self):
        sb = StringBlock(BuffHandle(string_pool(["first", "", "second"])))
        self.assertEqual(sb.strings, ["first", "second"])

    def test_strings_start_is_relative_to_chunk(self):
        padding = b"\xAA" * 12
        buff = BuffHandle(padding + string_pool(["a", "b"]))
        buff.set_idx(len(padding))

        self.assertEqual(StringBlock(buff).strings, ["a", "b"])

    def test_invalid_utf8(self):
        buff = pool_header(1, 0x100, 32)
        buff += struct.pack('<L', 0)
        buff += b"\x02\x02\xc3\x28\x00"

        with self.assertRaises(InvalidTextEncodingError):
            StringBlock(BuffHandle(buff))

    def test_invalid_utf16(self):
        buff = pool_header(1, 0, 32)
        buff += struct.pack('<L', 0)
        # A lone low surrogate
        buff += struct.pack('<HHH', 1, 0xDC00, 0)

        with self.assertRaises(InvalidTextEncodingError):
            StringBlock(BuffHandle(buff))

    def test_long_utf16_string_unsupported(self):
        buff = pool_header(1, 0, 32)
        buff += struct.pack('<L', 0)
        buff += struct.pack('<HH', 0x8001, 0x0000)

        with self.assertRaises(UnsupportedStringLengthError):
            StringBlock(BuffHandle(buff))

    def test_string_count_larger_than_data(self):
        buff = pool_header(0x10000000, 0, 32)

        with self.assertRaises(TruncatedInputError):
            StringBlock(BuffHandle(buff))

    def test_string_past_the_end(self):
        buff = pool_header(1, 0, 32)
        buff += struct.pack('<L', 0)
        buff += struct.pack('<H', 10) + "abc".encode('utf-16-le')

        with self.assertRaises(TruncatedInputError):
            StringBlock(BuffHandle(buff))

    def test_wrong_chunk_type(self):
        with self.assertRaises(UnexpectedChunkTypeError):
            StringBlock(BuffHandle(struct.pack('<HHL', 0x0003, 8, 8)))

    def test_missing_terminator_is_logged(self):
        buff = pool_header(1, 0x100, 32)
        buff += struct.pack('<L', 0)
        buff += b"\x02\x02hi!"

        with self.assertLogs("pyaxmltree.stringblock", level="WARNING"):
            sb = StringBlock(BuffHandle(buff))
        self.assertEqual(sb.strings, ["hi"])


if __name__ == '__main__':
    unittest.main()
