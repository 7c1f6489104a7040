import struct
import unittest

import pyaxmltree.constants as const
from pyaxmltree.bytecode import BuffHandle
from pyaxmltree.chunkheader import ChunkHeader, peek_chunk_type
from pyaxmltree.exceptions import (
    ChunkSmallerThanHeaderError,
    ChunkTooSmallError,
    HeaderTooSmallError,
    MalformedHeaderError,
    TruncatedInputError,
    UnexpectedChunkTypeError,
    UnknownChunkTypeError,
)


class ChunkHeaderTest(unittest.TestCase):
    def test_valid_header(self):
        buff = BuffHandle(bytes([1, 0, 8, 0, 16, 0, 0, 0]))
        header = ChunkHeader(buff, const.RES_STRING_POOL_TYPE)

        self.assertEqual(header.type, const.RES_STRING_POOL_TYPE)
        self.assertEqual(header.header_size, 8)
        self.assertEqual(header.size, 16)
        self.assertEqual(header.start, 0)
        self.assertEqual(header.end, 16)
        self.assertEqual(buff.get_idx(), 8)

    def test_fields_are_kept(self):
        for chunk_type, header_size, size in [
                (const.RES_XML_TYPE, 8, 8),
                (const.RES_XML_START_ELEMENT_TYPE, 16, 76),
                (const.RES_STRING_POOL_TYPE, 28, 0xFFFFFFFF)]:
            buff = BuffHandle(struct.pack('<HHL', chunk_type, header_size, size))
            header = ChunkHeader(buff, chunk_type)
            self.assertEqual((header.type, header.header_size, header.size),
                             (chunk_type, header_size, size))

    def test_unexpected_chunk_type(self):
        buff = BuffHandle(bytes([2, 0, 8, 0, 16, 0, 0, 0]))
        with self.assertRaises(UnexpectedChunkTypeError) as cm:
            ChunkHeader(buff, const.RES_STRING_POOL_TYPE)

        self.assertEqual(cm.exception.expected, const.RES_STRING_POOL_TYPE)
        self.assertEqual(cm.exception.actual, const.RES_TABLE_TYPE)
        self.assertEqual(cm.exception.offset, 0)

    def test_header_too_small(self):
        buff = BuffHandle(bytes([1, 0, 4, 0, 16, 0, 0, 0]))
        with self.assertRaises(HeaderTooSmallError):
            ChunkHeader(buff, const.RES_STRING_POOL_TYPE)

    def test_chunk_too_small(self):
        buff = BuffHandle(bytes([1, 0, 8, 0, 4, 0, 0, 0]))
        with self.assertRaises(ChunkTooSmallError):
            ChunkHeader(buff, const.RES_STRING_POOL_TYPE)

    def test_chunk_smaller_than_header(self):
        buff = BuffHandle(bytes([1, 0, 16, 0, 8, 0, 0, 0]))
        with self.assertRaises(ChunkSmallerThanHeaderError) as cm:
            ChunkHeader(buff, const.RES_STRING_POOL_TYPE)
        self.assertIsInstance(cm.exception, MalformedHeaderError)

    def test_truncated_header(self):
        buff = BuffHandle(bytes([1, 0, 8, 0]))
        with self.assertRaises(TruncatedInputError):
            ChunkHeader(buff, const.RES_STRING_POOL_TYPE)


class PeekChunkTypeTest(unittest.TestCase):
    def test_peek_does_not_move(self):
        buff = BuffHandle(bytes([3, 1, 16, 0, 24, 0, 0, 0]))
        self.assertEqual(peek_chunk_type(buff), const.RES_XML_END_ELEMENT_TYPE)
        self.assertEqual(buff.get_idx(), 0)

    def test_end_of_data(self):
        self.assertIsNone(peek_chunk_type(BuffHandle(b"")))

    def test_unknown_type(self):
        buff = BuffHandle(bytes([0x99, 0x09, 8, 0, 8, 0, 0, 0]))
        with self.assertRaises(UnknownChunkTypeError) as cm:
            peek_chunk_type(buff)
        self.assertEqual(cm.exception.chunk_type, 0x0999)


if __name__ == '__main__':
    unittest.main()
