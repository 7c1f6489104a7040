# This file is part of Androguard.
#
# Copyright (C) 2012, Anthony Desnos <desnos at t0t0.fr>
# All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS-IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from struct import unpack

import pyaxmltree.constants as const
from pyaxmltree.chunkheader import ChunkHeader
from pyaxmltree.exceptions import (
    InvalidTextEncodingError,
    TruncatedInputError,
    UnsupportedStringLengthError,
)


log = logging.getLogger("pyaxmltree.stringblock")


class StringBlock(object):
    """
    StringBlock is a CHUNK inside an AXML File
    It contains all strings, which are used by referecing to ID's

    The strings are decoded eagerly. Empty strings are dropped, so the
    position of a string in :py:attr:`strings` is the position among the
    non-empty entries of the pool.

    If a list is passed as `strings`, the decoded strings are appended to it.
    This is how several string pools of one document share a single index
    space.

    See http://androidxref.com/9.0.0_r3/xref/frameworks/base/libs/androidfw/include/androidfw/ResourceTypes.h#436
    """
    def __init__(self, buff, strings=None):
        """
        :param buff: buffer positioned at the start of the string pool chunk
        :param strings: list to append the decoded strings to
        """
        self.header = ChunkHeader(buff, const.RES_STRING_POOL_TYPE)
        start = self.header.start

        self.stringCount = unpack('<I', buff.read(4))[0]
        self.styleCount = unpack('<I', buff.read(4))[0]

        self.flags = unpack('<I', buff.read(4))[0]
        self.m_isSorted = ((self.flags & const.SORTED_FLAG) != 0)
        self.m_isUTF8 = ((self.flags & const.UTF8_FLAG) != 0)

        # Both offsets are counted from the beginning of the chunk
        self.stringsOffset = unpack('<I', buff.read(4))[0]
        self.stylesOffset = unpack('<I', buff.read(4))[0]

        # Check if they supplied a stylesOffset even if the count is 0:
        if self.styleCount == 0 and self.stylesOffset > 0:
            log.info("Styles Offset given, but styleCount is zero. "
                     "This is not a problem but could indicate packers.")

        # Do not trust the counts before allocating anything for them
        table_size = (self.stringCount + self.styleCount) * 4
        if table_size > buff.remaining():
            raise TruncatedInputError(
                "String pool declares {} strings and {} styles, "
                "but only {} bytes are left".format(
                    self.stringCount, self.styleCount, buff.remaining()),
                buff.get_idx())

        # Next, there is a list of string following.
        # This is only a list of offsets (4 byte each)
        self.m_stringOffsets = list(unpack('<{}I'.format(self.stringCount), buff.read(self.stringCount * 4)))

        # And a list of styles, which are not decoded any further
        self.m_styleOffsets = list(unpack('<{}I'.format(self.styleCount), buff.read(self.styleCount * 4)))

        self.strings = []
        for offset in self.m_stringOffsets:
            buff.set_idx(start + self.stringsOffset + offset)
            if self.m_isUTF8:
                string = self._decode8(buff)
            else:
                string = self._decode16(buff)

            if string:
                self.strings.append(string)

        log.debug(
            "StringBlock(stringsCount={}, stylesCount={}, sorted={}, utf8={}) "
            "yields {} strings".format(
                self.stringCount, self.styleCount, self.m_isSorted,
                self.m_isUTF8, len(self.strings)))

        if strings is not None:
            strings.extend(self.strings)

    @property
    def is_sorted(self):
        return self.m_isSorted

    @property
    def is_utf8(self):
        return self.m_isUTF8

    def __getitem__(self, idx):
        """
        Returns the string at the index in the string table
        """
        return self.strings[idx]

    def __len__(self):
        """
        Get the number of non-empty strings stored in this table
        """
        return len(self.strings)

    def __iter__(self):
        return iter(self.strings)

    def _decode8(self, buff):
        """
        Decode an UTF-8 String at the current position

        :return: str
        """
        # UTF-8 Strings contain two lengths, as they might differ:
        # 1) the UTF-16 length
        str_len = self._decode_length(buff, 1)
        # 2) the utf-8 string length
        encoded_bytes = self._decode_length(buff, 1)

        offset = buff.get_idx()
        data = buff.read(encoded_bytes)
        self._check_terminator(buff, 1)

        try:
            string = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidTextEncodingError("Invalid UTF-8 string: {}".format(e), offset)

        if len(string) != str_len:
            log.warning("invalid decoded string length at offset 0x{:08x}".format(offset))
        return string

    def _decode16(self, buff):
        """
        Decode an UTF-16 String at the current position

        :return: str
        """
        # The len is the string len in utf-16 units
        str_len = self._decode_length(buff, 2)

        offset = buff.get_idx()
        data = buff.read(str_len * 2)
        self._check_terminator(buff, 2)

        try:
            return data.decode('utf-16-le')
        except UnicodeDecodeError as e:
            raise InvalidTextEncodingError("Invalid UTF-16 string: {}".format(e), offset)

    @staticmethod
    def _decode_length(buff, sizeof_char):
        """
        Generic Length Decoding at the current position

        If the high bit of the first char is set, the length continues in
        the next char:
        * 8 bit strings: maximum of 0x7FFF units (See
        http://androidxref.com/9.0.0_r3/xref/frameworks/base/libs/androidfw/ResourceTypes.cpp#692)
        * 16 bit strings would use this for more than 0x7FFF units, which is
        not supported.

        :param sizeof_char: number of bytes per char (1 = 8bit, 2 = 16bit)
        :returns: the length
        """
        offset = buff.get_idx()
        fmt = '<B' if sizeof_char == 1 else '<H'
        highbit = 0x80 << (8 * (sizeof_char - 1))

        length, = unpack(fmt, buff.read(sizeof_char))
        if (length & highbit) != 0:
            if sizeof_char != 1:
                raise UnsupportedStringLengthError(
                    "UTF-16 string is longer than 0x7FFF units, which is not supported", offset)
            low, = unpack(fmt, buff.read(sizeof_char))
            length = ((length & ~highbit) << (8 * sizeof_char)) | low

        return length

    @staticmethod
    def _check_terminator(buff, sizeof_char):
        offset = buff.get_idx()
        if offset + sizeof_char > buff.size():
            log.warning("String at offset 0x{:08x} is not null terminated!".format(offset))
        elif buff.read_b(sizeof_char) != b"\x00" * sizeof_char:
            log.warning("String at offset 0x{:08x} is not null terminated!".format(offset))
