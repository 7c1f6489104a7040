# This file is part of Androguard.
#
# Copyright (C) 2012/2013, Anthony Desnos <desnos at t0t0.fr>
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
from pyaxmltree.exceptions import (
    ChunkSmallerThanHeaderError,
    ChunkTooSmallError,
    HeaderTooSmallError,
    UnexpectedChunkTypeError,
    UnknownChunkTypeError,
)

log = logging.getLogger("pyaxmltree.chunkheader")


def peek_chunk_type(buff):
    """
    Look at the type of the chunk at the current position, without
    consuming anything.

    :param buff: a :class:`~pyaxmltree.bytecode.BuffHandle`
    :returns: the chunk type, or None if the buffer is exhausted
    :raises UnknownChunkTypeError: if the tag is not a known chunk type
    """
    if buff.end():
        return None

    chunk_type, = unpack('<H', buff.read_b(2))
    if chunk_type not in const.CHUNK_TYPES:
        raise UnknownChunkTypeError(chunk_type, buff.get_idx())

    return chunk_type


class ChunkHeader(object):
    """
    Object which contains a Resource Chunk.
    This is an implementation of the `ResChunk_header`.

    The header is read at the current position of the buffer and must be of
    the `expected_type`. Afterwards the buffer points at the first byte
    behind the 8 byte header.

    It is not checked if the chunk fits into the buffer, use :py:attr:`end`
    for that.

    See http://androidxref.com/9.0.0_r3/xref/frameworks/base/libs/androidfw/include/androidfw/ResourceTypes.h#196
    """
    SIZE = const.CHUNK_HEADER_SIZE

    def __init__(self, buff, expected_type):
        self.start = buff.get_idx()
        self._type, self._header_size, self._size = unpack('<HHL', buff.read(self.SIZE))

        if self._type != expected_type:
            raise UnexpectedChunkTypeError(expected_type, self._type, self.start)

        # The total size must be equal or larger than the header size
        if self._header_size < self.SIZE:
            raise HeaderTooSmallError(
                "declared header size {} is smaller than required size of {}".format(
                    self._header_size, self.SIZE), self.start)
        if self._size < self.SIZE:
            raise ChunkTooSmallError(
                "declared chunk size {} is smaller than required size of {}".format(
                    self._size, self.SIZE), self.start)
        if self._size < self._header_size:
            raise ChunkSmallerThanHeaderError(
                "declared chunk size ({}) is smaller than header size ({})".format(
                    self._size, self._header_size), self.start)

        log.debug("{!r}".format(self))

    @property
    def type(self):
        """
        Type identifier for this chunk
        """
        return self._type

    @property
    def header_size(self):
        """
        Size of the chunk header (in bytes).  Adding this value to
        the address of the chunk allows you to find its associated data
        (if any).
        """
        return self._header_size

    @property
    def size(self):
        """
        Total size of this chunk (in bytes).  This is the chunkSize plus
        the size of any data associated with the chunk.  Adding this value
        to the chunk allows you to completely skip its contents (including
        any child chunks).  If this value is the same as chunkSize, there is
        no data associated with the chunk.
        """
        return self._size

    @property
    def end(self):
        """
        Get the absolute offset inside the file, where the chunk ends.
        This is equal to `ChunkHeader.start + ChunkHeader.size`.
        """
        return self.start + self.size

    def __repr__(self):
        return (
            "<ChunkHeader idx='0x{:08x}' type='{}' header_size='{}' size='{}'>"
        ).format(self.start, const.CHUNK_TYPES.get(self.type, self.type), self.header_size, self.size)
