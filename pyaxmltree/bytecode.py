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

from pyaxmltree.exceptions import TruncatedInputError


class BuffHandle(object):
    """
    Cursor over an in-memory AXML document.

    All reads are bounds checked: reading past the end of the buffer
    raises :class:`~pyaxmltree.exceptions.TruncatedInputError` instead of
    returning a short slice.
    """

    def __init__(self, buff):
        if not isinstance(buff, (bytes, bytearray, memoryview)):
            raise TypeError("AXML data must be bytes-like, not {}".format(type(buff).__name__))
        self.__buff = bytes(buff)
        self.__idx = 0

    def size(self):
        return len(self.__buff)

    def set_idx(self, idx):
        self.__idx = idx

    def get_idx(self):
        return self.__idx

    def remaining(self):
        return max(0, len(self.__buff) - self.__idx)

    def read_b(self, size):
        """
        Read `size` bytes without moving the cursor
        """
        return self.read_at(self.__idx, size)

    def read_at(self, offset, size):
        if offset < 0 or offset + size > len(self.__buff):
            raise TruncatedInputError(
                "Can not read {} bytes, buffer holds {} bytes".format(size, len(self.__buff)),
                offset)
        return self.__buff[offset: offset + size]

    def read(self, size):
        buff = self.read_at(self.__idx, size)
        self.__idx += size

        return buff

    def end(self):
        return self.__idx >= len(self.__buff)
