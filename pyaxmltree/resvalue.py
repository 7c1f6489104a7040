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

from collections import namedtuple
from struct import unpack

import pyaxmltree.constants as const
from pyaxmltree.exceptions import UnknownValueTypeError
from pyaxmltree.utils import format_value


class TypedValue(namedtuple("TypedValue", ["data_type", "data"])):
    """
    A `Res_value`: the typed representation of an attribute value.

    See http://androidxref.com/9.0.0_r3/xref/frameworks/base/libs/androidfw/include/androidfw/ResourceTypes.h#262
    """
    __slots__ = ()

    @classmethod
    def from_buff(cls, buff):
        """
        Read a `Res_value` at the current position of the buffer

        :raises UnknownValueTypeError: if the data type is not known
        """
        offset = buff.get_idx()
        # uint16_t size, uint8_t res0 (always zero), uint8_t dataType, uint32_t data
        _size, _res0, data_type, data = unpack("<HBBL", buff.read(const.RES_VALUE_SIZE))

        if data_type not in const.TYPE_TABLE:
            raise UnknownValueTypeError(data_type, offset)

        return cls(data_type, data)

    @property
    def type_name(self):
        return const.TYPE_TABLE[self.data_type]

    def format(self, lookup_string=lambda ix: "<string>"):
        """
        Return the textual form of the value

        :param lookup_string: callable to resolve string pool indices,
            only used for values of type string
        """
        return format_value(self.data_type, self.data, lookup_string)

    def __str__(self):
        return self.format()
