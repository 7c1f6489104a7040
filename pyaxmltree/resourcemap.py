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
from pyaxmltree.exceptions import TruncatedInputError, UnknownResourceIdError
from pyaxmltree.resources import public

log = logging.getLogger("pyaxmltree.resourcemap")

# Placeholder for ids without a public name in the table
UNKNOWN_ATTRIBUTE = "UNKNOWN"


def resolve(resource_id):
    """
    Return the name of a public android attribute, without prefix.

    :param resource_id: the attribute resource id, like 0x01010003
    :raises UnknownResourceIdError: if the id is not in the table
    """
    index = resource_id - const.ANDROID_ATTRIBUTE_BASE
    if index < 0 or index >= len(public.ATTRIBUTE_NAMES):
        raise UnknownResourceIdError(resource_id)

    name = public.ATTRIBUTE_NAMES[index]
    if name == UNKNOWN_ATTRIBUTE:
        # Attach the HEX Number, so for multiple missing attributes we do not run
        # into problems.
        return "UNKNOWN_SYSTEM_ATTRIBUTE_{:08x}".format(resource_id)
    return name


class ResourceMap(object):
    """
    The XML resource map chunk maps the strings of the string pool,
    position by position, to resource ids. It is optional and usually
    only covers the attribute names.
    """
    def __init__(self, buff):
        self.header = ChunkHeader(buff, const.RES_XML_RESOURCE_MAP_TYPE)

        if self.header.size % 4 != 0:
            log.warning("Size of the resource map is not aligned by four bytes.")

        count = (self.header.size // 4) - 2
        if count * 4 > buff.remaining():
            raise TruncatedInputError(
                "Resource map declares {} ids, but only {} bytes are left".format(
                    count, buff.remaining()),
                buff.get_idx())

        self.resource_ids = list(unpack('<{}L'.format(count), buff.read(count * 4)))
        log.debug("Resource map with {} ids".format(count))

    def __len__(self):
        return len(self.resource_ids)

    def __getitem__(self, idx):
        return self.resource_ids[idx]

    def get_name(self, idx):
        """
        Return the attribute name the string at `idx` is mapped to
        """
        return resolve(self.resource_ids[idx])
