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
from pyaxmltree import bytecode
from pyaxmltree.chunkheader import ChunkHeader, peek_chunk_type
from pyaxmltree.element import XmlElement
from pyaxmltree.exceptions import (
    FormatError,
    MalformedHeaderError,
    StringIndexOutOfRangeError,
    TruncatedInputError,
    UnbalancedElementError,
)
from pyaxmltree.namespaces import NamespaceTable
from pyaxmltree.resourcemap import ResourceMap, resolve
from pyaxmltree.resvalue import TypedValue
from pyaxmltree.stringblock import StringBlock

log = logging.getLogger("pyaxmltree.axmlparser")

# Chunks which are consumed by their declared size without looking inside
OPAQUE_CHUNK_TYPES = (
    const.RES_TABLE_TYPE,
    const.RES_XML_LAST_CHUNK_TYPE,
    const.RES_TABLE_PACKAGE_TYPE,
    const.RES_TABLE_TYPE_TYPE,
    const.RES_TABLE_TYPE_SPEC_TYPE,
    const.RES_TABLE_LIBRARY_TYPE,
)


def _optional(index):
    """
    Convert a string reference to None if it is the "no entry" sentinel
    """
    if index == const.NO_ENTRY:
        return None
    return index


def decode(raw_buff, **kwargs):
    """
    Decode an AXML document and return its root element.

    Keyword arguments are passed to :class:`AXMLParser`.

    :param raw_buff: the complete AXML document as bytes
    :rtype: :class:`~pyaxmltree.element.XmlElement`
    :raises FormatError: if the document can not be decoded
    """
    return AXMLParser(raw_buff, **kwargs).root


class AXMLParser(object):
    """
    AXMLParser reads through all chunks in the AXML file and builds a tree
    of :class:`~pyaxmltree.element.XmlElement` from them.

    An AXML file is a file which contains multiple chunks of data, defined
    by the `ResChunk_header`.
    There is no real file magic but as the size of the first header is fixed
    and the `type` of the `ResChunk_header` is set to `RES_XML_TYPE`, a file
    will usually start with `0x03000800`.

    The chunks are read one after another. The type of each chunk is looked
    at first, then the decoder for that type reads and checks the full
    header and the body. No particular order of chunks is required, but a
    string can only be referenced after its string pool was read.

    The tree starts with a synthetic `manifest` root. The first `manifest`
    start tag does not create a new element but its attributes are put on
    the root. Every other start tag appends a new element to the innermost
    open one.

    Decoding happens in the constructor and either completes or raises a
    :class:`~pyaxmltree.exceptions.FormatError`.

    :param raw_buff: the AXML document as bytes
    :param strict_end_tags: raise if an end tag does not close the innermost
        open element, instead of logging a warning
    :param scoped_namespaces: remove namespace mappings at their end chunk
        instead of keeping them for the whole document

    See http://androidxref.com/9.0.0_r3/xref/frameworks/base/libs/androidfw/include/androidfw/ResourceTypes.h#563
    """
    def __init__(self, raw_buff, strict_end_tags=False, scoped_namespaces=False):
        self.buff = bytecode.BuffHandle(raw_buff)
        self.strict_end_tags = strict_end_tags

        self.strings = []
        self.resource_ids = []
        self.namespaces = NamespaceTable(scoped=scoped_namespaces)

        self.root = XmlElement(const.ROOT_ELEMENT_TYPE)
        self._stack = [self.root]
        self.done = False

        self._parse()

    @property
    def nsmap(self):
        return self.namespaces.nsmap

    def _parse(self):
        while not self.done:
            start = self.buff.get_idx()
            chunk_type = peek_chunk_type(self.buff)

            if chunk_type is None:
                log.debug("End of document at offset 0x{:08x}".format(start))
                self.done = True
                break

            if chunk_type == const.RES_NULL_TYPE:
                self.buff.set_idx(start + 2)
                continue

            try:
                self._parse_chunk(chunk_type)
            except FormatError as e:
                log.error("Error parsing chunk {} at offset 0x{:08x}: {}".format(
                    const.CHUNK_TYPES[chunk_type], start, e))
                raise

    def _parse_chunk(self, chunk_type):
        if chunk_type == const.RES_XML_TYPE:
            self._parse_document_header()

        elif chunk_type == const.RES_STRING_POOL_TYPE:
            sb = StringBlock(self.buff, self.strings)
            self._finish_chunk(sb.header)

        elif chunk_type == const.RES_XML_RESOURCE_MAP_TYPE:
            log.debug("AXML contains a RESOURCE MAP")
            resource_map = ResourceMap(self.buff)
            self.resource_ids.extend(resource_map.resource_ids)
            self._finish_chunk(resource_map.header)

        elif chunk_type == const.RES_XML_START_NAMESPACE_TYPE:
            self._parse_start_namespace()

        elif chunk_type == const.RES_XML_END_NAMESPACE_TYPE:
            self._parse_end_namespace()

        elif chunk_type == const.RES_XML_START_ELEMENT_TYPE:
            self._parse_start_element()

        elif chunk_type == const.RES_XML_END_ELEMENT_TYPE:
            self._parse_end_element()

        elif chunk_type == const.RES_XML_CDATA_TYPE:
            self._parse_cdata()

        elif chunk_type in OPAQUE_CHUNK_TYPES:
            h = ChunkHeader(self.buff, chunk_type)
            log.debug("Skipping chunk {}, {} bytes".format(const.CHUNK_TYPES[chunk_type], h.size))
            self._finish_chunk(h)

    def _finish_chunk(self, h):
        """
        Move behind the chunk, by its declared size
        """
        if h.end > self.buff.size():
            raise TruncatedInputError(
                "Chunk ends at 0x{:08x}, behind the end of the data".format(h.end), h.start)
        if self.buff.get_idx() > h.end:
            raise MalformedHeaderError(
                "Chunk content exceeds the declared chunk size of {}".format(h.size), h.start)
        self.buff.set_idx(h.end)

    def _get_string(self, idx):
        if idx < 0 or idx >= len(self.strings):
            raise StringIndexOutOfRangeError(idx, len(self.strings), self.buff.get_idx())
        return self.strings[idx]

    def _get_attribute_name(self, idx):
        """
        Returns the String which represents the attribute name.

        Names without an entry in the string pool are looked up by their
        resource id.
        """
        if idx >= len(self.strings) and idx < len(self.resource_ids):
            return resolve(self.resource_ids[idx])
        return self._get_string(idx)

    def _read_node_header(self, chunk_type):
        """
        Read the header of a XML node chunk, up to the node's extension.

        :returns: tuple of the chunk header and the line number
        """
        h = ChunkHeader(self.buff, chunk_type)

        # Line Number of the source file, only used as meta information
        # Comment_Index (usually 0xFFFFFFFF), ignored
        line_number, _comment = unpack('<LL', self.buff.read(8))

        return h, line_number

    def _parse_document_header(self):
        h = ChunkHeader(self.buff, const.RES_XML_TYPE)

        if h.end != self.buff.size():
            log.warning(
                "Declared document size ({}) does not match the size of the data ({}). "
                "Trying to parse it anyways.".format(h.end, self.buff.size()))

        # The content of this chunk are the following chunks
        self.buff.set_idx(h.start + h.header_size)

    def _parse_start_namespace(self):
        h, _ = self._read_node_header(const.RES_XML_START_NAMESPACE_TYPE)
        prefix, uri = unpack('<LL', self.buff.read(8))

        self.namespaces.declare(self._get_string(prefix), self._get_string(uri))
        self._finish_chunk(h)

    def _parse_end_namespace(self):
        h, _ = self._read_node_header(const.RES_XML_END_NAMESPACE_TYPE)
        prefix, uri = unpack('<LL', self.buff.read(8))

        if self.namespaces.scoped:
            self.namespaces.end(self._get_string(prefix), self._get_string(uri))
        self._finish_chunk(h)

    def _parse_start_element(self):
        h, line_number = self._read_node_header(const.RES_XML_START_ELEMENT_TYPE)

        # The TAG consists of some fields:
        # * namespace_uri, name (String IDs)
        # * attribute_start, attribute_size
        # * attribute_count
        # * id_index, class_index, style_index
        # After that, the attributes follow, 20 bytes each
        _namespace, name = unpack('<LL', self.buff.read(8))
        _start, _size, attribute_count, _id, _class, _style = unpack('<6H', self.buff.read(12))

        element_type = self._get_string(name)
        log.debug("START_TAG: {} (line={})".format(element_type, line_number))

        if attribute_count * const.ATTRIBUTE_SIZE > self.buff.remaining():
            raise TruncatedInputError(
                "Tag '{}' declares {} attributes, but only {} bytes are left".format(
                    element_type, attribute_count, self.buff.remaining()),
                self.buff.get_idx())

        attributes = {}
        for i in range(attribute_count):
            namespace, attr_name, raw_value = unpack('<LLL', self.buff.read(12))
            typed_value = TypedValue.from_buff(self.buff)

            key = self._get_attribute_name(attr_name)
            namespace = _optional(namespace)
            if namespace is not None:
                key = "{}:{}".format(self.namespaces.prefix_for(self._get_string(namespace)), key)

            raw_value = _optional(raw_value)
            if raw_value is not None:
                value = self._get_string(raw_value)
            else:
                value = typed_value.format(self._get_string)

            log.debug("found an attribute: {}='{}'".format(key, value))
            if key in attributes:
                log.warning("Duplicate attribute '{}'! Will overwrite!".format(key))
            attributes[key] = value

        self._finish_chunk(h)

        if not self._stack:
            raise UnbalancedElementError(
                "No more elements available to attach '{}' to!".format(element_type), h.start)

        if element_type == const.ROOT_ELEMENT_TYPE and len(self._stack) == 1 and \
                self._stack[0] is self.root:
            self.root.attributes.update(attributes)
            return

        elem = XmlElement(element_type, attributes)
        self._stack[-1].append(elem)
        self._stack.append(elem)

    def _parse_end_element(self):
        h, line_number = self._read_node_header(const.RES_XML_END_ELEMENT_TYPE)
        _namespace, name = unpack('<LL', self.buff.read(8))
        self._finish_chunk(h)

        if not self._stack:
            raise UnbalancedElementError("Too many END_TAG! No element is open", h.start)

        current = self._stack[-1]
        if self.strict_end_tags:
            tag = self._get_string(name)
            if tag != current.element_type:
                raise UnbalancedElementError(
                    "Closing tag '{}' does not match open tag '{}' at line {}".format(
                        tag, current.element_type, line_number), h.start)
        elif name < len(self.strings) and self.strings[name] != current.element_type:
            log.warning(
                "Closing tag '{}' does not match current stack! "
                "At line number: {}. Is the XML malformed?".format(
                    self.strings[name], line_number))

        log.debug("END_TAG: {} (line={})".format(current.element_type, line_number))
        self._stack.pop()

    def _parse_cdata(self):
        # The CDATA field is like an attribute.
        # It contains an index into the String pool
        # as well as a typed value, which is usually undefined
        h, _ = self._read_node_header(const.RES_XML_CDATA_TYPE)
        data, = unpack('<L', self.buff.read(4))
        TypedValue.from_buff(self.buff)
        self._finish_chunk(h)

        text = self._get_string(data)
        if not self._stack:
            log.warning("Can not attach text '{}' without an open element!".format(text))
            return

        log.debug("TEXT for {!r}".format(self._stack[-1]))
        self._stack[-1].text = text
