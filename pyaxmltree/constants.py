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

# Chunk types, see ResourceTypes.h
RES_NULL_TYPE = 0x0000
RES_STRING_POOL_TYPE = 0x0001
RES_TABLE_TYPE = 0x0002
RES_XML_TYPE = 0x0003

# Chunk types in RES_XML_TYPE
RES_XML_START_NAMESPACE_TYPE = 0x0100
RES_XML_END_NAMESPACE_TYPE = 0x0101
RES_XML_START_ELEMENT_TYPE = 0x0102
RES_XML_END_ELEMENT_TYPE = 0x0103
RES_XML_CDATA_TYPE = 0x0104
RES_XML_LAST_CHUNK_TYPE = 0x017f

# This contains a uint32_t array mapping strings in the string
# pool back to resource identifiers.  It is optional.
RES_XML_RESOURCE_MAP_TYPE = 0x0180

# Chunk types in RES_TABLE_TYPE
RES_TABLE_PACKAGE_TYPE = 0x0200
RES_TABLE_TYPE_TYPE = 0x0201
RES_TABLE_TYPE_SPEC_TYPE = 0x0202
RES_TABLE_LIBRARY_TYPE = 0x0203

# The closed set of chunk types. Anything else aborts decoding.
CHUNK_TYPES = {
    RES_NULL_TYPE: 'RES_NULL_TYPE',
    RES_STRING_POOL_TYPE: 'RES_STRING_POOL_TYPE',
    RES_TABLE_TYPE: 'RES_TABLE_TYPE',
    RES_XML_TYPE: 'RES_XML_TYPE',
    RES_XML_START_NAMESPACE_TYPE: 'RES_XML_START_NAMESPACE_TYPE',
    RES_XML_END_NAMESPACE_TYPE: 'RES_XML_END_NAMESPACE_TYPE',
    RES_XML_START_ELEMENT_TYPE: 'RES_XML_START_ELEMENT_TYPE',
    RES_XML_END_ELEMENT_TYPE: 'RES_XML_END_ELEMENT_TYPE',
    RES_XML_CDATA_TYPE: 'RES_XML_CDATA_TYPE',
    RES_XML_LAST_CHUNK_TYPE: 'RES_XML_LAST_CHUNK_TYPE',
    RES_XML_RESOURCE_MAP_TYPE: 'RES_XML_RESOURCE_MAP_TYPE',
    RES_TABLE_PACKAGE_TYPE: 'RES_TABLE_PACKAGE_TYPE',
    RES_TABLE_TYPE_TYPE: 'RES_TABLE_TYPE_TYPE',
    RES_TABLE_TYPE_SPEC_TYPE: 'RES_TABLE_TYPE_SPEC_TYPE',
    RES_TABLE_LIBRARY_TYPE: 'RES_TABLE_LIBRARY_TYPE',
}

# Minimum size of a ResChunk_header: type, header size, chunk size
CHUNK_HEADER_SIZE = 8

# Marks an absent string reference (ResStringPool_ref.index)
NO_ENTRY = 0xFFFFFFFF

# Flags of a string pool
SORTED_FLAG = 1 << 0
UTF8_FLAG = 1 << 8

# Res_value: uint16_t size, uint8_t res0, uint8_t dataType, uint32_t data
RES_VALUE_SIZE = 8

# Each attribute of a start tag: namespace, name, rawValue and a Res_value
ATTRIBUTE_SIZE = 12 + RES_VALUE_SIZE

# Type of the data value
# The 'data' is either 0 or 1, specifying this resource is either
# undefined or empty, respectively.
TYPE_NULL = 0x00
# The 'data' holds a ResTable_ref, a reference to another resource
# table entry.
TYPE_REFERENCE = 0x01
# The 'data' holds an attribute resource identifier.
TYPE_ATTRIBUTE = 0x02
# The 'data' holds an index into the containing resource table's
# global value string pool.
TYPE_STRING = 0x03
# The 'data' holds a single-precision floating point number.
TYPE_FLOAT = 0x04
# The 'data' holds a complex number encoding a dimension value,
# such as "100in".
TYPE_DIMENSION = 0x05
# The 'data' holds a complex number encoding a fraction of a
# container.
TYPE_FRACTION = 0x06
# The 'data' holds a dynamic ResTable_ref, which needs to be
# resolved before it can be used like a TYPE_REFERENCE.
TYPE_DYNAMIC_REFERENCE = 0x07
# The 'data' holds an attribute resource identifier, which needs to be
# resolved before it can be used like a TYPE_ATTRIBUTE.
TYPE_DYNAMIC_ATTRIBUTE = 0x08

# The 'data' is a raw integer value of the form n..n.
TYPE_INT_DEC = 0x10
# The 'data' is a raw integer value of the form 0xn..n.
TYPE_INT_HEX = 0x11
# The 'data' is either 0 or 1, for input "false" or "true" respectively.
TYPE_INT_BOOLEAN = 0x12

# The 'data' is a raw integer value of the form #aarrggbb.
TYPE_INT_COLOR_ARGB8 = 0x1c
# The 'data' is a raw integer value of the form #rrggbb.
TYPE_INT_COLOR_RGB8 = 0x1d
# The 'data' is a raw integer value of the form #argb.
TYPE_INT_COLOR_ARGB4 = 0x1e
# The 'data' is a raw integer value of the form #rgb.
TYPE_INT_COLOR_RGB4 = 0x1f

TYPE_TABLE = {
    TYPE_NULL: 'null',
    TYPE_REFERENCE: 'reference',
    TYPE_ATTRIBUTE: 'attribute',
    TYPE_STRING: 'string',
    TYPE_FLOAT: 'float',
    TYPE_DIMENSION: 'dimension',
    TYPE_FRACTION: 'fraction',
    TYPE_DYNAMIC_REFERENCE: 'dynamic reference',
    TYPE_DYNAMIC_ATTRIBUTE: 'dynamic attribute',
    TYPE_INT_DEC: 'int dec',
    TYPE_INT_HEX: 'int hex',
    TYPE_INT_BOOLEAN: 'int boolean',
    TYPE_INT_COLOR_ARGB8: 'argb8',
    TYPE_INT_COLOR_RGB8: 'rgb8',
    TYPE_INT_COLOR_ARGB4: 'argb4',
    TYPE_INT_COLOR_RGB4: 'rgb4',
}

# Complex data values (TYPE_DIMENSION and TYPE_FRACTION)
COMPLEX_UNIT_MASK = 0x0F
COMPLEX_RADIX_SHIFT = 4
COMPLEX_RADIX_MASK = 0x3
COMPLEX_MANTISSA_MASK = 0xFFFFFF00

RADIX_MULTS = [0.00390625, 3.051758E-005, 1.192093E-007, 4.656613E-010]
DIMENSION_UNITS = ["px", "dp", "sp", "pt", "in", "mm"] + [""] * 10
FRACTION_UNITS = ["%", "%p"] + [""] * 14

# Package id of the android framework resources
ANDROID_PACKAGE_ID = 0x01
# First public attribute id of the android framework, android:theme
ANDROID_ATTRIBUTE_BASE = 0x01010000

# Name of the synthetic document root
ROOT_ELEMENT_TYPE = "manifest"
