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

from collections import deque


class XmlElement(object):
    """
    A decoded XML element.

    :param element_type: tag name of the element, like `activity`
    :param attributes: dictionary of attribute key to value. Keys of
        namespaced attributes carry the prefix, like `android:name`
    """
    def __init__(self, element_type, attributes=None, children=None, text=None):
        self.element_type = element_type
        self.attributes = dict(attributes or {})
        self.children = list(children or [])
        self.text = text

    def append(self, child):
        self.children.append(child)

    def get(self, key, default=None):
        return self.attributes.get(key, default)

    def iter(self):
        """
        Iterate depth-first over this element and all its descendants,
        in document order
        """
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    def find_all(self, element_type):
        """
        Return all elements of the given type, breadth first
        """
        result = []
        queue = deque([self])
        while queue:
            element = queue.popleft()
            if element.element_type == element_type:
                result.append(element)
            queue.extend(element.children)
        return result

    def find(self, element_type):
        """
        Return the first element of the given type, or None
        """
        for element in self.find_all(element_type):
            return element
        return None

    def __eq__(self, other):
        if not isinstance(other, XmlElement):
            return NotImplemented
        return (self.element_type == other.element_type and
                self.attributes == other.attributes and
                self.text == other.text and
                self.children == other.children)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __repr__(self):
        return "<XmlElement '{}' attributes={} children={}>".format(
            self.element_type, len(self.attributes), len(self.children))
