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

from pyaxmltree.exceptions import UnresolvedNamespaceError

log = logging.getLogger("pyaxmltree.namespaces")


class NamespaceTable(object):
    """
    Mapping of namespace URIs to the prefixes declared for them.

    By default the table is flat: a mapping stays valid for the rest of the
    document, even after its end namespace chunk. With `scoped=True` the
    mappings form a stack instead. An end namespace chunk removes the
    innermost matching mapping and lookups see the innermost declaration.
    """
    def __init__(self, scoped=False):
        self.scoped = scoped
        self._prefixes = {}
        self._scopes = []
        self._declared = []

    def declare(self, prefix, uri):
        log.debug("Start of Namespace mapping: prefix '{}' --> uri '{}'".format(prefix, uri))

        if uri == '':
            log.warning("Namespace prefix '{}' resolves to empty URI. "
                        "This might be a packer.".format(prefix))

        if (prefix, uri) in self._declared:
            log.info(
                "Namespace mapping ({}, {}) already seen! "
                "This is usually not a problem but could indicate "
                "packers or broken AXML compilers.".format(prefix, uri))

        self._declared.append((prefix, uri))
        self._scopes.append((prefix, uri))
        self._prefixes[uri] = prefix

    def end(self, prefix, uri):
        if not self.scoped:
            return

        for idx in range(len(self._scopes) - 1, -1, -1):
            if self._scopes[idx] == (prefix, uri):
                del self._scopes[idx]
                return

        log.warning(
            "Reached a NAMESPACE_END without having the namespace stored before? "
            "Prefix: '{}', URI: '{}'".format(prefix, uri))

    def prefix_for(self, uri):
        """
        Return the prefix declared for `uri`

        :raises UnresolvedNamespaceError: if no prefix is declared
        """
        if self.scoped:
            for prefix, declared_uri in reversed(self._scopes):
                if declared_uri == uri:
                    return prefix
        elif uri in self._prefixes:
            return self._prefixes[uri]

        raise UnresolvedNamespaceError(uri)

    def __contains__(self, uri):
        try:
            self.prefix_for(uri)
        except UnresolvedNamespaceError:
            return False
        return True

    @property
    def nsmap(self):
        """
        Returns every namespace mapping of the document as a prefix to URI
        dictionary, regardless of scope

        Mappings with an empty prefix or URI are left out and surrounding
        spaces are removed from the URI, so that the result can be used
        as `nsmap` for lxml.
        """
        NSMAP = dict()
        for prefix, uri in self._declared:
            if uri != "" and prefix != "":
                NSMAP[prefix] = uri.strip()

        return NSMAP
