# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

`JsonObject` is the attribute-style view of a decoded JSON object.

A `FoursquareResponse` decodes its body both into plain dictionaries and into
`JsonObject` instances, so that both ``resp['user']['name']`` and
``resp.user.name`` work.

"""

from copy import deepcopy


class JsonObject(object):

    """An object whose attributes are the members of a JSON object.

    Members whose names aren't Python identifiers are still available through
    `get()` or `getattr()`. Iterating over a `JsonObject` yields its
    ``(name, value)`` pairs in document order.

    """

    def __init__(self, pairs=()):
        """Initializes a new `JsonObject` with the given ``(name, value)``
        pairs, as provided by a JSON decoder's ``object_pairs_hook``."""
        self.__dict__.update(pairs)

    def __eq__(self, other):
        """Returns whether two `JsonObject` instances hold the same data."""
        if type(self) != type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, list(self.__dict__.items()))

    def __iter__(self):
        return iter(list(self.__dict__.items()))

    def __len__(self):
        return len(self.__dict__)

    def __contains__(self, name):
        return name in self.__dict__

    def get(self, name, default=None):
        return self.__dict__.get(name, default)

    def to_dict(self):
        """Encodes the `JsonObject` (and any it contains) to a dictionary."""
        return dict((k, _to_plain(v)) for k, v in self.__dict__.items())

    @classmethod
    def from_dict(cls, data):
        """Decodes a dictionary into a new `JsonObject` instance."""
        if not isinstance(data, dict):
            raise TypeError('Cannot make a %s from non-dictionary data %r'
                % (cls.__name__, data))
        return cls((k, _from_plain(cls, v)) for k, v in data.items())


def _to_plain(value):
    if isinstance(value, JsonObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return deepcopy(value)


def _from_plain(cls, value):
    if isinstance(value, dict):
        return cls.from_dict(value)
    if isinstance(value, list):
        return [_from_plain(cls, v) for v in value]
    return value
