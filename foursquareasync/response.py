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

`FoursquareResponse` is the lazily delivered result of an API call.

The client returns a `FoursquareResponse` as soon as the request is sent. The
response waits for the request to finish only when its data is first used,
so several requests can be made and their responses read afterward in any
order:

    >>> checkins = client.get_checkins()
    >>> friends = client.get_friends()
    >>> len(friends['friends'])   # waits for the friends request only
    12

The raw `status`, `headers` and `content` can always be read. Any other use
of an unsuccessful response raises the `ApiError` for its status, and any
other use of a response that isn't JSON raises `DecodeError`.

"""

import logging
import threading
import weakref

import simplejson as json

from foursquareasync.dataobject import JsonObject
from foursquareasync.errors import DecodeError, is_success, raise_for_status


log = logging.getLogger('foursquareasync.http')


class FoursquareResponse(object):

    """A response to an API request that is delivered when first used.

    Delivery happens at most once, even when the response is shared between
    threads. A response that is never used is still waited for when it is
    garbage collected; use it as a context manager or call `close()` to wait
    for it at a known point instead.

    Once delivered, a successful response acts as a mapping of its decoded
    JSON document (iterating yields ``(key, value)`` pairs in document order)
    and its top-level members are also available as attributes.

    """

    safe_attributes = ('status', 'headers', 'content')

    def __init__(self, handle, debug=False):
        self._handle = handle
        self._debug = debug
        self._lock = threading.Lock()
        self._delivered = False
        self._status = None
        self._headers = None
        self._content = None
        self._data = None
        self._struct = None
        self._decode_error = None
        # Only the handle goes to the finalizer, so the response can be
        # collected.
        self._finalizer = weakref.finalize(self, handle.drain)

    def __repr__(self):
        if not self._delivered:
            return '<%s undelivered %r>' % (type(self).__name__, self._handle)
        return '<%s %d for %s %s>' % (type(self).__name__, self._status,
            self._handle.method, self._handle.uri)

    @property
    def delivered(self):
        """Whether the response has been delivered, without delivering it."""
        return self._delivered

    def deliver(self):
        """Waits for the request to complete and fills in the response.

        Calling `deliver()` on a delivered response does nothing. If the
        request failed at the network level, raises `TransportError` (again
        on each later use).

        """
        if self._delivered:
            return
        with self._lock:
            if self._delivered:
                return
            response, content = self._handle.result()

            if isinstance(content, bytes):
                content = content.decode('utf-8', 'replace')
            self._status = int(response.status)
            self._headers = dict(response)
            self._content = content
            if self._debug:
                log.debug('Response %d for %s %s: %r', self._status,
                    self._handle.method, self._handle.uri, content)

            if is_success(self._status):
                self._decode()

            self._delivered = True
            self._finalizer.detach()

    def _decode(self):
        try:
            self._data = json.loads(self._content)
            self._struct = json.loads(self._content,
                object_pairs_hook=JsonObject)
        except json.JSONDecodeError as exc:
            log.debug('Could not decode response for %s %s: %s',
                self._handle.method, self._handle.uri, exc)
            self._decode_error = DecodeError(
                'Response for %s %s is not valid JSON: %s'
                % (self._handle.method, self._handle.uri, exc),
                self._content)
            self._decode_error.__cause__ = exc

    def _check(self):
        self.deliver()
        if not is_success(self._status):
            raise_for_status(self._content, self._status)
        if self._decode_error is not None:
            raise self._decode_error

    @property
    def status(self):
        """The HTTP status code of the response."""
        self.deliver()
        return self._status

    @property
    def headers(self):
        """The response's HTTP headers, as a dictionary keyed on lowercase
        header names."""
        self.deliver()
        return self._headers

    @property
    def content(self):
        """The response body as text."""
        self.deliver()
        return self._content

    @property
    def data(self):
        """The decoded JSON document, as plain dictionaries and lists."""
        self._check()
        return self._data

    def as_struct(self):
        """Returns the decoded JSON document with its objects as `JsonObject`
        instances."""
        self._check()
        return self._struct

    def get(self, key, default=None):
        try:
            return self[key]
        except (KeyError, IndexError, TypeError):
            return default

    def __getitem__(self, key):
        return self.data[key]

    def __setitem__(self, key, value):
        self.data[key] = value

    def __delitem__(self, key):
        del self.data[key]

    def __contains__(self, key):
        data = self.data
        if isinstance(data, dict):
            return key in data
        return isinstance(key, int) and -len(data) <= key < len(data)

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        data = self.data
        if isinstance(data, dict):
            return iter(list(data.items()))
        return iter(list(enumerate(data)))

    def __getattr__(self, name):
        # Only called for names that aren't real attributes.
        if name.startswith('_'):
            raise AttributeError(name)
        struct = self.as_struct()
        if isinstance(struct, JsonObject) and name in struct:
            return getattr(struct, name)
        raise AttributeError('%s for %s %s has no member %r'
            % (type(self).__name__, self._handle.method, self._handle.uri,
               name))

    def close(self):
        """Delivers the response now."""
        self.deliver()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.deliver()
        else:
            # Don't hide the exception with one from delivery.
            self._finalizer()
