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

foursquareasync is a client for the Foursquare API whose responses are
delivered only when they are used.

Each call on a `Foursquare` client names its HTTP method and endpoint,
so there is no table of API methods to keep up to date::

    >>> from foursquareasync import Foursquare
    >>> fsq = Foursquare(consumer_key, consumer_secret, token, token_secret)
    >>> checkin = fsq.post_checkin({'vid': 1234, 'shout': 'hello'})
    >>> history = fsq.get_history({'l': 25})
    >>> checkin.checkin['message']
    "OK! We've got you @ Some Bar."

Calls return immediately. A response waits for its request to finish the
first time its data is used, and raises an `ApiError` subclass then if the
request failed. With ``fsq.use_asynchronous()``, requests run concurrently,
so the two requests above would be in flight at once.

"""

__version__ = '1.0'

from foursquareasync.client import FileParam, Foursquare
from foursquareasync.dataobject import JsonObject
from foursquareasync.errors import (ApiError, BadRequest, DecodeError,
    EndpointError, Forbidden, FoursquareError, MalformedEndpoint,
    NotAuthorized, NotFound, OAuthError, TransportError, UnsupportedVerb)
from foursquareasync.response import FoursquareResponse

__all__ = ('Foursquare', 'FoursquareResponse', 'FileParam', 'JsonObject',
    'FoursquareError', 'EndpointError', 'UnsupportedVerb',
    'MalformedEndpoint', 'DecodeError', 'TransportError', 'OAuthError',
    'ApiError', 'BadRequest', 'NotAuthorized', 'Forbidden', 'NotFound')
