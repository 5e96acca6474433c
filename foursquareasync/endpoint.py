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

Turning client method names into API endpoints.

A call such as ``client.get_userCheckins({'limit': 5})`` is a `SymbolicCall`
named ``get_userCheckins``. The name says which HTTP method to send (the word
before the first underscore, or before the first capital letter for names
like ``getUser``) and which path to send it to (the rest of the name, split
into path segments at each capital letter and run of digits).

"""

from collections import namedtuple
import re

from foursquareasync.errors import MalformedEndpoint, UnsupportedVerb


#: The HTTP methods a call name may start with.
methods = ('GET', 'POST', 'PUT', 'DELETE')

#: The suffix asking the API for a JSON response.
format_suffix = '.json'

segment_re = re.compile(r'[A-Z]|[0-9]+')
verb_re = re.compile(r'^([a-z]+)(?=[A-Z])')


SymbolicCall = namedtuple('SymbolicCall', ('name', 'args'))

BasicCredentials = namedtuple('BasicCredentials', ('username', 'password'))

ResolvedRequest = namedtuple('ResolvedRequest',
    ('method', 'path', 'params', 'credentials'))


def parse_call_name(name):
    """Splits a call name into its HTTP method and the rest of the name.

    ``get_user`` and ``getUser`` both give ``('GET', ...)``. Raises
    `UnsupportedVerb` if the method is not one of `methods`, and
    `MalformedEndpoint` if nothing follows it.

    """
    if '_' in name:
        verb, remainder = name.split('_', 1)
    else:
        match = verb_re.match(name)
        if match is None:
            raise MalformedEndpoint('Call name %r has no endpoint after its '
                'HTTP method' % (name,))
        verb = match.group(1)
        remainder = name[match.end():]

    method = verb.upper()
    if method not in methods:
        raise UnsupportedVerb('Call name %r starts with unsupported HTTP '
            'method %r' % (name, verb))
    if not remainder:
        raise MalformedEndpoint('Call name %r has no endpoint after its '
            'HTTP method' % (name,))
    return method, remainder


def endpoint_path(remainder):
    """Returns the API path for the part of a call name after its method.

    ``userCheckins`` becomes ``/user/checkins.json`` and ``user123`` becomes
    ``/user/123.json``.

    """
    path = '/' + segment_re.sub(lambda m: '/' + m.group(0).lower(), remainder)
    # Names such as ``get_123Checkins`` for lists keyed by a user id, or a
    # remainder starting with a capital, would otherwise begin with ``//``.
    while '//' in path:
        path = path.replace('//', '/')
    return path + format_suffix


def resolve(call, authenticated=True):
    """Returns the `ResolvedRequest` for a `SymbolicCall`.

    The first argument of the call, if any, is the request's parameters. For
    unauthenticated clients (those without an OAuth consumer key), the next
    two arguments are the username and password for HTTP Basic auth.

    """
    method, remainder = parse_call_name(call.name)
    path = endpoint_path(remainder)

    args = list(call.args)
    params = args.pop(0) if args else None

    credentials = None
    if not authenticated and args:
        username = args.pop(0)
        password = args.pop(0) if args else None
        if username and password:
            credentials = BasicCredentials(username, password)

    return ResolvedRequest(method, path, params, credentials)
