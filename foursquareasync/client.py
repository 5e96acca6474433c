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

The Foursquare API client.

Any method named for an HTTP method and an endpoint is an API call:

    >>> fsq = Foursquare(consumer_key, consumer_secret, token, token_secret)
    >>> user = fsq.get_user()                  # GET /v1/user.json
    >>> fsq.post_checkin({'vid': 1234, 'shout': 'hi'})
    >>> fsq.get_history({'l': 10})             # GET /v1/history.json?l=10
    >>> user.user['firstname']

Without a consumer key, calls are made with HTTP Basic auth instead, taking
the username and password after the parameters:

    >>> fsq = Foursquare()
    >>> fsq.get_venues({'geolat': 40.7, 'geolong': -74.0}, 'me@example.com',
    ...                'password')

Every call returns a `FoursquareResponse` without waiting for the request to
finish.

"""

import base64
from collections import namedtuple
import logging
from urllib.parse import urlencode

from requests_toolbelt import MultipartEncoder

from foursquareasync import endpoint
from foursquareasync.errors import is_success, raise_for_status
from foursquareasync.oauth import (OAuthSigner, form_content_type,
    parse_token_response)
from foursquareasync.response import FoursquareResponse
from foursquareasync.transport import Transport


log = logging.getLogger('foursquareasync.http')


FileParam = namedtuple('FileParam', ('filename', 'content', 'content_type'))
FileParam.__new__.__defaults__ = ('application/octet-stream',)
FileParam.__doc__ = """A file to upload as a request parameter.

`content` is the file's data as bytes or an open binary file.

"""


def is_multipart(params):
    """Returns whether the request parameters include a file, and so must be
    sent as ``multipart/form-data``."""
    if not params:
        return False
    return any(isinstance(value, tuple) for value in params.values())


def encode_multipart(params):
    """Returns the ``(body, content_type)`` of a multipart request carrying
    the given parameters."""
    fields = {}
    for key, value in params.items():
        if isinstance(value, tuple):
            fields[key] = tuple(value)
        else:
            fields[key] = str(value)
    encoder = MultipartEncoder(fields=fields)
    return encoder.to_string(), encoder.content_type


class Foursquare(object):

    """A client for the Foursquare API.

    With a consumer key and secret, requests are signed with OAuth, using the
    access token and secret when given (or once obtained through
    `get_access_token()`). Without a consumer key, requests are made with
    HTTP Basic auth when a username and password are given, or without
    authentication otherwise.

    The class attributes below are the client's configuration. Override them
    in a subclass, or for one client by passing them as keyword arguments.

    """

    api_url = 'http://api.foursquare.com'
    api_version = 'v1'
    request_token_url = 'http://foursquare.com/oauth/request_token'
    access_token_url = 'http://foursquare.com/oauth/access_token'
    authorize_url = 'http://foursquare.com/oauth/authorize'
    user_agent = 'foursquareasync (https://github.com/jmathai/foursquare-async)'
    signature_method = 'HMAC-SHA1'
    request_timeout = 30
    asynchronous = False
    max_workers = 8
    debug = False

    settings = ('api_url', 'api_version', 'request_token_url',
        'access_token_url', 'authorize_url', 'user_agent', 'signature_method',
        'request_timeout', 'asynchronous', 'max_workers', 'debug')

    def __init__(self, consumer_key=None, consumer_secret=None,
                 oauth_token=None, oauth_token_secret=None, http=None,
                 **kwargs):
        """Initializes a client with the given credentials.

        Optional parameter `http` is the user agent to send requests with,
        which should be compatible with `httplib2.Http` instances. Other
        keyword parameters override the class's configuration attributes.

        """
        for key, value in kwargs.items():
            if key not in self.settings:
                raise TypeError('%s() got an unexpected keyword argument %r'
                    % (type(self).__name__, key))
            setattr(self, key, value)

        self.consumer_key = consumer_key
        self.signer = None
        if consumer_key is not None:
            self.signer = OAuthSigner(consumer_key, consumer_secret,
                oauth_token, oauth_token_secret,
                signature_method=self.signature_method)

        self.transport = Transport(timeout=self.request_timeout,
            asynchronous=self.asynchronous, max_workers=self.max_workers,
            http=http)

    def __getattr__(self, name):
        # Only called for names that aren't real attributes.
        if name.startswith('_'):
            raise AttributeError(name)

        def call(*args):
            return self.call(endpoint.SymbolicCall(name, args))
        call.__name__ = name
        return call

    @property
    def authenticated(self):
        """Whether requests are signed with OAuth."""
        return self.consumer_key is not None

    def call(self, symbolic_call):
        """Resolves a `SymbolicCall` into a request and sends it."""
        req = endpoint.resolve(symbolic_call, self.authenticated)
        if self.authenticated:
            return self.request(req.method, req.path, req.params)
        username = password = None
        if req.credentials is not None:
            username, password = req.credentials
        return self.request_basic(req.method, req.path, req.params,
            username, password)

    def use_api_version(self, version=None):
        """Sets the API version path segment, or removes it if `version` is
        None."""
        self.api_version = version

    def use_asynchronous(self, asynchronous=True):
        """Sets whether requests are sent concurrently on worker threads."""
        self.asynchronous = asynchronous
        self.transport.asynchronous = asynchronous

    def set_token(self, oauth_token=None, oauth_token_secret=None):
        if self.signer is None:
            raise ValueError('Cannot set an OAuth token on a client without '
                'an OAuth consumer key')
        self.signer.set_token(oauth_token, oauth_token_secret)

    def get_api_url(self, path):
        if self.api_version:
            return '%s/%s%s' % (self.api_url, self.api_version, path)
        return '%s%s' % (self.api_url, path)

    def default_headers(self):
        return {'user-agent': self.user_agent}

    def _dispatch(self, method, uri, body=None, headers=None):
        log.debug('Dispatching %s %s', method, uri)
        handle = self.transport.submit(method, uri, body=body,
            headers=headers)
        return FoursquareResponse(handle, debug=self.debug)

    def delete(self, path, params=None):
        return self._request_by_auth('DELETE', path, params)

    def get(self, path, params=None):
        return self._request_by_auth('GET', path, params)

    def post(self, path, params=None):
        return self._request_by_auth('POST', path, params)

    def _request_by_auth(self, method, path, params):
        if self.authenticated:
            return self.request(method, path, params)
        return self.request_basic(method, path, params)

    def delete_basic(self, path, params=None, username=None,
                     password=None):
        return self.request_basic('DELETE', path, params, username,
            password)

    def get_basic(self, path, params=None, username=None, password=None):
        return self.request_basic('GET', path, params, username, password)

    def post_basic(self, path, params=None, username=None, password=None):
        return self.request_basic('POST', path, params, username,
            password)

    def request(self, method, path, params=None):
        """Sends an OAuth signed request to an API endpoint path and returns
        its undelivered `FoursquareResponse`."""
        if self.signer is None:
            raise ValueError('Cannot sign a %s request to %s without an OAuth '
                'consumer key' % (method, path))
        uri, headers, body = self._signed_request(method,
            self.get_api_url(path), params)
        return self._dispatch(method, uri, body=body, headers=headers)

    def _signed_request(self, method, uri, params=None, **oauth_kwargs):
        headers = self.default_headers()

        if not params:
            return self.signer.sign(method, uri, headers=headers,
                **oauth_kwargs)

        if method != 'POST':
            uri = '%s?%s' % (uri, urlencode(params))
            return self.signer.sign(method, uri, headers=headers,
                **oauth_kwargs)

        if is_multipart(params):
            # Multipart bodies aren't part of the OAuth signature.
            uri, headers, _ = self.signer.sign(method, uri, headers=headers,
                **oauth_kwargs)
            body, headers['content-type'] = encode_multipart(params)
            return uri, headers, body

        headers['content-type'] = form_content_type
        return self.signer.sign(method, uri, body=urlencode(params),
            headers=headers, **oauth_kwargs)

    def request_basic(self, method, path, params=None, username=None,
                      password=None):
        """Sends a request to an API endpoint path, with HTTP Basic auth if
        both `username` and `password` are given, and returns its
        undelivered `FoursquareResponse`."""
        uri = self.get_api_url(path)
        headers = self.default_headers()
        body = None

        if method == 'GET' and params:
            uri = '%s?%s' % (uri, urlencode(params))
        elif method == 'POST' and params:
            if is_multipart(params):
                body, headers['content-type'] = encode_multipart(params)
            else:
                body = urlencode(params)
                headers['content-type'] = form_content_type

        if username and password:
            userpass = ('%s:%s' % (username, password)).encode('utf-8')
            headers['authorization'] = 'Basic %s' \
                % base64.b64encode(userpass).decode('ascii')

        return self._dispatch(method, uri, body=body, headers=headers)

    def _token_request(self, uri, **oauth_kwargs):
        uri, headers, body = self._signed_request('POST', uri, **oauth_kwargs)
        response, content = self.transport.perform('POST', uri, body=body,
            headers=headers)
        if isinstance(content, bytes):
            content = content.decode('utf-8', 'replace')
        if not is_success(response.status):
            raise_for_status(content, response.status)
        token = parse_token_response(content)
        self.set_token(token['oauth_token'], token['oauth_token_secret'])
        return token

    def get_request_token(self, callback=None):
        """Fetches an unauthorized request token to start the OAuth flow.

        Returns the token endpoint's response as a dictionary, and sets the
        token on the client so that `get_authorize_url()` and
        `get_access_token()` can use it.

        """
        self.set_token(None, None)
        return self._token_request(self.request_token_url, callback=callback)

    def get_authorize_url(self, token=None):
        """Returns the URL at which the user can authorize the request
        token."""
        if token is None:
            token = self.signer.token
        if token is None:
            raise ValueError('Cannot build an authorize URL without a request '
                'token; call get_request_token() first')
        return '%s?%s' % (self.authorize_url,
            urlencode({'oauth_token': token}))

    def get_access_token(self, verifier=None):
        """Exchanges the authorized request token for an access token.

        Returns the token endpoint's response as a dictionary, and sets the
        access token on the client for use with later requests.

        """
        return self._token_request(self.access_token_url, verifier=verifier)

    def close(self):
        """Waits for queued requests and stops the client's worker threads."""
        self.transport.close()
