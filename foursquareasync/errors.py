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

Exceptions raised by the Foursquare client.

Errors found while turning a call name into an endpoint are raised right
away, before any request is made. Errors from the network and from the API
itself are held by the `FoursquareResponse` until its data is first used.

"""

import http.client


class FoursquareError(Exception):
    """Base class for all errors raised by `foursquareasync`."""
    pass


class EndpointError(FoursquareError):
    """An error turning a call name into an API endpoint."""
    pass


class UnsupportedVerb(EndpointError):
    """Raised when a call name starts with a word that isn't an HTTP method
    the client knows how to send."""
    pass


class MalformedEndpoint(EndpointError):
    """Raised when a call name has no path after its HTTP method, as in
    ``client.get()`` spelled ``client.get_``."""
    pass


class DecodeError(FoursquareError, ValueError):
    """Raised when a successful response's body is not valid JSON."""

    def __init__(self, message, content=None):
        super(DecodeError, self).__init__(message)
        self.content = content


class TransportError(FoursquareError):
    """Raised when the request could not be completed at the network level.

    The exception from `httplib2` or the socket layer is available as the
    ``__cause__`` of the `TransportError`.

    """
    pass


class OAuthError(FoursquareError):
    """Raised when an OAuth token endpoint responds without a usable token."""
    pass


class ApiError(FoursquareError, http.client.HTTPException):
    """An HTTPException raised when the API responds with a status outside
    the 200-399 range.

    `ApiError` itself is raised for statuses without a more specific class.
    The response body is the exception message, and the status code is
    available as `status`.

    """

    kind = 'Generic'

    def __init__(self, message, status):
        super(ApiError, self).__init__(message, status)
        self.message = message
        self.status = status

    def __str__(self):
        return '%d %s: %s' % (self.status, self.kind, self.message)


class BadRequest(ApiError):
    """An HTTPException raised when the API reports an error in the client's
    request.

    This exception corresponds to the HTTP status code 400.

    """
    kind = 'BadRequest'


class NotAuthorized(ApiError):
    """An HTTPException raised when the API requires credentials the request
    did not have.

    This exception corresponds to the HTTP status code 401. Check the OAuth
    token or Basic auth username and password.

    """
    kind = 'NotAuthorized'


class Forbidden(ApiError):
    """An HTTPException raised when the authenticated user is not allowed to
    use the requested resource.

    This exception corresponds to the HTTP status code 403.

    """
    kind = 'Forbidden'


class NotFound(ApiError):
    """An HTTPException raised when the requested endpoint or object does not
    exist.

    This exception corresponds to the HTTP status code 404.

    """
    kind = 'NotFound'


errors_by_status = {
    400: BadRequest,
    401: NotAuthorized,
    403: Forbidden,
    404: NotFound,
}


def is_success(status):
    return 200 <= status < 400


def error_for_status(status):
    """Returns the `ApiError` class for an unsuccessful HTTP status code."""
    return errors_by_status.get(status, ApiError)


def raise_for_status(content, status):
    """Raises the `ApiError` corresponding to an unsuccessful response.

    Parameter `content` is the response body, which becomes the exception
    message. This function always raises; call it only once you know the
    status is not a success.

    """
    raise error_for_status(status)(content, status)
