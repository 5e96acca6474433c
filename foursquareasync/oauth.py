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

OAuth 1.0a request signing, through `oauthlib`.

"""

from urllib.parse import parse_qsl

from oauthlib import oauth1

from foursquareasync.errors import OAuthError


form_content_type = 'application/x-www-form-urlencoded'


class OAuthSigner(object):

    """Signs requests with a consumer key pair and, once the user has
    authorized the application, a token pair."""

    def __init__(self, consumer_key, consumer_secret, token=None,
                 token_secret=None, signature_method=oauth1.SIGNATURE_HMAC):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.signature_method = signature_method
        self.set_token(token, token_secret)

    def set_token(self, token, token_secret):
        self.token = token
        self.token_secret = token_secret

    def sign(self, method, uri, body=None, headers=None, callback=None,
             verifier=None):
        """Returns the signed ``(uri, headers, body)`` for a request.

        A `body` is included in the signature only if it is form encoded, as
        `headers` must then say.

        """
        client = oauth1.Client(self.consumer_key,
            client_secret=self.consumer_secret,
            resource_owner_key=self.token,
            resource_owner_secret=self.token_secret,
            signature_method=self.signature_method,
            callback_uri=callback,
            verifier=verifier)
        return client.sign(uri, http_method=method, body=body,
            headers=headers)


def parse_token_response(content):
    """Returns the token and secret from an OAuth token endpoint's form
    encoded response as a dictionary.

    Raises `OAuthError` if either is missing.

    """
    if isinstance(content, bytes):
        content = content.decode('utf-8', 'replace')
    data = dict(parse_qsl(content, keep_blank_values=True))
    for key in ('oauth_token', 'oauth_token_secret'):
        if not data.get(key):
            raise OAuthError('OAuth token response is missing %s: %r'
                % (key, content))
    return data
