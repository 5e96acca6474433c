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

import unittest

from foursquareasync.errors import OAuthError
from foursquareasync.oauth import OAuthSigner, parse_token_response


class TestOAuthSigner(unittest.TestCase):

    def test_sign_header(self):
        signer = OAuthSigner('ckey', 'csecret', 'token', 'tsecret')
        uri, headers, body = signer.sign('GET',
            'http://api.foursquare.com/v1/user.json?uid=7',
            headers={'user-agent': 'test'})

        self.assertEqual(uri, 'http://api.foursquare.com/v1/user.json?uid=7')
        self.assertIsNone(body)
        self.assertEqual(headers['user-agent'], 'test')
        self.assertIn('oauth_consumer_key="ckey"', headers['Authorization'])
        self.assertIn('oauth_token="token"', headers['Authorization'])
        self.assertIn('oauth_signature=', headers['Authorization'])

    def test_sign_form_body(self):
        signer = OAuthSigner('ckey', 'csecret', 'token', 'tsecret')
        uri, headers, body = signer.sign('POST',
            'http://api.foursquare.com/v1/checkin.json', body='shout=hi',
            headers={'content-type': 'application/x-www-form-urlencoded'})
        self.assertEqual(body, 'shout=hi')
        self.assertTrue(headers['Authorization'].startswith('OAuth '))

    def test_set_token(self):
        signer = OAuthSigner('ckey', 'csecret')
        self.assertIsNone(signer.token)
        signer.set_token('token', 'tsecret')
        self.assertEqual((signer.token, signer.token_secret),
                         ('token', 'tsecret'))


class TestParseTokenResponse(unittest.TestCase):

    def test_parse(self):
        data = parse_token_response(
            b'oauth_token=abc&oauth_token_secret=def&user_id=7')
        self.assertEqual(data, {'oauth_token': 'abc',
                                'oauth_token_secret': 'def',
                                'user_id': '7'})

    def test_missing(self):
        self.assertRaises(OAuthError, parse_token_response, '')
        self.assertRaises(OAuthError, parse_token_response,
                          'oauth_token=abc&oauth_token_secret=')
        self.assertRaises(OAuthError, parse_token_response, '<html></html>')
