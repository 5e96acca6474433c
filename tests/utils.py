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

from concurrent import futures
import logging

import httplib2
import mock

from foursquareasync.transport import PendingHandle


def make_response(response, url):
    default_response = {
        'status':           200,
        'content-type':     'application/json',
        'content-location': url,
    }

    if isinstance(response, dict):
        response = dict(response)
        if 'content' in response:
            content = response.pop('content')
        else:
            content = ''

        status = response.get('status', 200)
        if 200 <= status < 300:
            response_info = dict(default_response)
            response_info.update(response)
        else:
            # Homg all bets are off!! Use specified headers only.
            response_info = dict(response)
    else:
        response_info = dict(default_response)
        content = response

    return httplib2.Response(response_info), content


def mock_http(req, resp_or_content):
    mock_obj = mock.NonCallableMock(spec_set=httplib2.Http)

    if not isinstance(req, dict):
        req = dict(uri=req)

    resp, content = make_response(resp_or_content, req['uri'])
    mock_obj.request.return_value = (resp, content)
    return mock_obj


def completed_handle(resp_or_content, url='http://example.com/ohhai.json',
                     method='GET'):
    future = futures.Future()
    future.set_result(make_response(resp_or_content, url))
    return PendingHandle(future, method, url)


def failed_handle(exc, url='http://example.com/ohhai.json', method='GET'):
    future = futures.Future()
    future.set_exception(exc)
    return PendingHandle(future, method, url)


def log():
    import sys
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(asctime)s %(levelname)s %(message)s")
