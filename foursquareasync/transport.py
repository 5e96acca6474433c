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

Sending HTTP requests with `httplib2`, either one at a time or concurrently.

`Transport.submit()` always returns a `PendingHandle` right away. In the
default synchronous mode the request has already completed by then; in
asynchronous mode it runs on a worker thread, and several handles can be in
flight at once. Either way, the outcome (or the network failure) is only
retrieved when the handle's `result()` is asked for.

"""

from concurrent import futures
import http.client
import logging
import threading

import httplib2

from foursquareasync.errors import TransportError


log = logging.getLogger('foursquareasync.transport')


class PendingHandle(object):

    """A request owned by a `Transport` that may not have completed yet."""

    def __init__(self, future, method, uri):
        self._future = future
        self.method = method
        self.uri = uri

    def __repr__(self):
        state = 'done' if self.done() else 'pending'
        return '<%s %s %s (%s)>' % (type(self).__name__, self.method,
            self.uri, state)

    def done(self):
        return self._future.done()

    def result(self, timeout=None):
        """Waits for the request to complete and returns its
        ``(httplib2.Response, content)`` pair.

        If the request failed at the network level, raises `TransportError`.
        Asking again returns (or raises) the same outcome without waiting.

        """
        return self._future.result(timeout)

    def drain(self):
        """Waits for the request to complete, without retrieving its outcome."""
        futures.wait([self._future])


class Transport(object):

    """Sends requests through `httplib2.Http` user agents.

    Optional parameter `http` is a user agent to use for every request, and
    should be compatible with `httplib2.Http` instances. Without one, the
    transport makes an `httplib2.Http` per thread, since they can't be shared
    between threads.

    """

    def __init__(self, timeout=None, asynchronous=False, max_workers=8,
                 http=None):
        self.timeout = timeout
        self.asynchronous = asynchronous
        self.max_workers = max_workers
        self._http = http
        self._local = threading.local()
        self._executor = None
        self._executor_lock = threading.Lock()

    @property
    def http(self):
        if self._http is not None:
            return self._http
        http = getattr(self._local, 'http', None)
        if http is None:
            http = httplib2.Http(timeout=self.timeout)
            self._local.http = http
        return http

    @property
    def executor(self):
        with self._executor_lock:
            if self._executor is None:
                self._executor = futures.ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix='foursquareasync')
            return self._executor

    def submit(self, method, uri, body=None, headers=None):
        """Starts a request and returns its `PendingHandle`."""
        if headers is None:
            headers = {}

        if self.asynchronous:
            log.debug('Queueing %s %s', method, uri)
            future = self.executor.submit(self.perform, method, uri, body,
                headers)
        else:
            future = futures.Future()
            try:
                future.set_result(self.perform(method, uri, body, headers))
            except TransportError as exc:
                # Held until someone asks for the result.
                future.set_exception(exc)

        return PendingHandle(future, method, uri)

    def perform(self, method, uri, body=None, headers=None):
        """Sends a request and waits for its response.

        Returns the ``(httplib2.Response, content)`` pair. Network failures
        are raised as `TransportError`.

        """
        log.debug('Requesting %s %s', method, uri)
        try:
            response, content = self.http.request(uri=uri, method=method,
                body=body, headers=headers)
        except (httplib2.HttpLib2Error, http.client.HTTPException,
                OSError) as exc:
            raise TransportError('%s request to %s failed: %s'
                % (method, uri, exc)) from exc
        log.debug('Received %s for %s %s', response.status, method, uri)
        return response, content

    def close(self):
        """Waits for queued requests to finish and stops the worker threads."""
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
