#!/usr/bin/env python

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

A command line Foursquare client, implemented using foursquareasync.

Requests are made concurrently, so asking for your history and your friends
at once makes both requests before waiting for either.

"""

from getpass import getpass
from optparse import OptionParser
import sys

from foursquareasync import Foursquare, FoursquareError


def show_history(fsq, opts):
    resp = fsq.get_history({'l': opts.limit}, opts.username, opts.password)

    def show():
        print("## Your recent checkins ##")
        for checkin in resp.get('checkins') or []:
            venue = checkin.get('venue') or {}
            print("%s: %s" % (checkin.get('created'), venue.get('name')))
    return show


def show_friends(fsq, opts):
    resp = fsq.get_friends(None, opts.username, opts.password)

    def show():
        print("## Your friends ##")
        for friend in resp.get('friends') or []:
            print("%s %s" % (friend.get('firstname'),
                             friend.get('lastname', '')))
    return show


def show_venues(fsq, opts):
    geolat, geolong = opts.near.split(',', 1)
    resp = fsq.get_venues({'geolat': geolat, 'geolong': geolong,
                           'l': opts.limit}, opts.username, opts.password)

    def show():
        print("## Venues near %s ##" % opts.near)
        for group in resp.groups:
            for venue in group.venues:
                print("%s (%s)" % (venue.name, group.type))
    return show


def main(argv=None):
    if argv is None:
        argv = sys.argv

    parser = OptionParser()
    parser.add_option("-u", "--username", dest="username",
        help="email or phone number for authentication")
    parser.add_option("-l", "--limit", dest="limit", type="int", default=10,
        help="number of results to show")
    parser.add_option("--history", action="append_const", const=show_history,
        dest="actions", help="Show your recent checkins (requires -u)")
    parser.add_option("--friends", action="append_const", const=show_friends,
        dest="actions", help="Show your friends (requires -u)")
    parser.add_option("--near", dest="near", metavar="LAT,LONG",
        help="Show venues near a location")
    opts, args = parser.parse_args(argv[1:])

    actions = list(opts.actions or [])
    if opts.near is not None:
        actions.append(show_venues)
    if not actions:
        parser.error("nothing to show; try --history, --friends or --near")

    opts.password = None
    if opts.username is not None:
        opts.password = getpass("Password: ")

    fsq = Foursquare()
    fsq.use_asynchronous()

    try:
        # Start every request, then show each as it's delivered.
        shows = [action(fsq, opts) for action in actions]
        for show in shows:
            print()
            show()
        print()
    except FoursquareError as exc:
        # The API could be down, or the credentials could be wrong, so show
        # the error to the end user.
        print("Error making request: %s: %s" % (type(exc).__name__, exc),
              file=sys.stderr)
        return 1
    finally:
        fsq.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
