#!/usr/bin/env python

# Copyright (C) 2026  The sftpput authors
#
# This file is part of sftpput.
#
# sftpput is free software; you can redistribute it and/or modify it under the
# terms of the GNU Lesser General Public License as published by the Free
# Software Foundation; either version 2.1 of the License, or (at your option)
# any later version.
#
# sftpput is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with sftpput; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301 USA.

# usage: demo_put.py [user@]host[:port] LOCAL_FILE REMOTE_PATH
# settings not given on the command line come from SFTP_* variables and
# ~/.ssh/config.

import getpass
import sys
import traceback

import sftpput


# setup logging
sftpput.util.log_to_file("demo_put.log")

if len(sys.argv) != 4:
    print("usage: demo_put.py [user@]host[:port] LOCAL_FILE REMOTE_PATH")
    sys.exit(1)
target, localpath, remotepath = sys.argv[1:]

config = sftpput.Config.from_env()
if target.find("@") >= 0:
    config.username, target = target.split("@")
if target.find(":") >= 0:
    target, portstr = target.split(":")
    config.port = int(portstr)
config.hostname = target
if config.password is None and config.key_filename is None:
    config.password = getpass.getpass(
        "Password for %s@%s: " % (config.username, config.hostname)
    )


def progress(sent, total):
    sys.stdout.write("\r%d / %s bytes" % (sent, total))
    sys.stdout.flush()


try:
    with sftpput.Client(config) as client:
        print("*** Connecting...")
        client.connect()
        attrs = client.put(localpath, remotepath, callback=progress)
        print()
        print("*** Uploaded %d bytes to %s" % (attrs.st_size, remotepath))
except sftpput.UploadError as e:
    print("*** Upload failed: %s" % e)
    sys.exit(1)
except Exception as e:
    print("*** Caught exception: %s: %s" % (e.__class__, e))
    traceback.print_exc()
    sys.exit(1)
