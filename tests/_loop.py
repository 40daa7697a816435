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

import socket
import threading


class LoopSocket:
    """
    A LoopSocket looks like a normal socket, but all data written to it is
    delivered on the read-end of another LoopSocket, and vice versa.  It's
    like a software "socketpair".
    """

    def __init__(self):
        self._in_buffer = bytes()
        self._lock = threading.Lock()
        self._cv = threading.Condition(self._lock)
        self._timeout = None
        self._mate = None
        self._closed = False

    def close(self):
        self._unlink()
        self._closed = True
        with self._lock:
            self._in_buffer = bytes()

    def send(self, data):
        data = bytes(data)
        mate = self._mate
        if mate is None:
            # EOF
            raise EOFError()
        mate._feed(data)
        return len(data)

    def recv(self, n):
        with self._lock:
            if self._mate is None:
                # EOF
                return bytes()
            if len(self._in_buffer) == 0:
                self._cv.wait(self._timeout)
            if len(self._in_buffer) == 0:
                raise socket.timeout
            out = self._in_buffer[:n]
            self._in_buffer = self._in_buffer[n:]
            return out

    def settimeout(self, n):
        self._timeout = n

    def link(self, other):
        self._mate = other
        other._mate = self

    def _feed(self, data):
        with self._lock:
            self._in_buffer += data
            self._cv.notify_all()

    def _unlink(self):
        with self._lock:
            mate, self._mate = self._mate, None
        if mate is not None:
            mate._unlink()
