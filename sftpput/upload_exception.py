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

"""
Exceptions raised by `.Uploader.put` and friends.
"""


def _reason(cause):
    # OSError/IOError from the local filesystem or an SFTP status reply
    # carries the human readable part in strerror.
    strerror = getattr(cause, "strerror", None)
    if strerror:
        return strerror
    return str(cause) or cause.__class__.__name__


class UploadError(Exception):
    """
    Base class for every failure of an upload.

    :param str path: the local or remote path the failure is about
    :param cause:
        the underlying exception, or a string describing the problem
    """

    def __init__(self, path, cause):
        Exception.__init__(self, path, cause)
        self.path = path
        self.cause = cause

    @property
    def reason(self):
        """
        Short description of ``cause``, e.g. ``"No such file"``.
        """
        return _reason(self.cause)

    def __str__(self):
        return "{}: {!r}".format(self.reason, self.path)


class SourceNotFound(UploadError):
    """
    A local path given as the upload source could not be opened for reading.

    Raised before anything is sent to the server.
    """

    def __str__(self):
        return "Local source {!r} is not readable: {}".format(
            self.path, self.reason
        )


class DestinationUnreachable(UploadError):
    """
    The server refused to open the destination for writing, usually because
    its parent directory does not exist.
    """

    def __str__(self):
        return "Remote destination {!r} is unreachable: {}".format(
            self.path, self.reason
        )


class TransferFailure(UploadError):
    """
    The transfer broke off after the destination was opened: the source
    raised, the session died, or the server did not end up with the bytes
    that were sent.

    The remote file may hold partial content.
    """

    def __str__(self):
        return "Upload to {!r} failed: {}".format(self.path, self.reason)
