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
Per-call settings for `.Uploader.put`.
"""

import codecs

from sftpput.common import DEFAULT_CHUNK_SIZE


class UploadOptions:
    """
    Settings for a single upload.

    :param str encoding:
        codec used to turn ``str`` data into bytes. Must be known to
        `codecs`. Bytes are always sent as-is; when no encoding is given,
        text is sent as UTF-8.
    :param bool append:
        append to the destination instead of truncating it
    :param int mode:
        permission bits to apply to the destination once it is written
    :param bool confirm:
        stat the destination afterwards and check that its size matches
        what was sent
    :param callable callback:
        called as ``callback(bytes_so_far, total)`` after every chunk;
        ``total`` is ``None`` when the size of the source isn't known
    :param int chunk_size: how much to read from the source at a time
    """

    def __init__(
        self,
        encoding=None,
        append=False,
        mode=None,
        confirm=True,
        callback=None,
        chunk_size=DEFAULT_CHUNK_SIZE,
    ):
        if encoding is not None:
            try:
                encoding = codecs.lookup(encoding).name
            except LookupError:
                raise ValueError("Unknown encoding: {!r}".format(encoding))
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if callback is not None and not callable(callback):
            raise TypeError("callback must be callable")
        self.encoding = encoding
        self.append = append
        self.mode = mode
        self.confirm = confirm
        self.callback = callback
        self.chunk_size = chunk_size

    @property
    def flags(self):
        """
        The mode string handed to `paramiko.sftp_client.SFTPClient.open`.
        """
        return "ab" if self.append else "wb"

    def __repr__(self):
        return (
            "UploadOptions(encoding={!r}, append={!r}, mode={!r}, "
            "confirm={!r}, chunk_size={!r})"
        ).format(
            self.encoding,
            self.append,
            None if self.mode is None else oct(self.mode),
            self.confirm,
            self.chunk_size,
        )
