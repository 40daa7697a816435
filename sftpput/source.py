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
The three kinds of data `.Uploader.put` knows how to send, and the one
function that turns any of them into a stream of bytes.
"""

import os
from contextlib import contextmanager

from sftpput.common import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING
from sftpput.upload_exception import SourceNotFound


def _to_bytes(data, encoding):
    if isinstance(data, str):
        return data.encode(encoding or DEFAULT_ENCODING)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        "Expected bytes or str, got {}".format(type(data).__name__)
    )


class SourceReader:
    """
    Iterable of non-empty ``bytes`` chunks drained from one source.

    ``size`` is the total number of bytes the source will produce, or
    ``None`` when that can't be known up front.
    """

    def __init__(self, chunks, size=None):
        self._chunks = chunks
        self.size = size

    def __iter__(self):
        for chunk in self._chunks:
            if chunk:
                yield chunk


class UploadSource:
    """
    Base class for upload sources. Use one of the subclasses, or `as_source`.
    """

    def open(self, encoding=None, chunk_size=DEFAULT_CHUNK_SIZE):
        """
        Context manager yielding a `SourceReader` over this source's data.
        """
        raise NotImplementedError


class BufferSource(UploadSource):
    """
    Data that is already in memory, as bytes or as text.
    """

    def __init__(self, data):
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        if not isinstance(data, (bytes, str)):
            raise TypeError(
                "BufferSource needs bytes or str, not {}".format(
                    type(data).__name__
                )
            )
        self.data = data

    @contextmanager
    def open(self, encoding=None, chunk_size=DEFAULT_CHUNK_SIZE):
        data = _to_bytes(self.data, encoding)
        chunks = (
            data[i : i + chunk_size] for i in range(0, len(data), chunk_size)
        )
        yield SourceReader(chunks, len(data))

    def __repr__(self):
        return "<BufferSource of {} {}>".format(
            len(self.data), "chars" if isinstance(self.data, str) else "bytes"
        )


class StreamSource(UploadSource):
    """
    A live stream of data, read exactly once.

    :param stream:
        an object with a ``read(n)`` method (binary or text file objects,
        sockets wrapped with ``makefile``...) or any iterable of bytes/str
        chunks. It is left open when the upload finishes.
    :param int size: total size in bytes, if known; only used for progress
    """

    def __init__(self, stream, size=None):
        if stream is None:
            raise TypeError("StreamSource needs a stream, not None")
        self.stream = stream
        self.size = size
        self.consumed = False

    def _chunks(self, encoding, chunk_size):
        read = getattr(self.stream, "read", None)
        if read is None:
            for chunk in self.stream:
                yield _to_bytes(chunk, encoding)
            return
        while True:
            chunk = read(chunk_size)
            if not chunk:
                break
            yield _to_bytes(chunk, encoding)

    @contextmanager
    def open(self, encoding=None, chunk_size=DEFAULT_CHUNK_SIZE):
        if self.consumed:
            raise ValueError("{!r} has already been read".format(self))
        self.consumed = True
        yield SourceReader(self._chunks(encoding, chunk_size), self.size)

    def __repr__(self):
        return "<StreamSource {!r}>".format(self.stream)


class PathSource(UploadSource):
    """
    A file on the local filesystem, opened when the upload starts.

    Relative paths are taken relative to the current working directory and
    ``~`` is expanded. The file is sent byte for byte; any ``encoding`` is
    ignored.
    """

    def __init__(self, path):
        if path is None:
            raise TypeError("PathSource needs a path, not None")
        self.path = os.path.expanduser(os.fspath(path))

    @contextmanager
    def open(self, encoding=None, chunk_size=DEFAULT_CHUNK_SIZE):
        try:
            fl = open(self.path, "rb")
        except OSError as e:
            raise SourceNotFound(self.path, e) from e
        with fl:
            size = os.fstat(fl.fileno()).st_size
            yield SourceReader(iter(lambda: fl.read(chunk_size), b""), size)

    def __repr__(self):
        return "<PathSource {!r}>".format(self.path)


def as_source(obj):
    """
    Wrap a plain value in the matching `UploadSource`.

    - an `UploadSource` is returned unchanged
    - ``bytes``, ``bytearray`` and ``memoryview`` become a `BufferSource`
    - ``str`` and path-like objects become a `PathSource`; wrap text in a
      `BufferSource` yourself to upload it as data
    - objects with a ``read`` method, and other iterables, become a
      `StreamSource`

    :raises TypeError: for ``None`` or anything else
    """
    if isinstance(obj, UploadSource):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BufferSource(obj)
    if isinstance(obj, (str, os.PathLike)):
        return PathSource(obj)
    if hasattr(obj, "read"):
        return StreamSource(obj)
    if obj is not None and hasattr(obj, "__iter__"):
        return StreamSource(obj)
    raise TypeError(
        "Don't know how to upload a {}".format(type(obj).__name__)
    )


@contextmanager
def open_source(source, encoding=None, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Resolve ``source`` (see `as_source`) into a `SourceReader`.

    Anything the source had to open is closed again when the ``with`` block
    exits, however it exits.

    :raises SourceNotFound: if a local path can't be opened
    """
    with as_source(source).open(encoding, chunk_size) as reader:
        yield reader
