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
Copy data from an `.UploadSource` onto an SFTP server.
"""

from contextlib import ExitStack

from paramiko import SFTPAttributes, SFTPError, SSHException
from paramiko.sftp import CMD_STATUS

from sftpput import util
from sftpput.common import DEBUG, INFO
from sftpput.options import UploadOptions
from sftpput.source import as_source, open_source
from sftpput.upload_exception import DestinationUnreachable, TransferFailure


class Uploader:
    """
    Uploads buffers, streams and local files through an open SFTP session.

    The session is borrowed, never opened or closed here, so one may be
    shared with other work. An `Uploader` keeps no state between calls.

    :param .SFTPClient sftp: an open ``paramiko.SFTPClient``
    """

    def __init__(self, sftp):
        self.sftp = sftp
        self.logger = util.get_logger("sftpput.uploader")

    def _log(self, level, msg, *args):
        self.logger.log(level, msg, *args)

    def put(self, source, remotepath, options=None):
        """
        Copy the whole of ``source`` to ``remotepath`` on the server.

        The destination is created, or truncated unless ``options.append``
        is set; its parent directory must already exist. ``remotepath`` is
        passed to the server unchanged, so relative paths are resolved the
        way the server resolves them (normally against the login
        directory).

        Writes are pipelined, but this returns only once the status reply
        to every one of them has been read and found OK and,
        with ``options.confirm`` (the default), once a ``stat`` of the new
        file shows the expected size.

        :param source:
            an `.UploadSource`, or a plain value accepted by `.as_source`
        :param str remotepath: the destination path on the server
        :param .UploadOptions options: per-call settings
        :return:
            an `.SFTPAttributes` describing the uploaded file (empty when
            ``options.confirm`` is ``False``)

        :raises .SourceNotFound:
            if a local source path can't be read. Nothing has been sent.
        :raises .DestinationUnreachable:
            if the server won't open ``remotepath`` for writing
        :raises .TransferFailure:
            if anything goes wrong after that; the destination may be
            partially written. Also raised, before anything is sent, when
            text can't be encoded with ``options.encoding``
        """
        if options is None:
            options = UploadOptions()
        source = as_source(source)
        chunk_size = options.chunk_size
        with ExitStack() as stack:
            try:
                reader = stack.enter_context(
                    open_source(source, options.encoding, chunk_size)
                )
            except UnicodeError as e:
                # text that won't encode fails before the server is touched
                raise TransferFailure(remotepath, e) from e
            offset = self._prior_size(remotepath) if options.append else 0
            self._log(DEBUG, "put(%r, %r, %r)", source, remotepath, options)
            fr = self._open_remote(remotepath, options)
            try:
                written = self._pump(reader, fr, options)
                self._wait_for_acks(fr)
                fr.close()
            except Exception as e:
                self._discard(fr)
                self._log(INFO, "Upload to %r failed: %r", remotepath, e)
                raise TransferFailure(remotepath, e) from e
        self._log(DEBUG, "Sent %d bytes to %r", written, remotepath)
        if options.mode is not None:
            self._remote_call(remotepath, self.sftp.chmod, options.mode)
        if not options.confirm:
            return SFTPAttributes()
        attrs = self._remote_call(remotepath, self.sftp.stat)
        expected = offset + written
        if attrs.st_size != expected:
            raise TransferFailure(
                remotepath,
                "size mismatch in put!  {} != {}".format(
                    attrs.st_size, expected
                ),
            )
        return attrs

    # ...internals...

    def _session_alive(self):
        sock = getattr(self.sftp, "sock", None)
        return sock is not None and not sock.closed

    def _open_remote(self, remotepath, options):
        try:
            fr = self.sftp.open(remotepath, options.flags)
        except IOError as e:
            # a status reply (with or without an errno) on a live channel is
            # the server refusing this path; nothing was created
            if not self._session_alive():
                raise TransferFailure(remotepath, e) from e
            self._log(DEBUG, "Server refused %r: %s", remotepath, e)
            raise DestinationUnreachable(remotepath, e) from e
        except Exception as e:
            raise TransferFailure(remotepath, e) from e
        fr.set_pipelined(True)
        return fr

    def _wait_for_acks(self, fr):
        # Pipelined writes are registered without a file object, so paramiko
        # drops their status replies unless they are read here, the same way
        # SFTPFile._write does when not pipelining.
        fr.flush()
        while len(fr._reqs):
            req = fr._reqs.popleft()
            t, msg = self.sftp._read_response(req)
            if t != CMD_STATUS:
                raise SFTPError("Expected status")

    def _discard(self, fr):
        # the session may already be gone, which is how we got here
        try:
            fr.close()
        except (IOError, EOFError, SSHException) as e:
            self._log(DEBUG, "Ignoring error closing remote file: %r", e)

    def _prior_size(self, remotepath):
        try:
            return self.sftp.stat(remotepath).st_size or 0
        except IOError as e:
            if not self._session_alive():
                raise TransferFailure(remotepath, e) from e
            # nothing there yet; the open decides whether that is a problem
            return 0
        except Exception as e:
            raise TransferFailure(remotepath, e) from e

    def _pump(self, reader, fr, options):
        size = 0
        for chunk in reader:
            fr.write(chunk)
            size += len(chunk)
            if options.callback is not None:
                options.callback(size, reader.size)
        return size

    def _remote_call(self, remotepath, method, *args):
        try:
            return method(remotepath, *args)
        except Exception as e:
            raise TransferFailure(remotepath, e) from e
