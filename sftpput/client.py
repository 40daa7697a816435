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
SFTP client wrapper: one SSH connection, uploads from any number of threads.
"""

import errno
import threading
import weakref

from paramiko import AutoAddPolicy, SFTPClient, SSHClient, SSHException
from paramiko.util import ClosingContextManager

from sftpput import util
from sftpput.common import DEBUG, INFO
from sftpput.config import Config
from sftpput.options import UploadOptions
from sftpput.uploader import Uploader


class _ThreadSession:
    """
    Owns one thread's SFTP session; lives in that thread's locals.
    """

    def __init__(self, sftp):
        self.sftp = sftp


class Client(ClosingContextManager):
    """
    A connection to an SFTP server.

    Every thread that uses a `Client` gets its own SFTP session, opened on
    demand as a channel of the one shared SSH transport. Uploads from
    different threads therefore run side by side without stepping on each
    other's requests, and a broken upload in one thread leaves the others
    alone. A thread's session is closed once that thread has finished.

    Instances are context managers; leaving the ``with`` block calls
    `close`.

    :param .Config config: connection settings (default: empty `.Config`)
    """

    def __init__(self, config=None):
        self.config = config if config is not None else Config()
        self.logger = util.get_logger("sftpput.client")
        self._ssh = None
        self._transport = None
        self._local = threading.local()
        self._sessions = []
        self._lock = threading.RLock()

    @classmethod
    def from_transport(cls, transport, config=None):
        """
        Create a client on top of an already authenticated ``Transport``.

        The transport stays the caller's: `close` only closes the SFTP
        sessions this client opened on it.
        """
        client = cls(config)
        client._transport = transport
        return client

    def _log(self, level, msg, *args):
        self.logger.log(level, msg, *args)

    def connect(self, sock=None):
        """
        Connect and authenticate using this client's `.Config`.

        The config is first completed with `.Config.lookup`. Host keys are
        checked against the user's ``known_hosts``; unknown hosts are
        rejected unless ``auto_add_host_keys`` is set.

        :param socket sock:
            an already connected socket (or socket-like object) to use
            instead of opening one

        :raises:
            whatever ``paramiko.SSHClient.connect`` raises, e.g.
            `paramiko.ssh_exception.AuthenticationException`
        """
        if self._transport is not None:
            raise SSHException("Client is already connected")
        config = self.config.lookup()
        if config.hostname is None:
            raise ValueError("No hostname given")
        ssh = SSHClient()
        ssh.load_system_host_keys()
        if config.auto_add_host_keys:
            ssh.set_missing_host_key_policy(AutoAddPolicy())
        self._log(INFO, "Connecting to %r", config)
        search = config.password is None and config.key_filename is None
        ssh.connect(
            config.hostname,
            port=config.port,
            username=config.username,
            password=config.password,
            key_filename=config.key_filename,
            timeout=config.timeout,
            sock=sock,
            allow_agent=search,
            look_for_keys=search,
        )
        self._ssh = ssh
        self._transport = ssh.get_transport()

    def _session(self):
        holder = getattr(self._local, "session", None)
        if holder is not None:
            return holder.sftp
        if self._transport is None or not self._transport.is_active():
            raise SSHException("Client is not connected")
        sftp = SFTPClient.from_transport(self._transport)
        if sftp is None:
            raise SSHException("Server refused to open an SFTP session")
        if self.config.timeout is not None:
            sftp.get_channel().settimeout(self.config.timeout)
        self._log(DEBUG, "Opened SFTP session for this thread")
        holder = _ThreadSession(sftp)
        # a thread's locals are dropped when it exits, taking the holder
        # with them; the session must not outlive it
        finalizer = weakref.finalize(holder, self._release, sftp)
        finalizer.atexit = False
        self._local.session = holder
        with self._lock:
            self._sessions.append(sftp)
        return sftp

    def _release(self, sftp):
        with self._lock:
            if sftp not in self._sessions:
                # already closed by close()
                return
            self._sessions.remove(sftp)
        self._log(DEBUG, "Closing SFTP session of a finished thread")
        sftp.close()

    def put(self, source, remotepath, options=None, **kwargs):
        """
        Upload ``source`` to ``remotepath``; see `.Uploader.put`.

        Options may be given as an `.UploadOptions` or as its keyword
        arguments, e.g. ``client.put(b"hello", "hello.txt",
        encoding="utf8")``.
        """
        if options is None:
            options = UploadOptions(**kwargs)
        elif kwargs:
            raise TypeError("Give either options or keyword arguments")
        return Uploader(self._session()).put(source, remotepath, options)

    def stat(self, path):
        """
        Return the `.SFTPAttributes` of a remote path.
        """
        return self._session().stat(path)

    def exists(self, path):
        """
        Whether something exists at ``path`` on the server.
        """
        try:
            self._session().stat(path)
        except IOError as e:
            if e.errno == errno.ENOENT:
                return False
            raise
        return True

    def cwd(self):
        """
        The absolute path the server resolves relative paths against.
        """
        return self._session().normalize(".")

    def close(self):
        """
        Close every SFTP session, and the connection if `connect` opened it.
        """
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for sftp in sessions:
            sftp.close()
        self._local = threading.local()
        if self._ssh is not None:
            self._ssh.close()
            self._ssh = None
            self._transport = None
