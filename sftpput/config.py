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
Connection settings for `.Client`.
"""

import os

from paramiko import SSHConfig

from sftpput.common import DEFAULT_PORT


_TRUTHY = ("1", "true", "yes", "on")


class Config:
    """
    Where and how to connect.

    Values can be given directly, taken from the environment with
    `from_env`, and filled in from an OpenSSH client config file with
    `lookup`, in which case ``hostname`` may be a ``Host`` alias.
    """

    #: environment variable for each setting, as read by `from_env`
    ENV_VARS = {
        "hostname": "SFTP_HOST",
        "port": "SFTP_PORT",
        "username": "SFTP_USER",
        "password": "SFTP_PASSWORD",
        "key_filename": "SFTP_KEY_FILE",
        "timeout": "SFTP_TIMEOUT",
        "auto_add_host_keys": "SFTP_AUTO_ADD_HOST_KEYS",
        "ssh_config_path": "SFTP_SSH_CONFIG",
    }

    def __init__(
        self,
        hostname=None,
        port=None,
        username=None,
        password=None,
        key_filename=None,
        timeout=None,
        auto_add_host_keys=False,
        ssh_config_path=None,
    ):
        self.hostname = hostname
        self.port = None if port is None else int(port)
        self.username = username
        self.password = password
        self.key_filename = key_filename
        self.timeout = None if timeout is None else float(timeout)
        self.auto_add_host_keys = auto_add_host_keys
        self.ssh_config_path = ssh_config_path

    @classmethod
    def from_env(cls, environ=None):
        """
        Build a `Config` out of ``SFTP_*`` environment variables.

        :param dict environ: mapping to read instead of ``os.environ``
        """
        if environ is None:
            environ = os.environ
        kwargs = {}
        for name, var in cls.ENV_VARS.items():
            value = environ.get(var)
            if value:
                kwargs[name] = value
        if "auto_add_host_keys" in kwargs:
            flag = kwargs["auto_add_host_keys"].lower()
            kwargs["auto_add_host_keys"] = flag in _TRUTHY
        return cls(**kwargs)

    def _ssh_config(self):
        path = self.ssh_config_path or os.path.expanduser("~/.ssh/config")
        if not os.path.isfile(path):
            return None
        return SSHConfig.from_path(path)

    def lookup(self):
        """
        Return a copy with unset values filled in from the ssh config file.

        ``ssh_config_path`` is used if set, ``~/.ssh/config`` otherwise;
        when neither exists the copy only gains the default port. Values
        set on this object always win over the file.
        """
        new = self.copy()
        ssh_config = self._ssh_config()
        if ssh_config is not None and self.hostname is not None:
            options = ssh_config.lookup(self.hostname)
            new.hostname = options.get("hostname", self.hostname)
            if new.port is None and "port" in options:
                new.port = options.as_int("port")
            if new.username is None:
                new.username = options.get("user")
            if new.key_filename is None and "identityfile" in options:
                new.key_filename = options["identityfile"][0]
            if new.timeout is None and "connecttimeout" in options:
                new.timeout = float(options["connecttimeout"])
        if new.port is None:
            new.port = DEFAULT_PORT
        return new

    def copy(self, **overrides):
        kwargs = dict(
            hostname=self.hostname,
            port=self.port,
            username=self.username,
            password=self.password,
            key_filename=self.key_filename,
            timeout=self.timeout,
            auto_add_host_keys=self.auto_add_host_keys,
            ssh_config_path=self.ssh_config_path,
        )
        kwargs.update(overrides)
        return self.__class__(**kwargs)

    def __repr__(self):
        # never show the password
        return "<Config {}@{}:{}>".format(
            self.username, self.hostname, self.port
        )
