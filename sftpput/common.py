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
Common constants and global variables.
"""

from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL  # noqa: F401

# local reads are done in chunks of this size; matches paramiko's own
# put/putfo buffer
DEFAULT_CHUNK_SIZE = 32768

# used for str data when no encoding is given
DEFAULT_ENCODING = "utf-8"

DEFAULT_PORT = 22
