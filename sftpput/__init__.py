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

from sftpput.client import Client
from sftpput.config import Config
from sftpput.options import UploadOptions
from sftpput.source import (
    UploadSource,
    BufferSource,
    StreamSource,
    PathSource,
    as_source,
    open_source,
)
from sftpput.uploader import Uploader
from sftpput.upload_exception import (
    UploadError,
    SourceNotFound,
    DestinationUnreachable,
    TransferFailure,
)

from sftpput._version import __version__, __version_info__

__author__ = "The sftpput authors"
__license__ = "GNU Lesser General Public License (LGPL)"

__all__ = [
    "BufferSource",
    "Client",
    "Config",
    "DestinationUnreachable",
    "PathSource",
    "SourceNotFound",
    "StreamSource",
    "TransferFailure",
    "UploadError",
    "UploadOptions",
    "UploadSource",
    "Uploader",
    "__version__",
    "__version_info__",
    "as_source",
    "open_source",
]
