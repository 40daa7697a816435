import gzip
import logging
import os
import threading

import pytest
from paramiko import RSAKey, SFTPClient, SFTPServer, Transport

from ._loop import LoopSocket
from ._stub_sftp import StubServer, StubSFTPServer
from ._util import ARTICLE, HOME, PASSWORD, USERNAME

from icecream import ic, install as install_ic


# Better print() for debugging - use ic()!
install_ic()
ic.configureOutput(includeContext=True)


# Perform logging by default; pytest will capture and thus hide it normally,
# presenting it on error/failure.
if not os.environ.get("DISABLE_LOGGING", False):
    logging.basicConfig(
        level=logging.DEBUG,
        format="[%(relativeCreated)s]\t%(levelname)s:%(name)s:%(message)s",
        datefmt="%H:%M:%S",
    )


@pytest.fixture(scope="session")
def host_key():
    """
    Server host key; generated once, since that's the slow part.
    """
    return RSAKey.generate(2048)


@pytest.fixture
def remote_root(tmp_path):
    """
    Local folder backing the stub server's filesystem.

    Holds ``home/<user>/testServer``, the folder uploads go to.
    """
    root = tmp_path / "remote"
    (root / HOME.lstrip("/") / "testServer").mkdir(parents=True)
    return root


@pytest.fixture
def remote_dir():
    return HOME + "/testServer"


@pytest.fixture
def local_dir(tmp_path):
    """
    Local folder with a multi-chunk text file and a small gzipped one.
    """
    path = tmp_path / "local"
    path.mkdir()
    (path / "test-file1.txt").write_text(ARTICLE * 200)
    (path / "test-file2.txt.gz").write_bytes(
        gzip.compress(ARTICLE.encode("utf-8"))
    )
    return path


@pytest.fixture
def server_sock(host_key, remote_root):
    """
    Start an in-memory SFTP server thread. Yields the client end socket.
    """
    socks = LoopSocket()
    sockc = LoopSocket()
    sockc.link(socks)
    ts = Transport(socks)
    ts.add_server_key(host_key)
    ts.set_subsystem_handler(
        "sftp", SFTPServer, StubSFTPServer, str(remote_root), HOME
    )
    ts.start_server(threading.Event(), StubServer())
    yield sockc
    ts.close()


@pytest.fixture
def sftp_server(server_sock):
    """
    Yield an authenticated client Transport talking to the stub server.
    """
    tc = Transport(server_sock)
    tc.connect(username=USERNAME, password=PASSWORD)
    yield tc
    tc.close()


@pytest.fixture
def sftp(sftp_server):
    """
    Yield a plain paramiko SFTP client on the stub server.
    """
    client = SFTPClient.from_transport(sftp_server)
    yield client
    client.close()
