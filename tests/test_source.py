"""
Tests for upload source resolution.
"""

import io
import os
from pathlib import Path

import pytest

from sftpput import (
    BufferSource,
    PathSource,
    SourceNotFound,
    StreamSource,
    as_source,
    open_source,
)


def drain(source, **kwargs):
    with open_source(source, **kwargs) as reader:
        return reader.size, list(reader)


class TestAsSource:
    def test_upload_sources_pass_through(self):
        source = BufferSource(b"x")
        assert as_source(source) is source

    def test_bytes_like_become_buffers(self):
        for data in (b"abc", bytearray(b"abc"), memoryview(b"abc")):
            source = as_source(data)
            assert isinstance(source, BufferSource)
            assert source.data == b"abc"

    def test_paths_become_path_sources(self):
        assert isinstance(as_source("some/file.txt"), PathSource)
        assert isinstance(as_source(Path("some/file.txt")), PathSource)

    def test_readables_and_iterables_become_streams(self):
        assert isinstance(as_source(io.BytesIO(b"abc")), StreamSource)
        assert isinstance(as_source(iter([b"abc"])), StreamSource)

    def test_none_is_rejected(self):
        with pytest.raises(TypeError):
            as_source(None)

    def test_junk_is_rejected(self):
        with pytest.raises(TypeError, match="int"):
            as_source(42)


class TestBufferSource:
    def test_chunks_and_size(self):
        size, chunks = drain(BufferSource(b"hello"), chunk_size=2)
        assert size == 5
        assert chunks == [b"he", b"ll", b"o"]

    def test_text_is_encoded(self):
        assert drain(BufferSource("héllo")) == (6, [b"h\xc3\xa9llo"])
        assert drain(BufferSource("héllo"), encoding="latin-1") == (
            5,
            [b"h\xe9llo"],
        )

    def test_empty(self):
        assert drain(BufferSource(b"")) == (0, [])

    def test_can_be_reused(self):
        source = BufferSource(b"again")
        assert drain(source) == drain(source)

    def test_rejects_non_data(self):
        with pytest.raises(TypeError):
            BufferSource(123)


class TestStreamSource:
    def test_binary_file_object(self):
        size, chunks = drain(StreamSource(io.BytesIO(b"abcdef")), chunk_size=4)
        assert size is None
        assert chunks == [b"abcd", b"ef"]

    def test_text_file_object(self):
        _, chunks = drain(
            StreamSource(io.StringIO("your text here")), encoding="utf-8"
        )
        assert b"".join(chunks) == b"your text here"

    def test_iterable_of_mixed_chunks(self):
        _, chunks = drain(StreamSource(["your ", b"text ", "", "here"]))
        assert chunks == [b"your ", b"text ", b"here"]

    def test_size_hint(self):
        size, _ = drain(StreamSource(io.BytesIO(b"abc"), size=3))
        assert size == 3

    def test_read_only_once(self):
        source = StreamSource(io.BytesIO(b"abc"))
        drain(source)
        assert source.consumed
        with pytest.raises(ValueError):
            drain(source)

    def test_stream_left_open(self):
        stream = io.BytesIO(b"abc")
        drain(StreamSource(stream))
        assert not stream.closed


class TestPathSource:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"\x00\x01" * 10)
        size, chunks = drain(PathSource(path), chunk_size=8)
        assert size == 20
        assert b"".join(chunks) == b"\x00\x01" * 10
        assert len(chunks) == 3

    def test_encoding_does_not_touch_file_bytes(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_bytes("héllo".encode("latin-1"))
        _, chunks = drain(PathSource(path), encoding="utf-8")
        assert chunks == [b"h\xe9llo"]

    def test_expands_user(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert PathSource("~/x.txt").path == os.path.join(
            str(tmp_path), "x.txt"
        )

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "no-such-file.txt")
        with pytest.raises(SourceNotFound) as info:
            drain(PathSource(path))
        assert info.value.path == path
        assert "No such file or directory" in str(info.value)

    def test_file_closed_when_body_raises(self, tmp_path, monkeypatch):
        import sftpput.source

        path = tmp_path / "data.txt"
        path.write_bytes(b"abc")
        opened = []

        def tracking_open(*args, **kwargs):
            fl = open(*args, **kwargs)
            opened.append(fl)
            return fl

        monkeypatch.setattr(
            sftpput.source, "open", tracking_open, raising=False
        )
        with pytest.raises(RuntimeError):
            with open_source(PathSource(path)):
                raise RuntimeError("boom")
        assert opened[0].closed
