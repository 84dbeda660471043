"""Unit tests for reading CSV sources."""

import asyncio
import io

import pytest

from mobility_import.parsing import SourceReadError, parse_csv_source, read_source
from tests.helpers import AsyncSource, FailingSource, csv_source


class TestReadSource:
    """Tests for read_source function."""

    def test_reads_sync_byte_stream(self):
        """Test reading a blocking binary file-like object."""
        text = asyncio.run(read_source(csv_source("gpid\n123")))
        assert text == "gpid\n123"

    def test_reads_async_source(self):
        """Test that a coroutine read() is awaited."""
        source = AsyncSource("Ubicación\nMálaga".encode("utf-8"))
        text = asyncio.run(read_source(source))
        assert text == "Ubicación\nMálaga"
        assert source.read_count == 1

    def test_accepts_text_stream(self):
        """Test that a text-mode source is passed through."""
        text = asyncio.run(read_source(io.StringIO("a,b\n1,2")))
        assert text == "a,b\n1,2"

    def test_invalid_utf8_is_replaced_not_rejected(self):
        """Test that undecodable bytes degrade instead of failing the read."""
        text = asyncio.run(read_source(io.BytesIO(b"name\nJos\xe9")))
        assert text == "name\nJos\ufffd"

    def test_read_failure_raises_source_read_error(self):
        """Test that a failing read() surfaces as SourceReadError."""
        with pytest.raises(SourceReadError) as exc_info:
            asyncio.run(read_source(FailingSource(OSError("disk gone"))))

        assert "disk gone" in str(exc_info.value)
        assert exc_info.value.source_name == "broken.csv"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_unreadable_object_raises_source_read_error(self):
        """Test that an object without read() is rejected."""
        with pytest.raises(SourceReadError):
            asyncio.run(read_source(object()))

    def test_unexpected_payload_type_raises_source_read_error(self):
        """Test that read() returning neither bytes nor str is rejected."""

        class NumberSource:
            def read(self):
                return 42

        with pytest.raises(SourceReadError, match="int"):
            asyncio.run(read_source(NumberSource()))


class TestParseCsvSource:
    """Tests for parse_csv_source function."""

    def test_reads_and_tokenizes(self):
        """Test reading a BOM-prefixed Excel export."""
        source = io.BytesIO("a;b\r\n1;2\r\n".encode("utf-8-sig"))
        records = asyncio.run(parse_csv_source(source))
        assert records == [{"a": "1", "b": "2"}]
