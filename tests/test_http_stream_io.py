"""Unit tests for HttpStreamIO."""

import io
import unittest
from dataclasses import dataclass
from unittest.mock import MagicMock

import requests
import responses

from savebuilder.chunks import SaveChunk
from savebuilder.compression import GZipStreamCompressor
from savebuilder.io import BaseAsyncStreamIO, BaseStreamIO, HttpRequestUris, HttpStreamIO
from savebuilder.savefile import SaveFile
from savebuilder.serialization import JsonStreamSerializer

BASE_URL = "https://saves.example.com/api/"
SAVE_URL = BASE_URL + "saves/1"
URIS = HttpRequestUris(
    read_uri="saves/1",
    write_uri="saves/1",
    exists_uri="saves/1",
    delete_uri="saves/1",
)


@dataclass
class Greeting:
    name: str = ""
    value: int = 0


class TestHttpStreamIO(unittest.IsolatedAsyncioTestCase):
    """Test HttpStreamIO against a mocked web service."""

    def setUp(self) -> None:
        """Set up the mocked transport and the provider for each test."""
        self.mock = responses.RequestsMock(assert_all_requests_are_fired=False)
        self.mock.start()
        self.addCleanup(self.mock.reset)
        self.addCleanup(self.mock.stop)
        self.http_io = HttpStreamIO(BASE_URL, URIS)
        self.addCleanup(self.http_io.close)

    def test_is_async_only(self) -> None:
        """Test that HttpStreamIO implements only the asynchronous contract."""
        assert isinstance(self.http_io, BaseAsyncStreamIO)
        assert not isinstance(self.http_io, BaseStreamIO)

    async def test_read(self) -> None:
        """Test that read_async returns the response body."""
        self.mock.add(responses.GET, SAVE_URL, body=b"payload", status=200)

        stream = await self.http_io.read_async()

        assert stream.read() == b"payload"

    async def test_read_not_found_is_empty(self) -> None:
        """Test that a 404 reads as an empty stream."""
        self.mock.add(responses.GET, SAVE_URL, status=404)

        stream = await self.http_io.read_async()

        assert stream.read() == b""

    async def test_read_server_error_raises(self) -> None:
        """Test that other error statuses raise."""
        self.mock.add(responses.GET, SAVE_URL, status=500)

        with self.assertRaises(requests.HTTPError):
            await self.http_io.read_async()

    async def test_read_sends_read_headers(self) -> None:
        """Test that read headers and the user agent are sent."""
        self.mock.add(responses.GET, SAVE_URL, body=b"", status=200)
        self.http_io.read_headers["Authorization"] = "Bearer token"

        await self.http_io.read_async()

        request = self.mock.calls[0].request
        assert request.headers["Authorization"] == "Bearer token"
        assert request.headers["User-Agent"] == "savebuilder-tests"

    async def test_write(self) -> None:
        """Test that write_async posts the stream with its length."""
        self.mock.add(responses.POST, SAVE_URL, status=201)
        self.http_io.write_headers["X-Slot"] = "1"

        await self.http_io.write_async(io.BytesIO(b"payload"))

        request = self.mock.calls[0].request
        assert request.body == b"payload"
        assert request.headers["Content-Length"] == "7"
        assert request.headers["X-Slot"] == "1"

    async def test_write_reads_from_current_position(self) -> None:
        """Test that only the remaining bytes of the stream are sent."""
        self.mock.add(responses.POST, SAVE_URL, status=200)
        stream = io.BytesIO(b"skip-payload")
        stream.seek(5)

        await self.http_io.write_async(stream)

        assert self.mock.calls[0].request.body == b"payload"

    async def test_write_error_raises(self) -> None:
        """Test that a failed write raises."""
        self.mock.add(responses.POST, SAVE_URL, status=503)

        with self.assertRaises(requests.HTTPError):
            await self.http_io.write_async(io.BytesIO(b"payload"))

    async def test_exists(self) -> None:
        """Test exists_async for success, missing and redirect statuses."""
        for status, expected in ((200, True), (204, True), (404, False), (302, False)):
            with self.subTest(status=status):
                self.mock.upsert(responses.GET, SAVE_URL, status=status)

                assert await self.http_io.exists_async() is expected

    async def test_exists_transport_failure_is_false(self) -> None:
        """Test that a connection error means the save does not exist."""
        self.mock.add(responses.GET, SAVE_URL, body=requests.ConnectionError("unreachable"))

        assert await self.http_io.exists_async() is False

    async def test_delete(self) -> None:
        """Test delete_async for success and failure statuses."""
        self.mock.add(responses.DELETE, SAVE_URL, status=204)
        self.mock.add(responses.DELETE, SAVE_URL, status=404)

        assert await self.http_io.delete_async() is True
        assert await self.http_io.delete_async() is False


class TestHttpStreamIOConfiguration(unittest.TestCase):
    """Test HttpStreamIO construction and URL handling."""

    def make_session(self) -> MagicMock:
        """Create a mock session returning a successful response."""
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        session.get.return_value.status_code = 200
        session.get.return_value.content = b"data"
        return session

    def test_uri_resolved_against_base_url(self) -> None:
        """Test that request URIs are joined onto the base URL."""
        session = self.make_session()
        http_io = HttpStreamIO(BASE_URL, HttpRequestUris(read_uri="saves/2"), session=session)

        http_io._read()

        assert session.get.call_args.args[0] == BASE_URL + "saves/2"

    def test_base_url_used_when_uri_missing(self) -> None:
        """Test that the base URL itself is used without a request URI."""
        session = self.make_session()
        http_io = HttpStreamIO(SAVE_URL, session=session)

        http_io._read()

        assert session.get.call_args.args[0] == SAVE_URL

    def test_absolute_uri_without_base_url(self) -> None:
        """Test that absolute URIs work without a base URL."""
        session = self.make_session()
        http_io = HttpStreamIO(request_uris=HttpRequestUris(read_uri=SAVE_URL), session=session)

        http_io._read()

        assert session.get.call_args.args[0] == SAVE_URL

    def test_no_address_raises(self) -> None:
        """Test that a request without any address is rejected."""
        http_io = HttpStreamIO(session=self.make_session())

        with self.assertRaises(ValueError):
            http_io._read()

    def test_timeout_defaults_to_settings(self) -> None:
        """Test that the timeout is read from settings and passed to requests."""
        session = self.make_session()
        http_io = HttpStreamIO(SAVE_URL, session=session)

        http_io._read()

        assert http_io.timeout == 5.0
        assert session.get.call_args.kwargs["timeout"] == 5.0

    def test_explicit_timeout(self) -> None:
        """Test that an explicit timeout, including None, wins over settings."""
        assert HttpStreamIO(SAVE_URL, timeout=1.5, session=self.make_session()).timeout == 1.5
        assert HttpStreamIO(SAVE_URL, timeout=None, session=self.make_session()).timeout is None

    def test_given_session_headers_untouched(self) -> None:
        """Test that a caller's session keeps its own headers."""
        session = self.make_session()

        HttpStreamIO(SAVE_URL, session=session)

        assert session.headers == {}

    def test_close_owned_session(self) -> None:
        """Test that close closes the session once when owned."""
        session = self.make_session()
        http_io = HttpStreamIO(SAVE_URL, session=session)

        with http_io:
            pass
        http_io.close()

        session.close.assert_called_once_with()

    def test_close_borrowed_session(self) -> None:
        """Test that close leaves a borrowed session open."""
        session = self.make_session()

        HttpStreamIO(SAVE_URL, session=session, close_session=False).close()

        session.close.assert_not_called()

    def test_repr(self) -> None:
        """Test the representation of the provider."""
        assert repr(HttpStreamIO(BASE_URL, session=self.make_session())) == f"HttpStreamIO({BASE_URL!r})"


class TestHttpSaveFile(unittest.IsolatedAsyncioTestCase):
    """Test a SaveFile backed by HttpStreamIO."""

    def setUp(self) -> None:
        """Set up an in-memory web service for each test."""
        self.stored: bytes | None = None
        self.mock = responses.RequestsMock(assert_all_requests_are_fired=False)
        self.mock.start()
        self.addCleanup(self.mock.reset)
        self.addCleanup(self.mock.stop)
        self.mock.add_callback(responses.POST, SAVE_URL, callback=self._store)
        self.mock.add_callback(responses.GET, SAVE_URL, callback=self._fetch)

    def _store(self, request):
        self.stored = request.body
        return 201, {}, b""

    def _fetch(self, request):
        if self.stored is None:
            return 404, {}, b""
        return 200, {}, self.stored

    async def test_round_trip(self) -> None:
        """Test saving and loading through the web service."""
        saved = SaveChunk(Greeting, MagicMock(return_value=Greeting(name="Hello, World!", value=42)), MagicMock())
        loaded = SaveChunk(Greeting, MagicMock(), MagicMock())
        with HttpStreamIO(BASE_URL, URIS) as http_io:
            await SaveFile(saved, http_io, JsonStreamSerializer(), GZipStreamCompressor()).save_async()
            await SaveFile(loaded, http_io, JsonStreamSerializer(), GZipStreamCompressor()).load_async()

        assert self.stored[:2] == b"\x1f\x8b"
        loaded.on_load.assert_called_once_with(loaded, Greeting(name="Hello, World!", value=42))

    async def test_load_before_save_is_noop(self) -> None:
        """Test that a missing remote save leaves the chunk tree untouched."""
        chunk = SaveChunk(Greeting, MagicMock(), MagicMock())
        with HttpStreamIO(BASE_URL, URIS) as http_io:
            await SaveFile(chunk, http_io, JsonStreamSerializer()).load_async()

        chunk.on_load.assert_not_called()
