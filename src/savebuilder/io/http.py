"""HTTP-backed asynchronous I/O provider.

HttpStreamIO reads and writes a save file through a web service. Requests go
through a requests.Session; the blocking calls run in a worker thread so the
provider fits the asynchronous side of the SaveFile pipeline.

Status handling:
- read: 404 yields an empty stream (nothing saved yet), other error statuses raise
- write: the whole payload is sent in a single POST, error statuses raise
- exists: any 2xx is True, anything else (including transport failure) is False
- delete: any 2xx is True, anything else is False

Example usage:
    io = HttpStreamIO(
        "https://example.com/api/",
        request_uris=HttpRequestUris(read_uri="saves/1", write_uri="saves/1"),
    )
    save_file = SaveFile(root, io, JsonStreamSerializer())
    await save_file.save_async()
"""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin

import requests

from savebuilder.conf import settings
from savebuilder.io.base import BaseAsyncStreamIO

if TYPE_CHECKING:
    from typing import BinaryIO

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = object()


def _is_success(response: requests.Response) -> bool:
    return HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES


@dataclass(frozen=True)
class HttpRequestUris:
    """Addresses used for each kind of request, relative to the base URL.

    Attributes:
        read_uri: Address used for read requests.
        write_uri: Address used for write requests.
        exists_uri: Address used for exists requests.
        delete_uri: Address used for delete requests.
    """

    read_uri: str | None = None
    write_uri: str | None = None
    exists_uri: str | None = None
    delete_uri: str | None = None


class HttpStreamIO(BaseAsyncStreamIO):
    """Provides a read stream from, and writes streams to, an HTTP address.

    Attributes:
        base_url: Base address that request URIs are resolved against.
        request_uris: Relative addresses used for specific requests.
        timeout: Seconds to wait for each request, or None to wait forever.
        write_headers: Extra headers sent with write requests. Content-Length
            is always derived from the written payload.
    """

    def __init__(
        self,
        base_url: str | None = None,
        request_uris: HttpRequestUris | None = None,
        timeout: Any = _DEFAULT_TIMEOUT,  # noqa: ANN401
        session: requests.Session | None = None,
        *,
        close_session: bool = True,
    ) -> None:
        """Initialize the HTTP provider.

        Args:
            base_url: Base address used when sending requests.
            request_uris: Relative addresses for read/write/exists/delete.
            timeout: Request timeout in seconds. Defaults to settings.HTTP_TIMEOUT.
            session: Session to send requests with. If None, a new session is
                created that identifies itself with settings.HTTP_USER_AGENT.
            close_session: Whether close() also closes the session. Pass False
                when reusing a session owned elsewhere.
        """
        self.base_url = base_url
        self.request_uris = request_uris or HttpRequestUris()
        self.timeout = settings.HTTP_TIMEOUT if timeout is _DEFAULT_TIMEOUT else timeout
        self.write_headers: dict[str, str] = {}
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = settings.HTTP_USER_AGENT
        self._session = session
        self._close_session = close_session
        self._closed = False

    @property
    def read_headers(self) -> requests.structures.CaseInsensitiveDict:
        """Headers sent with every request, including reads."""
        return self._session.headers

    async def read_async(self) -> BinaryIO:
        return await asyncio.to_thread(self._read)

    async def write_async(self, stream: BinaryIO) -> None:
        await asyncio.to_thread(self._write, stream)

    async def exists_async(self) -> bool:
        return await asyncio.to_thread(self._exists)

    async def delete_async(self) -> bool:
        return await asyncio.to_thread(self._delete)

    def close(self) -> None:
        """Close the session if this provider owns it."""
        if self._closed:
            return
        if self._close_session:
            self._session.close()
        self._closed = True

    def __enter__(self) -> HttpStreamIO:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _url(self, uri: str | None) -> str:
        if self.base_url is None:
            if uri is None:
                msg = "HttpStreamIO needs a base_url or an absolute request URI"
                raise ValueError(msg)
            return uri
        return self.base_url if uri is None else urljoin(self.base_url, uri)

    def _read(self) -> BinaryIO:
        url = self._url(self.request_uris.read_uri)
        logger.debug("GET %s", url)
        response = self._session.get(url, timeout=self.timeout)
        with response:
            if response.status_code == HTTPStatus.NOT_FOUND:
                logger.debug("Nothing stored at %s", url)
                return io.BytesIO()
            response.raise_for_status()
            return io.BytesIO(response.content)

    def _write(self, stream: BinaryIO) -> None:
        url = self._url(self.request_uris.write_uri)
        payload = stream.read()
        headers = {**self.write_headers, "Content-Length": str(len(payload))}
        logger.debug("POST %s (%d bytes)", url, len(payload))
        response = self._session.post(url, data=payload, headers=headers, timeout=self.timeout)
        with response:
            response.raise_for_status()

    def _exists(self) -> bool:
        url = self._url(self.request_uris.exists_uri)
        try:
            response = self._session.get(url, timeout=self.timeout, stream=True)
        except requests.RequestException:
            logger.debug("Exists check for %s failed", url, exc_info=True)
            return False
        with response:
            return _is_success(response)

    def _delete(self) -> bool:
        url = self._url(self.request_uris.delete_uri)
        logger.debug("DELETE %s", url)
        response = self._session.delete(url, timeout=self.timeout)
        with response:
            return _is_success(response)

    def __repr__(self) -> str:
        return f"HttpStreamIO({self.base_url!r})"
