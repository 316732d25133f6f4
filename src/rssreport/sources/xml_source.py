"""XML source reading from http(s) URLs or the local filesystem."""

from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from rssreport.exceptions import FetchError

_HTTP_SCHEMES = ("http", "https")


class XMLSource:
    """Fetches raw XML from a URL, a ``file://`` URL or a local path."""

    def __init__(
        self,
        location: str,
        timeout: int = 30,
        user_agent: str = "rssreport/0.1 (RSS to HTML)",
        follow_redirects: bool = True,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the source.

        Args:
            location: http(s) URL, file URL or filesystem path.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header for HTTP requests.
            follow_redirects: Whether HTTP redirects are followed.
            transport: Optional httpx transport (tests inject a MockTransport).
        """
        self._location = location
        self._timeout = timeout
        self._user_agent = user_agent
        self._follow_redirects = follow_redirects
        self._transport = transport

    @property
    def source_id(self) -> str:
        return self._location

    @property
    def is_remote(self) -> bool:
        return urlparse(self._location).scheme.lower() in _HTTP_SCHEMES

    def fetch_raw(self) -> bytes:
        """Fetch the raw document bytes.

        Raises:
            FetchError: When the request fails, returns an error status,
                or the file cannot be read.
        """
        if self.is_remote:
            return self._fetch_http()
        return self._read_file()

    def _fetch_http(self) -> bytes:
        headers = {"User-Agent": self._user_agent}
        try:
            with httpx.Client(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            ) as client:
                response = client.get(self._location, headers=headers)
                response.raise_for_status()
                return response.content
        except httpx.TimeoutException as e:
            raise FetchError(self._location, f"Request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(self._location, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise FetchError(self._location, f"Request failed: {e}") from e

    def _read_file(self) -> bytes:
        parsed = urlparse(self._location)
        if parsed.scheme.lower() == "file":
            path = Path(unquote(parsed.path))
        else:
            path = Path(self._location)
        try:
            return path.read_bytes()
        except OSError as e:
            raise FetchError(self._location, str(e)) from e
