"""Synchronous HTTP client used by notification scripts."""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from alerthook.core.config import get_settings
from alerthook.core.exceptions import RequestLimitException, WebException
from alerthook.core.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)


@dataclass
class WebResult:
    """Outcome of a web request."""

    code: int
    message: str
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300


@dataclass
class RequestStats:
    """Per-client request accounting."""

    net_requests: int = 0
    net_errors: int = 0
    net_time: float = 0.0


class WebClient:
    """Blocking HTTP client with a request budget and a dry-run mode.

    Network failures do not raise: they come back as a 500 ``WebResult``
    with message ``"Request Failed"`` and the error text as body.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_requests: Optional[int] = None,
        dry_run: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize web client.

        Args:
            timeout: Request timeout in seconds (default from settings)
            max_requests: Maximum number of requests (default from settings)
            dry_run: Log requests instead of sending them (default from settings)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.timeout = timeout if timeout is not None else settings.net_timeout
        self.max_requests = max_requests if max_requests is not None else settings.net_max
        self.dry_run = settings.net_mock if dry_run is None else dry_run
        self.stats = RequestStats()

        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> "WebClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": settings.user_agent},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def reset(self) -> None:
        """Start a fresh request budget and fresh stats for the next invocation."""
        self.stats = RequestStats()

    def request(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        content: str = "",
    ) -> WebResult:
        """Send one request.

        Args:
            url: Request URL
            method: HTTP method
            headers: Request headers
            content: Request body

        Returns:
            WebResult for the response, or for the network failure

        Raises:
            RequestLimitException: If the request budget is used up
            WebException: If the request cannot be built
        """
        if self.stats.net_requests >= self.max_requests:
            raise RequestLimitException(self.max_requests, details={"url": url})
        self.stats.net_requests += 1

        headers = dict(headers or {})
        logger.debug("web_request", method=method, url=url, headers=headers, body=content)

        if self.dry_run:
            return WebResult(200, "not tried")

        client = self._ensure_client()
        try:
            request = client.build_request(
                method, url, headers=headers, content=content.encode("utf-8") if content else None
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise WebException(f"webRequest: error {e}", details={"url": url}) from e

        t0 = time.monotonic()
        try:
            response = client.send(request)
        except httpx.RequestError as e:
            self.stats.net_errors += 1
            logger.warning("request_failed", method=method, url=url, error=str(e))
            return WebResult(500, "Request Failed", str(e))
        finally:
            self.stats.net_time += time.monotonic() - t0

        if not response.is_success:
            self.stats.net_errors += 1
            logger.warning(
                "request_failed",
                method=method,
                url=url,
                status=response.status_code,
                reason=response.reason_phrase,
            )
        else:
            logger.debug("request_success", method=method, url=url, status=response.status_code)

        return WebResult(
            code=response.status_code,
            message=response.reason_phrase,
            body=response.text,
            headers=dict(response.headers),
        )

    def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> WebResult:
        return self.request(url, "GET", headers)

    def post(self, url: str, headers: Optional[Mapping[str, str]] = None, body: str = "") -> WebResult:
        return self.request(url, "POST", headers, body)

    def post_json(self, url: str, headers: Optional[Mapping[str, str]], data: Any) -> WebResult:
        """POST ``data`` serialized as JSON."""
        headers = dict(headers or {})
        headers["Content-Type"] = "application/json"
        return self.request(url, "POST", headers, json.dumps(data))

    def post_urlencoded(self, url: str, headers: Optional[Mapping[str, str]], data: Mapping[str, Any]) -> WebResult:
        """POST ``data`` as an ``application/x-www-form-urlencoded`` form."""
        headers = dict(headers or {})
        headers["Content-Type"] = "application/x-www-form-urlencoded"
        body = "&".join(f"{quote(str(k), safe='')}={quote(str(v), safe='')}" for k, v in data.items())
        return self.request(url, "POST", headers, body)
