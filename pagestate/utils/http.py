"""HTTP client helper and page fetch command factory."""

from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

from ..core.config import DEFAULT_TIMEOUT
from ..core.exceptions import FetchError, RateLimitError
from ..models.chunk import FetchResponse

FetchCommand = Callable[[Any, int, int], Awaitable[FetchResponse]]
ParamsBuilder = Callable[[Any, int, int], Dict[str, Any]]


DEFAULT_RETRY_AFTER = 60


def _retry_after_seconds(value: Optional[str]) -> int:
    """Seconds to wait from a Retry-After header (delay or HTTP-date form)."""
    if not value:
        return DEFAULT_RETRY_AFTER
    value = value.strip()
    if value.isdigit():
        return int(value)
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0, int((when - datetime.now(timezone.utc)).total_seconds()))


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        Raises:
            RateLimitError: On HTTP 429
            FetchError: On any other error status
        """
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        async with self.session.get(url, params=params, headers=headers) as response:
            if response.status == 429:
                retry_after = _retry_after_seconds(response.headers.get("Retry-After"))
                raise RateLimitError(f"Rate limited by {url}", retry_after=retry_after)
            if response.status >= 400:
                raise FetchError(
                    f"GET {url} failed with HTTP {response.status}",
                    status_code=response.status,
                )
            return await response.json()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


class HTTPFetchConfig(BaseModel):
    """Where to fetch pages from and how to read the response body.

    Attributes:
        path: URL or path (relative to the client's base_url) of the resource
        page_param: Query parameter carrying the page number
        per_page_param: Query parameter carrying the page size
        items_field: Response field holding the page items
        total_field: Response field holding the total item count
        extra_field: Optional response field with out-of-band data
    """

    path: str = Field(..., min_length=1)
    page_param: str = "page"
    per_page_param: str = "per_page"
    items_field: str = "items"
    total_field: str = "total_count"
    extra_field: Optional[str] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


def _default_params(request_context: Any, page: int, per_page: int) -> Dict[str, Any]:
    # Mapping contexts become query parameters; anything else is ignored
    if isinstance(request_context, Mapping):
        return dict(request_context)
    return {}


def http_fetch_command(
    client: HTTPClient,
    config: HTTPFetchConfig,
    build_params: ParamsBuilder | None = None,
) -> FetchCommand:
    """Build a fetch command that GETs one page over HTTP.

    Args:
        client: HTTP client used for requests
        config: Resource location and response field names
        build_params: Maps (request_context, page, per_page) to extra query
            parameters; defaults to using a mapping context as-is

    Returns:
        Async callable suitable for ``PagedResource``
    """
    params_for = build_params or _default_params

    async def fetch(request_context: Any, page: int, per_page: int) -> FetchResponse:
        params = params_for(request_context, page, per_page)
        params[config.page_param] = page
        params[config.per_page_param] = per_page
        try:
            body = await client.get(config.path, params=params)
        except FetchError as e:
            e.page = page
            raise
        if not isinstance(body, Mapping):
            raise FetchError(f"Unexpected response body for page {page}", page=page)
        try:
            items = body[config.items_field]
            total = body[config.total_field]
        except KeyError as e:
            raise FetchError(f"Response for page {page} is missing field {e}", page=page) from e
        extra = body.get(config.extra_field) if config.extra_field else None
        return FetchResponse(items=tuple(items), total_count=total, extra_data=extra)

    return fetch
