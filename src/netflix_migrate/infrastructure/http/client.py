"""HTTP client with retry logic."""

import logging
import time
from typing import Any

import requests

from netflix_migrate.core.exceptions import NetworkError, RateLimitError

logger = logging.getLogger(__name__)


class HTTPClient:
    """HTTP client with cookie-holding session and retry logic.

    Retries only transport failures and 429 responses; every other status is
    returned to the caller untouched.
    """

    def __init__(
        self,
        base_url: str = "",
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_factor: float = 2.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor

    def url(self, path: str) -> str:
        """Resolve ``path`` against the base URL; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> requests.Response:
        """Make GET request with retry logic."""
        return self._request("GET", path, params=params, headers=headers, **kwargs)

    def post(
        self,
        path: str,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> requests.Response:
        """Make POST request with retry logic."""
        return self._request("POST", path, json=json, headers=headers, **kwargs)

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Make request with retry logic."""
        url = self.url(path)
        kwargs.setdefault("timeout", self.timeout)
        last_exception = None
        retry_after: int | None = None
        delay = 1.0

        for attempt in range(self.max_retries):
            try:
                response = self.session.request(method, url, **kwargs)
            except requests.exceptions.RequestException as e:
                last_exception = e
                logger.warning(
                    "Request failed: %s (attempt %d/%d)",
                    str(e),
                    attempt + 1,
                    self.max_retries,
                )
                if attempt < self.max_retries - 1:
                    time.sleep(delay)
                    delay *= self.backoff_factor
                continue

            if response.status_code != 429:
                return response
            last_exception = None

            retry_after = _parse_retry_after(response, delay)
            if attempt < self.max_retries - 1:
                logger.warning(
                    "Rate limited on %s, waiting %d seconds (attempt %d/%d)",
                    url,
                    retry_after,
                    attempt + 1,
                    self.max_retries,
                )
                time.sleep(retry_after)
                delay *= self.backoff_factor
            else:
                logger.warning("Rate limited on %s (attempt %d/%d), giving up", url, attempt + 1, self.max_retries)

        if last_exception is None:
            raise RateLimitError(self.base_url or url, retry_after=retry_after)
        raise NetworkError(f"Request failed after {self.max_retries} retries: {last_exception}", url=url)


def _parse_retry_after(response: requests.Response, default: float) -> int:
    value = response.headers.get("Retry-After")
    try:
        return int(value) if value else int(default)
    except ValueError:
        return int(default)


__all__ = ["HTTPClient"]
