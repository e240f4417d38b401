"""Base HTTP client with response caching."""

import hashlib
import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Optional

import requests

from ..config import CACHE_DIR, DEFAULT_BASE_URL
from ..logging import get_logger


logger = get_logger(__name__)


class ServiceError(Exception):
    """Base exception for fantasy service errors."""

    pass


class FetchError(ServiceError):
    """Raised when the request could not be completed."""

    pass


class RateLimitError(ServiceError):
    """Raised when rate limit is exceeded."""

    pass


class RejectedError(ServiceError):
    """Raised when the service answers with an error status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ParseError(ServiceError):
    """Raised when a response payload cannot be interpreted."""

    pass


class ApiClient:
    """
    JSON client for the fantasy service.

    GET responses can be cached on disk; anything that changes server
    state is always sent.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        cache_dir: Optional[Path] = None,
        cache_ttl_minutes: int = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Root URL of the service.
            timeout_seconds: Per-request timeout.
            cache_dir: Directory for cached GET responses.
            cache_ttl_minutes: Cache time-to-live in minutes (0 disables).
            session: Optional pre-configured session.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.cache_dir = cache_dir or CACHE_DIR
        self.cache_ttl = timedelta(minutes=cache_ttl_minutes)

        # Session for connection reuse
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": "Gridiron/1.0 (NFL Fantasy Client)",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _cache_path(self, url: str) -> Path:
        """Get the cache file path for a URL."""
        return self.cache_dir / f"{hashlib.md5(url.encode()).hexdigest()}.json"

    def _read_cache(self, url: str) -> Optional[Any]:
        """
        Read cached data if still fresh.

        Returns:
            Cached payload, or None when missing, stale or corrupt.
        """
        cache_path = self._cache_path(url)
        if not cache_path.exists():
            return None

        try:
            with open(cache_path, "r") as f:
                entry = json.load(f)
            timestamp = datetime.fromisoformat(entry["timestamp"])
            if datetime.now() - timestamp < self.cache_ttl:
                return entry["data"]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            logger.warning("discarding corrupt cache entry", path=str(cache_path))
            cache_path.unlink(missing_ok=True)

        return None

    def _write_cache(self, url: str, data: Any) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        entry = {
            "url": url,
            "timestamp": datetime.now().isoformat(),
            "data": data,
        }
        with open(self._cache_path(url), "w") as f:
            json.dump(entry, f)

    def clear_cache(self) -> int:
        """
        Clear all cached responses.

        Returns:
            Number of cache entries cleared.
        """
        if not self.cache_dir.exists():
            return 0
        count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            try:
                with open(cache_file, "r") as f:
                    entry = json.load(f)
                if not all(k in entry for k in ("url", "timestamp", "data")):
                    continue
            except (json.JSONDecodeError, IOError):
                continue
            cache_file.unlink()
            count += 1
        return count

    def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        user_id: Optional[int] = None,
        use_cache: bool = False,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            body: JSON-serialisable request body.
            user_id: Sent as the X-User header when given.
            use_cache: Serve and store GET responses from the cache.

        Returns:
            Decoded JSON payload, or None for an empty body.

        Raises:
            FetchError: If the request times out or cannot be sent.
            RateLimitError: On HTTP 429.
            RejectedError: On any other error status.
        """
        url = self._url(path)
        cacheable = use_cache and method.upper() == "GET" and self.cache_ttl > timedelta(0)

        if cacheable:
            cached = self._read_cache(url)
            if cached is not None:
                logger.debug("cache hit", url=url)
                return cached

        headers = {"X-User": str(user_id)} if user_id is not None else None

        logger.debug("request", method=method, url=url)
        try:
            response = self._session.request(
                method,
                url,
                json=body,
                headers=headers,
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.Timeout:
            raise FetchError(f"Request timed out: {url}")
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request failed: {url} - {e}")

        if response.status_code == 429:
            raise RateLimitError(f"Rate limited: {url}")
        if not response.ok:
            raise RejectedError(response.status_code, _error_detail(response))

        try:
            data = response.json()
        except ValueError:
            data = None

        if cacheable and data is not None:
            self._write_cache(url, data)

        return data


def _error_detail(response: requests.Response) -> str:
    """Best available error message from a failed response."""
    fallback = f"{response.status_code} {response.reason}"
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, dict) and payload.get("detail"):
        detail = payload["detail"]
        return detail if isinstance(detail, str) else json.dumps(detail)
    return json.dumps(payload)
