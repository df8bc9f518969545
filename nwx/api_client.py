"""Client for the Access Analyzer REST API.

Only two read-only calls are needed by the CLI: listing the registered
source types (used for the scanner name uniqueness check) and a cheap
connection test.  Every failure -- connection refused, timeout, non-200
status, malformed body -- is reported as :class:`ExternalLookupError` so
callers can downgrade it to a warning.

Typical usage::

    client = AccessAnalyzerClient("http://localhost:3020")
    response = client.get_source_types()
    print(response.type_names())
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from nwx.errors import ExternalLookupError
from nwx.models import SourceTypeListResponse

logger = logging.getLogger(__name__)

SOURCE_TYPES_PATH = "/source-types"


class AccessAnalyzerClient:
    """Synchronous client for the Access Analyzer API."""

    def __init__(self, base_url: str, timeout: float = 30.0, page_size: int = 100) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.Client:
        """Return a fresh ``Client`` configured with our base URL and timeout."""
        return httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )

    def _get(self, path: str, params: dict[str, str]) -> httpx.Response:
        try:
            with self._client() as client:
                response = client.get(path, params=params)
        except httpx.ConnectError as exc:
            raise ExternalLookupError(
                f"cannot connect to Access Analyzer at {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise ExternalLookupError(
                f"request to Access Analyzer timed out after {self.timeout}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalLookupError(f"failed to make API request: {exc}") from exc

        if response.status_code != 200:
            raise ExternalLookupError(
                f"API request failed with status {response.status_code}: {response.text[:500]}"
            )
        return response

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_source_types(self) -> SourceTypeListResponse:
        """Fetch the first page of registered source types.

        Raises:
            ExternalLookupError: On any transport, status or parsing failure.
        """
        params = {"page": "1", "pageSize": str(self.page_size)}
        response = self._get(SOURCE_TYPES_PATH, params)
        try:
            result = SourceTypeListResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            raise ExternalLookupError(f"failed to parse API response: {exc}") from exc
        logger.debug("Fetched %d source types from %s", len(result.data), self.base_url)
        return result

    def test_connection(self) -> None:
        """Probe the API with a one-item listing.

        Raises:
            ExternalLookupError: When the API is unreachable or unhealthy.
        """
        self._get(SOURCE_TYPES_PATH, {"page": "1", "pageSize": "1"})
