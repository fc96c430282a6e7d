"""HTTP client for the remote patent service."""

import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
import structlog
from pydantic import ValidationError

from ..exceptions import TransportError
from ..models.patent import PatentRecord, SearchCriteria
from .observability import log_performance, metrics

logger = structlog.get_logger(__name__)


class PatentApiClient:
    """Client for the patent service REST API.

    Every failure (network error, timeout, non-success status, malformed
    payload) surfaces as ``TransportError``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def connect(self):
        """Open the HTTP connection pool."""
        if self.client is not None:
            return
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )
        logger.info("Connected to patent service", base_url=self.base_url)

    async def disconnect(self):
        """Close the HTTP connection pool."""
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            logger.info("Disconnected from patent service")

    async def __aenter__(self) -> "PatentApiClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def list_patents(self) -> List[PatentRecord]:
        """GET /patents"""
        payload = await self._get_json("/patents", operation="list")
        return self._parse_list(payload)

    async def search_patents(self, criteria: SearchCriteria) -> List[PatentRecord]:
        """GET /patents/search with the non-empty criteria as query parameters."""
        payload = await self._get_json(
            "/patents/search", params=criteria.to_query_params(), operation="search"
        )
        return self._parse_list(payload)

    async def get_patent_by_no(self, patent_no: str) -> PatentRecord:
        """GET /patents/no/{patentNo}"""
        payload = await self._get_json(
            f"/patents/no/{quote(patent_no, safe='')}", operation="lookup"
        )
        if not isinstance(payload, dict):
            raise TransportError(f"Expected a patent object for {patent_no}")
        try:
            return PatentRecord.model_validate(payload)
        except ValidationError as e:
            raise TransportError(f"Malformed patent payload for {patent_no}: {e}") from e

    async def _get_json(
        self, path: str, params: Optional[Dict[str, str]] = None, operation: str = "get"
    ) -> Any:
        if self.client is None:
            await self.connect()

        start_time = time.perf_counter()
        try:
            response = await self.client.get(path, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {path} failed: {e.__class__.__name__}: {e}") from e
        finally:
            duration = time.perf_counter() - start_time
            metrics.service_request_duration.labels(operation=operation).observe(duration)
            log_performance(f"patent_service.{operation}", duration, path=path)

        if not response.is_success:
            raise TransportError(
                f"Patent service returned {response.status_code} for {path}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Malformed JSON from {path}") from e

    def _parse_list(self, payload: Any) -> List[PatentRecord]:
        if not isinstance(payload, list):
            raise TransportError("Expected a JSON array of patents")
        try:
            return [PatentRecord.model_validate(item) for item in payload]
        except ValidationError as e:
            raise TransportError(f"Malformed patent payload: {e}") from e
