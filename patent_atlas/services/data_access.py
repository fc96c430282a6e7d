"""Patent data access: the remote service first, the embedded dataset on failure."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

import structlog

from ..data.sample_patents import SAMPLE_PATENTS
from ..exceptions import PatentAtlasError, PatentNotFoundError, TransportError
from ..models.patent import PatentRecord, SearchCriteria
from ..utils.api_client import PatentApiClient
from ..utils.observability import metrics, trace_span
from .result_set import filter_local

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class FetchOutcome(str, Enum):
    """Which source answered a request."""
    OK = "ok"
    FALLBACK = "fallback"
    NOT_FOUND = "not_found"


@dataclass
class FetchResult(Generic[T]):
    """Tagged result of a facade call.

    ``FALLBACK`` carries the transport error that triggered it; ``NOT_FOUND``
    carries a ``PatentNotFoundError`` and no data.
    """
    outcome: FetchOutcome
    data: Optional[T] = None
    error: Optional[PatentAtlasError] = None

    @property
    def found(self) -> bool:
        return self.outcome is not FetchOutcome.NOT_FOUND

    @property
    def reason(self) -> Optional[str]:
        return str(self.error) if self.error else None


def load_fallback_dataset() -> List[PatentRecord]:
    """Parse the embedded sample patents."""
    return [PatentRecord.model_validate(item) for item in SAMPLE_PATENTS]


class PatentDataFacade:
    """Single entry point for patent data.

    Each call makes exactly one attempt against the service. Any transport
    failure is logged and answered from the embedded dataset instead; it is
    never raised to the caller.
    """

    def __init__(self, client: PatentApiClient, fallback_records: Optional[Sequence[PatentRecord]] = None):
        self.client = client
        self.fallback_records: List[PatentRecord] = (
            list(fallback_records) if fallback_records is not None else load_fallback_dataset()
        )

    @trace_span("patents.fetch_all")
    async def fetch_all(self) -> FetchResult[List[PatentRecord]]:
        try:
            records = await self.client.list_patents()
            return FetchResult(FetchOutcome.OK, records)
        except TransportError as e:
            self._log_fallback("fetch_all", e)
            return FetchResult(FetchOutcome.FALLBACK, list(self.fallback_records), e)

    @trace_span("patents.search")
    async def search(self, criteria: SearchCriteria) -> FetchResult[List[PatentRecord]]:
        try:
            records = await self.client.search_patents(criteria)
            metrics.search_queries.labels(source="service").inc()
            return FetchResult(FetchOutcome.OK, records)
        except TransportError as e:
            self._log_fallback("search", e)
            metrics.search_queries.labels(source="fallback").inc()
            return FetchResult(FetchOutcome.FALLBACK, filter_local(self.fallback_records, criteria), e)

    @trace_span("patents.fetch_by_no")
    async def fetch_by_no(self, patent_no: str) -> FetchResult[PatentRecord]:
        try:
            record = await self.client.get_patent_by_no(patent_no)
            return FetchResult(FetchOutcome.OK, record)
        except TransportError as e:
            self._log_fallback("fetch_by_no", e, patent_no=patent_no)
            record = self.find_fallback(patent_no)
            if record is None:
                return self._not_found(patent_no)
            return FetchResult(FetchOutcome.FALLBACK, record, e)

    @trace_span("patents.fetch_pair_by_no")
    async def fetch_pair_by_no(self, first_no: str, second_no: str) -> FetchResult[Tuple[PatentRecord, PatentRecord]]:
        """Look up two patents concurrently. Both must resolve from the same source."""
        results = await asyncio.gather(
            self.client.get_patent_by_no(first_no),
            self.client.get_patent_by_no(second_no),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, BaseException)]
        for error in errors:
            if not isinstance(error, TransportError):
                raise error

        if not errors:
            return FetchResult(FetchOutcome.OK, (results[0], results[1]))

        self._log_fallback("fetch_pair_by_no", errors[0], first_no=first_no, second_no=second_no)
        first = self.find_fallback(first_no)
        second = self.find_fallback(second_no)
        missing = [no for no, record in ((first_no, first), (second_no, second)) if record is None]
        if missing:
            return self._not_found(*missing)
        return FetchResult(FetchOutcome.FALLBACK, (first, second), errors[0])

    def find_fallback(self, patent_no: str) -> Optional[PatentRecord]:
        """Linear scan of the embedded dataset by exact patent number."""
        for record in self.fallback_records:
            if record.patent_no == patent_no:
                return record
        return None

    def _not_found(self, *patent_nos: str) -> FetchResult:
        error = PatentNotFoundError(*patent_nos)
        logger.info("Patent not found in service or embedded dataset", patent_nos=list(patent_nos))
        return FetchResult(FetchOutcome.NOT_FOUND, None, error)

    def _log_fallback(self, operation: str, error: TransportError, **context):
        metrics.fallbacks.labels(operation=operation).inc()
        logger.warning("Patent service unavailable, using embedded dataset",
                       operation=operation,
                       error=str(error),
                       status_code=error.status_code,
                       **context)
