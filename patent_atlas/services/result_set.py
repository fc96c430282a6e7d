"""The ordered set of patents currently selected for display, and the local filter."""

from typing import Iterable, List, Optional

import structlog

from ..models.patent import PatentRecord, SearchCriteria
from ..utils.normalizer import PatentNormalizer

logger = structlog.get_logger(__name__)

_normalizer = PatentNormalizer()


def _contains(value: Optional[str], needle: str) -> bool:
    if value is None:
        return False
    return _normalizer.fold(needle) in _normalizer.fold(value)


def matches_criteria(record: PatentRecord, criteria: SearchCriteria) -> bool:
    """Apply every non-empty criterion to the record (logical AND)."""
    if criteria.patent_no and not _contains(record.patent_no, criteria.patent_no):
        return False

    if criteria.keywords and not _contains(record.keywords, criteria.keywords):
        return False

    if criteria.applicant and not _contains(record.applicant, criteria.applicant):
        return False

    if criteria.region:
        if record.region_label != criteria.region:
            return False

    if criteria.status:
        if record.patent_status is None or record.patent_status.value != criteria.status.lower():
            return False

    return True


def filter_local(records: Iterable[PatentRecord], criteria: Optional[SearchCriteria] = None) -> List[PatentRecord]:
    """Filter records the way the patent service's search endpoint does.

    Text criteria (patent number, keywords, applicant) are case-insensitive
    substring matches; region and status must match exactly. Order is kept.
    """
    records = list(records)
    if criteria is None or criteria.is_empty():
        return records
    return [record for record in records if matches_criteria(record, criteria)]


class ResultSetManager:
    """Holds the current result set. Each update replaces it wholesale."""

    def __init__(self):
        self._results: List[PatentRecord] = []

    def set_results(self, records: Iterable[PatentRecord]) -> List[PatentRecord]:
        """Replace the current results. Repeated patent numbers keep their first occurrence."""
        unique: List[PatentRecord] = []
        seen = set()
        for record in records:
            if record.patent_no in seen:
                logger.warning("Dropping duplicate patent from result set", patent_no=record.patent_no)
                continue
            seen.add(record.patent_no)
            unique.append(record)

        self._results = unique
        logger.info("Result set replaced", count=len(unique))
        return self.current_results()

    def current_results(self) -> List[PatentRecord]:
        return list(self._results)

    def find(self, patent_no: str) -> Optional[PatentRecord]:
        for record in self._results:
            if record.patent_no == patent_no:
                return record
        return None

    def __len__(self) -> int:
        return len(self._results)
