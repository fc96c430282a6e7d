"""Weighted multi-field similarity between two patents."""

import math
from typing import Dict, Optional

import structlog

from ..models.patent import PatentRecord
from ..models.similarity import FIELD_WEIGHTS, FieldScore, SimilarityField, SimilarityReport
from ..utils.normalizer import PatentNormalizer

logger = structlog.get_logger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class SimilarityEngine:
    """Scores two patents on keywords, abstract, classification, region and applicant.

    Each field earns up to its weight (30/25/20/15/10). A field only counts
    towards the achievable maximum when both patents carry a value for it, so
    missing data shrinks the denominator instead of reading as a mismatch.
    """

    def __init__(self, normalizer: Optional[PatentNormalizer] = None):
        self.normalizer = normalizer or PatentNormalizer()

    def score(self, first: PatentRecord, second: PatentRecord) -> SimilarityReport:
        """Compute the total score (0-100) and per-field breakdown."""
        breakdown: Dict[SimilarityField, FieldScore] = {
            SimilarityField.KEYWORDS: self.keywords_score(first, second),
            SimilarityField.ABSTRACT: self.abstract_score(first, second),
            SimilarityField.CLASSIFICATION: self.classification_score(first, second),
            SimilarityField.REGION: self.region_score(first, second),
            SimilarityField.APPLICANT: self.applicant_score(first, second),
        }

        applicable = [s for s in breakdown.values() if s.applicable]
        max_score = sum(s.weight for s in applicable)
        earned = sum(s.score for s in applicable)

        total = _round_half_up(earned / max_score * 100) if max_score else 0
        total = min(max(total, 0), 100)

        logger.debug("Similarity calculated",
                     first=first.patent_no,
                     second=second.patent_no,
                     earned=earned,
                     max_score=max_score,
                     total=total)

        return SimilarityReport(
            first_no=first.patent_no,
            second_no=second.patent_no,
            total=total,
            breakdown=breakdown,
        )

    def keywords_score(self, first: PatentRecord, second: PatentRecord) -> FieldScore:
        field = SimilarityField.KEYWORDS
        terms1 = self.normalizer.keyword_terms(first.keywords)
        terms2 = self.normalizer.keyword_terms(second.keywords)
        if not terms1 or not terms2:
            return self._not_applicable(field, "Keywords missing on one or both patents")

        common = terms1 & terms2
        score = len(common) / max(len(terms1), len(terms2)) * FIELD_WEIGHTS[field]
        if common:
            explanation = f"Common keywords: {', '.join(sorted(common))}"
        else:
            explanation = "No common keywords"
        return self._scored(field, score, explanation)

    def abstract_score(self, first: PatentRecord, second: PatentRecord) -> FieldScore:
        field = SimilarityField.ABSTRACT
        words1 = self.normalizer.abstract_words(first.abstract)
        words2 = self.normalizer.abstract_words(second.abstract)
        if not words1 or not words2:
            return self._not_applicable(field, "Abstract missing on one or both patents")

        # Membership count, taken in both directions; repeated words make them differ.
        vocabulary1, vocabulary2 = set(words1), set(words2)
        common = min(
            sum(1 for word in words1 if word in vocabulary2),
            sum(1 for word in words2 if word in vocabulary1),
        )
        score = common / max(len(words1), len(words2)) * FIELD_WEIGHTS[field]
        return self._scored(field, score, f"{common} common words found")

    def classification_score(self, first: PatentRecord, second: PatentRecord) -> FieldScore:
        field = SimilarityField.CLASSIFICATION
        class1 = self.normalizer.primary_class(first.ipc)
        class2 = self.normalizer.primary_class(second.ipc)
        if not class1 or not class2:
            return self._not_applicable(field, "IPC missing on one or both patents")

        score = FIELD_WEIGHTS[field] if class1 == class2 else 0
        return self._scored(field, score, self._pair(first.ipc, second.ipc))

    def region_score(self, first: PatentRecord, second: PatentRecord) -> FieldScore:
        field = SimilarityField.REGION
        region1, region2 = first.region_label, second.region_label
        if region1 is None or region2 is None:
            return self._not_applicable(field, "Region missing on one or both patents")

        score = FIELD_WEIGHTS[field] if region1 == region2 else 0
        return self._scored(field, score, self._pair(region1, region2))

    def applicant_score(self, first: PatentRecord, second: PatentRecord) -> FieldScore:
        field = SimilarityField.APPLICANT
        applicant1 = self.normalizer.normalize_applicant(first.applicant)
        applicant2 = self.normalizer.normalize_applicant(second.applicant)
        if applicant1 is None or applicant2 is None:
            return self._not_applicable(field, "Applicant missing on one or both patents")

        score = FIELD_WEIGHTS[field] if applicant1 == applicant2 else 0
        return self._scored(field, score, self._pair(first.applicant, second.applicant))

    @staticmethod
    def _pair(value1: str, value2: str) -> str:
        return f"Patent 1: {value1}; Patent 2: {value2}"

    @staticmethod
    def _scored(field: SimilarityField, score: float, explanation: str) -> FieldScore:
        return FieldScore(
            field=field,
            weight=FIELD_WEIGHTS[field],
            score=score,
            applicable=True,
            explanation=explanation,
        )

    @staticmethod
    def _not_applicable(field: SimilarityField, explanation: str) -> FieldScore:
        return FieldScore(
            field=field,
            weight=FIELD_WEIGHTS[field],
            score=0.0,
            applicable=False,
            explanation=explanation,
        )


_default_engine = SimilarityEngine()


def calculate_similarity(first: PatentRecord, second: PatentRecord) -> SimilarityReport:
    """Score two patents with the default engine."""
    return _default_engine.score(first, second)
