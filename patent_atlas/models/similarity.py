"""Similarity score models."""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


class SimilarityField(str, Enum):
    """Fields compared by the similarity engine."""
    KEYWORDS = "keywords"
    ABSTRACT = "abstract"
    CLASSIFICATION = "classification"
    REGION = "region"
    APPLICANT = "applicant"


FIELD_WEIGHTS: Dict[SimilarityField, int] = {
    SimilarityField.KEYWORDS: 30,
    SimilarityField.ABSTRACT: 25,
    SimilarityField.CLASSIFICATION: 20,
    SimilarityField.REGION: 15,
    SimilarityField.APPLICANT: 10,
}


class SimilarityBand(str, Enum):
    """Display band for a total similarity score."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def for_total(cls, total: int) -> "SimilarityBand":
        if total >= 70:
            return cls.HIGH
        if total >= 40:
            return cls.MEDIUM
        return cls.LOW

    @property
    def color(self) -> str:
        return {
            SimilarityBand.HIGH: "#2ecc71",
            SimilarityBand.MEDIUM: "#f1c40f",
            SimilarityBand.LOW: "#e74c3c",
        }[self]


class FieldScore(BaseModel):
    """Score earned on one compared field."""
    field: SimilarityField
    weight: int
    score: float = Field(ge=0)
    applicable: bool
    explanation: str = ""

    @property
    def percent(self) -> float:
        """Score as a percentage of the field weight, for progress bars."""
        return self.score / self.weight * 100 if self.weight else 0.0


class SimilarityReport(BaseModel):
    """Total similarity between two patents plus the per-field breakdown."""
    first_no: str
    second_no: str
    total: int = Field(ge=0, le=100)
    breakdown: Dict[SimilarityField, FieldScore]

    @property
    def earned(self) -> float:
        return sum(s.score for s in self.breakdown.values() if s.applicable)

    @property
    def max_possible(self) -> int:
        return sum(s.weight for s in self.breakdown.values() if s.applicable)

    @property
    def band(self) -> SimilarityBand:
        return SimilarityBand.for_total(self.total)
