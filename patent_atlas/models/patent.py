"""Patent data models for the atlas."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GeographicRegion(str, Enum):
    """Region classes used for grouping and placing patents."""
    TURKEY = "TURKEY"
    USA = "USA"
    EU = "EU"
    ASIA = "ASIA"
    OTHER = "OTHER"


class PatentStatus(str, Enum):
    """Legal status of a patent filing."""
    ACTIVE = "active"
    INACTIVE = "inactive"


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class PatentRecord(BaseModel):
    """Model for one patent filing as served by the patent service.

    Field names follow the service's camelCase JSON; attributes are snake_case
    and both spellings are accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    patent_no: str = Field(alias="patentNo", min_length=1)
    keywords: Optional[str] = None
    abstract: Optional[str] = None
    application_date: Optional[str] = Field(default=None, alias="applicationDate")
    publication_date: Optional[str] = Field(default=None, alias="publicationDate")
    applicant: Optional[str] = None
    ipc: Optional[str] = None
    cpc: Optional[str] = None
    claims: Optional[str] = None
    geographic_region: Optional[GeographicRegion] = Field(default=None, alias="geographicRegion")
    region_label: Optional[str] = Field(default=None, alias="regionLabel", exclude=True)
    patent_status: Optional[PatentStatus] = Field(default=None, alias="patentStatus")
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _keep_region_label(cls, data: Any) -> Any:
        # The enum only picks the map anchor; equality and display use the raw value
        if not isinstance(data, dict) or "regionLabel" in data or "region_label" in data:
            return data
        raw = data.get("geographicRegion", data.get("geographic_region"))
        if isinstance(raw, GeographicRegion):
            raw = raw.value
        if isinstance(raw, str) and raw.strip():
            return {**data, "region_label": raw.strip()}
        return data

    @field_validator(
        "keywords", "abstract", "application_date", "publication_date",
        "applicant", "ipc", "cpc", "claims", "region_label", mode="before"
    )
    @classmethod
    def _empty_text_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("geographic_region", mode="before")
    @classmethod
    def _coerce_region(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        if value is None or isinstance(value, GeographicRegion):
            return value
        try:
            return GeographicRegion(str(value))
        except ValueError:
            return GeographicRegion.OTHER

    @field_validator("patent_status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        if value is None or isinstance(value, PatentStatus):
            return value
        try:
            return PatentStatus(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def has_coordinates(self) -> bool:
        """True when both stored coordinates are present and non-zero."""
        return bool(self.latitude) and bool(self.longitude)

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        if not self.has_coordinates:
            return None
        return (self.latitude, self.longitude)

    def to_api(self) -> Dict[str, Any]:
        """Serialize back to the service's JSON shape."""
        payload = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        if self.region_label:
            payload["geographicRegion"] = self.region_label
        return payload


class SearchCriteria(BaseModel):
    """Filter criteria for a patent search. Empty values impose no constraint."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    patent_no: Optional[str] = Field(default=None, alias="patentNo")
    keywords: Optional[str] = None
    applicant: Optional[str] = None
    region: Optional[str] = None
    status: Optional[str] = None

    @field_validator("patent_no", "keywords", "applicant", "region", "status", mode="before")
    @classmethod
    def _empty_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)

    def is_empty(self) -> bool:
        return not any(self.to_query_params().values())

    def to_query_params(self) -> Dict[str, str]:
        """Query string parameters for the search endpoint, empty ones omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
