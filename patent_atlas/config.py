"""Runtime settings. Every value has a default and can be overridden from the environment or a .env file."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_API_URL = "http://localhost:3000/api"


class AtlasSettings(BaseModel):
    """Settings for the patent service client and the map view."""
    api_url: str = DEFAULT_API_URL
    request_timeout: float = Field(default=10.0, gt=0)
    fit_padding: int = Field(default=50, ge=0)
    max_fit_zoom: int = Field(default=12, ge=1)
    detail_zoom: int = Field(default=8, ge=1)
    sentry_dsn: Optional[str] = None
    environment: str = "development"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "AtlasSettings":
        """Build settings from PATENT_ATLAS_* variables (and SENTRY_DSN)."""
        if dotenv:
            load_dotenv()

        overrides = {
            "api_url": os.getenv("PATENT_ATLAS_API_URL"),
            "request_timeout": os.getenv("PATENT_ATLAS_TIMEOUT"),
            "fit_padding": os.getenv("PATENT_ATLAS_FIT_PADDING"),
            "max_fit_zoom": os.getenv("PATENT_ATLAS_MAX_FIT_ZOOM"),
            "detail_zoom": os.getenv("PATENT_ATLAS_DETAIL_ZOOM"),
            "sentry_dsn": os.getenv("SENTRY_DSN"),
            "environment": os.getenv("PATENT_ATLAS_ENVIRONMENT"),
        }
        return cls(**{key: value for key, value in overrides.items() if value})
