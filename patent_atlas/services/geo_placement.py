"""Display coordinates for patents, synthesized per region when none are stored."""

import random
from typing import Dict, Optional, Tuple

import structlog
from pydantic import BaseModel

from ..models.patent import GeographicRegion, PatentRecord

logger = structlog.get_logger(__name__)


class RegionAnchor(BaseModel):
    """Center point and half-width of the jitter box for one region."""
    latitude: float
    longitude: float
    lat_spread: float
    lng_spread: float

    def contains(self, lat: float, lng: float) -> bool:
        return (abs(lat - self.latitude) <= self.lat_spread
                and abs(lng - self.longitude) <= self.lng_spread)


REGION_ANCHORS: Dict[GeographicRegion, RegionAnchor] = {
    GeographicRegion.TURKEY: RegionAnchor(latitude=39.0, longitude=35.0, lat_spread=1.5, lng_spread=2.5),
    GeographicRegion.USA: RegionAnchor(latitude=37.0, longitude=-95.0, lat_spread=2.5, lng_spread=5.0),
    GeographicRegion.EU: RegionAnchor(latitude=50.0, longitude=10.0, lat_spread=2.5, lng_spread=5.0),
    GeographicRegion.ASIA: RegionAnchor(latitude=34.0, longitude=100.0, lat_spread=5.0, lng_spread=10.0),
}

DEFAULT_ANCHOR = RegionAnchor(latitude=39.0, longitude=35.0, lat_spread=10.0, lng_spread=20.0)


class GeoPlacementResolver:
    """Resolves a map position for a patent.

    Stored coordinates win. Otherwise a point is drawn uniformly inside the
    region's box, so repeated calls for the same record can differ. Pass a
    seeded ``random.Random`` to make placement reproducible.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        anchors: Optional[Dict[GeographicRegion, RegionAnchor]] = None,
        default_anchor: RegionAnchor = DEFAULT_ANCHOR,
    ):
        self.rng = rng
        self.anchors = anchors if anchors is not None else REGION_ANCHORS
        self.default_anchor = default_anchor

    def anchor_for(self, region: Optional[GeographicRegion]) -> RegionAnchor:
        if region is None:
            return self.default_anchor
        return self.anchors.get(region, self.default_anchor)

    def placement_for(self, record: PatentRecord) -> Tuple[float, float]:
        """Return (lat, lng) for the record."""
        if record.has_coordinates:
            return (record.latitude, record.longitude)

        anchor = self.anchor_for(record.geographic_region)
        uniform = (self.rng or random).uniform
        lat = anchor.latitude + uniform(-anchor.lat_spread, anchor.lat_spread)
        lng = anchor.longitude + uniform(-anchor.lng_spread, anchor.lng_spread)

        logger.debug("Synthesized patent position",
                     patent_no=record.patent_no,
                     region=record.geographic_region.value if record.geographic_region else None,
                     lat=lat,
                     lng=lng)
        return (lat, lng)
