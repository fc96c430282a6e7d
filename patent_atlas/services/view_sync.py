"""Keeps the result list, the map markers and the detail panels consistent."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

import structlog
from pydantic import BaseModel

from ..models.patent import GeographicRegion, PatentRecord, PatentStatus
from ..models.similarity import SimilarityReport
from ..utils.observability import metrics
from .geo_placement import GeoPlacementResolver

logger = structlog.get_logger(__name__)

NO_RESULTS_MESSAGE = "No results found."

STATUS_COLORS = {
    PatentStatus.ACTIVE: "#2ecc71",
    PatentStatus.INACTIVE: "#e74c3c",
}
DEFAULT_MARKER_COLOR = "#4a69bd"
EMPHASIZED_REGIONS = {GeographicRegion.TURKEY}

Position = Tuple[float, float]


class MarkerPopup(BaseModel):
    """Info popup attached to a marker."""
    title: str
    applicant: str
    region: str


class MarkerSpec(BaseModel):
    """Everything the map needs to draw one patent marker."""
    patent_no: str
    latitude: float
    longitude: float
    color: str
    size: int
    border_width: int
    popup: MarkerPopup

    @property
    def position(self) -> Position:
        return (self.latitude, self.longitude)


def build_marker(record: PatentRecord, position: Position) -> MarkerSpec:
    """Style a marker: color by status, larger for emphasized regions."""
    color = STATUS_COLORS.get(record.patent_status, DEFAULT_MARKER_COLOR)
    emphasized = record.geographic_region in EMPHASIZED_REGIONS

    return MarkerSpec(
        patent_no=record.patent_no,
        latitude=position[0],
        longitude=position[1],
        color=color,
        size=20 if emphasized else 16,
        border_width=3 if emphasized else 2,
        popup=MarkerPopup(
            title=record.patent_no,
            applicant=record.applicant or "Unknown Applicant",
            region=record.region_label or "Unknown Region",
        ),
    )


class MapCapability(ABC):
    """Map widget operations used by the synchronizer."""

    @abstractmethod
    def place_marker(self, marker: MarkerSpec) -> None:
        """Draw a marker with its popup."""

    @abstractmethod
    def remove_marker(self, patent_no: str) -> None:
        """Remove the marker for a patent."""

    @abstractmethod
    def fit_bounds(self, positions: Sequence[Position], padding: Tuple[int, int], max_zoom: int) -> None:
        """Adjust the view to the bounding box of the positions."""

    @abstractmethod
    def set_view(self, position: Position, zoom: int) -> None:
        """Pan and zoom to a point."""

    @abstractmethod
    def open_popup(self, patent_no: str) -> None:
        """Open the popup of a placed marker."""


class Presenter(ABC):
    """Textual and panel output."""

    @abstractmethod
    def render_results(self, records: Sequence[PatentRecord]) -> None:
        """Render the result list in order."""

    @abstractmethod
    def render_empty(self, message: str) -> None:
        """Render the explicit no-results state."""

    @abstractmethod
    def show_details(self, record: PatentRecord) -> None:
        """Open the detail panel for a patent."""

    @abstractmethod
    def hide_details(self) -> None:
        """Close the detail panel."""

    @abstractmethod
    def show_comparison(self, first: PatentRecord, second: PatentRecord, report: SimilarityReport) -> None:
        """Open the comparison panel."""

    @abstractmethod
    def hide_comparison(self) -> None:
        """Close the comparison panel."""

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a user-facing message."""

    @abstractmethod
    def list_choices(self, records: Sequence[PatentRecord]) -> None:
        """Show the patents available for comparison."""


class ViewState:
    """Mutable display state owned by the synchronizer."""

    def __init__(self):
        self.markers: Dict[str, MarkerSpec] = {}
        self.marker_records: Dict[str, PatentRecord] = {}
        self.listed: List[str] = []
        self.detail_patent_no: Optional[str] = None
        self.comparison: Optional[Tuple[str, str]] = None

    def marker_keys(self) -> set:
        return set(self.markers)


class ViewSynchronizer:
    """Reconciles the marker collection and result list with a result set.

    After ``synchronize`` the marker keys equal the patent numbers of the
    result set, and the list shows the records in result-set order.
    """

    def __init__(
        self,
        map_view: MapCapability,
        presenter: Presenter,
        resolver: Optional[GeoPlacementResolver] = None,
        state: Optional[ViewState] = None,
        fit_padding: int = 50,
        max_fit_zoom: int = 12,
        detail_zoom: int = 8,
    ):
        self.map = map_view
        self.presenter = presenter
        self.resolver = resolver or GeoPlacementResolver()
        self.state = state or ViewState()
        self.fit_padding = fit_padding
        self.max_fit_zoom = max_fit_zoom
        self.detail_zoom = detail_zoom

    def synchronize(self, records: Sequence[PatentRecord]) -> ViewState:
        wanted: Dict[str, PatentRecord] = {}
        for record in records:
            wanted.setdefault(record.patent_no, record)

        # Drop markers that are stale or whose record changed
        for patent_no in list(self.state.markers):
            if wanted.get(patent_no) != self.state.marker_records.get(patent_no):
                self.map.remove_marker(patent_no)
                del self.state.markers[patent_no]
                del self.state.marker_records[patent_no]

        for patent_no, record in wanted.items():
            if patent_no in self.state.markers:
                continue
            marker = build_marker(record, self.resolver.placement_for(record))
            self.map.place_marker(marker)
            self.state.markers[patent_no] = marker
            self.state.marker_records[patent_no] = record

        ordered = list(wanted.values())
        self.state.listed = [record.patent_no for record in ordered]
        if ordered:
            self.presenter.render_results(ordered)
            self.map.fit_bounds(
                [marker.position for marker in self.state.markers.values()],
                padding=(self.fit_padding, self.fit_padding),
                max_zoom=self.max_fit_zoom,
            )
        else:
            self.presenter.render_empty(NO_RESULTS_MESSAGE)

        metrics.markers_on_map.set(len(self.state.markers))
        logger.info("View synchronized", markers=len(self.state.markers))
        return self.state

    def show_details(self, record: PatentRecord):
        """Open the detail panel and focus the map on the patent if it has a position."""
        self.presenter.show_details(record)
        self.state.detail_patent_no = record.patent_no

        marker = self.state.markers.get(record.patent_no)
        position = marker.position if marker else record.coordinates
        if position is None:
            return

        self.map.set_view(position, self.detail_zoom)
        if marker:
            self.map.open_popup(record.patent_no)

    def hide_details(self):
        self.presenter.hide_details()
        self.state.detail_patent_no = None

    def show_comparison(self, first: PatentRecord, second: PatentRecord, report: SimilarityReport):
        self.presenter.show_comparison(first, second, report)
        self.state.comparison = (first.patent_no, second.patent_no)

    def hide_comparison(self):
        self.presenter.hide_comparison()
        self.state.comparison = None
