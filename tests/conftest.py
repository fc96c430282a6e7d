import random
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from patent_atlas.models.patent import PatentRecord
from patent_atlas.models.similarity import SimilarityReport
from patent_atlas.services.data_access import load_fallback_dataset
from patent_atlas.services.view_sync import MapCapability, MarkerSpec, Presenter


class FakeMap(MapCapability):
    """Records every map call."""

    def __init__(self):
        self.markers: Dict[str, MarkerSpec] = {}
        self.placed: List[str] = []
        self.removed: List[str] = []
        self.fits: List[Tuple[list, tuple, int]] = []
        self.views: List[Tuple[tuple, int]] = []
        self.popups: List[str] = []

    def place_marker(self, marker: MarkerSpec) -> None:
        assert marker.patent_no not in self.markers, "marker placed twice"
        self.markers[marker.patent_no] = marker
        self.placed.append(marker.patent_no)

    def remove_marker(self, patent_no: str) -> None:
        del self.markers[patent_no]
        self.removed.append(patent_no)

    def fit_bounds(self, positions, padding, max_zoom) -> None:
        self.fits.append((list(positions), padding, max_zoom))

    def set_view(self, position, zoom) -> None:
        self.views.append((position, zoom))

    def open_popup(self, patent_no: str) -> None:
        assert patent_no in self.markers
        self.popups.append(patent_no)


class FakePresenter(Presenter):
    """Records what would have been shown to the user."""

    def __init__(self):
        self.rendered: Optional[List[str]] = None
        self.empty_message: Optional[str] = None
        self.details: Optional[PatentRecord] = None
        self.comparison: Optional[Tuple[str, str, SimilarityReport]] = None
        self.alerts: List[str] = []
        self.choices: Optional[List[str]] = None

    def render_results(self, records: Sequence[PatentRecord]) -> None:
        self.rendered = [r.patent_no for r in records]
        self.empty_message = None

    def render_empty(self, message: str) -> None:
        self.rendered = []
        self.empty_message = message

    def show_details(self, record: PatentRecord) -> None:
        self.details = record

    def hide_details(self) -> None:
        self.details = None

    def show_comparison(self, first, second, report) -> None:
        self.comparison = (first.patent_no, second.patent_no, report)

    def hide_comparison(self) -> None:
        self.comparison = None

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def list_choices(self, records) -> None:
        self.choices = [r.patent_no for r in records]


@pytest.fixture
def fake_map():
    return FakeMap()


@pytest.fixture
def fake_presenter():
    return FakePresenter()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sample_patents():
    return load_fallback_dataset()


@pytest.fixture
def make_patent():
    """Factory for patent records with camelCase overrides."""
    def _make(patent_no: str = "TR2024/000001", **fields) -> PatentRecord:
        return PatentRecord.model_validate({"patentNo": patent_no, **fields})
    return _make
