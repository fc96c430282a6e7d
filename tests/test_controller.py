import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest

from patent_atlas import entrypoints
from patent_atlas.controllers.explorer import (
    MISSING_COMPARE_INPUT_MESSAGE,
    PAIR_NOT_FOUND_MESSAGE,
    PATENT_NOT_FOUND_MESSAGE,
    ExplorerController,
)
from patent_atlas.exceptions import TransportError
from patent_atlas.models.commands import ClosePanelCommand
from patent_atlas.models.patent import GeographicRegion, SearchCriteria
from patent_atlas.services.data_access import PatentDataFacade
from patent_atlas.services.geo_placement import GeoPlacementResolver
from patent_atlas.services.view_sync import NO_RESULTS_MESSAGE


@pytest.fixture
def mock_client():
    client = Mock()
    client.connect = AsyncMock()
    client.disconnect = AsyncMock()
    client.list_patents = AsyncMock()
    client.search_patents = AsyncMock()
    client.get_patent_by_no = AsyncMock()
    return client


@pytest.fixture
def offline(mock_client):
    error = TransportError("connection refused")
    mock_client.list_patents.side_effect = error
    mock_client.search_patents.side_effect = error
    mock_client.get_patent_by_no.side_effect = error
    return error


@pytest.fixture
def controller(mock_client, fake_map, fake_presenter, rng):
    return ExplorerController(
        fake_map,
        fake_presenter,
        facade=PatentDataFacade(mock_client),
        resolver=GeoPlacementResolver(rng=rng),
    )


class TestExplorerController:
    """Test cases for the explorer controller."""

    def test_registers_every_command(self, controller):
        assert len(controller.handlers) == 6
        assert controller.api_client is controller.facade.client

    @pytest.mark.asyncio
    async def test_start_and_stop(self, controller, mock_client):
        async with controller:
            assert controller.running

        assert not controller.running
        mock_client.connect.assert_awaited_once()
        mock_client.disconnect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_load_all_places_every_marker(self, controller, fake_map, fake_presenter, mock_client, make_patent):
        mock_client.list_patents.return_value = [
            make_patent("A", latitude=1.0, longitude=2.0),
            make_patent("B", geographicRegion="EU"),
        ]

        records = await controller.load_all()

        assert [r.patent_no for r in records] == ["A", "B"]
        assert set(fake_map.markers) == {"A", "B"}
        assert fake_presenter.rendered == ["A", "B"]

    @pytest.mark.asyncio
    async def test_load_all_offline_uses_embedded_dataset(self, controller, fake_map, offline, sample_patents):
        await controller.load_all()

        assert set(fake_map.markers) == {p.patent_no for p in sample_patents}

    @pytest.mark.asyncio
    async def test_offline_region_search(self, controller, fake_map, fake_presenter, offline):
        """Searching TURKEY while the service is down shows only Turkish patents."""
        records = await controller.search(region="TURKEY")

        assert records
        assert all(r.geographic_region is GeographicRegion.TURKEY for r in records)
        assert set(fake_map.markers) == {r.patent_no for r in records}
        assert fake_presenter.rendered == [r.patent_no for r in records]

    @pytest.mark.asyncio
    async def test_search_with_no_hits_shows_message(self, controller, fake_map, fake_presenter, offline):
        await controller.load_all()
        await controller.search(SearchCriteria(keywords="no such keyword anywhere"))

        assert fake_map.markers == {}
        assert fake_presenter.empty_message == NO_RESULTS_MESSAGE

    @pytest.mark.asyncio
    async def test_unknown_patent_alerts_and_changes_nothing(self, controller, fake_map, fake_presenter, offline):
        result = await controller.show_patent_details("XX9999")

        assert result is None
        assert fake_presenter.alerts == [PATENT_NOT_FOUND_MESSAGE]
        assert fake_presenter.details is None
        assert fake_map.markers == {}
        assert fake_map.views == []

    @pytest.mark.asyncio
    async def test_show_details_focuses_existing_marker(self, controller, fake_map, fake_presenter, offline):
        await controller.load_all()

        record = await controller.show_patent_details("TR2024/112233")

        assert fake_presenter.details == record
        assert fake_map.views[-1] == (fake_map.markers["TR2024/112233"].position, 8)
        assert fake_map.popups == ["TR2024/112233"]

    @pytest.mark.asyncio
    async def test_compare_requires_both_numbers(self, controller, fake_presenter, mock_client):
        result = await controller.compare("TR2024/112233", "  ")

        assert result is None
        assert fake_presenter.alerts == [MISSING_COMPARE_INPUT_MESSAGE]
        mock_client.get_patent_by_no.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_compare_shows_pair_and_report(self, controller, fake_map, fake_presenter, offline):
        await controller.load_all()

        report = await controller.compare("TR2024/112233", "US2024/112233")

        assert report is not None
        assert 0 <= report.total <= 100
        assert set(fake_map.markers) == {"TR2024/112233", "US2024/112233"}
        assert fake_presenter.rendered == ["TR2024/112233", "US2024/112233"]
        assert fake_presenter.comparison == ("TR2024/112233", "US2024/112233", report)
        assert controller.last_report == report

    @pytest.mark.asyncio
    async def test_compare_same_patent_scores_100(self, controller, offline):
        report = await controller.compare("TR2024/112233", "TR2024/112233")

        assert report.total == 100

    @pytest.mark.asyncio
    async def test_compare_with_unknown_patent_alerts(self, controller, fake_map, fake_presenter, offline):
        await controller.load_all()
        markers_before = set(fake_map.markers)

        result = await controller.compare("TR2024/112233", "XX9999")

        assert result is None
        assert fake_presenter.alerts == [PAIR_NOT_FOUND_MESSAGE]
        assert fake_presenter.comparison is None
        assert set(fake_map.markers) == markers_before

    @pytest.mark.asyncio
    async def test_close_panels(self, controller, fake_presenter, offline):
        await controller.compare("TR2024/112233", "US2024/112233")
        await controller.show_patent_details("TR2024/112233")

        await controller.close_comparison()
        assert fake_presenter.comparison is None
        assert controller.view.state.comparison is None

        await controller.close_details()
        assert fake_presenter.details is None
        assert controller.view.state.detail_patent_no is None

    @pytest.mark.asyncio
    async def test_close_panel_command_defaults_to_comparison(self, controller, fake_presenter, offline):
        await controller.compare("TR2024/112233", "US2024/112233")

        await controller.dispatch(ClosePanelCommand())

        assert fake_presenter.comparison is None
        assert controller.view.state.comparison is None

    @pytest.mark.asyncio
    async def test_list_choices(self, controller, fake_presenter, offline, sample_patents):
        await controller.list_choices()

        assert fake_presenter.choices == [p.patent_no for p in sample_patents]

    @pytest.mark.asyncio
    async def test_stale_search_response_is_dropped(self, controller, fake_map, fake_presenter, mock_client, make_patent):
        gate = asyncio.Event()

        async def search(criteria):
            if criteria.keywords == "slow":
                await gate.wait()
                return [make_patent("SLOW", latitude=1.0, longitude=1.0)]
            return [make_patent("FAST", latitude=2.0, longitude=2.0)]

        mock_client.search_patents.side_effect = search

        slow = asyncio.create_task(controller.search(keywords="slow"))
        await asyncio.sleep(0)
        fast = await controller.search(keywords="fast")
        gate.set()
        stale = await slow

        assert [r.patent_no for r in fast] == ["FAST"]
        assert stale is None
        assert set(fake_map.markers) == {"FAST"}
        assert fake_presenter.rendered == ["FAST"]

    @pytest.mark.asyncio
    async def test_failed_compare_keeps_pending_search(self, controller, fake_map, fake_presenter, mock_client, make_patent):
        gate = asyncio.Event()

        async def search(criteria):
            await gate.wait()
            return [make_patent("US1", geographicRegion="USA", latitude=37.0, longitude=-95.0)]

        mock_client.search_patents.side_effect = search
        mock_client.get_patent_by_no.side_effect = TransportError("connection refused")

        pending = asyncio.create_task(controller.search(region="USA"))
        await asyncio.sleep(0)
        assert await controller.compare("XX1", "XX2") is None
        gate.set()
        records = await pending

        assert fake_presenter.alerts == [PAIR_NOT_FOUND_MESSAGE]
        assert [r.patent_no for r in records] == ["US1"]
        assert fake_presenter.rendered == ["US1"]
        assert set(fake_map.markers) == {"US1"}

    @pytest.mark.asyncio
    async def test_older_search_after_newer_applied_is_dropped(self, controller, fake_presenter, mock_client, make_patent):
        gate = asyncio.Event()

        async def search(criteria):
            if criteria.region == "EU":
                await gate.wait()
            return [make_patent(criteria.region, latitude=1.0, longitude=1.0)]

        mock_client.search_patents.side_effect = search

        older = asyncio.create_task(controller.search(region="EU"))
        await asyncio.sleep(0)
        await controller.search(region="ASIA")
        gate.set()

        assert await older is None
        assert fake_presenter.rendered == ["ASIA"]

    @pytest.mark.asyncio
    async def test_unexpected_error_is_reported_not_raised(self, controller, mock_client):
        mock_client.list_patents.side_effect = RuntimeError("boom")

        with patch("patent_atlas.controllers.base.capture_exception") as mock_capture:
            result = await controller.load_all()

        assert result is None
        mock_capture.assert_called_once()
        assert mock_capture.call_args[0][1] == {"command_type": "load_all"}


class TestEntrypoints:

    @pytest.fixture(autouse=True)
    def unbind(self):
        yield
        entrypoints.bind(None)

    @pytest.mark.asyncio
    async def test_unbound_entry_point_raises(self):
        entrypoints.bind(None)

        with pytest.raises(RuntimeError):
            await entrypoints.close_comparison()

    @pytest.mark.asyncio
    async def test_entry_points_delegate_to_bound_controller(self, controller, fake_presenter, offline):
        entrypoints.bind(controller)
        await controller.compare("TR2024/112233", "EP2024/334455")

        await entrypoints.show_patent_details("EP2024/334455")
        assert fake_presenter.details.patent_no == "EP2024/334455"

        await entrypoints.close_comparison()
        assert fake_presenter.comparison is None


if __name__ == "__main__":
    pytest.main([__file__])
