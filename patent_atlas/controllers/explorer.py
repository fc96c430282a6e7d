"""Explorer controller: search, compare and detail commands over the patent map."""

from typing import Dict, List, Optional, Sequence

import structlog

from ..config import AtlasSettings
from ..exceptions import ValidationFailure
from ..models.commands import (
    ClosePanelCommand,
    CommandType,
    CompareCommand,
    ListChoicesCommand,
    LoadAllCommand,
    Panel,
    SearchCommand,
    SelectDetailCommand,
)
from ..models.patent import PatentRecord, SearchCriteria
from ..models.similarity import SimilarityReport
from ..services.data_access import FetchOutcome, PatentDataFacade
from ..services.geo_placement import GeoPlacementResolver
from ..services.result_set import ResultSetManager
from ..services.similarity import SimilarityEngine
from ..services.view_sync import MapCapability, Presenter, ViewSynchronizer
from ..utils.api_client import PatentApiClient
from ..utils.observability import log_event, metrics
from .base import BaseController

logger = structlog.get_logger(__name__)

PATENT_NOT_FOUND_MESSAGE = "Patent not found!"
PAIR_NOT_FOUND_MESSAGE = "One or both patents not found!"
MISSING_COMPARE_INPUT_MESSAGE = "Please enter both patent numbers"

# Request channels guarded against out-of-order responses
RESULTS_CHANNEL = "results"
DETAILS_CHANNEL = "details"


class ExplorerController(BaseController):
    """Drives the result set, the map and the panels from user commands.

    Commands that replace the result set (load, search, compare) share one
    request sequence. A response is dropped when a newer response on the
    same channel has already been applied; requests that end without
    changing the view (not found, validation) never cause a drop.
    """

    def __init__(
        self,
        map_view: MapCapability,
        presenter: Presenter,
        settings: Optional[AtlasSettings] = None,
        api_client: Optional[PatentApiClient] = None,
        facade: Optional[PatentDataFacade] = None,
        resolver: Optional[GeoPlacementResolver] = None,
        engine: Optional[SimilarityEngine] = None,
    ):
        self.settings = settings or AtlasSettings()
        if facade is not None:
            api_client = facade.client
        api_client = api_client or PatentApiClient(
            self.settings.api_url, timeout=self.settings.request_timeout
        )
        self.presenter = presenter
        self.facade = facade or PatentDataFacade(api_client)
        self.results = ResultSetManager()
        self.view = ViewSynchronizer(
            map_view,
            presenter,
            resolver=resolver,
            fit_padding=self.settings.fit_padding,
            max_fit_zoom=self.settings.max_fit_zoom,
            detail_zoom=self.settings.detail_zoom,
        )
        self.engine = engine or SimilarityEngine()
        self._issued: Dict[str, int] = {RESULTS_CHANNEL: 0, DETAILS_CHANNEL: 0}
        self._applied: Dict[str, int] = {RESULTS_CHANNEL: 0, DETAILS_CHANNEL: 0}
        self.last_report: Optional[SimilarityReport] = None
        super().__init__(api_client)

    def register_handlers(self):
        self.register(CommandType.LOAD_ALL, self.handle_load_all)
        self.register(CommandType.SEARCH, self.handle_search)
        self.register(CommandType.COMPARE, self.handle_compare)
        self.register(CommandType.SELECT_DETAIL, self.handle_select_detail)
        self.register(CommandType.CLOSE_PANEL, self.handle_close_panel)
        self.register(CommandType.LIST_CHOICES, self.handle_list_choices)

    def report_validation_failure(self, error: ValidationFailure):
        self.presenter.alert(str(error))

    async def handle_load_all(self, command: LoadAllCommand) -> Optional[List[PatentRecord]]:
        sequence = self._issue(RESULTS_CHANNEL)
        result = await self.facade.fetch_all()
        if self._is_stale(RESULTS_CHANNEL, sequence, command.type):
            return None
        return self._apply_results(result.data, sequence)

    async def handle_search(self, command: SearchCommand) -> Optional[List[PatentRecord]]:
        logger.info("Searching patents", criteria=command.criteria.to_query_params())
        sequence = self._issue(RESULTS_CHANNEL)
        result = await self.facade.search(command.criteria)
        if self._is_stale(RESULTS_CHANNEL, sequence, command.type):
            return None
        return self._apply_results(result.data, sequence)

    async def handle_compare(self, command: CompareCommand) -> Optional[SimilarityReport]:
        if not command.first_no or not command.second_no:
            raise ValidationFailure(MISSING_COMPARE_INPUT_MESSAGE)

        logger.info(f"Comparing patents {command.first_no} and {command.second_no}")
        sequence = self._issue(RESULTS_CHANNEL)
        result = await self.facade.fetch_pair_by_no(command.first_no, command.second_no)
        if self._is_stale(RESULTS_CHANNEL, sequence, command.type):
            return None

        if result.outcome is FetchOutcome.NOT_FOUND:
            self.presenter.alert(PAIR_NOT_FOUND_MESSAGE)
            return None

        first, second = result.data
        self._apply_results([first, second], sequence)

        report = self.engine.score(first, second)
        self.last_report = report
        self.view.show_comparison(first, second, report)
        metrics.comparisons.labels(band=report.band.value).inc()
        log_event("patents_compared",
                  first_no=first.patent_no,
                  second_no=second.patent_no,
                  total=report.total,
                  source=result.outcome.value)
        return report

    async def handle_select_detail(self, command: SelectDetailCommand) -> Optional[PatentRecord]:
        sequence = self._issue(DETAILS_CHANNEL)
        result = await self.facade.fetch_by_no(command.patent_no)
        if self._is_stale(DETAILS_CHANNEL, sequence, command.type):
            return None

        if result.outcome is FetchOutcome.NOT_FOUND:
            self.presenter.alert(PATENT_NOT_FOUND_MESSAGE)
            return None

        self._applied[DETAILS_CHANNEL] = sequence
        self.view.show_details(result.data)
        return result.data

    async def handle_close_panel(self, command: ClosePanelCommand):
        if command.panel is Panel.DETAILS:
            self.view.hide_details()
        else:
            self.view.hide_comparison()

    async def handle_list_choices(self, command: ListChoicesCommand) -> List[PatentRecord]:
        result = await self.facade.fetch_all()
        self.presenter.list_choices(result.data)
        return result.data

    # Convenience entry points used by the UI glue

    async def load_all(self):
        return await self.dispatch(LoadAllCommand())

    async def search(self, criteria: Optional[SearchCriteria] = None, **filters):
        criteria = criteria or SearchCriteria(**filters)
        return await self.dispatch(SearchCommand(criteria=criteria))

    async def compare(self, first_no: Optional[str], second_no: Optional[str]):
        return await self.dispatch(CompareCommand(first_no=first_no, second_no=second_no))

    async def list_choices(self):
        return await self.dispatch(ListChoicesCommand())

    async def show_patent_details(self, patent_no: str):
        return await self.dispatch(SelectDetailCommand(patent_no=patent_no))

    async def close_comparison(self):
        return await self.dispatch(ClosePanelCommand(panel=Panel.COMPARISON))

    async def close_details(self):
        return await self.dispatch(ClosePanelCommand(panel=Panel.DETAILS))

    def _apply_results(self, records: Sequence[PatentRecord], sequence: int) -> List[PatentRecord]:
        self._applied[RESULTS_CHANNEL] = sequence
        current = self.results.set_results(records)
        self.view.synchronize(current)
        return current

    def _issue(self, channel: str) -> int:
        self._issued[channel] += 1
        return self._issued[channel]

    def _is_stale(self, channel: str, sequence: int, command_type: CommandType) -> bool:
        if sequence > self._applied[channel]:
            return False
        metrics.stale_responses.labels(command=command_type.value).inc()
        logger.info("Dropping stale response",
                    command_type=command_type.value,
                    sequence=sequence,
                    applied=self._applied[channel])
        return True
