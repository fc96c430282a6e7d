"""Terminal front end: runs one explorer command and prints the result."""

import argparse
import asyncio
import logging
import sys
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

import structlog

from . import __version__, entrypoints
from .config import AtlasSettings
from .controllers.explorer import ExplorerController
from .models.patent import GeographicRegion, PatentRecord, PatentStatus
from .models.similarity import SimilarityReport
from .services.view_sync import MapCapability, MarkerSpec, Position, Presenter
from .utils.error_tracking import setup_sentry
from .utils.normalizer import PatentNormalizer
from .utils.observability import get_metrics, setup_tracing

logger = structlog.get_logger(__name__)

DETAIL_FIELDS = [
    ("Patent No", "patent_no"),
    ("Keywords", "keywords"),
    ("Abstract", "abstract"),
    ("Application Date", "application_date"),
    ("Publication Date", "publication_date"),
    ("Applicant", "applicant"),
    ("IPC", "ipc"),
    ("CPC", "cpc"),
    ("Claims", "claims"),
    ("Geographic Region", "region_label"),
    ("Patent Status", "patent_status"),
]


def _display(value) -> str:
    if value is None:
        return "-"
    return getattr(value, "value", value)


class TextMap(MapCapability):
    """Map capability that keeps markers in memory and reports view changes."""

    def __init__(self, out: TextIO = sys.stdout):
        self.out = out
        self.markers: Dict[str, MarkerSpec] = {}
        self.view: Optional[Tuple[Position, int]] = None

    def place_marker(self, marker: MarkerSpec) -> None:
        self.markers[marker.patent_no] = marker

    def remove_marker(self, patent_no: str) -> None:
        self.markers.pop(patent_no, None)

    def fit_bounds(self, positions: Sequence[Position], padding: Tuple[int, int], max_zoom: int) -> None:
        lats = [p[0] for p in positions]
        lngs = [p[1] for p in positions]
        print(f"Map: {len(positions)} markers within "
              f"lat {min(lats):.2f}..{max(lats):.2f}, lng {min(lngs):.2f}..{max(lngs):.2f}",
              file=self.out)

    def set_view(self, position: Position, zoom: int) -> None:
        self.view = (position, zoom)
        print(f"Map: centered on {position[0]:.4f}, {position[1]:.4f} (zoom {zoom})", file=self.out)

    def open_popup(self, patent_no: str) -> None:
        popup = self.markers[patent_no].popup
        print(f"Popup: {popup.title} | {popup.applicant} | {popup.region}", file=self.out)


class ConsolePresenter(Presenter):
    """Presenter that writes plain text."""

    def __init__(self, out: TextIO = sys.stdout, err: Optional[TextIO] = None, show_breakdown: bool = False):
        self.out = out
        self.err = err
        self.alerts: List[str] = []
        self.show_breakdown = show_breakdown
        self.normalizer = PatentNormalizer()

    def render_results(self, records: Sequence[PatentRecord]) -> None:
        for record in records:
            print(f"{record.patent_no} - {record.applicant or ''}", file=self.out)
            if record.keywords:
                print(f"    {record.keywords}", file=self.out)

    def render_empty(self, message: str) -> None:
        print(message, file=self.out)

    def show_details(self, record: PatentRecord) -> None:
        print("", file=self.out)
        for label, attribute in DETAIL_FIELDS:
            print(f"{label}: {_display(getattr(record, attribute))}", file=self.out)
        section = self.normalizer.get_ipc_rollup(record.ipc)
        if section:
            print(f"IPC Section: {section}", file=self.out)

    def hide_details(self) -> None:
        pass

    def show_comparison(self, first: PatentRecord, second: PatentRecord, report: SimilarityReport) -> None:
        print("", file=self.out)
        print(f"Similarity {first.patent_no} vs {second.patent_no}: {report.total}% ({report.band.value})",
              file=self.out)
        if not self.show_breakdown:
            return
        for field, field_score in report.breakdown.items():
            status = f"{field_score.percent:.0f}%" if field_score.applicable else "n/a"
            print(f"  {field.value:<15} {status:>5}  {field_score.explanation}", file=self.out)

    def hide_comparison(self) -> None:
        pass

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        print(message, file=self.err or sys.stderr)

    def list_choices(self, records: Sequence[PatentRecord]) -> None:
        for record in records:
            print(f"{record.patent_no}  {record.keywords or 'No title available'}", file=self.out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="patent-atlas", description="Explore patents on a map.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--api-url", help="Patent service base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")
    parser.add_argument("--trace", action="store_true", help="Export OpenTelemetry spans to the console")
    parser.add_argument("--metrics", action="store_true", help="Print Prometheus metrics after the command")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show every patent")
    subparsers.add_parser("choices", help="List patents available for comparison")

    search = subparsers.add_parser("search", help="Filter patents")
    search.add_argument("--patent-no")
    search.add_argument("--keywords")
    search.add_argument("--applicant")
    search.add_argument("--region", choices=[r.value for r in GeographicRegion])
    search.add_argument("--status", choices=[s.value for s in PatentStatus])

    show = subparsers.add_parser("show", help="Show one patent's details")
    show.add_argument("patent_no")

    compare = subparsers.add_parser("compare", help="Compare two patents")
    compare.add_argument("first_no")
    compare.add_argument("second_no")
    compare.add_argument("--details", action="store_true", help="Print the per-field breakdown")
    return parser


async def run(
    args: argparse.Namespace, out: TextIO = sys.stdout, err: Optional[TextIO] = None
) -> ExplorerController:
    settings = AtlasSettings.from_env()
    if args.api_url:
        settings = settings.model_copy(update={"api_url": args.api_url})
    setup_sentry(settings.sentry_dsn, environment=settings.environment)
    if args.trace:
        setup_tracing("patent-atlas", __version__)

    presenter = ConsolePresenter(out, err=err, show_breakdown=getattr(args, "details", False))
    controller = ExplorerController(TextMap(out), presenter, settings=settings)
    entrypoints.bind(controller)

    logger.info("Running command", command=args.command, api_url=settings.api_url)
    async with controller:
        if args.command == "list":
            await controller.load_all()
        elif args.command == "choices":
            await controller.list_choices()
        elif args.command == "search":
            await controller.search(
                patent_no=args.patent_no,
                keywords=args.keywords,
                applicant=args.applicant,
                region=args.region,
                status=args.status,
            )
        elif args.command == "show":
            await controller.load_all()
            await entrypoints.show_patent_details(args.patent_no)
        elif args.command == "compare":
            await controller.compare(args.first_no, args.second_no)

    if args.metrics:
        payload, _ = get_metrics()
        out.write(payload.decode("utf-8"))
    return controller


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR, stream=sys.stderr)
    controller = asyncio.run(run(args))
    # Not-found and validation alerts fail the command
    return 1 if controller.presenter.alerts else 0


if __name__ == "__main__":
    sys.exit(main())
