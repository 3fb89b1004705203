"""Command-line entry point."""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from ..config import Settings
from ..core.errors import StartupArgumentError
from ..core.persistence import load_file
from ..core.point_store import PointStore
from ..logging_setup import configure_logging

logger = structlog.get_logger()


def _count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Random count of bad format: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"Random count must be non-negative: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-voronoi",
        description="Click to place sites and watch their Voronoi diagram update.",
    )
    parser.add_argument("-l", "--lines_only", action="store_true", default=None,
                        help="Don't color polygons, just outline them")
    parser.add_argument("-r", "--random_count", type=_count, metavar="RANDOMCOUNT",
                        help='On keypress "R", put this many random points on-screen')
    parser.add_argument("-j", "--json_dots", metavar="JSON",
                        help="Load dots from json file")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Overlay the flags that were given on top of ``base`` settings."""
    base = base if base is not None else Settings()
    update = {k: v for k, v in vars(args).items() if v is not None}
    return base.model_copy(update=update)


def load_store(settings: Settings) -> PointStore:
    """Empty store, or the ``json_dots`` file's sites with fresh colors.

    Raises:
        PersistedFileError: if the file can't be read or parsed
    """
    store = PointStore()
    if settings.json_dots:
        store.replace(load_file(settings.json_dots))
    return store


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid settings", errors=e.error_count(), error=str(e))
        return 1
    configure_logging(settings.log_level, settings.log_format)

    try:
        store = load_store(settings)
    except StartupArgumentError as e:
        logger.error("Startup failed", error=str(e))
        return 1

    # Imported late so argument errors never pay for GUI backend start-up.
    from .window import VoronoiWindow

    VoronoiWindow(settings, store).show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
