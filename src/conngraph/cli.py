from __future__ import annotations

"""Command-line entry point: ``conngraph <inputfile> [-o outputfile]``."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import AppSettings, ConfigError, get_settings
from .errors import ConnectivityError
from .graph import analyze, load_graph
from .report import write_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(settings: AppSettings, *, verbose: bool = False) -> None:
    level = "DEBUG" if verbose or settings.debug else settings.logging.level
    logging.basicConfig(format=settings.logging.format)
    logging.getLogger("conngraph").setLevel(level)


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description=(
            "Find articulation points, bridges, biconnected and connected "
            "components of an undirected graph stored as a binary adjacency matrix."
        ),
    )
    parser.add_argument(
        "inputfile",
        help="Binary input: int16 N followed by an N x N int16 matrix (little-endian)",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="outputfile",
        default=settings.report.output,
        help=f"Output text file (default: {settings.report.output})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(settings, verbose=args.verbose)

    try:
        graph = load_graph(args.inputfile)
    except ConnectivityError as exc:
        logger.error("Failed to load graph: %s", exc)
        return EXIT_FAILURE

    report = analyze(graph)

    try:
        write_report(report, args.outputfile, encoding=settings.report.encoding)
    except ConnectivityError as exc:
        logger.error("Failed to write report: %s", exc)
        return EXIT_FAILURE

    print(f"Analysis complete. Results written to {args.outputfile}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
