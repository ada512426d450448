"""
Application entry point for the zooplanner command line.

Sets up settings, logging and the enclosure database, then answers one
request: which enclosures could take QUANTIDADE animals of ESPECIE.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from zooplanner_app.config.settings import Settings, init_logging
from zooplanner_app.init_zoo import seed_default_enclosures
from zooplanner_app.models import AllocationErrorKind
from zooplanner_app.reports.simple_text_report import (
    build_analysis_payload,
    build_analysis_summary_text,
    build_explanation_text,
)
from zooplanner_app.repositories.database import init_database
from zooplanner_app.services.zoo_service import ZooService


def _parse_count(raw: str) -> int | str:
    # Left as text when not an integer so the engine reports it
    try:
        return int(raw)
    except ValueError:
        return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find zoo enclosures that can house a new batch of animals"
    )
    parser.add_argument("especie", help="Species name, e.g. MACACO")
    parser.add_argument("quantidade", help="Number of animals in the batch")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show every enclosure's admission checks",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result payload as JSON",
    )
    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="SQLite file holding the enclosures. Defaults to an in-memory database.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING...).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Bootstraps the zooplanner app and answers one request."""
    args = build_parser().parse_args(argv)

    settings = Settings.default()
    if args.db:
        settings.db_path = Path(args.db).expanduser().resolve()
        settings.data_dir = settings.db_path.parent
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    if args.log_level:
        settings.log_level = args.log_level.upper()
    init_logging(settings)

    session_factory = init_database(settings.db_path)
    count = _parse_count(args.quantidade)

    with session_factory() as db:
        seed_default_enclosures(db)
        service = ZooService.from_session(db)
        result = service.analyze(args.especie, count)

        if args.json:
            print(json.dumps(build_analysis_payload(result), ensure_ascii=False))
        else:
            print(build_analysis_summary_text(args.especie, count, result))

        # Invalid requests have no per-enclosure verdicts
        if args.explain and result.error in (None, AllocationErrorKind.NO_VIABLE_ENCLOSURE):
            print()
            print(build_explanation_text(service.explain(args.especie, count)))

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
