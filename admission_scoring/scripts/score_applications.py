"""
Score application payloads stored as JSON files.

Each file holds one application object or a list of them. Results are
printed to stdout as a JSON list, one entry per application.

Usage:
    python -m admission_scoring.scripts.score_applications app1.json
    python -m admission_scoring.scripts.score_applications batch.json --academic-base 72.5
    python -m admission_scoring.scripts.score_applications *.json --ordinance 2025 --indent 2
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from dotenv import load_dotenv

from admission_scoring.config import get_settings
from admission_scoring.core.exceptions import ScoringException
from admission_scoring.core.logging import configure_logging
from admission_scoring.scoring.integration_service import ApplicationScoringService
from admission_scoring.scoring.rules import get_ordinance

logger = structlog.get_logger(__name__)


def _load_payloads(path: Path) -> list:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    return data if isinstance(data, list) else [data]


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Score admission applications from JSON files")
    ap.add_argument("files", nargs="+", type=Path, help="JSON payload files")
    ap.add_argument("--academic-base", type=float, default=None,
                    help="Academic base score (0-80) applied to every application")
    ap.add_argument("--ordinance", default=None, help="Ordinance version (default: from settings)")
    ap.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    args = ap.parse_args(argv)

    load_dotenv()
    configure_logging(get_settings())

    try:
        service = ApplicationScoringService(ordinance=get_ordinance(args.ordinance))
    except ScoringException as e:
        logger.error("ordinance_unavailable", error=str(e))
        return 2

    results = []
    failures = 0
    for path in args.files:
        try:
            payloads = _load_payloads(path)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("payload_file_unreadable", file=str(path), error=str(e))
            failures += 1
            continue

        for index, payload in enumerate(payloads):
            try:
                score = service.score_application(payload, academic_base=args.academic_base)
            except (ScoringException, ValueError) as e:
                logger.error("application_failed", file=str(path), index=index, error=str(e))
                failures += 1
                continue
            results.append({"file": str(path), "index": index, **score.as_dict()})

    json.dump(results, sys.stdout, ensure_ascii=False, indent=args.indent)
    sys.stdout.write("\n")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
