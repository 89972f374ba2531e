"""Player stats downloader.

This script downloads a single page, finds every player table nested inside a
paragraph, pivots each table's stat block into one record per level, and
stores the result as a compact JSON array.

Usage
-----
python main.py http://path-to.url/to/scrape/for/data

The URL may appear anywhere among the arguments. Without one the script prints
this usage and exits cleanly without touching the output file.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import requests

from playerstats.export import write_csv, write_json
from playerstats.models import PlayerRecord
from playerstats.parser import extract_player_stats
from playerstats.scraper import spider

logger = logging.getLogger(__name__)

# -------------------------
# Configuration defaults
# -------------------------

DEFAULT_OUTPUT = Path(__file__).resolve().parent / "player-data.json"
URL_PATTERN = re.compile(r"^https?://", re.I)

USAGE = """\
No URL provided, cannot proceed!

Usage:
 python main.py http://path-to.url/to/scrape/for/data
"""


def find_url(candidates: Sequence[str]) -> Optional[str]:
    """Return the first argument that looks like an HTTP(S) URL."""

    for candidate in candidates:
        if URL_PATTERN.match(candidate):
            return candidate
    return None


def run(
    url: str,
    output: Path,
    *,
    csv_path: Optional[Path] = None,
    fetcher=spider,
) -> List[PlayerRecord]:
    """Fetch *url*, extract player tables and write them to *output*."""

    results = fetcher(url, {"playerStats": extract_player_stats})
    players = results["playerStats"]
    logger.info("Extracted %d players", len(players))

    write_json(output, players)
    logger.info("Wrote %s", output.resolve())
    if csv_path is not None:
        write_csv(csv_path, players)
        logger.info("Wrote %s", csv_path.resolve())
    return players


# -------------------------
# CLI entry-point
# -------------------------

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "args",
        nargs="*",
        metavar="URL",
        help="Page to scrape; the first http(s) argument is used.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="JSON file to write (default: player-data.json)",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Optional flattened CSV export, one row per player level.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging for detailed progress information.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output, showing only warnings and errors.",
    )

    # Unknown flags are tolerated so the URL can sit anywhere on the command line.
    args, extra = parser.parse_known_intermixed_args(argv)

    if args.verbose and args.quiet:
        parser.error("--verbose and --quiet are mutually exclusive")

    leftovers = set(args.args) | set(extra)
    tokens = sys.argv[1:] if argv is None else list(argv)
    url = find_url([token for token in tokens if token in leftovers])
    if url is None:
        print(USAGE, file=sys.stderr)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        run(url, args.output, csv_path=args.csv)
    except (requests.RequestException, OSError) as exc:
        logger.error("Failed to download player stats from %s: %s", url, exc)
        raise
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
