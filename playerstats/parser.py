"""HTML parsing utilities for player statistics tables."""
from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from .models import LevelStat, Number, PlayerRecord

logger = logging.getLogger(__name__)

# Player blocks are tables authored inside paragraphs.
TABLE_SELECTOR = "p table"
KEY_TECHNIQUES_LABEL = re.compile(r"Key\s+Techniques:\s*", re.I)
LOCATION_LABEL = re.compile(r"Location:\s*", re.I)

_DECIMAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def clean_text(node: Optional[Tag]) -> str:
    """Return the whitespace-collapsed text of *node* ('' when missing)."""

    if node is None:
        return ""
    return " ".join(node.get_text().split())


def to_number(raw: Optional[str]) -> Optional[Number]:
    """Coerce *raw* to a number, or ``None`` for anything non-numeric.

    Placeholder cells such as ``-`` or blanks become ``None`` rather than 0.
    Integral values come back as ``int`` so they serialise as ``5``, not ``5.0``.
    """

    if raw is None:
        return None
    text = raw.strip().replace("−", "-")
    if not _DECIMAL.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def _row_cells(row: Tag) -> List[str]:
    return [clean_text(cell) for cell in row.find_all(["td", "th"])]


def _pivot_stats(stat_rows: Sequence[List[str]]) -> List[LevelStat]:
    header, data_rows = stat_rows[0], stat_rows[1:]
    levels: List[LevelStat] = []
    # header[0] is the "LV" label column
    for col, level in enumerate(header[1:], start=1):
        values = {}
        for row in data_rows:
            if not row:
                continue
            values[row[0].lower()] = to_number(row[col]) if col < len(row) else None
        levels.append(LevelStat(level=to_number(level), values=values))
    return levels


def parse_player_table(table: Tag) -> Optional[PlayerRecord]:
    """Build a :class:`PlayerRecord` from one table, or ``None`` if it has no stats.

    The first three rows carry the name, the key techniques and the location.
    Every following row is a stat row whose first cell is the label; the first
    stat row lists the levels. Malformed markup never raises: missing rows give
    empty strings and non-numeric cells give ``None``.
    """

    rows = table.find_all("tr")

    def row_text(idx: int) -> str:
        return clean_text(rows[idx]) if idx < len(rows) else ""

    stat_rows = [_row_cells(row) for row in rows[3:]]
    if not stat_rows:
        logger.debug("Skipping table without stat rows: %r", row_text(0))
        return None

    # An empty techniques row still yields [""]; splitting never drops tokens.
    techniques = [
        technique.strip()
        for technique in KEY_TECHNIQUES_LABEL.sub("", row_text(1), count=1).split(",")
    ]
    location = LOCATION_LABEL.sub("", row_text(2), count=1)
    tokens = location.split()
    region = tokens[0] if tokens else ""

    return PlayerRecord(
        name=row_text(0),
        key_techniques=techniques,
        location=location,
        region=region,
        stats=_pivot_stats(stat_rows),
    )


def extract_player_stats(doc: BeautifulSoup) -> List[PlayerRecord]:
    """Return every player record found in *doc*, in document order."""

    players: List[PlayerRecord] = []
    tables = doc.select(TABLE_SELECTOR)
    for table in tables:
        player = parse_player_table(table)
        if player is not None:
            players.append(player)
    logger.debug("Parsed %d player tables out of %d candidates", len(players), len(tables))
    return players
