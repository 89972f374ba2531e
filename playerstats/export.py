"""Writers for extracted player records."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from .models import PlayerRecord


def write_json(path: Path, players: Iterable[PlayerRecord]) -> str:
    """Write *players* to *path* as compact UTF-8 JSON and return the text."""

    text = json.dumps(
        [player.to_dict() for player in players],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return text


def players_to_frame(players: Iterable[PlayerRecord]) -> pd.DataFrame:
    records: List[dict] = []
    stat_columns: List[str] = []
    for player in players:
        for stat in player.stats:
            for key in stat.values:
                if key not in stat_columns and key != "level":
                    stat_columns.append(key)
            records.append(
                {
                    "name": player.name,
                    "region": player.region,
                    "location": player.location,
                    **stat.to_dict(),
                }
            )
    columns = ["name", "region", "location", "level", *stat_columns]
    return pd.DataFrame.from_records(records, columns=columns)


def write_csv(path: Path, players: Iterable[PlayerRecord]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    players_to_frame(players).to_csv(path, index=False)
