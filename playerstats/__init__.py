"""Toolkit for extracting player statistics tables from HTML pages."""

from .models import LevelStat, PlayerRecord
from .parser import extract_player_stats, parse_player_table, to_number
from .export import players_to_frame, write_csv, write_json
from .scraper import fetch_html, spider

__all__ = [
    "LevelStat",
    "PlayerRecord",
    "extract_player_stats",
    "fetch_html",
    "parse_player_table",
    "players_to_frame",
    "spider",
    "to_number",
    "write_csv",
    "write_json",
]
