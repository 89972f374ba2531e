from pathlib import Path

import pytest
import requests

from playerstats.parser import extract_player_stats
from playerstats.scraper import build_session, fetch_html, spider


PAGE = """
<p><table>
  <tr><td>Rex</td></tr>
  <tr><td>Key Techniques: Slash</td></tr>
  <tr><td>Location: North Cave</td></tr>
  <tr><td>LV</td><td>1</td></tr>
  <tr><td>HP</td><td>10</td></tr>
</table></p>
"""


class _FakeResponse:
    def __init__(self, text: str, status: int = 200) -> None:
        self.text = text
        self.status = status

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


class _FakeSession:
    def __init__(self, response: _FakeResponse) -> None:
        self.response = response
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.response


def test_build_session_sets_user_agent():
    session = build_session()
    assert "Mozilla" in session.headers["User-Agent"]


def test_fetch_html_keeps_tables_nested_in_paragraphs():
    session = _FakeSession(_FakeResponse(PAGE))

    doc = fetch_html(session, "http://example.com/players")

    assert session.calls == [("http://example.com/players", 20)]
    assert len(doc.select("p table")) == 1


def test_fetch_html_raises_on_http_error():
    session = _FakeSession(_FakeResponse("", status=404))

    with pytest.raises(requests.HTTPError):
        fetch_html(session, "http://example.com/missing")


def test_spider_runs_each_extractor_on_the_page(tmp_path: Path):
    page = tmp_path / "players.html"
    page.write_text(PAGE, encoding="utf-8")

    results = spider(
        page.resolve().as_uri(),
        {
            "playerStats": extract_player_stats,
            "tableCount": lambda doc: len(doc.find_all("table")),
        },
    )

    assert results["tableCount"] == 1
    [player] = results["playerStats"]
    assert player.name == "Rex"
    assert player.stats[0].to_dict() == {"level": 1, "hp": 10}
