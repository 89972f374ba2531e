"""Utilities for downloading a page and running extractors over it."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import unquote, urlparse

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)
REQUEST_TIMEOUT = 20

Extractor = Callable[[BeautifulSoup], Any]


def build_session() -> requests.Session:
    """Return a basic requests session with a sensible user agent."""

    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_html(session: requests.Session, url: str) -> BeautifulSoup:
    """Fetch *url* and return a parsed BeautifulSoup document.

    ``html.parser`` keeps tables nested inside paragraphs where the author put
    them, so ``p table`` still matches after parsing. Requests carry a fixed
    ``REQUEST_TIMEOUT`` so a stalled server cannot hang the run; a timeout is
    raised like any other fetch failure and is not retried.
    """

    parsed = urlparse(url)
    if parsed.scheme == "file":
        text = Path(unquote(parsed.path)).read_text(encoding="utf-8")
        return BeautifulSoup(text, "html.parser")

    response = session.get(url, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return BeautifulSoup(response.text, "html.parser")


def spider(
    url: str,
    extractors: Mapping[str, Extractor],
    *,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Download *url* once and return ``{name: extractor(document)}``."""

    session = session or build_session()
    logger.info("Fetching %s", url)
    doc = fetch_html(session, url)
    return {name: extractor(doc) for name, extractor in extractors.items()}
