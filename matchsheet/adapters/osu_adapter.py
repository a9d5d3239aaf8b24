"""Fetcher for osu! multiplayer match records over HTTP."""

import json

import requests
from bs4 import BeautifulSoup

from .base import BaseFetcher
from ..core.errors import RetrievalError


MATCH_URL = 'https://osu.ppy.sh/community/matches/{match_id}'
REQUEST_TIMEOUT = 30


class OsuMatchFetcher(BaseFetcher):
    """Fetch a match by link or bare match id.

    Args:
        session: Optional requests.Session (or anything with the same get()).
                 A session passed in is left open; one created here is
                 closed by close().
        timeout: Seconds before a request is abandoned.
    """

    def __init__(self, session=None, timeout: float = REQUEST_TIMEOUT):
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, locator: str) -> dict | None:
        if not locator:
            return None
        url = self.match_url(locator)

        try:
            response = self.session.get(url, timeout=self.timeout,
                                        headers={'Accept': 'application/json'})
            response.raise_for_status()
        except requests.RequestException as e:
            raise RetrievalError(locator, str(e)) from e

        return self._decode(locator, response.text)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    @staticmethod
    def match_url(locator: str) -> str:
        """'112233' -> full match url; links are used as given."""
        locator = locator.strip()
        if locator.isdigit():
            return MATCH_URL.format(match_id=locator)
        return locator

    @staticmethod
    def _decode(locator: str, body: str) -> dict:
        """Decode a JSON body, or pull the match JSON out of a match web page.

        The match page embeds the same JSON the API returns in
        <script id="json-events">.
        """
        text = body.strip()
        if not text.startswith('{'):
            soup = BeautifulSoup(text, 'html.parser')
            script = soup.find('script', id='json-events')
            if script is None or not script.string:
                raise RetrievalError(locator, 'response contains no match data')
            text = script.string.strip()

        try:
            match = json.loads(text)
        except json.JSONDecodeError as e:
            raise RetrievalError(locator, f'invalid match JSON: {e}') from e

        if not isinstance(match, dict):
            raise RetrievalError(locator, 'match data is not a JSON object')
        return match
