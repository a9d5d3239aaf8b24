"""Fetcher for match records saved to disk as JSON (offline re-runs)."""

import json

from .base import BaseFetcher
from ..core.errors import RetrievalError


class JsonFileFetcher(BaseFetcher):
    """Treat each locator as the path of a saved match JSON file."""

    def fetch(self, locator: str) -> dict | None:
        if not locator:
            return None
        try:
            with open(locator, 'r', encoding='utf-8') as f:
                match = json.load(f)
        except OSError as e:
            raise RetrievalError(locator, str(e)) from e
        except json.JSONDecodeError as e:
            raise RetrievalError(locator, f'invalid match JSON: {e}') from e

        if not isinstance(match, dict):
            raise RetrievalError(locator, 'match data is not a JSON object')
        return match
