"""Abstract base fetcher for retrieving match records."""

from abc import ABC, abstractmethod


class BaseFetcher(ABC):
    @abstractmethod
    def fetch(self, locator: str) -> dict | None:
        """Fetch one match record.

        Returns None for an empty locator. The record is the decoded match
        JSON, with keys:
            users:  [{id, username, ...}]
            events: [{..., game: {beatmap: {id}, beatmap_id, scoring_type,
                                  scores: [{user_id, score, mods, accuracy}]}}]

        Raises RetrievalError when the record cannot be fetched or decoded.
        """
        pass

    def close(self) -> None:
        """Release any connection held by the fetcher."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
