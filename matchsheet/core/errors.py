"""Errors that abort a match sheet run."""


class MatchSheetError(Exception):
    """Base class for fatal run errors."""


class RetrievalError(MatchSheetError):
    """A match record could not be fetched or decoded."""

    def __init__(self, locator: str, reason: str):
        super().__init__(f"Could not retrieve match {locator!r}: {reason}")
        self.locator = locator
        self.reason = reason


class PersistenceError(MatchSheetError):
    """The finished sheet could not be written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not write sheet to {path}: {reason}")
        self.path = path
        self.reason = reason
