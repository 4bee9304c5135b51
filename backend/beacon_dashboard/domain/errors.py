"""Error taxonomy shared by the dashboard services and the HTTP layer."""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for every failure raised while aggregating dashboard data."""


class InvalidQuery(DashboardError):
    """The caller supplied a request that can never succeed as given."""


class MalformedIdentifier(InvalidQuery):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid validator identifier {token!r}")
        self.token = token


class TooManyIdentifiers(InvalidQuery):
    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"{count} validators requested but at most {limit} are allowed")
        self.count = count
        self.limit = limit


class MissingIdentifiers(InvalidQuery):
    def __init__(self) -> None:
        super().__init__("at least one validator is required")


class NoActiveValidators(InvalidQuery):
    def __init__(self, epoch: int) -> None:
        super().__init__(f"none of the requested validators is active at epoch {epoch}")
        self.epoch = epoch


class DataSourceUnavailable(DashboardError):
    """A backing store failed; the detail is for logs only."""

    def __init__(self, source: str, operation: str) -> None:
        super().__init__(f"{source} failed while {operation}")
        self.source = source
        self.operation = operation


__all__ = [
    "DashboardError",
    "InvalidQuery",
    "MalformedIdentifier",
    "TooManyIdentifiers",
    "MissingIdentifiers",
    "NoActiveValidators",
    "DataSourceUnavailable",
]
