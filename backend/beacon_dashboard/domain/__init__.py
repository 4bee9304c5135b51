"""Domain types and pure helpers for the validator dashboard."""

from .currency import CurrencyConverter
from .errors import (
    DashboardError,
    DataSourceUnavailable,
    InvalidQuery,
    MalformedIdentifier,
    MissingIdentifiers,
    NoActiveValidators,
    TooManyIdentifiers,
)
from .identifiers import parse_identifiers
from .models import (
    BalanceHistoryRecord,
    EarningsSnapshot,
    EffectivenessSample,
    GraffitiwallRecord,
    ProposalHistoryRecord,
    ProposalRecord,
    ValidatorRecord,
)
from .timebase import ChainClock

__all__ = [
    "BalanceHistoryRecord",
    "ChainClock",
    "CurrencyConverter",
    "DashboardError",
    "DataSourceUnavailable",
    "EarningsSnapshot",
    "EffectivenessSample",
    "GraffitiwallRecord",
    "InvalidQuery",
    "MalformedIdentifier",
    "MissingIdentifiers",
    "NoActiveValidators",
    "ProposalHistoryRecord",
    "ProposalRecord",
    "TooManyIdentifiers",
    "ValidatorRecord",
    "parse_identifiers",
]
