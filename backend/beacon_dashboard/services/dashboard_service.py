"""Aggregation of validator dashboard views across the backing stores."""

from __future__ import annotations

from dataclasses import dataclass

from beacon_dashboard.domain.errors import MissingIdentifiers, NoActiveValidators
from beacon_dashboard.domain.timebase import ChainClock
from beacon_dashboard.repositories import EffectivenessStore, ValidatorRepository
from beacon_dashboard.schemas import (
    ChartPoint,
    GraffitiwallPixel,
    ValidatorEarnings,
    ValidatorTable,
)

from . import shaping
from .collaborators import LatestEpochProvider, PriceService


@dataclass(frozen=True, slots=True)
class DashboardQuery:
    identifiers: tuple[int, ...]
    limit: int
    currency: str


class DashboardService:
    """Read-only facade answering every dashboard data endpoint.

    Each call performs its store reads in sequence and either returns a
    fully shaped payload or raises; no partial payloads are produced.
    """

    def __init__(
        self,
        repository: ValidatorRepository,
        effectiveness_store: EffectivenessStore,
        *,
        prices: PriceService,
        latest_epoch: LatestEpochProvider,
        clock: ChainClock,
    ) -> None:
        self._repository = repository
        self._effectiveness_store = effectiveness_store
        self._prices = prices
        self._latest_epoch = latest_epoch
        self._clock = clock

    def balance_history(self, query: DashboardQuery) -> list[ChartPoint]:
        if not query.identifiers:
            raise MissingIdentifiers()
        records = self._repository.load_balance_history(query.identifiers)
        return shaping.shape_balance_history(
            records,
            clock=self._clock,
            converter=self._prices.converter(query.currency),
        )

    def proposals(self, query: DashboardQuery) -> list[list[int]]:
        records = self._repository.load_proposals(query.identifiers)
        return shaping.shape_proposals(records, self._clock)

    def validators_table(self, query: DashboardQuery) -> ValidatorTable:
        records = self._repository.load_validators(query.identifiers, limit=query.limit)
        return shaping.shape_validator_table(
            records,
            latest_epoch=self._latest_epoch.latest_epoch(),
            clock=self._clock,
            converter=self._prices.converter(query.currency),
        )

    def earnings(self, query: DashboardQuery) -> ValidatorEarnings:
        snapshot = self._repository.load_earnings(query.identifiers)
        return shaping.shape_earnings(snapshot, self._prices.converter(query.currency))

    def effectiveness(self, query: DashboardQuery) -> list[float]:
        latest = self._latest_epoch.latest_epoch()
        active = self._repository.load_active_indices(query.identifiers, epoch=latest)
        if not active:
            raise NoActiveValidators(latest)
        samples = self._effectiveness_store.get_effectiveness(active, max(latest - 1, 0))
        return shaping.shape_effectiveness(samples)

    def proposal_history(self, query: DashboardQuery) -> list[list[int]]:
        records = self._repository.load_proposal_history(query.identifiers)
        return shaping.shape_proposal_history(records, self._clock)

    def graffitiwall(self) -> list[GraffitiwallPixel]:
        return [
            GraffitiwallPixel.model_validate(record)
            for record in self._repository.load_graffitiwall()
        ]


__all__ = ["DashboardQuery", "DashboardService"]
