"""Conversion between chain time units and Unix timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class ChainClock:
    """Linear slot/epoch/day mapping anchored at a single genesis timestamp."""

    genesis_timestamp: int
    seconds_per_slot: int
    slots_per_epoch: int
    seconds_per_day: int = 86400

    @classmethod
    def from_settings(cls, settings) -> "ChainClock":
        return cls(
            genesis_timestamp=settings.genesis_timestamp,
            seconds_per_slot=settings.seconds_per_slot,
            slots_per_epoch=settings.slots_per_epoch,
            seconds_per_day=settings.seconds_per_day,
        )

    @property
    def seconds_per_epoch(self) -> int:
        return self.seconds_per_slot * self.slots_per_epoch

    def slot_to_time(self, slot: int) -> int:
        return self.genesis_timestamp + slot * self.seconds_per_slot

    def epoch_to_time(self, epoch: int) -> int:
        return self.genesis_timestamp + epoch * self.seconds_per_epoch

    def day_to_time(self, day: int) -> int:
        return self.genesis_timestamp + day * self.seconds_per_day

    def epoch_at(self, moment: datetime) -> int:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        elapsed = int(moment.timestamp()) - self.genesis_timestamp
        if elapsed < 0:
            return 0
        return elapsed // self.seconds_per_epoch


__all__ = ["ChainClock"]
