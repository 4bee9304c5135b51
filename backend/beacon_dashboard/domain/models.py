"""Read projections produced by the repositories for a single request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ValidatorRecord:
    """Canonical validator fields joined with name, performance and proposal counts.

    Lifecycle epochs are ``None`` when the store marks them as not yet
    reached; the sentinel literal never leaves the repository.
    """

    index: int
    pubkey: bytes
    balance: int
    effective_balance: int
    state: str
    slashed: bool
    activation_eligibility_epoch: int | None
    activation_epoch: int | None
    exit_epoch: int | None
    withdrawable_epoch: int | None
    last_attestation_slot: int | None
    executed_proposals: int
    missed_proposals: int
    performance7d: int
    name: str = ""


@dataclass(slots=True)
class ProposalRecord:
    slot: int
    status: int


@dataclass(slots=True)
class ProposalHistoryRecord:
    """Daily proposal counters; missing counters are already zero."""

    validator_index: int
    day: int
    proposed: int
    missed: int
    orphaned: int


@dataclass(slots=True)
class BalanceHistoryRecord:
    validator_index: int
    day: int
    start_balance: int
    end_balance: int
    end_effective_balance: int
    deposits_amount: int


@dataclass(slots=True)
class EffectivenessSample:
    validator_index: int
    epoch: int
    attestation_efficiency: float


@dataclass(slots=True)
class EarningsSnapshot:
    """Summed performance counters for a validator set, in gwei."""

    performance1d: int = 0
    performance7d: int = 0
    performance31d: int = 0
    performance365d: int = 0
    effective_balance: int = 0

    @property
    def is_empty(self) -> bool:
        return not any(
            (
                self.performance1d,
                self.performance7d,
                self.performance31d,
                self.performance365d,
                self.effective_balance,
            )
        )


@dataclass(slots=True)
class GraffitiwallRecord:
    x: int
    y: int
    color: str
    slot: int
    validator: int
