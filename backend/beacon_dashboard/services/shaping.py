"""Turn repository projections into the compact payloads dashboard clients consume."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from beacon_dashboard.domain.currency import CurrencyConverter
from beacon_dashboard.domain.models import (
    BalanceHistoryRecord,
    EarningsSnapshot,
    EffectivenessSample,
    ProposalHistoryRecord,
    ProposalRecord,
    ValidatorRecord,
)
from beacon_dashboard.domain.timebase import ChainClock
from beacon_dashboard.schemas import ChartPoint, ValidatorEarnings, ValidatorTable

BALANCE_DECIMALS = 4
EFFECTIVE_BALANCE_DECIMALS = 1
CHART_DECIMALS = 5
POSITIVE_INCOME_COLOR = "#7cb5ec"
NEGATIVE_INCOME_COLOR = "#ff835c"
DAYS_PER_YEAR = 365
DAYS_PER_WEEK = 7


def shape_proposals(records: Iterable[ProposalRecord], clock: ChainClock) -> list[list[int]]:
    return [[clock.slot_to_time(record.slot), record.status] for record in records]


def shape_proposal_history(
    records: Iterable[ProposalHistoryRecord], clock: ChainClock
) -> list[list[int]]:
    return [
        [
            record.validator_index,
            clock.day_to_time(record.day),
            record.proposed,
            record.missed,
            record.orphaned,
        ]
        for record in records
    ]


def shape_effectiveness(samples: Iterable[EffectivenessSample]) -> list[float]:
    return [sample.attestation_efficiency for sample in samples]


def shape_validator_table(
    records: Sequence[ValidatorRecord],
    *,
    latest_epoch: int,
    clock: ChainClock,
    converter: CurrencyConverter,
) -> ValidatorTable:
    rows = [_validator_row(record, clock, converter) for record in records]
    return ValidatorTable(latest_epoch=latest_epoch, data=rows)


def _validator_row(
    record: ValidatorRecord, clock: ChainClock, converter: CurrencyConverter
) -> list[Any]:
    return [
        record.pubkey.hex(),
        str(record.index),
        [
            converter.format_amount(record.balance, BALANCE_DECIMALS),
            converter.format_amount(record.effective_balance, EFFECTIVE_BALANCE_DECIMALS),
        ],
        record.state,
        _epoch_pair(record.activation_epoch, clock),
        _epoch_pair(record.exit_epoch, clock),
        _epoch_pair(record.withdrawable_epoch, clock),
        _slot_pair(record.last_attestation_slot, clock),
        [record.executed_proposals, record.missed_proposals],
        converter.format_income(record.performance7d),
    ]


def _epoch_pair(epoch: int | None, clock: ChainClock) -> list[int] | None:
    if epoch is None:
        return None
    return [epoch, clock.epoch_to_time(epoch)]


def _slot_pair(slot: int | None, clock: ChainClock) -> list[int] | None:
    if slot is None:
        return None
    return [slot, clock.slot_to_time(slot)]


def shape_balance_history(
    records: Iterable[BalanceHistoryRecord],
    *,
    clock: ChainClock,
    converter: CurrencyConverter,
) -> list[ChartPoint]:
    """Sum per-validator rows into one daily income series, oldest day first."""

    income_by_day: dict[int, int] = {}
    for record in records:
        income = record.end_balance - record.start_balance - record.deposits_amount
        income_by_day[record.day] = income_by_day.get(record.day, 0) + income

    points: list[ChartPoint] = []
    for day in sorted(income_by_day):
        income = income_by_day[day]
        points.append(
            ChartPoint(
                x=clock.day_to_time(day) * 1000,
                y=round(converter.to_display(income), CHART_DECIMALS),
                color=POSITIVE_INCOME_COLOR if income >= 0 else NEGATIVE_INCOME_COLOR,
            )
        )
    return points


def shape_earnings(snapshot: EarningsSnapshot, converter: CurrencyConverter) -> ValidatorEarnings:
    if snapshot.is_empty:
        return ValidatorEarnings()

    apr = 0.0
    if snapshot.effective_balance > 0:
        apr = (
            snapshot.performance7d
            / snapshot.effective_balance
            * DAYS_PER_YEAR
            / DAYS_PER_WEEK
            * 100
        )

    return ValidatorEarnings(
        last_day=converter.to_display(snapshot.performance1d),
        last_week=converter.to_display(snapshot.performance7d),
        last_month=converter.to_display(snapshot.performance31d),
        last_year=converter.to_display(snapshot.performance365d),
        apr=apr,
        last_day_formatted=converter.format_income(snapshot.performance1d),
        last_week_formatted=converter.format_income(snapshot.performance7d),
        last_month_formatted=converter.format_income(snapshot.performance31d),
        last_year_formatted=converter.format_income(snapshot.performance365d),
    )


__all__ = [
    "shape_balance_history",
    "shape_earnings",
    "shape_effectiveness",
    "shape_proposal_history",
    "shape_proposals",
    "shape_validator_table",
]
