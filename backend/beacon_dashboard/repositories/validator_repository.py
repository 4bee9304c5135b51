"""Relational reads backing the validator dashboard."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from beacon_dashboard.domain.models import (
    BalanceHistoryRecord,
    EarningsSnapshot,
    GraffitiwallRecord,
    ProposalHistoryRecord,
    ProposalRecord,
    ValidatorRecord,
)
from beacon_dashboard.models import (
    Block,
    BlockStatus,
    GraffitiwallPixel,
    Validator,
    ValidatorName,
    ValidatorPerformance,
    ValidatorStats,
)

from .base import optional_epoch, storable_identifiers, translate_errors

SOURCE = "relational store"


class ValidatorRepository:
    """Encapsulate every SELECT the dashboard issues against the explorer database."""

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Validator snapshots

    def load_validators(self, identifiers: Sequence[int], *, limit: int) -> list[ValidatorRecord]:
        indices = storable_identifiers(identifiers)
        if not indices:
            return []

        executed = self._proposal_count(BlockStatus.PROPOSED)
        missed = self._proposal_count(BlockStatus.MISSED)
        statement = (
            select(
                Validator,
                executed.label("executed_proposals"),
                missed.label("missed_proposals"),
                func.coalesce(ValidatorPerformance.performance7d, 0).label("performance7d"),
                func.coalesce(ValidatorName.name, "").label("name"),
            )
            .outerjoin(ValidatorName, Validator.pubkey == ValidatorName.publickey)
            .outerjoin(
                ValidatorPerformance,
                Validator.validatorindex == ValidatorPerformance.validatorindex,
            )
            .where(Validator.validatorindex.in_(indices))
            .order_by(Validator.validatorindex)
            .limit(limit)
        )

        with translate_errors(SOURCE, "loading validators"):
            rows = self._session.execute(statement).all()

        return [
            self._to_validator_record(validator, executed_count, missed_count, performance, name)
            for validator, executed_count, missed_count, performance, name in rows
        ]

    def load_active_indices(self, identifiers: Sequence[int], *, epoch: int) -> list[int]:
        indices = storable_identifiers(identifiers)
        if not indices:
            return []

        statement = (
            select(Validator.validatorindex)
            .where(
                Validator.validatorindex.in_(indices),
                Validator.activationepoch < epoch,
                Validator.exitepoch > epoch,
            )
            .order_by(Validator.validatorindex)
        )
        with translate_errors(SOURCE, "resolving active validators"):
            return [int(value) for value in self._session.execute(statement).scalars()]

    # ------------------------------------------------------------------
    # Proposals

    def load_proposals(self, identifiers: Sequence[int]) -> list[ProposalRecord]:
        indices = storable_identifiers(identifiers)
        if not indices:
            return []

        statement = (
            select(Block.slot, Block.status)
            .where(Block.proposer.in_(indices))
            .order_by(Block.slot)
        )
        with translate_errors(SOURCE, "loading block proposals"):
            rows = self._session.execute(statement).all()
        return [ProposalRecord(slot=int(slot), status=_status_code(status)) for slot, status in rows]

    def load_proposal_history(self, identifiers: Sequence[int]) -> list[ProposalHistoryRecord]:
        indices = storable_identifiers(identifiers)
        if not indices:
            return []

        statement = (
            select(
                ValidatorStats.validatorindex,
                ValidatorStats.day,
                ValidatorStats.proposed_blocks,
                ValidatorStats.missed_blocks,
                ValidatorStats.orphaned_blocks,
            )
            .where(
                ValidatorStats.validatorindex.in_(indices),
                or_(
                    ValidatorStats.proposed_blocks.is_not(None),
                    ValidatorStats.missed_blocks.is_not(None),
                    ValidatorStats.orphaned_blocks.is_not(None),
                ),
            )
            .order_by(ValidatorStats.day.desc(), ValidatorStats.validatorindex)
        )
        with translate_errors(SOURCE, "loading proposal history"):
            rows = self._session.execute(statement).all()

        return [
            ProposalHistoryRecord(
                validator_index=int(index),
                day=int(day),
                proposed=proposed or 0,
                missed=missed_count or 0,
                orphaned=orphaned or 0,
            )
            for index, day, proposed, missed_count, orphaned in rows
        ]

    # ------------------------------------------------------------------
    # Balances and earnings

    def load_balance_history(self, identifiers: Sequence[int]) -> list[BalanceHistoryRecord]:
        indices = storable_identifiers(identifiers)
        if not indices:
            return []

        statement = (
            select(
                ValidatorStats.validatorindex,
                ValidatorStats.day,
                ValidatorStats.start_balance,
                ValidatorStats.end_balance,
                ValidatorStats.end_effective_balance,
                ValidatorStats.deposits_amount,
            )
            .where(ValidatorStats.validatorindex.in_(indices))
            .order_by(ValidatorStats.day, ValidatorStats.validatorindex)
        )
        with translate_errors(SOURCE, "loading balance history"):
            rows = self._session.execute(statement).all()

        return [
            BalanceHistoryRecord(
                validator_index=int(index),
                day=int(day),
                start_balance=start or 0,
                end_balance=end or 0,
                end_effective_balance=effective or 0,
                deposits_amount=deposits or 0,
            )
            for index, day, start, end, effective, deposits in rows
        ]

    def load_earnings(self, identifiers: Sequence[int]) -> EarningsSnapshot:
        indices = storable_identifiers(identifiers)
        if not indices:
            return EarningsSnapshot()

        statement = (
            select(
                func.coalesce(func.sum(ValidatorPerformance.performance1d), 0),
                func.coalesce(func.sum(ValidatorPerformance.performance7d), 0),
                func.coalesce(func.sum(ValidatorPerformance.performance31d), 0),
                func.coalesce(func.sum(ValidatorPerformance.performance365d), 0),
                func.coalesce(func.sum(Validator.effectivebalance), 0),
            )
            .select_from(Validator)
            .outerjoin(
                ValidatorPerformance,
                Validator.validatorindex == ValidatorPerformance.validatorindex,
            )
            .where(Validator.validatorindex.in_(indices))
        )
        with translate_errors(SOURCE, "loading validator earnings"):
            day, week, month, year, effective = self._session.execute(statement).one()

        return EarningsSnapshot(
            performance1d=int(day),
            performance7d=int(week),
            performance31d=int(month),
            performance365d=int(year),
            effective_balance=int(effective),
        )

    # ------------------------------------------------------------------
    # Graffiti wall

    def load_graffitiwall(self) -> list[GraffitiwallRecord]:
        statement = select(GraffitiwallPixel).order_by(GraffitiwallPixel.y, GraffitiwallPixel.x)
        with translate_errors(SOURCE, "loading graffitiwall"):
            pixels = self._session.execute(statement).scalars().all()
        return [
            GraffitiwallRecord(
                x=pixel.x,
                y=pixel.y,
                color=pixel.color,
                slot=pixel.slot,
                validator=pixel.validator,
            )
            for pixel in pixels
        ]

    # ------------------------------------------------------------------
    # Helpers

    @staticmethod
    def _proposal_count(status: BlockStatus):
        return (
            select(func.count())
            .select_from(Block)
            .where(Block.proposer == Validator.validatorindex, Block.status == status.value)
            .correlate(Validator)
            .scalar_subquery()
        )

    @staticmethod
    def _to_validator_record(
        validator: Validator,
        executed_count: int,
        missed_count: int,
        performance: int,
        name: str,
    ) -> ValidatorRecord:
        return ValidatorRecord(
            index=int(validator.validatorindex),
            pubkey=bytes(validator.pubkey),
            balance=int(validator.balance),
            effective_balance=int(validator.effectivebalance),
            state=validator.status,
            slashed=bool(validator.slashed),
            activation_eligibility_epoch=optional_epoch(validator.activationeligibilityepoch),
            activation_epoch=optional_epoch(validator.activationepoch),
            exit_epoch=optional_epoch(validator.exitepoch),
            withdrawable_epoch=optional_epoch(validator.withdrawableepoch),
            last_attestation_slot=(
                int(validator.lastattestationslot)
                if validator.lastattestationslot is not None
                else None
            ),
            executed_proposals=int(executed_count or 0),
            missed_proposals=int(missed_count or 0),
            performance7d=int(performance or 0),
            name=name or "",
        )


def _status_code(status: str | None) -> int:
    try:
        return int(status) if status is not None else 0
    except ValueError:
        return 0


__all__ = ["ValidatorRepository"]
