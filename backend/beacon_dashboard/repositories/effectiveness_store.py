"""Access to per-epoch attestation effectiveness samples."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from beacon_dashboard.domain.models import EffectivenessSample
from beacon_dashboard.models import AttestationEffectiveness

from .base import storable_identifiers, translate_errors

SOURCE = "effectiveness store"


class EffectivenessStore(Protocol):
    def get_effectiveness(
        self, identifiers: Sequence[int], epoch: int
    ) -> list[EffectivenessSample]:
        """Return one sample per identifier that has data for ``epoch``."""


class SqlEffectivenessStore:
    """Row-key lookups of ``(validatorindex, epoch)`` in the effectiveness table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_effectiveness(
        self, identifiers: Sequence[int], epoch: int
    ) -> list[EffectivenessSample]:
        indices = storable_identifiers(identifiers)
        if not indices:
            return []

        statement = select(
            AttestationEffectiveness.validatorindex,
            AttestationEffectiveness.epoch,
            AttestationEffectiveness.attestation_efficiency,
        ).where(
            AttestationEffectiveness.validatorindex.in_(indices),
            AttestationEffectiveness.epoch == epoch,
        )
        with translate_errors(SOURCE, "loading attestation effectiveness"):
            rows = self._session.execute(statement).all()

        by_index = {
            int(index): EffectivenessSample(
                validator_index=int(index),
                epoch=int(row_epoch),
                attestation_efficiency=float(efficiency),
            )
            for index, row_epoch, efficiency in rows
        }
        return [by_index[index] for index in indices if index in by_index]


__all__ = ["EffectivenessStore", "SqlEffectivenessStore"]
