from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from beacon_dashboard.domain.errors import DataSourceUnavailable
from beacon_dashboard.models import AttestationEffectiveness
from beacon_dashboard.repositories import SqlEffectivenessStore


def test_samples_follow_requested_order(db_session):
    db_session.add_all(
        [
            AttestationEffectiveness(validatorindex=5, epoch=99, attestation_efficiency=0.95),
            AttestationEffectiveness(validatorindex=12, epoch=99, attestation_efficiency=0.5),
            AttestationEffectiveness(validatorindex=5, epoch=98, attestation_efficiency=0.1),
        ]
    )
    db_session.commit()

    samples = SqlEffectivenessStore(db_session).get_effectiveness([12, 5, 7], 99)

    assert [(s.validator_index, s.epoch, s.attestation_efficiency) for s in samples] == [
        (12, 99, 0.5),
        (5, 99, 0.95),
    ]


def test_empty_identifiers_skip_the_store():
    session = MagicMock()

    assert SqlEffectivenessStore(session).get_effectiveness([], 10) == []
    session.execute.assert_not_called()


def test_store_failure_is_surfaced():
    session = MagicMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("deadline exceeded"))

    with pytest.raises(DataSourceUnavailable):
        SqlEffectivenessStore(session).get_effectiveness([1], 10)
