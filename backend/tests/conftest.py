from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from beacon_dashboard.db import Base
from beacon_dashboard.domain.timebase import ChainClock
from beacon_dashboard.services.collaborators import LatestEpochProvider, PriceService

GENESIS = 1606824023
FAR_FUTURE = 2**63 - 1


@pytest.fixture
def clock() -> ChainClock:
    return ChainClock(genesis_timestamp=GENESIS, seconds_per_slot=12, slots_per_epoch=32)


@pytest.fixture
def prices() -> PriceService:
    return PriceService({"ETH": 1.0, "USD": 2000.0}, "ETH")


@pytest.fixture
def latest_epoch(clock) -> LatestEpochProvider:
    """Provider pinned to epoch 100."""
    moment = datetime.fromtimestamp(clock.epoch_to_time(100) + 5, tz=timezone.utc)
    return LatestEpochProvider(clock, now=lambda: moment)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    from beacon_dashboard import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, future=True)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()

