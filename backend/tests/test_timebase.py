from __future__ import annotations

from datetime import datetime, timezone

from beacon_dashboard.domain.timebase import ChainClock

GENESIS = 1606824023


def test_units_are_linear(clock):
    for index in (0, 1, 17, 123456):
        assert clock.slot_to_time(index + 1) - clock.slot_to_time(index) == 12
        assert clock.epoch_to_time(index + 1) - clock.epoch_to_time(index) == 384
        assert clock.day_to_time(index + 1) - clock.day_to_time(index) == 86400


def test_units_share_genesis(clock):
    assert clock.slot_to_time(0) == clock.epoch_to_time(0) == clock.day_to_time(0) == GENESIS


def test_epoch_and_boundary_slot_agree(clock):
    for epoch in (0, 1, 99, 250000):
        assert clock.epoch_to_time(epoch) == clock.slot_to_time(epoch * clock.slots_per_epoch)


def test_epoch_at(clock):
    assert clock.epoch_at(datetime.fromtimestamp(GENESIS - 10, tz=timezone.utc)) == 0
    assert clock.epoch_at(datetime.fromtimestamp(GENESIS + 383, tz=timezone.utc)) == 0
    assert clock.epoch_at(datetime.fromtimestamp(GENESIS + 384, tz=timezone.utc)) == 1


def test_epoch_at_treats_naive_datetimes_as_utc():
    clock = ChainClock(genesis_timestamp=0, seconds_per_slot=1, slots_per_epoch=10)
    assert clock.epoch_at(datetime(1970, 1, 1, 0, 1, 40)) == 10
