"""Shared helpers for read-only repositories."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from beacon_dashboard.domain.errors import DataSourceUnavailable

# Largest value a signed BIGINT column can hold; larger indices cannot exist in the store.
MAX_STORED_INTEGER = 2**63 - 1

# Markers for "not reached yet" epochs: the protocol uses the unsigned
# maximum, BIGINT columns can only hold the signed one.
FAR_FUTURE_EPOCHS = frozenset({2**64 - 1, 2**63 - 1})


def storable_identifiers(identifiers: Iterable[int]) -> list[int]:
    return [value for value in identifiers if value <= MAX_STORED_INTEGER]


def optional_epoch(value: int | None) -> int | None:
    if value is None or value in FAR_FUTURE_EPOCHS:
        return None
    return int(value)


@contextmanager
def translate_errors(source: str, operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataSourceUnavailable(source, operation) from exc


__all__ = [
    "FAR_FUTURE_EPOCHS",
    "MAX_STORED_INTEGER",
    "optional_epoch",
    "storable_identifiers",
    "translate_errors",
]
