from __future__ import annotations

from enum import Enum

from sqlalchemy import BigInteger, Boolean, Float, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class BlockStatus(str, Enum):
    UNKNOWN = "0"
    PROPOSED = "1"
    MISSED = "2"
    ORPHANED = "3"


class Validator(Base):
    __tablename__ = "validators"

    validatorindex: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    pubkey: Mapped[bytes] = mapped_column(LargeBinary, nullable=False, index=True)
    withdrawableepoch: Mapped[int] = mapped_column(BigInteger, nullable=False)
    withdrawalcredentials: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    effectivebalance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    slashed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    activationeligibilityepoch: Mapped[int] = mapped_column(BigInteger, nullable=False)
    activationepoch: Mapped[int] = mapped_column(BigInteger, nullable=False)
    exitepoch: Mapped[int] = mapped_column(BigInteger, nullable=False)
    lastattestationslot: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="")


class Block(Base):
    __tablename__ = "blocks"

    slot: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    blockroot: Mapped[bytes] = mapped_column(LargeBinary, primary_key=True, default=b"\x00")
    epoch: Mapped[int] = mapped_column(BigInteger, nullable=False)
    proposer: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=BlockStatus.UNKNOWN.value)
    graffiti: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)


class ValidatorName(Base):
    __tablename__ = "validator_names"

    publickey: Mapped[bytes] = mapped_column(LargeBinary, primary_key=True)
    name: Mapped[str] = mapped_column(String(40), nullable=False, default="")


class ValidatorPerformance(Base):
    __tablename__ = "validator_performance"

    validatorindex: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    performance1d: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    performance7d: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    performance31d: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    performance365d: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    rank7d: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class ValidatorStats(Base):
    __tablename__ = "validator_stats"

    validatorindex: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    day: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    start_balance: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    end_balance: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    start_effective_balance: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    end_effective_balance: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    deposits_amount: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    proposed_blocks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    missed_blocks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    orphaned_blocks: Mapped[int | None] = mapped_column(Integer, nullable=True)


class GraffitiwallPixel(Base):
    __tablename__ = "graffitiwall"

    x: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    y: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    color: Mapped[str] = mapped_column(String(6), nullable=False)
    slot: Mapped[int] = mapped_column(BigInteger, nullable=False)
    validator: Mapped[int] = mapped_column(BigInteger, nullable=False)


class AttestationEffectiveness(Base):
    """Row-keyed effectiveness samples, one per (validator, epoch)."""

    __tablename__ = "attestation_effectiveness"

    validatorindex: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    epoch: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    attestation_efficiency: Mapped[float] = mapped_column(Float, nullable=False)
