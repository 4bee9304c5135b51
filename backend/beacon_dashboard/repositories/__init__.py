"""Repository abstractions for the dashboard's backing stores."""

from .effectiveness_store import EffectivenessStore, SqlEffectivenessStore
from .validator_repository import ValidatorRepository

__all__ = [
    "EffectivenessStore",
    "SqlEffectivenessStore",
    "ValidatorRepository",
]
