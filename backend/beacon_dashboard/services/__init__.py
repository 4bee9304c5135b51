"""Service layer composing repositories, collaborators and response shaping."""

from .collaborators import LatestEpochProvider, PriceService, TierService
from .dashboard_service import DashboardQuery, DashboardService

__all__ = [
    "DashboardQuery",
    "DashboardService",
    "LatestEpochProvider",
    "PriceService",
    "TierService",
]
