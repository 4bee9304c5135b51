from __future__ import annotations

from typing import Annotated

from fastapi import Cookie, Depends, FastAPI, Header, Query, Request
from fastapi.responses import JSONResponse
from loguru import logger

from . import schemas
from .core.config import settings
from .db import get_db
from .domain.errors import DataSourceUnavailable, InvalidQuery
from .domain.identifiers import parse_identifiers
from .domain.timebase import ChainClock
from .repositories import SqlEffectivenessStore, ValidatorRepository
from .services import (
    DashboardQuery,
    DashboardService,
    LatestEpochProvider,
    PriceService,
    TierService,
)

app = FastAPI(title="Beacon Dashboard API", version="0.1.0", debug=settings.debug)

chain_clock = ChainClock.from_settings(settings)
price_service = PriceService(settings.currency_rates, settings.default_currency)
tier_service = TierService(settings.tier_validator_limits, settings.default_validator_limit)
latest_epoch_provider = LatestEpochProvider(chain_clock)


@app.exception_handler(InvalidQuery)
def _invalid_query_handler(request: Request, exc: InvalidQuery) -> JSONResponse:
    logger.warning("Rejected dashboard query on {}: {}", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "Invalid query"})


@app.exception_handler(DataSourceUnavailable)
def _data_source_handler(request: Request, exc: DataSourceUnavailable) -> JSONResponse:
    logger.opt(exception=exc).error(
        "Dashboard data source failure on {}: {}", request.url.path, exc
    )
    return JSONResponse(status_code=503, content={"detail": "Internal server error"})


@app.get("/healthz", tags=["system"])
def healthcheck() -> dict[str, str]:
    """Basic readiness probe consumed by infrastructure monitors."""

    return {"status": "ok"}


def _validator_limit(
    tier: Annotated[str | None, Header(alias="X-Premium-Tier")] = None,
) -> int:
    """Resolve the caller's maximum validator count from their tier."""

    return tier_service.max_identifiers(tier)


def _currency(
    currency: Annotated[str | None, Query(description="Display currency code", example="USD")] = None,
    currency_cookie: Annotated[str | None, Cookie(alias="currency")] = None,
) -> str:
    return price_service.resolve_currency(currency or currency_cookie)


def _dashboard_query(
    *,
    validators: Annotated[
        str,
        Query(description="Comma separated validator indices", example="5,12"),
    ] = "",
    limit: int = Depends(_validator_limit),
    currency: str = Depends(_currency),
) -> DashboardQuery:
    """Parse and bound the validator list shared by every dashboard endpoint."""

    return DashboardQuery(
        identifiers=parse_identifiers(validators, limit),
        limit=limit,
        currency=currency,
    )


def _dashboard_service(db=Depends(get_db)) -> DashboardService:
    """Provide the dashboard service wired with a SQLAlchemy session."""

    return DashboardService(
        ValidatorRepository(db),
        SqlEffectivenessStore(db),
        prices=price_service,
        latest_epoch=latest_epoch_provider,
        clock=chain_clock,
    )


@app.get("/dashboard/data/balance", response_model=list[schemas.ChartPoint], tags=["dashboard"])
def dashboard_balance(
    *,
    query: DashboardQuery = Depends(_dashboard_query),
    service: DashboardService = Depends(_dashboard_service),
):
    """Daily income of the selected validators in the display currency."""

    return service.balance_history(query)


@app.get("/dashboard/data/proposals", response_model=list[list[int]], tags=["dashboard"])
def dashboard_proposals(
    *,
    query: DashboardQuery = Depends(_dashboard_query),
    service: DashboardService = Depends(_dashboard_service),
):
    """Block proposals as ``[timestamp, status]`` pairs ordered by slot."""

    return service.proposals(query)


@app.get("/dashboard/data/validators", response_model=schemas.ValidatorTable, tags=["dashboard"])
def dashboard_validators(
    *,
    query: DashboardQuery = Depends(_dashboard_query),
    service: DashboardService = Depends(_dashboard_service),
):
    """Validator table rows together with the latest epoch."""

    return service.validators_table(query)


@app.get("/dashboard/data/earnings", response_model=schemas.ValidatorEarnings, tags=["dashboard"])
def dashboard_earnings(
    *,
    query: DashboardQuery = Depends(_dashboard_query),
    service: DashboardService = Depends(_dashboard_service),
):
    return service.earnings(query)


@app.get("/dashboard/data/effectiveness", response_model=list[float], tags=["dashboard"])
def dashboard_effectiveness(
    *,
    query: DashboardQuery = Depends(_dashboard_query),
    service: DashboardService = Depends(_dashboard_service),
):
    """Attestation efficiency of the active validators for the last completed epoch."""

    return service.effectiveness(query)


@app.get("/dashboard/data/proposalshistory", response_model=list[list[int]], tags=["dashboard"])
def dashboard_proposals_history(
    *,
    query: DashboardQuery = Depends(_dashboard_query),
    service: DashboardService = Depends(_dashboard_service),
):
    """Daily proposed/missed/orphaned counts, newest day first."""

    return service.proposal_history(query)


@app.get("/graffitiwall", response_model=list[schemas.GraffitiwallPixel], tags=["graffitiwall"])
def graffitiwall(service: DashboardService = Depends(_dashboard_service)):
    return service.graffitiwall()
