from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChartPoint(BaseModel):
    x: int
    y: float
    color: str


class ValidatorTable(BaseModel):
    latest_epoch: int = Field(alias="latestEpoch")
    data: list[list[Any]] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ValidatorEarnings(BaseModel):
    last_day: float = Field(0.0, alias="lastDay")
    last_week: float = Field(0.0, alias="lastWeek")
    last_month: float = Field(0.0, alias="lastMonth")
    last_year: float = Field(0.0, alias="lastYear")
    apr: float = 0.0
    last_day_formatted: str = Field("", alias="lastDayFormatted")
    last_week_formatted: str = Field("", alias="lastWeekFormatted")
    last_month_formatted: str = Field("", alias="lastMonthFormatted")
    last_year_formatted: str = Field("", alias="lastYearFormatted")

    model_config = ConfigDict(populate_by_name=True)


class GraffitiwallPixel(BaseModel):
    x: int
    y: int
    color: str
    slot: int
    validator: int

    model_config = {"from_attributes": True}
