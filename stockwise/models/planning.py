from typing import Optional
from datetime import datetime, date
from sqlmodel import SQLModel, Field

from .types import UTCDateTime


class DemandForecastBase(SQLModel):
    # Soft reference: the product may have been deleted since
    product_id: str
    forecast_generated_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    period_start: Optional[date] = None
    period_end: Optional[date] = None
    predicted_demand_quantity: Optional[float] = None
    confidence_level: Optional[float] = None  # 0-100, not enforced


class DemandForecast(DemandForecastBase, table=True):
    id: str = Field(primary_key=True)
    created_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    updated_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
