# schemas/report.py

from pydantic import BaseModel
from datetime import date
from decimal import Decimal


class DailySalesResponse(BaseModel):
    day: date
    total: Decimal
    upi_total: Decimal
    count: int


class DashboardStatsResponse(BaseModel):
    today_sales: Decimal
    orders_count: int
    low_stock_count: int
    upi_collection: Decimal
