# =========================================================
# REPORTS ROUTER
#
# - Daily sales: sum of "sale" ledger entries for one day,
#   the UPI share of it and the number of entries
# - Dashboard: today's figures plus the low stock count
# =========================================================

from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shopkeeper.database import get_db
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.schemas.report import DailySalesResponse, DashboardStatsResponse
from shopkeeper.services.reports import daily_sales, dashboard_stats

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/daily-sales", response_model=DailySalesResponse)
def daily_sales_report(
    day: date | None = Query(None),
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    if day is None:
        day = datetime.now(timezone.utc).date()

    return daily_sales(db, current_shop.id, day)


@router.get("/dashboard", response_model=DashboardStatsResponse)
def dashboard(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    return dashboard_stats(db, current_shop.id)
