# stockwise/api/pages.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth import MemberSession, SignInPrompt
from ..models import OrderStatus
from ..pages import (
    DashboardPage,
    ForecastingPage,
    InventoryPage,
    NotificationsPage,
    PageController,
    ProductFilter,
    ProfilePage,
    ReadFilter,
    SalesPage,
)
from ..pages.forecasting import TIME_RANGES
from ..store import RecordStore
from .deps import get_member_session, get_store

router = APIRouter(prefix="/api/pages", tags=["pages"])


# ---------- helpers ----------

async def _activate(page: PageController) -> dict:
    result = await page.activate()
    if isinstance(result, SignInPrompt):
        raise HTTPException(status_code=401, detail=result.message)
    return result


# ---------- read views ----------

@router.get("/dashboard")
async def dashboard(
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    return await _activate(DashboardPage(store, member_session))


@router.get("/inventory")
async def inventory(
    search: str = "",
    status: ProductFilter = ProductFilter.ALL,
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    page = InventoryPage(store, member_session)
    page.search_term = search
    page.status_filter = status
    return await _activate(page)


@router.get("/sales")
async def sales(
    search: str = "",
    status: Optional[OrderStatus] = None,
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    page = SalesPage(store, member_session)
    page.search_term = search
    page.status_filter = status
    return await _activate(page)


@router.get("/forecasting")
async def forecasting(
    product: str = "all",
    days: int = Query(30),
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    if days not in TIME_RANGES:
        raise HTTPException(status_code=422, detail=f"days must be one of {list(TIME_RANGES)}")

    page = ForecastingPage(store, member_session)
    page.selected_product = product
    page.time_range = days
    return await _activate(page)


@router.get("/notifications")
async def notifications(
    search: str = "",
    type_: Optional[str] = Query(None, alias="type"),
    read: ReadFilter = ReadFilter.ALL,
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    page = NotificationsPage(store, member_session)
    page.search_term = search
    page.type_filter = type_
    page.read_filter = read
    return await _activate(page)


@router.get("/profile")
async def profile(
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    return await _activate(ProfilePage(store, member_session))


# ---------- notification actions ----------

@router.post("/notifications/read_all")
async def mark_all_notifications_read(
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    page = NotificationsPage(store, member_session)
    await _activate(page)
    updated = await page.mark_all_as_read()
    return {"updated": updated, **page.view()}


@router.post("/notifications/{notification_id}/read")
async def mark_notification_read(
    notification_id: str,
    member_session: MemberSession = Depends(get_member_session),
    store: RecordStore = Depends(get_store),
):
    page = NotificationsPage(store, member_session)
    await _activate(page)
    if not any(n.id == notification_id for n in page.notifications):
        raise HTTPException(status_code=404, detail=f"Notification {notification_id} not found")

    updated = await page.mark_as_read(notification_id)
    return {"updated": updated, **page.view()}
