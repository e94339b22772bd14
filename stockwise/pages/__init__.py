from .base import PageController
from .dashboard import DashboardPage
from .inventory import InventoryPage, ProductFilter, ProductForm
from .sales import SalesPage, SalesOrderForm
from .forecasting import ForecastingPage
from .notifications import NotificationsPage, ReadFilter
from .profile import ProfilePage

PAGES = {
    page.name: page
    for page in (
        DashboardPage,
        InventoryPage,
        SalesPage,
        ForecastingPage,
        NotificationsPage,
        ProfilePage,
    )
}

__all__ = [
    "PageController",
    "DashboardPage",
    "InventoryPage",
    "ProductFilter",
    "ProductForm",
    "SalesPage",
    "SalesOrderForm",
    "ForecastingPage",
    "NotificationsPage",
    "ReadFilter",
    "ProfilePage",
    "PAGES",
]
