# stockwise/services/filters.py

from typing import Optional

from ..models import Product


def matches_search(term: str, *values: Optional[str]) -> bool:
    """
    Case-insensitive substring match of `term` against any of `values`.
    An empty term matches everything; a missing value never matches.
    """
    if not term:
        return True
    needle = term.lower()
    return any(v is not None and needle in v.lower() for v in values)


def is_low_stock(product: Product) -> bool:
    if product.current_stock is None or product.low_stock_threshold is None:
        return False
    return product.current_stock <= product.low_stock_threshold


def stock_status(product: Product) -> str:
    """
    "unknown" | "low" | "medium" | "high"

    medium covers stock up to twice the threshold.
    """
    stock = product.current_stock
    threshold = product.low_stock_threshold
    if stock is None or threshold is None:
        return "unknown"
    if stock <= threshold:
        return "low"
    if stock <= threshold * 2:
        return "medium"
    return "high"


def confidence_band(level: Optional[float]) -> str:
    level = level or 0.0
    if level >= 90.0:
        return "high"
    elif level >= 70.0:
        return "medium"
    return "low"


def short_label(name: Optional[str], length: int = 10) -> str:
    """Chart axis label: first `length` characters followed by an ellipsis."""
    if not name:
        return "Product"
    return name[:length] + "..."
