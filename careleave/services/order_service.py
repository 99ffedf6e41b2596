"""
Service for loading the versioned subsidy orders
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from ..models.order import SubsidyOrder

logger = logging.getLogger(__name__)

DEFAULT_ORDERS_FILE = Path(__file__).resolve().parent.parent / "data" / "subsidy_orders.json"


class SubsidyOrderError(ValueError):
    """Raised when the subsidy orders cannot be loaded or the requested year is missing"""


def load_subsidy_orders(path: Optional[str] = None) -> Dict[int, SubsidyOrder]:
    """
    Load every subsidy order from a JSON file

    Args:
        path: Orders file (defaults to the packaged orders)

    Returns:
        Orders keyed by year
    """
    orders_path = Path(path) if path else DEFAULT_ORDERS_FILE

    try:
        with open(orders_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SubsidyOrderError(f"Cannot read subsidy orders from {orders_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("orders"), list):
        raise SubsidyOrderError(f"{orders_path} must contain an 'orders' list")

    orders = {}
    for i, raw in enumerate(data["orders"]):
        try:
            order = SubsidyOrder(**raw)
        except (TypeError, ValidationError) as e:
            raise SubsidyOrderError(f"Invalid subsidy order at orders[{i}]: {e}") from e
        if order.year in orders:
            raise SubsidyOrderError(f"Duplicate subsidy order for year {order.year}")
        orders[order.year] = order

    logger.info(f"Loaded {len(orders)} subsidy order(s) from {orders_path}")
    return orders


@lru_cache(maxsize=None)
def get_subsidy_order(year: int, path: Optional[str] = None) -> SubsidyOrder:
    """Get the order governing a given year"""
    orders = load_subsidy_orders(path)
    if year not in orders:
        available = ", ".join(str(y) for y in sorted(orders))
        raise SubsidyOrderError(f"No subsidy order for year {year} (available: {available})")
    return orders[year]
