# ordercal/services/markers.py
from __future__ import annotations
import datetime as _dt
import json
import logging
from typing import FrozenSet, Iterable, List, Optional, Tuple

from ordercal.month_grid import iso_day, parse_iso_day

logger = logging.getLogger(__name__)


def _valid_days(values, source: str) -> List[str]:
    out: List[str] = []
    for v in values:
        if not isinstance(v, str):
            logger.warning("%s: ignoring non-string day %r", source, v)
            continue
        try:
            parse_iso_day(v)
        except ValueError:
            logger.warning("%s: ignoring malformed day %r", source, v)
            continue
        out.append(v)
    return out


class MarkerStore:
    """Offer/order day lists for the calendar. Swap with a real data source later."""

    def __init__(self, offer_days: Iterable[str] = (), order_days: Iterable[str] = ()):
        self.offer_days: List[str] = list(offer_days)
        self.order_days: List[str] = list(order_days)

    def snapshot(self) -> Tuple[FrozenSet[str], FrozenSet[str]]:
        """Immutable (offer_days, order_days) for one render."""
        return frozenset(self.offer_days), frozenset(self.order_days)


def load_markers(path: str) -> MarkerStore:
    """
    Read {"offerDays": [...], "orderDays": [...]} from a JSON file.
    A missing or broken file gives an empty store, bad entries are dropped.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError) as e:
        logger.warning("could not read markers from %s: %s", path, e)
        return MarkerStore()

    if not isinstance(stored, dict):
        logger.warning("markers file %s is not a JSON object", path)
        return MarkerStore()

    offers, orders = [], []
    if isinstance(stored.get("offerDays"), list):
        offers = _valid_days(stored["offerDays"], path)
    if isinstance(stored.get("orderDays"), list):
        orders = _valid_days(stored["orderDays"], path)
    return MarkerStore(offers, orders)


def demo_store(today: Optional[_dt.date] = None, weeks: int = 6) -> MarkerStore:
    """In-memory demo data: offers on upcoming weekdays, a few of them already ordered."""
    today = today or _dt.date.today()
    offers: List[str] = []
    for d in range(weeks * 7):
        day = today + _dt.timedelta(days=d)
        if day.weekday() < 5:
            offers.append(iso_day(day))
    orders = offers[1:8:3]
    return MarkerStore(offers, orders)
