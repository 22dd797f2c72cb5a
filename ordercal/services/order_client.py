# ordercal/services/order_client.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from .config import ORDER_ENDPOINT
from ordercal.month_grid import parse_iso_day

logger = logging.getLogger(__name__)


# ---------- ISO helpers ----------
def iso_now() -> str:
    """UTC instant with milliseconds and a 'Z' suffix, e.g. 2024-02-03T09:15:00.123Z"""
    return iso(datetime.now(timezone.utc))


def iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderError(RuntimeError):
    pass


class OrderRejected(OrderError):
    """Endpoint answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class OrderTransportError(OrderError):
    """Request never got an answer (DNS, refused, TLS, ...)."""


class OrderClient:
    """
    REST client for the order endpoint.

    One POST per order, JSON body {"date": "YYYY-MM-DD", "timestamp": <ISO instant>}.
    No retry and no timeout: a single attempt either lands or raises OrderError.
    """

    def __init__(self, endpoint: str = ORDER_ENDPOINT):
        self.endpoint = endpoint

    @staticmethod
    def build_payload(day_iso: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        parse_iso_day(day_iso)  # ValueError on a bad date, before anything is sent
        return {
            "date": day_iso,
            "timestamp": iso(now) if now is not None else iso_now(),
        }

    def place_order(self, day_iso: str) -> Dict[str, Any]:
        """POST an order for day_iso. Returns the payload that was sent."""
        payload = self.build_payload(day_iso)

        try:
            r = requests.post(self.endpoint, json=payload)
        except requests.RequestException as e:
            raise OrderTransportError(f"Order request failed: {e}") from e

        if not 200 <= r.status_code < 300:
            raise OrderRejected(f"Place order failed ({r.status_code}): {r.text}", r.status_code)

        logger.info("order placed for %s", day_iso)
        return payload
