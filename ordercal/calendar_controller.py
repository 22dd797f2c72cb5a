# ordercal/calendar_controller.py
from __future__ import annotations
import datetime as _dt
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ordercal.month_grid import (
    DayCell, build_month_grid, long_date, month_in_range, month_title, shift_month,
)
from ordercal.services.order_client import OrderClient, OrderRejected, OrderError

logger = logging.getLogger(__name__)

MSG_REJECTED = "Failed to place order. Please try again."
MSG_NETWORK = "Network error. Please check your connection."


@dataclass(frozen=True)
class OrderOutcome:
    day: str
    ok: bool
    title: str
    message: str


class CalendarController:
    """
    State behind the month view: which month is shown and which day is picked.

    The widget calls into this and re-renders from weeks()/selected_day;
    nothing here touches Tk, so it runs fine in tests.
    """

    def __init__(
        self,
        reference: _dt.date,
        offer_days: Iterable[str] = (),
        order_days: Iterable[str] = (),
        client: Optional[OrderClient] = None,
        clock: Callable[[], _dt.date] = _dt.date.today,
    ):
        if isinstance(reference, _dt.datetime):
            reference = reference.date()
        if not month_in_range(reference):
            reference = shift_month(reference, -1)  # only December 9999 falls outside
        self.reference_date: _dt.date = reference
        self.selected_day: Optional[str] = None
        self.offer_days = frozenset(offer_days)
        self.order_days = frozenset(order_days)
        self.client = client or OrderClient()
        self._clock = clock

    # ---------- rendering inputs ----------
    def set_markers(self, offer_days: Iterable[str], order_days: Iterable[str]) -> None:
        self.offer_days = frozenset(offer_days)
        self.order_days = frozenset(order_days)

    def weeks(self) -> List[List[DayCell]]:
        return build_month_grid(
            self.reference_date, self.offer_days, self.order_days, today=self._clock()
        )

    def title(self) -> str:
        return month_title(self.reference_date)

    def is_selected(self, cell: DayCell) -> bool:
        return self.selected_day is not None and cell.iso_date == self.selected_day

    # ---------- navigation ----------
    def go_to_previous_month(self) -> bool:
        return self._move(-1)

    def go_to_next_month(self) -> bool:
        return self._move(+1)

    def _move(self, months: int) -> bool:
        # past date.min / LAST_MONTH the step is refused and state stays as is
        try:
            target = shift_month(self.reference_date, months)
        except ValueError:
            return False
        if not month_in_range(target):
            return False
        self.reference_date = target
        self.selected_day = None
        return True

    def select_day(self, cell: DayCell) -> bool:
        """Toggle selection on an offer day of this month. Returns True if it changed."""
        if not cell.has_offer:
            return False
        if not cell.in_displayed_month:
            return False
        self.selected_day = None if cell.iso_date == self.selected_day else cell.iso_date
        return True

    # ---------- ordering ----------
    def request_order(self, day: str) -> OrderOutcome:
        """
        One POST for `day`. Does not touch selection, so it can run off the
        UI thread; hand the result to apply_outcome() afterwards.
        """
        try:
            self.client.place_order(day)
        except OrderRejected as e:
            logger.warning("order for %s rejected: %s", day, e)
            return OrderOutcome(day, False, "Error", MSG_REJECTED)
        except OrderError as e:
            logger.warning("order for %s failed: %s", day, e)
            return OrderOutcome(day, False, "Error", MSG_NETWORK)
        return OrderOutcome(day, True, "Success", f"Order placed for {long_date(day)}")

    def apply_outcome(self, outcome: OrderOutcome) -> None:
        # failures keep the selection so the user can press Order again
        if outcome.ok:
            self.selected_day = None

    def submit_order(self) -> Optional[OrderOutcome]:
        if not self.selected_day:
            return None
        outcome = self.request_order(self.selected_day)
        self.apply_outcome(outcome)
        return outcome
