# ordercal/month_grid.py
"""
Month grid construction for the order calendar. Pure date math, no UI.

A grid always starts on the Monday on/before the 1st of the month and ends
on the Sunday on/after the last day, so it is 4, 5 or 6 full weeks.
"""
from __future__ import annotations

import calendar
import datetime as _dt
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

DAY_FORMAT = "%Y-%m-%d"
WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# 0001-01-01 is a Monday; 9999-12-31 is a Friday, so December 9999 has no closing Sunday
FIRST_MONTH = _dt.date(1, 1, 1)
LAST_MONTH = _dt.date(9999, 11, 1)


@dataclass(frozen=True)
class DayCell:
    """One classified grid cell. Rebuilt on every render."""
    day_label: str
    iso_date: str
    is_today: bool
    has_offer: bool
    has_order: bool
    in_displayed_month: bool


# ───────── ISO helpers ─────────
def iso_day(d: _dt.date) -> str:
    # isoformat pads the year to 4 digits, strftime('%Y') does not below 1000
    return _as_date(d).isoformat()


def parse_iso_day(s: str) -> _dt.date:
    """'2024-02-03' -> date(2024, 2, 3). Raises ValueError on anything else."""
    d = _dt.datetime.strptime(s, DAY_FORMAT).date()
    # strptime also takes '2024-2-3'
    if iso_day(d) != s:
        raise ValueError(f"not a YYYY-MM-DD date: {s!r}")
    return d


def _as_date(value) -> _dt.date:
    # datetime is a subclass of date, strip the time part
    if isinstance(value, _dt.datetime):
        return value.date()
    return value


# ───────── month math ─────────
def month_bounds(reference: _dt.date) -> Tuple[_dt.date, _dt.date]:
    """(first day, last day) of the reference month."""
    reference = _as_date(reference)
    _, n_days = calendar.monthrange(reference.year, reference.month)
    return reference.replace(day=1), reference.replace(day=n_days)


def grid_bounds(reference: _dt.date) -> Tuple[_dt.date, _dt.date]:
    """(Monday on/before month start, Sunday on/after month end)."""
    month_start, month_end = month_bounds(reference)
    try:
        grid_start = month_start - _dt.timedelta(days=month_start.weekday())
        grid_end = month_end + _dt.timedelta(days=6 - month_end.weekday())
    except OverflowError:
        raise ValueError(f"no full-week grid for {month_title(reference)}") from None
    return grid_start, grid_end


def month_in_range(reference: _dt.date) -> bool:
    """True if the month's full-week grid fits between date.min and date.max."""
    reference = _as_date(reference)
    return (FIRST_MONTH.year, FIRST_MONTH.month) <= (reference.year, reference.month) \
        <= (LAST_MONTH.year, LAST_MONTH.month)


def shift_month(reference: _dt.date, months: int) -> _dt.date:
    """Move by whole months, clamping the day (Jan 31 + 1 -> Feb 28/29)."""
    reference = _as_date(reference)
    y, m = divmod(reference.month - 1 + months, 12)
    year, month = reference.year + y, m + 1
    if not _dt.MINYEAR <= year <= _dt.MAXYEAR:
        raise ValueError(f"year {year} is out of range")
    _, n_days = calendar.monthrange(year, month)
    return _dt.date(year, month, min(reference.day, n_days))


# ───────── display text ─────────
def month_title(reference: _dt.date) -> str:
    return _as_date(reference).strftime("%B %Y")


def long_date(iso: str) -> str:
    """'2024-02-03' -> 'February 3, 2024'."""
    d = parse_iso_day(iso)
    return f"{d.strftime('%B')} {d.day}, {d.year}"


# ───────── grid ─────────
def build_month_grid(
    reference: _dt.date,
    offer_days: Iterable[str] = (),
    order_days: Iterable[str] = (),
    today: Optional[_dt.date] = None,
) -> List[List[DayCell]]:
    """
    Return the weeks (lists of 7 DayCell) covering the reference month.

    `today` marks the is_today cell; when omitted the host clock is read
    once for this build.
    """
    reference = _as_date(reference)
    today = _as_date(today) if today is not None else _dt.date.today()
    offers = frozenset(offer_days)
    orders = frozenset(order_days)

    grid_start, grid_end = grid_bounds(reference)
    n_cells = (grid_end - grid_start).days + 1

    days: List[DayCell] = []
    for i in range(n_cells):
        d = grid_start + _dt.timedelta(days=i)
        iso = iso_day(d)
        days.append(DayCell(
            day_label=f"{d.day:02d}",
            iso_date=iso,
            is_today=(d == today),
            has_offer=iso in offers,
            has_order=iso in orders,
            in_displayed_month=(d.year, d.month) == (reference.year, reference.month),
        ))

    return [days[i:i + 7] for i in range(0, len(days), 7)]
