# ordercal/views/day_style.py
"""
Visual state of one calendar cell, as plain data.

CalendarDay paints whatever this returns; keeping the rules here means they
can be checked without a display.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ordercal.month_grid import DayCell

OPACITY_OTHER_MONTH = 0.3
OPACITY_NO_OFFER = 0.4

INDICATOR_ORDER = "order"    # top-right dot
INDICATOR_OFFER = "offer"    # bottom-right dot


@dataclass(frozen=True)
class DayStyle:
    show_label: bool
    enabled: bool
    opacity: float
    border: Optional[str]         # None | "today" | "selected"
    border_width: int
    filled: bool                  # selected cells take the primary colour
    bold: bool
    label_role: str               # "text" | "primary" | "on_primary"
    indicator: Optional[str]


def resolve_day_style(cell: DayCell, is_selected: bool) -> DayStyle:
    in_month = cell.in_displayed_month

    if not in_month:
        opacity = OPACITY_OTHER_MONTH
    elif not cell.has_offer:
        opacity = OPACITY_NO_OFFER
    else:
        opacity = 1.0

    border, border_width = None, 1
    if cell.is_today and in_month:
        border, border_width = "today", 2
    if is_selected:
        border, border_width = "selected", 2

    label_role, bold = "text", False
    if cell.is_today:
        label_role, bold = "primary", True
    if is_selected:
        label_role, bold = "on_primary", True

    indicator = None
    if in_month:
        if cell.has_order:
            indicator = INDICATOR_ORDER
        elif cell.has_offer:
            indicator = INDICATOR_OFFER

    return DayStyle(
        show_label=in_month,
        enabled=in_month,
        opacity=opacity,
        border=border,
        border_width=border_width,
        filled=is_selected,
        bold=bold,
        label_role=label_role,
        indicator=indicator,
    )
