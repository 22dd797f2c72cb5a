# ordercal/views/month_view.py
from __future__ import annotations
import logging
import threading
from typing import Optional

import customtkinter as ctk
from tkinter import messagebox

from ordercal.calendar_controller import MSG_REJECTED, CalendarController, OrderOutcome
from ordercal.month_grid import WEEKDAY_NAMES, DayCell, long_date
from ordercal.services.ui_theme import (
    BACKGROUND, DIVIDER, FONTS, TEXT, nav_button, primary_button,
)
from .calendar_day import CalendarDay

logger = logging.getLogger(__name__)


class MonthView(ctk.CTkFrame):
    """
    Month calendar with ordering.

    Top:
        - ‹ month name + year ›
    Middle:
        - weekday initials, then one row per week of CalendarDay cells
    Bottom (only while a day is selected):
        - "Selected: February 3, 2024" + Order button
    """

    def __init__(self, parent, controller: CalendarController, cell_size: int = 44):
        super().__init__(parent, fg_color=BACKGROUND)

        self.c = controller
        self.cell_size = cell_size
        self._busy = False

        # UI refs we update
        self.month_label: Optional[ctk.CTkLabel] = None
        self.days_frame: Optional[ctk.CTkFrame] = None
        self.details_frame: Optional[ctk.CTkFrame] = None
        self.selected_label: Optional[ctk.CTkLabel] = None
        self.order_btn: Optional[ctk.CTkButton] = None

        self._build_ui()
        self.refresh()

    # -------------------------------------------------
    # UI STRUCTURE
    # -------------------------------------------------
    def _build_ui(self):
        # Month/Year header with navigation
        header = ctk.CTkFrame(self, fg_color=BACKGROUND)
        header.pack(fill="x", padx=16, pady=12)
        header.grid_columnconfigure(1, weight=1)

        nav_button(header, "‹", command=self._go_prev_month).grid(row=0, column=0)
        self.month_label = ctk.CTkLabel(header, text="", font=FONTS["month"], text_color=TEXT)
        self.month_label.grid(row=0, column=1, sticky="ew")
        nav_button(header, "›", command=self._go_next_month).grid(row=0, column=2)

        ctk.CTkFrame(self, height=1, fg_color=DIVIDER).pack(fill="x")

        body = ctk.CTkFrame(self, fg_color=BACKGROUND)
        body.pack(fill="both", expand=True, padx=2, pady=2)

        # Weekday header row
        weekdays = ctk.CTkFrame(body, fg_color=BACKGROUND)
        weekdays.pack(fill="x")
        for i, name in enumerate(WEEKDAY_NAMES):
            weekdays.grid_columnconfigure(i, weight=1, uniform="day")
            ctk.CTkLabel(
                weekdays,
                text=name[0].upper(),
                font=FONTS["weekday"],
                text_color=TEXT,
                anchor="center",
            ).grid(row=0, column=i, sticky="ew", padx=1, pady=2)

        # Calendar grid
        self.days_frame = ctk.CTkFrame(body, fg_color=BACKGROUND)
        self.days_frame.pack(fill="x")
        for i in range(7):
            self.days_frame.grid_columnconfigure(i, weight=1, uniform="day")

        # Selected day details (packed only while a day is selected)
        self.details_frame = ctk.CTkFrame(body, fg_color=BACKGROUND)
        ctk.CTkFrame(self.details_frame, height=1, fg_color=DIVIDER).pack(fill="x")
        self.selected_label = ctk.CTkLabel(
            self.details_frame, text="", font=FONTS["detail"], text_color=TEXT,
        )
        self.selected_label.pack(pady=(16, 12))
        self.order_btn = primary_button(self.details_frame, "Order", command=self._start_order_thread)
        self.order_btn.pack(pady=(0, 16))

    # -------------------------------------------------
    # NAVIGATION / SELECTION
    # -------------------------------------------------
    def _go_prev_month(self):
        self.c.go_to_previous_month()
        self.refresh()

    def _go_next_month(self):
        self.c.go_to_next_month()
        self.refresh()

    def _on_click_day(self, cell: DayCell):
        if self.c.select_day(cell):
            self.refresh()

    # -------------------------------------------------
    # RENDER PIPELINE
    # -------------------------------------------------
    def refresh(self):
        """Re-render header, grid and the selection row from controller state."""
        self.month_label.configure(text=self.c.title())
        self._render_month_days()
        self._render_selection()

    def _render_month_days(self):
        # wipe old cells
        for w in self.days_frame.winfo_children():
            w.destroy()

        for r, week in enumerate(self.c.weeks()):
            for col, cell in enumerate(week):
                CalendarDay(
                    self.days_frame,
                    cell,
                    self.c.is_selected(cell),
                    size=self.cell_size,
                    on_press=self._on_click_day,
                ).grid(row=r, column=col, padx=1, pady=1)

    def _render_selection(self):
        if not self.c.selected_day:
            self.details_frame.pack_forget()
            return

        self.selected_label.configure(text=f"Selected: {long_date(self.c.selected_day)}")
        self.order_btn.configure(state="disabled" if self._busy else "normal")
        self.details_frame.pack(fill="x")

    # -------------------------------------------------
    # ORDER FLOW
    # -------------------------------------------------
    def _start_order_thread(self):
        """Run the POST on a background thread so the UI doesn't freeze."""
        day = self.c.selected_day
        if self._busy or not day:
            return

        self._busy = True
        self.order_btn.configure(state="disabled")

        t = threading.Thread(target=self._order_worker, args=(day,), daemon=True)
        t.start()

    def _order_worker(self, day: str):
        try:
            outcome = self.c.request_order(day)
        except Exception:
            logger.exception("order worker failed for %s", day)
            outcome = OrderOutcome(day, False, "Error", MSG_REJECTED)
        # back onto the Tk main thread
        self.after(0, lambda o=outcome: self._on_order_done(o))

    def _on_order_done(self, outcome: OrderOutcome):
        self._busy = False
        self.c.apply_outcome(outcome)
        self.refresh()

        if outcome.ok:
            messagebox.showinfo(outcome.title, outcome.message)
        else:
            messagebox.showerror(outcome.title, outcome.message)
