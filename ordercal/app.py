# ordercal/app.py
from __future__ import annotations

import datetime as _dt
import logging
from typing import Optional

import customtkinter as ctk
from PIL import ImageTk

# theme
from ordercal.services.ui_theme import apply_theme, BACKGROUND
from ordercal.services.config import APPEARANCE_MODE, LOG_LEVEL, MARKERS_PATH, ORDER_ENDPOINT

# backend services
from ordercal.services.order_client import OrderClient
from ordercal.services.markers import MarkerStore, demo_store, load_markers

from ordercal.calendar_controller import CalendarController
from ordercal.icon_gen import create_icon_image
from ordercal.views.month_view import MonthView

logger = logging.getLogger(__name__)


class OrderCalendarApp(ctk.CTk):
    """
    Root window.
    Holds the order client, the marker snapshot and the month view.
    """

    def __init__(self, markers: Optional[MarkerStore] = None, endpoint: str = ORDER_ENDPOINT,
                 start: Optional[_dt.date] = None):
        super().__init__()

        # --- theme / window ---
        apply_theme(self, APPEARANCE_MODE)
        self.title("Order Calendar")
        self.geometry("380x520")
        self.configure(fg_color=BACKGROUND)
        self._icon = ImageTk.PhotoImage(create_icon_image())
        self.iconphoto(True, self._icon)

        # --- backend ---
        if markers is None:
            markers = load_markers(MARKERS_PATH) if MARKERS_PATH else demo_store()
        self.markers = markers
        self.client = OrderClient(endpoint)

        offer_days, order_days = self.markers.snapshot()
        self.controller = CalendarController(
            start or _dt.date.today(), offer_days, order_days, client=self.client,
        )
        logger.info("%d offer days, %d order days, posting to %s",
                    len(offer_days), len(order_days), endpoint)

        # --- view ---
        self.month_view = MonthView(self, self.controller)
        self.month_view.pack(side="top", fill="both", expand=True)


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = OrderCalendarApp()
    app.mainloop()


if __name__ == "__main__":
    main()
