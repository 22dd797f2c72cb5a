# ordercal/views/calendar_day.py
from __future__ import annotations
from typing import Callable, Optional

import customtkinter as ctk

from ordercal.month_grid import DayCell
from ordercal.services.ui_theme import FONTS, PALETTE, blend
from .day_style import INDICATOR_ORDER, resolve_day_style


class CalendarDay(ctk.CTkFrame):
    """
    One square day cell. Pure paint: everything it shows comes from
    resolve_day_style(cell, is_selected), clicks go to on_press.
    """

    def __init__(self, master, cell: DayCell, is_selected: bool, size: int = 44,
                 on_press: Optional[Callable[[DayCell], None]] = None):
        super().__init__(master, width=size, height=size, fg_color="transparent")
        self.grid_propagate(False)
        self.pack_propagate(False)

        self.cell = cell
        self.style = resolve_day_style(cell, is_selected)
        st = self.style

        bg = PALETTE["background"]
        fill = PALETTE["primary"] if st.filled else bg
        label_fg = blend(PALETTE[st.label_role], fill, st.opacity)
        border = PALETTE["primary"] if st.border else fill

        self.button = ctk.CTkButton(
            self,
            text=cell.day_label if st.show_label else "",
            width=size - 2,
            height=size - 2,
            corner_radius=4,
            border_width=st.border_width,
            border_color=border,
            fg_color=fill,
            hover_color=fill if not st.enabled else blend(PALETTE["text"], fill, 0.08),
            text_color=label_fg,
            text_color_disabled=label_fg,
            font=FONTS["day_b"] if st.bold else FONTS["day"],
            state="normal" if st.enabled else "disabled",
            command=(lambda c=cell: on_press(c)) if on_press else None,
        )
        self.button.place(relx=0.5, rely=0.5, anchor="center")

        # status dot
        if st.indicator:
            dot_color = PALETTE["ordered" if st.indicator == INDICATOR_ORDER else "available"]
            dot = ctk.CTkFrame(self, width=8, height=8, corner_radius=4,
                               fg_color=blend(dot_color, fill, st.opacity))
            if st.indicator == INDICATOR_ORDER:
                dot.place(relx=1.0, rely=0.0, x=-4, y=4, anchor="ne")
            else:
                dot.place(relx=1.0, rely=1.0, x=-4, y=-4, anchor="se")
