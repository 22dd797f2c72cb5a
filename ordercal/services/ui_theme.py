# ordercal/services/ui_theme.py
"""
Centralized theme for the order calendar.

This file defines:
 - color palette tokens as (light, dark) pairs, the form customtkinter takes
 - apply_theme() to set appearance mode + root colors
 - PALETTE, the role name -> colour lookup the day cells paint from
 - blend() to fake opacity by mixing a colour over its background
 - nav_button() and primary_button() for consistent button styling
"""
from __future__ import annotations
from typing import Tuple

import customtkinter as ctk


# ─────────────────────────
# Palette / tokens
# ─────────────────────────
BACKGROUND = ("#ffffff", "#151718")
TEXT       = ("#11181c", "#ecedee")
TINT       = ("#0a7ea4", "#ffffff")   # primary / "today" / selection colour
ON_TINT    = ("#ffffff", "#11181c")   # label on a selected cell
DIVIDER    = ("#e0e0e0", "#e0e0e0")
ORDERED    = "#ffaa2a"
AVAILABLE  = "#0070ff"

FONTS = {
    "month":   ("Segoe UI", 18, "bold"),
    "nav":     ("Segoe UI", 20, "bold"),
    "weekday": ("Segoe UI", 10, "bold"),
    "day":     ("Segoe UI", 13),
    "day_b":   ("Segoe UI", 13, "bold"),
    "detail":  ("Segoe UI", 16),
    "button":  ("Segoe UI", 16, "bold"),
}

PALETTE = {
    "background": BACKGROUND,
    "text": TEXT,
    "primary": TINT,
    "on_primary": ON_TINT,
    "divider": DIVIDER,
    "ordered": ORDERED,
    "available": AVAILABLE,
}


# ─────────────────────────
# Theme application
# ─────────────────────────
def apply_theme(widget: object, mode: str = "dark") -> None:
    """
    Call once on the root window to set appearance mode + background.
    Unknown modes fall back to dark.
    """
    if mode not in ("dark", "light", "system"):
        mode = "dark"
    ctk.set_appearance_mode(mode)
    ctk.set_default_color_theme("blue")
    widget.configure(fg_color=BACKGROUND)


def _pair(color) -> Tuple[str, str]:
    if isinstance(color, (tuple, list)):
        return color[0], color[1]
    return color, color


def _rgb(hex_color: str) -> Tuple[int, int, int]:
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _mix(fg: str, bg: str, alpha: float) -> str:
    f, b = _rgb(fg), _rgb(bg)
    mixed = (round(fc * alpha + bc * (1.0 - alpha)) for fc, bc in zip(f, b))
    return "#{:02x}{:02x}{:02x}".format(*mixed)


def blend(fg, bg, alpha: float):
    """
    Tk has no per-widget opacity; mix fg over bg instead.

    Works per appearance mode, so (light, dark) pairs stay pairs and the
    widget still follows a later mode switch.
    """
    if alpha >= 1.0:
        return fg
    (fl, fd), (bl, bd) = _pair(fg), _pair(bg)
    return _mix(fl, bl, alpha), _mix(fd, bd, alpha)


# ─────────────────────────
# Button builders
# ─────────────────────────
def nav_button(master, text: str, command=None) -> ctk.CTkButton:
    """Round ‹ / › month button."""
    return ctk.CTkButton(
        master,
        text=text,
        command=command,
        width=40,
        height=40,
        corner_radius=20,
        fg_color=BACKGROUND,
        hover_color=DIVIDER,
        text_color=TEXT,
        font=FONTS["nav"],
    )


def primary_button(master, text: str, command=None, width: int = 120) -> ctk.CTkButton:
    """Outlined action button ("Order")."""
    return ctk.CTkButton(
        master,
        text=text,
        command=command,
        width=width,
        height=44,
        corner_radius=8,
        border_width=1,
        border_color=TEXT,
        fg_color=BACKGROUND,
        hover_color=DIVIDER,
        text_color=TEXT,
        font=FONTS["button"],
    )
