from __future__ import annotations

from datetime import datetime
from typing import Optional

import flet as ft

from core.settings import UI
from helpers.reminders import format_reminder_text
from models.category import Category

TEXT_ACCEPTS_DECORATION = "decoration" in ft.Text.__init__.__code__.co_varnames


def strike_text(text: str, *, strike: bool = False, **kwargs) -> ft.Text:
    if TEXT_ACCEPTS_DECORATION:
        t = ft.Text(text, **kwargs)
        if strike:
            t.decoration = ft.TextDecoration.LINE_THROUGH
        return t
    return ft.Text(
        text,
        style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH if strike else None),
        **kwargs,
    )


def color_dot(color: Optional[str], size: int = 10) -> ft.Container:
    return ft.Container(
        width=size,
        height=size,
        border_radius=size,
        bgcolor=color or UI.theme.uncategorized,
    )


def category_chip(category: Optional[Category]) -> ft.Control:
    if category is None:
        return ft.Container()
    return ft.Container(
        content=ft.Row(
            [color_dot(category.color, 8), ft.Text(category.name, size=11)],
            spacing=4,
            tight=True,
        ),
        padding=ft.padding.symmetric(horizontal=8, vertical=2),
        border_radius=10,
        bgcolor=UI.theme.chip,
    )


def reminder_chip(when: Optional[datetime]) -> ft.Control:
    if when is None:
        return ft.Container()
    return ft.Row(
        [
            ft.Icon(ft.Icons.NOTIFICATIONS_OUTLINED, size=14, color=UI.theme.text_subtle),
            ft.Text(format_reminder_text(when), size=11, color=UI.theme.text_subtle),
        ],
        spacing=4,
        tight=True,
    )


def due_chip(when: Optional[datetime]) -> ft.Control:
    if when is None:
        return ft.Container()
    return ft.Row(
        [
            ft.Icon(ft.Icons.EVENT, size=14, color=UI.theme.text_subtle),
            ft.Text(f"{when:%a}, {when:%b} {when.day}", size=11, color=UI.theme.text_subtle),
        ],
        spacing=4,
        tight=True,
    )


def wrap_row(controls, spacing=10, run_spacing=6):
    return ft.Row(controls=controls, wrap=True, spacing=spacing, run_spacing=run_spacing)


__all__ = [
    "category_chip",
    "color_dot",
    "due_chip",
    "reminder_chip",
    "strike_text",
    "wrap_row",
]
