# ui/pages/calendar.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

import flet as ft

from core.errors import NotFoundError
from core.settings import UI
from helpers.calendar_grid import WEEKDAY_NAMES, CalendarDay, build_month_grid, month_title, shift_month
from helpers.datetime_utils import parse_date_input
from models.task import Task, TaskUpdate
from services.views import bucket_by_day, resolve_category
from ui.dialogs import open_task_dialog, open_text_prompt

CAL_UI = UI.calendar
THEME = UI.theme


def _midnight(d: date) -> datetime:
    return datetime(d.year, d.month, d.day)


class CalendarPage:
    """Month view: tasks sit on their due date and can be dragged to another day."""

    def __init__(self, app):
        self.app = app
        self.session = app.session

        today = date.today()
        self.year = today.year
        self.month = today.month - 1

        self.current_drag_task_id: Optional[str] = None

        self.title_text = ft.Text("", size=24, weight=ft.FontWeight.BOLD)
        self.home_btn = ft.IconButton(icon=ft.Icons.TODAY, tooltip="This month", on_click=lambda e: self.go_home())
        self.prev_btn = ft.IconButton(icon=ft.Icons.CHEVRON_LEFT, tooltip="Previous month", on_click=lambda e: self.shift(-1))
        self.next_btn = ft.IconButton(icon=ft.Icons.CHEVRON_RIGHT, tooltip="Next month", on_click=lambda e: self.shift(1))

        header = ft.Row(
            controls=[
                self.title_text,
                ft.Row([self.prev_btn, self.home_btn, self.next_btn], spacing=6),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

        self.grid = ft.Column(spacing=4, expand=True, scroll=ft.ScrollMode.AUTO)
        self.view = ft.Container(
            content=ft.Column([header, ft.Divider(height=1), self.grid], spacing=12, expand=True),
            expand=True,
            padding=20,
        )

    # ===== navigation =====
    def activate_from_menu(self):
        self.load()

    def go_home(self):
        today = date.today()
        self.year, self.month = today.year, today.month - 1
        self.load()

    def shift(self, delta: int):
        self.year, self.month = shift_month(self.year, self.month, delta)
        self.load()

    # ===== actions =====
    def _remember_drag(self, task_id: str):
        self.current_drag_task_id = task_id

    def _on_drop_accept(self, day: date, e):
        task_id = self.current_drag_task_id
        if task_id is None:
            src = self.app.page.get_control(getattr(e, "src_id", None))
            task_id = getattr(src, "data", None)
        self.current_drag_task_id = None
        if not task_id:
            return self.app.toast("Could not tell which task was dropped")
        self._reschedule(task_id, day)

    def _reschedule(self, task_id: str, day: date):
        try:
            self.session.tasks.reschedule(task_id, _midnight(day))
        except NotFoundError:
            self.app.toast("Task not found")
        self.load()

    def _add_on_day(self, day: date):
        def create(title: str):
            self.session.tasks.create_task(title, due_date=_midnight(day))
            self.load()

        open_text_prompt(
            self.app.page,
            title=f"New task on {day:%a}, {day:%b} {day.day}",
            label="Title",
            ok_text="Add",
            on_submit=create,
        )

    def _edit(self, task: Task):
        def save(update: TaskUpdate):
            try:
                self.session.tasks.edit_fields(task.id, update)
            except NotFoundError:
                self.app.toast("Task not found")
            self.load()

        def delete():
            try:
                self.session.tasks.delete_task(task.id)
            except NotFoundError:
                self.app.toast("Task not found")
            self.load()

        open_task_dialog(self.app.page, task, self.session.categories.list(), save, on_delete=delete)

    def _open_reschedule(self, task: Task):
        current = task.due_date.date().isoformat() if task.due_date else date.today().isoformat()

        def apply(text: str):
            parsed = parse_date_input(text)
            if parsed is None:
                return self.app.toast("Date must look like 2024-03-15")
            self._reschedule(task.id, parsed)

        open_text_prompt(
            self.app.page,
            title="Reschedule",
            label="Date (YYYY-MM-DD)",
            value=current,
            ok_text="Move",
            on_submit=apply,
        )

    # ===== render =====
    def load(self):
        self.title_text.value = month_title(self.year, self.month)
        weeks = build_month_grid(self.year, self.month)
        buckets = bucket_by_day(self.session.tasks.list(), [cell for week in weeks for cell in week])
        categories = self.session.categories.list()

        header = ft.Row(
            [
                ft.Container(
                    ft.Text(name, weight=ft.FontWeight.W_600, color=THEME.text_subtle),
                    expand=True,
                    alignment=ft.alignment.center,
                )
                for name in WEEKDAY_NAMES
            ],
            spacing=4,
        )
        rows: List[ft.Control] = [header]
        for week in weeks:
            rows.append(
                ft.Row(
                    [self._cell(cell, buckets.get(cell.date, []), categories) for cell in week],
                    spacing=4,
                    vertical_alignment=ft.CrossAxisAlignment.START,
                )
            )
        self.grid.controls = rows
        self.app.page.update()

    def _cell(self, cell: CalendarDay, tasks: List[Task], categories) -> ft.Control:
        is_today = cell.date == date.today()
        shown = tasks[: CAL_UI.max_chips_per_cell]
        chips: List[ft.Control] = [self._chip(t, categories) for t in shown]
        hidden = len(tasks) - len(shown)
        if hidden > 0:
            chips.append(ft.Text(f"+{hidden} more", size=11, color=THEME.text_subtle))

        body = ft.Container(
            height=CAL_UI.cell_height,
            padding=6,
            border=ft.border.all(0.5, THEME.outline),
            border_radius=6,
            bgcolor=THEME.today_bg if is_today else (None if cell.in_month else THEME.other_month_bg),
            on_click=lambda e, d=cell.date: self._add_on_day(d),
            content=ft.Column(
                [
                    ft.Text(
                        str(cell.day),
                        size=12,
                        weight=ft.FontWeight.BOLD if is_today else None,
                        color=None if cell.in_month else THEME.text_subtle,
                    ),
                    *chips,
                ],
                spacing=CAL_UI.chips_spacing,
                tight=True,
            ),
        )
        return ft.DragTarget(
            group="task",
            content=body,
            on_accept=lambda e, d=cell.date: self._on_drop_accept(d, e),
            expand=True,
        )

    def _chip(self, task: Task, categories) -> ft.Control:
        category = resolve_category(task, categories)
        color = category.color if category else THEME.chip
        label = ft.Container(
            content=ft.Text(
                task.title,
                size=11,
                color=THEME.chip_text,
                max_lines=1,
                overflow=ft.TextOverflow.ELLIPSIS,
                style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH) if task.completed else None,
            ),
            padding=ft.padding.symmetric(horizontal=6, vertical=2),
            border_radius=4,
            bgcolor=ft.Colors.with_opacity(0.35, color),
        )
        gd = ft.GestureDetector(
            content=label,
            on_tap=lambda e, t=task: self._edit(t),
            on_secondary_tap=lambda e, t=task: self._open_reschedule(t),
        )
        return ft.Draggable(
            group="task",
            data=task.id,
            on_drag_start=lambda e, tid=task.id: self._remember_drag(tid),
            content=gd,
            content_feedback=ft.Container(
                content=ft.Text(task.title, size=12),
                padding=8,
                bgcolor="#ffffff",
                border_radius=6,
                border=ft.border.all(0.5, THEME.outline),
            ),
        )
