from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

import flet as ft

from core.errors import ParseError
from core.settings import UI
from helpers.datetime_utils import parse_date_input
from helpers.reminders import default_custom_inputs, parse_custom
from models.category import Category
from models.task import Task, TaskUpdate

NO_CATEGORY = "__none__"


def close_dialog(page: ft.Page, dlg: Optional[ft.AlertDialog]) -> None:
    if dlg is None:
        return
    page.close(dlg)


def _error_text() -> ft.Text:
    return ft.Text("", color=ft.Colors.ERROR, size=12, visible=False)


def _show_error(page: ft.Page, label: ft.Text, message: str) -> None:
    label.value = message
    label.visible = True
    page.update()


def category_options(categories: List[Category]) -> List[ft.dropdown.Option]:
    options = [ft.dropdown.Option(NO_CATEGORY, "No category")]
    options.extend(ft.dropdown.Option(c.id, c.name) for c in categories)
    return options


def open_category_dialog(page: ft.Page, on_create: Callable[[str, str], bool]) -> ft.AlertDialog:
    """Name + color picker. ``on_create`` returns ``False`` to keep the dialog open."""

    palette = UI.tasks.category_palette
    name_tf = ft.TextField(label="Category name", autofocus=True)
    selected = {"color": palette[0]}
    swatches = ft.Row(spacing=8, wrap=True)
    error = _error_text()

    def render_swatches():
        swatches.controls = [
            ft.Container(
                width=28,
                height=28,
                border_radius=14,
                bgcolor=color,
                border=ft.border.all(3, ft.Colors.ON_SURFACE) if color == selected["color"] else None,
                on_click=lambda e, c=color: pick(c),
            )
            for color in palette
        ]

    def pick(color: str):
        selected["color"] = color
        render_swatches()
        page.update()

    def submit(_=None):
        if not (name_tf.value or "").strip():
            return _show_error(page, error, "Enter a category name")
        if on_create(name_tf.value, selected["color"]):
            close_dialog(page, dlg)

    name_tf.on_submit = submit
    render_swatches()
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text("New category"),
        content=ft.Column([name_tf, ft.Text("Color", size=12), swatches, error], tight=True, width=360),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dlg)),
            ft.FilledButton("Create", on_click=submit),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dlg)
    return dlg


def open_custom_reminder_dialog(
    page: ft.Page, on_pick: Callable[[datetime], None]
) -> ft.AlertDialog:
    default_date, default_time = default_custom_inputs()
    date_tf = ft.TextField(label="Date", hint_text="YYYY-MM-DD", value=default_date, width=160)
    time_tf = ft.TextField(label="Time", hint_text="HH:MM", value=default_time, width=120)
    error = _error_text()

    def submit(_=None):
        try:
            when = parse_custom(date_tf.value, time_tf.value)
        except ParseError:
            return _show_error(page, error, "Use YYYY-MM-DD and HH:MM")
        close_dialog(page, dlg)
        on_pick(when)

    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text("Remind me at"),
        content=ft.Column([ft.Row([date_tf, time_tf], spacing=12), error], tight=True),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dlg)),
            ft.FilledButton("Set", on_click=submit),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dlg)
    return dlg


def _date_text(value: Optional[datetime]) -> str:
    return value.date().isoformat() if value else ""


def _time_text(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M") if value else ""


def open_task_dialog(
    page: ft.Page,
    task: Task,
    categories: List[Category],
    on_save: Callable[[TaskUpdate], None],
    on_delete: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    title_tf = ft.TextField(label="Title", value=task.title, autofocus=True)
    notes_tf = ft.TextField(label="Description", value=task.description or "", multiline=True, min_lines=2)
    category_dd = ft.Dropdown(
        label="Category",
        value=task.category_id if any(c.id == task.category_id for c in categories) else NO_CATEGORY,
        options=category_options(categories),
    )
    due_tf = ft.TextField(label="Due date", hint_text="YYYY-MM-DD", value=_date_text(task.due_date), width=160)
    rem_date_tf = ft.TextField(
        label="Reminder date", hint_text="YYYY-MM-DD", value=_date_text(task.reminder_date), width=160
    )
    rem_time_tf = ft.TextField(
        label="Time", hint_text="HH:MM", value=_time_text(task.reminder_date), width=110
    )
    error = _error_text()

    def submit(_=None):
        fields = {"title": title_tf.value, "description": (notes_tf.value or "").strip() or None}

        if category_dd.value != (task.category_id or NO_CATEGORY):
            fields["category_id"] = None if category_dd.value == NO_CATEGORY else category_dd.value

        due_raw = (due_tf.value or "").strip()
        if due_raw != _date_text(task.due_date):
            if not due_raw:
                fields["due_date"] = None
            else:
                parsed = parse_date_input(due_raw)
                if parsed is None:
                    return _show_error(page, error, "Due date must look like 2024-03-15")
                fields["due_date"] = datetime.combine(parsed, datetime.min.time())

        rem_date = (rem_date_tf.value or "").strip()
        rem_time = (rem_time_tf.value or "").strip()
        if (rem_date, rem_time) != (_date_text(task.reminder_date), _time_text(task.reminder_date)):
            if not rem_date and not rem_time:
                fields["reminder_date"] = None
            else:
                try:
                    fields["reminder_date"] = parse_custom(rem_date, rem_time or "09:00")
                except ParseError:
                    return _show_error(page, error, "Reminder must be YYYY-MM-DD and HH:MM")

        close_dialog(page, dlg)
        on_save(TaskUpdate(**fields))

    def delete(_):
        close_dialog(page, dlg)
        if on_delete is not None:
            on_delete()

    actions: List[ft.Control] = []
    if on_delete is not None:
        actions.append(ft.TextButton("Delete", icon=ft.Icons.DELETE_OUTLINE, on_click=delete))
    actions += [
        ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dlg)),
        ft.FilledButton("Save", on_click=submit),
    ]
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text("Edit task"),
        content=ft.Column(
            [
                title_tf,
                notes_tf,
                category_dd,
                due_tf,
                ft.Row([rem_date_tf, rem_time_tf], spacing=12),
                error,
            ],
            tight=True,
            width=UI.calendar.dialog_width,
        ),
        actions=actions,
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dlg)
    return dlg


def open_text_prompt(
    page: ft.Page,
    *,
    title: str,
    label: str,
    value: str = "",
    ok_text: str = "Save",
    on_submit: Callable[[str], None],
) -> ft.AlertDialog:
    tf = ft.TextField(label=label, value=value, autofocus=True)

    def submit(_=None):
        text = (tf.value or "").strip()
        if not text:
            return
        close_dialog(page, dlg)
        on_submit(text)

    tf.on_submit = submit
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Container(tf, width=UI.calendar.dialog_width),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dlg)),
            ft.FilledButton(ok_text, on_click=submit),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dlg)
    return dlg


__all__ = [
    "NO_CATEGORY",
    "category_options",
    "close_dialog",
    "open_category_dialog",
    "open_custom_reminder_dialog",
    "open_task_dialog",
    "open_text_prompt",
]
