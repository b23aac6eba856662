# ui/pages/tasks.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

import flet as ft

from core.errors import NotFoundError
from core.settings import UI
from helpers.reminders import REMINDER_LABELS, ReminderOption, format_reminder_text, resolve_reminder
from models.task import Task, TaskUpdate
from services.views import (
    TAB_ALL,
    TAB_COMPLETED,
    TAB_TODAY,
    UNCATEGORIZED,
    TaskFilter,
    apply_filter,
    category_counts,
    resolve_category,
    split_by_completion,
)
from ui.dialogs import (
    NO_CATEGORY,
    category_options,
    open_category_dialog,
    open_custom_reminder_dialog,
    open_task_dialog,
)
from ui.widgets import category_chip, color_dot, due_chip, reminder_chip, strike_text, wrap_row

TABS = [
    (TAB_ALL, "Upcoming", ft.Icons.VISIBILITY_OUTLINED),
    (TAB_TODAY, "Today", ft.Icons.LIST),
    (TAB_COMPLETED, "Completed", ft.Icons.CHECK_CIRCLE_OUTLINE),
]


class TasksPage:
    def __init__(self, app):
        self.app = app
        self.session = app.session

        self.tab = TAB_ALL
        self.category: Optional[str] = self.session.config.last_category_id
        self._pending_reminder: Optional[datetime] = None

        # ---------- sidebar ----------
        self.search_tf = ft.TextField(
            hint_text="Search your tasks",
            prefix_icon=ft.Icons.SEARCH,
            dense=True,
            on_change=lambda e: self.refresh(),
        )
        self.tabs_col = ft.Column(spacing=2)
        self.categories_col = ft.Column(spacing=2)
        sidebar = ft.Container(
            width=UI.tasks.sidebar_width,
            padding=12,
            bgcolor=UI.theme.safe_surface_bg,
            content=ft.Column(
                [
                    self.search_tf,
                    self.tabs_col,
                    ft.Divider(height=1),
                    ft.Text("Categories", size=14, weight=ft.FontWeight.W_600),
                    ft.Container(self.categories_col, expand=True),
                    ft.TextButton("New category", icon=ft.Icons.ADD, on_click=self.on_new_category),
                ],
                spacing=10,
                expand=True,
            ),
        )

        # ---------- list ----------
        self.heading = ft.Text("", size=24, weight=ft.FontWeight.BOLD)
        self.list_view = ft.ListView(expand=True, spacing=6)

        # ---------- quick add ----------
        self.title_tf = ft.TextField(
            hint_text="Enter your task here",
            expand=True,
            on_submit=self.on_add,
        )
        self.add_category_dd = ft.Dropdown(
            width=170,
            dense=True,
            value=NO_CATEGORY,
            options=category_options([]),
        )
        self.reminder_label = ft.Text("", size=12, color=UI.theme.text_subtle)
        self.reminder_menu = ft.PopupMenuButton(
            icon=ft.Icons.NOTIFICATIONS_OUTLINED,
            tooltip="Set reminder",
            items=[
                ft.PopupMenuItem(text=label, on_click=lambda e, opt=opt: self.on_pick_reminder(opt))
                for opt, label in REMINDER_LABELS.items()
            ],
        )
        quick_add = ft.Card(
            content=ft.Container(
                padding=10,
                content=ft.Column(
                    [
                        ft.Row(
                            [
                                self.title_tf,
                                self.add_category_dd,
                                self.reminder_menu,
                                ft.FilledButton("Add", icon=ft.Icons.ADD, on_click=self.on_add),
                            ],
                            vertical_alignment=ft.CrossAxisAlignment.CENTER,
                        ),
                        self.reminder_label,
                    ],
                    spacing=4,
                    tight=True,
                ),
            )
        )

        main = ft.Container(
            expand=True,
            padding=20,
            content=ft.Column([self.heading, self.list_view, quick_add], spacing=12, expand=True),
        )
        self.view = ft.Row([sidebar, ft.VerticalDivider(width=1), main], expand=True, spacing=0)

    def activate_from_menu(self):
        self.refresh()

    # ---------- events ----------
    def on_add(self, _=None):
        category_id = None if self.add_category_dd.value == NO_CATEGORY else self.add_category_dd.value
        task = self.session.tasks.create_task(
            self.title_tf.value or "",
            reminder_date=self._pending_reminder,
            category_id=category_id,
        )
        if task is None:
            return
        self.title_tf.value = ""
        self._set_pending_reminder(None)
        self.add_category_dd.value = NO_CATEGORY
        self.refresh()

    def on_pick_reminder(self, option: ReminderOption):
        if option == ReminderOption.CUSTOM:
            open_custom_reminder_dialog(self.app.page, self._set_pending_reminder)
            return
        self._set_pending_reminder(resolve_reminder(option))

    def _set_pending_reminder(self, when: Optional[datetime]):
        self._pending_reminder = when
        self.reminder_label.value = f"Reminder: {format_reminder_text(when)}" if when else ""
        self.app.page.update()

    def on_select_tab(self, tab: str):
        self.tab = tab
        self.refresh()

    def on_select_category(self, category_id: Optional[str]):
        self.category = category_id
        self.session.remember_category(category_id)
        self.refresh()

    def on_new_category(self, _):
        def create(name: str, color: str) -> bool:
            category = self.session.categories.create(name, color)
            if category is None:
                self.app.toast("Enter a category name")
                return False
            self.refresh()
            return True

        open_category_dialog(self.app.page, create)

    def on_delete_category(self, category_id: str):
        try:
            self.session.categories.delete(category_id)
        except NotFoundError:
            return self.app.toast("Category not found")
        if self.category == category_id:
            self.on_select_category(None)
            return
        self.refresh()

    def _with_task(self, action, task_id: str, *args) -> bool:
        try:
            action(task_id, *args)
        except NotFoundError:
            self.app.toast("Task not found")
            return False
        finally:
            self.refresh()
        return True

    def on_toggle(self, task_id: str):
        self._with_task(self.session.tasks.toggle_complete, task_id)

    def on_star(self, task_id: str):
        self._with_task(self.session.tasks.toggle_star, task_id)

    def on_move(self, task_id: str, category_id: Optional[str]):
        self._with_task(self.session.tasks.update_category, task_id, category_id)

    def on_delete(self, task_id: str):
        if self._with_task(self.session.tasks.delete_task, task_id):
            self.app.toast("Task deleted")

    def on_edit(self, task: Task):
        def save(update: TaskUpdate):
            self._with_task(self.session.tasks.edit_fields, task.id, update)

        open_task_dialog(
            self.app.page,
            task,
            self.session.categories.list(),
            save,
            on_delete=lambda: self.on_delete(task.id),
        )

    # ---------- render ----------
    def refresh(self):
        categories = self.session.categories.list()
        if self.category not in (None, UNCATEGORIZED) and self.session.categories.get(self.category) is None:
            self.category = None

        self._render_tabs()
        self._render_categories(categories)
        self.add_category_dd.options = category_options(categories)
        if self.add_category_dd.value not in {o.key for o in self.add_category_dd.options}:
            self.add_category_dd.value = NO_CATEGORY

        flt = TaskFilter(category=self.category, tab=self.tab, query=self.search_tf.value or "")
        sections = split_by_completion(apply_filter(self.session.tasks.list(), flt, categories))
        self.heading.value = self._heading(categories)

        self.list_view.controls.clear()
        for task in sections.incomplete:
            self.list_view.controls.append(self._row_for_task(task, categories))
        if sections.completed:
            self.list_view.controls.append(
                ft.Text(f"Completed ({len(sections.completed)})", size=13, color=UI.theme.text_subtle)
            )
            for task in sections.completed:
                self.list_view.controls.append(self._row_for_task(task, categories))
        if not self.list_view.controls:
            self.list_view.controls.append(ft.Text("No tasks here yet.", color=UI.theme.text_subtle))
        self.app.page.update()

    def _heading(self, categories) -> str:
        if self.category is None:
            return dict((k, label) for k, label, _ in TABS)[self.tab]
        if self.category == UNCATEGORIZED:
            return "Uncategorized"
        for c in categories:
            if c.id == self.category:
                return c.name
        return "Tasks"

    def _render_tabs(self):
        self.tabs_col.controls = [
            ft.ListTile(
                leading=ft.Icon(icon),
                title=ft.Text(label, weight=ft.FontWeight.BOLD if key == self.tab else None),
                dense=True,
                selected=key == self.tab,
                on_click=lambda e, k=key: self.on_select_tab(k),
            )
            for key, label, icon in TABS
        ]

    def _render_categories(self, categories):
        counts = category_counts(self.session.tasks.list(), categories)

        def entry(key, label, color, count, deletable=False):
            trailing = ft.Row(
                [ft.Text(str(count), size=12, color=UI.theme.text_subtle)],
                tight=True,
                spacing=0,
            )
            if deletable:
                trailing.controls.append(
                    ft.IconButton(
                        ft.Icons.CLOSE,
                        icon_size=14,
                        tooltip="Delete category",
                        on_click=lambda e, k=key: self.on_delete_category(k),
                    )
                )
            return ft.ListTile(
                leading=color_dot(color),
                title=ft.Text(label),
                trailing=trailing,
                dense=True,
                selected=self.category == key,
                on_click=lambda e, k=key: self.on_select_category(k),
            )

        controls = [
            entry(None, "All tasks", UI.tasks.default_category_color, counts[None]),
            entry(UNCATEGORIZED, "Uncategorized", UI.theme.uncategorized, counts[UNCATEGORIZED]),
        ]
        controls.extend(entry(c.id, c.name, c.color, counts[c.id], deletable=True) for c in categories)
        self.categories_col.controls = controls

    def _row_for_task(self, task: Task, categories) -> ft.Control:
        category = resolve_category(task, categories)
        move_items = [ft.PopupMenuItem(text="No category", on_click=lambda e, t=task.id: self.on_move(t, None))]
        move_items += [
            ft.PopupMenuItem(text=c.name, on_click=lambda e, t=task.id, c=c.id: self.on_move(t, c))
            for c in categories
        ]
        meta = [category_chip(category), reminder_chip(task.reminder_date), due_chip(task.due_date)]

        return ft.Card(
            content=ft.Container(
                padding=ft.padding.symmetric(horizontal=8, vertical=6),
                on_click=lambda e, t=task: self.on_edit(t),
                content=ft.Row(
                    [
                        ft.Checkbox(value=task.completed, on_change=lambda e, t=task.id: self.on_toggle(t)),
                        ft.Column(
                            [
                                strike_text(
                                    task.title,
                                    strike=task.completed,
                                    size=15,
                                    weight=ft.FontWeight.W_600,
                                    max_lines=2,
                                    overflow=ft.TextOverflow.ELLIPSIS,
                                ),
                                wrap_row(meta),
                            ],
                            spacing=4,
                            expand=True,
                        ),
                        ft.IconButton(
                            ft.Icons.STAR if task.is_starred else ft.Icons.STAR_BORDER,
                            icon_color=ft.Colors.AMBER if task.is_starred else None,
                            tooltip="Star",
                            on_click=lambda e, t=task.id: self.on_star(t),
                        ),
                        ft.PopupMenuButton(icon=ft.Icons.LABEL_OUTLINE, tooltip="Move to category", items=move_items),
                        ft.IconButton(
                            ft.Icons.DELETE_OUTLINE,
                            tooltip="Delete",
                            on_click=lambda e, t=task.id: self.on_delete(t),
                        ),
                    ],
                    vertical_alignment=ft.CrossAxisAlignment.CENTER,
                ),
            )
        )
