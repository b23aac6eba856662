# ui/app_shell.py
from __future__ import annotations

import flet as ft

from core.logs import get_logger
from core.settings import UI
from services.session import TaskboardSession
from storage.db import init_db

from .pages.account import AccountPage
from .pages.calendar import CalendarPage
from .pages.tasks import TasksPage

log = get_logger("ui")


class AppShell:
    def __init__(self, page: ft.Page, session: TaskboardSession | None = None):
        self.page = page

        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START

        self.session = session or TaskboardSession(notify=self.toast)

        self._tasks = TasksPage(self)
        self._calendar = CalendarPage(self)
        self._account = AccountPage(self)
        self._pages = [self._tasks, self._calendar, self._account]

        self.content = ft.Container(expand=True)

        self.nav = ft.NavigationRail(
            selected_index=0,
            label_type=ft.NavigationRailLabelType.ALL,
            min_width=90,
            min_extended_width=200,
            group_alignment=-0.9,
            on_change=self.on_nav_change,
            destinations=[
                ft.NavigationRailDestination(
                    icon=ft.Icons.CHECK_CIRCLE_OUTLINE,
                    selected_icon=ft.Icons.CHECK_CIRCLE,
                    label="Tasks",
                ),
                ft.NavigationRailDestination(
                    icon=ft.Icons.CALENDAR_MONTH_OUTLINED,
                    selected_icon=ft.Icons.CALENDAR_MONTH,
                    label="Calendar",
                ),
                ft.NavigationRailDestination(
                    icon=ft.Icons.PERSON_OUTLINE,
                    selected_icon=ft.Icons.PERSON,
                    label="Account",
                ),
            ],
        )

        self.root = ft.Row(
            controls=[
                ft.Container(self.nav, width=88, bgcolor=UI.theme.safe_surface_bg),
                ft.VerticalDivider(width=1),
                self.content,
            ],
            expand=True,
            spacing=0,
        )

    def toast(self, text: str) -> None:
        self.page.open(ft.SnackBar(ft.Text(text)))

    # ---------- mount ----------
    def mount(self):
        init_db()
        self.session.open()

        self.page.controls.clear()
        self.page.add(self.root)
        self.page.on_disconnect = lambda e: self.session.close()

        self.content.content = self._tasks.view
        self.page.update()
        self._tasks.activate_from_menu()
        log.info("ui mounted (backend=%s)", self.session.backend)

    # ---------- navigation ----------
    def on_nav_change(self, e: ft.ControlEvent):
        idx = int(e.control.selected_index)
        page = self._pages[idx] if 0 <= idx < len(self._pages) else self._tasks
        self.content.content = page.view
        self.page.update()
        page.activate_from_menu()
