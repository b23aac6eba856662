# ui/pages/account.py
import flet as ft

from core.errors import RemoteApiError
from core.settings import LOG_PATH, UI
from services.session import BACKEND_LOCAL, BACKEND_REMOTE


def read_log_tail(path=LOG_PATH, lines: int = 100) -> str:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            content = fh.readlines()
    except FileNotFoundError:
        return "No log yet."
    return "\n".join(line.rstrip("\n") for line in content[-lines:])


class AccountPage:
    def __init__(self, app):
        self.app = app
        self.session = app.session

        self.status = ft.Text()
        self.backend_rg = ft.RadioGroup(
            content=ft.Row(
                [
                    ft.Radio(value=BACKEND_LOCAL, label="This device"),
                    ft.Radio(value=BACKEND_REMOTE, label="Taskboard server"),
                ]
            ),
            on_change=self.on_backend_change,
        )
        self.server_tf = ft.TextField(label="Server URL", width=360, on_blur=self.on_server_change)
        self.email_tf = ft.TextField(label="Email", width=360)
        self.password_tf = ft.TextField(label="Password", password=True, can_reveal_password=True, width=360)

        self.sign_in_btn = ft.FilledButton("Sign in", icon=ft.Icons.LOGIN, on_click=lambda e: self.on_sign_in(False))
        self.register_btn = ft.OutlinedButton(
            "Create account", icon=ft.Icons.PERSON_ADD, on_click=lambda e: self.on_sign_in(True)
        )
        self.sign_out_btn = ft.TextButton("Sign out", icon=ft.Icons.LOGOUT, on_click=self.on_sign_out)

        self.log_view = ft.Text("", selectable=True, size=12)

        content = ft.Column(
            controls=[
                ft.Text("Account", size=24, weight=ft.FontWeight.BOLD),
                self.status,
                ft.Text("Keep tasks on", size=14, weight=ft.FontWeight.W_600),
                self.backend_rg,
                self.server_tf,
                self.email_tf,
                self.password_tf,
                ft.Row([self.sign_in_btn, self.register_btn, self.sign_out_btn], spacing=12),
                ft.Column(
                    [
                        ft.Text("Log", size=18, weight=ft.FontWeight.W_600),
                        ft.Container(self.log_view, height=200, padding=10, bgcolor=UI.theme.safe_surface_bg),
                        ft.TextButton("Refresh log", icon=ft.Icons.ARTICLE, on_click=lambda e: self.refresh_log()),
                    ],
                    spacing=8,
                ),
            ],
            expand=True,
            spacing=16,
            scroll=ft.ScrollMode.AUTO,
        )
        self.view = ft.Container(content=content, expand=True, padding=20)

    def activate_from_menu(self):
        self.refresh()

    def refresh(self):
        cfg = self.session.config
        self.backend_rg.value = cfg.backend
        self.server_tf.value = cfg.api_base_url
        if not self.email_tf.value:
            self.email_tf.value = cfg.email or ""
        if cfg.signed_in:
            self.status.value = f"Signed in as {cfg.email or 'unknown'} on {cfg.api_base_url}"
        else:
            self.status.value = "Not signed in; tasks are kept on this device."
        self.sign_out_btn.visible = cfg.signed_in
        self.log_view.value = read_log_tail()
        self.app.page.update()

    def refresh_log(self):
        self.log_view.value = read_log_tail()
        self.app.page.update()

    def on_backend_change(self, e):
        backend = self.backend_rg.value
        if backend == BACKEND_REMOTE and not self.session.config.signed_in:
            self.app.toast("Sign in to keep tasks on the server")
        self.session.use_backend(backend)
        self.refresh()

    def on_server_change(self, e):
        self.session.set_server(self.server_tf.value or "")
        self.refresh()

    def on_sign_in(self, register: bool):
        email = (self.email_tf.value or "").strip()
        password = self.password_tf.value or ""
        if not email or not password:
            return self.app.toast("Enter email and password")
        self.session.set_server(self.server_tf.value or "")
        try:
            self.session.sign_in(email, password, register=register)
        except RemoteApiError as exc:
            self.app.toast(f"Sign in failed: {exc}")
            return
        self.password_tf.value = ""
        self.app.toast("Signed in")
        self.refresh()

    def on_sign_out(self, e):
        self.session.sign_out()
        self.app.toast("Signed out")
        self.refresh()
