"""One UI session: the owned board, its services and the persistence path."""
from __future__ import annotations

from typing import Callable, Optional

from core.logs import get_logger
from services.board import TaskBoard
from services.categories import CategoryService
from services.events import ChangeEvents
from services.persistence import LocalAutosave
from services.remote_api import RemoteApiClient
from services.remote_sync import RemoteMirror
from services.tasks import TaskService
from storage.config import AppConfig, load_config, save_config
from storage.snapshots import SnapshotStore

BACKEND_LOCAL = "local"
BACKEND_REMOTE = "remote"

log = get_logger("session")


class TaskboardSession:
    """Built at session start, discarded with :meth:`close`.

    ``notify`` receives short user-facing messages about persistence or
    network failures; the in-memory board stays usable regardless.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        store: Optional[SnapshotStore] = None,
        client: Optional[RemoteApiClient] = None,
        notify: Optional[Callable[[str], None]] = None,
        save_config_fn: Callable[[AppConfig], None] = save_config,
    ):
        self.config = config or load_config()
        self.board = TaskBoard()
        self.events = ChangeEvents()
        self.tasks = TaskService(self.board, self.events)
        self.categories = CategoryService(self.board, self.events)
        self.notify = notify
        self._store = store
        self._client = client
        self._save_config = save_config_fn
        self.local: Optional[LocalAutosave] = None
        self.remote: Optional[RemoteMirror] = None

    @property
    def backend(self) -> str:
        return self.config.backend

    def _notice(self, message: str) -> None:
        if self.notify is not None:
            self.notify(message)

    def _client_for_config(self) -> RemoteApiClient:
        if self._client is None or self._client.base_url != self.config.api_base_url.rstrip("/"):
            self._client = RemoteApiClient(self.config.api_base_url, token=self.config.auth_token)
        else:
            self._client.token = self.config.auth_token
        return self._client

    # ----- lifecycle -----
    def open(self) -> None:
        """Attach the configured persistence path and load its state."""

        self._detach()
        self.board.replace([], [])
        if self.config.backend == BACKEND_REMOTE and self.config.signed_in:
            self.remote = RemoteMirror(
                self._client_for_config(), self.board, self.events, on_error=self._notice
            )
            self.remote.pull()
            self.remote.attach()
        else:
            if self.config.backend == BACKEND_REMOTE:
                log.info("remote backend selected but not signed in; using local storage")
            self.local = LocalAutosave(
                self._store or SnapshotStore(), self.board, self.events, on_error=self._notice
            )
            self.local.load()
            self.local.attach()

    def close(self) -> None:
        self._detach()
        self.board.replace([], [])

    def _detach(self) -> None:
        if self.local is not None:
            self.local.detach()
            self.local = None
        if self.remote is not None:
            self.remote.detach()
            self.remote = None

    # ----- account -----
    def sign_in(self, email: str, password: str, *, register: bool = False) -> None:
        """Log in (or register) and switch to the remote backend.

        Raises :class:`RemoteApiError` on bad credentials or network failure.
        """

        client = self._client_for_config()
        client.token = None
        data = client.register(email, password) if register else client.login(email, password)
        self.config.auth_token = client.token
        self.config.user_id = data.get("userId")
        self.config.email = email
        self.config.backend = BACKEND_REMOTE
        self._save_config(self.config)
        log.info("signed in as %s", email)
        self.open()

    def sign_out(self) -> None:
        if self._client is not None:
            self._client.logout()
        self.config.auth_token = None
        self.config.user_id = None
        self.config.backend = BACKEND_LOCAL
        self._save_config(self.config)
        self.open()

    def set_server(self, base_url: str) -> None:
        """Point the remote backend at another server; the stored login is dropped."""

        base_url = (base_url or "").strip().rstrip("/")
        if not base_url or base_url == self.config.api_base_url.rstrip("/"):
            return
        self.config.api_base_url = base_url
        self.config.auth_token = None
        self.config.user_id = None
        self._save_config(self.config)
        if self.remote is not None:
            self.open()

    def use_backend(self, backend: str) -> None:
        if backend not in (BACKEND_LOCAL, BACKEND_REMOTE):
            raise ValueError(f"Unknown backend: {backend}")
        self.config.backend = backend
        self._save_config(self.config)
        self.open()

    def remember_category(self, category_id: Optional[str]) -> None:
        if self.config.last_category_id == category_id:
            return
        self.config.last_category_id = category_id
        try:
            self._save_config(self.config)
        except OSError as exc:
            log.warning("could not store last category: %s", exc)


__all__ = ["BACKEND_LOCAL", "BACKEND_REMOTE", "TaskboardSession"]
