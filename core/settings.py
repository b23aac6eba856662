"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``.

    ``TASKBOARD_DATA_DIR`` in the environment wins over the platform default.
    """

    platform_id = (platform or sys.platform).lower()
    environ = dict(os.environ if env is None else env)
    override = environ.get("TASKBOARD_DATA_DIR")
    if override:
        return Path(override).expanduser()

    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return base.expanduser() / sanitized


APP_NAME = "Taskboard"


DATA_DIR = get_default_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"

DB_PATH = DATA_DIR / "taskboard.db"
CONFIG_PATH = DATA_DIR / "config.json"
LOG_PATH = LOG_DIR / "taskboard.log"


@dataclass(frozen=True)
class ThemeColors:
    safe_surface_bg: str = "#F1F5F9"
    outline: str = "#E5E7EB"
    text_subtle: str = "#6B7280"
    today_bg: str = "#EEF2FF"
    other_month_bg: str = "#F8FAFC"
    chip: str = "#E0E7FF"
    chip_text: str = "#1F2937"
    uncategorized: str = "#94A3B8"


@dataclass(frozen=True)
class CalendarUISettings:
    cell_height: int = 110
    max_chips_per_cell: int = 3
    chips_spacing: int = 4
    dialog_width: int = 420


@dataclass(frozen=True)
class TasksUISettings:
    sidebar_width: int = 240
    default_category_color: str = "#4299E1"
    category_palette: tuple[str, ...] = (
        "#4299E1",
        "#48BB78",
        "#ED8936",
        "#E53E3E",
        "#9F7AEA",
        "#ED64A6",
        "#38B2AC",
        "#ECC94B",
    )


@dataclass(frozen=True)
class UISettings:
    app_title: str = APP_NAME
    theme_mode: str = "system"
    color_scheme_seed: str = "#0D9488"
    window_min_width: int = 960
    window_min_height: int = 640
    theme: ThemeColors = ThemeColors()
    calendar: CalendarUISettings = CalendarUISettings()
    tasks: TasksUISettings = TasksUISettings()


UI = UISettings()


@dataclass(frozen=True)
class ReminderSettings:
    later_today_hour: int = 18
    tomorrow_hour: int = 9
    next_week_hour: int = 9
    next_week_days: int = 7
    weekend_hour: int = 10
    default_offset_minutes: int = 60


REMINDERS = ReminderSettings()


@dataclass(frozen=True)
class RemoteSettings:
    base_url: str = os.environ.get("TASKBOARD_API_URL", "http://localhost:5000/api")
    timeout_sec: float = 10.0


REMOTE = RemoteSettings()


@dataclass(frozen=True)
class StorageSettings:
    default_backend: str = "local"  # local / remote
    snapshot_key: str = "default"


STORAGE = StorageSettings()


@dataclass(frozen=True)
class LogSettings:
    level: str = os.environ.get("TASKBOARD_LOG_LEVEL", "INFO")
    max_bytes: int = 1_000_000
    backup_count: int = 3


LOGGING = LogSettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "LOG_DIR",
    "DB_PATH",
    "CONFIG_PATH",
    "LOG_PATH",
    "UI",
    "REMINDERS",
    "REMOTE",
    "STORAGE",
    "LOGGING",
    "get_default_data_dir",
]
