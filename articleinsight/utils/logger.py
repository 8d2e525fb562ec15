"""
articleinsight/utils/logger.py → logger dengan 2 mode:

stdout (default): hanya ke console, rotasi/agregasi diserahkan ke Docker/systemd.

file: tulis ke logs/<module>.log, rotasi harian, retensi (default 30 hari).

Konfigurasi lewat ENV (prefix LOG_) atau .env di root proyek. Overlay dari
Quart app.config hanya berlaku untuk logger yang dibuat di dalam app context
(mis. logger "quart.app" di create_app); logger level-modul yang dibuat saat
import hanya membaca ENV.
"""

# articleinsight/utils/logger.py
from __future__ import annotations

import logging
import os
import sys
import threading
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from quart import current_app, has_app_context


def _detect_project_root() -> Path:
    """
    Cari akar proyek:
    - ENV PROJECT_ROOT
    - folder yang punya pyproject.toml atau .git
    - fallback: 2 level di atas file ini
    """
    env_root = os.getenv("PROJECT_ROOT")
    if env_root:
        return Path(env_root).resolve()

    here = Path(__file__).resolve()
    for p in here.parents:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return here.parents[2]


class LogSettings(BaseSettings):
    """
    Konfigurasi via ENV (prefix LOG_) / .env / overlay dari Quart app.config

      - LOG_MODE=stdout|file
      - LOG_LEVEL=INFO|DEBUG|WARNING|ERROR
      - LOG_FORMAT="%(asctime)s %(levelname)s %(name)s: %(message)s"
      - LOG_DATEFMT="%Y-%m-%d %H:%M:%S"
      - LOG_RETENTION=30
      - LOG_ROOT_DIR="/path/proyek" (opsional; default autodetect)
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    mode: str = "stdout"  # stdout | file
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    retention: int = 30
    root_dir: Optional[Path] = None


_OVERLAY_KEYS = (
    "LOG_MODE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_DATEFMT",
    "LOG_RETENTION",
    "LOG_ROOT_DIR",
)


def _load_settings() -> LogSettings:
    """
    Settings dari ENV/.env, lalu overlay dari Quart app.config (jika ada context).
    Prioritas: app.config > ENV/.env.
    """
    settings = LogSettings()
    if not has_app_context():
        return settings

    cfg = current_app.config
    overrides = {key[4:].lower(): cfg[key] for key in _OVERLAY_KEYS if key in cfg}
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


def _to_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def _file_handler(name: str, s: LogSettings) -> logging.Handler:
    # nama file berdasarkan segmen terakhir dari logger name
    last_segment = (name.rsplit(".", 1)[-1] or "app").replace(":", "_")
    log_dir = (s.root_dir or _detect_project_root()) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return TimedRotatingFileHandler(
        filename=str(log_dir / f"{last_segment}.log"),
        when="midnight",
        backupCount=int(s.retention),
        encoding="utf-8",
    )


_init_lock = threading.Lock()
_inited_loggers: set[str] = set()


def get_logger(name: str) -> logging.Logger:
    """
    Logger 2-mode (stdout/file):
      - Idempotent & thread-safe (hindari duplikasi handler)
      - Overlay config dari Quart app.config jika ada
    """
    s = _load_settings()
    mode = (s.mode or "stdout").lower().strip()

    logger = logging.getLogger(name)
    logger.setLevel(_to_level(s.level))

    # Fast path
    if name in _inited_loggers:
        return logger

    with _init_lock:
        if name in _inited_loggers:
            return logger

        if mode == "file":
            handler = _file_handler(name, s)
        else:
            handler = logging.StreamHandler(sys.stdout)

        handler.setLevel(_to_level(s.level))
        handler.setFormatter(logging.Formatter(fmt=s.format, datefmt=s.datefmt))
        logger.addHandler(handler)
        # propagate ke root (caplog)
        logger.propagate = True

        _inited_loggers.add(name)

    return logger
