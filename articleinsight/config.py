# articleinsight/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = Path(BASE_DIR) / ".env"

# Load .env
load_dotenv(ENV_PATH)


class ServiceConfigs(BaseSettings):
    """Konfigurasi service analisis (delay sumber data, random, laporan).

    Nilai dibaca pydantic-settings dari ENV / .env (nama field = nama ENV,
    case-insensitive). ENV kosong (mis. ``RANDOM_SEED=``) diabaikan.
    """

    # ====================================
    # Simulated source latency (ms)
    # ====================================
    trend_delay_ms: int = 800
    pain_point_delay_ms: int = 600
    competitor_delay_ms: int = 700
    opportunity_delay_ms: int = 900

    # ====================================
    # Fallback generator
    # ====================================
    random_seed: Optional[int] = None

    # ====================================
    # Report
    # ====================================
    report_timezone: str = "Asia/Shanghai"

    # ====================================
    # Base config ENV
    # ====================================
    app_env: str = "development"
    bind_host: str = "0.0.0.0"
    bind_port: int = 8000
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


class BaseConfig:
    """Base configuration class for Quart."""

    # ====================
    # App Config
    # ====================
    ENV = os.getenv("APP_ENV", "development")
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-secret-key")
    DEBUG = False
    TESTING = False

    # ====================
    # Analysis Config
    # ====================
    # None -> pakai nilai dari ServiceConfigs
    ANALYSIS_DELAYS_MS: Optional[dict[str, int]] = None

    # ====================
    # Logger Config
    # ====================
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT", "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"
    )
    LOG_RETENTION = int(os.getenv("LOG_RETENTION", 30))
    LOG_MODE = os.getenv("LOG_MODE", "stdout")  # stdout | file
    _LOG_ROOT_DIR_RAW = os.getenv("LOG_ROOT_DIR", "").strip()
    LOG_ROOT_DIR = Path(_LOG_ROOT_DIR_RAW).resolve() if _LOG_ROOT_DIR_RAW else None

    JSON_SORT_KEYS = False


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ENV = "development"


class TestingConfig(BaseConfig):
    TESTING = True
    DEBUG = True
    ENV = "testing"
    ANALYSIS_DELAYS_MS = {
        "trend": 0,
        "pain_point": 0,
        "competitor": 0,
        "opportunity": 0,
    }


class ProductionConfig(BaseConfig):
    DEBUG = False
    ENV = "production"


config_map = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[BaseConfig]:
    """Return the configuration class corresponding to the given environment."""
    if not env:
        env = os.getenv("APP_ENV", "default")
    return config_map.get(env, config_map["default"])
