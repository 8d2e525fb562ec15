# articleinsight/utils/helper.py
from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from quart import jsonify

from articleinsight.config import ServiceConfigs


def report_timezone() -> ZoneInfo:
    """Zona waktu laporan dari ``REPORT_TIMEZONE`` (default Asia/Shanghai)."""
    return ZoneInfo(ServiceConfigs().report_timezone)


def local_now(tz: str | ZoneInfo | None = None) -> datetime:
    """Waktu sekarang di zona ``tz``; default zona laporan dari config."""
    if isinstance(tz, str):
        tz = ZoneInfo(tz)
    return datetime.now(tz or report_timezone())


def local_now_iso(timespec: str = "seconds") -> str:
    """Kembalikan waktu lokal dalam ISO-8601 (contoh: 2025-08-17T01:55:12+08:00)."""
    return local_now().isoformat(timespec=timespec)


def format_locale_date(dt: datetime) -> str:
    """Tanggal gaya zh-CN: 2025/8/17."""
    return f"{dt.year}/{dt.month}/{dt.day}"


def format_locale_datetime(dt: datetime) -> str:
    """Tanggal + jam gaya zh-CN: 2025/8/17 01:55:12."""
    return f"{format_locale_date(dt)} {dt:%H:%M:%S}"


def response_error_toast(status: str, message: str, http_status: int = 500):
    return jsonify(
        {"status": status, "message": message, "time": local_now_iso()}
    ), http_status
