"""
日期工具函数
输入可以是 datetime/date、毫秒时间戳或日期字符串，统一按本地时间（naive datetime）处理
"""

from __future__ import annotations

import calendar
import math
import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..config.defaults import DATE_DEFAULT_FORMAT, DATE_SHORT_FORMAT
from ..core.types import DateInput

# 非 ISO 格式的字符串按顺序尝试
_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%d %b %Y",
)

_TOKEN_RE = re.compile(r'YYYY|MM|DD|HH|mm|ss|SSS')

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def _invalid() -> ValueError:
    return ValueError("Invalid date")


def _parse_string(text: str) -> datetime:
    text = text.strip()
    if not text:
        raise _invalid()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise _invalid()


def to_datetime(value: DateInput) -> datetime:
    """把各种日期输入转换为本地 naive datetime

    Raises:
        ValueError: 无法解析（消息为 "Invalid date"）
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time())
    elif isinstance(value, bool):
        raise _invalid()
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise _invalid()
        try:
            result = datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError) as e:
            raise _invalid() from e
    elif isinstance(value, str):
        result = _parse_string(value)
    else:
        raise _invalid()

    if result.tzinfo is not None:
        result = result.astimezone().replace(tzinfo=None)
    return result


def _try_datetime(value: DateInput) -> Optional[datetime]:
    try:
        return to_datetime(value)
    except ValueError:
        return None


def format_date(value: DateInput, fmt: str = DATE_DEFAULT_FORMAT) -> str:
    """按 YYYY/MM/DD/HH/mm/ss/SSS 占位符格式化"""
    d = to_datetime(value)
    tokens = {
        'YYYY': f"{d.year:04d}",
        'MM': f"{d.month:02d}",
        'DD': f"{d.day:02d}",
        'HH': f"{d.hour:02d}",
        'mm': f"{d.minute:02d}",
        'ss': f"{d.second:02d}",
        'SSS': f"{d.microsecond // 1000:03d}",
    }
    return _TOKEN_RE.sub(lambda m: tokens[m.group(0)], fmt)


def days_between(first: DateInput, second: DateInput) -> int:
    """天数差（向上取整），first 晚于 second 时为正"""
    diff = to_datetime(first) - to_datetime(second)
    return math.ceil(diff.total_seconds() / _DAY)


def is_today(value: DateInput) -> bool:
    d = _try_datetime(value)
    return d is not None and d.date() == date.today()


def is_yesterday(value: DateInput) -> bool:
    d = _try_datetime(value)
    return d is not None and d.date() == date.today() - timedelta(days=1)


def start_of_day(value: DateInput) -> datetime:
    """当天 00:00:00.000"""
    return datetime.combine(to_datetime(value).date(), time.min)


def end_of_day(value: DateInput) -> datetime:
    """当天 23:59:59.999"""
    return datetime.combine(to_datetime(value).date(), time(23, 59, 59, 999000))


def add_days(value: DateInput, days: int) -> datetime:
    return to_datetime(value) + timedelta(days=days)


def add_months(value: DateInput, months: int) -> datetime:
    """增加月份，日期超出目标月份天数时取该月最后一天"""
    d = to_datetime(value)
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return d.replace(year=year, month=month, day=day)


def get_relative_time(value: DateInput, base: Optional[DateInput] = None) -> str:
    """相对时间描述：刚刚 / N分钟前 / N小时前 / N天前，超过一周返回日期"""
    d = to_datetime(value)
    base_dt = to_datetime(base) if base is not None else datetime.now()

    diff_secs = math.floor((base_dt - d).total_seconds())
    diff_mins = diff_secs // _MINUTE
    diff_hours = diff_secs // _HOUR
    diff_days = diff_secs // _DAY

    if diff_secs < _MINUTE:
        return "刚刚"
    if diff_mins < 60:
        return f"{diff_mins}分钟前"
    if diff_hours < 24:
        return f"{diff_hours}小时前"
    if diff_days < 7:
        return f"{diff_days}天前"
    return format_date(d, DATE_SHORT_FORMAT)
