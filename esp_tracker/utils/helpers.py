"""工具函数模块

包含日期/时间归一化等常用的工具函数
"""

from datetime import date, datetime, timedelta
from typing import Tuple


def normalize_production_date(value):
    """将生产日期归一化为纯日历日期，丢弃调用方提供的时间部分

    支持 date、datetime 以及 "2025-07-16" / "2025-07-16T08:30:00" 形式的字符串；
    其他类型原样返回，交给校验层报错。
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        for sep in ("T", " "):
            if sep in text:
                text = text.split(sep, 1)[0]
                break
        return date.fromisoformat(text)
    return value


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """返回某日的 [00:00, 次日00:00) 时间区间"""
    start = datetime.combine(day, datetime.min.time())
    return start, start + timedelta(days=1)


def format_time_window(start_time, end_time) -> str:
    """将时间窗口格式化为 HH:MM-HH:MM"""
    if not start_time or not end_time:
        return '—'
    return f"{start_time.strftime('%H:%M')}-{end_time.strftime('%H:%M')}"
