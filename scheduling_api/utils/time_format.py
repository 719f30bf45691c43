"""시각 문자열 변환 유틸리티.

HH:MM time-of-day parsing and formatting helpers shared by service
order execution windows and employee work schedules.
"""

import re
from datetime import time

# 24시간제 HH:MM — 00:00 ~ 23:59
_HHMM = re.compile(r"([01]\d|2[0-3]):([0-5]\d)")


def parse_hhmm(value: str) -> time | None:
    """'HH:MM' 문자열을 time으로 변환합니다. 형식이 틀리면 None.

    Parse a strict 24-hour 'HH:MM' string. Returns None when malformed.
    """
    match = _HHMM.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        return None
    return time(int(match.group(1)), int(match.group(2)))


def format_hhmm(value: time) -> str:
    """time을 'HH:MM' 문자열로 변환합니다."""
    return value.strftime("%H:%M")
