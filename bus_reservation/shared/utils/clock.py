from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """現在時刻を返す"""
    return datetime.now()
