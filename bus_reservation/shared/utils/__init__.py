from .clock import Clock, system_clock
from .logger import get_logger

__all__ = ["Clock", "system_clock", "get_logger"]
