from .cli import ReservationCli, main

__all__ = ["ReservationCli", "main"]
