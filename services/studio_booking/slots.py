# Grille fixe des créneaux horaires du studio ("HH:00").
from typing import List


def hour_grid(open_hour: int, close_hour: int) -> List[str]:
    """Créneaux d'une heure de open_hour (inclus) à close_hour (exclu)."""
    if open_hour >= close_hour:
        raise ValueError(f"open hour {open_hour} must be before close hour {close_hour}")
    return [f"{h:02d}:00" for h in range(open_hour, close_hour)]


def next_hour(hhmm: str) -> str:
    return f"{int(hhmm[:2]) + 1:02d}:00"
