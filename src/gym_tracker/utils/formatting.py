"""Date and number formatting for display (Spanish locale)."""

from datetime import datetime

from ..models.workout import to_utc

MONTHS = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]
WEEKDAYS = ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"]


def format_short_date(value: datetime) -> str:
    """Format as two-digit day and abbreviated month, e.g. ``08 ene``."""
    value = to_utc(value)
    return f"{value.day:02d} {MONTHS[value.month - 1][:3]}"


def format_long_date(value: datetime) -> str:
    """Format as e.g. ``lunes, 8 de enero de 2024``."""
    value = to_utc(value)
    weekday = WEEKDAYS[value.weekday()]
    return f"{weekday}, {value.day} de {MONTHS[value.month - 1]} de {value.year}"


def format_weight(weight: float | None) -> str:
    """Format a weight in kg, dropping a trailing ``.0``."""
    if weight is None:
        return "-"
    if float(weight).is_integer():
        return f"{int(weight)} kg"
    return f"{weight:g} kg"
