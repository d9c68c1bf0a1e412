"""Suggested exercises per workout day."""

from .workout import DayType

DEFAULT_EXERCISES: dict[DayType, list[str]] = {
    DayType.CHEST: [
        "Press de Banca Plano",
        "Press Inclinado con Mancuernas",
        "Aperturas (Flyes)",
        "Press Militar (Hombro)",
        "Elevaciones Laterales",
        "Extensiones de Tríceps",
    ],
    DayType.BACK: [
        "Dominadas (Pull-ups)",
        "Remo con Barra",
        "Jalón al Pecho",
        "Remo en Polea Baja",
        "Curl de Bíceps con Barra",
        "Curl Martillo",
    ],
    DayType.LEGS: [
        "Sentadilla (Squat)",
        "Prensa de Piernas",
        "Peso Muerto Rumano",
        "Extensiones de Cuádriceps",
        "Curl Femoral",
        "Elevación de Talones (Gemelos)",
    ],
}


def suggested_exercises(day_type: DayType) -> list[str]:
    """Get the suggested exercise names for a day type."""
    return list(DEFAULT_EXERCISES.get(DayType(day_type), []))
