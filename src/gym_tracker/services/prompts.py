"""Prompt templates for the AI coach."""

import json

from ..models.workout import Session

ANALYSIS_PROMPT = """
Actúa como un entrenador personal experto de alto nivel.
Analiza mi historial reciente de entrenamientos en el gimnasio.

Aquí están mis últimos registros (en formato JSON):
{history}

Proporciona un análisis breve pero perspicaz (máximo 2 párrafos) sobre mi progreso.
1. Identifica si estoy aplicando sobrecarga progresiva (subiendo peso o repeticiones).
2. Si ves estancamiento, sugiere un cambio específico (ej. dropsets, cambio de rango de reps).
3. Mantén un tono motivador pero técnico.

Responde en Español y usa formato Markdown.
"""


def build_analysis_prompt(sessions: list[Session]) -> str:
    """Embed the given sessions as JSON in the coaching instructions.

    Args:
        sessions: Sessions to include, already limited and ordered

    Returns:
        Prompt text ready to send
    """
    history = json.dumps([s.to_dict() for s in sessions], ensure_ascii=False)
    return ANALYSIS_PROMPT.format(history=history)
