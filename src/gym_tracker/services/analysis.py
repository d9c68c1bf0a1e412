"""AI coach analysis of recent workouts."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from google import genai

from ..models.workout import Session
from .metrics import recent_sessions
from .prompts import build_analysis_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
HISTORY_LIMIT = 10

NO_CREDENTIALS_MESSAGE = (
    "API Key no configurada. Por favor configura tu API Key para recibir consejos."
)
FAILED_MESSAGE = "Hubo un error al conectar con el entrenador IA. Inténtalo más tarde."
EMPTY_MESSAGE = "No se pudo generar un análisis en este momento."
BUSY_MESSAGE = "Ya hay un análisis en curso. Espera a que termine."


class AnalysisStatus(str, Enum):
    """Outcome of an analysis request."""

    OK = "ok"
    NO_CREDENTIALS = "no_credentials"
    FAILED = "failed"
    EMPTY = "empty"
    BUSY = "busy"


@dataclass(frozen=True)
class AnalysisResult:
    """Text shown to the user plus how it was obtained."""

    text: str
    status: AnalysisStatus

    @property
    def ok(self) -> bool:
        return self.status == AnalysisStatus.OK

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict:
        return {"text": self.text, "status": self.status.value}


class ProgressAnalyzer:
    """Asks a Gemini model for a short coaching summary.

    One attempt per call, no retries. While a request is pending, further
    calls on the same analyzer return a BUSY result without contacting the
    service.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        history_limit: int = HISTORY_LIMIT,
        client: genai.Client | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.history_limit = history_limit
        self._client = client
        self._in_flight = False

    @property
    def busy(self) -> bool:
        return self._in_flight

    def _get_client(self) -> genai.Client | None:
        if self._client is None and self.api_key:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def analyze(self, sessions: Iterable[Session]) -> AnalysisResult:
        """Summarize progress over the most recent sessions.

        Args:
            sessions: Session history; a snapshot is taken before any await

        Returns:
            AnalysisResult with the model's Markdown text or a fallback message
        """
        if self._in_flight:
            return AnalysisResult(BUSY_MESSAGE, AnalysisStatus.BUSY)

        snapshot = recent_sessions(list(sessions), self.history_limit)

        client = self._get_client()
        if client is None:
            return AnalysisResult(NO_CREDENTIALS_MESSAGE, AnalysisStatus.NO_CREDENTIALS)

        prompt = build_analysis_prompt(snapshot)
        self._in_flight = True
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception:
            logger.exception("Analysis request to %s failed", self.model)
            return AnalysisResult(FAILED_MESSAGE, AnalysisStatus.FAILED)
        finally:
            self._in_flight = False

        text = response.text
        if not text or not text.strip():
            logger.warning("Analysis response from %s had no text", self.model)
            return AnalysisResult(EMPTY_MESSAGE, AnalysisStatus.EMPTY)

        logger.info("Analysis generated from %d session(s)", len(snapshot))
        return AnalysisResult(text, AnalysisStatus.OK)
