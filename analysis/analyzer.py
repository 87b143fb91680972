"""AI-анализ особых чисел с запасным локальным текстом"""
import logging
from typing import Callable, Optional

from .gemini_client import GeminiClient
from .models import AnalysisRequest
from .prompts import Persona, build_fallback_analysis, build_prompt

logger = logging.getLogger(__name__)


# Текст на случай, если не удался даже запасной анализ
ANALYSIS_APOLOGY = (
    "申し訳ございません。AI分析の生成中にエラーが発生しました。"
    "しばらく時間をおいて再度お試しください。"
)


class NumerologyAnalyzer:
    """Генератор текстового анализа по шести особым числам"""

    def __init__(self, api_key: Optional[str] = None,
                 model: str = "gemini-2.0-flash-exp",
                 base_url: str = "https://generativelanguage.googleapis.com/v1beta",
                 persona: Persona = Persona.WARM,
                 client_factory: Optional[Callable[[], GeminiClient]] = None):
        """
        Инициализация анализатора

        Args:
            api_key: Ключ Gemini; без ключа AI-анализ выключен
            persona: Тон промпта
            client_factory: Фабрика клиента (подменяется в тестах)
        """
        self.api_key = api_key
        self.persona = Persona(persona)
        self.client_factory = client_factory or (
            lambda: GeminiClient(api_key=api_key, model=model, base_url=base_url)
        )

    @classmethod
    def from_settings(cls, settings) -> "NumerologyAnalyzer":
        try:
            persona = Persona(settings.analysis_persona)
        except ValueError:
            logger.warning(f"Неизвестная персона {settings.analysis_persona!r}, используем warm")
            persona = Persona.WARM

        return cls(
            api_key=settings.gemini_api_key if settings.ai_enabled else None,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            persona=persona,
        )

    @property
    def ai_enabled(self) -> bool:
        return bool(self.api_key)

    async def analyze(self, request: AnalysisRequest) -> str:
        """Возвращает анализ от Gemini, а при любой ошибке провайдера запасной текст"""
        if not self.ai_enabled:
            logger.info("AI-анализ выключен в настройках, используем запасной анализ")
            return build_fallback_analysis(request)

        try:
            prompt = build_prompt(request, self.persona)
            async with self.client_factory() as client:
                return await client.generate(prompt)
        except Exception as e:
            logger.error(f"Ошибка AI-анализа: {e}")
            return build_fallback_analysis(request)
