"""Конфигурация приложения"""
from pydantic_settings import BaseSettings
from typing import Dict, List, Optional
import os


class Settings(BaseSettings):
    """Настройки приложения"""

    # Gemini (AI-анализ)
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash-exp"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Персона для промпта: formal, playful или warm
    analysis_persona: str = "warm"

    # Окружение: development, production, test
    app_env: str = "development"

    # Railway/Production (Railway устанавливает это как строку 'production')
    railway_environment: Optional[str] = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Application
    debug: bool = False

    @property
    def ai_enabled(self) -> bool:
        """Включен ли AI-анализ (есть ли ключ Gemini)"""
        return bool(self.gemini_api_key and self.gemini_api_key.strip())

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production" or self.railway_environment == "production"

    def diagnose(self) -> Dict[str, object]:
        """Диагностика настроек (для /health)"""
        issues: List[str] = []
        recommendations: List[str] = []

        if self.analysis_persona not in ("formal", "playful", "warm"):
            issues.append(f"Неизвестная персона анализа: {self.analysis_persona}")
            recommendations.append("ANALYSIS_PERSONA должна быть formal, playful или warm")

        if self.is_production and not self.ai_enabled:
            recommendations.append("Для включения AI-анализа задайте GEMINI_API_KEY")

        if self.debug and not self.is_development:
            recommendations.append("Отключите DEBUG вне development: в ответах видны тексты ошибок")

        return {
            "is_healthy": not issues,
            "issues": issues,
            "recommendations": recommendations,
        }

    class Config:
        # Для Railway используем переменные окружения напрямую
        env_file = ".env" if not os.getenv("RAILWAY_ENVIRONMENT") else None
        case_sensitive = False
        # Игнорируем неизвестные поля из окружения Railway
        extra = "ignore"


settings = Settings()
