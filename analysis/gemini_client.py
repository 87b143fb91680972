"""Клиент Gemini API (generateContent)"""
import aiohttp
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


GENERATION_CONFIG = {
    'temperature': 0.7,
    'topK': 30,
    'topP': 0.9,
    'maxOutputTokens': 4096,
    'candidateCount': 1,
}

SAFETY_SETTINGS = [
    {'category': category, 'threshold': 'BLOCK_NONE'}
    for category in (
        'HARM_CATEGORY_HATE_SPEECH',
        'HARM_CATEGORY_SEXUALLY_EXPLICIT',
        'HARM_CATEGORY_DANGEROUS_CONTENT',
        'HARM_CATEGORY_HARASSMENT',
    )
]


class GeminiError(Exception):
    """Ошибка обращения к Gemini API"""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {
        'contents': [{'parts': [{'text': prompt}]}],
        'generationConfig': GENERATION_CONFIG,
        'safetySettings': SAFETY_SETTINGS,
    }


def extract_text(data: Any) -> str:
    """Достает текст первого кандидата из ответа Gemini"""
    try:
        candidate = data['candidates'][0]
        text = candidate['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError):
        logger.warning("Некорректная структура ответа Gemini")
        logger.debug(f"Полный ответ: {json.dumps(data, ensure_ascii=False)[:2000]}")
        raise GeminiError("Invalid response from Gemini")

    if not isinstance(text, str) or not text.strip():
        raise GeminiError("Invalid response from Gemini")

    finish_reason = candidate.get('finishReason')
    if finish_reason == 'MAX_TOKENS':
        logger.warning("Ответ Gemini обрезан по лимиту токенов")
    elif finish_reason == 'SAFETY':
        logger.warning("Ответ Gemini заблокирован фильтрами безопасности")

    return text.strip()


class GeminiClient:
    """Асинхронный клиент Gemini; одна сессия на вызов"""

    def __init__(self, api_key: str, model: str,
                 base_url: str = "https://generativelanguage.googleapis.com/v1beta"):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Асинхронный контекстный менеджер - вход"""
        # Таймаут не задаем: используется значение aiohttp по умолчанию
        self.session = aiohttp.ClientSession(headers={'Content-Type': 'application/json'})
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Асинхронный контекстный менеджер - выход"""
        if self.session:
            await self.session.close()

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Отправляет промпт и возвращает текст ответа"""
        if self.session is None:
            raise RuntimeError("GeminiClient должен использоваться через 'async with'")

        logger.info(f"Запрос к Gemini API, модель {self.model}")

        async with self.session.post(
            self.api_url,
            params={'key': self.api_key},
            json=build_request_body(prompt),
        ) as response:
            if response.status != 200:
                try:
                    error_data = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError):
                    error_data = {'message': 'Failed to parse error response'}
                logger.error(
                    f"Ошибка Gemini API: статус {response.status} {response.reason}, {error_data}"
                )
                raise GeminiError(f"Gemini API error: {response.status}", status=response.status)

            try:
                data = await response.json(content_type=None)
            except ValueError:
                raise GeminiError("Invalid response from Gemini")

        text = extract_text(data)
        logger.info(f"Получен анализ Gemini, длина {len(text)}")
        return text
