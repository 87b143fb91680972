"""Модели запроса и ответа AI-анализа"""
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional

from numerology369.models import CosmicRhythm


REQUIRED_FIELDS = (
    'mainNumber', 'pastNumber', 'futureNumber',
    'spiritNumber', 'higherPurposeNumber', 'higherGoalNumber',
)


class AnalysisRequestError(ValueError):
    """Отсутствует или некорректно обязательное поле запроса"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing or invalid field: {field}")


class AnalysisRequest(BaseModel):
    """Особые числа (и, опционально, космический ритм) для анализа"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    main_number: int
    past_number: int
    future_number: int
    spirit_number: int
    higher_purpose_number: int
    higher_goal_number: int
    cosmic_rhythm: Optional[CosmicRhythm] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "AnalysisRequest":
        """Проверяет тело запроса и строит модель.

        Каждое обязательное поле должно быть числом (bool не считается).
        """
        if not isinstance(payload, dict):
            raise AnalysisRequestError(REQUIRED_FIELDS[0])

        data: Dict[str, Any] = dict(payload)
        for field in REQUIRED_FIELDS:
            value = data.get(field)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise AnalysisRequestError(field)
            if isinstance(value, float):
                if not value.is_integer():
                    raise AnalysisRequestError(field)
                data[field] = int(value)

        if not isinstance(data.get('cosmicRhythm'), dict):
            data['cosmicRhythm'] = None

        try:
            return cls.model_validate(data)
        except ValidationError:
            # Обязательные поля уже проверены, значит сломан cosmicRhythm
            raise AnalysisRequestError('cosmicRhythm')


class AnalysisResponse(BaseModel):
    analysis: str
    timestamp: str
