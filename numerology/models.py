"""Модели данных классической нумерологии"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, Optional


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NumerologyData(_CamelModel):
    """Входные данные: имя и дата рождения"""
    name: str = Field(min_length=1)
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


class DailyFortune(_CamelModel):
    """Удача на день"""
    overall_luck: int  # 1-10
    love_luck: int
    work_luck: int
    health_luck: int
    lucky_color: str
    lucky_number: int
    advice: str
    warning_time: str


class NumerologyResult(_CamelModel):
    """Результат классической нумерологии"""
    life_path_number: int
    soul_number: int
    destiny_number: int
    personality_number: int
    maturity_number: int

    # Интерпретации: lifePath, soul, destiny, personality, maturity
    interpretation: Dict[str, str]

    daily_fortune: Optional[DailyFortune] = None
