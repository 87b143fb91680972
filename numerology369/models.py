"""Модели данных для 369-нумерологии"""
from datetime import date
from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    """Базовая модель: snake_case в Python, camelCase в JSON"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BirthDate(CamelModel):
    """Входные данные: дата рождения как последовательность цифр.

    Календарная корректность не проверяется (31 апреля допустимо),
    важны только цифры.
    """
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @classmethod
    def from_date(cls, value: date) -> "BirthDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def digits(self) -> str:
        """Все цифры года, месяца и дня подряд"""
        return f"{self.year}{self.month}{self.day}"


class Grid(CamelModel):
    """Квадрат 3x3"""
    top_left: int
    top: int
    top_right: int
    left: int
    center: int
    right: int
    bottom_left: int
    bottom: int
    bottom_right: int


class OuterRing(CamelModel):
    """Внешние 8 чисел"""
    left_left_top: int
    left_left_middle: int
    left_left_bottom: int
    top_bar: int
    right_right_top: int
    right_right_middle: int
    right_right_bottom: int
    bottom_bar: int


class SpecialNumbers(CamelModel):
    """Особые числа (псевдонимы ячеек сетки)"""
    main_number: int
    past_number: int
    future_number: int
    spirit_number: int
    higher_purpose_number: int
    higher_goal_number: int


class NumerologyGrid(CamelModel):
    """Результат расчета: 17 чисел"""
    grid: Grid
    outer: OuterRing

    @computed_field(alias="specialNumbers")
    @property
    def special_numbers(self) -> SpecialNumbers:
        # Всегда пересчитывается из сетки
        return SpecialNumbers(
            main_number=self.grid.center,
            past_number=self.grid.left,
            future_number=self.grid.right,
            spirit_number=self.grid.bottom,
            higher_purpose_number=self.outer.top_bar,
            higher_goal_number=self.outer.bottom_bar,
        )


class CosmicRhythm(CamelModel):
    """Энергия космического ритма 369"""
    number: int
    focus: str = ""
    action: str = ""
    description: str = ""
    earth_mission: str = ""
    starting_point: str = ""
    caution: str = ""


class LawCheckResult(CamelModel):
    """Результат проверки закона 369"""
    outer_sum: int
    diagonal_sums: List[int]
    is_valid: bool
    higher_dimension_sum: int
    cosmic_rhythm: CosmicRhythm


class NumberInterpretation(CamelModel):
    """Подробная интерпретация числа"""
    title: str
    essence: str = ""
    characteristics: str = ""
    mission: str = ""
    shadow: str = ""
    growth_key: str = ""
    shadow_alchemy: str = ""


class Numerology369Reading(CamelModel):
    """Полный результат для одной даты: сетка и проверка закона"""
    birth_date: BirthDate
    grid: NumerologyGrid
    law: LawCheckResult
