"""Калькулятор 369-нумерологии (магический квадрат из 17 чисел)"""
from datetime import date
from typing import Union

from .interpretations import get_cosmic_rhythm, get_detailed_interpretation
from .models import (
    BirthDate, Grid, LawCheckResult, NumberInterpretation,
    NumerologyGrid, Numerology369Reading, OuterRing,
)


# Мастер-числа
MASTER_NUMBERS = (11, 22, 33, 44)

# Допустимые диагональные суммы
LAW_NUMBERS = (3, 6, 9)


def reduce_number(number: int, allow_master: bool = False) -> int:
    """Редуцирует число до однозначного.

    При allow_master мастер-числа (11, 22, 33, 44) сохраняются, причем
    проверка идет и до редукции, и после каждого шага.
    """
    if allow_master and number in MASTER_NUMBERS:
        return number

    while number > 9:
        number = sum(int(digit) for digit in str(number))
        if allow_master and number in MASTER_NUMBERS:
            return number

    return number


class Numerology369Calculator:
    """Класс для расчета 369-нумерологии"""

    def calculate(self, birth_date: Union[BirthDate, date]) -> NumerologyGrid:
        """Строит сетку из 17 чисел по дате рождения"""
        if isinstance(birth_date, date):
            birth_date = BirthDate.from_date(birth_date)

        day = birth_date.day
        month = birth_date.month

        digit_sum = sum(int(digit) for digit in birth_date.digits())

        # Центральный крест
        center = reduce_number(digit_sum, allow_master=True)
        left = reduce_number(day)
        right = reduce_number(month + day)
        bottom = reduce_number(left + center + right)
        top = reduce_number(center + bottom)

        # Углы
        top_left = reduce_number(top + left)
        top_right = reduce_number(top + right)
        bottom_left = reduce_number(left + bottom)
        bottom_right = reduce_number(right + bottom)

        # Внешний ряд: сначала середины и планки, потом углы
        left_left_middle = reduce_number(top_left + bottom_left)
        right_right_middle = reduce_number(top_right + bottom_right)
        top_bar = reduce_number(top_left + top_right, allow_master=True)
        bottom_bar = reduce_number(bottom_left + bottom_right, allow_master=True)

        left_left_top = reduce_number(left_left_middle + top_bar)
        left_left_bottom = reduce_number(left_left_middle + bottom_bar)
        right_right_top = reduce_number(right_right_middle + top_bar)
        right_right_bottom = reduce_number(right_right_middle + bottom_bar)

        return NumerologyGrid(
            grid=Grid(
                top_left=top_left,
                top=top,
                top_right=top_right,
                left=left,
                center=center,
                right=right,
                bottom_left=bottom_left,
                bottom=bottom,
                bottom_right=bottom_right,
            ),
            outer=OuterRing(
                left_left_top=left_left_top,
                left_left_middle=left_left_middle,
                left_left_bottom=left_left_bottom,
                top_bar=top_bar,
                right_right_top=right_right_top,
                right_right_middle=right_right_middle,
                right_right_bottom=right_right_bottom,
                bottom_bar=bottom_bar,
            ),
        )

    def check_law(self, grid: NumerologyGrid) -> LawCheckResult:
        """Проверяет закон 369 и подбирает космический ритм"""
        outer = grid.outer

        outer_sum = reduce_number(
            outer.left_left_top + outer.left_left_middle + outer.left_left_bottom
            + outer.top_bar + outer.bottom_bar
            + outer.right_right_top + outer.right_right_middle + outer.right_right_bottom
        )

        diagonal_sums = [
            reduce_number(outer.left_left_top + outer.right_right_bottom),
            reduce_number(outer.left_left_bottom + outer.right_right_top),
            reduce_number(outer.top_bar + outer.bottom_bar),
            reduce_number(outer.left_left_middle + outer.right_right_middle),
        ]

        is_valid = outer_sum == 9 and all(s in LAW_NUMBERS for s in diagonal_sums)

        special = grid.special_numbers
        higher_dimension_sum = reduce_number(
            special.higher_purpose_number + special.higher_goal_number
        )

        return LawCheckResult(
            outer_sum=outer_sum,
            diagonal_sums=diagonal_sums,
            is_valid=is_valid,
            higher_dimension_sum=higher_dimension_sum,
            cosmic_rhythm=get_cosmic_rhythm(higher_dimension_sum),
        )

    def read(self, birth_date: Union[BirthDate, date]) -> Numerology369Reading:
        """Полный расчет: сетка + проверка закона"""
        if isinstance(birth_date, date):
            birth_date = BirthDate.from_date(birth_date)
        grid = self.calculate(birth_date)
        return Numerology369Reading(
            birth_date=birth_date,
            grid=grid,
            law=self.check_law(grid),
        )

    def interpret(self, number: int) -> NumberInterpretation:
        return get_detailed_interpretation(number)
