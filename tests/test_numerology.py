from datetime import date

import pytest

from numerology import NumerologyCalculator, NumerologyData


@pytest.fixture
def calculator():
    return NumerologyCalculator()


def test_life_path(calculator):
    # 1990 -> 19 -> 1, 1 + 1 + 1 = 3
    assert calculator.life_path_number(1990, 1, 1) == 3
    # 2000 -> 2, 2 + 1 + 8 = 11
    assert calculator.life_path_number(2000, 1, 8) == 11


def test_reduce_keeps_classic_masters(calculator):
    assert calculator.reduce_number(22) == 22
    assert calculator.reduce_number(44) == 8
    assert calculator.reduce_number(38) == 11


def test_name_numbers_latin(calculator):
    # Гласные и согласные считаются по верхнему регистру (A=1, N=5),
    # число судьбы по исходным символам: A=1, n и a по коду символа (3 и 8)
    assert calculator.soul_number('Anna') == 2
    assert calculator.destiny_number('Anna') == 6
    assert calculator.personality_number('Anna') == 1


def test_name_numbers_japanese_are_in_range(calculator):
    for name in ('さくら', 'サクラ', '山田 花子'):
        for number in (
            calculator.soul_number(name),
            calculator.destiny_number(name),
            calculator.personality_number(name),
        ):
            assert 1 <= number <= 9 or number in (11, 22, 33)


def test_calculate(calculator):
    result = calculator.calculate(
        NumerologyData(name='Anna', year=1990, month=1, day=1),
        today=date(2024, 3, 5),
    )

    assert result.life_path_number == 3
    assert result.maturity_number == 9
    assert set(result.interpretation) == {'lifePath', 'soul', 'destiny', 'personality', 'maturity'}


def test_daily_fortune(calculator):
    # seed = (3 + 5 + 3) % 10 + 1 = 2
    fortune = calculator.daily_fortune(3, date(2024, 3, 5))

    assert fortune.overall_luck == 2
    assert (fortune.love_luck, fortune.work_luck, fortune.health_luck) == (6, 8, 10)
    assert fortune.lucky_color == '青'
    assert fortune.lucky_number == 7
    assert fortune.warning_time == '午前中'
    assert fortune.advice.startswith('慎重に')


def test_empty_name_is_rejected():
    with pytest.raises(ValueError):
        NumerologyData(name='', year=1990, month=1, day=1)
