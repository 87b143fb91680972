from datetime import date

import pytest

from flower_fortune import (
    FlowerFortuneCalculator, FlowerType, TraitType, get_flower_name, get_trait_name,
)


@pytest.fixture
def calculator():
    return FlowerFortuneCalculator()


def test_flower_and_trait_for_1990_01_01(calculator):
    fortune = calculator.calculate(date(1990, 1, 1))

    # 1992 % 12 = 0, 1991 % 5 = 1
    assert fortune.flower.type == FlowerType.SAKURA
    assert fortune.flower.name == '桜'
    assert fortune.trait == TraitType.GENTLE
    assert fortune.personality.title == '優しい桜'


def test_luck_for_1990_01_01(calculator):
    luck = calculator.calculate(date(1990, 1, 1)).luck

    assert luck.love == 1
    assert luck.money == 4
    assert luck.career == 5


def test_luck_is_between_one_and_five(calculator):
    for year in (1950, 1987, 2003):
        for month in range(1, 13):
            luck = calculator.calculate(date(year, month, 15)).luck
            assert all(1 <= value <= 5 for value in (luck.love, luck.money, luck.career))


def test_personality_combines_base_and_modifier(calculator):
    personality = calculator.get_personality(FlowerType.ROSE, TraitType.MYSTIC)

    assert personality.title == get_trait_name(TraitType.MYSTIC) + get_flower_name(FlowerType.ROSE)
    assert len(personality.strengths) >= 2
    assert personality.compatible_flowers


def test_traits_are_first_three_strengths(calculator):
    fortune = calculator.calculate(date(1975, 6, 20))

    assert fortune.traits == fortune.personality.strengths[:3]
    assert fortune.description == fortune.personality.basic_character


def test_dump_uses_camel_case(calculator):
    dump = calculator.calculate(date(1990, 1, 1)).model_dump(by_alias=True, mode='json')

    assert dump['flower']['type'] == 'sakura'
    assert dump['trait'] == 'gentle'
    assert 'basicCharacter' in dump['personality']
    assert 'compatibleFlowers' in dump['personality']
