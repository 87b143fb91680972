import itertools
from datetime import date

import pytest

from numerology369 import (
    BirthDate, Numerology369Calculator, NumerologyGrid, reduce_number,
)

MASTERS = {11, 22, 33, 44}


@pytest.fixture
def calculator():
    return Numerology369Calculator()


def test_reduce_number_plain():
    assert reduce_number(7) == 7
    assert reduce_number(29) == 2
    assert reduce_number(99) == 9
    assert reduce_number(0) == 0


def test_reduce_number_keeps_masters_when_allowed():
    assert reduce_number(44, allow_master=True) == 44
    assert reduce_number(29, allow_master=True) == 11
    assert reduce_number(38, allow_master=True) == 11
    assert reduce_number(99, allow_master=True) == 9
    assert reduce_number(44) == 8


def test_reduce_number_terminates_in_single_digit():
    for n in range(1, 2000):
        assert 1 <= reduce_number(n) <= 9


def test_golden_vector_1990_01_01(calculator):
    result = calculator.calculate(BirthDate(year=1990, month=1, day=1))
    g, o = result.grid, result.outer

    assert (g.top_left, g.top, g.top_right) == (1, 9, 2)
    assert (g.left, g.center, g.right) == (1, 3, 2)
    assert (g.bottom_left, g.bottom, g.bottom_right) == (7, 6, 8)

    assert (o.left_left_top, o.left_left_middle, o.left_left_bottom) == (2, 8, 5)
    assert (o.right_right_top, o.right_right_middle, o.right_right_bottom) == (4, 1, 7)
    assert o.top_bar == 3
    assert o.bottom_bar == 6


def test_master_number_in_center(calculator):
    # 2+0+0+0+1+8 = 11
    result = calculator.calculate(BirthDate(year=2000, month=1, day=8))
    g, o = result.grid, result.outer

    assert g.center == 11
    assert (g.left, g.right, g.bottom, g.top) == (8, 9, 1, 3)
    assert (g.top_left, g.top_right, g.bottom_left, g.bottom_right) == (2, 3, 9, 1)
    assert (o.left_left_middle, o.right_right_middle) == (2, 4)
    assert (o.top_bar, o.bottom_bar) == (5, 1)
    assert (o.left_left_top, o.left_left_bottom) == (7, 3)
    assert (o.right_right_top, o.right_right_bottom) == (9, 5)


def test_accepts_plain_date(calculator):
    assert calculator.calculate(date(1990, 1, 1)) == calculator.calculate(
        BirthDate(year=1990, month=1, day=1)
    )


def test_calculate_is_deterministic(calculator):
    birth = BirthDate(year=1985, month=12, day=24)
    assert calculator.calculate(birth) == calculator.calculate(birth)


def test_cell_ranges(calculator):
    years = (1, 1900, 1958, 1999, 2024, 9999)
    for year, month, day in itertools.product(years, range(1, 13), (1, 9, 15, 29, 31)):
        result = calculator.calculate(BirthDate(year=year, month=month, day=day))
        dump = result.model_dump()
        for name, value in {**dump['grid'], **dump['outer']}.items():
            if name in ('center', 'top_bar', 'bottom_bar'):
                assert 1 <= value <= 9 or value in MASTERS
            else:
                assert 1 <= value <= 9


def test_impossible_calendar_date_is_accepted(calculator):
    result = calculator.calculate(BirthDate(year=2001, month=4, day=31))
    assert isinstance(result, NumerologyGrid)


def test_birth_date_rejects_out_of_range_month():
    with pytest.raises(ValueError):
        BirthDate(year=1990, month=13, day=1)


def test_special_numbers_alias_grid_cells(calculator):
    result = calculator.calculate(BirthDate(year=1990, month=1, day=1))
    special = result.special_numbers

    assert special.main_number == result.grid.center == 3
    assert special.past_number == result.grid.left == 1
    assert special.future_number == result.grid.right == 2
    assert special.spirit_number == result.grid.bottom == 6
    assert special.higher_purpose_number == result.outer.top_bar == 3
    assert special.higher_goal_number == result.outer.bottom_bar == 6


def test_special_numbers_follow_grid_updates(calculator):
    result = calculator.calculate(BirthDate(year=1990, month=1, day=1))
    changed = result.model_copy(update={'grid': result.grid.model_copy(update={'center': 22})})
    assert changed.special_numbers.main_number == 22


def test_camel_case_dump(calculator):
    dump = calculator.calculate(BirthDate(year=1990, month=1, day=1)).model_dump(by_alias=True)

    assert set(dump) == {'grid', 'outer', 'specialNumbers'}
    assert dump['grid']['topLeft'] == 1
    assert dump['outer']['leftLeftTop'] == 2
    assert dump['outer']['topBar'] == 3
    assert dump['specialNumbers'] == {
        'mainNumber': 3,
        'pastNumber': 1,
        'futureNumber': 2,
        'spiritNumber': 6,
        'higherPurposeNumber': 3,
        'higherGoalNumber': 6,
    }


def test_read_bundles_grid_and_law(calculator):
    reading = calculator.read(date(1990, 1, 1))
    assert reading.birth_date == BirthDate(year=1990, month=1, day=1)
    assert reading.grid.grid.center == 3
    assert reading.law.higher_dimension_sum == 9
