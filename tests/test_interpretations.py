from numerology369 import (
    Numerology369Calculator, get_cosmic_rhythm, get_detailed_interpretation, interpret_number,
)


def test_known_numbers_have_full_interpretation():
    for number in (*range(1, 10), 11, 22, 33, 44):
        interpretation = get_detailed_interpretation(number)
        assert interpretation.title
        assert interpretation.essence
        assert interpretation.shadow_alchemy


def test_unknown_number_gets_placeholder():
    interpretation = get_detailed_interpretation(10)

    assert interpretation.title == "Number 10"
    assert interpretation.essence == ""
    assert interpretation.characteristics == ""
    assert interpretation.mission == ""
    assert interpretation.shadow == ""
    assert interpretation.growth_key == ""
    assert interpretation.shadow_alchemy == ""


def test_summary_fallback():
    assert interpret_number(3).startswith("創造の歓び")
    assert interpret_number(10) == "数字 10 の解釈"


def test_calculator_interpret_delegates():
    assert Numerology369Calculator().interpret(7) == get_detailed_interpretation(7)


def test_cosmic_rhythm_table():
    for number in (3, 6, 9):
        rhythm = get_cosmic_rhythm(number)
        assert rhythm.number == number
        assert rhythm.focus and rhythm.earth_mission and rhythm.caution

    assert get_cosmic_rhythm(5).description == ""
