"""Модуль расчета 369-нумерологии"""
from .calculator import MASTER_NUMBERS, Numerology369Calculator, reduce_number
from .interpretations import get_cosmic_rhythm, get_detailed_interpretation, interpret_number
from .models import (
    BirthDate, CosmicRhythm, Grid, LawCheckResult, NumberInterpretation,
    NumerologyGrid, Numerology369Reading, OuterRing, SpecialNumbers,
)

__all__ = [
    'MASTER_NUMBERS', 'Numerology369Calculator', 'reduce_number',
    'get_cosmic_rhythm', 'get_detailed_interpretation', 'interpret_number',
    'BirthDate', 'CosmicRhythm', 'Grid', 'LawCheckResult', 'NumberInterpretation',
    'NumerologyGrid', 'Numerology369Reading', 'OuterRing', 'SpecialNumbers',
]
