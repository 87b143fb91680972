"""Модуль классической нумерологии"""
from .calculator import NumerologyCalculator
from .models import DailyFortune, NumerologyData, NumerologyResult

__all__ = ['NumerologyCalculator', 'DailyFortune', 'NumerologyData', 'NumerologyResult']
