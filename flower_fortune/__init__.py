"""Модуль цветочного гадания"""
from .calculator import FlowerFortuneCalculator, get_flower_name, get_trait_name
from .models import FlowerFortune, FlowerPersonality, FlowerType, TraitType

__all__ = [
    'FlowerFortuneCalculator', 'get_flower_name', 'get_trait_name',
    'FlowerFortune', 'FlowerPersonality', 'FlowerType', 'TraitType',
]
