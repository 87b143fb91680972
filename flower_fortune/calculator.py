"""Калькулятор цветочного гадания (60 характеров)"""
from datetime import date
from typing import Union

from numerology369.models import BirthDate
from .models import Flower, FlowerFortune, FlowerPersonality, FlowerType, Luck, TraitType
from .personalities import (
    BASE_PERSONALITIES, FLOWER_EMOJIS, FLOWER_NAMES, FLOWER_ORDER,
    TRAIT_MODIFIERS, TRAIT_NAMES, TRAIT_ORDER,
)


def get_flower_name(flower: FlowerType) -> str:
    return FLOWER_NAMES[flower]


def get_trait_name(trait: TraitType) -> str:
    return TRAIT_NAMES[trait]


class FlowerFortuneCalculator:
    """Класс для расчета цветочного гадания"""

    def calculate(self, birth_date: Union[BirthDate, date]) -> FlowerFortune:
        """Определяет цветок, особенность и удачу по дате рождения"""
        year, month, day = birth_date.year, birth_date.month, birth_date.day

        flower_type = FLOWER_ORDER[(year + month + day) % len(FLOWER_ORDER)]
        trait = TRAIT_ORDER[(year * month + day) % len(TRAIT_ORDER)]

        personality = self.get_personality(flower_type, trait)

        luck = Luck(
            love=(year + month * 2 + day * 3) % 5 + 1,
            money=(year * 2 + month + day * 2) % 5 + 1,
            career=(year + month * 3 + day) % 5 + 1,
        )

        return FlowerFortune(
            flower=Flower(
                type=flower_type,
                name=FLOWER_NAMES[flower_type],
                emoji=FLOWER_EMOJIS[flower_type],
            ),
            trait=trait,
            personality=personality,
            traits=personality.strengths[:3],
            description=personality.basic_character,
            luck=luck,
        )

    def get_personality(self, flower: FlowerType, trait: TraitType) -> FlowerPersonality:
        """Характер цветка с учетом особенности"""
        base = BASE_PERSONALITIES[flower]
        modifier = TRAIT_MODIFIERS[trait]

        return FlowerPersonality(
            title=f"{TRAIT_NAMES[trait]}{FLOWER_NAMES[flower]}",
            basic_character=f"{base['basic_character']} {modifier['character_modifier']}",
            strengths=[*base['strengths'], modifier['additional_strength']],
            weaknesses=[*base['weaknesses'], modifier['additional_weakness']],
            love_style=f"{base['love_style']} {modifier['love_modifier']}",
            work_style=f"{base['work_style']} {modifier['work_modifier']}",
            communication=f"{base['communication']} {modifier['communication_modifier']}",
            advice=f"{base['advice']} {modifier['advice']}",
            compatible_flowers=list(base['compatible_flowers']),
            emoji=FLOWER_EMOJIS[flower],
        )
