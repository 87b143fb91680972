"""Модели данных для цветочного гадания"""
from enum import Enum
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List


class FlowerType(str, Enum):
    SAKURA = "sakura"
    SUNFLOWER = "sunflower"
    ROSE = "rose"
    LOTUS = "lotus"
    LILY = "lily"
    LAVENDER = "lavender"
    CAMELLIA = "camellia"
    PEONY = "peony"
    JASMINE = "jasmine"
    IRIS = "iris"
    DAHLIA = "dahlia"
    COSMOS = "cosmos"


class TraitType(str, Enum):
    PASSIONATE = "passionate"
    GENTLE = "gentle"
    ELEGANT = "elegant"
    WILD = "wild"
    MYSTIC = "mystic"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Flower(_CamelModel):
    type: FlowerType
    name: str
    emoji: str


class FlowerPersonality(_CamelModel):
    """Характер: базовый цветок + модификатор особенности"""
    title: str
    basic_character: str
    strengths: List[str]
    weaknesses: List[str]
    love_style: str
    work_style: str
    communication: str
    advice: str
    compatible_flowers: List[str]
    emoji: str


class Luck(_CamelModel):
    """Удача по сферам, от 1 до 5"""
    love: int
    money: int
    career: int


class FlowerFortune(_CamelModel):
    """Результат цветочного гадания"""
    flower: Flower
    trait: TraitType
    personality: FlowerPersonality
    traits: List[str]
    description: str
    luck: Luck
