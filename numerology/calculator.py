"""Калькулятор классической нумерологии (путь жизни, числа имени)"""
import re
from datetime import date
from typing import Dict, Optional

from .interpretations import (
    interpret_destiny, interpret_life_path, interpret_maturity,
    interpret_personality, interpret_soul,
)
from .models import DailyFortune, NumerologyData, NumerologyResult


class NumerologyCalculator:
    """Класс для расчета классических нумерологических чисел"""

    # Мастер-числа
    MASTER_NUMBERS = [11, 22, 33]

    VOWELS = set('AEIOU') | set('あいうえお') | set('アイウエオ')

    # Латиница, хирагана, катакана, кандзи
    LETTER_PATTERN = re.compile(r'[A-Z\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]')

    # Пифагорейская таблица
    ENGLISH_MAP: Dict[str, int] = {
        'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8, 'I': 9,
        'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'O': 6, 'P': 7, 'Q': 8, 'R': 9,
        'S': 1, 'T': 2, 'U': 3, 'V': 4, 'W': 5, 'X': 6, 'Y': 7, 'Z': 8,
    }

    LUCKY_COLORS = ['赤', '青', '黄', '緑', '紫', '白', 'ピンク', 'オレンジ', '金', '銀']
    WARNING_TIMES = ['早朝', '午前中', '昼頃', '午後', '夕方', '夜']

    def reduce_number(self, number: int) -> int:
        """Редуцирует число до однозначного (кроме мастер-чисел 11, 22, 33)"""
        while number > 9 and number not in self.MASTER_NUMBERS:
            number = sum(int(digit) for digit in str(number))
        return number

    def _char_to_number(self, char: str) -> int:
        """Преобразует символ в число.

        Латиница по пифагорейской таблице, японские символы и прочее
        по коду символа.
        """
        if char in self.ENGLISH_MAP:
            return self.ENGLISH_MAP[char]

        code = ord(char)
        if 0x3040 <= code <= 0x309F:  # хирагана
            return (code - 0x3040) % 9 + 1
        if 0x30A0 <= code <= 0x30FF:  # катакана
            return (code - 0x30A0) % 9 + 1
        if 0x4E00 <= code <= 0x9FAF:  # кандзи
            return (code - 0x4E00) % 9 + 1
        return code % 9 + 1

    def life_path_number(self, year: int, month: int, day: int) -> int:
        """Число пути жизни"""
        total = self.reduce_number(year) + self.reduce_number(month) + self.reduce_number(day)
        if total in self.MASTER_NUMBERS:
            return total
        return self.reduce_number(total)

    def soul_number(self, name: str) -> int:
        """Число души (по гласным)"""
        total = sum(self._char_to_number(char) for char in name.upper() if char in self.VOWELS)

        # Гласных нет: половина суммы всех символов
        if total == 0 and name:
            total = sum(self._char_to_number(char) for char in name) // 2

        return self.reduce_number(total) if total > 0 else 1

    def destiny_number(self, full_name: str) -> int:
        """Число судьбы (все символы полного имени)"""
        clean_name = re.sub(r'\s', '', full_name)
        total = sum(self._char_to_number(char) for char in clean_name)
        return self.reduce_number(total) if total > 0 else 1

    def personality_number(self, name: str) -> int:
        """Число личности (по согласным)"""
        total = sum(
            self._char_to_number(char)
            for char in name.upper()
            if char not in self.VOWELS and self.LETTER_PATTERN.match(char)
        )

        if total == 0 and name:
            total = sum(
                self._char_to_number(char) for char in name
                if char.upper() not in self.VOWELS
            )
            if total == 0:
                total = sum(self._char_to_number(char) for char in name) // 2

        return self.reduce_number(total) if total > 0 else 1

    def maturity_number(self, life_path: int, destiny: int) -> int:
        """Число зрелости"""
        return self.reduce_number(life_path + destiny)

    def daily_fortune(self, life_path: int, on_date: date) -> DailyFortune:
        """Удача на день по числу пути жизни"""
        day = on_date.day
        seed = (life_path + day + on_date.month) % 10 + 1

        return DailyFortune(
            overall_luck=seed,
            love_luck=(seed + 3) % 10 + 1,
            work_luck=(seed + 5) % 10 + 1,
            health_luck=(seed + 7) % 10 + 1,
            lucky_color=self.LUCKY_COLORS[seed - 1],
            lucky_number=(seed * life_path) % 9 + 1,
            advice=self._daily_advice(seed),
            warning_time=self.WARNING_TIMES[(seed + day) % len(self.WARNING_TIMES)],
        )

    def _daily_advice(self, luck: int) -> str:
        if luck >= 8:
            return '絶好調！今日は大きなチャンスが訪れそう。積極的に行動しましょう'
        elif luck >= 6:
            return '良い流れが来ています。普段通りの行動で幸運を引き寄せられます'
        elif luck >= 4:
            return '落ち着いて過ごすのが吉。無理をせず、自分のペースを大切に'
        return '慎重に行動する日。新しいことより、今あるものを大切にしましょう'

    def calculate(self, data: NumerologyData, today: Optional[date] = None) -> NumerologyResult:
        """Основной метод расчета"""
        life_path = self.life_path_number(data.year, data.month, data.day)
        soul = self.soul_number(data.name)
        destiny = self.destiny_number(data.name)
        personality = self.personality_number(data.name)
        maturity = self.maturity_number(life_path, destiny)

        return NumerologyResult(
            life_path_number=life_path,
            soul_number=soul,
            destiny_number=destiny,
            personality_number=personality,
            maturity_number=maturity,
            interpretation={
                'lifePath': interpret_life_path(life_path),
                'soul': interpret_soul(soul),
                'destiny': interpret_destiny(destiny),
                'personality': interpret_personality(personality),
                'maturity': interpret_maturity(maturity),
            },
            daily_fortune=self.daily_fortune(life_path, today or date.today()),
        )
