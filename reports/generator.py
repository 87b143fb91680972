"""Генератор текстовых и визуальных отчетов по 369-нумерологии"""
from typing import Dict, List, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont
import io
import os
import logging

from numerology369.interpretations import get_detailed_interpretation
from numerology369.models import NumerologyGrid, Numerology369Reading

logger = logging.getLogger(__name__)


# Подписи особых чисел: (атрибут SpecialNumbers, подпись)
SPECIAL_LABELS: List[Tuple[str, str]] = [
    ('higher_purpose_number', '全体指針ナンバー'),
    ('main_number', 'メインナンバー'),
    ('past_number', 'ルーツナンバー'),
    ('future_number', 'グロースナンバー'),
    ('spirit_number', 'ナチュラルナンバー'),
    ('higher_goal_number', '最終目的ナンバー'),
]

FONT_PATHS = [
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "C:/Windows/Fonts/arial.ttf",  # Windows
]

SEPARATOR = "━" * 40


def grid_positions(grid: NumerologyGrid) -> Dict[Tuple[int, int], int]:
    """Раскладка 17 чисел на поле 5x5: (столбец, строка) -> число"""
    g, o = grid.grid, grid.outer
    return {
        (2, 0): o.top_bar,
        (0, 1): o.left_left_top, (1, 1): g.top_left, (2, 1): g.top, (3, 1): g.top_right, (4, 1): o.right_right_top,
        (0, 2): o.left_left_middle, (1, 2): g.left, (2, 2): g.center, (3, 2): g.right, (4, 2): o.right_right_middle,
        (0, 3): o.left_left_bottom, (1, 3): g.bottom_left, (2, 3): g.bottom, (3, 3): g.bottom_right, (4, 3): o.right_right_bottom,
        (2, 4): o.bottom_bar,
    }


# Ячейки особых чисел (кроме центра)
SPECIAL_CELLS = {(2, 0), (1, 2), (3, 2), (2, 3), (2, 4)}
CENTER_CELL = (2, 2)


def _load_font(size: int):
    """Первый доступный TrueType-шрифт, иначе встроенный"""
    for path in FONT_PATHS:
        if not os.path.exists(path):
            continue
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            logger.debug(f"Не удалось загрузить шрифт {path}")
    return ImageFont.load_default()


class ReportGenerator:
    """Генератор текстовых и визуальных отчетов"""

    def generate_text_report(self, reading: Numerology369Reading,
                             analysis: Optional[str] = None) -> str:
        """Генерирует текстовый отчет"""
        birth = reading.birth_date
        law = reading.law

        report = f"""
╔════════════════════════════════════════╗
║          369数秘 魔方陣                 ║
╚════════════════════════════════════════╝

📅 生年月日: {birth.year}年{birth.month}月{birth.day}日

{SEPARATOR}

🎯 魔方陣:

{self._format_grid(reading.grid)}

{SEPARATOR}

🔢 特別な数字:
{self._format_special_numbers(reading)}
{SEPARATOR}

⚖️ 369の法則:

• 外側8つの合計: {law.outer_sum}
• 対角の和: {', '.join(map(str, law.diagonal_sums))}
• 判定: {'369の法則に調和しています' if law.is_valid else '369の法則から外れています'}
"""

        rhythm = law.cosmic_rhythm
        report += f"\n{SEPARATOR}\n\n🌌 宇宙のリズムエネルギー: {law.higher_dimension_sum}\n"
        if rhythm.focus:
            report += f"\n{rhythm.focus} / {rhythm.action}\n\n{rhythm.description}\n"
            if rhythm.caution:
                report += f"\n⚠️ {rhythm.caution}\n"

        if analysis:
            report += f"\n{SEPARATOR}\n\n{analysis.strip()}\n"

        report += f"\n{SEPARATOR}\n"
        report += "✨ レポートは自動生成されました\n"

        return report

    def _format_grid(self, grid: NumerologyGrid) -> str:
        """Рисует поле 5x5 текстом"""
        positions = grid_positions(grid)
        lines = []
        for row in range(5):
            cells = []
            for col in range(5):
                value = positions.get((col, row))
                cells.append(f"{value:>3}" if value is not None else "   ")
            lines.append("   " + "  ".join(cells))
        return "\n".join(lines)

    def _format_special_numbers(self, reading: Numerology369Reading) -> str:
        special = reading.grid.special_numbers
        text = ""
        for attr, label in SPECIAL_LABELS:
            number = getattr(special, attr)
            interpretation = get_detailed_interpretation(number)
            text += f"\n• {label}: {number} 「{interpretation.title}」\n"
            if interpretation.essence:
                text += f"  {interpretation.essence}\n"
        return text

    def generate_visual_grid(self, grid: NumerologyGrid) -> bytes:
        """Генерирует PNG с 17 числами"""
        cell_size = 120
        img_size = cell_size * 5
        label_height = 40

        img = Image.new('RGB', (img_size, img_size + label_height), color='white')
        draw = ImageDraw.Draw(img)

        # Цвета
        border_color = (0, 0, 0)
        center_color = (255, 215, 0)  # Золотой для центра
        special_color = (221, 204, 255)  # Сиреневый для особых чисел

        font = _load_font(48)
        label_font = _load_font(20)

        for (col, row), number in grid_positions(grid).items():
            x0, y0 = col * cell_size, row * cell_size
            margin = 6
            if (col, row) == CENTER_CELL:
                fill = center_color
            elif (col, row) in SPECIAL_CELLS:
                fill = special_color
            else:
                fill = None
            draw.rectangle(
                [x0 + margin, y0 + margin, x0 + cell_size - margin, y0 + cell_size - margin],
                fill=fill, outline=border_color, width=2
            )

            # Рисуем число по центру ячейки
            text = str(number)
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                (x0 + (cell_size - text_width) // 2, y0 + (cell_size - text_height) // 2),
                text,
                fill=(0, 0, 0),
                font=font
            )

        label_text = "369 Numerology"
        bbox = draw.textbbox((0, 0), label_text, font=label_font)
        text_width = bbox[2] - bbox[0]
        draw.text(
            ((img_size - text_width) // 2, img_size + 10),
            label_text,
            fill=(0, 0, 0),
            font=label_font
        )

        # Сохраняем в bytes
        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        return img_bytes.getvalue()
