"""Генератор PDF отчетов"""
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, Image
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from datetime import datetime
from io import BytesIO
from typing import Optional
from xml.sax.saxutils import escape

from numerology369.interpretations import get_detailed_interpretation
from numerology369.models import Numerology369Reading
from .generator import ReportGenerator, SPECIAL_LABELS, grid_positions

# Встроенный CID-шрифт для японского текста
JAPANESE_FONT = 'HeiseiKakuGo-W5'


class PDFGenerator:
    """Генератор PDF отчетов"""

    def __init__(self):
        if JAPANESE_FONT not in pdfmetrics.getRegisteredFontNames():
            pdfmetrics.registerFont(UnicodeCIDFont(JAPANESE_FONT))
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self):
        """Настройка стилей"""
        # Заголовок
        self.styles.add(ParagraphStyle(
            name='CustomTitle',
            parent=self.styles['Heading1'],
            fontName=JAPANESE_FONT,
            fontSize=24,
            textColor=colors.HexColor('#2C3E50'),
            spaceAfter=30,
            alignment=TA_CENTER
        ))

        # Подзаголовок
        self.styles.add(ParagraphStyle(
            name='CustomHeading',
            parent=self.styles['Heading2'],
            fontName=JAPANESE_FONT,
            fontSize=16,
            textColor=colors.HexColor('#34495E'),
            spaceAfter=12,
            spaceBefore=12
        ))

        # Обычный текст
        self.styles.add(ParagraphStyle(
            name='CustomBody',
            parent=self.styles['Normal'],
            fontName=JAPANESE_FONT,
            fontSize=11,
            leading=16,
            textColor=colors.HexColor('#2C3E50'),
            alignment=TA_JUSTIFY,
            spaceAfter=6
        ))

    def _paragraph(self, text: str, style: str = 'CustomBody') -> Paragraph:
        return Paragraph(escape(text).replace('\n', '<br/>'), self.styles[style])

    def generate_pdf(self, reading: Numerology369Reading, analysis: Optional[str] = None) -> bytes:
        """Генерирует PDF отчет"""
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4)
        story = []

        # Заголовок
        story.append(self._paragraph("369数秘 魔方陣", 'CustomTitle'))
        birth = reading.birth_date
        story.append(self._paragraph(f"生年月日: {birth.year}年{birth.month}月{birth.day}日"))
        story.append(Spacer(1, 8*mm))

        # Магический квадрат
        story.append(self._paragraph("魔方陣", 'CustomHeading'))
        positions = grid_positions(reading.grid)
        grid_data = [
            [str(positions[(col, row)]) if (col, row) in positions else '' for col in range(5)]
            for row in range(5)
        ]
        grid_table = Table(grid_data, colWidths=[20*mm] * 5, rowHeights=[20*mm] * 5)
        grid_table.setStyle(TableStyle([
            ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 18),
            ('GRID', (0, 1), (-1, 3), 1, colors.black),
            ('BOX', (2, 0), (2, 0), 1, colors.black),
            ('BOX', (2, 4), (2, 4), 1, colors.black),
            ('BACKGROUND', (2, 2), (2, 2), colors.HexColor('#F39C12')),  # Центр
            ('TEXTCOLOR', (2, 2), (2, 2), colors.white),
        ]))
        story.append(grid_table)
        story.append(Spacer(1, 8*mm))

        # Особые числа
        story.append(self._paragraph("特別な数字", 'CustomHeading'))
        special = reading.grid.special_numbers
        numbers_data = [['ナンバー', '数字', '意味']]
        for attr, label in SPECIAL_LABELS:
            number = getattr(special, attr)
            numbers_data.append([label, str(number), get_detailed_interpretation(number).title])

        numbers_table = Table(numbers_data, colWidths=[60*mm, 25*mm, 90*mm])
        numbers_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498DB')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('FONTNAME', (0, 0), (-1, -1), JAPANESE_FONT),
            ('FONTSIZE', (0, 0), (-1, 0), 12),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#ECF0F1')])
        ]))
        story.append(numbers_table)
        story.append(Spacer(1, 8*mm))

        # Закон 369
        law = reading.law
        story.append(self._paragraph("369の法則", 'CustomHeading'))
        story.append(self._paragraph(
            f"外側8つの合計: {law.outer_sum}\n"
            f"対角の和: {', '.join(map(str, law.diagonal_sums))}\n"
            f"判定: {'調和' if law.is_valid else '不調和'}"
        ))

        rhythm = law.cosmic_rhythm
        if rhythm.focus:
            story.append(self._paragraph(f"宇宙のリズムエネルギー {rhythm.number}", 'CustomHeading'))
            story.append(self._paragraph(f"{rhythm.focus} / {rhythm.action}"))
            story.append(self._paragraph(rhythm.description))
            story.append(self._paragraph(rhythm.earth_mission))

        # AI-анализ
        if analysis:
            story.append(self._paragraph("AI的解釈（参考程度）", 'CustomHeading'))
            for block in analysis.strip().split('\n\n'):
                story.append(self._paragraph(block.replace('#', '').strip()))

        # Визуализация
        story.append(Spacer(1, 8*mm))
        image = BytesIO(ReportGenerator().generate_visual_grid(reading.grid))
        story.append(Image(image, width=100*mm, height=100*mm * 640 / 600))

        # Футер
        story.append(Spacer(1, 10*mm))
        story.append(self._paragraph(
            f"レポートは自動生成されました / {datetime.now().strftime('%Y-%m-%d %H:%M')}"
        ))

        # Собираем PDF
        doc.build(story)
        buffer.seek(0)
        return buffer.getvalue()


def generate_pdf_report(reading: Numerology369Reading, analysis: Optional[str] = None) -> bytes:
    """Удобная функция для генерации PDF"""
    generator = PDFGenerator()
    return generator.generate_pdf(reading, analysis)
