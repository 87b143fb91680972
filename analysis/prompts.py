"""Шаблоны промптов для AI-анализа и запасной текст"""
from enum import Enum
from typing import Dict

from numerology369.interpretations import get_detailed_interpretation
from numerology369.models import NumberInterpretation
from .models import AnalysisRequest


class Persona(str, Enum):
    """Тон ответа; выбирается только настройкой ANALYSIS_PERSONA"""
    FORMAL = "formal"
    PLAYFUL = "playful"
    WARM = "warm"


def get_interpretations(request: AnalysisRequest) -> Dict[str, NumberInterpretation]:
    """Подробные интерпретации всех шести особых чисел"""
    return {
        'main': get_detailed_interpretation(request.main_number),
        'past': get_detailed_interpretation(request.past_number),
        'future': get_detailed_interpretation(request.future_number),
        'spirit': get_detailed_interpretation(request.spirit_number),
        'higher_purpose': get_detailed_interpretation(request.higher_purpose_number),
        'higher_goal': get_detailed_interpretation(request.higher_goal_number),
    }


# Роль и тон для каждой персоны
PERSONA_INTRO: Dict[Persona, str] = {
    Persona.FORMAL: "あなたは369数秘術を専門とする学術的な解釈者です。以下の数字の組み合わせを体系的かつ客観的に分析してください。",
    Persona.PLAYFUL: "あなたはユーモアたっぷりの369数秘術の案内人です。以下の数字の組み合わせを、クスッと笑えるたとえ話を交えながら楽しく分析してください。",
    Persona.WARM: "あなたは369数秘術の専門的な解釈者です。以下の数字の組み合わせを総合的に分析してください。",
}

PERSONA_TONE: Dict[Persona, str] = {
    Persona.FORMAL: (
        "- 各セクションは必ず250-300文字で記述する\n"
        "- 丁寧語・敬語を用いた端正で客観的な文体で書く\n"
        "- 根拠となる数字の意味を明示しながら論理的に説明する\n"
        "- 断定的な予言は避け、傾向として述べる\n"
        "- マークダウン形式で整理して出力する"
    ),
    Persona.PLAYFUL: (
        "- 各セクションは必ず250-300文字で記述する\n"
        "- 明るくユーモラスで親しみやすい口調で書く\n"
        "- 日常の身近なたとえ話や軽いツッコミを交える\n"
        "- 笑いの中にも具体的で実用的なアドバイスを含める\n"
        "- 否定的な表現や相手を傷つける冗談は避ける\n"
        "- マークダウン形式で整理して出力する"
    ),
    Persona.WARM: (
        "- 各セクションは必ず250-300文字で記述する\n"
        "- 温かく共感的なトーンで書く\n"
        "- 具体的で実用的なアドバイスを含める\n"
        "- 学術的でありながら親しみやすい表現を使う\n"
        "- 否定的な表現は避け、可能性を重視する\n"
        "- マークダウン形式で整理して出力する"
    ),
}

PROMPT_TEMPLATE = """
{intro}

【数字データ】
- 全体指針ナンバー: {higher_purpose_number} ({higher_purpose_title})
- メインナンバー: {main_number} ({main_title})
- ルーツナンバー: {past_number} ({past_title})
- グロースナンバー: {future_number} ({future_title})
- ナチュラルナンバー: {spirit_number} ({spirit_title})
- 最終目的ナンバー: {higher_goal_number} ({higher_goal_title}){cosmic_rhythm_info}

以下の構成で分析してください。**各セクションは必ず250-300文字で記述してください。**

## 🔮 AI的解釈（参考程度）

### 📍 潜在意識からの出発点（250-300文字）
全体指針ナンバー（{higher_purpose_number}）の「{higher_purpose_title}」について分析してください。この数字があなたの深層心理にどのような影響を与え、人生の方向性をどう導くかを具体的に説明してください。

### 🌸 現実での実践バランス（250-300文字）
中央部の4つの数字の相互関係を分析してください：メインナンバー（{main_number}）、ルーツナンバー（{past_number}）、グロースナンバー（{future_number}）、ナチュラルナンバー（{spirit_number}）。これらがどのように連携し、日常生活でどう活用できるかを説明してください。

### 🎯 最終的な到達方向（250-300文字）
最終目的ナンバー（{higher_goal_number}）の「{higher_goal_title}」について、現在から最終的な成長への道筋を分析してください。どのような段階を経て成長していくかを具体的に説明してください。

### 🌟 統合的な人生設計図（250-300文字）
全ての数字を統合して見えてくる、あなた独自の人生パターンと369リズムとの関連性を分析してください。{cosmic_rhythm_hint}螺旋的成長プロセスの中で描かれる人生の流れを具体的に説明してください。

注意事項：
{tone}
"""


def build_prompt(request: AnalysisRequest, persona: Persona = Persona.WARM) -> str:
    """Собирает промпт для Gemini в тоне выбранной персоны"""
    interpretations = get_interpretations(request)
    rhythm = request.cosmic_rhythm

    cosmic_rhythm_info = ""
    cosmic_rhythm_hint = ""
    if rhythm is not None:
        cosmic_rhythm_info = (
            f"\n- 宇宙のリズムエネルギー: {rhythm.number} ({rhythm.focus})"
            f"\n  → {rhythm.description}"
        )
        cosmic_rhythm_hint = f"宇宙のリズムエネルギー{rhythm.number}「{rhythm.focus}」の観点も含めて、"

    return PROMPT_TEMPLATE.format(
        intro=PERSONA_INTRO[persona],
        tone=PERSONA_TONE[persona],
        main_number=request.main_number,
        past_number=request.past_number,
        future_number=request.future_number,
        spirit_number=request.spirit_number,
        higher_purpose_number=request.higher_purpose_number,
        higher_goal_number=request.higher_goal_number,
        main_title=interpretations['main'].title,
        past_title=interpretations['past'].title,
        future_title=interpretations['future'].title,
        spirit_title=interpretations['spirit'].title,
        higher_purpose_title=interpretations['higher_purpose'].title,
        higher_goal_title=interpretations['higher_goal'].title,
        cosmic_rhythm_info=cosmic_rhythm_info,
        cosmic_rhythm_hint=cosmic_rhythm_hint,
    )


def build_fallback_analysis(request: AnalysisRequest) -> str:
    """Запасной анализ из локальных таблиц интерпретаций"""
    i = get_interpretations(request)
    rhythm = request.cosmic_rhythm
    rhythm_part = (
        f"宇宙のリズムエネルギー{rhythm.number}「{rhythm.focus}」を起点として、"
        if rhythm is not None else ""
    )

    return (
        "## 🔮 AI的解釈（参考程度）\n\n"
        "### 📍 潜在意識からの出発点\n"
        f"あなたの全体指針ナンバー{request.higher_purpose_number}「{i['higher_purpose'].title}」は、"
        f"{i['higher_purpose'].essence}を表しています。"
        "この数字は人生の根本的な方向性として、潜在意識レベルであなたを導く重要な指針となります。"
        "日常の選択や判断において、この数字のエネルギーが自然と働き、より深い目的意識を持った人生へと導いてくれます。"
        "人生の重要な局面で、この指針に立ち返ることで迷いが晴れ、本来歩むべき道が見えてくるでしょう。\n\n"
        "### 🌸 現実での実践バランス\n"
        f"メインナンバー{request.main_number}「{i['main'].title}」を中心として、"
        f"ルーツナンバー{request.past_number}「{i['past'].title}」が安定した基盤を提供し、"
        f"グロースナンバー{request.future_number}「{i['future'].title}」が成長のための栄養となります。"
        f"ナチュラルナンバー{request.spirit_number}「{i['spirit'].title}」は意識しなくても自然と現れるあなたらしさです。"
        "これら4つの数字は互いに補完し合い、バランスの取れた人生の実践を可能にします。"
        "日々の中でこれらの要素を意識的に活用することで、より充実した毎日を送ることができるでしょう。\n\n"
        "### 🎯 最終的な到達方向\n"
        f"最終目的ナンバー{request.higher_goal_number}「{i['higher_goal'].title}」は、"
        f"{i['higher_goal'].essence}という方向性を示しています。"
        "人生の様々な経験を積み重ねる中で、自然とこの要素の方向性へ向かっていく成長の道筋が描かれています。"
        "現在の学びや挑戦が、将来のこの到達点に向けた大切なステップとなっています。"
        "焦らず着実に歩みを進めることで、最終的にはこの数字が示す豊かな境地に辿り着くことができるでしょう。\n\n"
        "### 🌟 統合的な人生設計図\n"
        "これらの数字は全体として、潜在的な方向性を自覚し、実生活での実践を重ね、"
        "より高次の目的へと成長していく、人生そのものの螺旋的な成長プロセスを描いています。"
        f"{rhythm_part}"
        "あなた独自の369リズムが、調和のとれた人生の展開を支援し、内なる成長と外への貢献の両方を実現していきます。"
        "この数字の組み合わせは、あなたが本来持っている可能性を最大限に引き出し、"
        "意味深い人生を歩むためのロードマップとなってくれるでしょう。"
    )
