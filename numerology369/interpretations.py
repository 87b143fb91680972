"""Интерпретации чисел 369-нумерологии и космического ритма"""
from typing import Dict

from .models import CosmicRhythm, NumberInterpretation


# Краткие значения чисел
NUMBER_SUMMARIES: Dict[int, str] = {
    1: "始源の光 - 全ての始まり、純粋な意志の発動",
    2: "調和の架け橋 - 二元性の統合、陰陽のバランス",
    3: "創造の歓び - 生命力の表現、無限の可能性",
    4: "大地の礎 - 物質世界の安定、現実化の力",
    5: "自由の風 - 変化と進化、無限の可能性への探求",
    6: "愛の調律師 - 無条件の愛、美と調和の創造",
    7: "真理の探究者 - 内なる叡智、精神性の極み",
    8: "豊かさの顕現者 - 物質と精神の統合、無限の豊かさ",
    9: "宇宙の賢者 - 全体性の理解、普遍的な愛と智慧",
    11: "【マスターナンバー】光のメッセンジャー - 天と地を繋ぐ神聖なアンテナ",
    22: "【マスターナンバー】地球の建築家 - 夢を大規模に実現する力",
    33: "【マスターナンバー】無条件愛の体現者 - キリスト意識、観音のエネルギー",
    44: "【マスターナンバー】意識革命の先導者 - アトランティスの叡智、大変革のエネルギー",
}


DETAILED_INTERPRETATIONS: Dict[int, NumberInterpretation] = {
    1: NumberInterpretation(
        title="始源の光",
        essence="全ての始まり、純粋な意志の発動",
        characteristics="リーダーシップ、独創性、開拓精神、自己確立",
        mission="新しい道を切り拓き、他者に勇気と方向性を示す",
        shadow="孤独、頑固、自己中心的",
        growth_key="他者との協調を学びながら、自分の光を輝かせる",
        shadow_alchemy=(
            "孤独 → 独立性と自己確立の力、一人の時間を創造に活かす能力\n"
            "頑固 → 信念を貫く強さ、ブレない軸を持つリーダーシップ\n"
            "自己中心的 → 自分の価値を知り、それを起点に他者を導く力"
        ),
    ),
    2: NumberInterpretation(
        title="調和の架け橋",
        essence="二元性の統合、陰陽のバランス",
        characteristics="協調性、感受性、サポート力、直感力、優しさ",
        mission="対立を調和へと導き、人と人を繋ぐ架け橋となる",
        shadow="依存、優柔不断、過敏",
        growth_key="自立心を保ちながら、他者と深く繋がる",
        shadow_alchemy=(
            "依存 → 深い共感力、人との絆を大切にする心\n"
            "優柔不断 → 慎重さと多角的視点、バランス感覚の鋭さ\n"
            "過敏 → 繊細な感受性、微細なエネルギーを感じ取る直感力"
        ),
    ),
    3: NumberInterpretation(
        title="創造の歓び",
        essence="生命力の表現、無限の可能性",
        characteristics="創造性、表現力、楽観性、社交性、子どものような純粋さ",
        mission="喜びと創造性を通じて、世界に新しい命を吹き込む",
        shadow="散漫、表面的、無責任",
        growth_key="深い集中力を養い、創造を形にする",
        shadow_alchemy=(
            "散漫 → 多角的な才能、無限の可能性への扉\n"
            "表面的 → 軽やかさと親しみやすさ、場を明るくする力\n"
            "無責任 → 自由な発想力、枠にとらわれない創造性"
        ),
    ),
    4: NumberInterpretation(
        title="大地の礎",
        essence="物質世界の安定、現実化の力",
        characteristics="実践力、忍耐力、誠実さ、建設的、秩序",
        mission="夢を現実に変え、永続的な基盤を築く",
        shadow="頑固、融通が利かない、物質主義",
        growth_key="柔軟性を持ちながら、確実に形を創る",
        shadow_alchemy=(
            "頑固 → 不動の安定感、信頼できる基盤を築く力\n"
            "融通が利かない → 一貫性と誠実さ、約束を守り抜く信念\n"
            "物質主義 → 現実化能力、夢を形にする実践力"
        ),
    ),
    5: NumberInterpretation(
        title="自由の風",
        essence="変化と進化、無限の可能性への探求",
        characteristics="冒険心、多才、適応力、好奇心、変革力",
        mission="古い枠組みを破り、新しい時代の風を吹かせる",
        shadow="不安定、無責任、刺激中毒",
        growth_key="自由の中に責任を見出し、変化を成長へ繋げる",
        shadow_alchemy=(
            "不安定 → 変化への適応力、新しい環境を楽しむ柔軟性\n"
            "無責任 → 束縛されない自由な精神、型破りな発想力\n"
            "刺激中毒 → 旺盛な好奇心、人生を冒険として楽しむ力"
        ),
    ),
    6: NumberInterpretation(
        title="愛の調律師",
        essence="無条件の愛、美と調和の創造",
        characteristics="愛情深さ、責任感、美的感覚、癒しの力、母性/父性",
        mission="愛を通じて世界を癒し、新しい宇宙（調和）を生み出す",
        shadow="過保護、自己犠牲、完璧主義",
        growth_key="自分自身も愛し、与えることと受け取ることのバランスを保つ",
        shadow_alchemy=(
            "過保護 → 深い愛情と責任感、他者を大切に思う心\n"
            "自己犠牲 → 無条件の愛、与えることの喜びを知る力\n"
            "完璧主義 → 美への追求、調和を生み出す繊細な感性"
        ),
    ),
    7: NumberInterpretation(
        title="真理の探究者",
        essence="内なる叡智、精神性の極み",
        characteristics="分析力、直感力、神秘性、独立心、専門性",
        mission="真理を探求し、精神的な道を極めて他者を導く",
        shadow="孤立、懐疑的、現実逃避",
        growth_key="内なる世界と外の世界を統合し、智慧を分かち合う",
        shadow_alchemy=(
            "孤立 → 内なる世界の豊かさ、独自の洞察力\n"
            "懐疑的 → 深い分析力、真実を見抜く直感\n"
            "現実逃避 → 精神性への探求、目に見えない世界への理解"
        ),
    ),
    8: NumberInterpretation(
        title="豊かさの顕現者",
        essence="物質と精神の統合、無限の豊かさ",
        characteristics="実行力、組織力、野心、カリスマ性、物質的成功",
        mission="精神的な価値を物質世界で実現し、豊かさを循環させる",
        shadow="権力欲、物質主義、ワーカホリック",
        growth_key="力を愛のために使い、真の豊かさを理解する",
        shadow_alchemy=(
            "権力欲 → リーダーシップと統率力、大きなビジョンを実現する力\n"
            "物質主義 → 豊かさを循環させる能力、経済的成功への才能\n"
            "ワーカホリック → 集中力と持続力、目標達成への情熱"
        ),
    ),
    9: NumberInterpretation(
        title="宇宙の賢者",
        essence="全体性の理解、普遍的な愛と智慧",
        characteristics="博愛、寛容、直感力、芸術性、人道主義",
        mission="全ての存在を包容し、人類の意識進化を助ける",
        shadow="理想主義、現実離れ、自己喪失",
        growth_key="地に足をつけながら、宇宙的視点を保つ",
        shadow_alchemy=(
            "理想主義 → 高い志と人道的精神、世界をより良くする意志\n"
            "現実離れ → 宇宙的視点、大きな愛で物事を捉える力\n"
            "自己喪失 → 他者への深い共感、境界を超えた一体感"
        ),
    ),
    11: NumberInterpretation(
        title="光のメッセンジャー",
        essence="天と地を繋ぐ神聖なアンテナ",
        characteristics="高次の直感、霊的感受性、インスピレーション、啓示",
        mission="見えない世界のメッセージを受信し、人類に伝える",
        shadow="過敏、現実との乖離、神経過敏",
        growth_key="グラウンディングしながら、高次の情報を実用的に伝える",
        shadow_alchemy=(
            "過敏 → 高次の感受性、見えないエネルギーを感じ取る力\n"
            "現実との乖離 → スピリチュアルな直感、天からのメッセージを受信する能力\n"
            "神経過敏 → 繊細なアンテナ、微細な変化を察知する感性"
        ),
    ),
    22: NumberInterpretation(
        title="地球の建築家",
        essence="夢を大規模に実現する力",
        characteristics="ビジョン、実現力、国際性、統合力",
        mission="地球規模で人類の進化に貢献する構造を創る",
        shadow="過大な責任感、完璧主義、燃え尽き",
        growth_key="大きなビジョンを持ちながら、一歩一歩確実に進む",
        shadow_alchemy=(
            "過大な責任感 → 大きなビジョンを実現する使命感と能力\n"
            "完璧主義 → 質の高い仕事への追求、妥協しない姿勢\n"
            "燃え尽き → 情熱的な取り組み、全力で物事に向かう力"
        ),
    ),
    33: NumberInterpretation(
        title="無条件愛の体現者",
        essence="キリスト意識、観音のエネルギー",
        characteristics="無条件の愛、癒し、目醒めの促進、慈悲",
        mission="愛の振動で人類の意識を上昇させ、目醒めを加速させる",
        shadow="自己犠牲、救世主コンプレックス",
        growth_key="自分自身への愛を基盤に、他者を導く",
        shadow_alchemy=(
            "自己犠牲 → 深い慈愛、他者の痛みを自分のものとして感じる共感力\n"
            "救世主コンプレックス → 人を癒し導く力、希望の光を与える能力"
        ),
    ),
    44: NumberInterpretation(
        title="意識革命の先導者",
        essence="アトランティスの叡智、大変革のエネルギー",
        characteristics="革新力、破壊と創造、意識の量子的飛躍",
        mission="古いパラダイムを破壊し、新しい意識の時代を創造する",
        shadow="破壊衝動、極端な変化、カオス",
        growth_key="破壊の中に愛を持ち、新しい秩序を生み出す",
        shadow_alchemy=(
            "破壊衝動 → 古いシステムを変革する力、新時代を切り拓く勇気\n"
            "極端な変化 → 大胆な行動力、常識を覆す革新性\n"
            "カオス → 創造的混沌、既存の枠を超えた可能性の創出"
        ),
    ),
}


_RHYTHM_HEADER = "【369宇宙のリズム：3（自分）→ 6（周り）→ 9（全体）】"

# Ключи только 3, 6 и 9; для остальных сумм текст пустой
COSMIC_RHYTHMS: Dict[int, Dict[str, str]] = {
    3: {
        "focus": "自分の内なる光にフォーカス",
        "action": "純粋な喜びを表現する",
        "description": (
            "あなたの369リズムの起点は、まず自分自身が心から純粋に喜ぶことを見つけ、"
            "それを思い切り表現することです。子どものような無邪気さで人生を楽しみ、"
            "その輝きが自然と周りを照らします。自分の創造性を解放し、"
            "ワクワクすることに没頭することで、宇宙のリズムと共鳴します。"
        ),
        "earth_mission": (
            f"{_RHYTHM_HEADER}\n\n"
            "【自分の歓びが全ての始まり】\n"
            "純粋な喜びを大切にしてみてください。自分が心から楽しめることに没頭し、"
            "子どものような無邪気さで人生を味わうことを意識してみましょう。"
            "「今、自分は本当に楽しんでいるか？」「心からワクワクしているか？」を日々問いかけ、"
            "歓びを感じることを大切にすることで、自然と宇宙のリズムと共鳴していきます。\n\n"
            "3を起点とするあなたは、まず自分の内なる光を輝かせることで、"
            "自然と周りの人々（6）、そして全体（9）へとエネルギーが拡がっていく"
            "369のリズムを創り出すことができます。"
        ),
        "starting_point": (
            "この「3」のエネルギーは、あなたの本質的な生き方を知る重要な糸口です。"
            "純粋な喜びと楽しさを追求することが、あなたらしい人生への扉を開きます。"
        ),
        "caution": (
            "独りよがりになったり、狭い世界に行き過ぎているなと思ったら、"
            "客観的に自分を見つめなおすことが大切です。"
            "自分の喜びが周りとも調和しているか確認しましょう。"
        ),
    },
    6: {
        "focus": "愛と調和の架け橋にフォーカス",
        "action": "心の豊かさを分かち合う",
        "description": (
            "あなたの369リズムの起点は、目の前の人々との深い繋がりを大切にし、"
            "愛と思いやりのエネルギーを循環させることです。家族、友人、出会う全ての人との"
            "関係性を育み、互いの成長を支え合います。あなたの温かさが、"
            "人々の心に安らぎをもたらし、調和の輪を広げていきます。"
        ),
        "earth_mission": (
            f"{_RHYTHM_HEADER}\n\n"
            "【周りへの貢献が鍵となる】\n"
            "目の前にいる人との関係性を深めることを大切にしてみてください。"
            "家族、友人、出会う人々との心の交流を育み、愛と思いやりを分かち合うことを"
            "意識してみましょう。一対一の深いつながりを大切にすること、"
            "マンツーマンでのサポートや対話を通じて、あなたらしい力を発揮していけます。\n\n"
            "6を起点とするあなたは、周りとの愛のある関係性を意識することで、"
            "自然と自分自身（3）も満たされ、全体への貢献（9）へと発展していく"
            "369のリズムを体現しやすくなります。"
        ),
        "starting_point": (
            "この「6」のエネルギーは、あなたの本質的な生き方を知る重要な糸口です。"
            "目の前の人との深い繋がりを大切にすることが、あなたらしい人生への扉を開きます。"
        ),
        "caution": (
            "人にわかってもらいたい、自分が何かをやったのに変わらなかったという"
            "無価値観に陥らないよう注意。表現することが大事なので、"
            "相手の反応で落ち込んだり、相手に求めすぎたりする必要はありません。"
        ),
    },
    9: {
        "focus": "宇宙意識と一体化にフォーカス",
        "action": "無条件の愛と叡智を体現する",
        "description": (
            "あなたの369リズムの起点は、全ての生命との深い繋がりを感じ、"
            "地球規模、宇宙規模での愛を実践することです。国境や文化を超えて、"
            "まだ出会っていない人々、未来の世代、全ての存在のために奉仕します。"
            "あなたの叡智と慈愛が、人類の意識進化に貢献し、新しい時代の礎となります。"
        ),
        "earth_mission": (
            f"{_RHYTHM_HEADER}\n\n"
            "【全体性への自然な拡がり】\n"
            "より広い視野で世界を感じることを大切にしてみてください。"
            "多くの人々へのメッセージ発信や、地域・社会・地球全体への貢献を意識してみましょう。"
            "目の前の人も大切にしながら、その先にある未来の世代や広い世界のことに思いを馳せ、"
            "全体の幸せを願いながら行動することで、深い充実感を感じられるでしょう。\n\n"
            "9を起点とするあなたは、全体への意識を持つことで、"
            "自然と身近な人々（6）との関係も深まり、自分自身（3）の使命も明確になる"
            "369のリズムを活性化させることができます。"
        ),
        "starting_point": (
            "この「9」のエネルギーは、あなたの本質的な生き方を知る重要な糸口です。"
            "全体性の視点から世界を見ることが、あなたらしい人生への扉を開きます。"
        ),
        "caution": (
            "自己犠牲にならないよう注意。自分が苦しんで、みんながハッピーになるために"
            "自分が犠牲になるような考え方は避けましょう。"
            "あなた自身の幸せも大切にしながら全体に貢献することが重要です。"
        ),
    },
}


def interpret_number(number: int) -> str:
    """Краткое значение числа"""
    return NUMBER_SUMMARIES.get(number, f"数字 {number} の解釈")


def get_detailed_interpretation(number: int) -> NumberInterpretation:
    """Подробная интерпретация; для неизвестных чисел заполнен только заголовок"""
    interpretation = DETAILED_INTERPRETATIONS.get(number)
    if interpretation is None:
        return NumberInterpretation(title=f"Number {number}")
    return interpretation


def get_cosmic_rhythm(number: int) -> CosmicRhythm:
    """Космический ритм по сумме высшего измерения"""
    return CosmicRhythm(number=number, **COSMIC_RHYTHMS.get(number, {}))
