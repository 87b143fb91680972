"""Интерпретации чисел классической нумерологии"""
from typing import Dict


LIFE_PATH: Dict[int, str] = {
    1: 'リーダーシップと独立心を持つ開拓者。新しい道を切り開く運命',
    2: '協調性と感受性を持つ調和の使者。人と人をつなぐ架け橋',
    3: '創造性と表現力に富む芸術家。喜びと楽しさを世界に広める',
    4: '堅実で信頼される建設者。確かな基盤を築き上げる',
    5: '自由と冒険を愛する探求者。変化と成長を通じて学ぶ',
    6: '愛と責任感を持つ養育者。家族や共同体に奉仕する',
    7: '内省と精神性を重視する探究者。真理と知恵を追求',
    8: '物質と精神のバランスを保つ達成者。大きな成功を収める',
    9: '普遍的な愛を持つ人道主義者。世界に貢献する使命',
    11: '直感力と霊性を持つメッセンジャー。高次の意識を伝える',
    22: '大きなビジョンを実現するマスタービルダー。世界を変革する',
    33: '無条件の愛を体現するマスターティーチャー。人類を導く',
}

SOUL: Dict[int, str] = {
    1: '独立と自己実現を心から望む。自分の力で道を切り開きたい',
    2: '深い絆と調和を求める。誰かと共に歩むことで幸せを感じる',
    3: '自己表現と創造性を渇望。内なる芸術家が表現を求めている',
    4: '安定と秩序を必要とする。確かなものを築き上げたい',
    5: '自由と冒険を切望。新しい経験を通じて成長したい',
    6: '愛と奉仕に喜びを見出す。大切な人を守り育てたい',
    7: '真理と知恵を探求したい。内なる世界を深く理解したい',
    8: '成功と達成を強く願う。自分の力を証明したい',
    9: '世界への貢献を望む。より大きな目的のために生きたい',
}

DESTINY: Dict[int, str] = {
    1: '革新的なリーダーとして組織や社会を導く運命',
    2: '協力と調和を通じて平和な世界を築く使命',
    3: '創造性と表現力で人々に喜びをもたらす役割',
    4: '安定した基盤を築き、秩序ある社会に貢献',
    5: '自由と変化を通じて新しい価値観を広める',
    6: '愛と奉仕の精神で家族や共同体を支える',
    7: '知恵と洞察力で人類の精神的成長に貢献',
    8: '物質と精神のバランスを保ち大きな成果を達成',
    9: '人道主義的な活動で世界平和に貢献する使命',
}

PERSONALITY: Dict[int, str] = {
    1: '自信に満ち、リーダーシップのある印象を与える',
    2: '優しく協調的で、人を安心させる雰囲気',
    3: '明るく創造的で、人を楽しませる魅力的な人',
    4: '信頼できて堅実、責任感のある印象',
    5: '自由で冒険的、エネルギッシュな魅力',
    6: '温かく思いやりがあり、母性的・父性的な印象',
    7: '神秘的で知的、深い洞察力を感じさせる',
    8: '成功者の風格があり、威厳と実力を感じさせる',
    9: '慈悲深く包容力があり、人道的な魅力',
}

MATURITY: Dict[int, str] = {
    1: '人生後半に独立したリーダーシップを発揮',
    2: '成熟期に調和と協力の才能が開花',
    3: '後半生で創造性と表現力が最高潮に',
    4: '人生経験を活かした堅実な成果を築く',
    5: '自由な発想で新しい分野を開拓',
    6: '愛と奉仕の精神で多くの人を導く',
    7: '深い知恵と洞察力で精神的指導者に',
    8: '物質的・精神的成功の両方を達成',
    9: '人類への貢献で大きな遺産を残す',
}


def interpret_life_path(number: int) -> str:
    return LIFE_PATH.get(number, '特別な使命を持つユニークなタイプ')


def interpret_soul(number: int) -> str:
    return SOUL.get(number, '深い内面的な欲求を持つ')


def interpret_destiny(number: int) -> str:
    return DESTINY.get(number, '特別な社会的使命を持つ')


def interpret_personality(number: int) -> str:
    return PERSONALITY.get(number, '独特で魅力的な印象を持つ')


def interpret_maturity(number: int) -> str:
    return MATURITY.get(number, '人生後半に特別な才能が開花')
