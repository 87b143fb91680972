"""Справочники цветочного гадания: 12 цветов × 5 особенностей"""
from typing import Dict, List

from .models import FlowerType, TraitType


FLOWER_ORDER: List[FlowerType] = [
    FlowerType.SAKURA, FlowerType.SUNFLOWER, FlowerType.ROSE, FlowerType.LOTUS,
    FlowerType.LILY, FlowerType.LAVENDER, FlowerType.CAMELLIA, FlowerType.PEONY,
    FlowerType.JASMINE, FlowerType.IRIS, FlowerType.DAHLIA, FlowerType.COSMOS,
]

TRAIT_ORDER: List[TraitType] = [
    TraitType.PASSIONATE, TraitType.GENTLE, TraitType.ELEGANT,
    TraitType.WILD, TraitType.MYSTIC,
]

FLOWER_NAMES: Dict[FlowerType, str] = {
    FlowerType.SAKURA: '桜',
    FlowerType.SUNFLOWER: 'ひまわり',
    FlowerType.ROSE: '薔薇',
    FlowerType.LOTUS: '蓮',
    FlowerType.LILY: '百合',
    FlowerType.LAVENDER: 'ラベンダー',
    FlowerType.CAMELLIA: '椿',
    FlowerType.PEONY: '牡丹',
    FlowerType.JASMINE: 'ジャスミン',
    FlowerType.IRIS: 'アイリス',
    FlowerType.DAHLIA: 'ダリア',
    FlowerType.COSMOS: 'コスモス',
}

TRAIT_NAMES: Dict[TraitType, str] = {
    TraitType.PASSIONATE: '情熱的な',
    TraitType.GENTLE: '優しい',
    TraitType.ELEGANT: '上品な',
    TraitType.WILD: '自由な',
    TraitType.MYSTIC: '神秘的な',
}

FLOWER_EMOJIS: Dict[FlowerType, str] = {
    FlowerType.SAKURA: '🌸',
    FlowerType.SUNFLOWER: '🌻',
    FlowerType.ROSE: '🌹',
    FlowerType.LOTUS: '🪷',
    FlowerType.LILY: '🤍',
    FlowerType.LAVENDER: '💜',
    FlowerType.CAMELLIA: '🌺',
    FlowerType.PEONY: '🌷',
    FlowerType.JASMINE: '🤍',
    FlowerType.IRIS: '💙',
    FlowerType.DAHLIA: '🌼',
    FlowerType.COSMOS: '🌸',
}

# Базовые характеры цветов
BASE_PERSONALITIES: Dict[FlowerType, Dict[str, object]] = {
    FlowerType.SAKURA: {
        'basic_character': '一期一会の美しさを大切にする、繊細で心優しい人。短い時間でも深い印象を残す。',
        'strengths': ['美意識', '繊細さ', '瞬間を大切にする心'],
        'weaknesses': ['移り気', '短期集中型'],
        'love_style': '儚い美しさに惹かれ、ロマンチックな瞬間を大切にする。',
        'work_style': '短期集中で美しい成果を生み出す。季節感やタイミングを重視。',
        'communication': '上品で詩的な表現を好む。',
        'advice': '長期的な視点も大切にすると、より深い関係が築けます。',
        'compatible_flowers': ['コスモス', '百合', '椿'],
    },
    FlowerType.SUNFLOWER: {
        'basic_character': '太陽のように明るく、周りの人を元気にする力を持つ。いつも前向きで希望に満ちている。',
        'strengths': ['明るさ', '前向きさ', '活力'],
        'weaknesses': ['単純', '深く考えない傾向'],
        'love_style': 'ストレートで分かりやすい愛情表現。相手を明るく照らす。',
        'work_style': 'チームのムードメーカー。困難な状況でも希望を見出す。',
        'communication': 'ストレートで分かりやすい表現。',
        'advice': '時には静かに物事を深く考える時間も大切です。',
        'compatible_flowers': ['ダリア', 'ひまわり', 'コスモス'],
    },
    FlowerType.ROSE: {
        'basic_character': '高貴で美しく、強い意志を持つ。愛と美への深い理解がある。',
        'strengths': ['美意識', '気品', '強い意志'],
        'weaknesses': ['プライドの高さ', 'とげとげしさ'],
        'love_style': '深く情熱的な愛。相手に対して高い理想を持つ。',
        'work_style': '完璧主義で質の高い仕事をする。リーダーシップもある。',
        'communication': '上品で気品のある話し方。',
        'advice': '時には肩の力を抜いて、自然体でいることも大切です。',
        'compatible_flowers': ['牡丹', '椿', 'アイリス'],
    },
    FlowerType.LOTUS: {
        'basic_character': '泥の中から美しく咲く、清浄で崇高な心を持つ。どんな環境でも自分らしさを保つ。',
        'strengths': ['清浄さ', '精神性', '環境適応力'],
        'weaknesses': ['理想主義', '現実離れ'],
        'love_style': '精神的な繋がりを重視。純粋で清らかな愛を求める。',
        'work_style': '困難な環境でも美しい成果を生み出す。精神性を重視。',
        'communication': '深い洞察に基づいた話し方。',
        'advice': '現実的な側面も大切にバランスを取りましょう。',
        'compatible_flowers': ['ジャスミン', 'アイリス', 'ラベンダー'],
    },
    FlowerType.LILY: {
        'basic_character': '純粋で清楚、上品な美しさを持つ。内面の美しさを大切にする。',
        'strengths': ['純粋さ', '上品さ', '内面の美しさ'],
        'weaknesses': ['完璧主義', '自分に厳しすぎる'],
        'love_style': '純粋で誠実な愛。相手の内面を大切にする。',
        'work_style': '丁寧で質の高い仕事。周りからの信頼も厚い。',
        'communication': '上品で控えめな話し方。',
        'advice': '完璧を求めすぎず、自分らしさも大切にしましょう。',
        'compatible_flowers': ['桜', '椿', 'ジャスミン'],
    },
    FlowerType.LAVENDER: {
        'basic_character': '穏やかで癒し系。周りの人を安らかな気持ちにさせる優しい人。',
        'strengths': ['癒し力', '穏やかさ', '共感力'],
        'weaknesses': ['消極性', '自己主張の弱さ'],
        'love_style': 'ゆっくりと時間をかけて関係を深める。安らぎを与える存在。',
        'work_style': '人間関係を大切にし、和やかな環境作りが得意。',
        'communication': '穏やかで優しい話し方。',
        'advice': 'もう少し自分の意見を積極的に表現してみましょう。',
        'compatible_flowers': ['蓮', 'コスモス', 'ジャスミン'],
    },
    FlowerType.CAMELLIA: {
        'basic_character': '凛とした美しさと強さを持つ。冬の寒さにも負けない芯の強さがある。',
        'strengths': ['意志の強さ', '美しさ', '忍耐力'],
        'weaknesses': ['頑固さ', '融通の利かなさ'],
        'love_style': '一途で深い愛。困難があっても相手を支え続ける。',
        'work_style': '困難な状況でも粘り強く取り組む。責任感が強い。',
        'communication': 'はっきりとした芯のある話し方。',
        'advice': '時には柔軟性を持って、相手に合わせることも大切です。',
        'compatible_flowers': ['薔薇', '牡丹', '百合'],
    },
    FlowerType.PEONY: {
        'basic_character': '豪華で華やか、存在感のある魅力的な人。自然とリーダーになることが多い。',
        'strengths': ['華やかさ', 'リーダーシップ', '存在感'],
        'weaknesses': ['目立ちたがり', '派手好き'],
        'love_style': '華やかで情熱的な愛。相手を楽しませることが得意。',
        'work_style': 'チームの中心として活躍。大きなプロジェクトを成功に導く。',
        'communication': '華やかで印象的な話し方。',
        'advice': '時には控えめな美しさも大切にしてみましょう。',
        'compatible_flowers': ['薔薇', '椿', 'ダリア'],
    },
    FlowerType.JASMINE: {
        'basic_character': '夜に香る神秘的な美しさを持つ。深い精神性と優雅さを兼ね備えている。',
        'strengths': ['神秘性', '優雅さ', '深い精神性'],
        'weaknesses': ['神秘的すぎる', '近寄りがたさ'],
        'love_style': '深く神秘的な愛。相手の魂に触れるような関係を求める。',
        'work_style': '直感と洞察力を活かした仕事。芸術的センスもある。',
        'communication': '神秘的で含みのある話し方。',
        'advice': 'もう少し親しみやすさも表現してみましょう。',
        'compatible_flowers': ['蓮', '百合', 'アイリス'],
    },
    FlowerType.IRIS: {
        'basic_character': '知的で洞察力があり、深い思考力を持つ。メッセンジャーのような役割を担うことが多い。',
        'strengths': ['知性', '洞察力', 'コミュニケーション力'],
        'weaknesses': ['考えすぎる', '行動力不足'],
        'love_style': '知的な会話を重視。心の交流を大切にする。',
        'work_style': '分析力を活かし、問題解決に長けている。橋渡し役も得意。',
        'communication': '知的で論理的な話し方。',
        'advice': '時には直感で行動することも大切です。',
        'compatible_flowers': ['薔薇', '蓮', 'ジャスミン'],
    },
    FlowerType.DAHLIA: {
        'basic_character': '多様性と個性を大切にする。様々な色や形を持つように、豊かな表現力がある。',
        'strengths': ['多様性', '表現力', '個性'],
        'weaknesses': ['一貫性の欠如', '迷いやすさ'],
        'love_style': '多彩な愛の表現。相手に合わせて様々な顔を見せる。',
        'work_style': 'クリエイティブな分野で才能を発揮。多角的な視点を持つ。',
        'communication': '豊かな表現力で相手に合わせた話し方。',
        'advice': '自分の核となる部分を大切にしながら多様性を活かしましょう。',
        'compatible_flowers': ['ひまわり', '牡丹', 'コスモス'],
    },
    FlowerType.COSMOS: {
        'basic_character': '宇宙のような広がりを持つ、穏やかで包容力のある人。シンプルな美しさが魅力。',
        'strengths': ['包容力', 'シンプルさ', '穏やかさ'],
        'weaknesses': ['地味', '存在感の薄さ'],
        'love_style': 'さりげなく相手を包み込む愛。控えめだが深い愛情。',
        'work_style': 'サポート役として力を発揮。全体の調和を大切にする。',
        'communication': 'シンプルで心に響く話し方。',
        'advice': 'もう少し自分の魅力をアピールすることも大切です。',
        'compatible_flowers': ['桜', 'ひまわり', 'ラベンダー'],
    },
}

# Модификаторы особенностей
TRAIT_MODIFIERS: Dict[TraitType, Dict[str, str]] = {
    TraitType.PASSIONATE: {
        'character_modifier': '情熱的で熱いエネルギーに満ちている。',
        'additional_strength': '情熱',
        'additional_weakness': '熱くなりすぎる',
        'love_modifier': 'より情熱的で積極的な愛を表現する。',
        'work_modifier': '熱意を持って取り組み、周りを巻き込む力がある。',
        'communication_modifier': '熱のこもった説得力のある話し方。',
        'advice': '情熱をコントロールして、冷静さも大切にしましょう。',
    },
    TraitType.GENTLE: {
        'character_modifier': '優しく穏やかで、周りを包み込むような温かさがある。',
        'additional_strength': '優しさ',
        'additional_weakness': '優柔不断',
        'love_modifier': 'じっくりと時間をかけて相手を大切にする。',
        'work_modifier': '協調性を重視し、チームワークを大切にする。',
        'communication_modifier': '優しく相手を思いやる話し方。',
        'advice': 'もう少し自分の意見をはっきりと表現してみましょう。',
    },
    TraitType.ELEGANT: {
        'character_modifier': '上品で洗練された美しさを持つ。',
        'additional_strength': '上品さ',
        'additional_weakness': '近寄りがたさ',
        'love_modifier': '洗練された美しい愛の表現をする。',
        'work_modifier': '質の高い仕事で周りから尊敬される。',
        'communication_modifier': '上品で洗練された話し方。',
        'advice': '時には親しみやすさも大切にしてみましょう。',
    },
    TraitType.WILD: {
        'character_modifier': '自由奔放で型にはまらない魅力がある。',
        'additional_strength': '自由さ',
        'additional_weakness': '型破りすぎる',
        'love_modifier': '束縛されない自由な愛を求める。',
        'work_modifier': '既成概念にとらわれない新しいアプローチを得意とする。',
        'communication_modifier': '自由で型にはまらない表現をする。',
        'advice': '時には周りとの調和も考えてみましょう。',
    },
    TraitType.MYSTIC: {
        'character_modifier': '神秘的で不思議な魅力を持つ。',
        'additional_strength': '神秘性',
        'additional_weakness': '理解されにくい',
        'love_modifier': '深いスピリチュアルな繋がりを求める。',
        'work_modifier': '直感と洞察力を活かした独創的な仕事をする。',
        'communication_modifier': '神秘的で含みのある表現をする。',
        'advice': '現実的な側面も大切にバランスを取りましょう。',
    },
}
