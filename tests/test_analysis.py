import asyncio

import pytest

from analysis import (
    AnalysisRequest, AnalysisRequestError, GeminiError, NumerologyAnalyzer,
    Persona, build_fallback_analysis, build_prompt,
)
from analysis.gemini_client import GeminiClient, build_request_body, extract_text
from config import Settings
from numerology369 import get_cosmic_rhythm, get_detailed_interpretation

PAYLOAD = {
    'mainNumber': 3,
    'pastNumber': 1,
    'futureNumber': 2,
    'spiritNumber': 6,
    'higherPurposeNumber': 9,
    'higherGoalNumber': 11,
}

TITLES = [get_detailed_interpretation(n).title for n in (3, 1, 2, 6, 9, 11)]


class FakeClient:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def test_from_payload_valid():
    request = AnalysisRequest.from_payload(PAYLOAD)

    assert request.main_number == 3
    assert request.higher_goal_number == 11
    assert request.cosmic_rhythm is None


@pytest.mark.parametrize('field', list(PAYLOAD))
def test_from_payload_missing_field(field):
    payload = {k: v for k, v in PAYLOAD.items() if k != field}

    with pytest.raises(AnalysisRequestError) as excinfo:
        AnalysisRequest.from_payload(payload)

    assert excinfo.value.field == field
    assert field in str(excinfo.value)


@pytest.mark.parametrize('value', ['3', None, True, 3.5, [3]])
def test_from_payload_rejects_non_numbers(value):
    with pytest.raises(AnalysisRequestError):
        AnalysisRequest.from_payload({**PAYLOAD, 'spiritNumber': value})


def test_from_payload_accepts_integral_float():
    request = AnalysisRequest.from_payload({**PAYLOAD, 'spiritNumber': 6.0})
    assert request.spirit_number == 6


def test_from_payload_rejects_non_object():
    with pytest.raises(AnalysisRequestError):
        AnalysisRequest.from_payload([1, 2, 3])


def test_from_payload_with_cosmic_rhythm():
    rhythm = get_cosmic_rhythm(9).model_dump(by_alias=True)
    request = AnalysisRequest.from_payload({**PAYLOAD, 'cosmicRhythm': rhythm})

    assert request.cosmic_rhythm.number == 9
    assert request.cosmic_rhythm.earth_mission


def test_from_payload_ignores_non_object_rhythm():
    request = AnalysisRequest.from_payload({**PAYLOAD, 'cosmicRhythm': 'nine'})
    assert request.cosmic_rhythm is None


def test_from_payload_rejects_broken_rhythm():
    with pytest.raises(AnalysisRequestError) as excinfo:
        AnalysisRequest.from_payload({**PAYLOAD, 'cosmicRhythm': {'focus': 'x'}})
    assert excinfo.value.field == 'cosmicRhythm'


def test_fallback_mentions_all_titles():
    text = build_fallback_analysis(AnalysisRequest.from_payload(PAYLOAD))

    for title in TITLES:
        assert title in text
    assert text.count('### ') == 4


def test_fallback_mentions_rhythm():
    request = AnalysisRequest.from_payload(
        {**PAYLOAD, 'cosmicRhythm': get_cosmic_rhythm(6).model_dump(by_alias=True)}
    )
    assert '宇宙のリズムエネルギー6' in build_fallback_analysis(request)


@pytest.mark.parametrize('persona', list(Persona))
def test_prompt_per_persona(persona):
    prompt = build_prompt(AnalysisRequest.from_payload(PAYLOAD), persona)

    for title in TITLES:
        assert title in prompt
    assert '250-300文字' in prompt


def test_personas_differ():
    request = AnalysisRequest.from_payload(PAYLOAD)
    prompts = {build_prompt(request, persona) for persona in Persona}
    assert len(prompts) == 3


def test_analyzer_without_key_uses_fallback():
    request = AnalysisRequest.from_payload(PAYLOAD)
    analyzer = NumerologyAnalyzer(api_key=None)

    assert analyzer.ai_enabled is False
    assert asyncio.run(analyzer.analyze(request)) == build_fallback_analysis(request)


def test_analyzer_returns_provider_text():
    client = FakeClient(reply='## 分析')
    analyzer = NumerologyAnalyzer(api_key='key', persona=Persona.PLAYFUL, client_factory=lambda: client)

    result = asyncio.run(analyzer.analyze(AnalysisRequest.from_payload(PAYLOAD)))

    assert result == '## 分析'
    assert client.prompts[0].startswith('\nあなたはユーモアたっぷり')


def test_analyzer_falls_back_on_provider_error():
    request = AnalysisRequest.from_payload(PAYLOAD)
    client = FakeClient(error=GeminiError('Gemini API error: 500', status=500))
    analyzer = NumerologyAnalyzer(api_key='key', client_factory=lambda: client)

    assert asyncio.run(analyzer.analyze(request)) == build_fallback_analysis(request)


def test_analyzer_from_settings_unknown_persona():
    settings = Settings(gemini_api_key='  ', analysis_persona='grumpy')
    analyzer = NumerologyAnalyzer.from_settings(settings)

    assert analyzer.persona == Persona.WARM
    assert analyzer.ai_enabled is False


def test_analyzer_from_settings_with_key():
    settings = Settings(gemini_api_key='secret', analysis_persona='formal')
    analyzer = NumerologyAnalyzer.from_settings(settings)

    assert analyzer.persona == Persona.FORMAL
    assert analyzer.ai_enabled is True


def test_extract_text():
    data = {'candidates': [{'content': {'parts': [{'text': '  結果  '}]}, 'finishReason': 'STOP'}]}
    assert extract_text(data) == '結果'


@pytest.mark.parametrize('data', [
    {},
    {'candidates': []},
    {'candidates': [{'content': {'parts': []}}]},
    {'candidates': [{'content': {'parts': [{'text': '   '}]}}]},
    None,
])
def test_extract_text_invalid(data):
    with pytest.raises(GeminiError):
        extract_text(data)


def test_request_body():
    body = build_request_body('prompt')

    assert body['contents'][0]['parts'][0]['text'] == 'prompt'
    assert body['generationConfig']['maxOutputTokens'] == 4096
    assert len(body['safetySettings']) == 4


def test_client_url():
    client = GeminiClient(api_key='k', model='gemini-2.0-flash-exp', base_url='https://example.test/v1beta/')
    assert client.api_url == 'https://example.test/v1beta/models/gemini-2.0-flash-exp:generateContent'


def test_client_requires_context_manager():
    client = GeminiClient(api_key='k', model='m')
    with pytest.raises(RuntimeError):
        asyncio.run(client.generate('prompt'))
