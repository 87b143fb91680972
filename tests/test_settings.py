from config import Settings


def test_ai_enabled_requires_non_blank_key():
    assert Settings(gemini_api_key=None).ai_enabled is False
    assert Settings(gemini_api_key='   ').ai_enabled is False
    assert Settings(gemini_api_key='key').ai_enabled is True


def test_diagnose_healthy_defaults():
    diagnosis = Settings(analysis_persona='warm', app_env='development').diagnose()

    assert diagnosis['is_healthy'] is True
    assert diagnosis['issues'] == []


def test_diagnose_unknown_persona():
    diagnosis = Settings(analysis_persona='grumpy').diagnose()

    assert diagnosis['is_healthy'] is False
    assert any('grumpy' in issue for issue in diagnosis['issues'])


def test_production_without_key_gets_recommendation():
    settings = Settings(app_env='production', gemini_api_key=None)

    assert settings.is_production is True
    assert any('GEMINI_API_KEY' in r for r in settings.diagnose()['recommendations'])


def test_debug_outside_development_gets_recommendation():
    settings = Settings(app_env='production', debug=True, gemini_api_key='key')

    assert settings.is_development is False
    assert any('DEBUG' in r for r in settings.diagnose()['recommendations'])


def test_debug_in_development_is_fine():
    settings = Settings(app_env='development', debug=True)

    assert settings.is_development is True
    assert not any('DEBUG' in r for r in settings.diagnose()['recommendations'])
