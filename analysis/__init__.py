"""AI-анализ результатов 369-нумерологии"""
from .analyzer import ANALYSIS_APOLOGY, NumerologyAnalyzer
from .gemini_client import GeminiClient, GeminiError
from .models import AnalysisRequest, AnalysisRequestError, AnalysisResponse
from .prompts import Persona, build_fallback_analysis, build_prompt

__all__ = [
    'ANALYSIS_APOLOGY', 'NumerologyAnalyzer',
    'GeminiClient', 'GeminiError',
    'AnalysisRequest', 'AnalysisRequestError', 'AnalysisResponse',
    'Persona', 'build_fallback_analysis', 'build_prompt',
]
