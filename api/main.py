"""FastAPI приложение"""
from fastapi import FastAPI, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse, StreamingResponse
from datetime import datetime, timezone
import io
import logging

from config import settings
from analysis import (
    ANALYSIS_APOLOGY, AnalysisRequest, AnalysisRequestError,
    AnalysisResponse, NumerologyAnalyzer,
)
from flower_fortune import FlowerFortuneCalculator
from numerology import NumerologyCalculator, NumerologyData
from numerology369 import BirthDate, Numerology369Calculator, Numerology369Reading
from reports import ReportGenerator, generate_pdf_report

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.DEBUG if settings.debug else logging.INFO
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="369数秘・花占い API",
    description="API для 369-нумерологии, цветочного гадания и AI-анализа",
    version="1.0.0"
)

# Инициализация
calculator = Numerology369Calculator()
flower_calculator = FlowerFortuneCalculator()
numerology_calculator = NumerologyCalculator()
report_generator = ReportGenerator()


def get_analyzer() -> NumerologyAnalyzer:
    """Анализатор по текущим настройкам"""
    return NumerologyAnalyzer.from_settings(settings)


@app.on_event("startup")
async def startup_event():
    diagnosis = settings.diagnose()
    logger.info(
        f"Запуск API: окружение {settings.app_env}, AI-анализ "
        f"{'включен' if settings.ai_enabled else 'выключен'}, персона {settings.analysis_persona}"
    )
    for issue in diagnosis["issues"]:
        logger.warning(f"Проблема конфигурации: {issue}")


def _birth_date_query(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
) -> BirthDate:
    return BirthDate(year=year, month=month, day=day)


async def _analyze_reading(analyzer: NumerologyAnalyzer, reading: Numerology369Reading) -> str:
    """Анализ особых чисел готового расчета"""
    special = reading.grid.special_numbers
    return await analyzer.analyze(AnalysisRequest(
        **special.model_dump(),
        cosmic_rhythm=reading.law.cosmic_rhythm,
    ))


# API endpoints
@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "369数秘・花占い API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health():
    """Состояние сервиса и диагностика настроек"""
    diagnosis = settings.diagnose()
    return {
        "ok": diagnosis["is_healthy"],
        "ai_enabled": settings.ai_enabled,
        "issues": diagnosis["issues"],
        "recommendations": diagnosis["recommendations"],
    }


@app.post("/api/numerology369")
async def calculate_numerology369(birth_date: BirthDate):
    """Расчет магического квадрата 369 и проверка закона"""
    reading = calculator.read(birth_date)
    return {
        "success": True,
        "data": reading.model_dump(by_alias=True)
    }


@app.post("/api/numerology369/report")
async def calculate_numerology369_report(
    birth_date: BirthDate,
    include_analysis: bool = False,
    analyzer: NumerologyAnalyzer = Depends(get_analyzer),
):
    """Расчет с текстовым отчетом, опционально с AI-анализом"""
    reading = calculator.read(birth_date)
    analysis = await _analyze_reading(analyzer, reading) if include_analysis else None
    report = report_generator.generate_text_report(reading, analysis)
    return {
        "success": True,
        "report": report,
        "data": reading.model_dump(by_alias=True)
    }


@app.get("/api/numerology369/visual")
async def calculate_numerology369_visual(birth_date: BirthDate = Depends(_birth_date_query)):
    """Расчет с визуализацией (PNG)"""
    grid = calculator.calculate(birth_date)
    try:
        visual = report_generator.generate_visual_grid(grid)
    except Exception as e:
        logger.error(f"Ошибка при генерации изображения: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return StreamingResponse(
        io.BytesIO(visual),
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=numerology369.png"}
    )


@app.get("/api/numerology369/pdf")
async def calculate_numerology369_pdf(
    birth_date: BirthDate = Depends(_birth_date_query),
    include_analysis: bool = False,
    analyzer: NumerologyAnalyzer = Depends(get_analyzer),
):
    """PDF отчет, опционально с AI-анализом"""
    reading = calculator.read(birth_date)

    analysis = await _analyze_reading(analyzer, reading) if include_analysis else None

    try:
        pdf = generate_pdf_report(reading, analysis)
    except Exception as e:
        logger.error(f"Ошибка при генерации PDF: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return StreamingResponse(
        io.BytesIO(pdf),
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=numerology369.pdf"}
    )


@app.get("/api/numerology369/interpretations/{number}")
async def get_interpretation(number: int):
    """Подробная интерпретация числа"""
    return {
        "success": True,
        "data": calculator.interpret(number).model_dump(by_alias=True)
    }


@app.post("/api/flower-fortune")
async def calculate_flower_fortune(birth_date: BirthDate):
    """Цветочное гадание"""
    fortune = flower_calculator.calculate(birth_date)
    return {
        "success": True,
        "data": fortune.model_dump(by_alias=True, mode="json")
    }


@app.post("/api/numerology")
async def calculate_numerology(data: NumerologyData):
    """Классическая нумерология по имени и дате рождения"""
    result = numerology_calculator.calculate(data)
    return {
        "success": True,
        "data": result.model_dump(by_alias=True)
    }


@app.post("/api/numerology-analysis")
async def numerology_analysis(request: Request, analyzer: NumerologyAnalyzer = Depends(get_analyzer)):
    """AI-анализ шести особых чисел"""
    try:
        payload = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    try:
        analysis_request = AnalysisRequest.from_payload(payload)
    except AnalysisRequestError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    try:
        analysis = await analyzer.analyze(analysis_request)
    except Exception as e:
        logger.error(f"Ошибка анализа: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(e) if settings.debug else ANALYSIS_APOLOGY,
            }
        )

    return AnalysisResponse(
        analysis=analysis,
        timestamp=datetime.now(timezone.utc).isoformat()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
