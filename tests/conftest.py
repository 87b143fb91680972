import pytest
from fastapi.testclient import TestClient

from analysis import NumerologyAnalyzer
from api.main import app, get_analyzer


@pytest.fixture
def client():
    # AI выключен: анализ строится из локальных таблиц
    app.dependency_overrides[get_analyzer] = lambda: NumerologyAnalyzer(api_key=None)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
