from numerology369 import get_cosmic_rhythm, get_detailed_interpretation

BIRTH = {"year": 1990, "month": 1, "day": 1}

ANALYSIS_BODY = {
    "mainNumber": 3,
    "pastNumber": 1,
    "futureNumber": 2,
    "spiritNumber": 6,
    "higherPurposeNumber": 3,
    "higherGoalNumber": 6,
}


def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["version"] == "1.0.0"

    r = client.get("/health")
    assert r.status_code == 200
    assert "ai_enabled" in r.json()
    assert isinstance(r.json()["issues"], list)


def test_numerology369(client):
    r = client.post("/api/numerology369", json=BIRTH)
    assert r.status_code == 200

    data = r.json()["data"]
    assert r.json()["success"] is True
    assert data["birthDate"] == BIRTH
    assert data["grid"]["grid"]["center"] == 3
    assert data["grid"]["specialNumbers"]["higherGoalNumber"] == 6
    assert data["law"]["isValid"] is True
    assert data["law"]["diagonalSums"] == [9, 9, 9, 9]


def test_numerology369_accepts_impossible_date(client):
    r = client.post("/api/numerology369", json={"year": 2001, "month": 4, "day": 31})
    assert r.status_code == 200


def test_numerology369_rejects_bad_month(client):
    r = client.post("/api/numerology369", json={"year": 1990, "month": 13, "day": 1})
    assert r.status_code == 422


def test_numerology369_report(client):
    r = client.post("/api/numerology369/report", json=BIRTH)
    assert r.status_code == 200

    report = r.json()["report"]
    assert "1990年1月1日" in report
    assert "369の法則" in report
    assert get_detailed_interpretation(3).title in report
    assert "AI的解釈" not in report


def test_numerology369_report_with_analysis(client):
    r = client.post("/api/numerology369/report", params={"include_analysis": True}, json=BIRTH)
    assert r.status_code == 200

    report = r.json()["report"]
    assert "AI的解釈" in report
    for number in (3, 1, 2, 6):
        assert get_detailed_interpretation(number).title in report
    assert "宇宙のリズムエネルギー9" in report


def test_visual(client):
    r = client.get("/api/numerology369/visual", params=BIRTH)
    assert r.status_code == 200
    assert r.headers["content-type"] == "image/png"
    assert r.content.startswith(b"\x89PNG")


def test_visual_rejects_bad_day(client):
    r = client.get("/api/numerology369/visual", params={"year": 1990, "month": 1, "day": 32})
    assert r.status_code == 422


def test_pdf(client):
    r = client.get("/api/numerology369/pdf", params=BIRTH)
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert r.content.startswith(b"%PDF")


def test_pdf_with_analysis(client):
    r = client.get("/api/numerology369/pdf", params={**BIRTH, "include_analysis": True})
    assert r.status_code == 200
    assert r.content.startswith(b"%PDF")


def test_interpretation(client):
    r = client.get("/api/numerology369/interpretations/33")
    assert r.status_code == 200
    assert r.json()["data"]["title"] == get_detailed_interpretation(33).title

    r = client.get("/api/numerology369/interpretations/10")
    assert r.json()["data"]["title"] == "Number 10"
    assert r.json()["data"]["shadowAlchemy"] == ""


def test_flower_fortune(client):
    r = client.post("/api/flower-fortune", json=BIRTH)
    assert r.status_code == 200

    data = r.json()["data"]
    assert data["flower"]["type"] == "sakura"
    assert data["trait"] == "gentle"
    assert data["luck"] == {"love": 1, "money": 4, "career": 5}


def test_classic_numerology(client):
    r = client.post("/api/numerology", json={"name": "Anna", **BIRTH})
    assert r.status_code == 200

    data = r.json()["data"]
    assert data["lifePathNumber"] == 3
    assert data["destinyNumber"] == 6
    assert "lifePath" in data["interpretation"]
    assert 1 <= data["dailyFortune"]["overallLuck"] <= 10


def test_analysis_missing_field(client):
    body = {k: v for k, v in ANALYSIS_BODY.items() if k != "spiritNumber"}
    r = client.post("/api/numerology-analysis", json=body)

    assert r.status_code == 400
    assert r.json() == {"error": "Missing or invalid field: spiritNumber"}


def test_analysis_invalid_json(client):
    r = client.post(
        "/api/numerology-analysis",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON body"}


def test_analysis_fallback(client):
    r = client.post("/api/numerology-analysis", json=ANALYSIS_BODY)
    assert r.status_code == 200

    body = r.json()
    for number in ANALYSIS_BODY.values():
        assert get_detailed_interpretation(number).title in body["analysis"]
    assert body["timestamp"]


def test_analysis_with_rhythm(client):
    body = {**ANALYSIS_BODY, "cosmicRhythm": get_cosmic_rhythm(9).model_dump(by_alias=True)}
    r = client.post("/api/numerology-analysis", json=body)

    assert r.status_code == 200
    assert "宇宙のリズムエネルギー9" in r.json()["analysis"]
