import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from main import app
from schemas.alignment import AlignmentRequest
from services.alignment_service import build_alignment_report

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "healthy"
    assert "X-Process-Time" in response.headers


def test_alignment_endpoint():
    response = client.post(
        "/v1/alignment/",
        json={"expectedText": "The cat sat.", "actualText": "the cat"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert [r["type"] for r in data["results"]] == ["correct", "correct", "missing"]
    assert data["results"][0]["text"] == "The"
    assert data["summary"]["missing"] == 1
    assert data["summary"]["editDistance"] == 1
    assert data["expectedText"] == "The cat sat."


def test_alignment_service_rejects_oversized_text():
    with pytest.raises(HTTPException) as exc:
        build_alignment_report(AlignmentRequest(expected_text="one two three", actual_text="one"), max_tokens=2)
    assert exc.value.status_code == 400


def test_performance_analyze_endpoint():
    payload = {
        "context": {
            "originContext": "Plea",
            "destinationContext": "Reconciliation",
            "intent": "Plead",
            "motivation": "Desperation",
        },
        "metrics": {
            "averageAmplitude": 0.3,
            "peakAmplitude": 0.8,
            "amplitudeVariation": 0.05,
            "duration": 5.0,
            "silenceRatio": 0.12,
            "amplitudeHistory": [0.1, 0.4, 0.2, 0.5] * 10,
        },
    }
    response = client.post("/v1/performance/analyze", json=payload)
    assert response.status_code == 200
    data = response.json()["data"]
    assert 2.5 <= data["result"]["score"] <= 5.0
    assert data["result"]["practicalTip"]
    assert 1 <= len(data["result"]["strengths"]) <= 2
    assert data["expectation"]["silenceMax"] == 0.25
    assert set(data["metricScores"]) == {"amplitude", "variation", "pacing", "consistency"}


def test_performance_samples_endpoint_enforces_recording_cap():
    context = {"intent": "Comfort", "motivation": "Love/Connection"}
    ok = client.post("/v1/performance/analyze-samples", json={"context": context, "samples": [0.2, 0.3] * 30})
    assert ok.status_code == 200
    assert ok.json()["data"]["metrics"]["duration"] == pytest.approx(60 * 1024 / 48000)

    too_long = client.post("/v1/performance/analyze-samples", json={"context": context, "samples": [0.2] * 1000})
    assert too_long.status_code == 400
    assert too_long.json()["data"] is None
    assert "938 samples" in too_long.json()["detail"]


def test_performance_samples_endpoint_accepts_full_length_take():
    # Twenty seconds of 1024-frame buffers at 48 kHz.
    context = {"intent": "Threaten", "motivation": "Power/Control"}
    samples = [0.2, 0.35, 0.5, 0.3] * 234
    response = client.post("/v1/performance/analyze-samples", json={"context": context, "samples": samples})
    assert response.status_code == 200
    assert response.json()["data"]["metrics"]["duration"] == pytest.approx(936 * 1024 / 48000)


def test_performance_samples_endpoint_uses_request_interval():
    context = {"intent": "Comfort", "motivation": "Love/Connection"}
    payload = {"context": context, "samples": [0.2] * 150, "sampleInterval": 0.1}
    response = client.post("/v1/performance/analyze-samples", json=payload)
    assert response.status_code == 200
    assert response.json()["data"]["metrics"]["duration"] == pytest.approx(15.0)

    payload["samples"] = [0.2] * 201
    assert client.post("/v1/performance/analyze-samples", json=payload).status_code == 400


def test_performance_analyze_rejects_nan_metrics():
    body = (
        '{"context": {"intent": "Plead", "motivation": "Desperation"},'
        ' "metrics": {"averageAmplitude": NaN, "amplitudeVariation": 0.05, "silenceRatio": 0.1}}'
    )
    response = client.post(
        "/v1/performance/analyze",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["data"] is None
    assert "metrics" in response.json()["detail"]


def test_guidance_and_presets():
    response = client.post("/v1/performance/guidance", json={"intent": "Seduce", "motivation": "Love/Connection"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["guidance"]["expectedCharacteristics"]["pace"] == "Slower, deliberate"
    assert data["expectation"]["silenceMax"] == 0.35

    presets = client.get("/v1/performance/presets").json()["data"]
    assert "Threaten" in presets["intents"]
    assert len(presets["commonScenarios"]) == 5


def test_script_endpoints():
    beats = client.post("/v1/scripts/beats", json={"text": "Put out the light. And then put out the light."})
    assert beats.status_code == 200
    assert [b["text"] for b in beats.json()["data"]["beats"]] == [
        "Put out the light",
        "And then put out the light",
    ]

    samples = client.get("/v1/scripts/samples").json()["data"]
    assert {s["key"] for s in samples} >= {"hamlet", "othello"}

    othello = client.get("/v1/scripts/samples/othello").json()["data"]
    assert othello["name"] == "Othello"

    missing = client.get("/v1/scripts/samples/macbeth")
    assert missing.status_code == 404
    assert missing.json() == {"status_code": 404, "data": None, "detail": "Sample script not found"}

    memo = client.post("/v1/scripts/memorization", json={"text": "a b c d e f g h", "stage": 2}).json()["data"]
    assert memo["displayText"] == "a ___ c d ___ f g ___"
    assert memo["hiddenWordCount"] == 3
    assert memo["prompt"] == "[a b c…]"
