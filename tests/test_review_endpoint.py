"""
Review Endpoint Tests
=====================
Tests for POST /api/review and GET /health.
Request validation lives in the HTTP shell; the engine is only mocked
for the failure path.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


# ===================================================================
# Happy path
# ===================================================================
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_review_returns_camel_case_report(client):
    resp = client.post("/api/review", json={
        "code": "while(true) {\n console.log(1)\n}",
        "language": "javascript",
    })
    assert resp.status_code == 200
    review = resp.json()["review"]
    assert review["codeAnalysis"]["totalLines"] == 3
    assert review["codeAnalysis"]["complexity"] == "Low"
    assert review["debugging"]["bugTypes"]["logical"] >= 1
    assert review["debugging"]["bugCount"] == len(review["debugging"]["bugs"])
    for bug in review["debugging"]["bugs"]:
        assert set(bug["fix"]) == {"before", "after", "explanation"}


def test_review_accepts_unknown_language(client):
    resp = client.post("/api/review", json={"code": "x = 1", "language": "ruby"})
    assert resp.status_code == 200
    assert resp.json()["review"]["codeAnalysis"]["language"] == "ruby"


# ===================================================================
# Validation
# ===================================================================
@pytest.mark.parametrize("payload", [
    {"language": "python"},
    {"code": "", "language": "python"},
])
def test_missing_code_rejected(client, payload):
    resp = client.post("/api/review", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Code is required"


@pytest.mark.parametrize("payload", [
    {"code": "x = 1"},
    {"code": "x = 1", "language": ""},
])
def test_missing_language_rejected(client, payload):
    resp = client.post("/api/review", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Programming language is required"


def test_oversized_code_rejected(client):
    with patch("reviewer.api.review.MAX_CODE_LENGTH", 5):
        resp = client.post("/api/review", json={"code": "x = 12345", "language": "python"})
    assert resp.status_code == 400


# ===================================================================
# Failure path
# ===================================================================
def test_engine_failure_returns_500(client):
    with patch("reviewer.api.review.analyze_code", side_effect=RuntimeError("boom")):
        resp = client.post("/api/review", json={"code": "x = 1", "language": "python"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to review code"
