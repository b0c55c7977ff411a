import pytest
from fastapi.testclient import TestClient

from ngram_langid.main import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "languages": 15}


def test_languages(client):
    languages = client.get("/languages").json()["languages"]
    assert languages[0] == {"tag": "ENGLISH", "iso_code": "en"}
    assert len(languages) == 15


def test_detect(client):
    response = client.post("/detect", json={"text": "Ciao, come stai oggi?"})
    assert response.json() == {"language": "ITALIAN"}


def test_detect_unknown(client):
    assert client.post("/detect", json={"text": "..."}).json() == {"language": "unknown"}


def test_detect_confidence(client):
    body = client.post("/detect/confidence", json={"text": "你好，今天怎么样？"}).json()
    assert body == {"language": "CHINESE", "confidence": 1.0}


def test_detect_multiple(client):
    body = client.post("/detect/multiple", json={"text": "สวัสดีครับ", "threshold": 0.5}).json()
    assert body == {"results": [{"language": "THAI", "confidence": 1.0}]}


def test_detect_multiple_rejects_bad_threshold(client):
    response = client.post("/detect/multiple", json={"text": "hello", "threshold": 2})
    assert response.status_code == 422


def test_detect_top(client):
    body = client.post("/detect/top", json={"text": "Olá, como você está hoje?", "n": 3}).json()
    assert len(body["results"]) == 3
    assert body["results"][0]["language"] == "PORTUGUESE"
    assert client.post("/detect/top", json={"text": "hello", "n": 0}).json() == {"results": []}
