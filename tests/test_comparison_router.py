from functools import lru_cache
import logging

import pytest
from fastapi.testclient import TestClient

from plagcheck.config import MAX_INPUT_CHARS
from plagcheck.main import app
from plagcheck.routers import comparison
from plagcheck.utils.similarity_utils import compare


@pytest.fixture
def client():
    comparison.cached_compare.cache_clear()
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_compare_endpoint(client):
    resp = client.post("/compare", json={
        "source": "Kucing itu tidur di atas meja.",
        "target": "Kucing itu tidur di atas meja. Anjing berlari di taman.",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["percentage"] == 50
    assert body["originality"] == 50
    assert body["same_sentences"] == 1
    assert body["similar_sentences"] == 0
    assert body["unique_sentences"] == 1
    assert body["risk"] == "Medium"
    assert [s["category"] for s in body["sentences"]] == ["Same", "Unique"]
    assert body["source_stats"] == {"words": 6, "characters": 30}
    assert body["target_stats"]["words"] == 10


def test_compare_empty_target(client):
    resp = client.post("/compare", json={"source": "Some text.", "target": ""})
    assert resp.status_code == 200
    body = resp.json()
    assert body["percentage"] == 0
    assert body["originality"] == 100
    assert body["risk"] == "Low"
    assert body["sentences"] == []


def test_compare_reuses_cached_report(client, monkeypatch):
    monkeypatch.setattr(comparison, "cached_compare", lru_cache(maxsize=8)(compare))
    payload = {"source": "A b c. D e f.", "target": "A b c. X y z."}
    client.post("/compare", json=payload)
    client.post("/compare", json=payload)
    info = comparison.cached_compare.cache_info()
    assert info.misses == 1
    assert info.hits == 1


def test_compare_rejects_oversize_input(client):
    resp = client.post("/compare", json={"source": "a" * (MAX_INPUT_CHARS + 1), "target": "b"})
    assert resp.status_code == 413


def test_cached_report_stays_intact(client, monkeypatch):
    monkeypatch.setattr(comparison, "cached_compare", lru_cache(maxsize=8)(compare))
    payload = {"source": "A b c.", "target": "A b c."}
    first = comparison.cached_compare(payload["source"], payload["target"])
    with pytest.raises(AttributeError):
        first.sentences.pop()
    body = client.post("/compare", json=payload).json()
    assert body["same_sentences"] == 1
    assert len(body["sentences"]) == 1


def test_text_stats_rejects_oversize_input(client):
    resp = client.post("/text-stats", json={"text": "a" * (MAX_INPUT_CHARS + 1)})
    assert resp.status_code == 413


@pytest.mark.parametrize("payload", [
    {"source": "only source"},
    {"source": 123, "target": "text"},
    {"source": None, "target": "text"},
])
def test_compare_validation_errors(client, payload):
    resp = client.post("/compare", json=payload)
    assert resp.status_code == 422


def test_text_stats(client):
    resp = client.post("/text-stats", json={"text": "café au lait — 3 cups!"})
    assert resp.status_code == 200
    assert resp.json() == {"words": 5, "characters": 22}


def test_request_log_goes_through_package_logger(client, caplog):
    caplog.set_level(logging.INFO, logger="plagcheck")
    client.post("/compare", json={"source": "A b c.", "target": "A b c."})
    assert any(r.name == "plagcheck.routers.comparison" for r in caplog.records)
