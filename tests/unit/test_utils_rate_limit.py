# Import section
import sys
import time
import types
from fastapi import FastAPI, Depends, Request
from fastapi.testclient import TestClient
from gympay.utils.rate_limit import optional_rate_limit, rate_limit_health_info


def _make_app(times=2, seconds=60):
    app = FastAPI()

    @app.post("/limited", dependencies=[Depends(optional_rate_limit(times, seconds))])
    def limited():
        return {"ok": True}

    @app.post("/limitedB", dependencies=[Depends(optional_rate_limit(times, seconds))])
    def limited_b():
        return {"ok": True}

    @app.get("/rl_info")
    def rl_info(request: Request):
        return rate_limit_health_info(request)

    return app


def test_rate_limit_fallback_blocks_after_limit(monkeypatch):
    client = TestClient(_make_app(times=2, seconds=60))
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", "1")

    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 429


def test_rate_limit_is_per_path(monkeypatch):
    client = TestClient(_make_app(times=2, seconds=60))
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", "1")

    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 429

    # chemin B indépendant de A
    assert client.post("/limitedB").status_code == 200
    assert client.post("/limitedB").status_code == 200
    assert client.post("/limitedB").status_code == 429


def test_rate_limit_resets_after_window_sleep(monkeypatch):
    client = TestClient(_make_app(times=2, seconds=1))
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", "1")

    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 429

    # Attendre > 1s pour vider la fenêtre
    time.sleep(1.1)
    assert client.post("/limited").status_code == 200


def test_rate_limit_disabled_flag_bypasses_limit(monkeypatch):
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)
    app = _make_app(times=2, seconds=60)
    client = TestClient(app)
    app.state.rate_limit_enabled = False

    for _ in range(4):
        assert client.post("/limited").status_code == 200


def test_rate_limit_uninitialised_limiter_never_blocks(monkeypatch):
    # Redis jamais initialisé: pas de 429 en prod
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)
    client = TestClient(_make_app(times=1, seconds=60))

    assert client.post("/limited").status_code == 200
    assert client.post("/limited").status_code == 200


def test_rate_limit_health_info(monkeypatch):
    app = _make_app()
    client = TestClient(app)

    # Dummy fastapi_limiter non prêt -> ready False, backend None
    not_ready = types.ModuleType("fastapi_limiter")
    not_ready.FastAPILimiter = type("FastAPILimiter", (), {"redis": None})
    monkeypatch.setitem(sys.modules, "fastapi_limiter", not_ready)

    app.state.rate_limit_enabled = True
    info = client.get("/rl_info").json()
    assert info["enabled"] is True
    assert info["ready"] is False
    assert info["backend"] is None

    # Faux module fastapi_limiter avec redis prêt
    ready = types.ModuleType("fastapi_limiter")
    ready.FastAPILimiter = type("FastAPILimiter", (), {"redis": object()})
    monkeypatch.setitem(sys.modules, "fastapi_limiter", ready)
    monkeypatch.setenv("RATE_LIMIT_REDIS_URL", "redis://localhost:6379/0")

    info2 = client.get("/rl_info").json()
    assert info2["ready"] is True
    assert info2["backend"] == "redis"
    assert info2["redis"] == {"scheme": "redis", "host": "localhost", "port": 6379}
