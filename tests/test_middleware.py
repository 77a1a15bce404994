"""Tests du middleware de délai maximal par requête."""

import time

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.middleware import RequestTimeoutMiddleware


def _slow_app(saved):
    app = FastAPI()
    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=0.05)

    @app.get("/slow")
    def slow_read():
        time.sleep(0.3)
        return {"ok": True}

    @app.post("/slow")
    def slow_write():
        time.sleep(0.3)
        saved.append("message")
        return {"ok": True}

    @app.get("/fast")
    def fast_read():
        return {"ok": True}

    return app


def test_slow_read_times_out():
    client = TestClient(_slow_app([]))

    response = client.get("/slow")

    assert response.status_code == 504
    assert response.json() == {"error": "Request timed out"}


def test_fast_read_passes_through():
    client = TestClient(_slow_app([]))

    assert client.get("/fast").json() == {"ok": True}


def test_writes_are_not_cut_off_after_doing_their_work():
    saved = []
    client = TestClient(_slow_app(saved))

    response = client.post("/slow")

    assert response.status_code == 200
    assert saved == ["message"]
