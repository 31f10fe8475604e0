# src/qa_types/tests/test_logging/test_middleware_integration.py
import json
import logging
import uuid
from types import SimpleNamespace

from fastapi import FastAPI
from fastapi.testclient import TestClient

from qa_types.core.logging.builder import setup_logging
from qa_types.core.logging.middleware import RequestIDMiddleware


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("qa_types.hello").error("handling hello")
        return {"ok": True}

    return app


def test_request_id_in_response_and_logs(tmp_path, capsys):
    settings = SimpleNamespace(
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=True,
        LOG_DIR=tmp_path / "logs",
        LOG_MAX_BYTES=1000,
        LOG_BACKUP_COUNT=1,
        ENV="testing",
        ENABLE_SQL_LOGGING=False,
    )
    setup_logging(settings)

    client = TestClient(make_app())
    resp = client.get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get("X-Request-ID")
    assert rid is not None

    stderr = capsys.readouterr().err.strip()
    assert stderr, "Expected logs on stderr but nothing was captured."

    found = False
    for line in stderr.splitlines():
        try:
            rec = json.loads(line)
        except ValueError:
            continue
        if rec.get("request_id") == rid:
            found = True
            break

    assert found, "No log line on stderr with matching request_id"


def test_incoming_uuid_request_id_is_reused():
    rid = str(uuid.uuid4())
    resp = TestClient(make_app()).get("/hello", headers={"X-Request-ID": rid})
    assert resp.headers["X-Request-ID"] == rid


def test_malformed_request_id_is_replaced():
    resp = TestClient(make_app()).get("/hello", headers={"X-Request-ID": "evil\\ninjected"})
    rid = resp.headers["X-Request-ID"]
    assert rid != "evil\\ninjected"
    assert str(uuid.UUID(rid)) == rid
