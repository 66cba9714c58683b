"""
Tests for exception handlers.
"""
import logging

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from crudstore.exceptions.handlers import setup_exception_handlers


class Payload(BaseModel):
    name: str


@pytest.fixture
def app():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/missing")
    def missing():
        raise HTTPException(status_code=404, detail="Thing not found")

    @app.post("/payload")
    def payload(body: Payload):
        return body

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    return app


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:

    def test_http_exception_uses_error_key(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Thing not found"}

    def test_validation_error_is_bad_request(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="crudstore.exceptions.handlers"):
            response = client.post("/payload", json={"name": ["not", "a", "string"]})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request payload"
        assert any("name" in e for e in data["errors"])
        assert "Invalid payload" in caplog.text

    def test_missing_body_is_bad_request(self, client):
        response = client.post("/payload")

        assert response.status_code == 400

    def test_unhandled_exception_is_internal_error(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Internal server error"
        assert data["path"] == "/boom"
        assert data["method"] == "GET"
