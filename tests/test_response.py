"""
Tests for JSON error responses.

Responses are built in memory; nothing is sent over the network.
"""

import json
import logging

import pytest
from starlette.responses import JSONResponse, Response

from httperror.errors import StatusError, new
from httperror.response import error_payload, error_response, write_response


class _UnprintableError(StatusError):
    """A status error whose message cannot be rendered."""

    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class TestErrorPayload:
    """Tests for the client-visible payload."""

    def test_status_error_message(self) -> None:
        assert error_payload(new(404, "no such page")) == {"message": "no such page"}

    def test_regular_error_is_hidden(self) -> None:
        payload = error_payload(ValueError("db password rejected"))
        assert payload == {"message": "Internal Server Error"}

    def test_explicit_500_is_hidden(self) -> None:
        payload = error_payload(new(500, "disk /dev/sda1 is full"))
        assert payload == {"message": "Internal Server Error"}

    def test_other_5xx_is_kept(self) -> None:
        assert error_payload(new(503, "try later")) == {"message": "try later"}

    def test_nil(self) -> None:
        assert error_payload(None) == {"message": ""}


class TestWriteResponse:
    """Tests for writing an error onto an existing response."""

    def test_status_error(self) -> None:
        response = Response()
        write_response(response, new(404, "no such page"))

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.body == b'{"message":"no such page"}'
        assert response.headers["content-length"] == str(len(response.body))

    def test_regular_error(self) -> None:
        response = Response()
        write_response(response, ValueError("connection refused by 10.0.0.3"))

        assert response.status_code == 500
        assert json.loads(response.body) == {"message": "Internal Server Error"}
        assert b"10.0.0.3" not in response.body

    def test_wrapped_status_error(self) -> None:
        try:
            raise RuntimeError("wrapper error") from new(404, "no such page")
        except RuntimeError as wrapped:
            err = wrapped

        response = Response()
        write_response(response, err)

        assert response.status_code == 404
        # The client sees the outermost error text
        assert json.loads(response.body) == {"message": "wrapper error"}

    def test_non_ascii_message(self) -> None:
        response = Response()
        write_response(response, new(400, "champ « nom » invalide"))

        assert json.loads(response.body.decode("utf-8")) == {
            "message": "champ « nom » invalide"
        }
        assert response.headers["content-length"] == str(len(response.body))

    def test_replaces_existing_headers(self) -> None:
        response = Response(content="old", media_type="text/plain")
        write_response(response, new(409, "conflict"))

        assert response.headers["content-type"] == "application/json"
        assert response.headers.getlist("content-type") == ["application/json"]
        assert response.body == b'{"message":"conflict"}'

    def test_body_failure_is_swallowed(self, caplog: pytest.LogCaptureFixture) -> None:
        response = Response()
        with caplog.at_level(logging.WARNING, logger="httperror.response"):
            write_response(response, _UnprintableError(418, "teapot"))

        assert response.status_code == 418
        assert response.headers["content-type"] == "application/json"
        assert response.body == b""
        assert "Could not write error body" in caplog.text

    def test_body_failure_clears_previous_body(self) -> None:
        response = Response(content="previous body", media_type="text/plain")
        write_response(response, _UnprintableError(418, "teapot"))

        assert response.status_code == 418
        assert response.headers["content-type"] == "application/json"
        assert response.body == b""
        assert response.headers["content-length"] == "0"


class TestErrorResponse:
    """Tests for building a fresh JSONResponse."""

    def test_builds_json_response(self) -> None:
        response = error_response(new(422, "horizon must be 1-5"))

        assert isinstance(response, JSONResponse)
        assert response.status_code == 422
        assert response.body == b'{"message":"horizon must be 1-5"}'
        assert response.headers["content-length"] == str(len(response.body))
        assert response.headers["x-content-type-options"] == "nosniff"

    def test_nil_is_ok(self) -> None:
        response = error_response(None)

        assert response.status_code == 200
        assert response.body == b'{"message":""}'
