"""Tests for the FastAPI error handlers."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from sentinel_api.common.errors import (
    ConflictError,
    ErrorKind,
    InternalFailure,
    NotFoundError,
    RepositoryError,
    ValidationFailure,
)
from sentinel_api.common.exceptions import register_exception_handlers, status_for


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/validation")
    async def _validation() -> None:
        raise ValidationFailure("No changes to update")

    @app.get("/missing")
    async def _missing() -> None:
        raise NotFoundError("Service account not found")

    @app.get("/conflict")
    async def _conflict() -> None:
        raise ConflictError("Service account name already exists")

    @app.get("/internal")
    async def _internal() -> None:
        raise InternalFailure()

    @app.get("/boom")
    async def _boom() -> None:
        raise RuntimeError("kaboom")

    return app


@pytest.mark.parametrize(
    ("path", "status_code", "detail"),
    [
        ("/validation", 400, "No changes to update"),
        ("/missing", 404, "Service account not found"),
        ("/conflict", 409, "Service account name already exists"),
        ("/internal", 500, "Database error"),
    ],
)
@pytest.mark.asyncio
async def test_repository_errors_map_to_status(path: str, status_code: int, detail: str) -> None:
    transport = ASGITransport(app=_build_app())
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get(path)

    assert response.status_code == status_code
    assert response.json() == {"detail": detail}


@pytest.mark.asyncio
async def test_internal_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    transport = ASGITransport(app=_build_app())
    with caplog.at_level(logging.ERROR, logger="sentinel_api.repository"):
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            await client.get("/internal")
            await client.get("/missing")

    records = [record for record in caplog.records if record.name == "sentinel_api.repository"]
    assert len(records) == 1
    assert records[0].path == "/internal"
    assert records[0].kind == "internal"


@pytest.mark.asyncio
async def test_unhandled_exception_returns_generic_500() -> None:
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_status_for_every_kind() -> None:
    assert status_for(ValidationFailure("x")) == 400
    assert status_for(NotFoundError("x")) == 404
    assert status_for(ConflictError("x")) == 409
    assert status_for(InternalFailure()) == 500


def test_error_kinds_and_messages() -> None:
    error = InternalFailure()

    assert isinstance(error, RepositoryError)
    assert error.kind is ErrorKind.INTERNAL
    assert error.message == "Database error"
    assert str(ConflictError("Project Id, scope combination already exists")) == (
        "Project Id, scope combination already exists"
    )
    assert NotFoundError("Project not found").kind == "not_found"
