from __future__ import annotations

import json

import pytest
from fastapi.exceptions import RequestValidationError

from src.main import app as module_app
from src.main.app import create_app, validation_exception_handler


class _StubMongoDatabase:
    def close(self) -> None:
        pass


class _StubRequest:
    class url:
        path = "/financial/forecast"


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan(monkeypatch) -> None:
    monkeypatch.setattr(
        "src.main.container.MongoDatabase",
        lambda *args, **kwargs: _StubMongoDatabase(),
    )

    app = create_app()
    assert app.title
    paths = {route.path for route in app.routes}
    assert {"/health", "/info", "/financial/revenue", "/financial/reports"} <= paths

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


@pytest.mark.asyncio
async def test_validation_errors_are_reported_as_bad_request() -> None:
    error = RequestValidationError(
        [
            {
                "type": "float_parsing",
                "loc": ("body", "growthRate"),
                "msg": "Input should be a valid number",
                "input": "fast",
            }
        ]
    )

    response = await validation_exception_handler(_StubRequest(), error)

    assert response.status_code == 400
    assert json.loads(response.body) == {
        "detail": {
            "code": "validation_error",
            "message": "growthRate: Input should be a valid number",
        }
    }
