import json

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from storefront.core.errors import error_response, format_error, register_exception_handlers
from storefront.orders.exceptions import InvalidQuantityException, OrderPersistenceException


def test_user_error_message_is_kept():
    error = format_error(InvalidQuantityException("ps5", 0))
    assert error["message"] == "Invalid quantity (0) for product ps5. Quantity must be greater than 0."
    assert error["extensions"] == {"category": "user", "code": "INVALID_QUANTITY"}


def test_internal_error_message_is_masked_outside_debug():
    error = format_error(OrderPersistenceException("duplicate key value violates constraint"), debug=False)
    assert error["message"] == "Internal server error."
    assert error["extensions"] == {"category": "internal", "code": "ORDER_PERSISTENCE_FAILED"}


def test_debug_mode_adds_details():
    error = format_error(RuntimeError("boom"), debug=True)
    assert error["message"] == "boom"
    assert error["extensions"]["category"] == "internal"
    assert error["extensions"]["code"] == "INTERNAL_ERROR"
    assert error["extensions"]["debugMessage"] == "boom"
    assert isinstance(error["extensions"]["trace"], list)


def test_error_response_envelope():
    response = error_response(OrderPersistenceException("db down"), debug=False)
    assert response.status_code == 500
    assert json.loads(response.body) == {
        "errors": [{"message": "Internal server error.", "extensions": {"category": "internal", "code": "ORDER_PERSISTENCE_FAILED"}}]
    }


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_internal_error():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise KeyError("secret detail")

    # raise_app_exceptions=False : Starlette relance l'exception après avoir envoyé la réponse 500
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    error = response.json()["errors"][0]
    assert error["message"] == "Internal server error."
    assert error["extensions"] == {"category": "internal", "code": "INTERNAL_ERROR"}
