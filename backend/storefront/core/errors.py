"""
Mise en forme des erreurs renvoyées au client.

Toutes les erreurs suivent la même enveloppe :
    {"errors": [{"message": ..., "extensions": {"category": ..., "code": ...}}]}
Les messages des erreurs internes ne sont exposés qu'en mode debug.
"""
import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.config import settings
from storefront.core.exceptions import (
    DomainException,
    ERROR_CATEGORY_INTERNAL,
    ERROR_CATEGORY_USER,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INVALID_REQUEST_CODE = "INVALID_ORDER_REQUEST"
BAD_REQUEST_CODE = "BAD_REQUEST"


def format_error(exc: Exception, debug: bool = False) -> Dict[str, Any]:
    """Transforme une exception en descripteur d'erreur client."""
    if isinstance(exc, DomainException):
        category, code = exc.category, exc.code
        message = exc.message if (exc.is_client_safe or debug) else settings.INTERNAL_ERROR_MSG
    else:
        category, code = ERROR_CATEGORY_INTERNAL, INTERNAL_ERROR_CODE
        message = str(exc) if debug else settings.INTERNAL_ERROR_MSG

    extensions: Dict[str, Any] = {"category": category, "code": code}
    if debug:
        extensions["debugMessage"] = str(exc)
        extensions["trace"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return {"message": message, "extensions": extensions}


def error_status_code(exc: Exception) -> int:
    if isinstance(exc, DomainException):
        return exc.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: Exception, debug: Optional[bool] = None) -> JSONResponse:
    if debug is None:
        debug = settings.DEBUG
    return JSONResponse(
        status_code=error_status_code(exc),
        content={"errors": [format_error(exc, debug=debug)]},
    )


def _format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        location = ".".join(str(part) for part in loc)
        # Seuls les corps JSON (commandes, statut) sont des demandes de commande mal formées
        code = INVALID_REQUEST_CODE if loc and loc[0] == "body" else BAD_REQUEST_CODE
        errors.append({
            "message": f"{location}: {err.get('msg')}",
            "extensions": {"category": ERROR_CATEGORY_USER, "code": code},
        })
    return errors


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    if exc.category == ERROR_CATEGORY_INTERNAL:
        logger.error(f"[Errors] {exc.code} sur {request.url.path}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"[Errors] {exc.code} sur {request.url.path}: {exc.message}")
    return error_response(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"[Errors] Requête invalide sur {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": _format_validation_errors(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[Errors] Erreur inattendue sur {request.url.path}: {exc}")
    return error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Branche les handlers d'erreurs sur l'application."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
