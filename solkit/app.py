"""The HTTP application and the command that serves it."""

from __future__ import annotations

import argparse
from typing import Any, Callable

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from . import handlers
from .errors import AppError, ErrorKind
from .models import success_body

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def _error_response(error: AppError) -> JSONResponse:
    return JSONResponse(error.to_body(), status_code=error.status)


def _json_endpoint(handler: Callable[[Any], dict]):
    async def endpoint(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError:
            return _error_response(AppError(ErrorKind.MISSING_FIELDS))
        try:
            data = handler(payload)
        except AppError as error:
            return _error_response(error)
        return JSONResponse(success_body(data))

    return endpoint


async def _keypair_endpoint(request: Request) -> JSONResponse:
    return JSONResponse(success_body(handlers.generate_keypair()))


def create_app() -> Starlette:
    """Build the application with all API routes."""
    routes = [
        Route("/keypair", _keypair_endpoint, methods=["POST"]),
        Route("/token/create", _json_endpoint(handlers.create_token), methods=["POST"]),
        Route("/token/mint", _json_endpoint(handlers.mint_token), methods=["POST"]),
        Route("/message/sign", _json_endpoint(handlers.sign_message), methods=["POST"]),
        Route("/message/verify", _json_endpoint(handlers.verify_message), methods=["POST"]),
        Route("/send/sol", _json_endpoint(handlers.send_sol), methods=["POST"]),
        Route("/send/token", _json_endpoint(handlers.send_token), methods=["POST"]),
    ]
    return Starlette(routes=routes)


def main(argv: list[str] | None = None) -> None:
    """Serve the API."""
    parser = argparse.ArgumentParser(description="Serve the keypair and instruction API.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    print(f"Listening on {args.host}:{args.port}", flush=True)
    uvicorn.run(create_app(), host=args.host, port=args.port)