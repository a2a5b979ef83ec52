"""Shared-secret API key gate in front of the Planner resource routes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from http import HTTPStatus

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from packages.planner_shared.config import AuthSettings
from packages.planner_shared.http import get_header
from packages.planner_shared.logging import fields, get_logger, log_context

_LOGGER = get_logger(__name__)

PROTECTED_PREFIXES: tuple[str, ...] = ("/schedule", "/task")

MISSING_CREDENTIALS_BODY: dict[str, object] = {
    "message": ["Required security credentials are missing or expired [apiKey]"],
    "error": "Missing required security credentials",
    "statusCode": int(HTTPStatus.FORBIDDEN),
}
INVALID_KEY_BODY: dict[str, object] = {"message": "Invalid API Key provided"}


class ApiKeyGate:
    """Reject protected requests whose key header is absent or not permitted."""

    def __init__(
        self,
        *,
        settings: AuthSettings,
        protected_prefixes: tuple[str, ...] = PROTECTED_PREFIXES,
    ) -> None:
        self._header_name = settings.header_name
        self._permissible_keys = settings.permissible_keys()
        self._protected_prefixes = protected_prefixes

    def protects(self, path: str) -> bool:
        """Return ``True`` when ``path`` falls under a protected prefix."""
        return any(
            path == prefix or path.startswith(f"{prefix}/")
            for prefix in self._protected_prefixes
        )

    def check(self, request: Request) -> JSONResponse | None:
        """Return a rejection response, or ``None`` to let the request through."""
        if not self.protects(request.url.path):
            return None

        key = get_header(request, self._header_name, required=False, strip=False)
        if key is None or key.strip() == "":
            return JSONResponse(
                status_code=HTTPStatus.FORBIDDEN, content=MISSING_CREDENTIALS_BODY
            )

        if key not in self._permissible_keys:
            with log_context(
                {
                    fields.HTTP_METHOD: request.method,
                    fields.HTTP_PATH: request.url.path,
                }
            ):
                _LOGGER.warning("api key mismatch")
            return JSONResponse(status_code=HTTPStatus.FORBIDDEN, content=INVALID_KEY_BODY)
        return None


def install_api_key_gate(app: FastAPI, gate: ApiKeyGate) -> None:
    """Run ``gate`` ahead of every route handler on ``app``."""

    @app.middleware("http")
    async def _api_key_gate(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        rejection = gate.check(request)
        if rejection is not None:
            return rejection
        return await call_next(request)
