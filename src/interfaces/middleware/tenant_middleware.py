from __future__ import annotations

from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import PermissionDenied
from src.config.settings import Settings

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class TenantMiddleware(BaseHTTPMiddleware):
    """Resolve the farm (tenant) every request is scoped to.

    Authentication happens upstream; this only reads the tenant header.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without tenant checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            tenant_value = request.headers.get(self.settings.tenant_header)
            if not tenant_value:
                raise PermissionDenied("Missing tenant header")
            try:
                tenant_id = UUID(tenant_value)
            except ValueError as exc:
                raise PermissionDenied("Invalid tenant identifier") from exc
            request.state.tenant_id = tenant_id
            return await call_next(request)
        except PermissionDenied as exc:
            payload = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return JSONResponse(status_code=exc.status_code, content=payload)
