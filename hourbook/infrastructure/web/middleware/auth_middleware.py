"""
Authentication middleware for FastAPI.
Handles JWT token validation and user context injection.
"""

import logging
import time
from typing import Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from hourbook.config import get_settings
from hourbook.infrastructure.auth.jwt_handler import JWTHandler
from hourbook.domain.models.base import ValidationError


logger = logging.getLogger(__name__)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Rejects unauthenticated requests to anything but the public endpoints."""

    def __init__(self, app, jwt_handler: Optional[JWTHandler] = None):
        super().__init__(app)
        self.jwt_handler = jwt_handler or JWTHandler()

        api_prefix = get_settings().api_prefix
        self.public_endpoints = {
            "/",
            "/docs",
            "/redoc",
            "/openapi.json",
            "/docs/oauth2-redirect",
            f"{api_prefix}/health",
            f"{api_prefix}/docs",
            f"{api_prefix}/redoc",
            f"{api_prefix}/openapi.json",
        }

    async def dispatch(self, request: Request, call_next):
        """Process request through authentication middleware."""
        start_time = time.time()

        # CORS preflight carries no credentials
        if request.method == "OPTIONS" or self._is_public_endpoint(request.url.path):
            return await call_next(request)

        token = self._extract_token(request)
        if not token:
            return self._create_auth_error("Missing authorization header")

        try:
            payload = self.jwt_handler.verify_token(token)
        except ValidationError as e:
            logger.info(f"Rejected token on {request.url.path}: {e.message}")
            return self._create_auth_error(e.message)

        request.state.user_id = payload["sub"]
        request.state.user_email = payload.get("email")

        response = await call_next(request)

        response.headers["X-Process-Time"] = str(time.time() - start_time)
        return response

    def _is_public_endpoint(self, path: str) -> bool:
        return path.rstrip("/") in self.public_endpoints or path in self.public_endpoints

    def _extract_token(self, request: Request) -> Optional[str]:
        """Extract JWT token from Authorization header."""
        auth_header = request.headers.get("authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            return None

        return auth_header[7:]

    def _create_auth_error(self, detail: str) -> JSONResponse:
        """Create standardized authentication error response."""
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "detail": detail,
                "type": "authentication_error"
            },
            headers={"WWW-Authenticate": "Bearer"}
        )
