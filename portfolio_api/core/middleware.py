from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from portfolio_api.core.exceptions import TokenMissingException, TokenInvalidException, UnauthorizedException
from portfolio_api.core.handlers import error_response
from portfolio_api.core.jwt_handler import verify_token

# (method, path) pairs reachable without a session token
public_routes = {
    ("POST", "/auth/login"),
    ("GET", "/portfolio"),
    ("POST", "/contact"),
    ("GET", "/health"),
}

exempt_paths = {
    "/openapi.json",
    "/docs",
    "/docs/oauth2-redirect",
    "/redoc",
}

exempt_prefixes = (
    "/uploads/",
)


def extract_bearer_token(auth_header: str) -> str:
    """Return the token from an `Authorization: Bearer <token>` header value"""
    if not auth_header:
        raise TokenMissingException()
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise TokenInvalidException("Invalid authorization header")
    return parts[1]


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """Middleware to validate JWT token on incoming requests.

    Every route except `public_routes`, `exempt_paths` and `exempt_prefixes`
    needs a valid bearer token. The wrapped handler is never called when the
    check fails.
    """

    def __init__(self, app):
        super().__init__(app)
        self.public_routes = set(public_routes)
        self.exempt_paths = set(exempt_paths)

    def is_public(self, method: str, path: str) -> bool:
        if method == "OPTIONS":
            # CORS preflight
            return True
        path = path.rstrip("/") or "/"
        if path in self.exempt_paths or path.startswith(exempt_prefixes):
            return True
        if method == "HEAD":
            method = "GET"
        return (method, path) in self.public_routes

    async def dispatch(self, request: Request, call_next) -> Response:
        if self.is_public(request.method, request.url.path):
            return await call_next(request)

        try:
            token = extract_bearer_token(request.headers.get("authorization"))
            payload = verify_token(token)
        except UnauthorizedException as e:
            return error_response(e.status_code, e.message, e.errors)

        # Downstream dependencies resolve the administrator from this payload
        request.state.token_payload = payload

        return await call_next(request)
