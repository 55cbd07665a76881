"""
Cross-origin access control.

The policy is parsed once at startup from the ALLOWED_ORIGINS setting and is
immutable afterwards; the middleware and the 500 handler receive it explicitly.
"""
from fastapi import Request, Response, status
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

ANY_ORIGIN = "*"


class CorsPolicy(BaseModel):
    """Which browser origins may call the API."""

    allow_any_origin: bool = True
    allowed_origins: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def from_setting(cls, raw: str | None) -> "CorsPolicy":
        """
        Build a policy from the configured value.

        Blank or "*" allows any origin. Anything else is a comma-separated
        allow-list; entries are trimmed and empty entries dropped.
        """
        if raw is None or not raw.strip() or raw.strip() == ANY_ORIGIN:
            return cls(allow_any_origin=True)
        origins = tuple(entry.strip() for entry in raw.split(",") if entry.strip())
        return cls(allow_any_origin=False, allowed_origins=origins)

    def pick_origin(self, origin: str | None) -> str | None:
        """
        Return the value for Access-Control-Allow-Origin, or None if not permitted.

        The request origin itself is always echoed back, never a bare "*".
        """
        if not origin:
            return None
        if self.allow_any_origin:
            return origin
        folded = origin.casefold()
        if any(allowed.casefold() == folded for allowed in self.allowed_origins):
            return origin
        return None

    def apply(self, request: Request, response: Response) -> Response:
        """Stamp Vary and, when the origin is permitted, Access-Control-Allow-Origin on a response."""
        response.headers.add_vary_header("Origin")
        allowed = self.pick_origin(request.headers.get("origin"))
        if allowed:
            response.headers["Access-Control-Allow-Origin"] = allowed
        return response


class CorsMiddleware(BaseHTTPMiddleware):
    """
    Answers preflight requests before routing and decorates every other response.

    Preflight (OPTIONS) gets 204 with the requested methods/headers echoed back
    ("*" when the browser did not ask for any).
    """

    def __init__(self, app: ASGIApp, policy: CorsPolicy) -> None:
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method.upper() == "OPTIONS":
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
            response.headers["Access-Control-Allow-Headers"] = (
                request.headers.get("access-control-request-headers") or ANY_ORIGIN
            )
            response.headers["Access-Control-Allow-Methods"] = (
                request.headers.get("access-control-request-method") or ANY_ORIGIN
            )
            return self.policy.apply(request, response)

        response = await call_next(request)
        return self.policy.apply(request, response)
