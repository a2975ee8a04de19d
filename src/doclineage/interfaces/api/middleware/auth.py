"""Auth middleware - reads the user resolved by the upstream gateway."""

from dataclasses import dataclass

import falcon.asgi

USER_HEADER = "X-User-Id"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Middleware that sets req.context.user from the gateway's user header.

    Token validation and role checks happen upstream; requests without the
    header get req.context.user = None and mutations answer 401.
    """

    def __init__(self, header: str = USER_HEADER) -> None:
        self._header = header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from the user header."""
        user_id = (req.get_header(self._header) or "").strip()
        req.context.user = RequestUser(user_id=user_id) if user_id else None
