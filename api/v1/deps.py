# api/v1/deps.py
from __future__ import annotations

import logging
from typing import Awaitable, Callable

import jwt
from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.rate_limit import RATE_LIMITS, RateLimiter, rate_limit_headers
from services.auth import verify_token

_LOG = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


async def current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str:
    if creds is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Not authenticated")
    try:
        return verify_token(creds.credentials)
    except (jwt.PyJWTError, KeyError) as exc:
        _LOG.info("rejected bearer token: %s", exc)
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid token") from exc


def get_limiter(request: Request) -> RateLimiter:
    return request.app.state.limiter


def rate_limited(operation: str) -> Callable[..., Awaitable[str]]:
    """
    Dependency factory: authenticate, then spend one request of
    `operation`'s budget.  Resolves to the user id; a denial becomes a 429.
    """
    config = RATE_LIMITS[operation]

    async def _guard(
        response: Response,
        user_id: str = Depends(current_user),
        limiter: RateLimiter = Depends(get_limiter),
    ) -> str:
        result = limiter.check(user_id, operation, config)
        headers = rate_limit_headers(result)
        if not result.allowed:
            raise HTTPException(
                status.HTTP_429_TOO_MANY_REQUESTS,
                f"Too many requests. Try again in {result.retry_after}s.",
                headers=headers,
            )
        response.headers.update(headers)
        return user_id

    return _guard
