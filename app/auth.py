"""Authorization decision for restricted sector data.

Every endpoint that returns sectors depends on :func:`is_authorized`, so the
search and sectors endpoints always agree. Exactly one mode is active:

- ``token``: ``Authorization: Bearer <token>`` must equal SECTOR_ACCESS_TOKEN.
- ``session``: the signed session cookie carries a signed-in ``user``.
  Signing in is handled by the deployment's identity provider.
"""

import secrets

from fastapi import Request
from loguru import logger

from app.config import settings


def _bearer_token(request: Request) -> str:
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def _token_authorized(request: Request) -> bool:
    expected = settings.sector_access_token
    if not expected:
        return False
    token = _bearer_token(request)
    return bool(token) and secrets.compare_digest(
        token.encode("utf-8"), expected.encode("utf-8")
    )


def _session_authorized(request: Request) -> bool:
    if "session" not in request.scope:
        logger.warning("Session auth mode active but SessionMiddleware is not installed")
        return False
    return bool(request.session.get("user"))


def is_authorized(request: Request) -> bool:
    """True if the caller may see the restricted sector region."""
    if settings.auth_mode == "session":
        return _session_authorized(request)
    return _token_authorized(request)
