"""Authentication Gate — Basic credential check in front of every route.

Invariants:
    - Runs as middleware, before routing: no route, dependency, or DB session
      is reached by an unauthenticated request
    - Missing, malformed, undecodable, or unverified credentials → 401, empty body,
      WWW-Authenticate: Basic realm="..."
    - Success sets request.user (SimpleUser) and request.auth scopes ["authenticated"]
    - Only configured exempt path prefixes (health probes) bypass the check

Design Decisions:
    - Starlette AuthenticationMiddleware + AuthenticationBackend: the framework's
      own seam for attaching an identity to the connection
    - Verification delegated to a CredentialVerifier (identity store is pluggable)
"""

import logging
from typing import Sequence

from fastapi import FastAPI, status
from starlette.authentication import (
    AuthCredentials, AuthenticationBackend, AuthenticationError, SimpleUser,
)
from starlette.middleware.authentication import AuthenticationMiddleware
from starlette.requests import HTTPConnection
from starlette.responses import Response

from warehouse_api.core.boundary_protocols import CredentialVerifier
from warehouse_api.core.credentials import parse_basic_authorization

logger = logging.getLogger(__name__)


class BasicAuthBackend(AuthenticationBackend):
    """Verifies `Authorization: Basic ...` against a CredentialVerifier."""

    def __init__(
        self, verifier: CredentialVerifier, exempt_paths: Sequence[str] = (),
    ):
        self._verifier = verifier
        self._exempt_paths = tuple(p.rstrip("/") for p in exempt_paths if p)

    async def authenticate(self, conn: HTTPConnection):
        if self._is_exempt(conn.url.path):
            return None
        credentials = parse_basic_authorization(conn.headers.get("authorization"))
        if credentials is None:
            logger.info(
                "Missing or malformed Basic credentials",
                extra={"path": conn.url.path},
            )
            raise AuthenticationError("Missing or malformed Basic credentials")
        if not self._verifier.verify(credentials.username, credentials.password):
            logger.warning(
                "Rejected Basic credentials",
                extra={"path": conn.url.path, "username": credentials.username},
            )
            raise AuthenticationError("Invalid username or password")
        return AuthCredentials(["authenticated"]), SimpleUser(credentials.username)

    def _is_exempt(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix + "/")
            for prefix in self._exempt_paths
        )


def basic_challenge(realm: str):
    """Build the on_error callback answering 401 with a Basic challenge."""

    def _on_error(conn: HTTPConnection, exc: AuthenticationError) -> Response:
        return Response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": f'Basic realm="{realm}", charset="UTF-8"'},
        )

    return _on_error


def install_auth_gate(
    app: FastAPI,
    verifier: CredentialVerifier,
    realm: str,
    exempt_paths: Sequence[str] = (),
) -> None:
    """Register the gate middleware on the app."""
    app.add_middleware(
        AuthenticationMiddleware,
        backend=BasicAuthBackend(verifier, exempt_paths),
        on_error=basic_challenge(realm),
    )
