"""Access token acquisition for driveexport."""

from __future__ import annotations

import asyncio
import os
from typing import Optional, Protocol, Sequence, runtime_checkable

from driveexport.errors import AuthorizationError
from driveexport.settings import DEFAULT_SCOPES, DriveExportSettings
from driveexport.util.log import get_logger

from .auth_config import AuthConfig

logger = get_logger(__name__)


@runtime_checkable
class Authorizer(Protocol):
    """Yields a bearer access token or fails."""

    async def authorize(
        self,
        config: Optional[AuthConfig] = None,
        *,
        interactive: bool = False,
    ) -> Optional[str]:
        ...


class GoogleAuthorizer:
    """
    Authorizer backed by google-auth.

    - Explicit config: runs the installed-app consent flow.
    - No config: uses the authorized user token file. When it holds no valid
      token the consent flow runs only if `interactive` is True.

    Tokens are never written back to disk.
    """

    def __init__(self, settings: Optional[DriveExportSettings] = None) -> None:
        self._settings = settings or DriveExportSettings()

    async def authorize(
        self,
        config: Optional[AuthConfig] = None,
        *,
        interactive: bool = False,
    ) -> Optional[str]:
        if config is not None:
            scopes = config.scopes or tuple(self._settings.scopes or DEFAULT_SCOPES)
            secrets = config.client_secrets_file or self._settings.client_secrets_file
            return await asyncio.to_thread(self._run_consent_flow, secrets, scopes)

        scopes = tuple(self._settings.scopes or DEFAULT_SCOPES)
        token = await asyncio.to_thread(self._load_token, scopes)
        if token:
            return token
        if not interactive:
            raise AuthorizationError(
                "No valid stored credentials and interactive authorization is disabled",
                details={"token_file": self._settings.token_file},
            )
        return await asyncio.to_thread(
            self._run_consent_flow,
            self._settings.client_secrets_file,
            scopes,
        )

    def _load_token(self, scopes: Sequence[str]) -> Optional[str]:
        try:
            from google.auth.transport.requests import Request
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthorizationError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        token_file = self._settings.token_file
        if not token_file or not os.path.exists(token_file):
            return None

        try:
            creds = Credentials.from_authorized_user_file(token_file, scopes=list(scopes))
        except Exception as exc:
            raise AuthorizationError(
                "Failed to load token_file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc

        if not creds.valid and creds.refresh_token:
            try:
                creds.refresh(Request())
            except Exception as exc:
                raise AuthorizationError(
                    "Failed to refresh OAuth credentials",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

        if creds.valid:
            return creds.token
        return None

    def _run_consent_flow(self, client_secrets: Optional[str], scopes: Sequence[str]) -> str:
        if not client_secrets:
            raise AuthorizationError("client_secrets_file is not configured")

        try:
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthorizationError(
                "google-auth-oauthlib is not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        logger.info("Starting OAuth consent flow")
        try:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets, scopes=list(scopes))
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthorizationError(
                "OAuth authorization flow failed",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc
        return creds.token


async def obtain_token(
    authorizer: Authorizer,
    auth: Optional[AuthConfig] = None,
    *,
    interactive: bool = False,
) -> str:
    """
    Resolve the access token for a request.

    `auth.access_token` is used verbatim. Other explicit configs go through the
    interactive consent flow; no config requests a token with `interactive`.

    Raises:
        AuthorizationError: on authorizer failure or when no token is returned.
    """
    if auth is not None and auth.access_token:
        return auth.access_token

    try:
        if auth is not None:
            token = await authorizer.authorize(auth, interactive=True)
        else:
            token = await authorizer.authorize(interactive=interactive)
    except AuthorizationError:
        raise
    except Exception as exc:
        raise AuthorizationError(f"Authorization failed: {exc}", cause=exc) from exc

    if not token or not isinstance(token, str):
        raise AuthorizationError("Authorizer returned no access token")
    return token
