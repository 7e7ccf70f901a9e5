"""Caller-supplied authorization data for driveexport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(slots=True, frozen=True)
class AuthConfig:
    """
    Authorization data passed with a request.

    If `access_token` is set it is used verbatim and no authorizer call is
    made. Otherwise the config drives the interactive consent flow:
        - client_secrets_file: OAuth client secrets JSON (falls back to settings)
        - scopes: OAuth scopes (fall back to settings)
        - extra: any other provider specific values
    """

    access_token: Optional[str] = None
    client_secrets_file: Optional[str] = None
    scopes: tuple[str, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.access_token is not None and not isinstance(self.access_token, str):
            raise TypeError("AuthConfig.access_token must be a string")

        if not all(isinstance(s, str) and s.strip() for s in self.scopes):
            raise ValueError("AuthConfig.scopes must contain non-empty strings")

    @classmethod
    def from_payload(cls, data: Any) -> Optional[AuthConfig]:
        """Build from a message payload `auth` object (camelCase keys accepted)."""
        if data is None:
            return None
        if isinstance(data, AuthConfig):
            return data
        if not isinstance(data, dict):
            raise TypeError("auth must be a dict")

        token = data.get("accessToken", data.get("access_token")) or None
        secrets = data.get("clientSecretsFile", data.get("client_secrets_file")) or None
        scopes = data.get("scopes") or ()
        if isinstance(scopes, str):
            scopes = tuple(s for s in scopes.split() if s)

        known = {
            "accessToken",
            "access_token",
            "clientSecretsFile",
            "client_secrets_file",
            "scopes",
        }
        return cls(
            access_token=token,
            client_secrets_file=secrets,
            scopes=tuple(scopes),
            extra={k: v for k, v in data.items() if k not in known},
        )
