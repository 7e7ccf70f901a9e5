"""Public auth exports for driveexport."""

from __future__ import annotations

from .auth_config import AuthConfig
from .authorizer import Authorizer, GoogleAuthorizer, obtain_token

__all__ = ["AuthConfig", "Authorizer", "GoogleAuthorizer", "obtain_token"]
