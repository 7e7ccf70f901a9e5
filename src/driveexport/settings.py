"""Configuration for driveexport (environment / .env driven)."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.file",)


class DriveExportSettings(BaseSettings):
    """
    Instance defaults and endpoints for DriveExportService.

    Values can be overridden with `DRIVE_EXPORT_*` environment variables.
    """

    mime: Optional[str] = Field(
        default="application/restclient+data",
        description="Drive registered content type applied to files without mimeType",
    )
    file_description: Optional[str] = Field(
        default="Advanced REST client data export file.",
        description="Default file description",
    )
    file_type: Optional[str] = Field(
        default="application/json",
        description="Default media content type",
    )

    upload_url: str = "https://www.googleapis.com/upload/drive/v3/files"
    files_url: str = "https://www.googleapis.com/drive/v3/files"
    folder_create_url: str = "https://content.googleapis.com/drive/v3/files"

    client_secrets_file: Optional[str] = None
    token_file: Optional[str] = None
    scopes: Optional[list[str]] = Field(
        default_factory=lambda: list(DEFAULT_SCOPES),
        description="OAuth scopes (comma-separated in the environment)",
    )

    timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="DRIVE_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("scopes", mode="before")
    @classmethod
    def parse_scopes(cls, v):
        """Accept comma-separated scopes from the environment."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v
