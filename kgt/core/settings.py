"""Signing settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from kgt.tokens.types import (
    ACCESS_TTL_DEFAULT,
    CLIENT_IDENTITY_TTL_DEFAULT,
    ENROLLMENT_AUDIENCE,
    PLATFORM_AUDIENCE,
    SESSION_TTL_DEFAULT,
    SigningConfig,
)


class SigningSettings(BaseSettings):
    """Token lifetimes and audiences, overridable per deployment."""

    model_config = SettingsConfigDict(
        env_prefix="KGT_", env_file=".env", extra="ignore"
    )

    client_identity_ttl: int = CLIENT_IDENTITY_TTL_DEFAULT
    session_ttl: int = SESSION_TTL_DEFAULT
    access_ttl: int = ACCESS_TTL_DEFAULT
    platform_audience: str = PLATFORM_AUDIENCE
    enrollment_audience: str = ENROLLMENT_AUDIENCE

    def to_signing_config(self) -> SigningConfig:
        """Freeze the settings into the config passed to a TokenIssuer."""
        return SigningConfig(
            client_identity_ttl=self.client_identity_ttl,
            session_ttl=self.session_ttl,
            access_ttl=self.access_ttl,
            platform_audience=self.platform_audience,
            enrollment_audience=self.enrollment_audience,
        )
