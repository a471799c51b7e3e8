"""Type definitions for signed token requests and signing configuration."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

CLIENT_IDENTITY_TTL_DEFAULT = 315_532_800
SESSION_TTL_DEFAULT = 3600
ACCESS_TTL_DEFAULT = 3600
PLATFORM_AUDIENCE = "PTSDIRECT.ORG"
ENROLLMENT_AUDIENCE = "kpe_v2"


class SigningConfig(BaseModel):
    """Lifetimes (seconds) and audiences applied by a TokenIssuer."""

    model_config = ConfigDict(frozen=True)

    client_identity_ttl: PositiveInt = CLIENT_IDENTITY_TTL_DEFAULT
    session_ttl: PositiveInt = SESSION_TTL_DEFAULT
    access_ttl: PositiveInt = ACCESS_TTL_DEFAULT
    platform_audience: str = PLATFORM_AUDIENCE
    enrollment_audience: str = ENROLLMENT_AUDIENCE


class ClientIdentityToken(BaseModel):
    """Long-lived machine identity assertion for a client id."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["client_identity"] = "client_identity"
    subject: str
    idp_access_token: str | None = None


class SessionToken(BaseModel):
    """Short-lived wrapper around a platform session token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["session"] = "session"
    session_token: str


class AccessDelegationToken(BaseModel):
    """Short-lived wrapper around a raw platform access token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["access"] = "access"
    access_token_raw: str


class EnrollmentToken(BaseModel):
    """Device-binding assertion consumed by the enrollment call."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["enrollment"] = "enrollment"
    subject: str
    device_imei: str
    x5c_public_key_b64: str | None = None


SignedTokenRequest = Annotated[
    ClientIdentityToken | SessionToken | AccessDelegationToken | EnrollmentToken,
    Field(discriminator="kind"),
]


class DecodedToken(BaseModel):
    """Verified JWT claims."""

    model_config = ConfigDict(extra="allow")

    sub: str = ""
    aud: str | list[str] = ""
    iat: int | None = None
    exp: int | None = None
    scope: str | None = None
    cdt: int | None = None
    idp_at: str | None = None
    st: str | None = None
    at: str | None = None
    imei: str | None = None
