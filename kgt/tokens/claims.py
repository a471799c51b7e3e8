"""Header and claim construction for each signed token variant."""

import calendar
from datetime import datetime, timedelta
from typing import Any

from kgt.core.errors import InvalidArgumentError
from kgt.tokens.types import (
    AccessDelegationToken,
    ClientIdentityToken,
    EnrollmentToken,
    SessionToken,
    SignedTokenRequest,
    SigningConfig,
)

SESSION_SUBJECT = "session"
ACCESS_SUBJECT = "access"
CLIENT_SCOPE = "all"

_UINT32_MASK = 0xFFFFFFFF


def idp_token_hash(token: str) -> str:
    """Hex of the 32-bit string hash the platform expects in ``idp_at``.

    Computed as ``h = 31 * h + unit`` over UTF-16 code units and printed
    as unsigned lowercase hex without leading zeros.
    """
    h = 0
    encoded = token.encode("utf-16-be")
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        h = (31 * h + unit) & _UINT32_MASK
    return format(h, "x")


def _require(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError(f"{name} must not be blank")
    return value


def build_claims(
    request: SignedTokenRequest, config: SigningConfig, now: datetime
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return ``(extra_headers, payload)`` for a token request."""
    headers: dict[str, Any] = {"typ": "JWT"}
    match request:
        case ClientIdentityToken():
            payload: dict[str, Any] = {
                "sub": _require(request.subject, "client id"),
                "aud": config.platform_audience,
                "cdt": calendar.timegm(now.utctimetuple()),
                "scope": CLIENT_SCOPE,
                "iat": now,
                "exp": now + timedelta(seconds=config.client_identity_ttl),
            }
            if request.idp_access_token is not None:
                payload["idp_at"] = idp_token_hash(request.idp_access_token)
        case SessionToken():
            payload = {
                "sub": SESSION_SUBJECT,
                "aud": config.platform_audience,
                "st": _require(request.session_token, "session token"),
                "iat": now,
                "exp": now + timedelta(seconds=config.session_ttl),
            }
        case AccessDelegationToken():
            payload = {
                "sub": ACCESS_SUBJECT,
                "aud": config.platform_audience,
                "at": _require(request.access_token_raw, "access token"),
                "iat": now,
                "exp": now + timedelta(seconds=config.access_ttl),
            }
        case EnrollmentToken():
            client_id = _require(request.subject, "client id")
            headers["kid"] = client_id
            if request.x5c_public_key_b64 and request.x5c_public_key_b64.strip():
                headers["x5c"] = [request.x5c_public_key_b64]
            payload = {
                "sub": client_id,
                "aud": config.enrollment_audience,
                "imei": _require(request.device_imei, "device IMEI"),
                "iat": now,
            }
        case _:
            raise InvalidArgumentError(
                f"Unsupported token request: {type(request).__name__}"
            )
    return headers, payload
