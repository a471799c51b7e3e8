"""ES256 JWT issuance for client identity, session, access and enrollment tokens."""

import logging
from datetime import UTC, datetime

import jwt

from kgt.certificate.resolver import parse_certificate
from kgt.core.errors import KeyFormatError, TokenSigningError
from kgt.crypto.keys import load_ec_public, load_key
from kgt.crypto.types import KeyKind, KeyMaterial
from kgt.tokens.claims import build_claims
from kgt.tokens.types import (
    DecodedToken,
    EnrollmentToken,
    SignedTokenRequest,
    SigningConfig,
)

logger = logging.getLogger(__name__)

ALGORITHM = "ES256"


def _failure_prefix(request: SignedTokenRequest) -> str:
    if isinstance(request, EnrollmentToken):
        return "Failed to create JWT"
    return "Failed to generate JWT"


def _as_utc(now: datetime) -> datetime:
    # naive values are taken as UTC, as PyJWT does for iat and exp
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


class TokenIssuer:
    """Builds and signs the four token variants with an EC P-256 key.

    Holds only its configuration, so one issuer may be shared freely
    between threads.
    """

    def __init__(self, config: SigningConfig | None = None) -> None:
        self._config = config or SigningConfig()

    @property
    def config(self) -> SigningConfig:
        return self._config

    def issue(
        self,
        request: SignedTokenRequest,
        signing_key: KeyMaterial,
        now: datetime | None = None,
    ) -> str:
        """Sign a token request with a loaded EC P-256 private key."""
        if signing_key.kind is not KeyKind.EC_PRIVATE_P256:
            raise TokenSigningError(
                f"{_failure_prefix(request)}: signing key must be "
                f"{KeyKind.EC_PRIVATE_P256}, got {signing_key.kind}"
            )
        issued_at = _as_utc(now or datetime.now(UTC))
        headers, payload = build_claims(request, self._config, issued_at)
        try:
            token = jwt.encode(
                payload, signing_key.key, algorithm=ALGORITHM, headers=headers
            )
        except (jwt.PyJWTError, ValueError, TypeError) as exc:
            raise TokenSigningError(f"{_failure_prefix(request)}: {exc}") from exc
        logger.debug(
            "Issued %s token for sub=%s exp=%s",
            request.kind,
            payload["sub"],
            payload.get("exp"),
        )
        return token

    def issue_with_pem(
        self,
        request: SignedTokenRequest,
        private_key_pem: str,
        now: datetime | None = None,
    ) -> str:
        """Sign a token request with a PEM-encoded PKCS#8 private key."""
        try:
            key = load_key(private_key_pem, KeyKind.EC_PRIVATE_P256)
        except KeyFormatError as exc:
            raise TokenSigningError(f"{_failure_prefix(request)}: {exc}") from exc
        return self.issue(request, key, now)

    def issue_with_certificate(
        self,
        request: SignedTokenRequest,
        certificate_json: bytes | str,
        now: datetime | None = None,
    ) -> str:
        """Sign a token request with the private key of a certificate document.

        Resolution and key loading errors are raised unchanged.
        """
        cert = parse_certificate(certificate_json)
        return self.issue(request, cert.private_key, now)

    def verify(
        self, token: str, public_key_pem: str, audience: str | None = None
    ) -> DecodedToken:
        """Verify an ES256 token against an EC P-256 public key."""
        raw = jwt.decode(
            token,
            load_ec_public(public_key_pem),
            algorithms=[ALGORITHM],
            audience=audience,
            options={"verify_aud": audience is not None},
        )
        return DecodedToken.model_validate(raw)
