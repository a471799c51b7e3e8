"""Type definitions for loaded key material and encryption requests."""

from enum import StrEnum
from typing import Self

from cryptography.hazmat.primitives.asymmetric.ec import (
    SECP256R1,
    EllipticCurvePrivateKey,
    EllipticCurvePublicKey,
)
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from pydantic import BaseModel, ConfigDict, model_validator

from kgt.core.errors import KeyFormatError

LoadedKey = EllipticCurvePrivateKey | EllipticCurvePublicKey | RSAPublicKey


class KeyKind(StrEnum):
    """The kinds of key the loader can produce."""

    EC_PRIVATE_P256 = "ec_private_p256"
    EC_PUBLIC_P256 = "ec_public_p256"
    RSA_PUBLIC = "rsa_public"


_KEY_TYPES: dict[KeyKind, type] = {
    KeyKind.EC_PRIVATE_P256: EllipticCurvePrivateKey,
    KeyKind.EC_PUBLIC_P256: EllipticCurvePublicKey,
    KeyKind.RSA_PUBLIC: RSAPublicKey,
}


def describe_key(key: object) -> str:
    """Short human-readable name of a key's algorithm."""
    if isinstance(key, (EllipticCurvePrivateKey, EllipticCurvePublicKey)):
        return f"EC {key.curve.name}"
    if isinstance(key, RSAPublicKey):
        return "RSA"
    return type(key).__name__


class KeyMaterial(BaseModel):
    """A loaded key tagged with its kind. Built per call, never cached."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: KeyKind
    key: LoadedKey

    @model_validator(mode="after")
    def _key_matches_kind(self) -> Self:
        matches = isinstance(self.key, _KEY_TYPES[self.kind])
        if matches and self.kind is not KeyKind.RSA_PUBLIC:
            matches = isinstance(self.key.curve, SECP256R1)
        if not matches:
            raise KeyFormatError(
                f"Key of kind {self.kind} cannot hold {describe_key(self.key)} key"
            )
        return self


class EncryptionRequest(BaseModel):
    """A plaintext addressed to an RSA public key."""

    model_config = ConfigDict(frozen=True)

    plaintext: bytes
    recipient_key: KeyMaterial
