"""Loading of PEM-encoded EC P-256 and RSA keys into key objects."""

import base64
import binascii
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ec import (
    SECP256R1,
    EllipticCurvePrivateKey,
    EllipticCurvePublicKey,
)
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from kgt.core.errors import InvalidArgumentError, KeyFormatError
from kgt.crypto.pem import strip_pem
from kgt.crypto.types import KeyKind, KeyMaterial, describe_key

logger = logging.getLogger(__name__)

_DER_ERRORS = (binascii.Error, ValueError, TypeError, UnsupportedAlgorithm)


def _pem_to_der(pem: str, what: str) -> bytes:
    if not isinstance(pem, str):
        raise InvalidArgumentError(
            f"Failed to load {what}: PEM must be a string, got {type(pem).__name__}"
        )
    try:
        return base64.b64decode(strip_pem(pem), validate=True)
    except binascii.Error as exc:
        raise KeyFormatError(f"Failed to load {what}: {exc}") from exc


def load_ec_private(pem: str) -> EllipticCurvePrivateKey:
    """Load a PKCS#8 EC P-256 private key."""
    der = _pem_to_der(pem, "private key")
    try:
        key = serialization.load_der_private_key(der, password=None)
    except _DER_ERRORS as exc:
        raise KeyFormatError(f"Failed to load private key: {exc}") from exc
    if not isinstance(key, EllipticCurvePrivateKey) or not isinstance(
        key.curve, SECP256R1
    ):
        raise KeyFormatError(
            f"Failed to load private key: expected EC P-256, got {describe_key(key)}"
        )
    logger.debug("Loaded EC P-256 private key")
    return key


def load_ec_public(pem: str) -> EllipticCurvePublicKey:
    """Load an X.509 SubjectPublicKeyInfo EC P-256 public key."""
    der = _pem_to_der(pem, "public key")
    try:
        key = serialization.load_der_public_key(der)
    except _DER_ERRORS as exc:
        raise KeyFormatError(f"Failed to load public key: {exc}") from exc
    if not isinstance(key, EllipticCurvePublicKey) or not isinstance(
        key.curve, SECP256R1
    ):
        raise KeyFormatError(
            f"Failed to load public key: expected EC P-256, got {describe_key(key)}"
        )
    logger.debug("Loaded EC P-256 public key")
    return key


def load_rsa_public(pem: str) -> RSAPublicKey:
    """Load an X.509 SubjectPublicKeyInfo RSA public key."""
    der = _pem_to_der(pem, "public key")
    try:
        key = serialization.load_der_public_key(der)
    except _DER_ERRORS as exc:
        raise KeyFormatError(f"Failed to load public key: {exc}") from exc
    if not isinstance(key, RSAPublicKey):
        raise KeyFormatError(
            f"Failed to load public key: expected RSA, got {describe_key(key)}"
        )
    logger.debug("Loaded RSA-%d public key", key.key_size)
    return key


_LOADERS = {
    KeyKind.EC_PRIVATE_P256: load_ec_private,
    KeyKind.EC_PUBLIC_P256: load_ec_public,
    KeyKind.RSA_PUBLIC: load_rsa_public,
}


def load_key(pem: str, kind: KeyKind) -> KeyMaterial:
    """Load a PEM string as the requested kind of key."""
    return KeyMaterial(kind=kind, key=_LOADERS[kind](pem))


def public_key_b64(key: EllipticCurvePublicKey | RSAPublicKey) -> str:
    """Return standard Base64 of a loaded public key's DER encoding."""
    der = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return base64.b64encode(der).decode()


def export_public_key_b64(pem: str) -> str:
    """Return standard Base64 of an EC public key's DER encoding."""
    return public_key_b64(load_ec_public(pem))
