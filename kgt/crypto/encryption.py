"""RSA encryption of small plaintexts under PKCS#1 v1.5 padding.

Only a single RSA block is ever produced, so the plaintext is bounded by
the recipient's modulus: ``modulus_bytes - 11`` bytes, which is 245 for
a 2048-bit key. Larger payloads need hybrid encryption, which this
module does not provide.
"""

import base64
import logging
from typing import cast

from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from kgt.core.errors import (
    EncryptionError,
    InvalidArgumentError,
    KeyFormatError,
    PayloadTooLargeError,
)
from kgt.crypto.keys import load_rsa_public
from kgt.crypto.types import EncryptionRequest, KeyKind

logger = logging.getLogger(__name__)

PKCS1_V15_OVERHEAD = 11


def max_plaintext_length(modulus_bits: int) -> int:
    """Largest plaintext accepted for a modulus of the given bit size."""
    return (modulus_bits + 7) // 8 - PKCS1_V15_OVERHEAD


def _encrypt_block(data: bytes, key: RSAPublicKey) -> str:
    limit = max_plaintext_length(key.key_size)
    if len(data) > limit:
        raise PayloadTooLargeError(length=len(data), limit=limit)
    try:
        ciphertext = key.encrypt(data, padding.PKCS1v15())
    except ValueError as exc:
        raise EncryptionError(f"Failed to RSA encrypt payload: {exc}") from exc
    logger.debug("Encrypted %d bytes for RSA-%d key", len(data), key.key_size)
    return base64.b64encode(ciphertext).decode()


def encrypt_small_payload(public_key_pem: str, plaintext: str | bytes | None) -> str:
    """Encrypt a small plaintext for an RSA public key, returning Base64.

    String plaintexts are encoded as UTF-8 before the size check.
    """
    if plaintext is None:
        raise InvalidArgumentError("plaintext cannot be None")
    data = plaintext.encode() if isinstance(plaintext, str) else plaintext
    return _encrypt_block(data, load_rsa_public(public_key_pem))


def encrypt_request(request: EncryptionRequest) -> str:
    """Encrypt an EncryptionRequest whose recipient key is already loaded."""
    if request.recipient_key.kind is not KeyKind.RSA_PUBLIC:
        raise KeyFormatError(
            f"Failed to load public key: expected RSA, got {request.recipient_key.kind}"
        )
    # KeyMaterial guarantees an RSA_PUBLIC kind holds an RSAPublicKey
    key = cast(RSAPublicKey, request.recipient_key.key)
    return _encrypt_block(request.plaintext, key)
