"""Parsing of certificate.json documents into identities and keys."""

import logging

from pydantic import ValidationError

from kgt.certificate.types import (
    ParsedCertificate,
    RawCertificateDocument,
    ResolvedIdentity,
)
from kgt.core.errors import IdentityResolutionError
from kgt.crypto.keys import load_key
from kgt.crypto.types import KeyKind

logger = logging.getLogger(__name__)


def resolve(json_bytes: bytes | str) -> ResolvedIdentity:
    """Resolve a certificate document to a client id and PEM strings.

    Unknown fields are ignored. For each field the first non-blank alias
    wins: ``clientIdentifier``, ``clientId``, ``client_id`` for the client
    id, camelCase before snake_case for the keys.
    """
    try:
        doc = RawCertificateDocument.model_validate_json(json_bytes)
    except ValidationError as exc:
        raise IdentityResolutionError(
            f"Failed to parse certificate JSON: {exc}"
        ) from exc
    identity = ResolvedIdentity.from_document(doc)
    logger.debug("Resolved certificate for client %s", identity.client_id)
    return identity


def parse_certificate(json_bytes: bytes | str) -> ParsedCertificate:
    """Resolve a certificate document and load its keys.

    Key loading errors are raised as-is, so a bad public key fails the
    whole parse even when the private key is valid.
    """
    identity = resolve(json_bytes)
    public_key = None
    if identity.public_key_pem is not None:
        public_key = load_key(identity.public_key_pem, KeyKind.EC_PUBLIC_P256)
    private_key = load_key(identity.private_key_pem, KeyKind.EC_PRIVATE_P256)
    return ParsedCertificate(
        identity=identity, private_key=private_key, public_key=public_key
    )
