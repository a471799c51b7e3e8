"""Type definitions for certificate documents and resolved identities."""

from pydantic import BaseModel, ConfigDict, Field

from kgt.core.errors import IdentityResolutionError, InvalidArgumentError
from kgt.crypto import keys
from kgt.crypto.types import KeyMaterial


def _first_non_blank(*values: str | None) -> str | None:
    for value in values:
        if value is not None and value.strip():
            return value
    return None


class RawCertificateDocument(BaseModel):
    """A certificate.json document. Several historical spellings are accepted."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    client_identifier: str | None = Field(default=None, alias="clientIdentifier")
    client_id_camel: str | None = Field(default=None, alias="clientId")
    client_id: str | None = None
    public_key_camel: str | None = Field(default=None, alias="publicKey")
    public_key: str | None = None
    private_key_camel: str | None = Field(default=None, alias="privateKey")
    private_key: str | None = None

    def resolved_client_id(self) -> str | None:
        return _first_non_blank(
            self.client_identifier, self.client_id_camel, self.client_id
        )

    def resolved_public_key(self) -> str | None:
        return _first_non_blank(self.public_key_camel, self.public_key)

    def resolved_private_key(self) -> str | None:
        return _first_non_blank(self.private_key_camel, self.private_key)


class ResolvedIdentity(BaseModel):
    """Canonical client identity taken from a certificate document."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    public_key_pem: str | None = None
    private_key_pem: str

    @classmethod
    def from_document(cls, doc: RawCertificateDocument) -> "ResolvedIdentity":
        """Resolve aliases, failing when a required field has no value."""
        client_id = doc.resolved_client_id()
        if client_id is None:
            raise IdentityResolutionError(
                "Certificate JSON missing client identifier field"
            )
        private_key = doc.resolved_private_key()
        if private_key is None:
            raise IdentityResolutionError("Certificate JSON missing private key field")
        return cls(
            client_id=client_id,
            public_key_pem=doc.resolved_public_key(),
            private_key_pem=private_key,
        )


class ParsedCertificate(BaseModel):
    """A resolved identity with its keys loaded."""

    model_config = ConfigDict(frozen=True)

    identity: ResolvedIdentity
    private_key: KeyMaterial
    public_key: KeyMaterial | None = None

    @property
    def client_id(self) -> str:
        return self.identity.client_id

    def public_key_b64(self) -> str:
        """Base64 DER of the certificate's public key, for use as x5c."""
        if self.public_key is None:
            raise InvalidArgumentError(
                "Certificate JSON did not include a public key field; "
                "cannot export public key"
            )
        return keys.public_key_b64(self.public_key.key)
