"""Shared test fixtures for key material and certificate documents."""

import json
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey


def private_pem(key: EllipticCurvePrivateKey | RSAPrivateKey) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


def public_pem(key: EllipticCurvePrivateKey | RSAPrivateKey) -> str:
    return (
        key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep ambient KGT_ settings and any .env file out of tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "KGT_CLIENT_IDENTITY_TTL",
        "KGT_SESSION_TTL",
        "KGT_ACCESS_TTL",
        "KGT_PLATFORM_AUDIENCE",
        "KGT_ENROLLMENT_AUDIENCE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def ec_key() -> EllipticCurvePrivateKey:
    """A fresh EC P-256 private key."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """A fresh RSA-2048 private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def ec_private_pem(ec_key: EllipticCurvePrivateKey) -> str:
    return private_pem(ec_key)


@pytest.fixture
def ec_public_pem(ec_key: EllipticCurvePrivateKey) -> str:
    return public_pem(ec_key)


@pytest.fixture
def rsa_public_pem(rsa_key: RSAPrivateKey) -> str:
    return public_pem(rsa_key)


@pytest.fixture
def certificate_json(ec_private_pem: str, ec_public_pem: str) -> bytes:
    """A certificate.json document using the camelCase spellings."""
    return json.dumps(
        {
            "clientIdentifier": "client-1",
            "publicKey": ec_public_pem,
            "privateKey": ec_private_pem,
        }
    ).encode()
