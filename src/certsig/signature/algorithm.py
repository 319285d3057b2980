"""Signing key classification for X.509 signing certificates.

Signature algorithms supported:
  - PS256 / PS384 / PS512  (RSASSA-PSS with SHA-256 / SHA-384 / SHA-512)
  - ES256 / ES384 / ES512  (ECDSA on secp256r1 / secp384r1 / secp521r1)

Key policy (closed allow-list, sizes matched exactly):
  RSA: 2048, 3072, 4096 bit modulus
  EC:  256, 384, 521 bit NIST prime curves

The module exposes:
  resolve_key_spec(public_key) -> KeySpec
  extract_key_spec(certificate) -> KeySpec
  KeySpec.signature_algorithm() -> Algorithm

Anything outside the policy raises UnsupportedSigningKeyError. Nothing here
does I/O or keeps state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from .errors import UnsupportedSigningKeyError


class Algorithm(IntEnum):
    """Signature algorithms. Ordinals are stable and may be persisted."""

    PS256 = 1  # RSASSA-PSS with SHA-256
    PS384 = 2  # RSASSA-PSS with SHA-384
    PS512 = 3  # RSASSA-PSS with SHA-512
    ES256 = 4  # ECDSA on secp256r1 with SHA-256
    ES384 = 5  # ECDSA on secp384r1 with SHA-384
    ES512 = 6  # ECDSA on secp521r1 with SHA-512

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def hash(self) -> hashes.HashAlgorithm:
        return _HASHES[self]()


class KeyType(IntEnum):
    RSA = 1
    EC = 2


_DESCRIPTIONS = MappingProxyType({
    Algorithm.PS256: "RSASSA-PSS with SHA-256",
    Algorithm.PS384: "RSASSA-PSS with SHA-384",
    Algorithm.PS512: "RSASSA-PSS with SHA-512",
    Algorithm.ES256: "ECDSA on secp256r1 with SHA-256",
    Algorithm.ES384: "ECDSA on secp384r1 with SHA-384",
    Algorithm.ES512: "ECDSA on secp521r1 with SHA-512",
})

_HASHES = MappingProxyType({
    Algorithm.PS256: hashes.SHA256,
    Algorithm.PS384: hashes.SHA384,
    Algorithm.PS512: hashes.SHA512,
    Algorithm.ES256: hashes.SHA256,
    Algorithm.ES384: hashes.SHA384,
    Algorithm.ES512: hashes.SHA512,
})

RSA_KEY_SIZES = frozenset({2048, 3072, 4096})
EC_KEY_SIZES = frozenset({256, 384, 521})

# bit size -> the only curve accepted at that size
_EC_CURVES = MappingProxyType({
    256: ec.SECP256R1.name,
    384: ec.SECP384R1.name,
    521: ec.SECP521R1.name,
})

_ALGORITHMS = MappingProxyType({
    (KeyType.RSA, 2048): Algorithm.PS256,
    (KeyType.RSA, 3072): Algorithm.PS384,
    (KeyType.RSA, 4096): Algorithm.PS512,
    (KeyType.EC, 256): Algorithm.ES256,
    (KeyType.EC, 384): Algorithm.ES384,
    (KeyType.EC, 521): Algorithm.ES512,
})


@dataclass(frozen=True)
class KeySpec:
    """Key family and bit size of an approved signing key."""

    type: KeyType
    size: int

    def __post_init__(self):
        if type(self.type) is int and self.type in KeyType.__members__.values():
            object.__setattr__(self, "type", KeyType(self.type))
        if (
            not isinstance(self.type, KeyType)
            or type(self.size) is not int
            or (self.type, self.size) not in _ALGORITHMS
        ):
            raise UnsupportedSigningKeyError(
                f"key spec {self.type!r} with size {self.size!r} is not supported"
            )

    def signature_algorithm(self) -> Algorithm:
        return _ALGORITHMS[(self.type, self.size)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key_type": self.type.name,
            "key_size": self.size,
            "algorithm": self.signature_algorithm().name,
        }

    def __str__(self) -> str:
        return f"{self.type.name}-{self.size}"


def resolve_key_spec(public_key: Any) -> KeySpec:
    """Classify ``public_key`` into an approved KeySpec.

    Accepts any object implementing cryptography's RSA or EC public key
    interface. Raises UnsupportedSigningKeyError for disallowed RSA sizes,
    disallowed curves and every other key type.
    """
    if isinstance(public_key, rsa.RSAPublicKey):
        bit_size = public_key.key_size
        if bit_size not in RSA_KEY_SIZES:
            raise UnsupportedSigningKeyError(f"rsa key size {bit_size} is not supported")
        return KeySpec(type=KeyType.RSA, size=bit_size)
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        curve = public_key.curve
        bit_size = curve.key_size
        if bit_size not in EC_KEY_SIZES:
            raise UnsupportedSigningKeyError(f"ecdsa key size {bit_size} is not supported")
        if curve.name != _EC_CURVES[bit_size]:
            raise UnsupportedSigningKeyError(f"ecdsa curve {curve.name} is not supported")
        return KeySpec(type=KeyType.EC, size=bit_size)
    raise UnsupportedSigningKeyError("invalid public key type")


def extract_key_spec(certificate: x509.Certificate) -> KeySpec:
    """Resolve the KeySpec of a signing certificate's public key.

    A key encoding cryptography cannot read raises ValueError unchanged.
    """
    try:
        public_key = certificate.public_key()
    except UnsupportedAlgorithm as e:
        raise UnsupportedSigningKeyError("invalid public key type") from e
    return resolve_key_spec(public_key)


__all__ = [
    "Algorithm",
    "KeyType",
    "KeySpec",
    "RSA_KEY_SIZES",
    "EC_KEY_SIZES",
    "resolve_key_spec",
    "extract_key_spec",
]
