import pytest
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ed448, x25519

from certsig.signature.algorithm import KeySpec, KeyType, extract_key_spec, resolve_key_spec
from certsig.signature.errors import UnsupportedSigningKeyError

from keyhelpers import self_signed


def test_ed25519_rejected(ed25519_sk):
    with pytest.raises(UnsupportedSigningKeyError) as ei:
        resolve_key_spec(ed25519_sk.public_key())
    assert "invalid public key type" in str(ei.value)


@pytest.mark.parametrize("key", [
    ed448.Ed448PrivateKey.generate().public_key(),
    x25519.X25519PrivateKey.generate().public_key(),
    None,
    object(),
    b"-----BEGIN PUBLIC KEY-----",
])
def test_other_key_types_rejected(key):
    with pytest.raises(UnsupportedSigningKeyError, match="invalid public key type"):
        resolve_key_spec(key)


def test_private_key_is_not_a_public_key(rsa2048_sk):
    with pytest.raises(UnsupportedSigningKeyError, match="invalid public key type"):
        resolve_key_spec(rsa2048_sk)


def test_error_default_message():
    assert str(UnsupportedSigningKeyError()) == "signing key is not supported"
    err = UnsupportedSigningKeyError("rsa key size 1024 is not supported")
    assert err.msg == "rsa key size 1024 is not supported"
    assert str(err) == err.msg


def test_keyspec_cannot_hold_unapproved_size():
    with pytest.raises(UnsupportedSigningKeyError):
        KeySpec(type=KeyType.RSA, size=1024)
    with pytest.raises(UnsupportedSigningKeyError):
        KeySpec(type=KeyType.EC, size=2048)
    with pytest.raises(UnsupportedSigningKeyError):
        KeySpec(type=KeyType.RSA, size=2048.0)


def test_keyspec_is_frozen():
    spec = KeySpec(type=KeyType.RSA, size=2048)
    with pytest.raises(AttributeError):
        spec.size = 1024  # type: ignore[misc]


def test_resolve_is_deterministic(ec256_sk):
    pk = ec256_sk.public_key()
    assert resolve_key_spec(pk) == resolve_key_spec(pk)


def test_extract_from_certificates(rsa2048_sk, ec256_sk, ed25519_sk, ec224_sk):
    assert extract_key_spec(self_signed(rsa2048_sk)) == KeySpec(KeyType.RSA, 2048)
    assert extract_key_spec(self_signed(ec256_sk)) == KeySpec(KeyType.EC, 256)
    with pytest.raises(UnsupportedSigningKeyError, match="invalid public key type"):
        extract_key_spec(self_signed(ed25519_sk))
    with pytest.raises(UnsupportedSigningKeyError, match="ecdsa key size 224"):
        extract_key_spec(self_signed(ec224_sk))


class _FakeCertificate:
    def __init__(self, exc):
        self.exc = exc

    def public_key(self):
        raise self.exc


def test_extract_unknown_key_algorithm_is_rejected():
    cert = _FakeCertificate(UnsupportedAlgorithm("unknown key OID"))
    with pytest.raises(UnsupportedSigningKeyError, match="invalid public key type"):
        extract_key_spec(cert)


def test_extract_malformed_key_propagates_value_error():
    with pytest.raises(ValueError, match="invalid EC point") as ei:
        extract_key_spec(_FakeCertificate(ValueError("invalid EC point")))
    assert not isinstance(ei.value, UnsupportedSigningKeyError)
