import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from keyhelpers import self_signed


@pytest.fixture(scope="session")
def rsa2048_sk():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa1024_sk():
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture(scope="session")
def ec256_sk():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec224_sk():
    return ec.generate_private_key(ec.SECP224R1())


@pytest.fixture(scope="session")
def ed25519_sk():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def write_cert(tmp_path):
    def _write(label, sk, encoding=serialization.Encoding.PEM):
        path = tmp_path / f"{label}.{'pem' if encoding == serialization.Encoding.PEM else 'der'}"
        path.write_bytes(self_signed(sk).public_bytes(encoding))
        return str(path)
    return _write
