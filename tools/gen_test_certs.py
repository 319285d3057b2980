from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from cryptography.x509.oid import NameOID
import datetime
import os

# Sample self-signed certificates for trying `certsig inspect` by hand.
os.makedirs("certs", exist_ok=True)

keys = {
    "rsa2048": rsa.generate_private_key(public_exponent=65537, key_size=2048),
    "rsa1024": rsa.generate_private_key(public_exponent=65537, key_size=1024),
    "ec256": ec.generate_private_key(ec.SECP256R1()),
    "ec224": ec.generate_private_key(ec.SECP224R1()),
    "ed25519": ed25519.Ed25519PrivateKey.generate(),
}

now = datetime.datetime.now(datetime.timezone.utc)
for label, sk in keys.items():
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, f"certsig {label}")])
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(sk.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=30))
        .sign(sk, None if label == "ed25519" else hashes.SHA256())
    )
    with open(f"certs/{label}.pem", "wb") as f:
        f.write(cert.public_bytes(serialization.Encoding.PEM))

print("Generated: " + ", ".join(f"certs/{label}.pem" for label in keys))
