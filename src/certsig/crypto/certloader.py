"""Load X.509 certificates from PEM or DER."""
from __future__ import annotations

import os

from cryptography import x509

from ..utils.logging import get_logger

log = get_logger("certsig.certloader")

_PEM_MARKER = b"-----BEGIN CERTIFICATE-----"


class CertificateLoadError(ValueError):
    """Raised when certificate bytes cannot be parsed."""


def load_certificate(data: bytes) -> x509.Certificate:
    if _PEM_MARKER in data:
        log.debug("parsing certificate as PEM (%d bytes)", len(data))
        loader = x509.load_pem_x509_certificate
    else:
        log.debug("parsing certificate as DER (%d bytes)", len(data))
        loader = x509.load_der_x509_certificate
    try:
        return loader(data)
    except ValueError as e:
        raise CertificateLoadError(f"malformed certificate: {e}") from e


def load_certificate_file(path: str | os.PathLike) -> x509.Certificate:
    with open(path, "rb") as f:
        data = f.read()
    try:
        return load_certificate(data)
    except CertificateLoadError as e:
        raise CertificateLoadError(f"{os.fspath(path)}: {e}") from e.__cause__
