"""Errors raised while classifying signing keys."""
from __future__ import annotations


class UnsupportedSigningKeyError(Exception):
    """Raised when a signing key is not allowed by the key policy.

    One error kind covers disallowed RSA sizes, disallowed EC curves and
    unknown key types; ``msg`` names the offending key and is meant for
    display only.
    """

    def __init__(self, msg: str = "") -> None:
        self.msg = msg
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.msg or "signing key is not supported"


__all__ = ["UnsupportedSigningKeyError"]
