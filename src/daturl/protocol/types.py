"""Core types and constants for dat URLs.

A host is either a :class:`Fingerprint` (the hex-encoded 32-byte Ed25519
public key of an archive) or a :class:`Name` that a resolver outside this
package maps to a fingerprint.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from daturl.protocol.errors import InvalidFieldError, InvalidFingerprintError

if TYPE_CHECKING:
    from nacl.signing import VerifyKey


SCHEME = "dat://"

# Raw Ed25519 public key length and its hex encoding.
KEY_SIZE = 32
FINGERPRINT_LENGTH = KEY_SIZE * 2

# Characters that end the authority segment.
AUTHORITY_DELIMITERS = "/?#"

_HEX_DIGITS = frozenset(string.hexdigits)


def looks_like_fingerprint(text: str) -> bool:
    """Return True if *text* is exactly 64 hex digits (any case)."""
    return len(text) == FINGERPRINT_LENGTH and all(c in _HEX_DIGITS for c in text)


def is_sequence_text(text: str) -> bool:
    """Return True if *text* is a non-empty run of ASCII digits."""
    return text.isascii() and text.isdigit()


@dataclass(frozen=True)
class Fingerprint:
    """A public-key fingerprint host (always lowercase hex)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not looks_like_fingerprint(self.value):
            raise InvalidFingerprintError(
                f"Fingerprint must be {FINGERPRINT_LENGTH} hex characters: {self.value!r}",
                raw=self.value if isinstance(self.value, str) else None,
            )
        object.__setattr__(self, "value", self.value.lower())

    @classmethod
    def from_bytes(cls, raw: bytes) -> Fingerprint:
        """Build a fingerprint from the raw 32-byte public key."""
        if len(raw) != KEY_SIZE:
            raise InvalidFingerprintError(
                f"Public key must be {KEY_SIZE} bytes, got {len(raw)}"
            )
        return cls(raw.hex())

    @classmethod
    def from_verify_key(cls, key: VerifyKey) -> Fingerprint:
        """Build a fingerprint from an Ed25519 verify key.

        Needs PyNaCl, installed with the ``keys`` extra.
        """
        from nacl.encoding import HexEncoder

        return cls(key.encode(encoder=HexEncoder).decode("ascii"))

    def to_bytes(self) -> bytes:
        return bytes.fromhex(self.value)

    def to_verify_key(self) -> VerifyKey:
        from nacl.encoding import HexEncoder
        from nacl.signing import VerifyKey

        return VerifyKey(self.value.encode("ascii"), encoder=HexEncoder)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name:
    """An unresolved host name or alias, kept exactly as written."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidFieldError(f"Host name must be a non-empty string: {self.value!r}")
        if any(c in AUTHORITY_DELIMITERS for c in self.value):
            raise InvalidFieldError(
                f"Host name may not contain '/', '?' or '#': {self.value!r}"
            )
        if looks_like_fingerprint(self.value):
            raise InvalidFieldError(
                f"Host name {self.value!r} is fingerprint-shaped; use Fingerprint"
            )

    def __str__(self) -> str:
        return self.value


Host = Union[Fingerprint, Name]
