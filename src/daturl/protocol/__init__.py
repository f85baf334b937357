"""daturl protocol -- dat URL model, parser and serializer.

Public API re-exports for ``daturl.protocol``.
"""

from daturl.protocol.types import (
    SCHEME,
    KEY_SIZE,
    FINGERPRINT_LENGTH,
    Fingerprint,
    Name,
    Host,
    looks_like_fingerprint,
)

from daturl.protocol.errors import (
    ParseErrorKind,
    DatUrlError,
    ParseError,
    InvalidSchemeError,
    EmptyHostError,
    InvalidFingerprintError,
    InvalidFieldError,
)

from daturl.protocol.url import DatUrl, parse_dat_url, to_string

from daturl.protocol.serde import (
    dat_url_to_dict,
    dat_url_from_dict,
    dat_url_to_json,
    dat_url_from_json,
)

__all__ = [
    # Types
    "SCHEME",
    "KEY_SIZE",
    "FINGERPRINT_LENGTH",
    "Fingerprint",
    "Name",
    "Host",
    "looks_like_fingerprint",
    # Errors
    "ParseErrorKind",
    "DatUrlError",
    "ParseError",
    "InvalidSchemeError",
    "EmptyHostError",
    "InvalidFingerprintError",
    "InvalidFieldError",
    # URL
    "DatUrl",
    "parse_dat_url",
    "to_string",
    # Serialization
    "dat_url_to_dict",
    "dat_url_from_dict",
    "dat_url_to_json",
    "dat_url_from_json",
]
