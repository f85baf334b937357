"""daturl -- versioned dat:// URL parsing.

Top-level convenience re-exports::

    from daturl import DatUrl, parse_dat_url
    from daturl.protocol import dat_url_to_dict  # serialization helpers
"""

__version__ = "0.1.0"

from daturl.config import ParserConfig
from daturl.protocol import (
    DatUrl,
    DatUrlError,
    Fingerprint,
    Name,
    ParseError,
    parse_dat_url,
    to_string,
)

__all__ = [
    "__version__",
    "ParserConfig",
    "DatUrl",
    "DatUrlError",
    "Fingerprint",
    "Name",
    "ParseError",
    "parse_dat_url",
    "to_string",
]
