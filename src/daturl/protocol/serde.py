"""Plain-structure and JSON interop for :class:`DatUrl`.

Nothing in the parser depends on this module.  Two forms are offered:

- a field-by-field dict (``dat_url_to_dict`` / ``dat_url_from_dict``) for
  storing the parsed structure;
- a JSON string holding the canonical URL (``dat_url_to_json`` /
  ``dat_url_from_json``), which is how the URL appears inside documents.
"""

from __future__ import annotations

import json

from daturl.protocol.errors import DatUrlError, InvalidFieldError
from daturl.protocol.types import Fingerprint, Name
from daturl.protocol.url import DatUrl, parse_dat_url, to_string

_HOST_TYPES = {"fingerprint": Fingerprint, "name": Name}


def dat_url_to_dict(url: DatUrl) -> dict:
    """Serialize *url* to a plain dict.

    Excludes ``None``-valued optional fields, so an absent path has no
    ``"path"`` key while an empty path is ``[]``.
    """
    d: dict = {
        "host": {
            "type": "fingerprint" if url.is_fingerprint() else "name",
            "value": url.host.value,
        },
    }
    if url.version is not None:
        d["version"] = url.version
    if url.path is not None:
        d["path"] = list(url.path)
    if url.query is not None:
        d["query"] = url.query
    if url.fragment is not None:
        d["fragment"] = url.fragment
    return d


def dat_url_from_dict(d: dict) -> DatUrl:
    """Deserialize a :class:`DatUrl` from a dict built by :func:`dat_url_to_dict`.

    Raises:
        InvalidFieldError: If ``host`` is missing or malformed, or a field
            breaks a model invariant.
    """
    if not isinstance(d, dict):
        raise InvalidFieldError(f"Expected a dict, got {type(d).__name__}")
    host = d.get("host")
    if not isinstance(host, dict) or host.get("type") not in _HOST_TYPES:
        raise InvalidFieldError(f"Missing or malformed host: {host!r}")
    if "value" not in host:
        raise InvalidFieldError("Host is missing its value")

    try:
        return DatUrl(
            host=_HOST_TYPES[host["type"]](host["value"]),
            version=d.get("version"),
            path=d.get("path"),
            query=d.get("query"),
            fragment=d.get("fragment"),
        )
    except InvalidFieldError:
        raise
    except DatUrlError as exc:
        raise InvalidFieldError(f"Invalid host: {exc}") from exc


def dat_url_to_json(url: DatUrl) -> str:
    """Encode *url* as a JSON string containing its canonical form."""
    return json.dumps(to_string(url))


def dat_url_from_json(text: str) -> DatUrl:
    """Decode a JSON string produced by :func:`dat_url_to_json`.

    Raises:
        InvalidFieldError: If *text* is not a JSON string or the URL inside
            does not parse.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidFieldError(f"Invalid JSON: {exc}") from exc
    if not isinstance(value, str):
        raise InvalidFieldError(f"Expected a JSON string url, got {type(value).__name__}")
    try:
        return parse_dat_url(value)
    except DatUrlError as exc:
        raise InvalidFieldError(f"Invalid dat URL {value!r}: {exc}") from exc
