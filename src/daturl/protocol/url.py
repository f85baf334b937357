"""dat URL parsing, model and serialization.

A dat URL has the form ``dat://host[+version][/path][?query][#fragment]``
where *host* is a 64-character hex fingerprint or an unresolved name, e.g.
``dat://584faa05d394190ab1a3f0240607f9bf2b7e2bd9968830a11cf77db0cea36a21+v1.0.0/path/to/file.txt``.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Union

from daturl.config import DEFAULT_CONFIG, ParserConfig
from daturl.protocol.errors import (
    EmptyHostError,
    InvalidFieldError,
    InvalidFingerprintError,
    InvalidSchemeError,
)
from daturl.protocol.types import (
    AUTHORITY_DELIMITERS,
    FINGERPRINT_LENGTH,
    SCHEME,
    Fingerprint,
    Host,
    Name,
    is_sequence_text,
    looks_like_fingerprint,
)

logger = logging.getLogger(__name__)

# Everything after the scheme.  Always matches: the authority stops at the
# first delimiter and each later component starts with its own delimiter.
_REST_RE = re.compile(
    r"(?P<authority>[^/?#]*)(?P<path>/[^?#]*)?(?:\?(?P<query>[^#]*))?(?:#(?P<fragment>.*))?",
    re.DOTALL,
)

Version = Union[int, str]


@dataclass(frozen=True)
class DatUrl:
    """A parsed dat URL.

    ``path`` is ``None`` when no path was given and ``()`` for a bare
    trailing ``/``.  Instances are immutable; use :meth:`with_version` or
    :func:`dataclasses.replace` to derive a changed copy.
    """

    host: Host
    version: Version | None = None
    path: tuple[str, ...] | None = None
    query: str | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", _coerce_host(self.host))
        object.__setattr__(self, "version", _normalize_version(self.version))
        object.__setattr__(self, "path", _normalize_path(self.path))

        if self.query is not None:
            if not isinstance(self.query, str) or "#" in self.query:
                raise InvalidFieldError(f"Query must be a string without '#': {self.query!r}")
        if self.fragment is not None and not isinstance(self.fragment, str):
            raise InvalidFieldError(f"Fragment must be a string: {self.fragment!r}")

        # "a+b" with no version would parse back as host "a", version "b".
        if self.version is None and isinstance(self.host, Name):
            _, sep, tail = self.host.value.rpartition("+")
            if sep and tail:
                raise InvalidFieldError(
                    f"Host name {self.host.value!r} reads as host+version; pass the version separately"
                )

    @property
    def scheme(self) -> str:
        return SCHEME

    @property
    def pathname(self) -> str | None:
        """Return the path as written in the URL (``"/a/b"``), or None."""
        if self.path is None:
            return None
        return "/" + "/".join(self.path)

    @property
    def base_url(self) -> str:
        """Return the canonical string without the version tag."""
        return _render(self.host, None, self.pathname, self.query, self.fragment)

    def has_version(self) -> bool:
        return self.version is not None

    def is_sequence_version(self) -> bool:
        return isinstance(self.version, int)

    def is_fingerprint(self) -> bool:
        return isinstance(self.host, Fingerprint)

    def has_path(self) -> bool:
        """Return True if a path was given, even an empty one."""
        return self.path is not None

    def has_query(self) -> bool:
        return self.query is not None

    def has_fragment(self) -> bool:
        return self.fragment is not None

    def with_version(self, version: Version | None) -> DatUrl:
        return dataclasses.replace(self, version=version)

    def without_version(self) -> DatUrl:
        """Return a copy with no version.

        Raises:
            InvalidFieldError: If the host is a name such as ``a+b`` that
                would read as host plus version once the version is gone.
                Use :attr:`base_url` for the unversioned string instead.
        """
        return dataclasses.replace(self, version=None)

    def __str__(self) -> str:
        return to_string(self)


def _coerce_host(host: Host | str) -> Host:
    if isinstance(host, (Fingerprint, Name)):
        return host
    if isinstance(host, str):
        return Fingerprint(host) if looks_like_fingerprint(host) else Name(host)
    raise InvalidFieldError(f"Host must be a Fingerprint, Name or string: {host!r}")


def _normalize_version(version: Version | None) -> Version | None:
    if version is None:
        return None
    if isinstance(version, bool):
        raise InvalidFieldError(f"Version must be an int or string: {version!r}")
    if isinstance(version, int):
        if version < 0:
            raise InvalidFieldError(f"Version sequence must be non-negative: {version}")
        try:
            str(version)
        except ValueError as exc:
            raise InvalidFieldError(f"Version sequence is too large to render: {exc}") from exc
        return version
    if not isinstance(version, str) or not version:
        raise InvalidFieldError(f"Version must be a non-empty string or int: {version!r}")
    if any(c in "/?#+" for c in version):
        raise InvalidFieldError(f"Version may not contain '/', '?', '#' or '+': {version!r}")
    if is_sequence_text(version):
        # Digit runs past the interpreter's int conversion limit stay a tag.
        try:
            return int(version)
        except ValueError:
            return version
    return version


def _normalize_path(path: Iterable[str] | None) -> tuple[str, ...] | None:
    if path is None:
        return None
    if isinstance(path, str):
        raise InvalidFieldError(f"Path must be a sequence of segments, not a string: {path!r}")
    try:
        segments = tuple(path)
    except TypeError as exc:
        raise InvalidFieldError(f"Path must be a sequence of segments: {path!r}") from exc
    for segment in segments:
        if not isinstance(segment, str) or any(c in "/?#" for c in segment):
            raise InvalidFieldError(
                f"Path segment must be a string without '/', '?' or '#': {segment!r}"
            )
    if segments == ("",):
        return ()
    return segments


def _classify_host(candidate: str, raw: str, config: ParserConfig) -> Host:
    if looks_like_fingerprint(candidate):
        return Fingerprint(candidate)
    if config.require_fingerprint:
        raise InvalidFingerprintError(f"Host is not a fingerprint: {raw!r}", raw=raw)
    if len(candidate) == FINGERPRINT_LENGTH:
        if config.rejects_malformed_fingerprints:
            raise InvalidFingerprintError(f"Malformed fingerprint in {raw!r}", raw=raw)
        logger.debug("64-character host %r is not hex; treating it as a name", candidate)
    return Name(candidate)


def parse_dat_url(raw: str, config: ParserConfig | None = None) -> DatUrl:
    """Parse a ``dat://`` URL string.

    A 64-character host that is not all hex is treated as a name unless
    *config* asks for strict fingerprint checking.

    Raises:
        InvalidSchemeError: If *raw* does not start with ``dat://``.
        EmptyHostError: If the host is empty.
        InvalidFingerprintError: If *config* rejects the host.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Expected a string, got {type(raw).__name__}")
    if config is None:
        config = DEFAULT_CONFIG

    if not raw.startswith(SCHEME):
        raise InvalidSchemeError(f"URL must start with {SCHEME!r}: {raw!r}", raw=raw)

    m = _REST_RE.fullmatch(raw, len(SCHEME))
    authority = m.group("authority")
    if not authority:
        raise EmptyHostError(f"Missing host in URL: {raw!r}", raw=raw)

    # Split on the last "+"; a trailing "+" is part of the host.
    host_text, sep, version_text = authority.rpartition("+")
    if not sep or not version_text:
        host_text, version_text = authority, None
    if not host_text:
        raise EmptyHostError(f"Missing host before version in URL: {raw!r}", raw=raw)

    path = None
    if m.group("path") is not None:
        # Drop the empty piece before the leading "/".
        path = tuple(m.group("path").split("/")[1:])

    return DatUrl(
        host=_classify_host(host_text, raw, config),
        version=version_text,
        path=path,
        query=m.group("query"),
        fragment=m.group("fragment"),
    )


def to_string(url: DatUrl) -> str:
    """Render *url* as its canonical string."""
    return _render(url.host, url.version, url.pathname, url.query, url.fragment)


def _render(
    host: Host,
    version: Version | None,
    pathname: str | None,
    query: str | None,
    fragment: str | None,
) -> str:
    parts = [SCHEME, str(host)]
    if version is not None:
        parts.append(f"+{version}")
    if pathname is not None:
        parts.append(pathname)
    if query is not None:
        parts.append(f"?{query}")
    if fragment is not None:
        parts.append(f"#{fragment}")
    return "".join(parts)
