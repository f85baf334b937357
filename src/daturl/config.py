"""Parser configuration via dataclass.

The parser itself never reads the environment; front ends such as the CLI
build a :class:`ParserConfig` from flags or env vars and pass it in.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Host classification policy for :func:`daturl.parse_dat_url`.

    ``strict``: a 64-character host containing a non-hex character raises
    :class:`InvalidFingerprintError` instead of falling back to a name.

    ``require_fingerprint``: any host that is not a fingerprint raises
    :class:`InvalidFingerprintError`.  Implies ``strict``.
    """

    strict: bool = False
    require_fingerprint: bool = False

    @property
    def rejects_malformed_fingerprints(self) -> bool:
        return self.strict or self.require_fingerprint


DEFAULT_CONFIG = ParserConfig()
