"""CORS Policy — immutable allow-lists and the preflight matcher.

Follows the resource-request flow of the W3C Cross-Origin Resource Sharing
recommendation (https://www.w3.org/TR/cors/#resource-requests).

Invariants:
    - CORSConfig is frozen after construction; safe to share across requests
    - Origins and methods match case-sensitively, byte for byte
    - Header field names match ASCII case-insensitively, ALL names must match
    - "*" in allowed_origins is a literal origin, never a wildcard
    - Empty origin / empty method never match

Design Decisions:
    - Predicates are methods on the frozen dataclass: the policy is the only input
    - Access-Control-Request-Headers is split on the literal ", " separator,
      so "A,B" is a single (unknown) token
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping

STANDARD_METHODS = (
    "CONNECT", "DELETE", "GET", "HEAD", "OPTIONS",
    "PATCH", "POST", "PUT", "TRACE",
)

PREFLIGHT_METHOD = "OPTIONS"
HEADER_SEPARATOR = ", "


@dataclass(frozen=True)
class CORSConfig:
    """Policy describing which preflight requests are accepted."""

    allowed_origins: frozenset[str] = frozenset()
    allowed_methods: frozenset[str] = frozenset()
    allowed_headers: frozenset[str] = frozenset()
    supports_credentials: bool = False
    max_age: int = 0
    _folded_headers: frozenset[str] = field(
        init=False, repr=False, compare=False, default=frozenset(),
    )

    def __post_init__(self) -> None:
        if self.max_age < 0:
            raise ValueError(f"max_age must be >= 0, got {self.max_age}")
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "allowed_origins", frozenset(self.allowed_origins))
        object.__setattr__(self, "allowed_methods", frozenset(self.allowed_methods))
        object.__setattr__(self, "allowed_headers", frozenset(self.allowed_headers))
        object.__setattr__(
            self, "_folded_headers",
            frozenset(h.lower() for h in self.allowed_headers),
        )

    def origin_supported(self, origin: str) -> bool:
        """Origin header is mandatory and must match an allowed origin exactly."""
        if not origin:
            return False
        return origin in self.allowed_origins

    def method_supported(self, method: str) -> bool:
        """Access-Control-Request-Method is mandatory and case-sensitive."""
        if not method:
            return False
        return method in self.allowed_methods

    def headers_supported(self, names: Iterable[str]) -> bool:
        """Every requested header must be allowed. The empty list is permissible."""
        return all(name.lower() in self._folded_headers for name in names)

    def accepts(self, preflight: "PreflightRequest") -> bool:
        return (
            self.origin_supported(preflight.origin)
            and self.method_supported(preflight.method)
            and self.headers_supported(preflight.header_names)
        )


@dataclass(frozen=True)
class PreflightRequest:
    """Values a preflight probe asks permission for."""

    origin: str
    method: str
    header_names: tuple[str, ...] = ()

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "PreflightRequest":
        """Build from a case-insensitive header mapping (e.g. starlette Headers)."""
        return cls(
            origin=headers.get("origin", ""),
            method=headers.get("access-control-request-method", ""),
            header_names=parse_header_names(
                headers.get("access-control-request-headers", ""),
            ),
        )


def parse_header_names(value: str) -> tuple[str, ...]:
    """Split an Access-Control-Request-Headers value into trimmed names.

    A missing or empty value yields the empty tuple rather than ("",).
    """
    tokens = tuple(token.strip() for token in value.split(HEADER_SEPARATOR))
    if tokens == ("",):
        return ()
    return tokens


def default_cors_config() -> CORSConfig:
    """All standard methods, literal "*" origin, Content-Type only, no max age."""
    return CORSConfig(
        allowed_origins=frozenset({"*"}),
        allowed_methods=frozenset(STANDARD_METHODS),
        allowed_headers=frozenset({"Content-Type"}),
        supports_credentials=False,
        max_age=0,
    )
