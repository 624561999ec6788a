from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from vfsnames.domain.enums import NameKind

if TYPE_CHECKING:
    from vfsnames.infrastructure.strategies import (
        CredentialSplitter,
        HostExtractor,
    )


@dataclass(frozen=True)
class Authority:
    """Immutable authority part of a URI, as extracted during a parse.

    Attributes:
        scheme: Lower-cased scheme token (e.g., "ftp").
        username: Raw, still percent-encoded user name.
        password: Raw, still percent-encoded password.
        hostname: Lower-cased host name or bracketed IPv6 literal.
        port: Explicit port number, None when the URI gives none.
    """

    scheme: str
    username: Optional[str] = None
    password: Optional[str] = None
    hostname: str = ""
    port: Optional[int] = None


@dataclass(frozen=True)
class SchemeProfile:
    """Immutable per-scheme parsing customizations.

    Attributes:
        scheme: Scheme token the profile is registered under.
        default_port: Port applied when the URI omits one.
        host_extractor: Strategy pulling the host off the authority.
        credential_splitter: Strategy splitting a domain off the user.
        name_kind: Shape of the names the scheme produces.
    """

    scheme: str
    default_port: Optional[int]
    host_extractor: "HostExtractor"
    credential_splitter: "CredentialSplitter"
    name_kind: NameKind = NameKind.HOST

    def __post_init__(self) -> None:
        """Validate the scheme token and port range."""
        if not self.scheme or self.scheme != self.scheme.lower():
            raise ValueError(
                f"Scheme must be a non-empty lower-case token, "
                f"got {self.scheme!r}"
            )
        if self.default_port is not None and not (
            0 < self.default_port < 65536
        ):
            raise ValueError(
                f"Default port must be in 1..65535, got {self.default_port}"
            )

    @property
    def requires_first_path_element(self) -> bool:
        """True when the first path segment is a mandatory container."""
        return self.name_kind is NameKind.SHARE
