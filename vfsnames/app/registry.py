"""Read-only registry of scheme profiles.

The registry is built once, before any lookup, and never modified
afterwards. Adding a scheme produces a new registry.
"""

from types import MappingProxyType
from typing import Iterable, Iterator

from vfsnames.adapters.credential_splitters import (
    DomainCredentialSplitter,
    PlainCredentialSplitter,
)
from vfsnames.adapters.host_extractors import (
    DefaultHostExtractor,
    Ipv6HostExtractor,
)
from vfsnames.domain.enums import NameKind
from vfsnames.domain.exceptions import UnknownSchemeError
from vfsnames.domain.value_objects import SchemeProfile

_HOST = DefaultHostExtractor()
_IPV6_HOST = Ipv6HostExtractor()
_PLAIN = PlainCredentialSplitter()
_DOMAIN = DomainCredentialSplitter()

DEFAULT_PROFILES: tuple[SchemeProfile, ...] = (
    SchemeProfile("ftp", 21, _HOST, _PLAIN),
    SchemeProfile("ftps", 21, _HOST, _PLAIN),
    SchemeProfile("sftp", 22, _IPV6_HOST, _PLAIN),
    SchemeProfile("smb", 139, _IPV6_HOST, _DOMAIN, NameKind.SHARE),
    SchemeProfile("http", 80, _HOST, _PLAIN),
    SchemeProfile("https", 443, _HOST, _PLAIN),
    SchemeProfile("webdav", 80, _HOST, _PLAIN),
)

DEFAULT_LAYERED_SCHEMES: tuple[str, ...] = (
    "zip",
    "jar",
    "tar",
    "tgz",
    "tbz2",
    "gz",
    "bz2",
)


class SchemeRegistry:
    """Immutable mapping of scheme token to SchemeProfile.

    Also records which schemes name layered (archive) file systems.

    Attributes:
        _profiles: Read-only view of scheme -> profile.
        _layered: Layered scheme tokens.
    """

    def __init__(
        self,
        profiles: Iterable[SchemeProfile] = (),
        layered_schemes: Iterable[str] = (),
    ) -> None:
        """Initialize from profiles and layered scheme tokens.

        Args:
            profiles: Host-based scheme profiles. A later profile for the
                same scheme replaces an earlier one.
            layered_schemes: Schemes parsed as layered names.

        Raises:
            ValueError: If a scheme is both host-based and layered.
        """
        profile_map = {profile.scheme: profile for profile in profiles}
        layered = frozenset(scheme.lower() for scheme in layered_schemes)
        clashes = layered.intersection(profile_map)
        if clashes:
            raise ValueError(
                f"Schemes registered as both host-based and layered: "
                f"{', '.join(sorted(clashes))}"
            )
        self._profiles = MappingProxyType(profile_map)
        self._layered = layered

    def get(self, scheme: str) -> SchemeProfile:
        """Look up the profile for a host-based scheme.

        Args:
            scheme: Scheme token, any case.

        Returns:
            The registered SchemeProfile.

        Raises:
            UnknownSchemeError: If no profile is registered.
        """
        profile = self._profiles.get(scheme.lower())
        if profile is None:
            raise UnknownSchemeError(scheme)
        return profile

    def is_layered(self, scheme: str) -> bool:
        return scheme.lower() in self._layered

    @property
    def schemes(self) -> tuple[str, ...]:
        """Host-based scheme tokens, sorted."""
        return tuple(sorted(self._profiles))

    @property
    def layered_schemes(self) -> tuple[str, ...]:
        """Layered scheme tokens, sorted."""
        return tuple(sorted(self._layered))

    def with_profile(self, profile: SchemeProfile) -> "SchemeRegistry":
        """Return a new registry with ``profile`` added or replaced."""
        return SchemeRegistry(
            [*self._profiles.values(), profile], self._layered
        )

    def with_layered_scheme(self, scheme: str) -> "SchemeRegistry":
        """Return a new registry with ``scheme`` added as layered."""
        return SchemeRegistry(
            self._profiles.values(), [*self._layered, scheme]
        )

    def __contains__(self, scheme: object) -> bool:
        if not isinstance(scheme, str):
            return False
        return scheme.lower() in self._profiles or self.is_layered(scheme)

    def __iter__(self) -> Iterator[SchemeProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


def default_registry() -> SchemeRegistry:
    """Build the registry of the built-in schemes."""
    return SchemeRegistry(DEFAULT_PROFILES, DEFAULT_LAYERED_SCHEMES)
