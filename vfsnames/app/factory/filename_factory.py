"""Factory turning host-based URIs into FileName instances.

Runs one generic pipeline for every scheme; the scheme's profile
supplies the host and credential strategies, the default port and
the shape of the resulting name:

1. Extract scheme and authority (with the profile's HostExtractor).
2. Split a domain off the user name (with the CredentialSplitter).
3. Decode the credentials.
4. Extract the share when the scheme requires one; ".." segments in
   the rest of the path stop at the share root.
5. Normalize the rest of the path.
6. Apply the default port.
7. Build the name class registered for the profile's NameKind.
"""

from typing import TYPE_CHECKING, Optional

from vfsnames.domain.entities.filename import HostFileName, ShareFileName
from vfsnames.domain.enums import NameKind
from vfsnames.domain.exceptions import (
    MissingDoubleSlashesError,
    MissingRequiredElementError,
)
from vfsnames.domain.services.authority_extractor import (
    AuthorityExtractor,
    extract_scheme,
)
from vfsnames.domain.services.path_normalizer import (
    canonicalize,
    classify,
    decode,
    extract_first_element,
    normalize_path,
    resolve_segments,
)
from vfsnames.log import logger

if TYPE_CHECKING:
    from vfsnames.app.registry import SchemeRegistry
    from vfsnames.domain.value_objects import SchemeProfile

logger = logger.getChild(__name__)

_REGISTRY: dict[NameKind, type[HostFileName]] = {
    NameKind.HOST: HostFileName,
    NameKind.SHARE: ShareFileName,
}


class FileNameFactory:
    """Factory for parsing URIs into HostFileName instances.

    Attributes:
        _registry: SchemeRegistry used when no profile is passed.
    """

    def __init__(self, registry: "SchemeRegistry") -> None:
        """Initialize with a SchemeRegistry.

        Args:
            registry: Registry resolving scheme tokens to profiles.
        """
        self._registry = registry

    def profile_for(self, uri: str) -> "SchemeProfile":
        """Resolve the profile for the scheme of ``uri``.

        Raises:
            MissingDoubleSlashesError: If ``uri`` has no scheme.
            UnknownSchemeError: If the scheme is not registered.
        """
        scheme, _ = extract_scheme(uri)
        if scheme is None:
            raise MissingDoubleSlashesError(uri)
        return self._registry.get(scheme)

    def create(
        self, uri: str, profile: Optional["SchemeProfile"] = None
    ) -> HostFileName:
        """Parse ``uri`` into a name.

        Args:
            uri: Absolute URI, e.g. ``"sftp://user@[::1]:2222/dir/file"``.
            profile: Scheme profile to parse with. Looked up by the URI's
                scheme when omitted.

        Returns:
            HostFileName, or ShareFileName for share-based schemes.

        Raises:
            MissingDoubleSlashesError: If ``//`` does not follow the scheme.
            MissingHostnameError: If the authority has no host.
            MissingPortError: If ``:`` is not followed by a port.
            MissingPathSeparatorError: If the authority is followed by
                anything but ``/``.
            InvalidEscapeSequenceError: If an escape sequence is invalid.
            MissingRequiredElementError: If a required share is missing.
            UnknownSchemeError: If no profile is given and the scheme is
                not registered.
        """
        if profile is None:
            profile = self.profile_for(uri)

        authority, path_text = AuthorityExtractor(
            profile.host_extractor
        ).extract(uri)

        domain, username = profile.credential_splitter.split(
            authority.username
        )
        domain = decode(domain, uri)
        username = decode(username, uri)
        password = decode(authority.password, uri)

        extra = {}
        if profile.requires_first_path_element:
            share, rest = extract_first_element(canonicalize(path_text, uri))
            if share in (None, ".", ".."):
                raise MissingRequiredElementError(uri, "share")
            path = resolve_segments(rest)
            file_type = classify(rest, path)
            extra["share"] = share
        else:
            path, file_type = normalize_path(path_text, uri)

        port = authority.port
        if port is None:
            port = profile.default_port

        cls = _REGISTRY[profile.name_kind]
        name = cls(
            scheme=authority.scheme,
            path=path,
            type=file_type,
            hostname=authority.hostname,
            port=port,
            username=username,
            password=password,
            domain=domain,
            default_port=profile.default_port,
            **extra,
        )
        logger.debug("Parsed '%s' as %s", name.friendly_uri, file_type.value)
        return name
