from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Optional

from vfsnames.domain.enums import FileType
from vfsnames.domain.services.path_normalizer import (
    PATH_RESERVED,
    ROOT_PATH,
    SEPARATOR,
    USERINFO_RESERVED,
    encode,
    is_normalized,
)

MASKED_PASSWORD = "***"


@dataclass(frozen=True)
class FileName(ABC):
    """Abstract base for parsed, immutable file names.

    A FileName is a value: it is created once per parse, never
    modified, and used as identity and cache key by consumers.
    Derived names (parent, siblings) are new instances.

    Attributes:
        scheme: Lower-cased URI scheme (e.g., "ftp", "zip").
        path: Normalized absolute path, always starting with "/".
        type: Whether the name denotes a file or a folder.
    """

    scheme: str = ""
    path: str = ROOT_PATH
    type: FileType = FileType.FOLDER

    def __post_init__(self) -> None:
        """Validate that the path is already normalized."""
        if not is_normalized(self.path):
            raise ValueError(
                f"Path must be absolute and normalized, got {self.path!r}"
            )
        if self.path == ROOT_PATH and self.type is not FileType.FOLDER:
            raise ValueError("The root path is always a folder")

    @property
    @abstractmethod
    def root_uri(self) -> str:
        """Return the URI of the root of this name's file system.

        The returned URI always ends with a separator.
        """

    @property
    def uri(self) -> str:
        """Return the canonical URI, re-parseable into an equal name.

        Folders other than the root end with a separator, so that the
        type survives a reparse.
        """
        uri = self.root_uri + encode(self.path[1:], PATH_RESERVED)
        if self.type is FileType.FOLDER and not self.is_root:
            uri += SEPARATOR
        return uri

    @property
    def friendly_uri(self) -> str:
        """Return the URI with any password masked."""
        return self.uri

    def to_uri(self) -> str:
        return self.uri

    def __str__(self) -> str:
        return self.uri

    @property
    def is_root(self) -> bool:
        return self.path == ROOT_PATH

    @property
    def base_name(self) -> str:
        """Last path segment, empty for the root."""
        return self.path.rsplit(SEPARATOR, 1)[-1]

    @property
    def extension(self) -> str:
        """Text after the last dot of the base name.

        Empty when the base name has no dot, or starts or ends with it.
        """
        base = self.base_name
        pos = base.rfind(".")
        if pos < 1 or pos == len(base) - 1:
            return ""
        return base[pos + 1:]

    @property
    def depth(self) -> int:
        """Number of segments in the path, 0 for the root."""
        if self.is_root:
            return 0
        return self.path.count(SEPARATOR)

    @property
    def parent(self) -> Optional["FileName"]:
        """Name of the containing folder, or None for the root."""
        if self.is_root:
            return None
        parent_path = self.path.rsplit(SEPARATOR, 1)[0] or ROOT_PATH
        return self.create_name(parent_path, FileType.FOLDER)

    def create_name(
        self, path: str, file_type: FileType = FileType.FILE
    ) -> "FileName":
        """Create a name on the same root with a different path.

        Args:
            path: Normalized absolute path.
            file_type: Type of the new name.

        Returns:
            New FileName of the same class.

        Raises:
            ValueError: If ``path`` is not normalized.
        """
        if path == ROOT_PATH:
            file_type = FileType.FOLDER
        return replace(self, path=path, type=file_type)

    def is_ancestor(self, other: "FileName") -> bool:
        """Check whether ``other`` lives below this name."""
        if self.root_uri != other.root_uri or self.path == other.path:
            return False
        if self.is_root:
            return True
        return other.path.startswith(self.path + SEPARATOR)


@dataclass(frozen=True)
class HostFileName(FileName):
    """Name on a host-based file system (FTP, SFTP, HTTP, ...).

    Attributes:
        hostname: Lower-cased host name or bracketed IPv6 literal.
        port: Port number; the scheme's default when none was given.
        username: Decoded user name.
        password: Decoded password.
        domain: Decoded authentication domain, for schemes that split
            ``DOMAIN\\user`` user names.
        default_port: Scheme default, omitted from the URI.
    """

    hostname: Optional[str] = None
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    domain: Optional[str] = None
    default_port: Optional[int] = field(default=None, compare=False)

    @property
    def user_info(self) -> Optional[str]:
        """Decoded ``[domain\\]user[:password]``, or None."""
        if self.username is None:
            return None
        info = self.username
        if self.domain is not None:
            info = f"{self.domain}\\{info}"
        if self.password is not None:
            info = f"{info}:{self.password}"
        return info

    @property
    def root_uri(self) -> str:
        return self._authority_uri(self.password)

    @property
    def friendly_uri(self) -> str:
        password = None if self.password is None else MASKED_PASSWORD
        friendly_root = self._authority_uri(password, mask=True)
        return friendly_root + self.uri[len(self.root_uri):]

    def _authority_uri(
        self, password: Optional[str], mask: bool = False
    ) -> str:
        """Build ``scheme://[auth@]host[:port]/``."""
        parts = [self.scheme, "://"]
        if self.username is not None:
            if self.domain is not None:
                parts += [encode(self.domain, USERINFO_RESERVED), "\\"]
            parts.append(encode(self.username, USERINFO_RESERVED))
            if password is not None:
                parts += [
                    ":",
                    password if mask else encode(password, USERINFO_RESERVED),
                ]
            parts.append("@")
        parts.append(self.hostname or "")
        if self.port is not None and self.port != self.default_port:
            parts.append(f":{self.port}")
        parts.append(SEPARATOR)
        return "".join(parts)


@dataclass(frozen=True)
class ShareFileName(HostFileName):
    """Host name whose first path segment is a mandatory share.

    Attributes:
        share: Decoded share name; part of the root URI, not the path.
    """

    share: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.share in ("", ".", "..") or SEPARATOR in self.share:
            raise ValueError(f"Invalid share name: {self.share!r}")

    def _authority_uri(
        self, password: Optional[str], mask: bool = False
    ) -> str:
        root = super()._authority_uri(password, mask)
        return root + encode(self.share, PATH_RESERVED) + SEPARATOR


@dataclass(frozen=True)
class LayeredFileName(FileName):
    """Name inside a file system mounted on another file.

    The URI is ``scheme:outer-uri!path``, e.g.
    ``zip:ftp://host/dir/archive.zip!/entry.txt``.

    Attributes:
        outer: Name of the file the layered file system is built on.
    """

    DELIMITER = "!"

    outer: Optional[FileName] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.outer is None:
            raise ValueError("A layered name requires an outer name")

    @property
    def root_uri(self) -> str:
        return f"{self.scheme}:{self.outer.uri}{self.DELIMITER}{ROOT_PATH}"

    @property
    def friendly_uri(self) -> str:
        friendly_root = (
            f"{self.scheme}:{self.outer.friendly_uri}"
            f"{self.DELIMITER}{ROOT_PATH}"
        )
        return friendly_root + self.uri[len(self.root_uri):]
