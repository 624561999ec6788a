"""Parser and normalizer for virtual file system names.

    >>> import vfsnames
    >>> name = vfsnames.parse("sftp://user@[::1]/home/user/../data.zip")
    >>> name.path
    '/home/data.zip'
    >>> vfsnames.build_layered(name, "zip").uri
    'zip:sftp://user@[::1]/home/data.zip!/'
"""

from typing import Optional, Union

from vfsnames.app.manager import FileNameManager
from vfsnames.app.registry import SchemeRegistry, default_registry
from vfsnames.domain.entities.filename import (
    FileName,
    HostFileName,
    LayeredFileName,
    ShareFileName,
)
from vfsnames.domain.enums import FileType, NameKind
from vfsnames.domain.exceptions import (
    FileNameParseError,
    InvalidEscapeSequenceError,
    InvalidOuterNameError,
    MissingDoubleSlashesError,
    MissingHostnameError,
    MissingPathSeparatorError,
    MissingPortError,
    MissingRequiredElementError,
    UnknownSchemeError,
    VfsNameError,
)
from vfsnames.domain.value_objects import SchemeProfile

__all__ = [
    "FileName",
    "FileNameManager",
    "FileNameParseError",
    "FileType",
    "HostFileName",
    "InvalidEscapeSequenceError",
    "InvalidOuterNameError",
    "LayeredFileName",
    "MissingDoubleSlashesError",
    "MissingHostnameError",
    "MissingPathSeparatorError",
    "MissingPortError",
    "MissingRequiredElementError",
    "NameKind",
    "SchemeProfile",
    "ShareFileName",
    "UnknownSchemeError",
    "VfsNameError",
    "build_layered",
    "parse",
    "registry",
]

_manager = FileNameManager(default_registry())


def registry() -> SchemeRegistry:
    """Return the registry of the built-in schemes."""
    return _manager.registry


def parse(uri: str, profile: Optional[SchemeProfile] = None) -> FileName:
    """Parse ``uri`` with the built-in schemes, or with ``profile``."""
    return _manager.parse(uri, profile)


def build_layered(
    outer: Union[FileName, str], scheme: str
) -> LayeredFileName:
    """Wrap ``outer`` as the root of a ``scheme`` layered file system."""
    return _manager.build_layered(outer, scheme)
