"""Facade for file name operations.

Wires together the scheme registry and the name factories, and
dispatches a URI to the plain or layered factory by its scheme.
All collaborators are lazy-initialized.
"""

from typing import TYPE_CHECKING, Optional, Union

from vfsnames.domain.exceptions import MissingDoubleSlashesError
from vfsnames.domain.services.authority_extractor import extract_scheme

if TYPE_CHECKING:
    from vfsnames.app.factory.filename_factory import FileNameFactory
    from vfsnames.app.factory.layered_factory import (
        LayeredFileNameFactory,
    )
    from vfsnames.app.registry import SchemeRegistry
    from vfsnames.domain.entities.filename import (
        FileName,
        LayeredFileName,
    )
    from vfsnames.domain.value_objects import SchemeProfile


class FileNameManager:
    """Facade for parsing and layering file names.

    Attributes:
        _registry: SchemeRegistry, the built-in one unless injected.
    """

    def __init__(self, registry: Optional["SchemeRegistry"] = None) -> None:
        """Initialize with an optional SchemeRegistry.

        Args:
            registry: Registry to use instead of the built-in schemes.
        """
        self._registry = registry
        self._filename_factory: Optional["FileNameFactory"] = None
        self._layered_factory: Optional["LayeredFileNameFactory"] = None

    @property
    def registry(self) -> "SchemeRegistry":
        """Lazy-initialize the built-in SchemeRegistry.

        Returns:
            The injected registry, or the built-in one.
        """
        if self._registry is None:
            from vfsnames.app.registry import default_registry

            self._registry = default_registry()
        return self._registry

    @property
    def filename_factory(self) -> "FileNameFactory":
        """Lazy-initialize FileNameFactory.

        Returns:
            FileNameFactory backed by the registry.
        """
        if self._filename_factory is None:
            from vfsnames.app.factory.filename_factory import (
                FileNameFactory,
            )

            self._filename_factory = FileNameFactory(self.registry)
        return self._filename_factory

    @property
    def layered_factory(self) -> "LayeredFileNameFactory":
        """Lazy-initialize LayeredFileNameFactory.

        Returns:
            LayeredFileNameFactory sharing the FileNameFactory.
        """
        if self._layered_factory is None:
            from vfsnames.app.factory.layered_factory import (
                LayeredFileNameFactory,
            )

            self._layered_factory = LayeredFileNameFactory(
                self.registry, self.filename_factory
            )
        return self._layered_factory

    def parse(
        self, uri: str, profile: Optional["SchemeProfile"] = None
    ) -> "FileName":
        """Parse any registered URI into a name.

        Args:
            uri: Host-based or layered URI.
            profile: Profile forcing a host-based parse.

        Returns:
            HostFileName, ShareFileName or LayeredFileName.

        Raises:
            FileNameParseError: If the URI is badly formed.
            UnknownSchemeError: If the scheme is not registered.
        """
        if profile is not None:
            return self.filename_factory.create(uri, profile)
        scheme, _ = extract_scheme(uri)
        if scheme is None:
            raise MissingDoubleSlashesError(uri)
        if self.registry.is_layered(scheme):
            return self.layered_factory.parse(uri)
        return self.filename_factory.create(uri)

    def build_layered(
        self, outer: Union["FileName", str], scheme: str
    ) -> "LayeredFileName":
        """Create the root name of a layered file system over ``outer``.

        Args:
            outer: Outer name or URI.
            scheme: Layered scheme, e.g. "zip".

        Returns:
            LayeredFileName rooted at "/".
        """
        return self.layered_factory.create(outer, scheme)

    def close(self) -> None:
        """Drop all lazily created collaborators."""
        self._filename_factory = None
        self._layered_factory = None
