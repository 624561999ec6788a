"""Factory for layered names: an archive viewed as a file system root.

A layered URI has the form ``scheme:outer-uri!inner-path``. The outer
URI cannot itself contain the ``!`` delimiter, so layered names do not
nest.
"""

from typing import TYPE_CHECKING, Union

from vfsnames.domain.entities.filename import FileName, LayeredFileName
from vfsnames.domain.enums import FileType
from vfsnames.domain.exceptions import (
    InvalidOuterNameError,
    UnknownSchemeError,
)
from vfsnames.domain.services.authority_extractor import extract_scheme
from vfsnames.domain.services.path_normalizer import (
    ROOT_PATH,
    normalize_path,
)
from vfsnames.log import logger

if TYPE_CHECKING:
    from vfsnames.app.factory.filename_factory import FileNameFactory
    from vfsnames.app.registry import SchemeRegistry

logger = logger.getChild(__name__)

DELIMITER = LayeredFileName.DELIMITER


class LayeredFileNameFactory:
    """Factory for creating and parsing LayeredFileName instances.

    Attributes:
        _registry: SchemeRegistry declaring the layered schemes.
        _filename_factory: Factory used to parse outer URIs.
    """

    def __init__(
        self,
        registry: "SchemeRegistry",
        filename_factory: "FileNameFactory",
    ) -> None:
        """Initialize with a registry and an outer name factory.

        Args:
            registry: Registry declaring which schemes are layered.
            filename_factory: Parses outer URIs given as strings.
        """
        self._registry = registry
        self._filename_factory = filename_factory

    def create(
        self, outer: Union[FileName, str], scheme: str
    ) -> LayeredFileName:
        """Create the root name of a layered file system.

        Args:
            outer: Name, or URI, of the file the layered file system
                is built on.
            scheme: Layered scheme, e.g. "zip".

        Returns:
            LayeredFileName with path "/" and FOLDER type.

        Raises:
            UnknownSchemeError: If ``scheme`` is not a layered scheme.
            InvalidOuterNameError: If the outer URI contains "!".
            FileNameParseError: If ``outer`` is a URI that does not parse.
        """
        scheme = self._layered_scheme(scheme)
        if isinstance(outer, str):
            self._check_outer(outer)
            outer = self._filename_factory.create(outer)
        self._check_outer(outer.uri)

        name = LayeredFileName(
            scheme=scheme, path=ROOT_PATH, type=FileType.FOLDER, outer=outer
        )
        logger.debug("Layered '%s' over '%s'", scheme, outer.friendly_uri)
        return name

    def parse(self, uri: str) -> LayeredFileName:
        """Parse a ``scheme:outer-uri[!inner-path]`` URI.

        A missing inner path denotes the root of the layered file system.

        Args:
            uri: Layered URI, e.g. ``"zip:ftp://host/a.zip!/dir/entry"``.

        Returns:
            LayeredFileName for the inner path.

        Raises:
            UnknownSchemeError: If the scheme is not a layered scheme.
            InvalidOuterNameError: If the outer URI is empty.
            FileNameParseError: If the outer URI or inner path does not
                parse.
        """
        scheme, rest = extract_scheme(uri)
        if scheme is None:
            raise InvalidOuterNameError(uri, "no layered scheme")
        scheme = self._layered_scheme(scheme)

        outer_uri, sep, inner = rest.partition(DELIMITER)
        if not outer_uri:
            raise InvalidOuterNameError(uri, "empty outer URI")
        outer = self._filename_factory.create(outer_uri)

        if sep:
            path, file_type = normalize_path(inner, uri)
        else:
            path, file_type = ROOT_PATH, FileType.FOLDER

        return LayeredFileName(
            scheme=scheme, path=path, type=file_type, outer=outer
        )

    def _layered_scheme(self, scheme: str) -> str:
        if not self._registry.is_layered(scheme):
            raise UnknownSchemeError(scheme)
        return scheme.lower()

    @staticmethod
    def _check_outer(outer_uri: str) -> None:
        if DELIMITER in outer_uri:
            raise InvalidOuterNameError(
                outer_uri,
                f"contains the layering delimiter {DELIMITER!r}",
            )
