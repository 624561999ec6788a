"""Splits a URI into scheme, authority and remaining path text.

The host is pulled off by an injected HostExtractor so that schemes
can change what a host looks like without touching the rest of the
algorithm.
"""

import re
from typing import TYPE_CHECKING, Optional

from vfsnames.domain.exceptions import (
    MissingDoubleSlashesError,
    MissingHostnameError,
    MissingPathSeparatorError,
    MissingPortError,
)
from vfsnames.domain.value_objects import Authority

if TYPE_CHECKING:
    from vfsnames.infrastructure.strategies import HostExtractor

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+\-.]*:")


def extract_scheme(uri: str) -> tuple[Optional[str], str]:
    """Split the scheme token off ``uri``.

    Returns:
        Tuple of (lower-cased scheme or None, text after the ``:``).
    """
    match = _SCHEME.match(uri)
    if match is None:
        return None, uri
    return match.group()[:-1].lower(), uri[match.end():]


class AuthorityExtractor:
    """Extracts the ``[user[:password]@]host[:port]`` part of a URI.

    Attributes:
        _host_extractor: Strategy used to pull the host name.
    """

    def __init__(self, host_extractor: "HostExtractor") -> None:
        """Initialize with a HostExtractor.

        Args:
            host_extractor: Scheme-specific host extraction strategy.
        """
        self._host_extractor = host_extractor

    def extract(self, uri: str) -> tuple[Authority, str]:
        """Parse the scheme and authority of ``uri``.

        Args:
            uri: Absolute URI, e.g. ``"ftp://user@host:21/dir/file"``.

        Returns:
            Tuple of (Authority, remaining path text). The remaining text
            is empty or starts with ``/``.

        Raises:
            MissingDoubleSlashesError: If ``//`` does not follow the scheme.
            MissingHostnameError: If the authority has no host.
            MissingPortError: If ``:`` is not followed by digits.
            MissingPathSeparatorError: If the authority is followed by
                anything but ``/``.
        """
        scheme, rest = extract_scheme(uri)
        if scheme is None or not rest.startswith("//"):
            raise MissingDoubleSlashesError(uri)
        rest = rest[2:]

        user_info, rest = self._extract_user_info(rest)
        username: Optional[str] = None
        password: Optional[str] = None
        if user_info is not None:
            username, sep, password_text = user_info.partition(":")
            password = password_text if sep else None

        hostname, rest = self._host_extractor.extract(rest)
        if not hostname:
            raise MissingHostnameError(uri)

        port, rest = self._extract_port(rest, uri)

        if rest and not rest.startswith("/"):
            raise MissingPathSeparatorError(uri)

        return (
            Authority(
                scheme=scheme,
                username=username,
                password=password,
                hostname=hostname.lower(),
                port=port,
            ),
            rest,
        )

    @staticmethod
    def _extract_user_info(text: str) -> tuple[Optional[str], str]:
        """Split the user info off ``text`` if it has any.

        User info ends at the first ``@``, and cannot contain ``/`` or
        ``?``.
        """
        for pos, ch in enumerate(text):
            if ch == "@":
                return text[:pos], text[pos + 1:]
            if ch in "/?":
                break
        return None, text

    @staticmethod
    def _extract_port(text: str, uri: str) -> tuple[Optional[int], str]:
        """Split a ``:port`` prefix off ``text``."""
        if not text.startswith(":"):
            return None, text
        pos = 1
        while pos < len(text) and "0" <= text[pos] <= "9":
            pos += 1
        digits = text[1:pos]
        if not digits:
            raise MissingPortError(uri)
        return int(digits), text[pos:]
