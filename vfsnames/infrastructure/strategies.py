from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HostExtractor(Protocol):
    """Strategy pulling the host name off the front of an authority.

    Implementations decide what counts as a host for their scheme
    (plain names, bracketed IPv6 literals, ...).
    """

    def extract(self, text: str) -> tuple[str, str]:
        """Split the host off ``text``.

        Args:
            text: Authority text following the user info, e.g.
                ``"host:21/path"``.

        Returns:
            Tuple of (host, remaining text). The host is empty when
            ``text`` does not start with one.
        """
        ...


@runtime_checkable
class CredentialSplitter(Protocol):
    """Strategy splitting a qualifying domain off a raw user name."""

    def split(
        self, username: Optional[str]
    ) -> tuple[Optional[str], Optional[str]]:
        """Split ``username`` into domain and bare user name.

        Args:
            username: Raw, still percent-encoded user name, or None.

        Returns:
            Tuple of (domain, username). Domain is None when the user
            name carries none.
        """
        ...
