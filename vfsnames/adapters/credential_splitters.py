"""Concrete CredentialSplitter strategies."""

from typing import Optional


class PlainCredentialSplitter:
    """Leaves the user name untouched."""

    def split(
        self, username: Optional[str]
    ) -> tuple[Optional[str], Optional[str]]:
        return None, username


class DomainCredentialSplitter:
    """Splits ``DOMAIN\\user`` at the first backslash.

    Everything before the backslash is the domain, everything after it
    the bare user name. A user name without a backslash has no domain.
    """

    SEPARATOR = "\\"

    def split(
        self, username: Optional[str]
    ) -> tuple[Optional[str], Optional[str]]:
        if username is None:
            return None, None
        domain, sep, user = username.partition(self.SEPARATOR)
        if not sep:
            return None, username
        return domain, user
