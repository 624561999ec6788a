from typing import Optional


class VfsNameError(Exception):
    """Base exception for all file name errors."""


class UnknownSchemeError(VfsNameError):
    """Raised when no profile is registered for a scheme.

    Attributes:
        scheme: The scheme token that was looked up.
    """

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"Unknown URI scheme: {scheme}")


class FileNameParseError(VfsNameError):
    """Raised when a URI cannot be parsed into a file name.

    Attributes:
        uri: The offending URI text.
        code: Stable message key identifying the failure.
    """

    code: str = "badly-formed-uri"
    description: str = "Badly formed URI"

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f'{self.description} "{uri}".')


class MissingDoubleSlashesError(FileNameParseError):
    """Raised when ``//`` does not follow the scheme."""

    code = "missing-double-slashes"
    description = "Expecting // to follow the scheme in URI"


class MissingHostnameError(FileNameParseError):
    """Raised when the authority has no host name."""

    code = "missing-hostname"
    description = "Hostname missing from URI"


class MissingPortError(FileNameParseError):
    """Raised when ``:`` is not followed by a port number."""

    code = "missing-port"
    description = "Port number is missing from URI"


class MissingPathSeparatorError(FileNameParseError):
    """Raised when the authority is followed by something other than ``/``."""

    code = "missing-hostname-path-sep"
    description = "Expecting / to follow the hostname in URI"


class InvalidEscapeSequenceError(FileNameParseError):
    """Raised when a ``%`` escape is malformed or does not decode."""

    code = "invalid-escape-sequence"
    description = "Invalid URI escape sequence in"


class MissingRequiredElementError(FileNameParseError):
    """Raised when a mandatory top-level path element is absent.

    Attributes:
        element: Name of the missing element (e.g., "share").
    """

    def __init__(self, uri: str, element: str = "share") -> None:
        self.element = element
        self.code = f"missing-{element}-name"
        self.description = f"The {element} name is missing from URI"
        super().__init__(uri)


class InvalidOuterNameError(FileNameParseError):
    """Raised when a name cannot be wrapped by a layered scheme.

    Attributes:
        reason: Optional detail on why the outer name was rejected.
    """

    code = "invalid-outer-name"
    description = "Cannot use as the outer file of a layered name"

    def __init__(self, uri: str, reason: Optional[str] = None) -> None:
        self.reason = reason
        super().__init__(uri)
        if reason:
            self.args = (f"{self.args[0]} ({reason})",)
