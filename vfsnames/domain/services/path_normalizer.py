"""Path canonicalization and normalization.

Each step is a plain function so it can be exercised on its own.
``normalize_path`` chains them in the order the name builders need:
drop the query, decode escapes, fix separators, resolve ``.``/``..``
segments and classify the result as a file or a folder.
"""

import re
from typing import Optional
from urllib.parse import unquote

from funcy import compact

from vfsnames.domain.enums import FileType
from vfsnames.domain.exceptions import InvalidEscapeSequenceError

SEPARATOR = "/"
ROOT_PATH = "/"

# Characters escaped when a decoded component is written back into a URI.
PATH_RESERVED = "%?#!"
USERINFO_RESERVED = "%:@/?#!\\"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def strip_query(text: str) -> str:
    """Drop everything from the first ``?`` onwards."""
    pos = text.find("?")
    if pos == -1:
        return text
    return text[:pos]


def decode(text: Optional[str], uri: str = "") -> Optional[str]:
    """Percent-decode ``text``.

    Args:
        text: Encoded text, may be None.
        uri: Full URI, used for error reporting.

    Returns:
        Decoded text, or None when ``text`` is None.

    Raises:
        InvalidEscapeSequenceError: If a ``%`` is not followed by two hex
            digits, or the escaped octets are not valid UTF-8.
    """
    if text is None:
        return None
    if _BAD_ESCAPE.search(text):
        raise InvalidEscapeSequenceError(uri or text)
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidEscapeSequenceError(uri or text) from exc


def encode(text: str, reserved: str = PATH_RESERVED) -> str:
    """Escape the ``reserved`` characters of ``text`` as ``%XX``."""
    return "".join(
        f"%{ord(ch):02X}" if ch in reserved else ch for ch in text
    )


def fix_separators(text: str) -> str:
    """Replace backslashes with the canonical separator."""
    return text.replace("\\", SEPARATOR)


def resolve_segments(path: str) -> str:
    """Resolve ``.``, ``..`` and empty segments of a decoded path.

    A ``..`` at the root is dropped rather than rejected.

    Returns:
        Absolute path without trailing separator, or ``/``.
    """
    segments: list[str] = []
    for segment in compact(path.split(SEPARATOR)):
        if segment == ".":
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return SEPARATOR + SEPARATOR.join(segments)


def classify(text: str, path: str) -> FileType:
    """Classify a path from its decoded text and its normalized form."""
    if not text or text.endswith(SEPARATOR) or path == ROOT_PATH:
        return FileType.FOLDER
    return FileType.FILE


def is_normalized(path: str) -> bool:
    """Check that ``path`` is an absolute, fully resolved path."""
    return resolve_segments(path) == path


def canonicalize(text: str, uri: str = "") -> str:
    """Drop the query, decode escapes and fix separators of path text.

    ``.`` and ``..`` segments are left in place.

    Raises:
        InvalidEscapeSequenceError: If the text holds a bad escape.
    """
    return fix_separators(decode(strip_query(text), uri))


def normalize_path(text: str, uri: str = "") -> tuple[str, FileType]:
    """Turn the path text of a URI into a normalized path.

    Args:
        text: Path text following the authority, may carry a query.
        uri: Full URI, used for error reporting.

    Returns:
        Tuple of (normalized path, file type).

    Raises:
        InvalidEscapeSequenceError: If the path holds a bad escape.
    """
    decoded = canonicalize(text, uri)
    path = resolve_segments(decoded)
    return path, classify(decoded, path)


def extract_first_element(path: str) -> tuple[Optional[str], str]:
    """Split the first non-empty segment off a path.

    The remainder is kept as written, trailing separator included, so
    it can still be resolved and classified.

    Args:
        path: Canonicalized or normalized path.

    Returns:
        Tuple of (first segment or None, remaining path). The remaining
        path always starts with ``/``.
    """
    stripped = path.lstrip(SEPARATOR)
    if not stripped:
        return None, ROOT_PATH
    element, _, rest = stripped.partition(SEPARATOR)
    return element, SEPARATOR + rest
