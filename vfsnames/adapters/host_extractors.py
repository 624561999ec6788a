"""Concrete HostExtractor strategies.

DefaultHostExtractor reads a plain host name. Ipv6HostExtractor also
accepts RFC 2732 bracketed IPv6 literals and falls back to the plain
rules when the brackets do not hold a valid literal.
"""

import re

from vfsnames.log import logger

logger = logger.getChild(__name__)

_HOST_TERMINATORS = frozenset("/;?:@&=+$,")

_IPV6_STD = re.compile(r"\[[0-9a-fA-F]{1,4}(?::[0-9a-fA-F]{1,4}){7}\]")
_IPV6_HEX_COMPRESSED = re.compile(
    r"\[(?:[0-9A-Fa-f]{1,4}(?::[0-9A-Fa-f]{1,4}){0,5})?"
    r"::"
    r"(?:[0-9A-Fa-f]{1,4}(?::[0-9A-Fa-f]{1,4}){0,5})?\]"
)


class DefaultHostExtractor:
    """Reads the host up to the first delimiter or the end of the text."""

    def extract(self, text: str) -> tuple[str, str]:
        pos = 0
        while pos < len(text) and text[pos] not in _HOST_TERMINATORS:
            pos += 1
        return text[:pos], text[pos:]


class Ipv6HostExtractor(DefaultHostExtractor):
    """Reads a bracketed IPv6 literal, or a plain host name."""

    def extract(self, text: str) -> tuple[str, str]:
        end = text.find("]") if text.startswith("[") else -1
        if end == -1:
            return super().extract(text)

        literal = text[: end + 1]
        if is_ipv6_literal(literal):
            return literal, text[end + 1:]

        logger.debug("'%s' is not an IPv6 literal, reading a host name", literal)
        return super().extract(text)


def is_ipv6_literal(literal: str) -> bool:
    """Check a bracketed literal against the full and compressed forms."""
    return bool(
        _IPV6_STD.fullmatch(literal)
        or _IPV6_HEX_COMPRESSED.fullmatch(literal)
    )
