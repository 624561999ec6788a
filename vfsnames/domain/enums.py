from enum import Enum


class FileType(str, Enum):
    """Classification of a normalized name."""

    FILE = "FILE"
    FOLDER = "FOLDER"


class NameKind(str, Enum):
    """Shape of the name a scheme produces."""

    HOST = "HOST"
    SHARE = "SHARE"
