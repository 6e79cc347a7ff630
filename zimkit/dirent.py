"""Directory entries of a ZIM archive and the format-wide enumerations."""

from __future__ import annotations

from enum import Enum

MIME_HTML_TEMPLATE = "text/x-zim-htmltemplate"


class Compression(Enum):
    """Compression of a cluster, as stored in the archive."""

    NONE = 1
    LZMA = 4
    ZSTD = 5


class IntegrityCheck(Enum):
    """Kinds of integrity checks that can be run on an archive."""

    CHECKSUM = 0
    DIRENT_PTRS = 1
    DIRENT_ORDER = 2
    TITLE_INDEX = 3
    CLUSTER_PTRS = 4
    DIRENT_MIMETYPES = 5
    COUNT = 6  # not a check: the number of checks


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class Dirent:
    """One directory entry: either an item stored in a cluster or a redirect."""

    REDIRECT_MIME_TYPE = 0xFFFF
    LINKTARGET_MIME_TYPE = 0xFFFE
    DELETED_MIME_TYPE = 0xFFFD

    def __init__(self):
        self._mime_type = 0
        self.version = 0
        self._cluster_number = 0
        self._blob_number = 0
        self._redirect_index = 0
        self._namespace = "\0"
        self._title = ""
        self._url = ""
        self.parameter = ""

    def is_redirect(self) -> bool:
        return self._mime_type == self.REDIRECT_MIME_TYPE

    def is_linktarget(self) -> bool:
        return self._mime_type == self.LINKTARGET_MIME_TYPE

    def is_deleted(self) -> bool:
        return self._mime_type == self.DELETED_MIME_TYPE

    def is_article(self) -> bool:
        return not (self.is_redirect() or self.is_linktarget() or self.is_deleted())

    @property
    def mime_type(self) -> int:
        return self._mime_type

    @property
    def cluster_number(self) -> int:
        """The cluster holding the item; 0 for a redirect."""
        return 0 if self.is_redirect() else self._cluster_number

    @property
    def blob_number(self) -> int:
        """The blob within the cluster; 0 for a redirect."""
        return 0 if self.is_redirect() else self._blob_number

    @property
    def redirect_index(self) -> int:
        """The target entry of a redirect; 0 for anything else."""
        return self._redirect_index if self.is_redirect() else 0

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def url(self) -> str:
        return self._url

    @property
    def title(self) -> str:
        """The title, or the url when no title is set."""
        return self._title or self._url

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    def dirent_size(self) -> int:
        """Number of bytes the entry takes once serialized."""
        size = (12 if self.is_redirect() else 16) + _byte_len(self._url) + _byte_len(self.parameter) + 2
        if self._title != self._url:
            size += _byte_len(self._title)
        return size

    def set_url(self, ns: str, url: str) -> None:
        if len(ns) != 1:
            raise ValueError(f"a namespace is a single character, got {ns!r}")
        self._namespace = ns
        self._url = url

    def set_redirect(self, index: int) -> None:
        self._redirect_index = index
        self._mime_type = self.REDIRECT_MIME_TYPE

    def set_item(self, mime_type: int, cluster_number: int, blob_number: int) -> None:
        self._mime_type = mime_type
        self._cluster_number = cluster_number
        self._blob_number = blob_number

    def __repr__(self) -> str:
        return f"Dirent({self._namespace!r}, {self._url!r}, mime_type={self._mime_type})"