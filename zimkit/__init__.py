"""Building blocks for ZIM archives: little-endian decoding, LRU caches, UUIDs, blobs, directory entries and HTML text extraction."""

__version__ = "7.2.2"