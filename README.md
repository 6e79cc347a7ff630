# zimkit

Pure-Python building blocks for working with ZIM archives, the format used for
offline copies of web content. The package has no dependencies outside the
standard library.

## Modules

- `zimkit.endian` – `to_little_endian(value, size)` encodes an integer on 2, 4
  or 8 bytes; `from_little_endian(data, size)` decodes an unsigned integer.
  `BufferStreamer` walks a byte buffer: `read_uint(size)`, `skip(nbytes)`,
  `current()` (the bytes not yet consumed) and `left()`. Reading or skipping
  past the end raises `ValueError`.
- `zimkit.lrucache` – `LruCache(max_size)`, a bounded cache that evicts the
  least recently used key, with `get`, `put`, `get_or_put`, `drop`, `exists`,
  `len()` and `in`. Accesses return an `AccessResult` whose `hit()`, `miss()`
  and `value()` tell what happened (`AccessStatus.HIT`, `PUT` or `MISS`);
  `value()` after a failed `get` raises `KeyError`.
  `ConcurrentCache(max_entries)` is thread safe: `get_or_put(key, factory)`
  calls `factory()` outside the lock on a miss, and other threads asking for
  the same key wait for that result. If the factory raises, the key is dropped
  and the exception propagates.
- `zimkit.zimuuid` – `Uuid`, an immutable 16-byte identifier (all zeros by
  default). `Uuid.generate()` makes a random one, `Uuid.generate(text)` derives
  one from a string. `str()` gives the canonical dashed form, `bytes()` the raw
  bytes.
- `zimkit.blob` – `Blob`, an immutable piece of item data, compared and hashed
  by content.
- `zimkit.dirent` – `Dirent`, a directory entry that is either an item
  (`set_item(mime_type, cluster_number, blob_number)`) or a redirect
  (`set_redirect(index)`), with `is_redirect()`, `is_linktarget()`,
  `is_deleted()`, `is_article()` and `dirent_size()`, the number of bytes the
  entry takes once serialized. Also the `Compression` and `IntegrityCheck`
  enums and the `MIME_HTML_TEMPLATE` constant.
- `zimkit.htmlparse` – `decode_entities(text)` replaces named, decimal and
  hexadecimal character references; `HtmlParser` is a tolerant tokenizer that
  calls `process_text`, `opening_tag` and `closing_tag` hooks (tag names in
  lower case) and exposes the attributes of the tag being opened through
  `get_parameter(name)`.
- `zimkit.myhtmlparse` – `MyHtmlParser` builds on `HtmlParser` to collect a
  page's `title`, `sample` (meta description), `keywords`, body text (`dump`),
  `latitude`/`longitude` from a `geo.position` meta tag, and whether robots
  allow indexing. It raises `StopParsing` when `</body>` is reached or a robots
  meta tag forbids indexing, and `CharsetChanged` when the page declares a
  charset other than the one given to `parse_html`.

## Examples

An LRU cache:

```python
from zimkit.lrucache import LruCache

cache = LruCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")          # "a" is now the most recently used
cache.put("c", 3)       # evicts "b"
assert "b" not in cache
```

Little-endian integers:

```python
from zimkit.endian import BufferStreamer, to_little_endian

data = to_little_endian(0x1234, 2) + to_little_endian(7, 4)
stream = BufferStreamer(data)
assert stream.read_uint(2) == 0x1234
assert stream.read_uint(4) == 7
assert stream.left() == 0
```

A UUID:

```python
from zimkit.zimuuid import Uuid

uid = Uuid(bytes.fromhex("550e8400e29b41d4a716446655440000"))
print(uid)   # 550e8400-e29b-41d4-a716-446655440000
```

Extracting text from HTML:

```python
from zimkit.myhtmlparse import MyHtmlParser, StopParsing

parser = MyHtmlParser()
try:
    parser.parse_html("<html><title>Hi</title><body><p>Hello world</p></body></html>",
                      "utf-8", False)
except StopParsing:
    pass
print(parser.title, "|", parser.dump)   # Hi | Hello world
```

Decoding entities:

```python
from zimkit.htmlparse import decode_entities

assert decode_entities("&lt;b&gt; caf&eacute;") == "<b> café"
```

## What the package does not do

It does not open, read or write ZIM archive files. There is no archive reader,
no entry lookup by path or title, no cluster decompression, no full-text or
title search, and no command-line tool: the modules above are the pieces such
a reader would be built from.

## Installing

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```