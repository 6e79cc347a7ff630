from zimkit.blob import Blob


def test_empty_blob():
    blob = Blob()
    assert len(blob) == 0
    assert bytes(blob) == b""
    assert blob == Blob(b"")


def test_content_round_trip():
    content = b"hello zim"
    blob = Blob(content)
    assert bytes(blob) == content
    assert len(blob) == len(content)
    assert blob.data == content


def test_accepts_bytes_like_input():
    content = b"abc"
    assert Blob(bytearray(content)) == Blob(content)
    assert Blob(memoryview(content)) == Blob(content)


def test_copy_is_independent_of_mutable_source():
    source = bytearray(b"abc")
    blob = Blob(source)
    source[0] = ord("z")
    assert bytes(blob) == b"abc"


def test_equality_depends_on_size_and_content():
    assert Blob(b"abc") != Blob(b"abd")
    assert Blob(b"abc") != Blob(b"ab")
    assert Blob(b"abc") == Blob(b"abc")


def test_hash_follows_equality():
    assert hash(Blob(b"abc")) == hash(Blob(bytearray(b"abc")))
    assert len({Blob(b"x"), Blob(b"x"), Blob(b"y")}) == 2


def test_not_equal_to_raw_bytes():
    assert (Blob(b"abc") == b"abc") is False