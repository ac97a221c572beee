import pytest

from textscan.classifier import CHUNK_SIZE, Classification, classify_file, is_utf8_file, is_valid_utf8


@pytest.mark.parametrize("data", [
    b"",
    b"plain ascii\n",
    "café".encode("utf-8"),
    "€ 5".encode("utf-8"),
    "\U0001F600".encode("utf-8"),
    b"\xc0\x80",          # overlong, only bit patterns are checked
    b"\xed\xa0\x80",      # surrogate, same
])
def test_valid_sequences(data):
    assert is_valid_utf8(data)


@pytest.mark.parametrize("data", [
    b"\xff\xfe",
    b"\x80abc",           # continuation byte in lead position
    b"\xf8\x88\x80\x80\x80",
    b"abc\xc3",           # cut short by the end of the buffer
    b"\xe2\x82",
    b"\xc3A",
    b"\xf0\x9f\x98A",
])
def test_invalid_sequences(data):
    assert not is_valid_utf8(data)


def test_text_file(tmp_path):
    p = tmp_path / "text.txt"
    p.write_text("hello wörld\n" * 50, encoding="utf-8")
    assert classify_file(str(p)).kind is Classification.TEXT
    assert is_utf8_file(str(p))


def test_empty_file_is_text(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_bytes(b"")
    assert is_utf8_file(str(p))


def test_binary_file(tmp_path):
    p = tmp_path / "bin.dat"
    p.write_bytes(b"\x00\x01\xff\xfe")
    assert classify_file(str(p)).kind is Classification.BINARY
    assert not is_utf8_file(str(p))


def test_missing_file_fails_closed(tmp_path):
    result = classify_file(str(tmp_path / "nope.txt"))
    assert result.kind is Classification.READ_ERROR
    assert result.reason
    assert not result.is_text


def test_character_split_by_chunk_boundary(tmp_path):
    p = tmp_path / "split.txt"
    # "é" starts on the last byte of the first chunk.
    p.write_bytes(b"a" * (CHUNK_SIZE - 1) + "é".encode("utf-8") + b"tail")
    assert classify_file(str(p)).kind is Classification.BINARY
    assert classify_file(str(p), join_chunks=True).kind is Classification.TEXT


def test_join_chunks_rejects_truncated_end(tmp_path):
    p = tmp_path / "cut.txt"
    p.write_bytes(b"abc\xe2\x82")
    assert classify_file(str(p), join_chunks=True).kind is Classification.BINARY


def test_join_chunks_still_rejects_bad_bytes(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_bytes("€".encode("utf-8") * 10 + b"\xff")
    assert classify_file(str(p), chunk_size=4, join_chunks=True).kind is Classification.BINARY


def test_permission_denied_is_read_error(tmp_path, monkeypatch):
    import builtins

    from textscan import ScanRequest, classifier, run_scan

    locked = tmp_path / "locked.txt"
    locked.write_text("Hello", encoding="utf-8")
    (tmp_path / "open.txt").write_text("Hello", encoding="utf-8")

    def guarded_open(path, *args, **kwargs):
        if str(path) == str(locked):
            raise PermissionError(13, "Permission denied", str(path))
        return builtins.open(path, *args, **kwargs)

    monkeypatch.setattr(classifier, "open", guarded_open, raising=False)

    result = classify_file(str(locked))
    assert result.kind is Classification.READ_ERROR
    assert result.reason == "Permission denied"

    scan = run_scan(ScanRequest(root=str(tmp_path), search_term="Hello"), reveal=lambda p: None)
    assert scan.scanned == 2
    assert scan.errors == 1
    assert scan.matches == {str(tmp_path / "open.txt")}
