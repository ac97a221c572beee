"""Decide whether a file's bytes are UTF-8 text.

The check is byte-pattern based and deliberately loose: it looks only at
lead/continuation bit patterns, so overlong forms and surrogate code points
pass. A file is text when every chunk read from it validates on its own.
"""

from dataclasses import dataclass
from enum import Enum

CHUNK_SIZE = 1024


class Classification(Enum):
    TEXT = "text"
    BINARY = "binary"
    READ_ERROR = "read error"


@dataclass(frozen=True)
class ClassifyResult:
    kind: Classification
    reason: str | None = None

    @property
    def is_text(self) -> bool:
        return self.kind is Classification.TEXT


def _sequence_length(lead: int) -> int:
    if lead <= 0x7F:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def _scan(data: bytes) -> tuple[bool, int]:
    """
    Walk ``data`` sequence by sequence.

    Returns ``(False, i)`` on a malformed sequence at ``i``. Otherwise returns
    ``(True, i)`` where ``i`` is the offset of a trailing sequence that is cut
    short by the end of ``data`` (``len(data)`` when there is none).
    """
    length = len(data)
    if data.isascii():
        return True, length
    i = 0
    while i < length:
        n = _sequence_length(data[i])
        if n == 0:
            return False, i
        if n == 1:
            i += 1
            continue
        end = min(i + n, length)
        for j in range(i + 1, end):
            if data[j] & 0xC0 != 0x80:
                return False, i
        if i + n > length:
            return True, i
        i += n
    return True, length


def is_valid_utf8(data: bytes) -> bool:
    """True when ``data`` is made only of complete, well-formed sequences."""
    ok, end = _scan(data)
    return ok and end == len(data)


def classify_file(path: str, *, chunk_size: int = CHUNK_SIZE, join_chunks: bool = False) -> ClassifyResult:
    """
    Read ``path`` in ``chunk_size`` pieces and classify it.

    By default every chunk must validate on its own, so a multi-byte
    character straddling a chunk boundary makes the file BINARY. With
    ``join_chunks`` the cut-off bytes are carried into the next read and only
    a sequence left incomplete at end of file counts against it.
    """
    try:
        with open(path, "rb") as fb:
            carry = b""
            while True:
                chunk = fb.read(chunk_size)
                if not chunk:
                    break
                if join_chunks:
                    data = carry + chunk
                    ok, end = _scan(data)
                    if not ok:
                        return ClassifyResult(Classification.BINARY)
                    carry = data[end:]
                elif not is_valid_utf8(chunk):
                    return ClassifyResult(Classification.BINARY)
            if carry:
                return ClassifyResult(Classification.BINARY)
    except OSError as e:
        return ClassifyResult(Classification.READ_ERROR, e.strerror or str(e))
    return ClassifyResult(Classification.TEXT)


def is_utf8_file(path: str, **kwargs) -> bool:
    """Fail-closed convenience wrapper: unreadable files are not text."""
    return classify_file(path, **kwargs).is_text
