"""Big-endian primitive reader over a binary stream.

Streams may return fewer bytes than requested (zip entry streams,
pipes, sockets), so every read loops until the requested count is
satisfied or the stream is exhausted. Exhaustion raises
TruncatedError rather than returning a short value.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

from verona.classfile.errors import TruncatedError

_U1 = struct.Struct(">B")
_U2 = struct.Struct(">H")
_U4 = struct.Struct(">I")


class ClassFileReader:
    """Reads unsigned big-endian fields and tracks the byte offset."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    def read_exactly(self, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            chunk = self._stream.read(size - len(buf))
            if not chunk:
                raise TruncatedError(self._offset, size, len(buf))
            buf += chunk
        self._offset += size
        return bytes(buf)

    def skip(self, size: int) -> None:
        self.read_exactly(size)

    def u1(self) -> int:
        return _U1.unpack(self.read_exactly(1))[0]

    def u2(self) -> int:
        return _U2.unpack(self.read_exactly(2))[0]

    def u4(self) -> int:
        return _U4.unpack(self.read_exactly(4))[0]


def decode_utf8(raw: bytes) -> str:
    """Decode a CONSTANT_Utf8 payload.

    Class files use "modified UTF-8": NUL is encoded as C0 80 and
    supplementary characters as surrogate pairs. Anything still invalid
    is replaced, never rejected.
    """
    data = raw.replace(b"\xc0\x80", b"\x00")
    try:
        text = data.decode("utf-8", errors="surrogatepass")
    except UnicodeDecodeError:
        return data.decode("utf-8", errors="replace")
    # Pair up surrogates; any left unpaired become U+FFFD.
    return text.encode("utf-16", errors="surrogatepass").decode(
        "utf-16", errors="replace"
    )
