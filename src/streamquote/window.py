from streamquote.constants import UTF_MAX
from streamquote.decoder import decode_rune
from streamquote.escape import INVALID_BYTE_TOKENS, ascii_tokens, escape_rune
from streamquote.types import DelEscape


class SlidingWindow:
    """
    Fixed-capacity byte buffer holding the bytes read but not yet consumed.

    ``buffer[processed:data_len]`` is the unconsumed region. The buffer never
    grows: refilling moves the unconsumed tail to the front and reads into
    the space behind it.
    """

    def __init__(self, capacity: int, del_escape: DelEscape = "x") -> None:
        if capacity < UTF_MAX:
            raise ValueError(
                f"Window capacity must be at least {UTF_MAX} bytes, got {capacity}."
            )
        self._buffer = bytearray(capacity)
        self._view = memoryview(self._buffer)
        self._processed = 0
        self._data_len = 0
        self._del_escape: DelEscape = del_escape
        self._ascii = ascii_tokens(del_escape)

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def processed(self) -> int:
        return self._processed

    @property
    def data_len(self) -> int:
        return self._data_len

    @property
    def pending(self) -> int:
        return self._data_len - self._processed

    def is_empty(self) -> bool:
        return self._data_len == self._processed

    def needs_refill(self) -> bool:
        # a codepoint may span UTF_MAX bytes
        return self._data_len - self._processed < UTF_MAX

    def reset(self) -> None:
        self._processed = 0
        self._data_len = 0

    def compact(self) -> memoryview:
        """Move the unconsumed tail to the front and return the free space after it."""
        pending = self._data_len - self._processed
        if self._processed:
            self._buffer[:pending] = self._buffer[self._processed : self._data_len]
        self._processed = 0
        self._data_len = pending
        return self._view[pending:]

    def commit(self, count: int) -> None:
        """Mark count bytes written into the free space as valid data."""
        if count < 0 or self._data_len + count > len(self._buffer):
            raise ValueError(
                f"Cannot commit {count} byte(s) with {len(self._buffer) - self._data_len} byte(s) free."
            )
        self._data_len += count

    def fill(self, chunk: bytes) -> None:
        """Copy chunk into the free space and commit it."""
        size = len(chunk)
        self.commit(size)
        self._buffer[self._data_len - size : self._data_len] = chunk

    def next_token(self) -> bytes:
        """Consume one codepoint or one invalid byte and return its escaped form."""
        start = self._processed
        lead = self._buffer[start]
        if lead < 0x80:
            self._processed = start + 1
            return self._ascii[lead]

        codepoint, width = decode_rune(self._buffer, start, self._data_len)
        self._processed = start + width
        if width == 1:
            return INVALID_BYTE_TOKENS[lead]
        return escape_rune(
            codepoint, bytes(self._buffer[start : start + width]), self._del_escape
        )
