r"""
Escaping of single codepoints into the printable string-literal form.

Rules, in priority order:

1. ``"`` and ``\`` are backslashed.
2. Printable codepoints are emitted as their original UTF-8 bytes.
3. Bell, backspace, form feed, newline, carriage return, tab and vertical
   tab use their mnemonic (``\a`` ... ``\v``).
4. Other codepoints below U+0020, and U+007F unless the legacy convention is
   selected, become ``\xHH``.
5. Values above U+10FFFF are replaced by U+FFFD.
6. The rest become ``\uHHHH`` or ``\UHHHHHHHH``.

Invalid UTF-8 bytes are emitted one at a time as ``\xHH``.
"""

from typing import Dict, List, Tuple

from streamquote.constants import (
    DEL,
    MAX_RUNE,
    MNEMONIC_ESCAPES,
    RUNE_ERROR,
    SELF_ESCAPED,
)
from streamquote.helpers import is_printable, u_escape, x_escape
from streamquote.types import DelEscape

# surrogateescape maps undecodable byte 0xHH to U+DCHH
_SURROGATE_ESCAPE_LOW = 0xDC80
_SURROGATE_ESCAPE_HIGH = 0xDCFF

INVALID_BYTE_TOKENS: Tuple[bytes, ...] = tuple(x_escape(b) for b in range(256))


def escape_rune(codepoint: int, raw: bytes, del_escape: DelEscape = "x") -> bytes:
    """Return the escaped token for codepoint, whose encoded form is raw."""
    if codepoint in SELF_ESCAPED:
        return b"\\" + raw
    if is_printable(codepoint):
        return raw
    mnemonic = MNEMONIC_ESCAPES.get(codepoint)
    if mnemonic is not None:
        return mnemonic
    if codepoint < 0x20 or (codepoint == DEL and del_escape == "x"):
        return x_escape(codepoint)
    if codepoint > MAX_RUNE:
        codepoint = RUNE_ERROR
    return u_escape(codepoint)


def _build_ascii_tokens(del_escape: DelEscape) -> Tuple[bytes, ...]:
    return tuple(escape_rune(b, bytes((b,)), del_escape) for b in range(0x80))


_ASCII_TOKENS: Dict[DelEscape, Tuple[bytes, ...]] = {
    "x": _build_ascii_tokens("x"),
    "u": _build_ascii_tokens("u"),
}


def ascii_tokens(del_escape: DelEscape = "x") -> Tuple[bytes, ...]:
    """Escaped tokens for the 128 ASCII codepoints, indexed by byte value."""
    return _ASCII_TOKENS[del_escape]


def quote(
    data: bytes, *, del_escape: DelEscape = "x", delimiters: bool = True
) -> bytes:
    """
    Escape a complete byte string in one pass.

    This is the whole-string counterpart of the streaming converters and
    holds the full input and output in memory. The result is wrapped in
    double quotes unless ``delimiters`` is false.
    """
    parts: List[bytes] = [b'"'] if delimiters else []
    for ch in data.decode("utf-8", "surrogateescape"):
        codepoint = ord(ch)
        if _SURROGATE_ESCAPE_LOW <= codepoint <= _SURROGATE_ESCAPE_HIGH:
            parts.append(INVALID_BYTE_TOKENS[codepoint - 0xDC00])
        else:
            parts.append(escape_rune(codepoint, ch.encode("utf-8"), del_escape))
    if delimiters:
        parts.append(b'"')
    return b"".join(parts)
