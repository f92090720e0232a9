from typing import List, Tuple, TypeAlias

from streamquote.constants import RUNE_ERROR

Lead: TypeAlias = Tuple[int, int, int, int] | None

# Per lead byte: (sequence width, payload mask, low and high bound of the
# second byte). The second-byte bounds exclude overlong forms, UTF-16
# surrogates and values above U+10FFFF.
_LEADS: List[Lead] = [None] * 256
for _b in range(0xC2, 0xE0):
    _LEADS[_b] = (2, 0x1F, 0x80, 0xBF)
_LEADS[0xE0] = (3, 0x0F, 0xA0, 0xBF)
for _b in range(0xE1, 0xF0):
    _LEADS[_b] = (3, 0x0F, 0x80, 0xBF)
_LEADS[0xED] = (3, 0x0F, 0x80, 0x9F)
_LEADS[0xF0] = (4, 0x07, 0x90, 0xBF)
for _b in range(0xF1, 0xF4):
    _LEADS[_b] = (4, 0x07, 0x80, 0xBF)
_LEADS[0xF4] = (4, 0x07, 0x80, 0x8F)
del _b


def decode_rune(buffer: bytes | bytearray, start: int, end: int) -> Tuple[int, int]:
    r"""
    Decode the UTF-8 sequence at ``buffer[start:end]``.

    Returns ``(codepoint, width)``. An invalid or truncated sequence yields
    ``(RUNE_ERROR, 1)``: exactly one byte is rejected and the caller resumes
    at the next one. A well-formed encoding of U+FFFD itself decodes with
    width 3, which is how the two cases are told apart.
    """
    if start >= end:
        return RUNE_ERROR, 1
    b0 = buffer[start]
    if b0 < 0x80:
        return b0, 1

    lead = _LEADS[b0]
    if lead is None:
        return RUNE_ERROR, 1
    width, mask, low, high = lead
    if end - start < width:
        return RUNE_ERROR, 1

    b1 = buffer[start + 1]
    if not low <= b1 <= high:
        return RUNE_ERROR, 1
    codepoint = (b0 & mask) << 6 | (b1 & 0x3F)

    for i in range(start + 2, start + width):
        b = buffer[i]
        if b & 0xC0 != 0x80:
            return RUNE_ERROR, 1
        codepoint = codepoint << 6 | (b & 0x3F)

    return codepoint, width
