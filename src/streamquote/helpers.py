from streamquote.constants import LOWER_HEX, MAX_RUNE


def is_printable(codepoint: int) -> bool:
    """
    Letters, marks, numbers, punctuation, symbols and the ASCII space.
    Every other separator, control, format, surrogate, private-use and
    unassigned codepoint is not printable.
    """
    if codepoint > MAX_RUNE:
        return False
    return chr(codepoint).isprintable()


def x_escape(byte: int) -> bytes:
    return bytes((0x5C, 0x78, LOWER_HEX[byte >> 4], LOWER_HEX[byte & 0xF]))


def u_escape(codepoint: int) -> bytes:
    if codepoint < 0x10000:
        return b"\\u%04x" % codepoint
    return b"\\U%08x" % codepoint
