from typing import Dict

BUFFER_SIZE = 100 * 1024

# longest UTF-8 encoding of a single codepoint
UTF_MAX = 4

MAX_RUNE = 0x10FFFF
RUNE_ERROR = 0xFFFD

LOWER_HEX = b"0123456789abcdef"

MNEMONIC_ESCAPES: Dict[int, bytes] = {
    0x07: b"\\a",
    0x08: b"\\b",
    0x0C: b"\\f",
    0x0A: b"\\n",
    0x0D: b"\\r",
    0x09: b"\\t",
    0x0B: b"\\v",
}

SELF_ESCAPED = frozenset({ord('"'), ord("\\")})

DEL = 0x7F
