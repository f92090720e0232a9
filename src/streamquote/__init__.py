from streamquote.converter import AsyncConverter, Converter
from streamquote.error import (
    ConverterBusyError,
    SinkWriteError,
    SourceReadError,
    TranscodeError,
    UnsupportedStreamError,
)
from streamquote.escape import escape_rune, quote
from streamquote.options import ConverterOptions

__all__ = [
    "AsyncConverter",
    "Converter",
    "ConverterBusyError",
    "ConverterOptions",
    "SinkWriteError",
    "SourceReadError",
    "TranscodeError",
    "UnsupportedStreamError",
    "escape_rune",
    "quote",
]
